from typing import Annotated, List, Union

from msgspec import Meta

from ._base import Schema

__all__ = ("Domain", "RangeDomain", "CodedValue", "CodedValueDomain", "InheritedDomain")


def __dir__():
    return __all__


class DomainBase(Schema, tag_field="type"):
    """Base class for attribute domains, tagged by ``type``."""


class RangeDomain(DomainBase, tag="range", kw_only=True):
    """Restricts a numeric field to ``range = [min, max]``."""

    name: str
    range: Annotated[List[float], Meta(min_length=2, max_length=2)]

    def __post_init__(self):
        if self.range[0] > self.range[1]:
            raise ValueError(f"Invalid range {self.range!r}, min must be <= max")


class CodedValue(Schema, kw_only=True):
    name: str
    code: Union[int, float, str]


class CodedValueDomain(DomainBase, tag="codedValue", kw_only=True):
    """Restricts a field to a closed set of named codes."""

    name: str
    coded_values: List[CodedValue]


class InheritedDomain(DomainBase, tag="inherited", kw_only=True):
    """Uses the domain defined by the parent layer or table."""

    name: str


Domain = Union[RangeDomain, CodedValueDomain, InheritedDomain]
