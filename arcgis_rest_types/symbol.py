"""Symbols used to draw features, graphics and labels."""
import enum
from typing import Literal, Optional, Union

from ._base import Schema
from .core import Color

__all__ = (
    "Symbol",
    "SymbolBase",
    "SimpleMarkerSymbol",
    "SimpleLineSymbol",
    "SimpleFillSymbol",
    "PictureMarkerSymbol",
    "PictureFillSymbol",
    "TextSymbol",
    "Font",
    "Outline",
    "SimpleMarkerSymbolStyle",
    "SimpleLineSymbolStyle",
    "SimpleFillSymbolStyle",
    "Color",
)


def __dir__():
    return __all__


class SimpleMarkerSymbolStyle(str, enum.Enum):
    CIRCLE = "esriSMSCircle"
    CROSS = "esriSMSCross"
    DIAMOND = "esriSMSDiamond"
    SQUARE = "esriSMSSquare"
    X = "esriSMSX"
    TRIANGLE = "esriSMSTriangle"


class SimpleLineSymbolStyle(str, enum.Enum):
    DASH = "esriSLSDash"
    DASH_DOT = "esriSLSDashDot"
    DASH_DOT_DOT = "esriSLSDashDotDot"
    DOT = "esriSLSDot"
    NULL = "esriSLSNull"
    SOLID = "esriSLSSolid"


class SimpleFillSymbolStyle(str, enum.Enum):
    BACKWARD_DIAGONAL = "esriSFSBackwardDiagonal"
    CROSS = "esriSFSCross"
    DIAGONAL_CROSS = "esriSFSDiagonalCross"
    FORWARD_DIAGONAL = "esriSFSForwardDiagonal"
    HORIZONTAL = "esriSFSHorizontal"
    NULL = "esriSFSNull"
    SOLID = "esriSFSSolid"
    VERTICAL = "esriSFSVertical"


class SymbolBase(Schema, tag_field="type"):
    """Base class for symbols, tagged by ``type``."""


class Font(Schema, kw_only=True):
    family: Optional[str] = None
    size: Optional[float] = None
    style: Optional[Literal["italic", "normal", "oblique"]] = None
    weight: Optional[Literal["bold", "bolder", "lighter", "normal"]] = None
    decoration: Optional[Literal["line-through", "underline", "none"]] = None


class Outline(Schema, kw_only=True):
    """The outline of a simple marker symbol."""

    color: Optional[Color] = None
    width: Optional[float] = None


class SimpleLineSymbol(SymbolBase, tag="esriSLS", kw_only=True):
    style: Optional[SimpleLineSymbolStyle] = None
    color: Optional[Color] = None
    width: Optional[float] = None


class SimpleMarkerSymbol(SymbolBase, tag="esriSMS", kw_only=True):
    style: Optional[SimpleMarkerSymbolStyle] = None
    color: Optional[Color] = None
    size: Optional[float] = None
    angle: Optional[float] = None
    xoffset: Optional[float] = None
    yoffset: Optional[float] = None
    outline: Optional[Outline] = None


class SimpleFillSymbol(SymbolBase, tag="esriSFS", kw_only=True):
    style: Optional[SimpleFillSymbolStyle] = None
    color: Optional[Color] = None
    outline: Optional[SimpleLineSymbol] = None


class _PictureSymbol(SymbolBase, kw_only=True):
    """Fields shared by picture marker and picture fill symbols.

    ``url`` is relative to the layer's ``images`` resource for static layers,
    and absolute for dynamic layers. ``image_data`` holds the same image
    base64-encoded.
    """

    url: Optional[str] = None
    image_data: Optional[str] = None
    content_type: Optional[str] = None
    width: Optional[float] = None
    height: Optional[float] = None
    angle: Optional[float] = None
    xoffset: Optional[float] = None
    yoffset: Optional[float] = None


class PictureMarkerSymbol(_PictureSymbol, tag="esriPMS", kw_only=True):
    pass


class PictureFillSymbol(_PictureSymbol, tag="esriPFS", kw_only=True):
    outline: Optional[SimpleLineSymbol] = None
    xscale: Optional[float] = None
    yscale: Optional[float] = None


class TextSymbol(SymbolBase, tag="esriTS", kw_only=True):
    """A symbol for drawing text.

    ``text`` is only set for client-side graphics. Label classes take their
    text from the label expression instead.
    """

    color: Optional[Color] = None
    background_color: Optional[Color] = None
    border_line_size: Optional[float] = None
    border_line_color: Optional[Color] = None
    halo_size: Optional[float] = None
    halo_color: Optional[Color] = None
    vertical_alignment: Optional[Literal["baseline", "top", "middle", "bottom"]] = None
    horizontal_alignment: Optional[Literal["left", "right", "center", "justify"]] = None
    right_to_left: Optional[bool] = None
    angle: Optional[float] = None
    xoffset: Optional[float] = None
    yoffset: Optional[float] = None
    kerning: Optional[bool] = None
    font: Optional[Font] = None
    text: Optional[str] = None


Symbol = Union[
    SimpleMarkerSymbol,
    SimpleLineSymbol,
    SimpleFillSymbol,
    PictureMarkerSymbol,
    PictureFillSymbol,
    TextSymbol,
]
