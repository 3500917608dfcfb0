from .errors import (
    SchemaError,
    UnknownVariant,
    MissingField,
    InvalidEnumValue,
    DimensionalityMismatch,
    GeometryTypeMismatch,
    SpatialReferenceMismatch,
)
from .core import (
    GeometryType,
    Units,
    FieldType,
    SpatialRelationship,
    TimeUnits,
    Dimension,
    SpatialReference,
    Extent,
    PagingParams,
    Color,
)
from .feature import Field, Feature, FeatureSet
from .symbol import Symbol
from .renderer import Renderer, AnyRenderer
from .layer import BaseMapLayer, OperationalLayer
from .webmap import Webmap

from . import geometry
from . import domain
from . import symbol
from . import popup
from . import labeling
from . import renderer
from . import layer_definition
from . import layer
from . import presentation
from . import application
from . import webmap
from . import json
from . import inspect
from . import validate
from ._version import __version__
