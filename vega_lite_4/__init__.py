"""
Python binding of the Vega-Lite v4 data model.

Fields defaulting to `UNSET` are tri-state: `UNSET` omits the key, `None` writes `null` and any other value is
encoded. Other optional fields default to `None` and are omitted when `None`.
"""

from importlib.metadata import PackageNotFoundError, version

from . import removable
from .builder import Builder, builder
from .chart import Chart
from .config import SCHEMA_URL, SCHEMA_VERSION, EmbedConfig, EmbedOptions, load_config
from .data import inline_data, named_data, url_data
from .decoding import decode, from_dict, from_json
from .deprecated import Vegalite, VegaliteBuilder

# Generated dataclasses and type aliases
from .generated_types import (
    Aggregate,
    AggregatedFieldDef,
    AggregateOp,
    AggregateTransform,
    Align,
    AnyMark,
    ArgmaxDef,
    ArgminDef,
    AutoSizeParams,
    AutosizeType,
    Axis,
    AxisOrient,
    BindCheckbox,
    Binding,
    BindRadioSelect,
    BindRange,
    BinnedLiteral,
    BinParams,
    BinTransform,
    BrushConfig,
    CalculateTransform,
    CompositeMarkConfig,
    CompositionConfig,
    ConditionalDef,
    Config,
    Cursor,
    Data,
    DataFormat,
    DataFormatType,
    DateTime,
    DensityTransform,
    Encoding,
    EncodingSortField,
    ErrorExtent,
    FacetDef,
    FacetMapping,
    Field,
    FieldDefWithoutScale,
    FieldEqualPredicate,
    FieldGTEPredicate,
    FieldGTPredicate,
    FieldLTEPredicate,
    FieldLTPredicate,
    FieldOneOfPredicate,
    FieldRangePredicate,
    FieldValidPredicate,
    FilterTransform,
    FlattenTransform,
    FoldTransform,
    FontWeight,
    FormatType,
    Gradient,
    GradientStop,
    GraticuleGenerator,
    GraticuleParams,
    Header,
    HeaderOrient,
    ImputeMethod,
    ImputeParams,
    ImputeSequence,
    ImputeTransform,
    InlineData,
    InlineDataset,
    InputBinding,
    Interpolate,
    IntervalSelection,
    JoinAggregateFieldDef,
    JoinAggregateTransform,
    LabelOverlap,
    LatLongDef,
    LayoutAlign,
    Legend,
    LegendOrient,
    LegendType,
    LinearGradient,
    LoessTransform,
    LogicalAnd,
    LogicalNot,
    LogicalOr,
    LookupData,
    LookupSelection,
    LookupTransform,
    Mark,
    MarkConfig,
    MarkDef,
    MarkPropDef,
    MultiSelection,
    NamedData,
    NonArgAggregateOp,
    OrderDef,
    Orientation,
    OverlayMarkDef,
    Padding,
    PaddingSides,
    PivotTransform,
    PositionDef,
    Predicate,
    PredicateComposition,
    Projection,
    ProjectionType,
    QuantileTransform,
    RadialGradient,
    RangeConfig,
    RegressionMethod,
    RegressionTransform,
    RepeatMapping,
    RepeatName,
    RepeatRef,
    Resolve,
    ResolveMapping,
    ResolveMode,
    RowColBool,
    RowColLayoutAlign,
    RowColNumber,
    SampleTransform,
    Scale,
    ScaleConfig,
    ScaleInterpolate,
    ScaleInterpolateParams,
    ScaleType,
    SchemeParams,
    SecondaryDef,
    SelectionAnd,
    SelectionComposition,
    SelectionConfig,
    SelectionDef,
    SelectionDomain,
    SelectionNot,
    SelectionOr,
    SelectionPredicate,
    SelectionResolution,
    SequenceGenerator,
    SequenceParams,
    SingleDefUnitChannel,
    SingleSelection,
    Sort,
    SortByChannel,
    SortByChannelDesc,
    SortByEncoding,
    SortField,
    SortOrder,
    Spec,
    SphereGenerator,
    StackOffset,
    StackTransform,
    StandardType,
    Step,
    StringFieldDef,
    StrokeCap,
    StrokeJoin,
    Text,
    TextBaseline,
    TextDef,
    TimeUnit,
    TimeUnitParams,
    TimeUnitTransform,
    TitleAnchor,
    TitleConfig,
    TitleFrame,
    TitleOrient,
    TitleParams,
    TooltipContent,
    Transform,
    Type,
    UrlData,
    VegaLite,
    ViewBackground,
    ViewConfig,
    WindowFieldDef,
    WindowOnlyOp,
    WindowTransform,
)
from .types import (
    BaseVegaLiteError,
    BuildError,
    DecodeError,
    EncodeError,
    VegaLiteTypeEncoder,
    to_dict,
    to_json,
)
from .unset_type import UNSET, _UnsetType

try:
    __version__ = version("vega-lite-4")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "Aggregate",
    "AggregatedFieldDef",
    "AggregateOp",
    "AggregateTransform",
    "Align",
    "AnyMark",
    "ArgmaxDef",
    "ArgminDef",
    "AutoSizeParams",
    "AutosizeType",
    "Axis",
    "AxisOrient",
    "BaseVegaLiteError",
    "BindCheckbox",
    "Binding",
    "BindRadioSelect",
    "BindRange",
    "BinnedLiteral",
    "BinParams",
    "BinTransform",
    "BrushConfig",
    "Builder",
    "builder",
    "BuildError",
    "CalculateTransform",
    "Chart",
    "CompositeMarkConfig",
    "CompositionConfig",
    "ConditionalDef",
    "Config",
    "Cursor",
    "Data",
    "DataFormat",
    "DataFormatType",
    "DateTime",
    "decode",
    "DecodeError",
    "DensityTransform",
    "EmbedConfig",
    "EmbedOptions",
    "EncodeError",
    "Encoding",
    "EncodingSortField",
    "ErrorExtent",
    "FacetDef",
    "FacetMapping",
    "Field",
    "FieldDefWithoutScale",
    "FieldEqualPredicate",
    "FieldGTEPredicate",
    "FieldGTPredicate",
    "FieldLTEPredicate",
    "FieldLTPredicate",
    "FieldOneOfPredicate",
    "FieldRangePredicate",
    "FieldValidPredicate",
    "FilterTransform",
    "FlattenTransform",
    "FoldTransform",
    "FontWeight",
    "FormatType",
    "from_dict",
    "from_json",
    "Gradient",
    "GradientStop",
    "GraticuleGenerator",
    "GraticuleParams",
    "Header",
    "HeaderOrient",
    "ImputeMethod",
    "ImputeParams",
    "ImputeSequence",
    "ImputeTransform",
    "InlineData",
    "InlineDataset",
    "inline_data",
    "InputBinding",
    "Interpolate",
    "IntervalSelection",
    "JoinAggregateFieldDef",
    "JoinAggregateTransform",
    "LabelOverlap",
    "LatLongDef",
    "LayoutAlign",
    "Legend",
    "LegendOrient",
    "LegendType",
    "LinearGradient",
    "load_config",
    "LoessTransform",
    "LogicalAnd",
    "LogicalNot",
    "LogicalOr",
    "LookupData",
    "LookupSelection",
    "LookupTransform",
    "Mark",
    "MarkConfig",
    "MarkDef",
    "MarkPropDef",
    "MultiSelection",
    "NamedData",
    "named_data",
    "NonArgAggregateOp",
    "OrderDef",
    "Orientation",
    "OverlayMarkDef",
    "Padding",
    "PaddingSides",
    "PivotTransform",
    "PositionDef",
    "Predicate",
    "PredicateComposition",
    "Projection",
    "ProjectionType",
    "QuantileTransform",
    "RadialGradient",
    "RangeConfig",
    "RegressionMethod",
    "RegressionTransform",
    "removable",
    "RepeatMapping",
    "RepeatName",
    "RepeatRef",
    "Resolve",
    "ResolveMapping",
    "ResolveMode",
    "RowColBool",
    "RowColLayoutAlign",
    "RowColNumber",
    "SampleTransform",
    "Scale",
    "ScaleConfig",
    "ScaleInterpolate",
    "ScaleInterpolateParams",
    "ScaleType",
    "SCHEMA_URL",
    "SCHEMA_VERSION",
    "SchemeParams",
    "SecondaryDef",
    "SelectionAnd",
    "SelectionComposition",
    "SelectionConfig",
    "SelectionDef",
    "SelectionDomain",
    "SelectionNot",
    "SelectionOr",
    "SelectionPredicate",
    "SelectionResolution",
    "SequenceGenerator",
    "SequenceParams",
    "SingleDefUnitChannel",
    "SingleSelection",
    "Sort",
    "SortByChannel",
    "SortByChannelDesc",
    "SortByEncoding",
    "SortField",
    "SortOrder",
    "Spec",
    "SphereGenerator",
    "StackOffset",
    "StackTransform",
    "StandardType",
    "Step",
    "StringFieldDef",
    "StrokeCap",
    "StrokeJoin",
    "Text",
    "TextBaseline",
    "TextDef",
    "TimeUnit",
    "TimeUnitParams",
    "TimeUnitTransform",
    "TitleAnchor",
    "TitleConfig",
    "TitleFrame",
    "TitleOrient",
    "TitleParams",
    "TooltipContent",
    "to_dict",
    "to_json",
    "Transform",
    "Type",
    "UNSET",
    "UrlData",
    "url_data",
    "VegaLite",
    "Vegalite",
    "VegaliteBuilder",
    "VegaLiteTypeEncoder",
    "ViewBackground",
    "ViewConfig",
    "WindowFieldDef",
    "WindowOnlyOp",
    "WindowTransform",
    "_UnsetType",
]
