# Vega-Lite v4.0.2 data model.
#   Based on the datamodel-codegen output of generate_schema_types.py; the merged channel definitions, view specs
#   and union order are maintained by hand.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from .config import SCHEMA_URL
from .unset_type import UNSET, _UnsetType

AggregateOp = Literal[
    "argmax",
    "argmin",
    "average",
    "count",
    "distinct",
    "max",
    "mean",
    "median",
    "min",
    "missing",
    "q1",
    "q3",
    "ci0",
    "ci1",
    "stderr",
    "stdev",
    "stdevp",
    "sum",
    "valid",
    "values",
    "variance",
    "variancep",
]


Align = Literal["left", "center", "right"]


AutosizeType = Literal["pad", "fit", "fit-x", "fit-y", "none"]


AxisOrient = Literal["top", "bottom", "left", "right"]


BinnedLiteral = Literal["binned"]


Cursor = Literal[
    "auto",
    "default",
    "none",
    "context-menu",
    "help",
    "pointer",
    "progress",
    "wait",
    "cell",
    "crosshair",
    "text",
    "vertical-text",
    "alias",
    "copy",
    "move",
    "no-drop",
    "not-allowed",
    "e-resize",
    "n-resize",
    "ne-resize",
    "nw-resize",
    "s-resize",
    "se-resize",
    "sw-resize",
    "w-resize",
    "ew-resize",
    "ns-resize",
    "nesw-resize",
    "nwse-resize",
    "col-resize",
    "row-resize",
    "all-scroll",
    "zoom-in",
    "zoom-out",
    "grab",
    "grabbing",
]


DataFormatType = Literal["csv", "tsv", "dsv", "json", "topojson"]


ErrorExtent = Literal["ci", "iqr", "stderr", "stdev", "min-max"]


FontWeight = Literal["normal", "bold", "lighter", "bolder", 100, 200, 300, 400, 500, 600, 700, 800, 900]


FormatType = Literal["number", "time"]


HeaderOrient = Literal["top", "bottom", "left", "right"]


ImputeMethod = Literal["value", "median", "max", "min", "mean"]


Interpolate = Literal[
    "linear",
    "linear-closed",
    "step",
    "step-before",
    "step-after",
    "basis",
    "basis-open",
    "basis-closed",
    "cardinal",
    "cardinal-open",
    "cardinal-closed",
    "bundle",
    "monotone",
]


LabelOverlap = Literal["parity", "greedy"]


LayoutAlign = Literal["all", "each", "none"]


LegendOrient = Literal[
    "none", "left", "right", "top", "bottom", "top-left", "top-right", "bottom-left", "bottom-right"
]


LegendType = Literal["symbol", "gradient"]


Mark = Literal[
    "area",
    "bar",
    "line",
    "trail",
    "point",
    "text",
    "tick",
    "rect",
    "rule",
    "circle",
    "square",
    "geoshape",
    "boxplot",
    "errorband",
    "errorbar",
]
"""
All types of primitive and composite marks.
"""


NonArgAggregateOp = Literal[
    "average",
    "count",
    "distinct",
    "max",
    "mean",
    "median",
    "min",
    "missing",
    "q1",
    "q3",
    "ci0",
    "ci1",
    "stderr",
    "stdev",
    "stdevp",
    "sum",
    "valid",
    "values",
    "variance",
    "variancep",
]


Orientation = Literal["horizontal", "vertical"]


ProjectionType = Literal[
    "albers",
    "albersUsa",
    "azimuthalEqualArea",
    "azimuthalEquidistant",
    "conicConformal",
    "conicEqualArea",
    "conicEquidistant",
    "equirectangular",
    "gnomonic",
    "identity",
    "mercator",
    "naturalEarth1",
    "orthographic",
    "stereographic",
    "transverseMercator",
]


RegressionMethod = Literal["linear", "log", "exp", "pow", "quad", "poly"]


RepeatName = Literal["row", "column", "repeat"]


ResolveMode = Literal["independent", "shared"]


ScaleInterpolate = Literal["rgb", "lab", "hcl", "hsl", "hsl-long", "hcl-long", "cubehelix", "cubehelix-long"]


ScaleType = Literal[
    "linear",
    "log",
    "pow",
    "sqrt",
    "symlog",
    "identity",
    "sequential",
    "time",
    "utc",
    "quantile",
    "quantize",
    "threshold",
    "bin-ordinal",
    "ordinal",
    "point",
    "band",
]


SelectionResolution = Literal["global", "union", "intersect"]


SingleDefUnitChannel = Literal[
    "x",
    "y",
    "x2",
    "y2",
    "longitude",
    "latitude",
    "longitude2",
    "latitude2",
    "color",
    "fill",
    "stroke",
    "opacity",
    "fillOpacity",
    "strokeOpacity",
    "strokeWidth",
    "size",
    "shape",
    "key",
    "text",
    "tooltip",
    "href",
]


SortByChannel = Literal[
    "x",
    "y",
    "color",
    "fill",
    "stroke",
    "strokeWidth",
    "size",
    "shape",
    "fillOpacity",
    "strokeOpacity",
    "opacity",
    "text",
]


SortByChannelDesc = Literal[
    "-x",
    "-y",
    "-color",
    "-fill",
    "-stroke",
    "-strokeWidth",
    "-size",
    "-shape",
    "-fillOpacity",
    "-strokeOpacity",
    "-opacity",
    "-text",
]


SortOrder = Literal["ascending", "descending"]


StackOffset = Literal["zero", "center", "normalize"]


StandardType = Literal["quantitative", "ordinal", "temporal", "nominal"]
"""
Data type of a field when it is not a geographic shape.
"""


StrokeCap = Literal["butt", "round", "square"]


StrokeJoin = Literal["miter", "round", "bevel"]


TextBaseline = Literal["alphabetic", "top", "middle", "bottom", "line-top", "line-bottom"]


TimeUnit = Literal[
    "year",
    "quarter",
    "month",
    "day",
    "date",
    "hours",
    "minutes",
    "seconds",
    "milliseconds",
    "yearquarter",
    "yearquartermonth",
    "yearmonth",
    "yearmonthdate",
    "yearmonthdatehours",
    "yearmonthdatehoursminutes",
    "yearmonthdatehoursminutesseconds",
    "quartermonth",
    "monthdate",
    "monthdatehours",
    "hoursminutes",
    "hoursminutesseconds",
    "minutesseconds",
    "secondsmilliseconds",
    "utcyear",
    "utcquarter",
    "utcmonth",
    "utcday",
    "utcdate",
    "utchours",
    "utcminutes",
    "utcseconds",
    "utcmilliseconds",
    "utcyearquarter",
    "utcyearquartermonth",
    "utcyearmonth",
    "utcyearmonthdate",
    "utcyearmonthdatehours",
    "utcyearmonthdatehoursminutes",
    "utcyearmonthdatehoursminutesseconds",
    "utcquartermonth",
    "utcmonthdate",
    "utcmonthdatehours",
    "utchoursminutes",
    "utchoursminutesseconds",
    "utcminutesseconds",
    "utcsecondsmilliseconds",
]


TitleAnchor = Literal["start", "middle", "end"]


TitleFrame = Literal["bounds", "group"]


TitleOrient = Literal["none", "left", "right", "top", "bottom"]


Type = Literal["quantitative", "ordinal", "temporal", "nominal", "geojson"]
"""
Data type of a field, including `geojson` for geographic shapes.
"""


WindowOnlyOp = Literal[
    "row_number", "rank", "dense_rank", "percent_rank", "cume_dist", "ntile", "lag", "lead", "first_value", "last_value", "nth_value"
]


@dataclass(kw_only=True)
class AggregateTransform:
    aggregate: list[AggregatedFieldDef]
    """
    Array of objects that define fields to aggregate.
    """
    groupby: list[str] | None = None
    """
    The data fields to group by. If not specified, a single group containing all data objects will be used.
    """


@dataclass(kw_only=True)
class AggregatedFieldDef:
    as_: str = field(metadata={"alias": "as"})
    op: AggregateOp
    field: str | None = None
    """
    The data field for which to compute aggregate function. This is required for all aggregation operations except
    `"count"`.
    """


@dataclass(kw_only=True)
class ArgmaxDef:
    argmax: str


@dataclass(kw_only=True)
class ArgminDef:
    argmin: str


@dataclass(kw_only=True)
class AutoSizeParams:
    contains: Literal["content", "padding"] | None = None
    resize: bool | None = None
    type: AutosizeType | None = None


@dataclass(kw_only=True)
class Axis:
    bandPosition: float | None = None
    domain: bool | None = None
    domainColor: str | None | _UnsetType = UNSET
    domainDash: list[float] | None = None
    domainOpacity: float | None = None
    domainWidth: float | None = None
    format: str | None = None
    formatType: FormatType | None = None
    grid: bool | None = None
    gridColor: str | None | _UnsetType = UNSET
    gridDash: list[float] | None = None
    gridOpacity: float | None = None
    gridWidth: float | None = None
    labelAlign: Align | None = None
    labelAngle: float | None = None
    labelBaseline: TextBaseline | None = None
    labelBound: bool | float | None = None
    labelColor: str | None | _UnsetType = UNSET
    labelExpr: str | None = None
    labelFlush: bool | float | None = None
    labelFlushOffset: float | None = None
    labelFont: str | None = None
    labelFontSize: float | None = None
    labelFontStyle: str | None = None
    labelFontWeight: FontWeight | None = None
    labelLimit: float | None = None
    labelOpacity: float | None = None
    labelOverlap: bool | LabelOverlap | None = None
    labelPadding: float | None = None
    labelSeparation: float | None = None
    labels: bool | None = None
    maxExtent: float | None = None
    minExtent: float | None = None
    offset: float | None = None
    orient: AxisOrient | None = None
    position: float | None = None
    tickBand: Literal["center", "extent"] | None = None
    tickColor: str | None | _UnsetType = UNSET
    tickCount: float | None = None
    tickDash: list[float] | None = None
    tickExtra: bool | None = None
    tickMinStep: float | None = None
    tickOffset: float | None = None
    tickOpacity: float | None = None
    tickRound: bool | None = None
    tickSize: float | None = None
    tickWidth: float | None = None
    ticks: bool | None = None
    title: Text | None | _UnsetType = UNSET
    """
    A title for the field. If `null`, the title will be removed.
    """
    titleAlign: Align | None = None
    titleAnchor: TitleAnchor | None = None
    titleAngle: float | None = None
    titleBaseline: TextBaseline | None = None
    titleColor: str | None | _UnsetType = UNSET
    titleFont: str | None = None
    titleFontSize: float | None = None
    titleFontStyle: str | None = None
    titleFontWeight: FontWeight | None = None
    titleLimit: float | None = None
    titleOpacity: float | None = None
    titlePadding: float | None = None
    titleX: float | None = None
    titleY: float | None = None
    values: list[float | str | bool | DateTime] | None = None
    """
    Explicitly set the visible axis tick values.
    """
    zindex: float | None = None


@dataclass(kw_only=True)
class BinParams:
    """
    Binning properties or boolean flag for determining whether to bin data or not.
    """

    anchor: float | None = None
    base: float | None = None
    binned: bool | None = None
    divide: list[float] | None = None
    extent: list[float] | None = None
    maxbins: float | None = None
    minstep: float | None = None
    nice: bool | None = None
    step: float | None = None
    steps: list[float] | None = None


@dataclass(kw_only=True)
class BinTransform:
    as_: str | list[str] = field(metadata={"alias": "as"})
    bin: Literal[True] | BinParams
    """
    An object indicating bin properties, or simply `true` for using default bin parameters.
    """
    field: str


@dataclass(kw_only=True)
class BindCheckbox:
    input: Literal["checkbox"] = "checkbox"
    debounce: float | None = None
    element: str | None = None
    name: str | None = None
    type: str | None = None


@dataclass(kw_only=True)
class BindRadioSelect:
    input: Literal["radio", "select"]
    options: list[Any]
    debounce: float | None = None
    element: str | None = None
    name: str | None = None
    type: str | None = None


@dataclass(kw_only=True)
class BindRange:
    input: Literal["range"] = "range"
    debounce: float | None = None
    element: str | None = None
    max: float | None = None
    min: float | None = None
    name: str | None = None
    step: float | None = None
    type: str | None = None


@dataclass(kw_only=True)
class BrushConfig:
    cursor: Cursor | None = None
    fill: str | None = None
    fillOpacity: float | None = None
    stroke: str | None = None
    strokeDash: list[float] | None = None
    strokeDashOffset: float | None = None
    strokeOpacity: float | None = None
    strokeWidth: float | None = None


@dataclass(kw_only=True)
class CalculateTransform:
    as_: str = field(metadata={"alias": "as"})
    calculate: str
    """
    A [expression](https://vega.github.io/vega-lite/docs/types.html#expression) string. Use the variable `datum` to
    refer to the current data object.
    """


@dataclass(kw_only=True)
class CompositeMarkConfig:
    """
    Configuration for the `boxplot`, `errorbar` and `errorband` composite marks.
    """

    band: bool | OverlayMarkDef | None = None
    borders: bool | OverlayMarkDef | None = None
    box: bool | OverlayMarkDef | None = None
    extent: float | ErrorExtent | None = None
    interpolate: Interpolate | None = None
    median: bool | OverlayMarkDef | None = None
    outliers: bool | OverlayMarkDef | None = None
    rule: bool | OverlayMarkDef | None = None
    size: float | None = None
    tension: float | None = None
    ticks: bool | OverlayMarkDef | None = None


@dataclass(kw_only=True)
class CompositionConfig:
    columns: float | None = None
    spacing: float | None = None


@dataclass(kw_only=True)
class ConditionalDef:
    """
    A conditional field or value definition, applied when `test` or `selection` holds.
    """

    aggregate: Aggregate | None = None
    bin: bool | BinParams | None = None
    empty: bool | None = None
    field: Field | None = None
    format: str | None = None
    formatType: FormatType | None = None
    legend: Legend | None | _UnsetType = UNSET
    scale: Scale | None | _UnsetType = UNSET
    selection: SelectionComposition | None = None
    sort: Sort | None | _UnsetType = UNSET
    test: PredicateComposition | None = None
    timeUnit: TimeUnit | TimeUnitParams | None = None
    title: Text | None | _UnsetType = UNSET
    type: Type | None = None
    value: float | str | bool | Gradient | list[float] | None | _UnsetType = UNSET


@dataclass(kw_only=True)
class Config:
    area: MarkConfig | None = None
    autosize: AutosizeType | AutoSizeParams | None = None
    axis: Axis | None = None
    axisBand: Axis | None = None
    axisBottom: Axis | None = None
    axisLeft: Axis | None = None
    axisRight: Axis | None = None
    axisTop: Axis | None = None
    axisX: Axis | None = None
    axisY: Axis | None = None
    background: str | None = None
    bar: MarkConfig | None = None
    boxplot: CompositeMarkConfig | None = None
    circle: MarkConfig | None = None
    concat: CompositionConfig | None = None
    countTitle: str | None = None
    errorband: CompositeMarkConfig | None = None
    errorbar: CompositeMarkConfig | None = None
    facet: CompositionConfig | None = None
    fieldTitle: Literal["verbal", "functional", "plain"] | None = None
    geoshape: MarkConfig | None = None
    header: Header | None = None
    headerColumn: Header | None = None
    headerFacet: Header | None = None
    headerRow: Header | None = None
    invalidValues: Literal["filter"] | None | _UnsetType = UNSET
    legend: Legend | None = None
    line: MarkConfig | None = None
    lineBreak: str | None = None
    mark: MarkConfig | None = None
    numberFormat: str | None = None
    padding: Padding | None = None
    point: MarkConfig | None = None
    projection: Projection | None = None
    range: RangeConfig | None = None
    rect: MarkConfig | None = None
    rule: MarkConfig | None = None
    scale: ScaleConfig | None = None
    selection: SelectionConfig | None = None
    square: MarkConfig | None = None
    style: dict[str, MarkConfig] | None = None
    text: MarkConfig | None = None
    tick: MarkConfig | None = None
    timeFormat: str | None = None
    title: TitleConfig | None = None
    trail: MarkConfig | None = None
    view: ViewConfig | None = None


@dataclass(kw_only=True)
class DataFormat:
    """
    Format of the data: `csv`, `tsv` and `dsv` for delimited text, `json` and `topojson` for JSON documents.
    """

    delimiter: str | None = None
    feature: str | None = None
    """
    The name of the TopoJSON object set to convert to a GeoJSON feature collection.
    """
    mesh: str | None = None
    parse: dict[str, str | None] | None | _UnsetType = UNSET
    """
    If set to `null`, disable type inference based on the spec and only use type inference based on the data.
    """
    property: str | None = None
    type: DataFormatType | None = None


@dataclass(kw_only=True)
class DateTime:
    """
    Object for defining datetime in Vega-Lite Filter.
    """

    date: float | None = None
    day: float | str | None = None
    hours: float | None = None
    milliseconds: float | None = None
    minutes: float | None = None
    month: float | str | None = None
    quarter: float | None = None
    seconds: float | None = None
    utc: bool | None = None
    year: float | None = None


@dataclass(kw_only=True)
class DensityTransform:
    density: str
    as_: list[str] | None = field(default=None, metadata={"alias": "as"})
    bandwidth: float | None = None
    counts: bool | None = None
    cumulative: bool | None = None
    extent: list[float] | None = None
    groupby: list[str] | None = None
    maxsteps: float | None = None
    minsteps: float | None = None
    steps: float | None = None


@dataclass(kw_only=True)
class Encoding:
    color: MarkPropDef | None = None
    """
    Color of the marks – either fill or stroke color based on the `filled` property of mark definition.
    """
    column: FacetDef | None = None
    detail: FieldDefWithoutScale | list[FieldDefWithoutScale] | None = None
    facet: FacetDef | None = None
    fill: MarkPropDef | None = None
    fillOpacity: MarkPropDef | None = None
    href: TextDef | None = None
    key: FieldDefWithoutScale | None = None
    latitude: LatLongDef | None = None
    latitude2: SecondaryDef | None = None
    longitude: LatLongDef | None = None
    longitude2: SecondaryDef | None = None
    opacity: MarkPropDef | None = None
    order: OrderDef | list[OrderDef] | None = None
    row: FacetDef | None = None
    shape: MarkPropDef | None = None
    size: MarkPropDef | None = None
    stroke: MarkPropDef | None = None
    strokeOpacity: MarkPropDef | None = None
    strokeWidth: MarkPropDef | None = None
    text: TextDef | None = None
    tooltip: TextDef | list[StringFieldDef] | None | _UnsetType = UNSET
    """
    The tooltip text to show upon mouse hover. `null` disables tooltips, including those enabled by the mark.
    """
    x: PositionDef | None = None
    x2: SecondaryDef | None = None
    xError: SecondaryDef | None = None
    xError2: SecondaryDef | None = None
    y: PositionDef | None = None
    y2: SecondaryDef | None = None
    yError: SecondaryDef | None = None
    yError2: SecondaryDef | None = None


@dataclass(kw_only=True)
class EncodingSortField:
    """
    A sort definition for sorting a discrete scale in an encoding field definition.
    """

    field: Field | None = None
    op: NonArgAggregateOp | None = None
    order: SortOrder | None | _UnsetType = UNSET


@dataclass(kw_only=True)
class FacetDef:
    """
    A field definition for the `row`, `column` and `facet` channels.
    """

    aggregate: Aggregate | None = None
    align: LayoutAlign | RowColLayoutAlign | None = None
    bin: bool | BinParams | None | _UnsetType = UNSET
    bounds: Literal["full", "flush"] | None = None
    center: bool | RowColBool | None = None
    columns: float | None = None
    field: Field | None = None
    header: Header | None | _UnsetType = UNSET
    sort: list[str | float | bool | DateTime] | SortOrder | EncodingSortField | None | _UnsetType = UNSET
    spacing: float | RowColNumber | None = None
    timeUnit: TimeUnit | TimeUnitParams | None = None
    title: Text | None | _UnsetType = UNSET
    type: StandardType | None = None


@dataclass(kw_only=True)
class FacetMapping:
    column: FacetDef | None = None
    row: FacetDef | None = None


@dataclass(kw_only=True)
class FieldDefWithoutScale:
    aggregate: Aggregate | None = None
    bin: bool | BinParams | BinnedLiteral | None | _UnsetType = UNSET
    field: Field | None = None
    timeUnit: TimeUnit | TimeUnitParams | None = None
    title: Text | None | _UnsetType = UNSET
    type: Type | None = None


@dataclass(kw_only=True)
class FieldEqualPredicate:
    equal: str | float | bool | DateTime
    field: str
    timeUnit: TimeUnit | TimeUnitParams | None = None


@dataclass(kw_only=True)
class FieldGTEPredicate:
    field: str
    gte: str | float | DateTime
    timeUnit: TimeUnit | TimeUnitParams | None = None


@dataclass(kw_only=True)
class FieldGTPredicate:
    field: str
    gt: str | float | DateTime
    timeUnit: TimeUnit | TimeUnitParams | None = None


@dataclass(kw_only=True)
class FieldLTEPredicate:
    field: str
    lte: str | float | DateTime
    timeUnit: TimeUnit | TimeUnitParams | None = None


@dataclass(kw_only=True)
class FieldLTPredicate:
    field: str
    lt: str | float | DateTime
    timeUnit: TimeUnit | TimeUnitParams | None = None


@dataclass(kw_only=True)
class FieldOneOfPredicate:
    field: str
    oneOf: list[str | float | bool | DateTime]
    timeUnit: TimeUnit | TimeUnitParams | None = None


@dataclass(kw_only=True)
class FieldRangePredicate:
    field: str
    range: list[float | DateTime | None]
    """
    An array of inclusive minimum and maximum values for a field value of a data item to be included in the
    filtered data. `null` leaves that side of the range open.
    """
    timeUnit: TimeUnit | TimeUnitParams | None = None


@dataclass(kw_only=True)
class FieldValidPredicate:
    field: str
    valid: bool
    timeUnit: TimeUnit | TimeUnitParams | None = None


@dataclass(kw_only=True)
class FilterTransform:
    filter: PredicateComposition
    """
    The `filter` property must be a predication definition, which can take one of the following forms:
    an expression string, a field predicate, a selection predicate, or a logical composition of those.
    """


@dataclass(kw_only=True)
class FlattenTransform:
    flatten: list[str]
    as_: list[str] | None = field(default=None, metadata={"alias": "as"})


@dataclass(kw_only=True)
class FoldTransform:
    fold: list[str]
    as_: list[str] | None = field(default=None, metadata={"alias": "as"})


@dataclass(kw_only=True)
class GradientStop:
    color: str
    offset: float


@dataclass(kw_only=True)
class GraticuleGenerator:
    graticule: Literal[True] | GraticuleParams
    name: str | None = None


@dataclass(kw_only=True)
class GraticuleParams:
    extent: list[list[float]] | None = None
    extentMajor: list[list[float]] | None = None
    extentMinor: list[list[float]] | None = None
    precision: float | None = None
    step: list[float] | None = None
    stepMajor: list[float] | None = None
    stepMinor: list[float] | None = None


@dataclass(kw_only=True)
class Header:
    """
    Headers of row / column channels for faceted plots.
    """

    format: str | None = None
    formatType: FormatType | None = None
    labelAlign: Align | None = None
    labelAnchor: TitleAnchor | None = None
    labelAngle: float | None = None
    labelColor: str | None = None
    labelExpr: str | None = None
    labelFont: str | None = None
    labelFontSize: float | None = None
    labelFontStyle: str | None = None
    labelLimit: float | None = None
    labelOrient: HeaderOrient | None = None
    labelPadding: float | None = None
    labels: bool | None = None
    title: Text | None | _UnsetType = UNSET
    titleAlign: Align | None = None
    titleAnchor: TitleAnchor | None = None
    titleAngle: float | None = None
    titleBaseline: TextBaseline | None = None
    titleColor: str | None = None
    titleFont: str | None = None
    titleFontSize: float | None = None
    titleFontStyle: str | None = None
    titleFontWeight: FontWeight | None = None
    titleLimit: float | None = None
    titleOrient: HeaderOrient | None = None
    titlePadding: float | None = None


@dataclass(kw_only=True)
class ImputeParams:
    frame: list[float | None] | None = None
    keyvals: list[Any] | ImputeSequence | None = None
    method: ImputeMethod | None = None
    value: Any | None = None


@dataclass(kw_only=True)
class ImputeSequence:
    stop: float
    start: float | None = None
    step: float | None = None


@dataclass(kw_only=True)
class ImputeTransform:
    impute: str
    key: str
    frame: list[float | None] | None = None
    groupby: list[str] | None = None
    keyvals: list[Any] | ImputeSequence | None = None
    method: ImputeMethod | None = None
    value: Any | None = None


@dataclass(kw_only=True)
class InlineData:
    values: InlineDataset
    """
    The full data set, included inline. This can be an array of objects or primitive values, an object, or a
    string. Arrays of primitive values are ingested as objects with a `data` property. Strings are parsed according
    to the specified format type.
    """
    format: DataFormat | None = None
    name: str | None = None


@dataclass(kw_only=True)
class InputBinding:
    input: str
    autocomplete: str | None = None
    debounce: float | None = None
    element: str | None = None
    name: str | None = None
    placeholder: str | None = None
    type: str | None = None


@dataclass(kw_only=True)
class IntervalSelection:
    type: Literal["interval"] = "interval"
    bind: Literal["scales"] | None = None
    clear: str | bool | None = None
    empty: Literal["all", "none"] | None = None
    encodings: list[SingleDefUnitChannel] | None = None
    fields: list[str] | None = None
    init: dict[str, list[Any]] | None = None
    mark: BrushConfig | None = None
    on: str | dict[str, Any] | None = None
    resolve: SelectionResolution | None = None
    translate: str | bool | None = None
    zoom: str | bool | None = None


@dataclass(kw_only=True)
class JoinAggregateFieldDef:
    as_: str = field(metadata={"alias": "as"})
    op: AggregateOp
    field: str | None = None


@dataclass(kw_only=True)
class JoinAggregateTransform:
    joinaggregate: list[JoinAggregateFieldDef]
    groupby: list[str] | None = None


@dataclass(kw_only=True)
class LatLongDef:
    aggregate: Aggregate | None = None
    bin: None = None
    field: Field | None = None
    timeUnit: TimeUnit | TimeUnitParams | None = None
    title: Text | None | _UnsetType = UNSET
    type: Literal["quantitative"] | None = None
    value: float | None = None


@dataclass(kw_only=True)
class Legend:
    """
    Properties of a legend or boolean flag for determining whether to show it.
    """

    clipHeight: float | None = None
    columnPadding: float | None = None
    columns: float | None = None
    cornerRadius: float | None = None
    direction: Orientation | None = None
    fillColor: str | None | _UnsetType = UNSET
    """
    Background fill color for the full legend.
    """
    format: str | None = None
    formatType: FormatType | None = None
    gradientLength: float | None = None
    gradientOpacity: float | None = None
    gradientStrokeColor: str | None | _UnsetType = UNSET
    gradientStrokeWidth: float | None = None
    gradientThickness: float | None = None
    gridAlign: LayoutAlign | None = None
    labelAlign: Align | None = None
    labelBaseline: TextBaseline | None = None
    labelColor: str | None | _UnsetType = UNSET
    labelExpr: str | None = None
    labelFont: str | None = None
    labelFontSize: float | None = None
    labelFontStyle: str | None = None
    labelFontWeight: FontWeight | None = None
    labelLimit: float | None = None
    labelOffset: float | None = None
    labelOpacity: float | None = None
    labelOverlap: bool | LabelOverlap | None = None
    labelPadding: float | None = None
    labelSeparation: float | None = None
    legendX: float | None = None
    legendY: float | None = None
    offset: float | None = None
    orient: LegendOrient | None = None
    padding: float | None = None
    rowPadding: float | None = None
    strokeColor: str | None | _UnsetType = UNSET
    symbolDash: list[float] | None = None
    symbolDashOffset: float | None = None
    symbolFillColor: str | None | _UnsetType = UNSET
    symbolOffset: float | None = None
    symbolOpacity: float | None = None
    symbolSize: float | None = None
    symbolStrokeColor: str | None | _UnsetType = UNSET
    symbolStrokeWidth: float | None = None
    symbolType: str | None = None
    tickCount: float | None = None
    tickMinStep: float | None = None
    title: Text | None | _UnsetType = UNSET
    titleAlign: Align | None = None
    titleAnchor: TitleAnchor | None = None
    titleBaseline: TextBaseline | None = None
    titleColor: str | None | _UnsetType = UNSET
    titleFont: str | None = None
    titleFontSize: float | None = None
    titleFontStyle: str | None = None
    titleFontWeight: FontWeight | None = None
    titleLimit: float | None = None
    titleOpacity: float | None = None
    titleOrient: Literal["left", "right", "top", "bottom"] | None = None
    titlePadding: float | None = None
    type: LegendType | None = None
    values: list[float | str | bool | DateTime] | None = None
    zindex: float | None = None


@dataclass(kw_only=True)
class LinearGradient:
    stops: list[GradientStop]
    gradient: Literal["linear"] = "linear"
    id: str | None = None
    x1: float | None = None
    x2: float | None = None
    y1: float | None = None
    y2: float | None = None


@dataclass(kw_only=True)
class LoessTransform:
    loess: str
    on: str
    as_: list[str] | None = field(default=None, metadata={"alias": "as"})
    bandwidth: float | None = None
    groupby: list[str] | None = None


@dataclass(kw_only=True)
class LogicalAnd:
    and_: list[PredicateComposition] = field(metadata={"alias": "and"})


@dataclass(kw_only=True)
class LogicalNot:
    not_: PredicateComposition = field(metadata={"alias": "not"})


@dataclass(kw_only=True)
class LogicalOr:
    or_: list[PredicateComposition] = field(metadata={"alias": "or"})


@dataclass(kw_only=True)
class LookupData:
    data: Data
    """
    Secondary data source to lookup in.
    """
    key: str
    """
    Key in data to lookup.
    """
    fields: list[str] | None = None
    """
    Fields in foreign data or selection to lookup. If not specified, the entire object is queried.
    """


@dataclass(kw_only=True)
class LookupSelection:
    selection: str
    fields: list[str] | None = None
    key: str | None = None


@dataclass(kw_only=True)
class LookupTransform:
    from_: LookupData | LookupSelection = field(metadata={"alias": "from"})
    lookup: str
    """
    Key in primary data source.
    """
    as_: str | list[str] | None = field(default=None, metadata={"alias": "as"})
    default: str | None = None


@dataclass(kw_only=True)
class MarkConfig:
    align: Align | None = None
    angle: float | None = None
    baseline: TextBaseline | None = None
    color: str | Gradient | None = None
    cornerRadius: float | None = None
    cursor: Cursor | None = None
    dx: float | None = None
    dy: float | None = None
    fill: str | Gradient | None | _UnsetType = UNSET
    fillOpacity: float | None = None
    filled: bool | None = None
    font: str | None = None
    fontSize: float | None = None
    fontStyle: str | None = None
    fontWeight: FontWeight | None = None
    height: float | None = None
    interpolate: Interpolate | None = None
    invalid: Literal["filter"] | None | _UnsetType = UNSET
    limit: float | None = None
    opacity: float | None = None
    orient: Orientation | None = None
    shape: str | None = None
    size: float | None = None
    stroke: str | Gradient | None | _UnsetType = UNSET
    strokeCap: StrokeCap | None = None
    strokeDash: list[float] | None = None
    strokeJoin: StrokeJoin | None = None
    strokeOpacity: float | None = None
    strokeWidth: float | None = None
    tension: float | None = None
    thickness: float | None = None
    tooltip: float | str | bool | TooltipContent | None | _UnsetType = UNSET
    width: float | None = None


@dataclass(kw_only=True)
class MarkDef:
    """
    A mark definition: the mark type plus properties of the primitive or composite mark.
    """

    type: Mark
    """
    The mark type. This could a primitive mark type (one of `"bar"`, `"circle"`, `"square"`, `"tick"`, `"line"`,
    `"area"`, `"point"`, `"geoshape"`, `"rule"`, and `"text"`) or a composite mark type (`"boxplot"`,
    `"errorband"`, `"errorbar"`).
    """
    align: Align | None = None
    angle: float | None = None
    band: bool | OverlayMarkDef | None = None
    baseline: TextBaseline | None = None
    binSpacing: float | None = None
    borders: bool | OverlayMarkDef | None = None
    box: bool | OverlayMarkDef | None = None
    clip: bool | None = None
    color: str | Gradient | None = None
    cornerRadius: float | None = None
    cursor: Cursor | None = None
    dx: float | None = None
    dy: float | None = None
    extent: float | ErrorExtent | None = None
    fill: str | Gradient | None | _UnsetType = UNSET
    fillOpacity: float | None = None
    filled: bool | None = None
    font: str | None = None
    fontSize: float | None = None
    fontStyle: str | None = None
    fontWeight: FontWeight | None = None
    height: float | None = None
    href: str | None = None
    interpolate: Interpolate | None = None
    invalid: Literal["filter"] | None | _UnsetType = UNSET
    limit: float | None = None
    line: bool | OverlayMarkDef | None = None
    median: bool | OverlayMarkDef | None = None
    opacity: float | None = None
    order: bool | None | _UnsetType = UNSET
    orient: Orientation | None = None
    outliers: bool | OverlayMarkDef | None = None
    point: bool | OverlayMarkDef | Literal["transparent"] | None = None
    radius: float | None = None
    rule: bool | OverlayMarkDef | None = None
    shape: str | None = None
    size: float | None = None
    stroke: str | Gradient | None | _UnsetType = UNSET
    strokeCap: StrokeCap | None = None
    strokeDash: list[float] | None = None
    strokeDashOffset: float | None = None
    strokeJoin: StrokeJoin | None = None
    strokeMiterLimit: float | None = None
    strokeOpacity: float | None = None
    strokeWidth: float | None = None
    style: str | list[str] | None = None
    tension: float | None = None
    text: str | None = None
    theta: float | None = None
    thickness: float | None = None
    ticks: bool | OverlayMarkDef | None = None
    timeUnitBand: float | None = None
    timeUnitBandPosition: float | None = None
    tooltip: float | str | bool | TooltipContent | None | _UnsetType = UNSET
    width: float | None = None
    x: float | Literal["width"] | None = None
    x2: float | Literal["width"] | None = None
    y: float | Literal["height"] | None = None
    y2: float | Literal["height"] | None = None


@dataclass(kw_only=True)
class MarkPropDef:
    """
    A field or value definition of a mark property channel (`color`, `fill`, `stroke`, `opacity`, `size`,
    `shape`, ...), with an optional condition.
    """

    aggregate: Aggregate | None = None
    bin: bool | BinParams | None | _UnsetType = UNSET
    condition: ConditionalDef | list[ConditionalDef] | None = None
    field: Field | None = None
    legend: Legend | None | _UnsetType = UNSET
    """
    An object defining properties of the legend. If `null`, the legend for the encoding channel will be removed.
    """
    scale: Scale | None | _UnsetType = UNSET
    """
    An object defining properties of the channel's scale. If `null`, the scale will be disabled and the data
    value will be directly encoded.
    """
    sort: Sort | None | _UnsetType = UNSET
    timeUnit: TimeUnit | TimeUnitParams | None = None
    title: Text | None | _UnsetType = UNSET
    type: Type | None = None
    value: float | str | bool | Gradient | list[float] | None | _UnsetType = UNSET


@dataclass(kw_only=True)
class MultiSelection:
    type: Literal["multi"] = "multi"
    bind: Literal["legend"] | None = None
    clear: str | bool | None = None
    empty: Literal["all", "none"] | None = None
    encodings: list[SingleDefUnitChannel] | None = None
    fields: list[str] | None = None
    init: list[dict[str, Any]] | dict[str, Any] | None = None
    nearest: bool | None = None
    on: str | dict[str, Any] | None = None
    resolve: SelectionResolution | None = None
    toggle: str | bool | None = None


@dataclass(kw_only=True)
class NamedData:
    name: str
    """
    Provide a placeholder name and bind data at runtime.
    """
    format: DataFormat | None = None


@dataclass(kw_only=True)
class OrderDef:
    aggregate: Aggregate | None = None
    bin: bool | BinParams | BinnedLiteral | None | _UnsetType = UNSET
    field: Field | None = None
    sort: SortOrder | None = None
    timeUnit: TimeUnit | TimeUnitParams | None = None
    title: Text | None | _UnsetType = UNSET
    type: StandardType | None = None
    value: float | None = None


@dataclass(kw_only=True)
class OverlayMarkDef:
    clip: bool | None = None
    color: str | Gradient | None = None
    fill: str | Gradient | None | _UnsetType = UNSET
    fillOpacity: float | None = None
    filled: bool | None = None
    opacity: float | None = None
    shape: str | None = None
    size: float | None = None
    stroke: str | Gradient | None | _UnsetType = UNSET
    strokeDash: list[float] | None = None
    strokeOpacity: float | None = None
    strokeWidth: float | None = None
    style: str | list[str] | None = None


@dataclass(kw_only=True)
class PaddingSides:
    bottom: float | None = None
    left: float | None = None
    right: float | None = None
    top: float | None = None


@dataclass(kw_only=True)
class PivotTransform:
    pivot: str
    value: str
    groupby: list[str] | None = None
    limit: float | None = None
    op: str | None = None


@dataclass(kw_only=True)
class PositionDef:
    """
    A field or value definition of the `x` and `y` position channels.
    """

    aggregate: Aggregate | None = None
    axis: Axis | None | _UnsetType = UNSET
    """
    An object defining properties of axis's gridlines, ticks and labels. If `null`, the axis for the encoding
    channel will be removed.
    """
    band: float | None = None
    bin: bool | BinParams | BinnedLiteral | None | _UnsetType = UNSET
    field: Field | None = None
    impute: ImputeParams | None | _UnsetType = UNSET
    scale: Scale | None | _UnsetType = UNSET
    sort: Sort | None | _UnsetType = UNSET
    """
    Sort order for the encoded field. If `null`, no sorting is applied.
    """
    stack: StackOffset | bool | None | _UnsetType = UNSET
    timeUnit: TimeUnit | TimeUnitParams | None = None
    title: Text | None | _UnsetType = UNSET
    type: StandardType | None = None
    value: float | Literal["width", "height"] | None = None


@dataclass(kw_only=True)
class Projection:
    center: list[float] | None = None
    clipAngle: float | None = None
    clipExtent: list[list[float]] | None = None
    coefficient: float | None = None
    distance: float | None = None
    extent: list[list[float]] | None = None
    fit: dict[str, Any] | list[Any] | None = None
    fraction: float | None = None
    lobes: float | None = None
    parallel: float | None = None
    parallels: list[float] | None = None
    precision: float | None = None
    radius: float | None = None
    ratio: float | None = None
    reflectX: bool | None = None
    reflectY: bool | None = None
    rotate: list[float] | None = None
    scale: float | None = None
    size: list[float] | None = None
    spacing: float | None = None
    tilt: float | None = None
    translate: list[float] | None = None
    type: ProjectionType | None = None


@dataclass(kw_only=True)
class QuantileTransform:
    quantile: str
    as_: list[str] | None = field(default=None, metadata={"alias": "as"})
    groupby: list[str] | None = None
    probs: list[float] | None = None
    step: float | None = None


@dataclass(kw_only=True)
class RadialGradient:
    stops: list[GradientStop]
    gradient: Literal["radial"] = "radial"
    id: str | None = None
    r1: float | None = None
    r2: float | None = None
    x1: float | None = None
    x2: float | None = None
    y1: float | None = None
    y2: float | None = None


@dataclass(kw_only=True)
class RangeConfig:
    category: list[str] | SchemeParams | None = None
    diverging: list[str] | SchemeParams | None = None
    heatmap: list[str] | SchemeParams | None = None
    ordinal: list[str] | SchemeParams | None = None
    ramp: list[str] | SchemeParams | None = None
    symbol: list[str] | None = None


@dataclass(kw_only=True)
class RegressionTransform:
    on: str
    regression: str
    as_: list[str] | None = field(default=None, metadata={"alias": "as"})
    extent: list[float] | None = None
    groupby: list[str] | None = None
    method: RegressionMethod | None = None
    order: float | None = None
    params: bool | None = None


@dataclass(kw_only=True)
class RepeatMapping:
    column: list[str] | None = None
    row: list[str] | None = None


@dataclass(kw_only=True)
class RepeatRef:
    """
    A reference to a repeated value.
    """

    repeat: RepeatName


@dataclass(kw_only=True)
class Resolve:
    """
    Defines how scales, axes, and legends from different specs should be combined. Resolve is a mapping from
    `scale`, `axis`, and `legend` to a mapping from channels to resolutions.
    """

    axis: ResolveMapping | None = None
    legend: ResolveMapping | None = None
    scale: ResolveMapping | None = None


@dataclass(kw_only=True)
class ResolveMapping:
    color: ResolveMode | None = None
    fill: ResolveMode | None = None
    fillOpacity: ResolveMode | None = None
    opacity: ResolveMode | None = None
    shape: ResolveMode | None = None
    size: ResolveMode | None = None
    stroke: ResolveMode | None = None
    strokeOpacity: ResolveMode | None = None
    strokeWidth: ResolveMode | None = None
    x: ResolveMode | None = None
    y: ResolveMode | None = None


@dataclass(kw_only=True)
class RowColBool:
    column: bool | None = None
    row: bool | None = None


@dataclass(kw_only=True)
class RowColLayoutAlign:
    column: LayoutAlign | None = None
    row: LayoutAlign | None = None


@dataclass(kw_only=True)
class RowColNumber:
    column: float | None = None
    row: float | None = None


@dataclass(kw_only=True)
class SampleTransform:
    sample: float
    """
    The maximum number of data objects to include in the sample.
    """


@dataclass(kw_only=True)
class Scale:
    align: float | None = None
    base: float | None = None
    bins: list[float] | None = None
    clamp: bool | None = None
    constant: float | None = None
    domain: list[float | str | bool | DateTime | None] | Literal["unaggregated"] | SelectionDomain | None = None
    """
    Customized domain values. For quantitative fields, `domain` can take the form of a two-element array with minimum
    and maximum values. For temporal fields, `domain` can be a two-element array minimum and maximum values, in the
    form of either timestamps or the DateTime definition objects. For ordinal and nominal fields, `domain` can be an
    array that lists valid input values.
    """
    domainMid: float | None = None
    exponent: float | None = None
    interpolate: ScaleInterpolate | ScaleInterpolateParams | None = None
    nice: bool | float | Literal["millisecond", "second", "minute", "hour", "day", "week", "month", "year"] | None = None
    padding: float | None = None
    paddingInner: float | None = None
    paddingOuter: float | None = None
    range: list[float | str | list[float]] | str | None = None
    """
    The range of the scale: an array of output values, or a string naming a range defined in the config (e.g.
    `"category"`, `"heatmap"`).
    """
    reverse: bool | None = None
    round: bool | None = None
    scheme: str | SchemeParams | None = None
    type: ScaleType | None = None
    zero: bool | None = None


@dataclass(kw_only=True)
class ScaleConfig:
    bandPaddingInner: float | None = None
    bandPaddingOuter: float | None = None
    barBandPaddingInner: float | None = None
    clamp: bool | None = None
    continuousPadding: float | None = None
    maxBandSize: float | None = None
    maxFontSize: float | None = None
    maxOpacity: float | None = None
    maxSize: float | None = None
    maxStrokeWidth: float | None = None
    minBandSize: float | None = None
    minFontSize: float | None = None
    minOpacity: float | None = None
    minSize: float | None = None
    minStrokeWidth: float | None = None
    pointPadding: float | None = None
    quantileCount: float | None = None
    quantizeCount: float | None = None
    rectBandPaddingInner: float | None = None
    round: bool | None = None
    useUnaggregatedDomain: bool | None = None


@dataclass(kw_only=True)
class ScaleInterpolateParams:
    type: Literal["rgb", "cubehelix", "cubehelix-long"]
    gamma: float | None = None


@dataclass(kw_only=True)
class SchemeParams:
    name: str
    count: float | None = None
    extent: list[float] | None = None


@dataclass(kw_only=True)
class SecondaryDef:
    """
    A field or value definition of a secondary channel (`x2`, `y2`, `xError`, `yError`, `latitude2`, ...) that
    shares a scale with its primary channel.
    """

    aggregate: Aggregate | None = None
    bin: None = None
    field: Field | None = None
    timeUnit: TimeUnit | TimeUnitParams | None = None
    title: Text | None | _UnsetType = UNSET
    value: float | Literal["width", "height"] | None = None


@dataclass(kw_only=True)
class SelectionAnd:
    and_: list[SelectionComposition] = field(metadata={"alias": "and"})


@dataclass(kw_only=True)
class SelectionConfig:
    interval: IntervalSelection | None = None
    multi: MultiSelection | None = None
    single: SingleSelection | None = None


@dataclass(kw_only=True)
class SelectionDomain:
    selection: str
    encoding: str | None = None
    field: str | None = None


@dataclass(kw_only=True)
class SelectionNot:
    not_: SelectionComposition = field(metadata={"alias": "not"})


@dataclass(kw_only=True)
class SelectionOr:
    or_: list[SelectionComposition] = field(metadata={"alias": "or"})


@dataclass(kw_only=True)
class SelectionPredicate:
    selection: SelectionComposition
    """
    Filter using a selection name or a logical composition of selection names.
    """


@dataclass(kw_only=True)
class SequenceGenerator:
    sequence: SequenceParams
    name: str | None = None


@dataclass(kw_only=True)
class SequenceParams:
    start: float
    stop: float
    as_: str | None = field(default=None, metadata={"alias": "as"})
    step: float | None = None


@dataclass(kw_only=True)
class SingleSelection:
    type: Literal["single"] = "single"
    bind: Binding | dict[str, Binding] | Literal["legend"] | None = None
    clear: str | bool | None = None
    empty: Literal["all", "none"] | None = None
    encodings: list[SingleDefUnitChannel] | None = None
    fields: list[str] | None = None
    init: dict[str, Any] | None = None
    nearest: bool | None = None
    on: str | dict[str, Any] | None = None
    resolve: SelectionResolution | None = None


@dataclass(kw_only=True)
class SortByEncoding:
    encoding: SortByChannel
    order: SortOrder | None | _UnsetType = UNSET


@dataclass(kw_only=True)
class SortField:
    field: str
    order: SortOrder | None | _UnsetType = UNSET


@dataclass(kw_only=True)
class Spec:
    """
    A nested view specification: a unit, layer, facet, repeat or concatenated view.
    """

    align: LayoutAlign | RowColLayoutAlign | None = None
    bounds: Literal["full", "flush"] | None = None
    center: bool | RowColBool | None = None
    columns: float | None = None
    concat: list[Spec] | None = None
    data: Data | None | _UnsetType = UNSET
    """
    An object describing the data source. Set to `null` to ignore the parent's data source. If no data is set, it
    is derived from the parent.
    """
    description: str | None = None
    encoding: Encoding | None = None
    facet: FacetMapping | FacetDef | None = None
    hconcat: list[Spec] | None = None
    height: float | Literal["container"] | Step | None = None
    layer: list[Spec] | None = None
    mark: AnyMark | None = None
    name: str | None = None
    projection: Projection | None = None
    repeat: list[str] | RepeatMapping | None = None
    resolve: Resolve | None = None
    selection: dict[str, SelectionDef] | None = None
    spacing: float | RowColNumber | None = None
    spec: Spec | None = None
    title: Text | TitleParams | None | _UnsetType = UNSET
    transform: list[Transform] | None = None
    vconcat: list[Spec] | None = None
    view: ViewBackground | None = None
    width: float | Literal["container"] | Step | None = None


@dataclass(kw_only=True)
class SphereGenerator:
    sphere: Literal[True] | dict[str, Any]
    name: str | None = None


@dataclass(kw_only=True)
class StackTransform:
    as_: str | list[str] = field(metadata={"alias": "as"})
    groupby: list[str]
    stack: str
    offset: StackOffset | None = None
    sort: list[SortField] | None = None


@dataclass(kw_only=True)
class Step:
    step: float


@dataclass(kw_only=True)
class StringFieldDef:
    aggregate: Aggregate | None = None
    bin: bool | BinParams | BinnedLiteral | None | _UnsetType = UNSET
    field: Field | None = None
    format: str | None = None
    formatType: FormatType | None = None
    labelExpr: str | None = None
    timeUnit: TimeUnit | TimeUnitParams | None = None
    title: Text | None | _UnsetType = UNSET
    type: StandardType | None = None


@dataclass(kw_only=True)
class TextDef:
    """
    A field or value definition of the `text`, `tooltip` and `href` channels, with an optional condition.
    """

    aggregate: Aggregate | None = None
    bin: bool | BinParams | BinnedLiteral | None | _UnsetType = UNSET
    condition: ConditionalDef | list[ConditionalDef] | None = None
    field: Field | None = None
    format: str | None = None
    formatType: FormatType | None = None
    labelExpr: str | None = None
    timeUnit: TimeUnit | TimeUnitParams | None = None
    title: Text | None | _UnsetType = UNSET
    type: StandardType | None = None
    value: str | list[str] | float | bool | None | _UnsetType = UNSET


@dataclass(kw_only=True)
class TimeUnitParams:
    maxbins: float | None = None
    step: float | None = None
    unit: TimeUnit | None = None
    utc: bool | None = None


@dataclass(kw_only=True)
class TimeUnitTransform:
    as_: str = field(metadata={"alias": "as"})
    field: str
    timeUnit: TimeUnit | TimeUnitParams


@dataclass(kw_only=True)
class TitleConfig:
    align: Align | None = None
    anchor: TitleAnchor | None = None
    angle: float | None = None
    baseline: TextBaseline | None = None
    color: str | None | _UnsetType = UNSET
    dx: float | None = None
    dy: float | None = None
    font: str | None = None
    fontSize: float | None = None
    fontStyle: str | None = None
    fontWeight: FontWeight | None = None
    frame: TitleFrame | str | None = None
    limit: float | None = None
    offset: float | None = None
    orient: TitleOrient | None = None
    subtitleColor: str | None | _UnsetType = UNSET
    subtitleFont: str | None = None
    subtitleFontSize: float | None = None
    subtitleFontStyle: str | None = None
    subtitleFontWeight: FontWeight | None = None
    subtitlePadding: float | None = None
    zindex: float | None = None


@dataclass(kw_only=True)
class TitleParams:
    text: Text
    """
    The title text.
    """
    align: Align | None = None
    anchor: TitleAnchor | None = None
    angle: float | None = None
    baseline: TextBaseline | None = None
    color: str | None | _UnsetType = UNSET
    dx: float | None = None
    dy: float | None = None
    font: str | None = None
    fontSize: float | None = None
    fontStyle: str | None = None
    fontWeight: FontWeight | None = None
    frame: TitleFrame | str | None = None
    limit: float | None = None
    offset: float | None = None
    orient: TitleOrient | None = None
    style: str | list[str] | None = None
    subtitle: Text | None = None
    """
    The subtitle text.
    """
    subtitleColor: str | None | _UnsetType = UNSET
    subtitleFont: str | None = None
    subtitleFontSize: float | None = None
    subtitleFontStyle: str | None = None
    subtitleFontWeight: FontWeight | None = None
    subtitlePadding: float | None = None
    zindex: float | None = None


@dataclass(kw_only=True)
class TooltipContent:
    content: Literal["encoding", "data"]


@dataclass(kw_only=True)
class UrlData:
    url: str
    """
    An URL from which to load the data set. Use the `format.type` property to ensure the loaded data is correctly
    parsed.
    """
    format: DataFormat | None = None
    name: str | None = None


@dataclass(kw_only=True)
class VegaLite:
    """
    A Vega-Lite top-level specification. This is the root class for all Vega-Lite specifications: a unit, layer,
    facet, repeat or concatenated view, plus the properties that only apply at the top level.
    """

    schema_: str = field(default=SCHEMA_URL, metadata={"alias": "$schema"})
    """
    URL to JSON schema for a Vega-Lite specification. Defaults to the pinned v4.0.2 schema; `null` is rejected.
    """
    align: LayoutAlign | RowColLayoutAlign | None = None
    autosize: AutosizeType | AutoSizeParams | None = None
    background: str | None = None
    bounds: Literal["full", "flush"] | None = None
    center: bool | RowColBool | None = None
    columns: float | None = None
    concat: list[Spec] | None = None
    config: Config | None = None
    data: Data | None | _UnsetType = UNSET
    """
    An object describing the data source. Set to `null` to ignore the parent's data source. If no data is set, it
    is derived from the parent.
    """
    datasets: dict[str, InlineDataset] | None = None
    description: str | None = None
    encoding: Encoding | None = None
    facet: FacetMapping | FacetDef | None = None
    hconcat: list[Spec] | None = None
    height: float | Literal["container"] | Step | None = None
    layer: list[Spec] | None = None
    mark: AnyMark | None = None
    name: str | None = None
    padding: Padding | None = None
    projection: Projection | None = None
    repeat: list[str] | RepeatMapping | None = None
    resolve: Resolve | None = None
    selection: dict[str, SelectionDef] | None = None
    spacing: float | RowColNumber | None = None
    spec: Spec | None = None
    title: Text | TitleParams | None | _UnsetType = UNSET
    """
    Title for the plot.
    """
    transform: list[Transform] | None = None
    usermeta: dict[str, Any] | None = None
    vconcat: list[Spec] | None = None
    view: ViewBackground | None = None
    width: float | Literal["container"] | Step | None = None


@dataclass(kw_only=True)
class ViewBackground:
    cornerRadius: float | None = None
    cursor: Cursor | None = None
    fill: str | None | _UnsetType = UNSET
    """
    The fill color. If `null`, the view background is transparent.
    """
    fillOpacity: float | None = None
    opacity: float | None = None
    stroke: str | None | _UnsetType = UNSET
    """
    The stroke color. If `null`, no border is drawn around the view.
    """
    strokeCap: StrokeCap | None = None
    strokeDash: list[float] | None = None
    strokeDashOffset: float | None = None
    strokeJoin: StrokeJoin | None = None
    strokeMiterLimit: float | None = None
    strokeOpacity: float | None = None
    strokeWidth: float | None = None
    style: str | list[str] | None = None


@dataclass(kw_only=True)
class ViewConfig:
    clip: bool | None = None
    continuousHeight: float | None = None
    continuousWidth: float | None = None
    cornerRadius: float | None = None
    cursor: Cursor | None = None
    discreteHeight: float | None = None
    discreteWidth: float | None = None
    fill: str | None | _UnsetType = UNSET
    fillOpacity: float | None = None
    height: float | None = None
    opacity: float | None = None
    step: float | None = None
    stroke: str | None | _UnsetType = UNSET
    strokeDash: list[float] | None = None
    strokeOpacity: float | None = None
    strokeWidth: float | None = None
    width: float | None = None


@dataclass(kw_only=True)
class WindowFieldDef:
    as_: str = field(metadata={"alias": "as"})
    op: AggregateOp | WindowOnlyOp
    field: str | None = None
    param: float | None = None


@dataclass(kw_only=True)
class WindowTransform:
    window: list[WindowFieldDef]
    frame: list[float | None] | None = None
    groupby: list[str] | None = None
    ignorePeers: bool | None = None
    sort: list[SortField] | None = None


Aggregate = NonArgAggregateOp | ArgmaxDef | ArgminDef


AnyMark = Mark | MarkDef


Binding = BindCheckbox | BindRadioSelect | BindRange | InputBinding


Data = UrlData | InlineData | SequenceGenerator | SphereGenerator | GraticuleGenerator | NamedData
"""
The data source of a view: loaded from a URL, given inline, generated, or bound at runtime by name.
"""


Field = str | RepeatRef


Gradient = LinearGradient | RadialGradient


InlineDataset = list[Any] | str | dict[str, Any]


Padding = float | PaddingSides


Predicate = (
    FieldEqualPredicate
    | FieldRangePredicate
    | FieldOneOfPredicate
    | FieldLTPredicate
    | FieldGTPredicate
    | FieldLTEPredicate
    | FieldGTEPredicate
    | FieldValidPredicate
    | SelectionPredicate
    | str
)


PredicateComposition = LogicalNot | LogicalAnd | LogicalOr | Predicate


SelectionComposition = SelectionNot | SelectionAnd | SelectionOr | str


SelectionDef = SingleSelection | MultiSelection | IntervalSelection


Sort = list[str | float | bool | DateTime] | SortOrder | SortByChannel | SortByChannelDesc | SortByEncoding | EncodingSortField


Text = str | list[str]


Transform = (
    AggregateTransform
    | BinTransform
    | CalculateTransform
    | DensityTransform
    | FilterTransform
    | FlattenTransform
    | FoldTransform
    | ImputeTransform
    | JoinAggregateTransform
    | LoessTransform
    | LookupTransform
    | PivotTransform
    | QuantileTransform
    | RegressionTransform
    | SampleTransform
    | StackTransform
    | TimeUnitTransform
    | WindowTransform
)
