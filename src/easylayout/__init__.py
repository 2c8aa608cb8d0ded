from .config import Config, default_config, find_config_file, set_default_config
from .coordinates import (
    Absolute,
    AmbiguousUnitWarning,
    Percent,
    SpacingError,
    normalize,
    pct,
    spacing,
    units,
)
from .layout import Rect, compute_coordinates, compute_rects
from .spans import AreaSpan, Layout, NonRectangularAreaError, extract_spans
from .template import TemplateError, format_template, parse_template
