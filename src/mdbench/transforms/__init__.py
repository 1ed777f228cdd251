from .base import Transformation
from .html import HtmlTransformation
from .registry import TRANSFORMATIONS, available_transformations, get_transformation
from .segments import (
    SegmentOptions,
    SegmentsTransformation,
    TextSegment,
    TextStyle,
    parse_segments,
)
from .tokens import TokenCountTransformation

__all__ = [
    "HtmlTransformation",
    "SegmentOptions",
    "SegmentsTransformation",
    "TRANSFORMATIONS",
    "TextSegment",
    "TextStyle",
    "TokenCountTransformation",
    "Transformation",
    "available_transformations",
    "get_transformation",
    "parse_segments",
]
