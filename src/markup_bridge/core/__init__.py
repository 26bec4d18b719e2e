"""Core formatting pipeline for Markup Bridge."""

from markup_bridge.core.scanner import (
    Segment,
    has_markup_tags,
    has_legacy_codes,
    split_segments,
)
from markup_bridge.core.engines import Engines, build_engines, get_engines
from markup_bridge.core.transcoder import (
    transcode_segment,
    convert_legacy_within_markup,
)
from markup_bridge.core.formatter import Formatter, FormattingError

__all__ = [
    "Segment",
    "has_markup_tags",
    "has_legacy_codes",
    "split_segments",
    "Engines",
    "build_engines",
    "get_engines",
    "transcode_segment",
    "convert_legacy_within_markup",
    "Formatter",
    "FormattingError",
]
