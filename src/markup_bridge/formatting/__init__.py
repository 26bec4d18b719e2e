"""Dialect engines and the styled-text representation they share."""

from markup_bridge.formatting.ir import (
    Decoration,
    NamedColor,
    TextColor,
    Style,
    TextRun,
    StyledText,
)
from markup_bridge.formatting.escape import escape, unescape
from markup_bridge.formatting.markup import MarkupSerializer
from markup_bridge.formatting.legacy import (
    LegacySerializer,
    compact_serializer,
    canonical_serializer,
)

__all__ = [
    "Decoration",
    "NamedColor",
    "TextColor",
    "Style",
    "TextRun",
    "StyledText",
    "escape",
    "unescape",
    "MarkupSerializer",
    "LegacySerializer",
    "compact_serializer",
    "canonical_serializer",
]
