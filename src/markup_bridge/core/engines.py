"""The set of dialect engines shared by every formatting call."""

import re
from dataclasses import dataclass, field
from typing import Optional

from markup_bridge.config import Settings, get_settings
from markup_bridge.core.scanner import compile_legacy_pattern
from markup_bridge.formatting.legacy import (
    LegacySerializer,
    canonical_serializer,
    compact_serializer,
)
from markup_bridge.formatting.markup import MarkupSerializer


@dataclass(frozen=True)
class Engines:
    """Engines and patterns built once from settings, then only read.

    Attributes:
        markup: Tag dialect engine
        compact: Legacy engine that writes hex as the repeated form
        canonical: Legacy engine that writes every color as full hex
        legacy_pattern: Legacy-code pattern for the configured characters
        section_marker: Character rewritten to the legacy prefix, or None
            when section markers are left alone
    """

    markup: MarkupSerializer
    compact: LegacySerializer
    canonical: LegacySerializer
    legacy_pattern: re.Pattern = field(default_factory=compile_legacy_pattern)
    section_marker: Optional[str] = "§"

    def normalize(self, text: str) -> str:
        """Rewrite section markers to the legacy prefix character."""
        if self.section_marker is None or self.section_marker not in text:
            return text
        return text.replace(self.section_marker, self.compact.character)


def build_engines(settings: Settings) -> Engines:
    """Build an engine bundle from settings."""
    character = settings.legacy_character
    hex_character = settings.hex_character
    return Engines(
        markup=MarkupSerializer(),
        compact=compact_serializer(character, hex_character),
        canonical=canonical_serializer(character, hex_character),
        legacy_pattern=compile_legacy_pattern(character, hex_character),
        section_marker=settings.section_marker if settings.normalize_section_marker else None,
    )


# Global engine bundle
_engines: Optional[Engines] = None


def get_engines() -> Engines:
    """Get the global engine bundle, building it from settings if needed."""
    global _engines
    if _engines is None:
        _engines = build_engines(get_settings())
    return _engines
