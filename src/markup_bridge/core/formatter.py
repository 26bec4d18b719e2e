"""Formatting strategies that turn caller text into StyledText."""

import logging
from enum import Enum
from typing import Any, Callable, Optional

from markup_bridge.core.engines import Engines, get_engines
from markup_bridge.core.scanner import has_legacy_codes, has_markup_tags
from markup_bridge.core.transcoder import convert_legacy_within_markup
from markup_bridge.formatting.escape import unescape
from markup_bridge.formatting.ir import StyledText
from markup_bridge.hooks import HookRegistry, PlaceholderHook

logger = logging.getLogger("markup_bridge.formatter")


class FormattingError(Exception):
    """Error raised by an engine or hook while formatting."""

    pass


class Formatter(Enum):
    """The available formatting policies.

    MARKUP: tags only; legacy codes are literal text.
    LEGACY: legacy codes only; tags are literal text.
    UNIVERSAL: either dialect or both, converted to markup before parsing.
    """

    MARKUP = "Markup"
    LEGACY = "Legacy Text"
    UNIVERSAL = "Universal"

    @property
    def display_name(self) -> str:
        """Human-readable name of the formatter."""
        return self.value

    @classmethod
    def from_name(cls, name: str) -> "Formatter":
        """Look up a formatter by member or display name (case-insensitive)."""
        key = name.strip().lower()
        for formatter in cls:
            if key in (formatter.name.lower(), formatter.display_name.lower()):
                return formatter
        raise ValueError(
            f"Unknown formatter: {name}. "
            f"Available: {', '.join(f.name.lower() for f in cls)}"
        )

    def format(
        self,
        text: str,
        audience: Any = None,
        hooks: Optional[HookRegistry] = None,
        engines: Optional[Engines] = None,
    ) -> StyledText:
        """Apply formatting to a string.

        Args:
            text: The string to format
            audience: Passed through to a placeholder hook, if one is used
            hooks: Registry searched for a PlaceholderHook
            engines: Engine bundle (defaults to the global one)

        Returns:
            The formatted StyledText

        Raises:
            FormattingError: If an engine or hook fails
        """
        engines = engines or get_engines()
        try:
            return _FORMATTERS[self](text, audience, hooks, engines)
        except Exception as e:
            raise FormattingError(f"{self.display_name} formatting failed: {e}") from e

    def to_markup(self, text: str, engines: Optional[Engines] = None) -> str:
        """Return the markup this formatter parses for ``text``.

        Parsing the result with MARKUP gives the same StyledText as
        ``format`` (without hooks).

        Raises:
            FormattingError: If an engine fails
        """
        engines = engines or get_engines()
        try:
            return _MARKUP_WRITERS[self](engines.normalize(text), engines)
        except Exception as e:
            raise FormattingError(f"{self.display_name} conversion failed: {e}") from e


def _parse_markup(
    markup: str,
    audience: Any,
    hooks: Optional[HookRegistry],
    engines: Engines,
) -> StyledText:
    """Parse final markup, through a placeholder hook when one is registered."""
    hook = hooks.get(PlaceholderHook) if hooks is not None else None
    if hook is not None:
        return hook.format(markup, audience)
    return engines.markup.deserialize(markup)


def _markup_as_is(text: str, engines: Engines) -> str:
    return text


def _legacy_markup(text: str, engines: Engines) -> str:
    # Kept escaped so tags in legacy text stay literal when parsed again
    return engines.markup.serialize(engines.compact.deserialize(text))


def _universal_markup(text: str, engines: Engines) -> str:
    has_tags = has_markup_tags(text)
    has_legacy = has_legacy_codes(text, engines.legacy_pattern)

    if has_tags and has_legacy:
        logger.debug("Mixed input, converting legacy segments: %r", text)
        return convert_legacy_within_markup(text, engines)
    if has_tags:
        logger.debug("Markup-only input: %r", text)
        return text

    logger.debug("Legacy or plain input, normalizing colors: %r", text)
    # Re-read through full hex so every color spelling ends up the same
    styled = engines.compact.deserialize(text)
    canonical = engines.canonical.serialize(styled)
    styled = engines.canonical.deserialize(canonical)
    return unescape(engines.markup.serialize(styled))


def _format_markup(text, audience, hooks, engines) -> StyledText:
    return _parse_markup(engines.normalize(text), audience, hooks, engines)


def _format_legacy(text, audience, hooks, engines) -> StyledText:
    return engines.compact.deserialize(engines.normalize(text))


def _format_universal(text, audience, hooks, engines) -> StyledText:
    markup = _universal_markup(engines.normalize(text), engines)
    return _parse_markup(markup, audience, hooks, engines)


_FORMATTERS: dict[Formatter, Callable[..., StyledText]] = {
    Formatter.MARKUP: _format_markup,
    Formatter.LEGACY: _format_legacy,
    Formatter.UNIVERSAL: _format_universal,
}

_MARKUP_WRITERS: dict[Formatter, Callable[[str, Engines], str]] = {
    Formatter.MARKUP: _markup_as_is,
    Formatter.LEGACY: _legacy_markup,
    Formatter.UNIVERSAL: _universal_markup,
}
