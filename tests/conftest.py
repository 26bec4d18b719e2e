"""Pytest fixtures for Markup Bridge tests."""

import pytest

from markup_bridge.config import Settings
from markup_bridge.core.engines import Engines, build_engines
from markup_bridge.formatting.ir import NamedColor, Style, TextColor
from markup_bridge.formatting.legacy import (
    LegacySerializer,
    canonical_serializer,
    compact_serializer,
)
from markup_bridge.formatting.markup import MarkupSerializer


@pytest.fixture
def engines() -> Engines:
    """Engine bundle built from default settings."""
    return build_engines(Settings())


@pytest.fixture
def markup() -> MarkupSerializer:
    """Markup dialect engine."""
    return MarkupSerializer()


@pytest.fixture
def compact() -> LegacySerializer:
    """Legacy engine writing hex as &x&R&R&G&G&B&B."""
    return compact_serializer()


@pytest.fixture
def canonical() -> LegacySerializer:
    """Legacy engine writing every color as &#rrggbb."""
    return canonical_serializer()


@pytest.fixture
def red() -> Style:
    """Style with the palette red color."""
    return Style(color=NamedColor.RED.color)


@pytest.fixture
def off_white() -> Style:
    """Style with the #fcfcfc hex color."""
    return Style(color=TextColor(0xFCFCFC))


@pytest.fixture(autouse=True)
def reset_globals(monkeypatch: pytest.MonkeyPatch):
    """Start every test without cached settings or engines."""
    monkeypatch.setattr("markup_bridge.config._settings", None)
    monkeypatch.setattr("markup_bridge.core.engines._engines", None)
