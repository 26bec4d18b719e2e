"""Intermediate Representation for styled text.

This module defines the value both dialect engines produce and consume.
Pipeline code treats a StyledText as opaque and only moves it between
``deserialize`` and ``serialize`` calls; the engines and the tests are the
only places that look inside.
"""

from dataclasses import dataclass, field
from enum import Enum, Flag, auto
from typing import Optional


class Decoration(Flag):
    """Text decoration flags (combinable with |)."""

    NONE = 0
    OBFUSCATED = auto()
    BOLD = auto()
    STRIKETHROUGH = auto()
    UNDERLINED = auto()
    ITALIC = auto()

    @property
    def legacy_code(self) -> str:
        """Legacy format letter for a single decoration."""
        return _DECORATION_CODES[self]

    @property
    def tag_name(self) -> str:
        """Markup tag name for a single decoration."""
        return self.name.lower()

    @classmethod
    def members(cls) -> list["Decoration"]:
        """Single decorations in legacy code order (k, l, m, n, o)."""
        return [
            cls.OBFUSCATED,
            cls.BOLD,
            cls.STRIKETHROUGH,
            cls.UNDERLINED,
            cls.ITALIC,
        ]

    def split(self) -> list["Decoration"]:
        """Break a combined flag into its single decorations, in code order."""
        return [d for d in Decoration.members() if d in self]


_DECORATION_CODES = {
    Decoration.OBFUSCATED: "k",
    Decoration.BOLD: "l",
    Decoration.STRIKETHROUGH: "m",
    Decoration.UNDERLINED: "n",
    Decoration.ITALIC: "o",
}


class NamedColor(Enum):
    """The sixteen palette colors shared by both dialects.

    Each value is ``(legacy_code, rgb)``; the member name lowercased is the
    markup tag name.
    """

    BLACK = ("0", 0x000000)
    DARK_BLUE = ("1", 0x0000AA)
    DARK_GREEN = ("2", 0x00AA00)
    DARK_AQUA = ("3", 0x00AAAA)
    DARK_RED = ("4", 0xAA0000)
    DARK_PURPLE = ("5", 0xAA00AA)
    GOLD = ("6", 0xFFAA00)
    GRAY = ("7", 0xAAAAAA)
    DARK_GRAY = ("8", 0x555555)
    BLUE = ("9", 0x5555FF)
    GREEN = ("a", 0x55FF55)
    AQUA = ("b", 0x55FFFF)
    RED = ("c", 0xFF5555)
    LIGHT_PURPLE = ("d", 0xFF55FF)
    YELLOW = ("e", 0xFFFF55)
    WHITE = ("f", 0xFFFFFF)

    @property
    def legacy_code(self) -> str:
        return self.value[0]

    @property
    def rgb(self) -> int:
        return self.value[1]

    @property
    def tag_name(self) -> str:
        return self.name.lower()

    @property
    def color(self) -> "TextColor":
        return TextColor(self.rgb)

    @classmethod
    def from_code(cls, code: str) -> Optional["NamedColor"]:
        """Look up a palette color by its legacy code (case-insensitive)."""
        return _BY_CODE.get(code.lower())

    @classmethod
    def from_tag(cls, name: str) -> Optional["NamedColor"]:
        """Look up a palette color by tag name, accepting ``grey`` spellings."""
        return _BY_TAG.get(name.lower().replace("grey", "gray"))


_BY_CODE = {c.legacy_code: c for c in NamedColor}
_BY_TAG = {c.tag_name: c for c in NamedColor}
_BY_RGB = {c.rgb: c for c in NamedColor}


@dataclass(frozen=True)
class TextColor:
    """A 24-bit RGB color.

    Attributes:
        value: Packed ``0xRRGGBB`` integer
    """

    value: int

    @property
    def hex(self) -> str:
        """Lowercase ``#rrggbb`` spelling."""
        return f"#{self.value:06x}"

    @property
    def named(self) -> Optional[NamedColor]:
        """The palette color with exactly this value, if there is one."""
        return _BY_RGB.get(self.value)

    @classmethod
    def from_hex(cls, digits: str) -> "TextColor":
        """Parse 3 or 6 hex digits, with or without a leading ``#``."""
        digits = digits.lstrip("#")
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) != 6:
            raise ValueError(f"Expected 3 or 6 hex digits, got {digits!r}")
        return cls(int(digits, 16))


@dataclass(frozen=True)
class Style:
    """Styling applied to a run of text."""

    color: Optional[TextColor] = None
    decorations: Decoration = Decoration.NONE

    @property
    def is_plain(self) -> bool:
        return self.color is None and self.decorations == Decoration.NONE

    def with_color(self, color: Optional[TextColor]) -> "Style":
        return Style(color=color, decorations=self.decorations)

    def with_decoration(self, decoration: Decoration) -> "Style":
        return Style(color=self.color, decorations=self.decorations | decoration)


PLAIN = Style()


@dataclass
class TextRun:
    """A contiguous run of text with consistent styling.

    Attributes:
        text: The text content
        style: Color and decorations for the whole run
    """

    text: str
    style: Style = PLAIN

    @property
    def bold(self) -> bool:
        """Check if this run is bold."""
        return Decoration.BOLD in self.style.decorations

    @property
    def italic(self) -> bool:
        """Check if this run is italic."""
        return Decoration.ITALIC in self.style.decorations

    @property
    def color(self) -> Optional[TextColor]:
        return self.style.color

    def __str__(self) -> str:
        return self.text


@dataclass
class StyledText:
    """Text plus its styling, as an ordered list of runs.

    Runs are kept normalized: empty text is never stored and a run whose
    style equals the previous one is merged into it, so equality of two
    values means equal characters with equal styling.

    Attributes:
        runs: List of TextRun objects making up the text
    """

    runs: list[TextRun] = field(default_factory=list)

    @property
    def plain_text(self) -> str:
        """Get the plain text content without styling."""
        return "".join(run.text for run in self.runs)

    @property
    def is_plain(self) -> bool:
        """True when no run carries any styling."""
        return all(run.style.is_plain for run in self.runs)

    def append(self, text: str, style: Style = PLAIN) -> None:
        """Append text, merging with the last run if the style matches."""
        if not text:
            return
        if self.runs and self.runs[-1].style == style:
            self.runs[-1].text += text
        else:
            self.runs.append(TextRun(text=text, style=style))

    def __str__(self) -> str:
        return self.plain_text
