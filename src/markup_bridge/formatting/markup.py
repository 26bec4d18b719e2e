"""Tag-based markup dialect: parser and serializer.

Supported tags:
- Palette colors: <red>, <dark_blue>, <gray>/<grey>, ...
- Hex colors: <#rgb>, <#rrggbb>
- Explicit colors: <color:red>, <colour:#fcfcfc>, <c:gold>
- Decorations: <bold>/<b>, <italic>/<i>/<em>, <underlined>/<u>,
  <strikethrough>/<st>, <obfuscated>/<obf>
- Reset: <reset>/<r>

Anything else between angle brackets is kept as literal text.
"""

import re
from dataclasses import dataclass
from typing import Optional

from markup_bridge.formatting.escape import ESCAPE_CHAR, ESCAPABLE_CHARS, escape
from markup_bridge.formatting.ir import (
    Decoration,
    NamedColor,
    PLAIN,
    Style,
    StyledText,
    TextColor,
)


DECORATION_TAGS: dict[str, Decoration] = {
    "bold": Decoration.BOLD,
    "b": Decoration.BOLD,
    "italic": Decoration.ITALIC,
    "i": Decoration.ITALIC,
    "em": Decoration.ITALIC,
    "underlined": Decoration.UNDERLINED,
    "u": Decoration.UNDERLINED,
    "strikethrough": Decoration.STRIKETHROUGH,
    "st": Decoration.STRIKETHROUGH,
    "obfuscated": Decoration.OBFUSCATED,
    "obf": Decoration.OBFUSCATED,
}

COLOR_TAGS = ("color", "colour", "c")
RESET_TAGS = ("reset", "r")


@dataclass(frozen=True)
class _Frame:
    """An open tag on the parser stack."""

    key: str
    style: Style


class MarkupSerializer:
    """Convert between markup-dialect strings and StyledText."""

    # A run of text inside angle brackets; whether it is a tag is decided later
    TAG_TOKEN_PATTERN = re.compile(r"<(/)?([^<>\s/\\][^<>]*)>")
    HEX_COLOR_PATTERN = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")

    def deserialize(self, markup: str) -> StyledText:
        """Parse markup into StyledText.

        Args:
            markup: Markup-dialect source text

        Returns:
            StyledText with one run per styling change
        """
        result = StyledText()
        stack: list[_Frame] = []
        buffer: list[str] = []

        def current() -> Style:
            return stack[-1].style if stack else PLAIN

        def flush() -> None:
            if buffer:
                result.append("".join(buffer), current())
                buffer.clear()

        pos = 0
        length = len(markup)
        while pos < length:
            ch = markup[pos]

            if ch == ESCAPE_CHAR and pos + 1 < length and markup[pos + 1] in ESCAPABLE_CHARS:
                buffer.append(markup[pos + 1])
                pos += 2
                continue

            if ch == "<":
                match = self.TAG_TOKEN_PATTERN.match(markup, pos)
                if match and self._apply_tag(match, stack, current(), flush):
                    pos = match.end()
                    continue

            buffer.append(ch)
            pos += 1

        flush()
        return result

    def _apply_tag(self, match: re.Match, stack: list[_Frame], style: Style, flush) -> bool:
        """Apply a tag token to the stack. Returns False if it is not a tag."""
        closing = match.group(1) is not None
        body = match.group(2)

        if closing:
            key = self._closing_key(body)
            if key is None:
                return False
            flush()
            for index in range(len(stack) - 1, -1, -1):
                if stack[index].key == key:
                    del stack[index:]
                    break
            # Closing tags without an opener are dropped
            return True

        name, _, argument = body.partition(":")
        name = name.lower()

        if name in RESET_TAGS and not argument:
            flush()
            stack.clear()
            return True

        decoration = DECORATION_TAGS.get(name)
        if decoration is not None and not argument:
            flush()
            stack.append(_Frame(decoration.tag_name, style.with_decoration(decoration)))
            return True

        if name in COLOR_TAGS:
            color = self._resolve_color(argument)
            key = "color"
        elif argument:
            return False
        else:
            color = self._resolve_color(name)
            key = self._color_key(name)

        if color is None:
            return False
        flush()
        stack.append(_Frame(key, style.with_color(color)))
        return True

    def _closing_key(self, body: str) -> Optional[str]:
        """Stack key a closing tag refers to, or None for unknown names."""
        name = body.partition(":")[0].lower()
        if name in DECORATION_TAGS:
            return DECORATION_TAGS[name].tag_name
        if name in COLOR_TAGS:
            return "color"
        if self._resolve_color(name) is not None:
            return self._color_key(name)
        return None

    @staticmethod
    def _color_key(name: str) -> str:
        named = NamedColor.from_tag(name)
        return named.tag_name if named is not None else name.lower()

    def _resolve_color(self, value: str) -> Optional[TextColor]:
        if self.HEX_COLOR_PATTERN.fullmatch(value):
            return TextColor.from_hex(value)
        named = NamedColor.from_tag(value)
        return named.color if named is not None else None

    def serialize(self, styled: StyledText) -> str:
        """Write StyledText as markup.

        Run text is escaped, and tags shared by consecutive runs are kept
        open rather than closed and reopened.
        """
        parts: list[str] = []
        open_tags: list[str] = []

        for run in styled.runs:
            wanted = self._tags_for(run.style)
            common = 0
            while (
                common < len(open_tags)
                and common < len(wanted)
                and open_tags[common] == wanted[common]
            ):
                common += 1
            parts.extend(f"</{name}>" for name in reversed(open_tags[common:]))
            parts.extend(f"<{name}>" for name in wanted[common:])
            open_tags = wanted
            parts.append(escape(run.text))

        parts.extend(f"</{name}>" for name in reversed(open_tags))
        return "".join(parts)

    @staticmethod
    def _tags_for(style: Style) -> list[str]:
        """Tag names for a style, color first, then decorations in code order."""
        tags: list[str] = []
        if style.color is not None:
            named = style.color.named
            tags.append(named.tag_name if named is not None else style.color.hex)
        tags.extend(d.tag_name for d in style.decorations.split())
        return tags
