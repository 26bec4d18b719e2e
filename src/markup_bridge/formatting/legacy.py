"""Character-code legacy dialect: parser and serializer.

A code is the prefix character followed by:
- 0-9, a-f: palette color (also clears decorations)
- k, l, m, n, o: obfuscated, bold, strikethrough, underlined, italic
- r: reset
- #RRGGBB: hex color
- x&R&R&G&G&B&B: hex color, one prefix per digit

Codes are case-insensitive. Anything else is literal text.
"""

import string
from typing import Optional

from markup_bridge.formatting.ir import (
    Decoration,
    NamedColor,
    PLAIN,
    Style,
    StyledText,
    TextColor,
)

DECORATION_CODES: dict[str, Decoration] = {d.legacy_code: d for d in Decoration.members()}
RESET_CODE = "r"
REPEATED_HEX_CODE = "x"


def _is_hex(value: str) -> bool:
    return bool(value) and all(ch in string.hexdigits for ch in value)


class LegacySerializer:
    """Convert between legacy-dialect strings and StyledText."""

    def __init__(
        self,
        character: str = "&",
        hex_character: str = "#",
        repeated_hex_format: bool = False,
        named_colors: bool = True,
    ) -> None:
        """Initialize the serializer.

        Args:
            character: Prefix character that starts every code
            hex_character: Marker for the ``#RRGGBB`` form
            repeated_hex_format: Write hex colors as ``&x&R&R&G&G&B&B``
            named_colors: Write palette colors as their single-letter code;
                when False every color is written as full hex
        """
        self.character = character
        self.hex_character = hex_character
        self.repeated_hex_format = repeated_hex_format
        self.named_colors = named_colors

    def __repr__(self) -> str:
        return (
            f"LegacySerializer(character={self.character!r}, "
            f"hex_character={self.hex_character!r}, "
            f"repeated_hex_format={self.repeated_hex_format}, "
            f"named_colors={self.named_colors})"
        )

    def deserialize(self, text: str) -> StyledText:
        """Parse legacy text into StyledText.

        Both hex spellings are accepted regardless of how this instance
        writes hex colors.
        """
        result = StyledText()
        style = PLAIN
        buffer: list[str] = []
        pos = 0
        length = len(text)

        while pos < length:
            if text[pos] == self.character and pos + 1 < length:
                consumed, new_style = self._read_code(text, pos, style)
                if consumed:
                    result.append("".join(buffer), style)
                    buffer.clear()
                    style = new_style
                    pos += consumed
                    continue
            buffer.append(text[pos])
            pos += 1

        result.append("".join(buffer), style)
        return result

    def _read_code(self, text: str, pos: int, style: Style) -> tuple[int, Style]:
        """Read the code at ``pos``.

        Returns:
            Tuple of (characters consumed, style after the code). Zero
            consumed means the prefix character is literal.
        """
        code = text[pos + 1]
        lowered = code.lower()

        if code == self.hex_character:
            digits = text[pos + 2 : pos + 8]
            if len(digits) == 6 and _is_hex(digits):
                return 8, Style(color=TextColor(int(digits, 16)))
            return 0, style

        if lowered == REPEATED_HEX_CODE:
            color = self._read_repeated_hex(text[pos + 2 : pos + 14])
            if color is not None:
                return 14, Style(color=color)
            return 0, style

        named = NamedColor.from_code(lowered)
        if named is not None:
            return 2, Style(color=named.color)

        if lowered == RESET_CODE:
            return 2, PLAIN

        decoration = DECORATION_CODES.get(lowered)
        if decoration is not None:
            return 2, style.with_decoration(decoration)

        return 0, style

    def _read_repeated_hex(self, chunk: str) -> Optional[TextColor]:
        """Parse the ``&R&R&G&G&B&B`` tail of the repeated form."""
        if len(chunk) != 12:
            return None
        prefixes, digits = chunk[0::2], chunk[1::2]
        if prefixes != self.character * 6 or not _is_hex(digits):
            return None
        return TextColor(int(digits, 16))

    def serialize(self, styled: StyledText) -> str:
        """Write StyledText as legacy codes.

        Codes are only written where the style changes; a change back to
        unstyled text writes a reset.
        """
        parts: list[str] = []
        current = PLAIN

        for run in styled.runs:
            if run.style != current:
                parts.append(self._codes_for(run.style, current))
                current = run.style
            parts.append(run.text)

        return "".join(parts)

    def _codes_for(self, style: Style, previous: Style) -> str:
        codes: list[str] = []
        if style.color is not None:
            codes.append(self._color_code(style.color))
        elif not previous.is_plain:
            codes.append(self.character + RESET_CODE)
        codes.extend(self.character + d.legacy_code for d in style.decorations.split())
        return "".join(codes)

    def _color_code(self, color: TextColor) -> str:
        named = color.named
        if named is not None and self.named_colors:
            return self.character + named.legacy_code

        digits = f"{color.value:06x}"
        if self.repeated_hex_format:
            return (
                self.character
                + REPEATED_HEX_CODE
                + "".join(self.character + d for d in digits)
            )
        return self.character + self.hex_character + digits


def compact_serializer(character: str = "&", hex_character: str = "#") -> LegacySerializer:
    """Serializer that keeps palette codes and writes hex as ``&x&R&R...``."""
    return LegacySerializer(character, hex_character, repeated_hex_format=True)


def canonical_serializer(character: str = "&", hex_character: str = "#") -> LegacySerializer:
    """Serializer that writes every color as ``&#rrggbb``."""
    return LegacySerializer(character, hex_character, named_colors=False)
