"""Detection of markup tags and legacy codes.

Everything here is a pure function over compiled, module-level patterns.
"""

import re
from typing import Iterator, NamedTuple


# Coarse check: "is there any tag at all". The attribute payload stops at
# the first ">" it can.
TAG_PRESENCE_PATTERN = re.compile(
    r"</?(?:#[0-9a-f]{3,6}|[a-z][a-z0-9_]*(?:[:=].*?)?)>",
    re.IGNORECASE,
)

# Used for splitting. The payload runs up to the next ">" so structured
# arguments like <gradient:#fff:#000> are never cut in half.
TAG_BOUNDARY_PATTERN = re.compile(
    r"</?(?:#[0-9a-f]{3,6}|[a-z][a-z0-9_]*(?:[:=][^>]*)?)>",
    re.IGNORECASE,
)


def compile_legacy_pattern(character: str = "&", hex_character: str = "#") -> re.Pattern:
    """Build the legacy-code pattern for a prefix and hex-marker character.

    Matches the prefix followed by a palette digit, a format letter (k-o, r,
    x), a hex-marker color (&#RRGGBB) or the repeated form (&x&R&R&G&G&B&B).
    """
    prefix = re.escape(character)
    marker = re.escape(hex_character)
    return re.compile(
        rf"{prefix}(?:[0-9a-fk-orx]|{marker}[0-9a-f]{{6}}"
        rf"|x{prefix}[0-9a-f](?:{prefix}[0-9a-f]){{5}})",
        re.IGNORECASE,
    )


LEGACY_CODE_PATTERN = compile_legacy_pattern()


class Segment(NamedTuple):
    """A span of the input, either a tag or the plain text between tags."""

    text: str
    start: int
    end: int
    is_tag: bool


def has_markup_tags(text: str) -> bool:
    """Check if the text contains at least one markup tag.

    Matches:
    - <#rgb> / <#rrggbb> (hex color tags, optionally closing)
    - <name> / </name> (opening and closing tags)
    - <name:args> / <name=args> (tags with attributes)
    """
    return TAG_PRESENCE_PATTERN.search(text) is not None


def has_legacy_codes(text: str, pattern: re.Pattern = LEGACY_CODE_PATTERN) -> bool:
    """Check if the text contains legacy color or format codes."""
    return pattern.search(text) is not None


def split_segments(text: str) -> Iterator[Segment]:
    """Yield alternating plain and tag spans, left to right.

    Spans are disjoint and together cover the whole input. Empty plain spans
    (between adjacent tags) are not yielded.
    """
    cursor = 0
    for match in TAG_BOUNDARY_PATTERN.finditer(text):
        start, end = match.span()
        if start > cursor:
            yield Segment(text[cursor:start], cursor, start, False)
        yield Segment(match.group(0), start, end, True)
        cursor = end
    if cursor < len(text):
        yield Segment(text[cursor:], cursor, len(text), False)
