"""Escaping of the markup dialect's control characters.

The markup serializer writes run text through ``escape`` so that literal
``<`` or ``\\`` never read back as tag syntax. Text that came from the legacy
dialect was never meant to carry that escaping, so after a legacy parse is
serialized to markup the pipeline runs ``unescape`` to restore it.
"""

ESCAPE_CHAR = "\\"

# Characters the markup serializer prefixes with ESCAPE_CHAR
ESCAPABLE_CHARS = frozenset("\\<>&")


def escape(text: str) -> str:
    """Prefix every control character with a backslash."""
    if not any(ch in ESCAPABLE_CHARS for ch in text):
        return text
    return "".join(ESCAPE_CHAR + ch if ch in ESCAPABLE_CHARS else ch for ch in text)


def unescape(text: str) -> str:
    """Undo ``escape``.

    A backslash followed by one of the control characters becomes that
    character. Any other backslash, including a trailing one, is kept as-is,
    so ``path\\to\\file`` passes through unchanged.
    """
    if ESCAPE_CHAR not in text:
        return text

    result: list[str] = []
    length = len(text)
    i = 0
    while i < length:
        ch = text[i]
        if ch == ESCAPE_CHAR and i + 1 < length and text[i + 1] in ESCAPABLE_CHARS:
            result.append(text[i + 1])
            i += 2
            continue
        result.append(ch)
        i += 1
    return "".join(result)
