"""Legacy-to-markup conversion of text that may already contain tags."""

import logging
from typing import Optional

from markup_bridge.core.engines import Engines, get_engines
from markup_bridge.core.scanner import has_legacy_codes, split_segments
from markup_bridge.formatting.escape import unescape

logger = logging.getLogger("markup_bridge.transcoder")


def transcode_segment(segment: str, engines: Optional[Engines] = None) -> str:
    """Convert one tag-free segment from legacy codes to markup.

    Segments without legacy codes come back unchanged. Otherwise the segment
    is parsed as legacy text, written out as markup and unescaped, since
    legacy text never carried markup escaping in the first place.

    Args:
        segment: Text known to contain no markup tags
        engines: Engine bundle (defaults to the global one)

    Returns:
        The segment in markup form
    """
    if not segment:
        return segment

    engines = engines or get_engines()
    if not has_legacy_codes(segment, engines.legacy_pattern):
        return segment

    styled = engines.compact.deserialize(segment)
    converted = unescape(engines.markup.serialize(styled))
    logger.debug("Transcoded segment %r -> %r", segment, converted)
    return converted


def convert_legacy_within_markup(text: str, engines: Optional[Engines] = None) -> str:
    """Convert legacy codes to markup while leaving existing tags alone.

    Example:
        "<bold><red>hello</red></bold> &cworld"
        -> "<bold><red>hello</red></bold> <red>world</red>"

    Tags are copied byte for byte and keep their order; only the text
    between them is transcoded. A legacy code inside a tag argument is part
    of the tag and is not converted.
    """
    engines = engines or get_engines()
    parts: list[str] = []

    for segment in split_segments(text):
        if segment.is_tag:
            parts.append(segment.text)
        else:
            parts.append(transcode_segment(segment.text, engines))

    return "".join(parts)
