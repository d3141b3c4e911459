import re

from xmldebug.models import ContentSummary

_whitespace_pattern = re.compile(r"\s+")

TRUNCATION_MARKER = "..."


def summarize(raw: str, max_len: int) -> ContentSummary:
    """
    Builds a short preview of a text value, collapsing whitespace HTML-style.

    Args:
        raw (str): The text to preview.
        max_len (int): Maximum number of characters kept before the marker.

    Returns:
        ContentSummary: The extract, plus the length of `raw` as given.
    """
    extract = _whitespace_pattern.sub(" ", raw).strip()
    if len(extract) > max_len:
        extract = extract[:max_len] + TRUNCATION_MARKER
    return ContentSummary(text=extract, raw_length=len(raw))
