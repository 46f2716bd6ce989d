"""HTML character reference decoding."""

from html import unescape


def decode_entities(text: str) -> str:
    """
    Decode numeric and named HTML character references into literal characters.

    Malformed or unknown references are left as they are.

    Args:
        text (str): Text that may contain references such as ``&amp;`` or ``&#8230;``

    Returns:
        str: The decoded text
    """
    if not text:
        return ""
    if "&" not in text:
        return text
    return unescape(text)
