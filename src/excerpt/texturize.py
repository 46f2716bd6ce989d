"""
Typographic substitution of plain ASCII punctuation.

Straight quotes, double hyphens and triple dots become their display forms.
Substitutions are emitted as numeric character references, the way the
publishing platform renders them, so callers decode the result before
inspecting its characters.
"""

import re

from .entities import decode_entities

OPENING_SINGLE = "&#8216;"
CLOSING_SINGLE = "&#8217;"
OPENING_DOUBLE = "&#8220;"
CLOSING_DOUBLE = "&#8221;"
EN_DASH = "&#8211;"
EM_DASH = "&#8212;"
HELLIP = "&#8230;"
TRADE = "&#8482;"
TIMES = "&#215;"

STATIC_REPLACEMENTS = (
    ("...", HELLIP),
    ("``", OPENING_DOUBLE),
    ("''", CLOSING_DOUBLE),
    (" (tm)", " " + TRADE),
)

DYNAMIC_REPLACEMENTS = (
    # Abbreviated years: '99, '90s.
    (re.compile(r"'(?=\d\ds?\b)"), CLOSING_SINGLE),
    # Opening single quote at the start or after whitespace/opening brackets.
    (re.compile(r"(?:^|(?<=[\s(\[{<\"\-]))'"), OPENING_SINGLE),
    # Apostrophe inside a word.
    (re.compile(r"(?<=\w)'(?=\w)"), CLOSING_SINGLE),
    # Opening double quote, not followed by a space.
    (re.compile(r"(?:^|(?<=[\s(\[{<\-]))\"(?!\s)"), OPENING_DOUBLE),
    # Dashes.
    (re.compile(r"---"), EM_DASH),
    (re.compile(r"(?:^|(?<=\s))--(?=$|\s)"), EM_DASH),
    (re.compile(r"(?<!xn)--"), EN_DASH),
    (re.compile(r"(?:^|(?<=\s))-(?=$|\s)"), EN_DASH),
    # Dimensions: 3x4.
    (re.compile(r"(?<=\d)x(?=\d)"), TIMES),
    # Everything left over closes.
    (re.compile(r"'"), CLOSING_SINGLE),
    (re.compile(r"\""), CLOSING_DOUBLE),
)

LONE_AMPERSAND = re.compile(r"&(?!#(?:\d+|x[a-f0-9]+);|[a-z1-4]{1,8};)", re.IGNORECASE)


def texturize(text: str) -> str:
    """Replace plain punctuation with typographic character references."""
    if not text:
        return ""
    for plain, fancy in STATIC_REPLACEMENTS:
        text = text.replace(plain, fancy)
    for pattern, fancy in DYNAMIC_REPLACEMENTS:
        text = pattern.sub(fancy, text)
    return LONE_AMPERSAND.sub("&#038;", text)


def normalize(text: str) -> str:
    """Texturize, then decode the references the substitution introduced."""
    return decode_entities(texturize(text))
