"""
Unicode punctuation classes used to find sentence and clause boundaries.

Every class is a lookup on the Unicode general category of a single
character, so the trimmer behaves the same for every script the installed
Unicode database knows about.
"""

import unicodedata

INVERTED_MARKS = "¡¿"  # ¡ ¿
NON_TERMINAL_PO = "'\":" + INVERTED_MARKS
EDGE_PUNCTUATION = ":;,"
ZERO_WIDTH_JOINER = "\u200d"
# Flags are pairs of regional indicators; skin tones follow their emoji.
REGIONAL_INDICATOR_FIRST, REGIONAL_INDICATOR_LAST = "\U0001f1e6", "\U0001f1ff"
EMOJI_MODIFIER_FIRST, EMOJI_MODIFIER_LAST = "\U0001f3fb", "\U0001f3ff"


def category(ch: str) -> str:
    return unicodedata.category(ch)


def is_mark(ch: str) -> bool:
    return category(ch).startswith("M")


def is_space(ch: str) -> bool:
    return category(ch).startswith("Z") or ch in "\t\n\r\x0b\x0c"


def is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def is_wide(ch: str) -> bool:
    """Wide or fullwidth character; such scripts put no space after a stop."""
    return unicodedata.east_asian_width(ch) in ("W", "F")


def is_regional_indicator(ch: str) -> bool:
    return REGIONAL_INDICATOR_FIRST <= ch <= REGIONAL_INDICATOR_LAST


def is_emoji_modifier(ch: str) -> bool:
    return EMOJI_MODIFIER_FIRST <= ch <= EMOJI_MODIFIER_LAST


def is_terminal(ch: str) -> bool:
    """Other punctuation (Po) that may close a sentence: `.`, `!`, `?`, `…`, `,`..."""
    return category(ch) == "Po" and ch not in NON_TERMINAL_PO


def is_soft_boundary(ch: str) -> bool:
    """Connector, dash, final quote, separator, mark, or an inverted Latin mark."""
    cat = category(ch)
    return cat in ("Pc", "Pd", "Pf") or cat[0] in ("Z", "M") or ch in INVERTED_MARKS


def is_cut_boundary(ch: str) -> bool:
    return is_terminal(ch) or is_soft_boundary(ch)


def is_closer(ch: str) -> bool:
    """Closing bracket or final quote."""
    return category(ch) in ("Pe", "Pf")


def is_clutter(ch: str) -> bool:
    cat = category(ch)
    return (
        cat in ("Pc", "Pd")
        or cat[0] in ("Z", "M")
        or ch in INVERTED_MARKS
        or ch in EDGE_PUNCTUATION
        or is_space(ch)
    )


def is_leading_clutter(ch: str) -> bool:
    # ¡ and ¿ open a sentence in Spanish; keep them at the start.
    if ch in INVERTED_MARKS:
        return False
    return is_clutter(ch) or is_terminal(ch)
