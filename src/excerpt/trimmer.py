"""
Excerpt trimming.

Turns raw, tag-free text into a description-sized excerpt that closes at a
sentence end where possible, then at a clause end, and otherwise at a word
end marked with a trailing ellipsis.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple

from common import logger
from common.constants import ELLIPSIS_MARKER

from .entities import decode_entities
from .punctuation import (
    ZERO_WIDTH_JOINER,
    is_closer,
    is_clutter,
    is_cut_boundary,
    is_emoji_modifier,
    is_leading_clutter,
    is_mark,
    is_regional_indicator,
    is_space,
    is_terminal,
    is_wide,
    is_word_char,
)
from .texturize import normalize

MAX_TAIL_WORDS = 3
PLAIN_WHITESPACE = " \t\n\r\0\x0b"


class ScanState(Enum):
    SEEKING_BODY = auto()
    IN_SOFT_BOUNDARY = auto()
    COUNTING_TAIL_WORDS = auto()
    DONE = auto()


@dataclass
class BoundaryScan:
    """What one pass over the excerpt learned about its boundaries."""

    body_start: Optional[int] = None
    last_stop: Optional[int] = None
    sentence_open: bool = False
    tail_words: int = 0
    tail_closed: bool = False


def _skip_marks(text: str, index: int) -> int:
    while index < len(text) and is_mark(text[index]):
        index += 1
    return index


def _open_flag(text: str, index: int) -> bool:
    """True when the regional indicators right before index hold an unpaired one."""
    count = 0
    while index - count > 0 and is_regional_indicator(text[index - count - 1]):
        count += 1
    return count % 2 == 1


def _cluster_end(text: str, index: int) -> int:
    """Move a cut point at index past the rest of the character cluster it falls in."""
    while index < len(text):
        char = text[index]
        if is_mark(char) or is_emoji_modifier(char) or char == ZERO_WIDTH_JOINER:
            index += 1
        elif index > 0 and text[index - 1] == ZERO_WIDTH_JOINER:
            index += 1
        elif is_regional_indicator(char) and _open_flag(text, index):
            index += 1
        else:
            break
    return index


def _last_base(text: str) -> str:
    index = len(text) - 1
    while index > 0 and is_mark(text[index]):
        index -= 1
    return text[index]


def _coarse_cut(text: str, max_chars: int) -> Tuple[str, bool]:
    text = _strip_leading_clutter(text.strip(PLAIN_WHITESPACE))
    if max_chars <= 0 or not text:
        return "", False
    if len(text) <= max_chars:
        return text, False

    # A boundary at index 0 would leave no content.
    end = max_chars
    for index in range(max_chars, 0, -1):
        if is_cut_boundary(text[index]):
            end = index + 1
            break

    end = _cluster_end(text, end)
    return text[:end].strip(PLAIN_WHITESPACE), end < len(text)


def coarse_cut(text: str, max_chars: int) -> str:
    """
    Cut text to at most max_chars characters, ending on a word or punctuation boundary.

    Leading clutter is dropped before the budget is counted. The boundary
    character itself is kept, so the cut may hold one character more than the
    budget. Without any boundary in reach the text is cut at the budget
    exactly, never inside a combining sequence, an emoji sequence or a flag.

    Args:
        text (str): Decoded text
        max_chars (int): Character budget

    Returns:
        str: The whitespace-trimmed cut
    """
    return _coarse_cut(text, max_chars)[0]


def _stop_end(text: str, index: int) -> int:
    """Index right after the stop at index, closers included; -1 when there is none."""
    char = text[index]
    if not is_terminal(char):
        return -1
    if index == 0 or is_space(text[index - 1]):
        return -1
    end = _skip_marks(text, index + 1)
    while end < len(text) and is_closer(text[end]):
        end = _skip_marks(text, end + 1)
    # Wide scripts write the next sentence right after the stop.
    if end < len(text) and is_word_char(text[end]) and not is_wide(char):
        return -1
    return end


def scan_boundaries(text: str) -> BoundaryScan:
    """Walk the excerpt once, tracking the last stop and the words dangling after it."""
    scan = BoundaryScan()
    state = ScanState.SEEKING_BODY
    index = 0

    while state is not ScanState.DONE:
        if index >= len(text):
            state = ScanState.DONE
            continue

        char = text[index]

        if state is ScanState.SEEKING_BODY:
            if is_leading_clutter(char):
                index = _skip_marks(text, index + 1)
                continue
            scan.body_start = index
            state = ScanState.IN_SOFT_BOUNDARY
            continue

        stop_end = _stop_end(text, index)
        if stop_end != -1:
            scan.last_stop = stop_end
            scan.sentence_open = False
            scan.tail_words = 0
            scan.tail_closed = False
            state = ScanState.IN_SOFT_BOUNDARY
            index = stop_end
            continue

        if is_word_char(char):
            if state is not ScanState.COUNTING_TAIL_WORDS:
                scan.tail_words += 1
            state = ScanState.COUNTING_TAIL_WORDS
            scan.sentence_open = True
            scan.tail_closed = False
        else:
            state = ScanState.IN_SOFT_BOUNDARY
            if not is_space(char):
                scan.sentence_open = True
                scan.tail_closed = is_closer(char)

        index = _skip_marks(text, index + 1)

    return scan


def _refine(text: str) -> Tuple[str, bool]:
    scan = scan_boundaries(text)
    if scan.body_start is None:
        return "", False

    if scan.last_stop is None:
        logger.debug("Excerpt has no sentence stop, keeping the body")
        return text[scan.body_start :], False

    if not scan.sentence_open:
        logger.debug("Excerpt ends on a sentence stop")
        return text[scan.body_start :], False

    if scan.tail_closed and scan.tail_words <= MAX_TAIL_WORDS:
        logger.debug("Keeping closed tail of %d words", scan.tail_words)
        return text[scan.body_start :], False

    logger.debug("Dropping dangling tail of %d words", scan.tail_words)
    return text[scan.body_start : scan.last_stop], True


def refine(text: str) -> str:
    """Close the excerpt at its best sentence or clause boundary."""
    return _refine(text)[0]


def _strip_leading_clutter(text: str) -> str:
    start = 0
    while start < len(text) and is_leading_clutter(text[start]):
        start = _skip_marks(text, start + 1)
    return text[start:]


def _strip_trailing_clutter(text: str) -> str:
    end = len(text)
    while end > 0:
        base = end - 1
        while base >= 0 and is_mark(text[base]):
            base -= 1
        if base < 0:
            return ""
        if not is_clutter(text[base]):
            break
        end = base
    return text[:end]


def cleanup(text: str, truncated: bool = True, source_length: Optional[int] = None) -> str:
    """
    Strip clutter from both edges and mark a truncated, open-ended excerpt with an ellipsis.

    The ellipsis is left out when adding it would make the excerpt longer than
    its source.
    """
    text = _strip_trailing_clutter(_strip_leading_clutter(text))
    if not text:
        return ""

    last = _last_base(text)
    if truncated and not (is_terminal(last) or is_closer(last)):
        if source_length is None or len(text) + len(ELLIPSIS_MARKER) <= source_length:
            text += ELLIPSIS_MARKER

    return text.strip(PLAIN_WHITESPACE)


def trim_excerpt(text, max_chars: int) -> str:
    """
    Trim text to a description-sized excerpt.

    Args:
        text (str): Tag-free text, possibly holding HTML character references
        max_chars (int): Character budget for the coarse cut

    Returns:
        str: The decoded excerpt; escape it before printing it into markup
    """
    if text is None:
        return ""
    if not isinstance(text, str):
        text = str(text)

    source = decode_entities(text).strip(PLAIN_WHITESPACE)
    excerpt, cut = _coarse_cut(source, max_chars)
    if not excerpt:
        return ""

    excerpt, dropped = _refine(normalize(excerpt))
    return cleanup(excerpt, cut or dropped, len(source))
