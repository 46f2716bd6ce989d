"""
Модуль для сокращения текста до описания.
"""

from .entities import decode_entities
from .fetcher import fetch_excerpt, get_excerpt, strip_tags
from .texturize import normalize, texturize
from .trimmer import MAX_TAIL_WORDS, coarse_cut, cleanup, refine, trim_excerpt

__all__ = [
    "MAX_TAIL_WORDS",
    "cleanup",
    "coarse_cut",
    "decode_entities",
    "fetch_excerpt",
    "get_excerpt",
    "normalize",
    "refine",
    "strip_tags",
    "texturize",
    "trim_excerpt",
]
