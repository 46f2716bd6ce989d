"""
Description Package

Fallback chains that pick or generate a description for a page, post or term.
"""

from .generator import DescriptionGenerator, RequestContext

__all__ = ["DescriptionGenerator", "RequestContext"]
