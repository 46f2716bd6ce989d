"""
Models Package

Content, term and site models the descriptions are built from.
"""

from .models import ContentItem, DescriptionType, SiteSettings, Term

__all__ = ["ContentItem", "DescriptionType", "SiteSettings", "Term"]
