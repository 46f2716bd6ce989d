"""Raw excerpt extraction from content items."""

import re

from bs4 import BeautifulSoup

from common import logger
from models.models import ContentItem

WHITESPACE_RE = re.compile(r"\s+")
# Embeds: a bare URL alone on its line, or alone inside a paragraph.
NEWLINE_URL_RE = re.compile(r"^[ \t]*https?://[^\s<>\"']+[ \t]*$", re.MULTILINE)
PARAGRAPH_URL_RE = re.compile(r"<p(?:\s[^>]*)?>\s*https?://[^\s<>\"']+\s*</p>", re.IGNORECASE)
BLOCK_TAGS = [
    "address", "article", "aside", "blockquote", "br", "dd", "div", "dl", "dt", "figcaption",
    "footer", "h1", "h2", "h3", "h4", "h5", "h6", "header", "hr", "li", "ol", "p", "pre",
    "section", "table", "td", "th", "tr", "ul",
]


def strip_tags(markup: str) -> str:
    """Очистка текста от html-тегов, скриптов, стилей и лишних пробелов."""
    if not markup:
        return ""
    soup = BeautifulSoup(markup, "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()
    # Block elements separate words; inline ones do not.
    for tag in soup.find_all(BLOCK_TAGS):
        tag.insert_before(" ")
        tag.insert_after(" ")
    return WHITESPACE_RE.sub(" ", soup.get_text()).strip()


def strip_newline_urls(text: str) -> str:
    return NEWLINE_URL_RE.sub("", text)


def strip_paragraph_urls(text: str) -> str:
    return PARAGRAPH_URL_RE.sub("", text)


def fetch_excerpt(item: ContentItem) -> str:
    """
    Get the raw excerpt of an item: its manual excerpt, else its content.

    Content laid out by a page builder is skipped since its markup says
    little about the page. Embed URLs are dropped from the content.
    """
    if item.excerpt:
        return item.excerpt
    if item.uses_page_builder:
        logger.debug("Item %d uses a page builder, no excerpt", item.id)
        return ""
    excerpt = item.content
    if excerpt:
        excerpt = strip_paragraph_urls(strip_newline_urls(excerpt))
    return excerpt


def get_excerpt(item: ContentItem) -> str:
    """Tag-free excerpt of an item; protected items never expose one."""
    if item.protected:
        logger.debug("Item %d is protected, no excerpt", item.id)
        return ""
    excerpt = fetch_excerpt(item)
    if not excerpt:
        return ""
    return strip_tags(excerpt)
