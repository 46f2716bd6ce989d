"""Description fallback chains for items, front/blog pages and terms."""

from typing import Optional, Union

from common import logger
from config.config import Config
from excerpt.fetcher import get_excerpt, strip_tags
from excerpt.trimmer import trim_excerpt
from models.models import ContentItem, DescriptionType, SiteSettings, Term

Target = Union[ContentItem, Term]


class RequestContext:
    """Состояние одного запроса: описываемый объект и кэш его выдержки."""

    def __init__(self, target: Optional[Target] = None):
        self.target = target
        self.excerpt: Optional[str] = None

    def clear(self) -> None:
        """Сброс кэша в конце запроса."""
        self.excerpt = None


def _first(*values: str) -> str:
    for value in values:
        if value:
            return value
    return ""


class DescriptionGenerator:
    """Генератор описаний для поиска, Open Graph и Twitter."""

    def __init__(self, settings: Optional[SiteSettings] = None, budgets: Optional[dict] = None):
        self.settings = settings or SiteSettings(auto_description=Config.AUTO_DESCRIPTION)
        self.budgets = {**Config.budgets(), **(budgets or {})}

    def _resolve(self, target: Optional[Target], ctx: Optional[RequestContext]) -> Optional[Target]:
        if target is not None:
            return target
        return ctx.target if ctx else None

    def get_description(self, target: Optional[Target] = None, ctx: Optional[RequestContext] = None) -> str:
        """Custom description, else the generated one."""
        return self.get_description_from_custom_field(target, ctx) or self.get_generated_description(
            target, DescriptionType.SEARCH, ctx
        )

    def get_open_graph_description(
        self, target: Optional[Target] = None, ctx: Optional[RequestContext] = None
    ) -> str:
        return self.get_open_graph_description_from_custom_field(
            target, ctx
        ) or self.get_generated_description(target, DescriptionType.OPENGRAPH, ctx)

    def get_twitter_description(self, target: Optional[Target] = None, ctx: Optional[RequestContext] = None) -> str:
        return self.get_twitter_description_from_custom_field(target, ctx) or self.get_generated_description(
            target, DescriptionType.TWITTER, ctx
        )

    def get_description_from_custom_field(
        self, target: Optional[Target] = None, ctx: Optional[RequestContext] = None
    ) -> str:
        target = self._resolve(target, ctx)
        if target is None:
            return ""
        if isinstance(target, Term):
            return target.custom_description
        if target.is_front_page:
            return _first(self.settings.homepage_description, target.custom_description)
        return target.custom_description

    def get_open_graph_description_from_custom_field(
        self, target: Optional[Target] = None, ctx: Optional[RequestContext] = None
    ) -> str:
        target = self._resolve(target, ctx)
        if target is None:
            return ""
        custom = self.get_description_from_custom_field(target)
        if isinstance(target, Term):
            return _first(target.open_graph_description, custom)
        if target.is_front_page:
            return _first(self.settings.homepage_open_graph_description, target.open_graph_description, custom)
        return _first(target.open_graph_description, custom)

    def get_twitter_description_from_custom_field(
        self, target: Optional[Target] = None, ctx: Optional[RequestContext] = None
    ) -> str:
        target = self._resolve(target, ctx)
        if target is None:
            return ""
        custom = self.get_description_from_custom_field(target)
        if isinstance(target, Term):
            return _first(target.twitter_description, target.open_graph_description, custom)
        if target.is_front_page:
            return _first(
                self.settings.homepage_twitter_description,
                target.twitter_description,
                self.settings.homepage_open_graph_description,
                target.open_graph_description,
                custom,
            )
        return _first(target.twitter_description, target.open_graph_description, custom)

    def get_generated_description(
        self,
        target: Optional[Target] = None,
        description_type=DescriptionType.SEARCH,
        ctx: Optional[RequestContext] = None,
    ) -> str:
        """
        Build a description from the target's own text.

        Without an explicit target the context's target is used and its
        excerpt is computed once per context.

        Args:
            target: Item or term to describe
            description_type: Where the description goes; sets the character budget
            ctx: Request context holding the memoized excerpt

        Returns:
            str: The trimmed description, or "" when generation is disabled
        """
        if not self.settings.auto_description:
            return ""

        description_type = DescriptionType.coerce(description_type)
        if target is not None:
            excerpt = self.get_description_excerpt(target)
        elif ctx is not None and ctx.target is not None:
            if ctx.excerpt is None:
                ctx.excerpt = self.get_description_excerpt(ctx.target)
            excerpt = ctx.excerpt
        else:
            return ""

        budget = self.budgets.get(description_type.value, Config.DESCRIPTION_SEARCH_CHARS)
        description = trim_excerpt(excerpt, budget)
        logger.debug("Generated %s description of %d chars", description_type.value, len(description))
        return description

    def get_description_excerpt(self, target: Target) -> str:
        if isinstance(target, Term):
            return strip_tags(target.description)
        if target.is_blog_page:
            return self.get_description_additions(target)
        if target.is_front_page:
            return get_excerpt(target) or self.get_description_additions(target)
        return get_excerpt(target)

    def get_description_additions(self, item: ContentItem) -> str:
        """Build "Title on Blogname" for the blog and front pages."""
        title = ""
        if item.is_blog_page:
            title = f"Latest posts: {item.title}" if item.title else ""
        elif item.is_front_page:
            title = self.settings.tagline
        if not title:
            return ""
        if not self.settings.blogname:
            return title
        return f"{title} on {self.settings.blogname}"
