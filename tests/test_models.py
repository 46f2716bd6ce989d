import pytest
from pydantic import ValidationError

from models.models import ContentItem, DescriptionType, SiteSettings, Term


def test_content_item_cleans_text():
    item = ContentItem(id=1, title="  Title  ", excerpt=None, custom_description="  Custom ")
    assert item.title == "Title"
    assert item.excerpt == ""
    assert item.custom_description == "Custom"


def test_content_item_keeps_content():
    item = ContentItem(id=1, content="  <p>Body</p>\n")
    assert item.content == "  <p>Body</p>\n"
    assert ContentItem(id=1, content=None).content == ""


def test_content_item_rejects_negative_id():
    with pytest.raises(ValidationError):
        ContentItem(id=-1)


def test_term_requires_taxonomy():
    with pytest.raises(ValidationError):
        Term(id=1, taxonomy="   ")
    assert Term(id=1, taxonomy=" post_tag ").taxonomy == "post_tag"


def test_site_settings_defaults():
    settings = SiteSettings(blogname=" My Blog ")
    assert settings.blogname == "My Blog"
    assert settings.auto_description is True


def test_description_type_coerce():
    test_cases = [
        ("search", DescriptionType.SEARCH),
        ("opengraph", DescriptionType.OPENGRAPH),
        (DescriptionType.TWITTER, DescriptionType.TWITTER),
        ("facebook", DescriptionType.SEARCH),
        (None, DescriptionType.SEARCH),
    ]

    for value, expected in test_cases:
        assert DescriptionType.coerce(value) is expected, f"Coercion failed for {value!r}"
