"""Placeholder substitution for SEO plugin title and description templates.

Each plugin writes its own template syntax (``%%title%%`` for Yoast,
``%title%`` for RankMath, ``#post_title`` for All in One SEO) over roughly the
same vocabulary.  Substitution is a plain string replace over a fixed set of
placeholders; anything outside the vocabulary is left exactly as written.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Mapping, Optional

from app.models.content import ContentItem
from app.services.sanitizer import strip_all_tags


@dataclass(frozen=True)
class TemplateContext:
    title: str = ""
    sitename: str = ""
    sitedesc: str = ""
    sep: str = "-"
    excerpt: str = ""
    date: str = ""
    modified: str = ""
    author: str = ""
    category: str = ""
    tag: str = ""

    def as_dict(self) -> Dict[str, str]:
        return {
            "title": self.title,
            "sitename": self.sitename,
            "sitedesc": self.sitedesc,
            "sep": self.sep,
            "excerpt": self.excerpt,
            "date": self.date,
            "modified": self.modified,
            "author": self.author,
            "category": self.category,
            "tag": self.tag,
        }


def format_date(value: Optional[datetime]) -> str:
    """Render *value* the way WordPress' default date format does (``January 5, 2024``)."""
    if value is None:
        return ""
    return f"{value:%B} {value.day}, {value.year}"


def build_context(
    item: ContentItem,
    site_name: str,
    site_description: str = "",
    sep: str = "-",
) -> TemplateContext:
    return TemplateContext(
        title=item.title,
        sitename=site_name,
        sitedesc=site_description,
        sep=sep,
        excerpt=strip_all_tags(item.excerpt),
        date=format_date(item.published_at),
        modified=format_date(item.modified_at),
        author=item.author_name,
        category=item.primary_term("category"),
        tag=item.primary_term("post_tag"),
    )


def replace_vars(
    template: str,
    context: TemplateContext,
    prefix: str = "%",
    suffix: str = "%",
    names: Optional[Mapping[str, str]] = None,
) -> str:
    """Expand ``{prefix}name{suffix}`` placeholders in *template*.

    *names* maps the placeholder names a plugin understands onto the shared
    vocabulary (e.g. Yoast's ``name`` → ``author``); by default the shared
    vocabulary is used as-is.  Longer names are replaced first so that
    ``#post_title`` is never cut short by a shorter placeholder.
    """
    values = context.as_dict()
    if names is None:
        names = {name: name for name in values}

    result = template
    for name in sorted(names, key=len, reverse=True):
        result = result.replace(f"{prefix}{name}{suffix}", values[names[name]])
    return result
