"""Page template: a queried content record in, a complete HTML page out."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from ..config import THEME_STORAGE_KEY
from ..theme import Theme, ThemeResolver
from .hooks import PrerenderHooks, theme_hook
from .templates import html_doc, layout, movable_sidebar_content, page, sidebar


class SiteMetadata(BaseModel):
    """Site-wide metadata."""

    title: str
    subtitle: str = ""


class Frontmatter(BaseModel):
    """Front-matter fields of a markdown page."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str
    date: dt.datetime | dt.date | None = None
    description: str | None = None
    slug: str | None = None
    hide_subscribe: bool = Field(default=False, alias="hideSubscribe")
    hide_ad: bool = Field(default=False, alias="hideAd")


class MarkdownRecord(BaseModel):
    """A markdown page after rendering."""

    id: str
    slug: str
    html: str
    frontmatter: Frontmatter
    source: str = ""


class PageData(BaseModel):
    """Everything the page template reads."""

    site: SiteMetadata
    markdown_remark: MarkdownRecord


def page_title(data: PageData) -> str:
    return f"{data.markdown_remark.frontmatter.title} - {data.site.title}"


def meta_description(data: PageData) -> str:
    description = data.markdown_remark.frontmatter.description
    return description if description is not None else data.site.subtitle


def page_template(data: PageData, theme: Theme, storage_key: str = THEME_STORAGE_KEY) -> str:
    site = data.site
    fm = data.markdown_remark.frontmatter

    body = "\n".join(
        [
            layout(
                sidebar(site.title, site.subtitle, hide_subscribe=fm.hide_subscribe, hide_ad=fm.hide_ad),
                page(fm.title, data.markdown_remark.html),
            ),
            movable_sidebar_content(mobile=True),
        ]
    )
    return html_doc(
        title=page_title(data),
        description=meta_description(data),
        theme=theme,
        body=body,
        storage_key=storage_key,
    )


def render_page(
    data: PageData,
    resolver: ThemeResolver,
    hooks: PrerenderHooks | None = None,
) -> str:
    """Render a page, resolving the theme before any content is produced.

    The resolver's hook always runs first; ``hooks`` run after it, so they can
    read ``context["theme"]``. Only then is the page body rendered.
    """
    pipeline = PrerenderHooks([theme_hook(resolver)])
    if hooks is not None:
        pipeline.register(hooks.run)
    context = pipeline.run({"page": data})
    return page_template(data, context["theme"], storage_key=resolver.key)
