from dataclasses import dataclass
from typing import List

from app.components.base import Component
from app.schemas.blog import PostEdge, PostNode


def days_ago_label(days: int | None) -> str:
    if not days:
        return "today"
    if days == 1:
        return "1 day ago"
    return f"{days} days ago"


@dataclass
class PostCard(Component):
    node: PostNode

    def render(self) -> str:
        fm = self.node.frontmatter
        href = self.node.fields.slug or "#"
        excerpt = fm.excerpt or self.node.excerpt

        parts = ['<article class="card">']
        thumbnail = self._render_thumbnail()
        if thumbnail:
            parts.append(thumbnail)
        parts.append('<div class="card__body">')
        parts.append(
            f'<h2 class="card__title"><a {self.attributes(href=href)}>'
            f"{self.escape(fm.title)}</a></h2>"
        )
        parts.append(self._render_meta())
        if excerpt:
            parts.append(f'<p class="card__excerpt">{self.escape(excerpt)}</p>')
        parts.append(self._render_terms("card__categories", fm.categories))
        parts.append(self._render_terms("card__tags", fm.tags, prefix="#"))
        parts.append("</div>")
        parts.append("</article>")
        return "\n".join(part for part in parts if part)

    def _render_thumbnail(self) -> str:
        image = self.node.frontmatter.featuredImage
        if not image:
            return ""
        data = image.imageData
        fallback = data.images.fallback
        attrs = self.attributes(
            class_="card__image",
            src=fallback.src,
            srcset=fallback.srcSet,
            sizes=fallback.sizes,
            width=data.width,
            height=data.height,
            alt="",
            loading="lazy",
            decoding="async",
        )
        return f"<img {attrs}>"

    def _render_meta(self) -> str:
        fm = self.node.frontmatter
        items = [days_ago_label(fm.daysAgo)]
        if self.node.timeToRead:
            items.append(f"{self.node.timeToRead} min read")
        inner = " · ".join(self.escape(item) for item in items)
        return f'<p class="card__meta">{inner}</p>'

    def _render_terms(self, class_name: str, terms: List[str], prefix: str = "") -> str:
        if not terms:
            return ""
        items = "".join(f"<li>{self.escape(prefix + term)}</li>" for term in terms)
        return f'<ul class="{class_name}">{items}</ul>'


@dataclass
class PostCardContainer(Component):
    posts: List[PostEdge]

    def render(self) -> str:
        if not self.posts:
            return '<section class="cards cards--empty"><p>No posts yet.</p></section>'
        cards = "\n".join(PostCard(edge.node).render() for edge in self.posts)
        return f'<section class="cards">\n{cards}\n</section>'
