import datetime
from typing import Iterable, Literal, Optional

from pydantic import BaseModel, Field

from app.schemas.blog import AllMarkdownRemark, PostEdge, PostNode, PostsData


class PostsQuery(BaseModel):
    """Typed request for one page of posts, newest first."""

    skip: int = Field(0, ge=0)
    limit: int = Field(..., ge=1)
    sort_field: Literal["frontmatter.date"] = "frontmatter.date"
    order: Literal["DESC", "ASC"] = "DESC"
    include_drafts: bool = False


def date_sort_key(value: Optional[str]) -> Optional[datetime.datetime]:
    """Comparable UTC timestamp for an ISO date or datetime string."""
    if not value:
        return None
    try:
        moment = datetime.datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if moment.tzinfo is not None:
        moment = moment.astimezone(datetime.timezone.utc).replace(tzinfo=None)
    return moment


def sort_posts(nodes: Iterable[PostNode], order: str = "DESC") -> list[PostNode]:
    # Undated posts always trail, in title order
    keyed = [(date_sort_key(n.frontmatter.date), n) for n in nodes]
    dated = [(key, n) for key, n in keyed if key is not None]
    undated = [n for key, n in keyed if key is None]
    dated.sort(key=lambda pair: (pair[1].frontmatter.title or "").lower())
    dated.sort(key=lambda pair: pair[0], reverse=order == "DESC")
    undated.sort(key=lambda n: (n.frontmatter.title or "").lower())
    return [n for _, n in dated] + undated


def visible_posts(nodes: Iterable[PostNode], include_drafts: bool) -> list[PostNode]:
    return [n for n in nodes if include_drafts or not n.frontmatter.draft]


def resolve_posts_query(query: PostsQuery, nodes: Iterable[PostNode]) -> PostsData:
    nodes = visible_posts(list(nodes), query.include_drafts)
    ordered = sort_posts(nodes, query.order)
    page = ordered[query.skip : query.skip + query.limit]
    return PostsData(
        allMarkdownRemark=AllMarkdownRemark(edges=[PostEdge(node=n) for n in page])
    )
