from app.components.base import Html
from app.components.layout import Layout
from app.components.pagination import Pagination
from app.components.post_card import PostCardContainer
from app.components.seo import SEO
from app.schemas.blog import PageContext, PostsData
from app.services.posts_query import PostsQuery


def query(skip: int, limit: int, include_drafts: bool = False) -> PostsQuery:
    """The page of posts this template expects, newest first."""
    return PostsQuery(skip=skip, limit=limit, include_drafts=include_drafts)


def posts_page(data: PostsData, page_context: PageContext) -> Layout:
    return Layout(
        children=[
            Html("h1", ["Posts"], class_name="page__title"),
            SEO(title="Posts"),
            PostCardContainer(posts=data.allMarkdownRemark.edges),
            Pagination(
                pageCount=page_context.pageCount,
                currentPage=page_context.currentPage,
                base=page_context.base,
            ),
        ]
    )
