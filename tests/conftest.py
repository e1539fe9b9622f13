import textwrap

import pycouchdb

from app.repos.posts_repo import PostSource
from app.schemas.blog import (
    AllMarkdownRemark,
    Fields,
    Frontmatter,
    PostEdge,
    PostNode,
    PostsData,
)


class FakeCouchDB:
    """
    Minimal in-memory CouchDB stand-in.
    Set track_calls=True to record the order of get() calls.
    """

    def __init__(self, docs: dict, track_calls: bool = False):
        self.docs = docs
        self.track_calls = track_calls
        self.calls = []

    def get(self, doc_id: str) -> dict:
        if self.track_calls:
            self.calls.append(doc_id)
        if doc_id not in self.docs:
            raise pycouchdb.exceptions.NotFound(doc_id)
        return self.docs[doc_id]

    def all(self, include_docs: bool = True):
        if self.track_calls:
            self.calls.append(f"all(include_docs={include_docs})")
        if include_docs:
            return [{"doc": doc} for doc in self.docs.values()]
        return list(self.docs.values())


class FakeRepo:
    """
    Minimal repo stand-in used in service tests.
    """

    def __init__(self, sources):
        self.sources = sources
        self.calls = 0

    def list_post_sources(self):
        self.calls += 1
        return list(self.sources)


class FakePostsService:
    """
    Minimal posts service stand-in for router tests.
    """

    def __init__(self, html="<html></html>", props=None, error=None):
        self.html = html
        self.props = props
        self.error = error
        self.pages = []

    def render_page(self, page: int):
        self.pages.append(page)
        if self.error:
            raise self.error
        return self.html

    def get_page_props(self, page: int):
        self.pages.append(page)
        if self.error:
            raise self.error
        return self.props


def make_source(path: str, markdown: str, absolute_path=None) -> PostSource:
    return PostSource(
        id=path,
        path=path,
        absolute_path=absolute_path,
        markdown=textwrap.dedent(markdown).lstrip(),
    )


def make_node(index: int, **frontmatter) -> PostNode:
    frontmatter.setdefault("title", f"Post {index}")
    frontmatter.setdefault("date", f"2024-01-{index:02d}")
    return PostNode(
        id=f"id-{index}",
        excerpt=f"Excerpt {index}",
        timeToRead=1,
        frontmatter=Frontmatter(**frontmatter),
        fields=Fields(slug=f"/post-{index}/"),
    )


def make_data(count: int) -> PostsData:
    return PostsData(
        allMarkdownRemark=AllMarkdownRemark(
            edges=[PostEdge(node=make_node(i)) for i in range(1, count + 1)]
        )
    )
