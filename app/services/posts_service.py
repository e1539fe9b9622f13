import datetime
import logging
from pathlib import Path
from typing import List, Optional

from app.schemas.blog import PostNode, PostsPageProps
from app.services.markdown_nodes import build_nodes
from app.services.pages import PageSpec, create_posts_pages
from app.services.posts_query import resolve_posts_query, visible_posts
from app.settings import settings
from app.templates import posts as posts_template
from app.templates.prop_types import check_prop_types

logger = logging.getLogger(__name__)


class PageNotFound(Exception):
    def __init__(self, page: int, page_count: int):
        super().__init__(f"Page {page} not found (page count {page_count})")
        self.page = page
        self.page_count = page_count


class PostsService:
    def __init__(
        self,
        repo,
        *,
        per_page: Optional[int] = None,
        base: Optional[str] = None,
        include_drafts: Optional[bool] = None,
        today: Optional[datetime.date] = None,
    ):
        self.repo = repo
        self.per_page = settings.POSTS_PER_PAGE if per_page is None else per_page
        self.base = settings.POSTS_BASE if base is None else base
        self.include_drafts = (
            settings.INCLUDE_DRAFTS if include_drafts is None else include_drafts
        )
        self.today = today

    def load_nodes(self) -> List[PostNode]:
        sources = self.repo.list_post_sources()
        nodes = build_nodes(sources, today=self.today or datetime.date.today())
        logger.debug(f"Built {len(nodes)} post nodes from {len(sources)} sources")
        return nodes

    def pages(self, nodes: List[PostNode]) -> List[PageSpec]:
        total = len(visible_posts(nodes, self.include_drafts))
        return create_posts_pages(total, self.per_page, self.base)

    def get_page_props(
        self, page: int, nodes: Optional[List[PostNode]] = None
    ) -> PostsPageProps:
        nodes = self.load_nodes() if nodes is None else nodes
        specs = self.pages(nodes)
        if page < 1 or page > len(specs):
            raise PageNotFound(page, len(specs))
        return self._props_for(specs[page - 1], nodes)

    def render_page(self, page: int, nodes: Optional[List[PostNode]] = None) -> str:
        return self._render(self.get_page_props(page, nodes))

    def build(self, out_dir: str | Path) -> List[Path]:
        """Write one ``index.html`` per listing page and return the paths."""
        out_dir = Path(out_dir)
        nodes = self.load_nodes()
        written = []
        for spec in self.pages(nodes):
            target = out_dir / spec.path.strip("/") / "index.html"
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(self._render(self._props_for(spec, nodes)), encoding="utf-8")
            logger.info(f"Wrote {spec.path} -> {target}")
            written.append(target)
        return written

    def _props_for(self, spec: PageSpec, nodes: List[PostNode]) -> PostsPageProps:
        request = posts_template.query(
            skip=spec.context.skip,
            limit=spec.context.limit or self.per_page,
            include_drafts=self.include_drafts,
        )
        data = resolve_posts_query(request, nodes)
        check_prop_types(
            {
                "data": data.model_dump(warnings=False),
                "pageContext": spec.context.model_dump(),
            },
            PostsPageProps,
            "Posts",
        )
        # A shape mismatch is reported above, never rejected here
        return PostsPageProps.model_construct(data=data, pageContext=spec.context)

    @staticmethod
    def _render(props: PostsPageProps) -> str:
        tree = posts_template.posts_page(props.data, props.pageContext)
        return tree.render()
