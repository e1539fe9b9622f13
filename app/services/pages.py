import math
from typing import List

from pydantic import BaseModel

from app.schemas.blog import PageContext


class PageSpec(BaseModel):
    path: str
    context: PageContext


def page_path(base: str, page: int) -> str:
    base = base.rstrip("/") or "/"
    if page == 1:
        return base
    return f"{base.rstrip('/')}/{page}"


def create_posts_pages(total: int, per_page: int, base: str) -> List[PageSpec]:
    """One listing page per ``per_page`` posts; an empty blog still gets page 1."""
    if per_page < 1:
        raise ValueError("per_page must be at least 1")
    page_count = max(1, math.ceil(total / per_page))
    return [
        PageSpec(
            path=page_path(base, page),
            context=PageContext(
                base=base,
                currentPage=page,
                pageCount=page_count,
                skip=(page - 1) * per_page,
                limit=per_page,
            ),
        )
        for page in range(1, page_count + 1)
    ]
