import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse

from app import dependencies as deps
from app.schemas.blog import PostsPageProps
from app.services.posts_service import PageNotFound, PostsService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts", response_class=HTMLResponse)
def posts_index(service: PostsService = Depends(deps.get_posts_service)):
    """First page of the posts listing."""
    return _render(service, 1)


@router.get("/posts/{page}", response_class=HTMLResponse)
def posts_page(page: int, service: PostsService = Depends(deps.get_posts_service)):
    """A later page of the posts listing."""
    return _render(service, page)


@router.get("/api/posts", response_model=PostsPageProps)
def posts_props(
    page: int = Query(1),
    service: PostsService = Depends(deps.get_posts_service),
):
    """The data and page context a listing page is rendered from."""
    try:
        return service.get_page_props(page)
    except PageNotFound:
        raise HTTPException(status_code=404, detail="Page not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error loading posts page {page}: {e}")
        raise HTTPException(status_code=500, detail="Failed to load posts")


def _render(service: PostsService, page: int) -> HTMLResponse:
    try:
        return HTMLResponse(service.render_page(page))
    except PageNotFound:
        raise HTTPException(status_code=404, detail="Page not found")
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error rendering posts page {page}: {e}")
        raise HTTPException(status_code=500, detail="Failed to render posts")
