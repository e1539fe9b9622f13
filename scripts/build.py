import logging

from app.dependencies import get_posts_repo
from app.services.posts_service import PostsService
from app.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    service = PostsService(repo=get_posts_repo())
    try:
        written = service.build(settings.OUTPUT_DIR)
        logger.info(f"Build completed: {len(written)} pages in {settings.OUTPUT_DIR}")
    except Exception as e:
        logger.error(f"Build failed: {e}", exc_info=True)
        raise SystemExit(1)
