import logging
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel

from app.services.content_parser import ContentParser
from app.settings import settings

logger = logging.getLogger(__name__)


class PostSource(BaseModel):
    """A raw markdown document before it is turned into a post node."""

    id: str
    path: str
    absolute_path: Optional[str] = None
    markdown: str


class CouchPostsRepo:
    def __init__(self, couch_db, parser: Optional[ContentParser] = None):
        self.db = couch_db
        self.parser = parser or ContentParser(couch_db)

    def list_blog_docs(self) -> List[dict]:
        all_docs = [row.get("doc", row) for row in self.db.all(include_docs=True)]
        return [doc for doc in all_docs if self._is_valid(doc)]

    def list_post_sources(self) -> List[PostSource]:
        sources = []
        for doc in self.list_blog_docs():
            markdown = self.parser.get_markdown_content(doc)
            if not markdown:
                logger.warning(f"No markdown content found for {doc.get('_id')}")
                continue
            path = doc.get("path") or doc["_id"]
            sources.append(
                PostSource(
                    id=doc["_id"],
                    path=path,
                    absolute_path=f"couchdb://{settings.COUCHDB_DATABASE}/{path}",
                    markdown=markdown,
                )
            )
        return sources

    @staticmethod
    def _is_valid(doc: dict | None) -> bool:
        if not doc:
            return False
        path = doc.get("path", doc.get("_id", ""))
        return (
            doc.get("type") == "plain"
            and path.startswith(settings.BLOG_PREFIX)
            and path.endswith(".md")
            and not doc.get("deleted", False)
        )


class FilesystemPostsRepo:
    """Markdown files below a content directory, e.g. ``content/blog/*.md``."""

    def __init__(self, root: str | Path):
        self.root = Path(root)

    def list_post_sources(self) -> List[PostSource]:
        blog_dir = self.root / settings.BLOG_PREFIX
        if not blog_dir.is_dir():
            logger.warning(f"Content directory {blog_dir} does not exist")
            return []

        sources = []
        for file_path in sorted(blog_dir.rglob("*.md")):
            relative = file_path.relative_to(self.root).as_posix()
            try:
                markdown = file_path.read_bytes().decode("utf-8", errors="ignore")
            except OSError as e:
                logger.warning(f"Failed to read {file_path}: {e}")
                continue
            sources.append(
                PostSource(
                    id=relative,
                    path=relative,
                    absolute_path=str(file_path.resolve()),
                    markdown=markdown,
                )
            )
        return sources
