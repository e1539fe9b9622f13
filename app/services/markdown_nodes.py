import datetime
import html
import logging
import math
import re
import uuid
from pathlib import Path
from typing import Callable, List, Optional

import bleach
import frontmatter
from markdown_it import MarkdownIt
from pydantic import ValidationError

from app.repos.posts_repo import PostSource
from app.schemas.blog import FeaturedImage, Fields, Frontmatter, PostNode
from app.services.image_service import constrained_image_data
from app.settings import settings

logger = logging.getLogger(__name__)

EXCERPT_LENGTH = 140
WORDS_PER_MINUTE = 200

_MD = MarkdownIt("commonmark", {"html": False})
_WHITESPACE = re.compile(r"\s+")

ImageResolver = Callable[[Optional[str], PostSource], Optional[FeaturedImage]]


def build_node(
    source: PostSource,
    *,
    today: Optional[datetime.date] = None,
    image_resolver: Optional[ImageResolver] = None,
) -> Optional[PostNode]:
    """Parse frontmatter and derive the fields the posts listing needs"""
    try:
        parsed = frontmatter.loads(source.markdown)
    except Exception as e:
        logger.warning(f"Failed to parse frontmatter for {source.path}: {e}")
        return None

    metadata = parsed.metadata or {}
    today = today or datetime.date.today()
    resolve_image = image_resolver or default_image_resolver

    slug = make_slug(source.path, metadata.get("slug"))
    published = parse_date(metadata.get("date") or metadata.get("publishedAt"))

    excerpt = metadata.get("excerpt") or metadata.get("summary")
    image = metadata.get("featuredImage") or metadata.get("image")

    try:
        return PostNode(
            id=str(uuid.uuid5(uuid.NAMESPACE_URL, source.path)),
            excerpt=plain_excerpt(parsed.content),
            timeToRead=calculate_reading_time(parsed.content),
            fileAbsolutePath=source.absolute_path,
            frontmatter=Frontmatter(
                categories=_dedupe(normalize_str_list(metadata.get("categories"))),
                tags=normalize_str_list(metadata.get("tags")),
                title=derive_title(metadata, slug),
                date=published.isoformat() if published else None,
                daysAgo=days_ago(published, today),
                excerpt=str(excerpt) if excerpt else None,
                featuredImage=resolve_image(str(image) if image else None, source),
                draft=bool(metadata.get("draft", False)),
            ),
            fields=Fields(slug=slug),
        )
    except ValidationError as e:
        logger.warning(f"Invalid frontmatter in {source.path}: {e}")
        return None


def build_nodes(sources, **kwargs) -> List[PostNode]:
    nodes = []
    for source in sources:
        node = build_node(source, **kwargs)
        if node:
            nodes.append(node)
    return nodes


def default_image_resolver(
    image_path: Optional[str], source: PostSource
) -> Optional[FeaturedImage]:
    source_dir = (
        Path(source.absolute_path).parent
        if source.absolute_path and not source.absolute_path.startswith("couchdb://")
        else None
    )
    return constrained_image_data(
        image_path, base_url=settings.IMAGE_BASE_URL, source_dir=source_dir
    )


def make_slug(path: str, override: Optional[str] = None) -> str:
    if override:
        stem = str(override)
    else:
        stem = path.removeprefix(settings.BLOG_PREFIX).removesuffix(".md")
        if stem.endswith("/index"):
            stem = stem[: -len("/index")]
    return f"/{stem.strip('/')}/"


def derive_title(metadata: dict, slug: str) -> str:
    if metadata and metadata.get("title"):
        return str(metadata["title"])
    clean_slug = slug.strip("/").rsplit("/", 1)[-1]
    clean_slug = clean_slug.replace("-", " ").replace("_", " ")
    return clean_slug.title()


def normalize_str_list(value) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple, set)):
        return [str(item) for item in value if item]
    return [str(value)]


def _dedupe(items: List[str]) -> List[str]:
    return list(dict.fromkeys(items))


def parse_date(value) -> Optional[datetime.date]:
    """Keep the time of day when there is one so same-day posts still order."""
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str) and value:
        try:
            if len(value) == 10:
                return datetime.date.fromisoformat(value)
            return datetime.datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            pass
        try:
            return datetime.date.fromisoformat(value[:10])
        except ValueError:
            logger.warning(f"Unrecognised date value: {value!r}")
    return None


def days_ago(published: Optional[datetime.date], today: datetime.date) -> int:
    if not published:
        return 0
    if isinstance(published, datetime.datetime):
        published = published.date()
    return max((today - published).days, 0)


def plain_excerpt(markdown: str, length: int = EXCERPT_LENGTH) -> str:
    """Render markdown, strip every tag and prune on a word boundary."""
    rendered = _MD.render(markdown)
    text = html.unescape(bleach.clean(rendered, tags=[], strip=True))
    text = _WHITESPACE.sub(" ", text).strip()
    if len(text) <= length:
        return text
    cut = text[: length + 1]
    boundary = cut.rfind(" ")
    if boundary > 0:
        cut = cut[:boundary]
    else:
        cut = cut[:length]
    return cut.rstrip(" ,.;:") + "…"


def calculate_reading_time(text: str) -> int:
    words = text.split()
    return math.ceil(len(words) / WORDS_PER_MINUTE) or 1
