import logging
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image

from app.schemas.blog import FeaturedImage, ImageData, ImageSource, ImageVariants

logger = logging.getLogger(__name__)

THUMBNAIL_WIDTH = 80


def public_image_url(image_path: str, base_url: str) -> str:
    """
    Map a frontmatter image reference to the URL it is served from
    """
    if image_path.startswith(("http://", "https://")):
        return image_path

    # Handle absolute paths like /img/abc.png
    if image_path.startswith("/img/"):
        return f"{base_url.rstrip('/')}/{image_path[5:]}"

    relative = image_path.lstrip("/")
    if relative.startswith("./"):
        relative = relative[2:]
    return f"{base_url.rstrip('/')}/{relative}"


def read_image_size(path: Path) -> Optional[Tuple[int, int]]:
    try:
        with Image.open(path) as img:
            return img.size
    except (OSError, ValueError) as e:
        logger.debug(f"Could not read image size for {path}: {e}")
        return None


def constrained_image_data(
    image_path: Optional[str],
    *,
    base_url: str,
    width: int = THUMBNAIL_WIDTH,
    source_dir: Optional[Path] = None,
) -> Optional[FeaturedImage]:
    """
    Describe a fixed-width thumbnail that never upscales past the source image.

    The height is only known when the source file can be read locally.
    """
    if not image_path:
        return None

    height = None
    if source_dir is not None and not image_path.startswith(("http://", "https://")):
        local = _local_image_path(image_path, source_dir)
        size = read_image_size(local) if local else None
        if size:
            source_width, source_height = size
            width = min(width, source_width)
            height = round(width * source_height / source_width)

    url = public_image_url(image_path, base_url)
    if url == image_path:
        fallback = ImageSource(
            src=url,
            srcSet=f"{url} {width}w",
            sizes=f"(min-width: {width}px) {width}px, 100vw",
        )
    else:
        fallback = ImageSource(
            src=f"{url}?w={width}",
            srcSet=f"{url}?w={width} {width}w,\n{url}?w={width * 2} {width * 2}w",
            sizes=f"(min-width: {width}px) {width}px, 100vw",
        )

    return FeaturedImage(
        imageData=ImageData(
            layout="constrained",
            width=width,
            height=height,
            images=ImageVariants(fallback=fallback),
        )
    )


def _local_image_path(image_path: str, source_dir: Path) -> Optional[Path]:
    if image_path.startswith("/"):
        # Site-absolute paths cannot be resolved against the post's folder
        return None
    return source_dir / image_path
