from dataclasses import dataclass
from typing import Optional

from app.components.base import Component
from app.settings import settings


@dataclass
class SEO(Component):
    """Document title and social meta tags. Renders nothing in the body."""

    title: str
    description: Optional[str] = None

    def render(self) -> str:
        return ""

    def full_title(self) -> str:
        if not settings.SITE_TITLE or self.title == settings.SITE_TITLE:
            return self.title
        return f"{self.title} | {settings.SITE_TITLE}"

    def head(self) -> str:
        description = self.description or settings.SITE_DESCRIPTION
        tags = [
            f"<title>{self.escape(self.full_title())}</title>",
            f"<meta {self.attributes(name='description', content=description)}>",
            f"<meta {self.attributes(property='og:title', content=self.title)}>",
            f"<meta {self.attributes(property='og:description', content=description)}>",
            f"<meta {self.attributes(property='og:type', content='website')}>",
            f"<meta {self.attributes(name='twitter:card', content='summary')}>",
            f"<meta {self.attributes(name='twitter:title', content=self.title)}>",
            f"<meta {self.attributes(name='twitter:description', content=description)}>",
        ]
        return "\n".join(tags)
