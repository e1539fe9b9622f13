"""
Site layout: wraps page content in the complete HTML document.
"""

from dataclasses import dataclass, field
from typing import List

from app.components.base import Child, Component, render_child
from app.settings import settings


@dataclass
class Layout(Component):
    children: List[Child] = field(default_factory=list)

    def head(self) -> str:
        return "\n".join(
            part
            for part in (
                child.head()
                for child in self.children
                if isinstance(child, Component)
            )
            if part
        )

    def render(self) -> str:
        content = "\n".join(
            part for part in (render_child(child) for child in self.children) if part
        )
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
{self.head() or f"<title>{self.escape(settings.SITE_TITLE)}</title>"}
</head>
<body>
<header class="header">
<a class="header__title" href="/">{self.escape(settings.SITE_TITLE)}</a>
</header>
<main class="main">
{content}
</main>
</body>
</html>
"""
