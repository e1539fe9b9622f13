"""
Base component for the server-rendered blog pages.

Components are plain dataclasses, so two trees built from the same
props compare equal. Rendering is a separate step: ``render()`` returns
the body markup and ``head()`` anything that belongs in ``<head>``.
"""

import html
from dataclasses import dataclass, field
from typing import Any, List, Optional, Union


class Component:
    """Base class for all UI components"""

    def render(self) -> str:
        raise NotImplementedError("Subclasses must implement render()")

    def head(self) -> str:
        """Markup this component contributes to the document head."""
        return ""

    @staticmethod
    def escape(text: Optional[Any]) -> str:
        """Escape HTML entities; ``None`` becomes an empty string."""
        return html.escape(str(text)) if text is not None else ""

    @staticmethod
    def classes(*args: str, **conditionals: bool) -> str:
        """
        Build a CSS class string.

        Example:
            >>> Component.classes("pagination__link", current=True, disabled=False)
            'pagination__link current'
        """
        classes = [arg for arg in args if arg]
        classes.extend(key for key, value in conditionals.items() if value)
        return " ".join(classes)

    @staticmethod
    def attributes(**attrs: Any) -> str:
        """
        Build HTML attributes from keyword arguments.

        ``class_`` becomes ``class`` and ``aria_current`` becomes ``aria-current``.
        ``True`` renders a boolean attribute; ``False`` and ``None`` are dropped.
        """
        result = []
        for key, value in attrs.items():
            if key.endswith("_"):
                key = key[:-1]
            else:
                key = key.replace("_", "-")

            if value is True:
                result.append(key)
            elif value is not False and value is not None:
                result.append(f'{key}="{html.escape(str(value))}"')

        return " ".join(result)


Child = Union[Component, str]


def render_child(child: Child) -> str:
    if isinstance(child, Component):
        return child.render()
    return Component.escape(child)


@dataclass
class Html(Component):
    """A single host element such as ``<h1 class="page__title">``."""

    tag: str
    children: List[Child] = field(default_factory=list)
    class_name: Optional[str] = None

    def render(self) -> str:
        attrs = self.attributes(class_=self.class_name)
        open_tag = f"<{self.tag} {attrs}>" if attrs else f"<{self.tag}>"
        inner = "".join(render_child(child) for child in self.children)
        return f"{open_tag}{inner}</{self.tag}>"

    def head(self) -> str:
        return "".join(
            child.head() for child in self.children if isinstance(child, Component)
        )
