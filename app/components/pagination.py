from dataclasses import dataclass

from app.components.base import Component
from app.services.pages import page_path


@dataclass
class Pagination(Component):
    pageCount: int
    currentPage: int
    base: str

    def render(self) -> str:
        if self.pageCount <= 1:
            return ""

        links = []
        if self.currentPage > 1:
            links.append(
                self._link(self.currentPage - 1, "← Previous", rel="prev")
            )
        for page in range(1, self.pageCount + 1):
            links.append(self._link(page, str(page)))
        if self.currentPage < self.pageCount:
            links.append(self._link(self.currentPage + 1, "Next →", rel="next"))

        inner = "\n".join(f"<li>{link}</li>" for link in links)
        return (
            '<nav class="pagination" aria-label="Pagination">\n'
            f'<ul class="pagination__list">\n{inner}\n</ul>\n</nav>'
        )

    def _link(self, page: int, label: str, rel: str | None = None) -> str:
        current = rel is None and page == self.currentPage
        attrs = self.attributes(
            class_=self.classes("pagination__link", **{"pagination__link--current": current}),
            href=page_path(self.base, page),
            rel=rel,
            aria_current="page" if current else None,
        )
        return f"<a {attrs}>{self.escape(label)}</a>"
