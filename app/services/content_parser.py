import logging

import pycouchdb

logger = logging.getLogger(__name__)


class ContentParser:
    """Reassembles markdown stored as LiveSync chunks in CouchDB."""

    def __init__(self, db):
        self.db = db

    def get_markdown_content(self, doc: dict) -> str:
        """Return the document's markdown, decoded as text."""
        raw = self._inline_content(doc)
        if raw is None:
            raw = self._join_children(doc.get("children") or [])
        if isinstance(raw, bytes):
            return raw.decode("utf-8", errors="ignore")
        return raw or ""

    @staticmethod
    def _inline_content(doc: dict):
        for key in ("data", "content"):
            if key in doc:
                return doc[key]
        return None

    def _join_children(self, children: list):
        parts = []
        for child_id in children:
            try:
                child = self.db.get(child_id)
            except pycouchdb.exceptions.NotFound:
                logger.debug(f"Chunk {child_id} missing, skipping")
                continue
            except Exception as e:
                logger.error(f"Error fetching chunk {child_id}: {e}")
                continue
            if child.get("type") != "leaf" or "data" not in child:
                continue
            data = child["data"]
            parts.append(
                data.decode("utf-8", errors="ignore")
                if isinstance(data, bytes)
                else data
            )
        return "".join(parts) if parts else None
