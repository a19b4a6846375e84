import html
import re
from typing import Optional


class TextPreprocessor:
    """Small helpers for turning markup fragments into clean text."""

    TAG_RE = re.compile(r"<[^>]+>")
    BREAK_RE = re.compile(r"<br[^>]*>", re.I)
    WS_RE = re.compile(r"\s+")
    LEADING_GLYPH_RE = re.compile(r"^[\s•✓✔●▪·*\-–>]+")

    @classmethod
    def strip_tags(cls, fragment: str) -> str:
        text = cls.BREAK_RE.sub(" ", fragment or "")
        text = cls.TAG_RE.sub("", text)
        return html.unescape(text)

    @classmethod
    def normalize(cls, fragment: Optional[str]) -> Optional[str]:
        """Strip markup and collapse whitespace; empty results become None."""
        if fragment is None:
            return None
        text = cls.WS_RE.sub(" ", cls.strip_tags(fragment)).strip()
        return text or None

    @classmethod
    def strip_leading_glyph(cls, text: str) -> str:
        return cls.LEADING_GLYPH_RE.sub("", text or "").strip()

    @staticmethod
    def title_case_slug(slug: str) -> str:
        """``water-cooled-centrifugal`` -> ``Water Cooled Centrifugal``.

        Only the first letter of each part is raised; the rest is kept as-is.
        """
        parts = [part for part in (slug or "").split("-") if part]
        return " ".join(part[:1].upper() + part[1:] for part in parts)


def ensure_leading_slash(path: str) -> str:
    if not path:
        return path
    return path if path.startswith("/") else "/" + path


__all__ = ["TextPreprocessor", "ensure_leading_slash"]
