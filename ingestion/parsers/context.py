"""Backward ancestry lookup for record segments."""

from typing import Optional

from shared.config import CONTEXT_LOOKBACK_DEFAULT
from shared.text_utils import TextPreprocessor

from ..models import SectionContext
from .base import compile_all


class ContextResolver:
    """
    Find the container id and heading that precede a record.

    This is a bounded reverse text scan, not a tree walk: the nearest match
    inside the look-back window is taken as the record's ancestor. Markup
    that reorders sections will yield the wrong context, never an error.
    """

    CONTAINER_PATTERNS = compile_all(
        [
            r'<div\b[^>]*?\sid="([^"]+)"',
            r'<section\b[^>]*?\sid="([^"]+)"',
        ]
    )
    HEADING_PATTERNS = compile_all(
        [
            r'<h2[^>]*class="brand-title"[^>]*>([^<]+)</h2>',
            r'<h2[^>]*class="[^"]*\bsection-title\b[^"]*"[^>]*>([^<]+)</h2>',
        ]
    )

    def __init__(self, lookback: int = CONTEXT_LOOKBACK_DEFAULT):
        self.lookback = lookback

    def resolve(self, text: str, offset: int) -> Optional[SectionContext]:
        """
        Resolve ancestry for the record starting at ``offset``.

        Args:
            text: Full document text
            offset: Start offset of the record

        Returns:
            SectionContext, or None when neither hint is inside the window
        """
        window = text[max(0, offset - self.lookback) : offset]
        context = SectionContext(
            container_id=self._nearest(self.CONTAINER_PATTERNS, window),
            heading=self._nearest(self.HEADING_PATTERNS, window),
        )
        return None if context.is_empty else context

    @staticmethod
    def _nearest(patterns, window: str) -> Optional[str]:
        best_pos = -1
        best_value: Optional[str] = None
        for pattern in patterns:
            for match in pattern.finditer(window):
                value = TextPreprocessor.normalize(match.group(1))
                if value and match.start() > best_pos:
                    best_pos = match.start()
                    best_value = value
        return best_value


__all__ = ["ContextResolver"]
