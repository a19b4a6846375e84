"""Field extraction for product cards."""

import re
from typing import List, Optional

from shared.text_utils import TextPreprocessor

from ..models import ExtractedRecord, Segment
from .base import BaseFieldExtractor, compile_all
from .context import ContextResolver


class ProductFieldExtractor(BaseFieldExtractor):
    """
    Pull name, description, image, features and ancestry out of one card.

    The card body is cut at the first triple closing ``</div>`` found inside
    the segment; when none is found the whole segment is used.
    """

    CARD_END_RE = re.compile(r"</div>\s*</div>\s*</div>")

    NAME_PATTERNS = compile_all(
        [
            r'<h3[^>]*class="product-name"[^>]*>([^<]+)</h3>',
            r'<h[2-4][^>]*class="[^"]*\bproduct-(?:name|title)\b[^"]*"[^>]*>([\s\S]*?)</h[2-4]>',
        ]
    )
    DESCRIPTION_PATTERNS = compile_all(
        [
            r'<p[^>]*style="[^"]*font-size: 0\.875rem[^"]*color: #6B7280[^"]*"[^>]*>([^<]+)</p>',
            r'<p[^>]*class="[^"]*\bproduct-(?:description|specs)\b[^"]*"[^>]*>([\s\S]*?)</p>',
            r'<li[^>]*class="[^"]*\bproduct-specs?\b[^"]*"[^>]*>([\s\S]*?)</li>',
        ]
    )
    FEATURE_LIST_PATTERNS = compile_all(
        [
            r"<h4[^>]*>\s*Key Features:?\s*</h4>[\s\S]*?<ul[^>]*>([\s\S]*?)</ul>",
            r"<(?:p|strong|span|div)[^>]*>\s*Key Features:?\s*</(?:p|strong|span|div)>[\s\S]*?<ul[^>]*>([\s\S]*?)</ul>",
        ]
    )
    FEATURE_ITEM_RE = re.compile(r"<li[^>]*>([\s\S]*?)</li>")
    MARKER_SPAN_RE = re.compile(r"^\s*<span[^>]*>[\s\S]*?</span>")

    def __init__(
        self,
        preprocessor: Optional[TextPreprocessor] = None,
        context_resolver: Optional[ContextResolver] = None,
    ):
        super().__init__(preprocessor)
        self.context_resolver = context_resolver or ContextResolver()

    def extract(self, segment: Segment) -> Optional[ExtractedRecord]:
        """
        Build a product candidate from one segment.

        Args:
            segment: Segment opened by a product card marker

        Returns:
            ExtractedRecord, or None when no name can be resolved
        """
        body = self.card_body(segment.text)
        name = self.first_text(self.NAME_PATTERNS, body)
        if not name:
            return None

        return ExtractedRecord(
            name=name,
            category=segment.document.category,
            description=self.first_text(self.DESCRIPTION_PATTERNS, body),
            features=self.features(body),
            image_reference=self.image_reference(body),
            section_context=self.context_resolver.resolve(segment.document.text, segment.start),
        )

    def card_body(self, text: str) -> str:
        match = self.CARD_END_RE.search(text)
        if match:
            return text[: match.end()]
        return text

    def features(self, body: str) -> List[str]:
        items_html = self.first_raw(self.FEATURE_LIST_PATTERNS, body)
        if not items_html:
            return []
        features: List[str] = []
        for item in self.FEATURE_ITEM_RE.finditer(items_html):
            text = self._item_text(item.group(1))
            if text:
                features.append(text)
        return features

    def _item_text(self, inner: str) -> Optional[str]:
        # Marker glyph is either wrapped in a leading span or written inline.
        marker = self.MARKER_SPAN_RE.match(inner)
        if marker:
            return self.preprocessor.normalize(inner[marker.end() :])
        text = self.preprocessor.normalize(inner)
        if not text:
            return None
        return self.preprocessor.strip_leading_glyph(text) or None


__all__ = ["ProductFieldExtractor"]
