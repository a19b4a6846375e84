"""Field extraction for project cards."""

import re
from typing import Optional

from ..models import ExtractedProject, Segment
from .base import BaseFieldExtractor, compile_all


class ProjectFieldExtractor(BaseFieldExtractor):
    """Read title, location, description, equipment and image of a project card."""

    CATEGORY_RE = re.compile(r'data-category="([^"]+)"')

    TITLE_PATTERNS = compile_all(
        [
            r'<h3[^>]*class="[^"]*\bproject-title\b[^"]*"[^>]*>([^<]+)</h3>',
            r"<h3[^>]*>([^<]+)</h3>",
        ]
    )
    LOCATION_PATTERNS = compile_all(
        [
            r'<p class="project-location">([^<]+)</p>',
            r'<(?:p|span)[^>]*class="[^"]*\bproject-location\b[^"]*"[^>]*>([\s\S]*?)</(?:p|span)>',
        ]
    )
    DESCRIPTION_PATTERNS = compile_all(
        [
            r'<p class="project-description">([^<]+(?:<br[^>]*>)?[^<]*)</p>',
            r'<p[^>]*class="[^"]*\bproject-description\b[^"]*"[^>]*>([\s\S]*?)</p>',
        ]
    )
    EQUIPMENT_PATTERNS = compile_all(
        [
            r'<div class="equipment-list">[\s\S]*?<h4>Equipment Provided:</h4>\s*<p>([^<]+)</p>',
            r'<div[^>]*class="[^"]*\bequipment-list\b[^"]*"[^>]*>[\s\S]*?<h4[^>]*>\s*Equipment Provided:?\s*</h4>\s*<p[^>]*>([\s\S]*?)</p>',
        ]
    )
    EQUIPMENT_LIST_RE = re.compile(
        r'<div[^>]*class="[^"]*\bequipment-list\b[^"]*"[^>]*>[\s\S]*?<ul[^>]*>([\s\S]*?)</ul>'
    )
    LIST_ITEM_RE = re.compile(r"<li[^>]*>([\s\S]*?)</li>")

    def extract(self, segment: Segment) -> Optional[ExtractedProject]:
        body = segment.text[len(segment.marker) :]
        title = self.first_text(self.TITLE_PATTERNS, body)
        location = self.first_text(self.LOCATION_PATTERNS, body)
        if not title or not location:
            return None

        category_match = self.CATEGORY_RE.search(segment.marker)
        return ExtractedProject(
            title=title,
            location=location,
            category=(category_match.group(1).strip() if category_match else "") or "all",
            description=self.first_text(self.DESCRIPTION_PATTERNS, body),
            equipment=self.equipment(body),
            image_reference=self.image_reference(body),
        )

    def equipment(self, body: str) -> Optional[str]:
        text = self.first_text(self.EQUIPMENT_PATTERNS, body)
        if text:
            return text
        match = self.EQUIPMENT_LIST_RE.search(body)
        if not match:
            return None
        items = [self.preprocessor.normalize(item) for item in self.LIST_ITEM_RE.findall(match.group(1))]
        items = [item for item in items if item]
        return ", ".join(items) or None


__all__ = ["ProjectFieldExtractor"]
