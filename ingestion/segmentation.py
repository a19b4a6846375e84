"""Record segmentation for catalog documents."""

from typing import List, Pattern

from .models import CatalogDocument, Segment


class SegmentExtractor:
    """
    Split a document into one segment per record marker.

    Every marker occurrence opens a segment that runs until the next marker
    (or the end of the document). Markers are assumed never to nest.
    """

    def __init__(self, marker: Pattern[str]):
        """
        Initialize SegmentExtractor.

        Args:
            marker: Compiled pattern matching the opening of one record block
        """
        self.marker = marker

    def extract(self, document: CatalogDocument) -> List[Segment]:
        """
        Scan the document left to right and pair consecutive marker positions.

        Args:
            document: Source CatalogDocument

        Returns:
            Segments in document order; empty when no marker is present
        """
        matches = list(self.marker.finditer(document.text))
        segments: List[Segment] = []
        total = len(document.text)
        for idx, match in enumerate(matches):
            end = matches[idx + 1].start() if idx + 1 < len(matches) else total
            segments.append(Segment(document, match.start(), end, match.group(0)))
        return segments


__all__ = ["SegmentExtractor"]
