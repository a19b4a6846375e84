"""Subcategory classification for extracted products."""

from typing import Dict, List, Optional

from ingestion.models import ExtractedRecord

from .rules import (
    AIR_HANDLING_UNIT_KEYWORDS,
    AIR_OUTLET_KEYWORDS,
    CHILLER_KEYWORDS,
    COOLING_TOWER_KEYWORDS,
    FAN_COIL_KEYWORDS,
    PUMP_KEYWORDS,
    VRF_KEYWORDS,
    SubcategoryRule,
    application_marker,
    container_id,
    generic_patterns,
    keywords,
    section_heading,
)


# Each category exposes its signal in a different place, so stage order is
# fixed per category. Air handling unit containers are named after brands and
# must never be read as a subcategory, hence no container_id stage there.
CATEGORY_STAGES: Dict[str, List[SubcategoryRule]] = {
    "pumps": [
        application_marker(),
        keywords(PUMP_KEYWORDS, fields=("name", "description")),
    ],
    "chillers": [
        container_id(),
        keywords(CHILLER_KEYWORDS),
    ],
    "cooling-towers": [
        container_id(),
        keywords(COOLING_TOWER_KEYWORDS),
    ],
    "air-handling-units": [
        keywords(AIR_HANDLING_UNIT_KEYWORDS),
    ],
    "air-outlets-dampers": [
        keywords(AIR_OUTLET_KEYWORDS),
    ],
    "fan-coil-units": [
        keywords(FAN_COIL_KEYWORDS),
    ],
    "variable-refrigerant-flow": [
        keywords(VRF_KEYWORDS),
    ],
}

FALLBACK_STAGES: List[SubcategoryRule] = [
    section_heading(),
    generic_patterns(),
]


class SubcategoryClassifier:
    """
    Resolve a product's subcategory with a fixed, category-specific cascade.

    The same instance serves the import job and the re-classification job so
    both always apply identical rules.

    Example:
        >>> classifier = SubcategoryClassifier()
        >>> classifier.classify(record)
        'Fire Fighting'
    """

    def __init__(
        self,
        stages: Optional[Dict[str, List[SubcategoryRule]]] = None,
        fallback: Optional[List[SubcategoryRule]] = None,
    ):
        self.stages = CATEGORY_STAGES if stages is None else stages
        self.fallback = FALLBACK_STAGES if fallback is None else fallback

    def cascade_for(self, category: str) -> List[SubcategoryRule]:
        return list(self.stages.get(category, [])) + list(self.fallback)

    def explain(self, record: ExtractedRecord) -> Optional[str]:
        """Name of the stage that would label this record, if any."""
        for rule in self.cascade_for(record.category):
            if rule(record):
                return rule.name
        return None

    def classify(self, record: ExtractedRecord) -> Optional[str]:
        """
        Run the cascade for the record's category.

        Args:
            record: Extracted product candidate

        Returns:
            First label produced, or None when no stage matches
        """
        for rule in self.cascade_for(record.category):
            label = rule(record)
            if label:
                return label
        return None

    def apply(self, record: ExtractedRecord) -> ExtractedRecord:
        record.subcategory = self.classify(record)
        return record


__all__ = ["SubcategoryClassifier", "CATEGORY_STAGES", "FALLBACK_STAGES"]
