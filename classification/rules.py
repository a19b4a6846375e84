"""Classification stages and their fixed vocabularies.

A stage looks at one record and either produces a label or returns None.
Vocabulary entries are tried in list order; the first match wins.
"""

import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Pattern, Sequence, Tuple

from ingestion.models import ExtractedRecord
from shared.text_utils import TextPreprocessor


Vocabulary = List[Tuple[Pattern[str], str]]


@dataclass(frozen=True)
class SubcategoryRule:
    name: str
    resolve: Callable[[ExtractedRecord], Optional[str]]

    def __call__(self, record: ExtractedRecord) -> Optional[str]:
        return self.resolve(record)


def vocabulary(entries: Sequence[Tuple[str, str]]) -> Vocabulary:
    return [(re.compile(pattern, re.I | re.S), label) for pattern, label in entries]


PUMP_KEYWORDS = vocabulary(
    [
        (r"fire fighting", "Fire Fighting"),
        (r"fire", "Fire Fighting"),
        (r"hvac", "HVAC"),
        (r"irrigation", "Irrigation"),
        (r"submersible", "Submersible"),
        (r"pressure", "Pressure Boosters"),
        (r"deep[- ]well", "Deep Well"),
    ]
)

CHILLER_KEYWORDS = vocabulary(
    [
        (r"water[- ]cooled.*centrifugal", "Water-Cooled Centrifugal"),
        (r"water[- ]cooled.*screw", "Water-Cooled Screw"),
        (r"air[- ]cooled.*screw", "Air-Cooled Screw"),
        (r"air[- ]cooled.*scroll", "Air-Cooled Scroll"),
        (r"air[- ]cooled.*magnetic", "Air-Cooled Magnetic Bearing"),
        (r"absorption", "Absorption"),
    ]
)

COOLING_TOWER_KEYWORDS = vocabulary(
    [
        (r"evaporative condenser", "Evaporative Condensers"),
        (r"closed[- ]circuit", "Closed Type"),
        (r"open|crossflow|axial fan", "Open Type"),
    ]
)

AIR_HANDLING_UNIT_KEYWORDS = vocabulary(
    [
        (r"modular", "Modular"),
        (r"energy[- ]efficient", "Energy-Efficient"),
    ]
)

AIR_OUTLET_KEYWORDS = vocabulary(
    [
        (r"(?=.*diffuser)(?=.*swirl)", "Swirl Diffusers"),
        (r"(?=.*diffuser)(?=.*linear)", "Linear Diffusers"),
        (r"diffuser", "Diffusers"),
        (r"(?=.*grille)(?=.*fixed)", "Fixed Grilles"),
        (r"(?=.*grille)(?=.*adjustable)", "Adjustable Grilles"),
        (r"grille", "Grilles"),
        (r"(?=.*damper)(?=.*control)", "Control Dampers"),
        (r"(?=.*damper)(?=.*(?:fire|smoke))", "Fire & Smoke Dampers"),
        (r"damper", "Dampers"),
    ]
)

FAN_COIL_KEYWORDS = vocabulary(
    [
        (r"dcu", "DCU Series"),
        (r"cr[- ]a", "CR-A Series"),
    ]
)

VRF_KEYWORDS = vocabulary([(r"dvm", "DVM S Series")])

HEADING_SUFFIXES = [
    "Chillers",
    "Cooling Towers",
    "Pumps",
    "Air Handling Units",
    "Fan Coil Units",
    "Variable Refrigerant Flow",
    "Systems",
]

# (pattern, group) - the label is the matched text of ``group``.
GENERIC_PATTERNS = [
    (re.compile(r"(Water-Cooled|Water Cooled)\s+(Centrifugal|Screw)", re.I), 0),
    (re.compile(r"(Air-Cooled|Air Cooled)\s+(Screw|Scroll|Magnetic)", re.I), 0),
    (re.compile(r"(Centrifugal|Screw|Scroll|Absorption|Magnetic Bearing)", re.I), 1),
    (re.compile(r"(Open Type|Closed Type|Evaporative Condensers)", re.I), 1),
    (re.compile(r"(Fire Fighting|HVAC|Irrigation|Submersible|Pressure Boosters)", re.I), 1),
]

APPLICATION_RE = re.compile(r"Application:\s*([^|]+)", re.I)
CONTAINER_SUFFIX = "-products"


def match_vocabulary(vocab: Vocabulary, text: Optional[str]) -> Optional[str]:
    if not text:
        return None
    for pattern, label in vocab:
        if pattern.search(text):
            return label
    return None


def application_marker() -> SubcategoryRule:
    """``Application: Fire Fighting | 50 Hz`` in the description."""

    def resolve(record: ExtractedRecord) -> Optional[str]:
        if not record.description:
            return None
        match = APPLICATION_RE.search(record.description)
        if not match:
            return None
        return match.group(1).strip() or None

    return SubcategoryRule("application_marker", resolve)


def keywords(vocab: Vocabulary, fields: Sequence[str] = ("name",)) -> SubcategoryRule:
    """Scan ``fields`` in order; within a field the vocabulary order decides."""

    def resolve(record: ExtractedRecord) -> Optional[str]:
        for field_name in fields:
            label = match_vocabulary(vocab, getattr(record, field_name, None))
            if label:
                return label
        return None

    return SubcategoryRule("keywords:" + "+".join(fields), resolve)


def container_id(suffix: str = CONTAINER_SUFFIX) -> SubcategoryRule:
    """``water-cooled-centrifugal-products`` -> ``Water Cooled Centrifugal``."""

    def resolve(record: ExtractedRecord) -> Optional[str]:
        context = record.section_context
        if context is None or not context.container_id or suffix not in context.container_id:
            return None
        slug = context.container_id.replace(suffix, "", 1)
        return TextPreprocessor.title_case_slug(slug) or None

    return SubcategoryRule("container_id", resolve)


def strip_heading_suffixes(heading: str) -> str:
    clean = heading
    for word in HEADING_SUFFIXES:
        clean = re.sub(r"\s*" + re.escape(word) + r"\s*$", "", clean, flags=re.I)
    return clean


def section_heading() -> SubcategoryRule:
    """``Water-Cooled Centrifugal Chillers`` -> ``Water-Cooled Centrifugal``."""

    def resolve(record: ExtractedRecord) -> Optional[str]:
        context = record.section_context
        if context is None or not context.heading:
            return None
        clean = strip_heading_suffixes(context.heading)
        if clean and clean != context.heading and clean.strip():
            return clean.strip()
        return None

    return SubcategoryRule("section_heading", resolve)


def generic_patterns() -> SubcategoryRule:
    def resolve(record: ExtractedRecord) -> Optional[str]:
        text = f"{record.name} {record.description or ''}"
        for pattern, group in GENERIC_PATTERNS:
            match = pattern.search(text)
            if match:
                return match.group(group)
        return None

    return SubcategoryRule("generic_patterns", resolve)


__all__ = [
    "SubcategoryRule",
    "Vocabulary",
    "vocabulary",
    "match_vocabulary",
    "application_marker",
    "keywords",
    "container_id",
    "section_heading",
    "generic_patterns",
    "strip_heading_suffixes",
    "PUMP_KEYWORDS",
    "CHILLER_KEYWORDS",
    "COOLING_TOWER_KEYWORDS",
    "AIR_HANDLING_UNIT_KEYWORDS",
    "AIR_OUTLET_KEYWORDS",
    "FAN_COIL_KEYWORDS",
    "VRF_KEYWORDS",
    "HEADING_SUFFIXES",
]
