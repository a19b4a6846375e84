import re
from abc import ABC, abstractmethod
from typing import Optional, Pattern, Sequence

from shared.text_utils import TextPreprocessor

from ..models import Segment


def compile_all(patterns: Sequence[str], flags: int = 0):
    return [re.compile(pattern, flags) for pattern in patterns]


class BaseFieldExtractor(ABC):
    """
    Common plumbing for field extractors.

    Every field is read with an ordered list of shape variants; the first
    variant that matches wins and a field with no matching variant is absent.
    """

    IMAGE_PATTERNS = compile_all(
        [
            r'<img[^>]+src="([^"]+)"[^>]*alt="[^"]*"[^>]*>',
            r'<img[^>]+src="([^"]+)"',
            r"background-image:\s*url\(['\"]?([^'\")]+)['\"]?\)",
        ]
    )

    def __init__(self, preprocessor: Optional[TextPreprocessor] = None):
        self.preprocessor = preprocessor or TextPreprocessor()

    @abstractmethod
    def extract(self, segment: Segment):
        ...

    def first_text(self, patterns: Sequence[Pattern[str]], body: str) -> Optional[str]:
        """Return the normalized first group of the first matching variant."""
        for pattern in patterns:
            match = pattern.search(body)
            if not match:
                continue
            value = self.preprocessor.normalize(match.group(1))
            if value:
                return value
        return None

    def first_raw(self, patterns: Sequence[Pattern[str]], body: str) -> Optional[str]:
        for pattern in patterns:
            match = pattern.search(body)
            if match and match.group(1).strip():
                return match.group(1).strip()
        return None

    def image_reference(self, body: str) -> Optional[str]:
        return self.first_raw(self.IMAGE_PATTERNS, body)


__all__ = ["BaseFieldExtractor", "compile_all"]
