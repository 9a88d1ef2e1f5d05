"""Outcome of converting one document."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ConversionResult:
    """
    Markdown produced for one input.

    Attributes:
        markdown: Rendered Markdown, or the input itself when it was passed through
        fallback_reason: Why the input was passed through, None when it was converted
    """

    markdown: str
    fallback_reason: Optional[str] = None

    @property
    def converted(self) -> bool:
        return self.fallback_reason is None
