"""The detection verdict type."""

from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True, slots=True)
class DetectionResult:
    """A final encoding verdict.

    Frozen dataclass holding the encoding label, the confidence score, and
    an optional language name reported by the winning prober.
    """

    encoding: str
    confidence: float
    language: str | None = None

    def to_dict(self) -> dict[str, str | float | None]:
        """Convert this result to a plain dict.

        :returns: A dict with ``'encoding'``, ``'confidence'``, and ``'language'`` keys.
        """
        return {
            "encoding": self.encoding,
            "confidence": self.confidence,
            "language": self.language,
        }
