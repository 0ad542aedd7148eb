"""Route a message to its institution's extractor.

``classify(sender, body)`` returns the extractor for an exactly matching
sender id, or :data:`SUPPRESSED` when the sender is unknown or the body is a
non-transactional notice (OTP, login alert) for that institution.
"""

from __future__ import annotations

from typing import Final, final

from .extractors import DEFAULT_REGISTRY, ExtractorRegistry, SenderExtractor


@final
class Suppressed:
    """Marker for messages that must not produce a transaction."""

    _instance: Suppressed | None = None

    def __new__(cls) -> Suppressed:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SUPPRESSED"

    def __bool__(self) -> bool:
        return False


SUPPRESSED: Final = Suppressed()


def classify(
    sender: str,
    body: str,
    registry: ExtractorRegistry = DEFAULT_REGISTRY,
) -> SenderExtractor | Suppressed:
    extractor = registry.get(sender)
    if extractor is None or extractor.is_suppressed(body):
        return SUPPRESSED
    return extractor


__all__ = ["SUPPRESSED", "Suppressed", "classify"]
