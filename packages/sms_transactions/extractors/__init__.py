"""Sender-specific extractors and the default sender registry."""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType
from typing import TypeAlias

from .banque_misr import BanqueMisrExtractor
from .base import KindRule, SenderExtractor, dispatch_kind
from .cib import CibExtractor

ExtractorRegistry: TypeAlias = MappingProxyType[str, SenderExtractor]


def build_registry(extractors: Iterable[SenderExtractor]) -> ExtractorRegistry:
    """Index extractors by their exact sender id."""

    table: dict[str, SenderExtractor] = {}
    for ex in extractors:
        if ex.sender in table:
            raise ValueError(f"duplicate extractor for sender {ex.sender!r}")
        table[ex.sender] = ex
    return MappingProxyType(table)


DEFAULT_REGISTRY: ExtractorRegistry = build_registry((CibExtractor(), BanqueMisrExtractor()))


__all__ = [
    "DEFAULT_REGISTRY",
    "BanqueMisrExtractor",
    "CibExtractor",
    "ExtractorRegistry",
    "KindRule",
    "SenderExtractor",
    "build_registry",
    "dispatch_kind",
]
