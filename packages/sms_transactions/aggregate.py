"""Group finished transactions into per-account buckets.

Buckets for the statically known base accounts always exist (possibly empty);
credit-card buckets are created the first time their suffix is seen. Bucket
order is creation order, which keeps output deterministic.
"""

from __future__ import annotations

from collections.abc import Iterable

from .config import BASE_GROUPS
from .models import Transaction
from .records import TransactionRow, to_row


class Aggregator:
    def __init__(self, base_groups: Iterable[str] = BASE_GROUPS) -> None:
        self._buckets: dict[str, list[Transaction]] = {g: [] for g in base_groups}

    def add(self, tx: Transaction) -> None:
        if not tx.is_emittable:
            raise ValueError("only transactions with an account group and non-zero amount")
        self._buckets.setdefault(tx.account_group, []).append(tx)

    @property
    def groups(self) -> list[str]:
        return list(self._buckets)

    def __len__(self) -> int:
        return sum(len(b) for b in self._buckets.values())

    def finalize(self) -> dict[str, list[TransactionRow]]:
        """Return output rows per bucket, oldest first.

        ``sorted`` is stable, so equal timestamps keep arrival order.
        """

        return {
            group: [to_row(tx) for tx in sorted(bucket, key=lambda t: t.timestamp)]
            for group, bucket in self._buckets.items()
        }


__all__ = ["Aggregator"]
