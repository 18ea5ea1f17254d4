"""Generic keyed accumulator backing every rollup.

A ``KeyedAccumulator`` maps a grouping key to a running total of seconds.
Buckets remember the metadata they were created with (display label,
hints) and, for two-level rollups, own an inner accumulator keyed by the
second dimension. Buckets keep first-discovery order, which the stable
sorts below turn into the tie-break order of the final lists.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Bucket:
    """Running total for one grouping key.

    Attributes:
        key: Grouping key
        meta: Metadata captured when the key was first seen
        seconds: Accumulated seconds
        inner: Nested accumulator for two-level rollups
    """

    key: str
    meta: Dict[str, Any] = field(default_factory=dict)
    seconds: int = 0
    inner: Optional["KeyedAccumulator"] = None


class KeyedAccumulator:
    """Key -> running total container with optional nesting.

    Example:
        >>> acc = KeyedAccumulator()
        >>> _ = acc.add("alice", 60, label="Alice")
        >>> _ = acc.add("bob", 120, label="Bob")
        >>> _ = acc.add("alice", 30, label="ignored")
        >>> [(b.key, b.seconds, b.meta["label"]) for b in acc.by_seconds()]
        [('bob', 120, 'Bob'), ('alice', 90, 'Alice')]

        >>> weekly = KeyedAccumulator(nested=True)
        >>> _ = weekly.add_nested("2024-01-08", "alice", 60)
        >>> weekly.get("2024-01-08").inner.get("alice").seconds
        60
    """

    def __init__(self, nested: bool = False):
        """Initialize an empty accumulator.

        Args:
            nested: Whether buckets carry an inner accumulator
        """
        self.nested = nested
        self._buckets: Dict[str, Bucket] = {}

    def __len__(self) -> int:
        return len(self._buckets)

    def __contains__(self, key: str) -> bool:
        return key in self._buckets

    def get(self, key: str) -> Optional[Bucket]:
        """Return the bucket for ``key`` if it exists."""
        return self._buckets.get(key)

    def add(self, key: str, seconds: int, **meta: Any) -> Bucket:
        """Add ``seconds`` to the bucket for ``key``, creating it if needed.

        ``meta`` is only stored when the bucket is created; later values
        are ignored so the first discovery wins.

        Args:
            key: Grouping key
            seconds: Seconds to add (may be 0 to register the key)
            **meta: Metadata for a newly created bucket

        Returns:
            The updated bucket
        """
        bucket = self._buckets.get(key)
        if bucket is None:
            bucket = Bucket(
                key=key,
                meta=meta,
                inner=KeyedAccumulator() if self.nested else None,
            )
            self._buckets[key] = bucket
        bucket.seconds += seconds
        return bucket

    def add_nested(
        self,
        outer_key: str,
        inner_key: str,
        seconds: int,
        outer_meta: Optional[Dict[str, Any]] = None,
        inner_meta: Optional[Dict[str, Any]] = None,
    ) -> Bucket:
        """Add ``seconds`` to both the outer bucket and its inner bucket.

        Args:
            outer_key: First-level key (e.g. week start)
            inner_key: Second-level key (e.g. contributor)
            seconds: Seconds to add
            outer_meta: Metadata for a newly created outer bucket
            inner_meta: Metadata for a newly created inner bucket

        Returns:
            The updated outer bucket

        Raises:
            TypeError: If the accumulator was not created with ``nested=True``
        """
        if not self.nested:
            raise TypeError("add_nested requires a nested accumulator")

        bucket = self.add(outer_key, seconds, **(outer_meta or {}))
        bucket.inner.add(inner_key, seconds, **(inner_meta or {}))
        return bucket

    def buckets(self) -> List[Bucket]:
        """Return buckets in first-discovery order."""
        return list(self._buckets.values())

    def by_seconds(self) -> List[Bucket]:
        """Return buckets by descending seconds, ties in discovery order."""
        return sorted(self._buckets.values(), key=lambda b: b.seconds, reverse=True)

    def by_key(self) -> List[Bucket]:
        """Return buckets by ascending key."""
        return sorted(self._buckets.values(), key=lambda b: b.key)

    @property
    def total_seconds(self) -> int:
        """Sum of all bucket totals."""
        return sum(b.seconds for b in self._buckets.values())
