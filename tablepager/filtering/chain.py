"""
Filter Chain — incremental, in-place narrowing of an IndexedSpan.

Each stage partitions the survivors of the stage before it and caches how
many values it kept. Updating a stage re-evaluates that stage and the
stages after it; earlier stages are never touched again, since their
survivors still occupy the same leading prefix.

INVARIANTS:
- Stage order is insertion order; stages are never removed
- One stage per predicate id (id -> position lookup, no duplicates)
- Stage k only reorders values inside stage k-1's survivor prefix
- After apply/reapply, span.count is the last stage's cached count
- A rejected apply leaves chain and span untouched
- An apply whose predicate raises is rolled back (stages, counts, span
  order and span.count) before the exception propagates

In CONVENTIONAL partition mode the leading span.count values are exactly
the values that pass every stage. See tablepager.filtering.partition for
what LITERAL mode does and does not guarantee.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from tablepager.config import NOT_EVALUATED, PartitionMode, settings
from tablepager.filtering.partition import PARTITIONERS
from tablepager.models.capabilities import Predicate, is_predicate
from tablepager.models.failure import (
    ConstructionError,
    ConstructionFailureKind,
    InvalidSpanError,
    RejectionReason,
)
from tablepager.models.span import IndexedSpan

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class FilterStage:
    """One predicate's position and cached result within a chain."""

    id: str
    predicate: Predicate
    filtered_count: int = NOT_EVALUATED

    @property
    def evaluated(self) -> bool:
        return self.filtered_count != NOT_EVALUATED


@dataclass(frozen=True, slots=True)
class _ChainSnapshot:
    """State needed to undo a failed apply."""

    order: list[Any]
    count: int
    stages: list[tuple[FilterStage, Predicate, int]]
    positions: dict[str, int]


class FilterChain(Generic[T]):
    """
    Ordered list of named predicates applied to one span.

    Usage:
        chain = FilterChain(span)
        chain.apply(PatternPredicate("Dragon", column="type_line"))
        chain.apply(NamedPredicate("cheap", lambda card: card["cmc"] <= 3))
        survivors = list(span)
    """

    def __init__(
        self,
        span: IndexedSpan[T],
        partition_mode: PartitionMode | str | None = None,
    ) -> None:
        if not isinstance(span, IndexedSpan):
            raise InvalidSpanError(
                "filter chain requires an IndexedSpan",
                detail=f"got {type(span).__name__}",
            )

        try:
            mode = PartitionMode(partition_mode or settings.partition_mode)
        except ValueError:
            raise ConstructionError(
                kind=ConstructionFailureKind.INVALID_PARTITION_MODE,
                message=f"unknown partition mode: {partition_mode!r}",
                detail=f"expected one of {[member.value for member in PartitionMode]}",
            ) from None

        self._span = span
        self._mode = mode
        self._partition = PARTITIONERS[mode]
        self._stages: list[FilterStage] = []
        self._positions: dict[str, int] = {}

    @property
    def span(self) -> IndexedSpan[T]:
        return self._span

    @property
    def partition_mode(self) -> PartitionMode:
        return self._mode

    @property
    def stages(self) -> tuple[FilterStage, ...]:
        return tuple(self._stages)

    @property
    def stage_counts(self) -> tuple[int, ...]:
        """Cached survivor count per stage, in chain order."""
        return tuple(stage.filtered_count for stage in self._stages)

    def stage(self, stage_id: str) -> FilterStage | None:
        position = self._positions.get(stage_id)
        return None if position is None else self._stages[position]

    def __len__(self) -> int:
        return len(self._stages)

    def __iter__(self) -> Iterator[FilterStage]:
        return iter(self._stages)

    def apply(self, predicate: Predicate) -> bool:
        """
        Add or update the stage for predicate.id and re-filter from there.

        Args:
            predicate: Anything with a non-empty string id and is_match(item)

        Returns:
            True if the chain was re-evaluated, False if the predicate was
            malformed and nothing changed

        Raises:
            Whatever the predicate raises; the chain and span are restored
            to their state before the call first
        """
        if not is_predicate(predicate):
            logger.warning(
                "filter_rejected",
                extra={
                    "reason": RejectionReason.MALFORMED_PREDICATE.value,
                    "predicate": repr(predicate),
                },
            )
            return False

        snapshot = self._snapshot()
        try:
            position = self._ensure_stage(predicate)
            self._evaluate_from(position)
        except Exception as exc:
            self._restore(snapshot)
            logger.warning(
                "filter_apply_failed",
                extra={
                    "stage_id": predicate.id,
                    "error": repr(exc),
                    "survivors": self._span.count,
                },
            )
            raise
        self._publish()

        logger.info(
            "filter_chain_applied",
            extra={
                "stage_id": predicate.id,
                "position": position,
                "stage_counts": self.stage_counts,
                "survivors": self._span.count,
                "total": len(self._span),
            },
        )
        return True

    def reapply(self) -> bool:
        """
        Re-run every stage, keeping the stored predicates.

        Use after the span's contents changed shape (values pushed or
        edited) without any predicate changing.
        """
        if not self._stages:
            return False
        return self.apply(self._stages[0].predicate)

    def _snapshot(self) -> _ChainSnapshot:
        return _ChainSnapshot(
            order=list(self._span.values),
            count=self._span.count,
            stages=[(stage, stage.predicate, stage.filtered_count) for stage in self._stages],
            positions=dict(self._positions),
        )

    def _restore(self, snapshot: _ChainSnapshot) -> None:
        self._span.values[:] = snapshot.order
        self._span.count = snapshot.count
        for stage, predicate, filtered_count in snapshot.stages:
            stage.predicate = predicate
            stage.filtered_count = filtered_count
        self._stages = [stage for stage, _, _ in snapshot.stages]
        self._positions = snapshot.positions

    def _ensure_stage(self, predicate: Predicate) -> int:
        position = self._positions.get(predicate.id)
        if position is not None:
            self._stages[position].predicate = predicate
            return position

        self._stages.append(FilterStage(id=predicate.id, predicate=predicate))
        position = len(self._stages) - 1
        self._positions[predicate.id] = position
        return position

    def _evaluate_from(self, position: int) -> None:
        for index in range(position, len(self._stages)):
            end = self._stages[index - 1].filtered_count if index > 0 else len(self._span)
            stage = self._stages[index]
            stage.filtered_count = self._partition(self._span, stage.predicate, end)

    def _publish(self) -> None:
        if not self._stages:
            self._span.count = len(self._span)
            return
        self._span.count = self._stages[-1].filtered_count
