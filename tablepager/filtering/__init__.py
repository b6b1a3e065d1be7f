"""
Chained in-place filtering of an IndexedSpan.

Predicates are applied in sequence; each stage partitions the survivors
of the previous one and the final survivor count is published on the span.
"""

from tablepager.filtering.chain import FilterChain, FilterStage
from tablepager.filtering.partition import (
    PARTITIONERS,
    partition_conventional,
    partition_literal,
)
from tablepager.filtering.predicates import (
    NamedPredicate,
    PatternPredicate,
    ensure_pattern,
)

__all__ = [
    "FilterChain",
    "FilterStage",
    "NamedPredicate",
    "PARTITIONERS",
    "PatternPredicate",
    "ensure_pattern",
    "partition_conventional",
    "partition_literal",
]
