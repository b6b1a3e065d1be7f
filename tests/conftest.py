from collections.abc import Callable
from typing import Any

import pytest


class Row:
    """Table row stand-in: cells by column plus a visibility flag."""

    def __init__(self, **cells: Any) -> None:
        self.cells = cells
        self.visible = True
        self.show_calls = 0
        self.hide_calls = 0

    def __getattr__(self, column: str) -> Any:
        try:
            return self.__dict__["cells"][column]
        except KeyError:
            raise AttributeError(column) from None

    def get(self, column: str, default: Any = None) -> Any:
        return self.cells.get(column, default)

    def show(self) -> None:
        self.visible = True
        self.show_calls += 1

    def hide(self) -> None:
        self.visible = False
        self.hide_calls += 1

    def __repr__(self) -> str:
        return f"Row({self.cells!r})"


@pytest.fixture
def make_rows() -> Callable[[int], list[Row]]:
    """Factory for `n` rows numbered 0..n-1."""

    def _make(n: int) -> list[Row]:
        return [Row(n=i, name=f"row {i}") for i in range(n)]

    return _make


@pytest.fixture
def card_rows() -> list[Row]:
    """Small card table for filter tests."""
    return [
        Row(name="Lightning Bolt", type_line="Instant", color="R", cmc=1),
        Row(name="Shivan Dragon", type_line="Creature — Dragon", color="R", cmc=6),
        Row(name="Counterspell", type_line="Instant", color="U", cmc=2),
        Row(name="Llanowar Elves", type_line="Creature — Elf Druid", color="G", cmc=1),
        Row(name="Shock", type_line="Instant", color="R", cmc=1),
        Row(name="Thundermaw Hellkite", type_line="Creature — Dragon", color="R", cmc=5),
        Row(name="Ornithopter", type_line="Artifact Creature — Thopter", color="", cmc=0),
    ]


@pytest.fixture
def row() -> Callable[..., Row]:
    """Build a single row from keyword cells."""
    return Row
