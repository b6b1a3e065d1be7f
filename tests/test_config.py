"""
Tests for library settings.

These tests verify:
- Defaults match the historical table manager (50 rows, 2 links per side)
- Environment variables with the TABLEPAGER_ prefix override defaults
- Invalid values are refused by validation
"""

import pytest
from pydantic import ValidationError

from tablepager.config import PartitionMode, Settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("PAGE_SIZE", "VISIBLE_LINKS", "PARTITION_MODE"):
            monkeypatch.delenv(f"TABLEPAGER_{name}", raising=False)

        config = Settings(_env_file=None)

        assert config.page_size == 50
        assert config.visible_links == 2
        assert config.partition_mode == PartitionMode.CONVENTIONAL

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TABLEPAGER_PAGE_SIZE", "25")
        monkeypatch.setenv("TABLEPAGER_VISIBLE_LINKS", "3")
        monkeypatch.setenv("TABLEPAGER_PARTITION_MODE", "literal")

        config = Settings(_env_file=None)

        assert config.page_size == 25
        assert config.visible_links == 3
        assert config.partition_mode == PartitionMode.LITERAL

    @pytest.mark.parametrize(
        ("name", "value"),
        [("PAGE_SIZE", "0"), ("VISIBLE_LINKS", "-1"), ("PARTITION_MODE", "stable")],
    )
    def test_invalid_values_refused(
        self, monkeypatch: pytest.MonkeyPatch, name: str, value: str
    ) -> None:
        monkeypatch.setenv(f"TABLEPAGER_{name}", value)

        with pytest.raises(ValidationError):
            Settings(_env_file=None)
