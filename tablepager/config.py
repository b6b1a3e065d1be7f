from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PartitionMode(str, Enum):
    """How a filter stage partitions its admissible prefix."""

    # Swap only when an element fails the predicate
    CONVENTIONAL = "conventional"

    # Swap (matched, end) on every iteration, matching the historical table
    # manager bit for bit. Survivor counts are not exact in this mode.
    LITERAL = "literal"


class Settings(BaseSettings):
    """Library defaults loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="TABLEPAGER_",
        extra="ignore",
    )

    # Rows per page when a PageWindow is built without an explicit size
    page_size: int = Field(default=50, ge=1)

    # Pages shown on each side of the active page in the navigation index
    visible_links: int = Field(default=2, ge=0)

    partition_mode: PartitionMode = PartitionMode.CONVENTIONAL


settings = Settings()


# =============================================================================
# SENTINELS
# =============================================================================

# Cached survivor count of a stage that has never been evaluated
NOT_EVALUATED = -1

# Label of the two collapsed-range placeholders
COLLAPSED_LABEL = "..."
