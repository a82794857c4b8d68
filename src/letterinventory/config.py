"""Letter inventory configuration."""

from dotenv import find_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None

MAX_COUNT = 65535
"""Largest count a slot can hold (unsigned 16-bit storage)."""


class InventoryConfig(BaseSettings):
    """Configuration settings for letter inventories."""

    max_count: int = Field(default=MAX_COUNT, ge=1, le=MAX_COUNT)
    """Maximum count per letter for new inventories. Default: 65535.

    Adding past this limit raises `CounterOverflow`.
    """

    model_config = SettingsConfigDict(
        env_prefix="LETTER_INVENTORY_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )


config = InventoryConfig()
