import pytest
from pydantic import ValidationError

import letterinventory.inventory
from letterinventory import CounterOverflow, LetterInventory
from letterinventory.config import MAX_COUNT, InventoryConfig


def test_default_max_count(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("LETTER_INVENTORY_MAX_COUNT", raising=False)
    assert InventoryConfig(_env_file=None).max_count == MAX_COUNT == 65535


def test_max_count_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LETTER_INVENTORY_MAX_COUNT", "10")
    assert InventoryConfig(_env_file=None).max_count == 10


@pytest.mark.parametrize("value", ["0", "65536", "many"])
def test_max_count_out_of_range(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
    monkeypatch.setenv("LETTER_INVENTORY_MAX_COUNT", value)
    with pytest.raises(ValidationError):
        InventoryConfig(_env_file=None)


def test_unknown_setting_rejected() -> None:
    with pytest.raises(ValidationError):
        InventoryConfig(_env_file=None, max_letters=3)  # type: ignore[call-arg]


def test_inventory_uses_configured_max_count(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        letterinventory.inventory, "inventory_config", InventoryConfig(_env_file=None, max_count=3)
    )
    inv = LetterInventory("eee")
    assert inv.max_count == 3
    with pytest.raises(CounterOverflow):
        inv.add("e")
    assert LetterInventory(max_count=5).max_count == 5
