import pytest

from cardvault.inventory import InventorySystem
from cardvault.models.card import Card, Rarity, Variant
from cardvault.services.collection_manager import CollectionManager


@pytest.fixture
def common_card() -> Card:
    """Normal Common card worth 2.00."""
    return Card(name="Bulbasaur", base_value=2.0, rarity=Rarity.COMMON, variant=Variant.NORMAL)


@pytest.fixture
def rare_full_art() -> Card:
    """Full-art Rare card worth 20.00 (10.00 base)."""
    return Card(name="Pikachu", base_value=10.0, rarity=Rarity.RARE, variant=Variant.FULL_ART)


@pytest.fixture
def legendary_normal() -> Card:
    """Normal Legendary card worth 50.00."""
    return Card(name="Mewtwo", base_value=50.0, rarity=Rarity.LEGENDARY, variant=Variant.NORMAL)


@pytest.fixture
def collection_manager() -> CollectionManager:
    """Collection with a spread of rarities and variants, three copies each."""
    manager = CollectionManager()
    manager.add_new_card("Bulbasaur", 2.0, Rarity.COMMON, Variant.NORMAL)
    manager.add_new_card("Oddish", 1.0, Rarity.UNCOMMON, Variant.NORMAL)
    manager.add_new_card("Pikachu", 10.0, Rarity.RARE, Variant.FULL_ART)
    manager.add_new_card("Mewtwo", 50.0, Rarity.LEGENDARY, Variant.NORMAL)
    manager.add_new_card("Eevee", 4.0, Rarity.COMMON, Variant.EXTENDED_ART)
    for name in ("Bulbasaur", "Oddish", "Pikachu", "Mewtwo", "Eevee"):
        manager.increase_count(name, 2)
    return manager


@pytest.fixture
def inventory() -> InventorySystem:
    """Inventory with the same cards as `collection_manager`, threshold 1.0."""
    system = InventorySystem(trade_confirmation_threshold=1.0)
    system.add_new_card("Bulbasaur", 2.0, Rarity.COMMON, Variant.NORMAL)
    system.add_new_card("Oddish", 1.0, Rarity.UNCOMMON, Variant.NORMAL)
    system.add_new_card("Pikachu", 10.0, Rarity.RARE, Variant.FULL_ART)
    system.add_new_card("Mewtwo", 50.0, Rarity.LEGENDARY, Variant.NORMAL)
    system.add_new_card("Eevee", 4.0, Rarity.COMMON, Variant.EXTENDED_ART)
    for name in ("Bulbasaur", "Oddish", "Pikachu", "Mewtwo", "Eevee"):
        system.increase_card_count(name, 2)
    return system
