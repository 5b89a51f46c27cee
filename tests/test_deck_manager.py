import pytest

from cardvault.models.card import Rarity, Variant
from cardvault.models.deck import NormalDeck, SellableDeck
from cardvault.models.failure import AddCardStatus
from cardvault.services.collection_manager import CollectionManager
from cardvault.services.deck_manager import DeckManager


@pytest.fixture
def manager(collection_manager: CollectionManager) -> DeckManager:
    return DeckManager(collection_manager)


class TestCreateDeck:
    def test_create_types(self, manager: DeckManager) -> None:
        assert manager.create_deck("Play", "Normal") is True
        assert manager.create_deck("Shop", "sellable") is True
        assert isinstance(manager.find_deck("PLAY"), NormalDeck)
        assert isinstance(manager.find_deck("shop"), SellableDeck)

    def test_duplicate_name_rejected(self, manager: DeckManager) -> None:
        manager.create_deck("Play", "Normal")
        assert manager.create_deck("play", "Sellable") is False

    def test_unknown_type_rejected(self, manager: DeckManager) -> None:
        assert manager.create_deck("Play", "Draft") is False
        assert manager.get_decks() == []

    def test_blank_name_rejected(self, manager: DeckManager) -> None:
        assert manager.create_deck("", "Normal") is False

    def test_get_decks_is_a_copy(self, manager: DeckManager) -> None:
        manager.create_deck("Play", "Normal")
        manager.get_decks().clear()
        assert len(manager.get_decks()) == 1


class TestAddCardToDeck:
    def test_success(self, manager: DeckManager, collection_manager: CollectionManager) -> None:
        manager.create_deck("D", "Normal")
        assert manager.add_card_to_deck("Pikachu", "D") == AddCardStatus.SUCCESS
        assert collection_manager.get_card_count("Pikachu") == 2

    def test_not_found(self, manager: DeckManager) -> None:
        manager.create_deck("D", "Normal")
        assert manager.add_card_to_deck("Missingno", "D") == 1
        assert manager.add_card_to_deck("Pikachu", "Ghost") == 1

    def test_no_copies(self, manager: DeckManager, collection_manager: CollectionManager) -> None:
        manager.create_deck("D", "Normal")
        collection_manager.sell_card("Oddish", 3)
        assert manager.add_card_to_deck("Oddish", "D") == AddCardStatus.NO_COPIES

    def test_full(self, manager: DeckManager, collection_manager: CollectionManager) -> None:
        manager.create_deck("D", "Normal")
        for i in range(10):
            collection_manager.add_new_card(f"Filler {i}", 1.0, Rarity.COMMON, Variant.NORMAL)
            assert manager.add_card_to_deck(f"Filler {i}", "D") == AddCardStatus.SUCCESS
        assert manager.add_card_to_deck("Pikachu", "D") == AddCardStatus.CONTAINER_FULL
        assert collection_manager.get_card_count("Pikachu") == 3

    def test_duplicate_card(self, manager: DeckManager, collection_manager: CollectionManager) -> None:
        manager.create_deck("D", "Normal")
        manager.add_card_to_deck("Mewtwo", "D")
        assert manager.add_card_to_deck("MEWTWO", "D") == 4
        assert manager.find_deck("D").card_count == 1
        assert collection_manager.get_card_count("Mewtwo") == 2


class TestRemoveAndDelete:
    def test_remove_restores_count(
        self, manager: DeckManager, collection_manager: CollectionManager
    ) -> None:
        manager.create_deck("D", "Normal")
        manager.add_card_to_deck("Mewtwo", "D")
        assert manager.remove_card_from_deck(0, "D") is True
        assert collection_manager.get_card_count("Mewtwo") == 3

    def test_remove_bad_index(self, manager: DeckManager) -> None:
        manager.create_deck("D", "Normal")
        assert manager.remove_card_from_deck(0, "D") is False
        assert manager.remove_card_from_deck(0, "Ghost") is False

    def test_delete_returns_cards(
        self, manager: DeckManager, collection_manager: CollectionManager
    ) -> None:
        manager.create_deck("D", "Sellable")
        manager.add_card_to_deck("Mewtwo", "D")
        manager.add_card_to_deck("Eevee", "D")
        assert manager.delete_deck("d") is True
        assert manager.find_deck("D") is None
        assert collection_manager.get_card_count("Mewtwo") == 3
        assert collection_manager.get_card_count("Eevee") == 3

    def test_delete_missing(self, manager: DeckManager) -> None:
        assert manager.delete_deck("Ghost") is False


class TestSellDeck:
    def test_sell_sellable(self, manager: DeckManager, collection_manager: CollectionManager) -> None:
        manager.create_deck("Shop", "Sellable")
        manager.add_card_to_deck("Pikachu", "Shop")
        manager.add_card_to_deck("Mewtwo", "Shop")

        assert manager.sell_deck("Shop") == pytest.approx(70.0)
        assert manager.find_deck("Shop") is None
        assert collection_manager.get_card_count("Pikachu") == 2

    def test_normal_deck_not_sold(self, manager: DeckManager) -> None:
        manager.create_deck("Play", "Normal")
        manager.add_card_to_deck("Pikachu", "Play")
        assert manager.sell_deck("Play") <= 0
        assert manager.find_deck("Play") is not None

    def test_missing(self, manager: DeckManager) -> None:
        assert manager.sell_deck("Ghost") <= 0

    def test_empty_deck_sold_for_nothing(self, manager: DeckManager) -> None:
        manager.create_deck("Shop", "Sellable")
        assert manager.sell_deck("Shop") == 0.0
        assert manager.find_deck("Shop") is None
