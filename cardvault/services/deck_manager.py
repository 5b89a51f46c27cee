"""
Deck management service.

Mirrors BinderManager for decks. Decks have no trade operation; their
only rule beyond capacity is that card names must be distinct.
"""

import logging

from cardvault.models.card import normalize_name
from cardvault.models.deck import Deck, create_deck, deck_sale_price
from cardvault.models.failure import AddCardStatus, ContainerValidationError
from cardvault.services.collection_manager import CollectionManager

logger = logging.getLogger(__name__)


class DeckManager:
    """Owns the deck list and moves cards in and out of decks."""

    def __init__(self, collection_manager: CollectionManager) -> None:
        self._decks: list[Deck] = []
        self._collection = collection_manager

    def find_deck(self, name: str | None) -> Deck | None:
        """Find a deck by name (case-insensitive, trimmed)."""
        if not isinstance(name, str):
            return None
        key = normalize_name(name)
        for deck in self._decks:
            if deck.key == key:
                return deck
        return None

    def create_deck(self, name: str, deck_type: str) -> bool:
        """Create an empty deck. Returns False on duplicate name, unknown type, or blank name."""
        if self.find_deck(name) is not None:
            logger.warning("deck_already_exists", extra={"deck": name})
            return False

        try:
            deck = create_deck(name, deck_type)
        except ContainerValidationError as e:
            logger.warning("deck_validation_failed", extra={"reason": e.reason})
            return False

        if deck is None:
            logger.warning("unknown_deck_type", extra={"deck_type": deck_type})
            return False

        self._decks.append(deck)
        logger.info("deck_created", extra={"deck": deck.name, "deck_type": deck.type_name})
        return True

    def delete_deck(self, name: str) -> bool:
        """Delete a deck, returning each of its cards to the collection."""
        deck = self.find_deck(name)
        if deck is None:
            logger.warning("deck_not_found", extra={"deck": name})
            return False

        for card in deck.cards:
            self._collection.increase_count(card.name, 1)

        self._decks.remove(deck)
        logger.info("deck_deleted", extra={"deck": deck.name, "returned_cards": deck.card_count})
        return True

    def sell_deck(self, name: str) -> float:
        """
        Sell a deck for the total value of its cards (no fee).

        Returns 0.0, leaving the deck in place, if it does not exist or
        cannot be sold. An empty deck is still sold, for 0.0.
        """
        deck = self.find_deck(name)
        if deck is None:
            logger.warning("deck_not_found", extra={"deck": name})
            return 0.0

        if not deck.is_sellable():
            logger.warning("deck_not_sellable", extra={"deck": deck.name, "deck_type": deck.type_name})
            return 0.0

        price = deck_sale_price(deck)
        self._decks.remove(deck)
        logger.info("deck_sold", extra={"deck": deck.name, "price": price})
        return price

    def add_card_to_deck(self, card_name: str, deck_name: str) -> AddCardStatus:
        """
        Move one copy of a card from the collection into a deck.

        Returns:
            AddCardStatus: SUCCESS, NOT_FOUND, NO_COPIES, CONTAINER_FULL
            or RULE_VIOLATION (a card of that name is already in the deck)
        """
        deck = self.find_deck(deck_name)
        card = self._collection.find_card(card_name)

        if deck is None or card is None:
            return AddCardStatus.NOT_FOUND
        if not self._collection.is_card_available(card.name):
            return AddCardStatus.NO_COPIES
        if deck.is_full():
            return AddCardStatus.CONTAINER_FULL
        if deck.contains_card(card.name):
            return AddCardStatus.RULE_VIOLATION

        self._collection.decrease_count(card.name, 1)
        deck.add_card(card)
        logger.debug("card_moved_to_deck", extra={"card": card.name, "deck": deck.name})
        return AddCardStatus.SUCCESS

    def remove_card_from_deck(self, index: int, deck_name: str) -> bool:
        """Move the card at `index` back to the collection."""
        deck = self.find_deck(deck_name)
        if deck is None:
            return False

        card = deck.remove_card(index)
        if card is None:
            return False

        self._collection.increase_count(card.name, 1)
        return True

    def get_decks(self) -> list[Deck]:
        """Copy of the deck list."""
        return list(self._decks)
