"""
Deck Models.

A deck is a bounded play set of distinct cards.

INVARIANT: A deck never holds more than DECK_CAPACITY cards.
INVARIANT: No two cards in a deck share a (case-insensitive) name.
"""

from abc import ABC, abstractmethod
from typing import ClassVar

from cardvault.config import DECK_CAPACITY
from cardvault.models.card import Card, normalize_name
from cardvault.models.failure import ContainerValidationError


class Deck(ABC):
    """Base deck: storage, capacity and uniqueness by card name."""

    MAX_CAPACITY: ClassVar[int] = DECK_CAPACITY

    type_name: ClassVar[str] = ""

    def __init__(self, name: str) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ContainerValidationError("deck", "cannot be null or blank")
        self._name = name.strip()
        self._cards: list[Card] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, cards={len(self._cards)})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def key(self) -> str:
        return normalize_name(self._name)

    @property
    def cards(self) -> list[Card]:
        """Copy of the cards in insertion order."""
        return list(self._cards)

    @property
    def card_count(self) -> int:
        return len(self._cards)

    def is_full(self) -> bool:
        return len(self._cards) >= self.MAX_CAPACITY

    def contains_card(self, card_name: str) -> bool:
        """Check for a card by name (case-insensitive)."""
        return any(card.same_name(card_name) for card in self._cards)

    def add_card(self, card: Card) -> bool:
        """Append a card if there is room and no card of that name is present."""
        if not self.is_full() and not self.contains_card(card.name):
            self._cards.append(card)
            return True
        return False

    def remove_card(self, index: int) -> Card | None:
        """Remove and return the card at `index`, or None if out of range."""
        if 0 <= index < len(self._cards):
            return self._cards.pop(index)
        return None

    @abstractmethod
    def is_sellable(self) -> bool:
        """Whether the deck can be sold as a whole."""


class NormalDeck(Deck):
    """A play deck. Cannot be sold."""

    type_name = "Normal"

    def is_sellable(self) -> bool:
        return False


class SellableDeck(Deck):
    """A deck built to be sold as a unit."""

    type_name = "Sellable"

    def is_sellable(self) -> bool:
        return True


DECK_TYPES: dict[str, type[Deck]] = {
    normalize_name(deck_cls.type_name): deck_cls for deck_cls in (NormalDeck, SellableDeck)
}


def create_deck(name: str, deck_type: str) -> Deck | None:
    """
    Instantiate a deck from its type string (case-insensitive).

    Returns None for an unknown type.

    Raises:
        ContainerValidationError: If the name is blank
    """
    if not isinstance(deck_type, str):
        return None
    deck_cls = DECK_TYPES.get(normalize_name(deck_type))
    if deck_cls is None:
        return None
    return deck_cls(name)


def deck_sale_price(deck: Deck) -> float:
    """Sale price of a deck: total calculated value, no handling fee."""
    return sum((card.calculated_value for card in deck.cards), 0.0)
