"""
Binder Models.

A binder is a bounded container of cards (duplicates allowed). Its type
decides three things:
- which cards it accepts (`can_add_card`)
- whether it can be sold as a whole (`is_sellable`) and for how much
- whether cards can be traded out of it (`can_trade`)

INVARIANT: A binder never holds more than BINDER_CAPACITY cards.
INVARIANT: Selling and trading are mutually exclusive per binder type.

| Type        | Accepts                              | Sell | Trade | Price          |
|-------------|--------------------------------------|------|-------|----------------|
| Non-curated | any card                             | no   | yes   | 0              |
| Collector   | Rare/Legendary with a special variant| no   | yes   | 0              |
| Pauper      | Common/Uncommon                      | yes  | no    | total          |
| Rares       | Rare/Legendary                       | yes  | no    | total + fee    |
| Luxury      | any special variant                  | yes  | no    | custom + fee   |
"""

from abc import ABC, abstractmethod
from typing import ClassVar

from cardvault.config import BINDER_CAPACITY, HANDLING_FEE_RATE
from cardvault.models.card import Card, Rarity, normalize_name
from cardvault.models.failure import ContainerValidationError


def total_card_value(cards: list[Card]) -> float:
    """Sum of calculated values."""
    return sum((card.calculated_value for card in cards), 0.0)


class Binder(ABC):
    """
    Base binder: storage, capacity and index-based removal.

    Subclasses define the eligibility, sale and trade rules.
    """

    MAX_CAPACITY: ClassVar[int] = BINDER_CAPACITY

    # Factory type string and display label
    type_name: ClassVar[str] = ""

    def __init__(self, name: str) -> None:
        if not isinstance(name, str) or not name.strip():
            raise ContainerValidationError("binder", "cannot be null or blank")
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

    def add_card(self, card: Card) -> bool:
        """Append a card if there is room and the binder's rules allow it."""
        if not self.is_full() and self.can_add_card(card):
            self._cards.append(card)
            return True
        return False

    def is_valid_index(self, index: int) -> bool:
        return 0 <= index < len(self._cards)

    def card_at(self, index: int) -> Card | None:
        """Card at `index` without removing it, or None if out of range."""
        if self.is_valid_index(index):
            return self._cards[index]
        return None

    def remove_card(self, index: int) -> Card | None:
        """Remove and return the card at `index`, or None if out of range."""
        if self.is_valid_index(index):
            return self._cards.pop(index)
        return None

    def total_card_value(self) -> float:
        return total_card_value(self._cards)

    @abstractmethod
    def can_add_card(self, card: Card) -> bool:
        """Whether this binder type accepts the card."""

    @abstractmethod
    def is_sellable(self) -> bool:
        """Whether the binder can be sold as a whole."""

    @abstractmethod
    def can_trade(self) -> bool:
        """Whether cards can be traded out of this binder."""

    @abstractmethod
    def calculate_price(self) -> float:
        """Sale price including fees; 0 for binders that cannot be sold."""


class NonCuratedBinder(Binder):
    """Accepts any card. Tradeable, not sellable."""

    type_name = "Non-curated"

    def can_add_card(self, card: Card) -> bool:
        return True

    def is_sellable(self) -> bool:
        return False

    def can_trade(self) -> bool:
        return True

    def calculate_price(self) -> float:
        return 0.0


class CollectorBinder(Binder):
    """Rare or Legendary cards in a special variant only. Tradeable, not sellable."""

    type_name = "Collector"

    def can_add_card(self, card: Card) -> bool:
        return card.rarity.is_high_rarity and card.variant.is_special

    def is_sellable(self) -> bool:
        return False

    def can_trade(self) -> bool:
        return True

    def calculate_price(self) -> float:
        return 0.0


class SellableBinder(Binder):
    """
    Base for binders sold as a whole.

    Sellable binders can never be traded from; subclasses must not
    override `is_sellable` or `can_trade`.
    """

    def is_sellable(self) -> bool:
        return True

    def can_trade(self) -> bool:
        return False


class PauperBinder(SellableBinder):
    """Common and Uncommon cards. Sells for the total card value, no fee."""

    type_name = "Pauper"

    def can_add_card(self, card: Card) -> bool:
        return card.rarity in (Rarity.COMMON, Rarity.UNCOMMON)

    def calculate_price(self) -> float:
        return self.total_card_value()


class RaresBinder(SellableBinder):
    """Rare and Legendary cards. Sells for the total card value plus the handling fee."""

    type_name = "Rares"

    def can_add_card(self, card: Card) -> bool:
        return card.rarity.is_high_rarity

    def calculate_price(self) -> float:
        return self.total_card_value() * (1 + HANDLING_FEE_RATE)


class LuxuryBinder(SellableBinder):
    """
    Special-variant cards of any rarity.

    The owner may set a custom price, but never below the total value of
    the cards currently inside. The handling fee applies on top of the
    custom price, or of the total card value when no price is set.
    """

    type_name = "Luxury"

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self._custom_price = 0.0

    @property
    def custom_price(self) -> float:
        """The custom price, 0.0 when unset."""
        return self._custom_price

    def can_add_card(self, card: Card) -> bool:
        return card.variant.is_special

    def set_price(self, price: float) -> bool:
        """Set the custom price. Fails if negative or below the current total card value."""
        if price >= 0 and price >= self.total_card_value():
            self._custom_price = float(price)
            return True
        return False

    def calculate_price(self) -> float:
        base_price = self._custom_price if self._custom_price > 0 else self.total_card_value()
        return base_price * (1 + HANDLING_FEE_RATE)


BINDER_TYPES: dict[str, type[Binder]] = {
    normalize_name(binder_cls.type_name): binder_cls
    for binder_cls in (
        NonCuratedBinder,
        CollectorBinder,
        PauperBinder,
        RaresBinder,
        LuxuryBinder,
    )
}


def create_binder(name: str, binder_type: str) -> Binder | None:
    """
    Instantiate a binder from its type string (case-insensitive).

    Returns None for an unknown type.

    Raises:
        ContainerValidationError: If the name is blank
    """
    if not isinstance(binder_type, str):
        return None
    binder_cls = BINDER_TYPES.get(normalize_name(binder_type))
    if binder_cls is None:
        return None
    return binder_cls(name)
