from dataclasses import dataclass, field

from cardvault.models.card import Card, normalize_name


@dataclass
class Collection:
    """
    The master registry of card types and their available quantities.

    Both maps are keyed by the card's lowercase, trimmed name.
    A count is the number of copies *available*, i.e. not checked out
    into a binder or deck.

    INVARIANT: Counts never go negative.
    INVARIANT: Every key in card_counts has a matching card type.
    """

    _card_types: dict[str, Card] = field(default_factory=dict)
    _card_counts: dict[str, int] = field(default_factory=dict)

    def find_card(self, name: str | None) -> Card | None:
        """Find a card type by name (case-insensitive, trimmed)."""
        if not isinstance(name, str):
            return None
        return self._card_types.get(normalize_name(name))

    def add_card_type(self, card: Card | None) -> bool:
        """
        Register a new card type with a count of 1.

        Fails if the card is None or its name is already registered.
        """
        if card is None or card.key in self._card_types:
            return False
        self._card_types[card.key] = card
        self._card_counts[card.key] = 1
        return True

    def increase_count(self, name: str, amount: int) -> bool:
        """Increase a card's count. Fails for unknown cards or amount <= 0."""
        card = self.find_card(name)
        if card is None or amount <= 0:
            return False
        self._card_counts[card.key] = self._card_counts.get(card.key, 0) + amount
        return True

    def decrease_count(self, name: str, amount: int) -> bool:
        """
        Decrease a card's count.

        Fails for unknown cards, amount <= 0, or amount above the current count.
        """
        card = self.find_card(name)
        if card is None or amount <= 0:
            return False
        current = self._card_counts.get(card.key, 0)
        if amount > current:
            return False
        self._card_counts[card.key] = current - amount
        return True

    def get_count(self, name: str | None) -> int:
        """Available copies of a card; 0 if unknown."""
        if not isinstance(name, str):
            return 0
        return self._card_counts.get(normalize_name(name), 0)

    def is_available(self, name: str | None) -> bool:
        """Check if at least one copy is available."""
        return self.get_count(name) > 0

    def card_types(self) -> list[Card]:
        """Copy of all card types, in registration order."""
        return list(self._card_types.values())

    def card_counts(self) -> dict[str, int]:
        """Copy of the name -> count map."""
        return dict(self._card_counts)

    def total_available(self) -> int:
        """Total available copies across all card types."""
        return sum(self._card_counts.values())

    def unique_cards(self) -> int:
        """Number of registered card types."""
        return len(self._card_types)
