"""
Collection management service.

Owns the Collection and is the only place new card types enter the system.
Card construction errors are caught here, logged, and reported as False;
they never reach the caller as exceptions.
"""

import logging

from cardvault.models.card import Card, Rarity, Variant
from cardvault.models.collection import Collection
from cardvault.models.failure import CardValidationError

logger = logging.getLogger(__name__)


class CollectionManager:
    """Card types, available counts, and per-card sales."""

    def __init__(self, collection: Collection | None = None) -> None:
        self._collection = collection if collection is not None else Collection()

    def find_card(self, name: str | None) -> Card | None:
        return self._collection.find_card(name)

    def add_new_card(
        self,
        name: str,
        base_value: float,
        rarity: Rarity,
        variant: Variant,
    ) -> bool:
        """
        Create and register a new card type with one copy.

        Returns False if a card with that name exists or the fields are invalid.
        """
        if self.find_card(name) is not None:
            logger.warning("card_already_exists", extra={"card": name})
            return False

        try:
            card = Card(name=name, base_value=base_value, rarity=rarity, variant=variant)
        except CardValidationError as e:
            logger.warning(
                "card_validation_failed",
                extra={"field": e.field, "reason": e.reason},
            )
            return False

        self._collection.add_card_type(card)
        logger.info("card_added", extra={"card": card.name})
        return True

    def increase_count(self, name: str, amount: int) -> bool:
        return self._collection.increase_count(name, amount)

    def decrease_count(self, name: str, amount: int) -> bool:
        return self._collection.decrease_count(name, amount)

    def is_card_available(self, name: str | None) -> bool:
        return self._collection.is_available(name)

    def get_card_count(self, name: str | None) -> int:
        return self._collection.get_count(name)

    def sell_card(self, name: str, amount: int = 1) -> bool:
        """
        Remove `amount` copies from the collection for sale.

        Crediting the money is the caller's job.
        """
        if not self._collection.decrease_count(name, amount):
            logger.warning(
                "card_sale_rejected",
                extra={"card": name, "amount": amount, "available": self.get_card_count(name)},
            )
            return False
        logger.info("card_sold", extra={"card": name, "amount": amount})
        return True

    def get_card_types(self) -> list[Card]:
        return self._collection.card_types()

    def get_card_counts(self) -> dict[str, int]:
        return self._collection.card_counts()

    def total_available(self) -> int:
        return self._collection.total_available()

    def unique_cards(self) -> int:
        return self._collection.unique_cards()
