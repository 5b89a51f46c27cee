"""
Binder management service.

Creates, deletes and sells binders, and moves cards between binders and
the collection. Every operation reports its outcome as a return value.

INVARIANT: Every eligibility check runs before the first mutation, so a
rejected operation leaves binders and collection untouched.
"""

import logging

from cardvault.models.binder import Binder, LuxuryBinder, create_binder
from cardvault.models.card import Card, normalize_name
from cardvault.models.failure import AddCardStatus, ContainerValidationError
from cardvault.services.collection_manager import CollectionManager

logger = logging.getLogger(__name__)


class BinderManager:
    """Owns the binder list and moves cards in and out of binders."""

    def __init__(self, collection_manager: CollectionManager) -> None:
        self._binders: list[Binder] = []
        self._collection = collection_manager

    def find_binder(self, name: str | None) -> Binder | None:
        """Find a binder by name (case-insensitive, trimmed)."""
        if not isinstance(name, str):
            return None
        key = normalize_name(name)
        for binder in self._binders:
            if binder.key == key:
                return binder
        return None

    def create_binder(self, name: str, binder_type: str) -> bool:
        """
        Create an empty binder of the given type.

        Returns False on a duplicate name, unknown type, or blank name.
        """
        if self.find_binder(name) is not None:
            logger.warning("binder_already_exists", extra={"binder": name})
            return False

        try:
            binder = create_binder(name, binder_type)
        except ContainerValidationError as e:
            logger.warning("binder_validation_failed", extra={"reason": e.reason})
            return False

        if binder is None:
            logger.warning("unknown_binder_type", extra={"binder_type": binder_type})
            return False

        self._binders.append(binder)
        logger.info("binder_created", extra={"binder": binder.name, "binder_type": binder.type_name})
        return True

    def delete_binder(self, name: str) -> bool:
        """Delete a binder, returning each of its cards to the collection."""
        binder = self.find_binder(name)
        if binder is None:
            logger.warning("binder_not_found", extra={"binder": name})
            return False

        for card in binder.cards:
            self._collection.increase_count(card.name, 1)

        self._binders.remove(binder)
        logger.info(
            "binder_deleted",
            extra={"binder": binder.name, "returned_cards": binder.card_count},
        )
        return True

    def sell_binder(self, name: str) -> float:
        """
        Sell a binder as a whole.

        The binder and its cards are destroyed; collection counts are not
        restored. Returns the sale price, or 0.0 if the binder does not
        exist or its type cannot be sold. An empty binder is still sold,
        for 0.0.
        """
        binder = self.find_binder(name)
        if binder is None:
            logger.warning("binder_not_found", extra={"binder": name})
            return 0.0

        if not binder.is_sellable():
            logger.warning(
                "binder_not_sellable",
                extra={"binder": binder.name, "binder_type": binder.type_name},
            )
            return 0.0

        price = binder.calculate_price()
        self._binders.remove(binder)
        logger.info("binder_sold", extra={"binder": binder.name, "price": price})
        return price

    def add_card_to_binder(self, card_name: str, binder_name: str) -> AddCardStatus:
        """
        Move one copy of a card from the collection into a binder.

        Returns:
            AddCardStatus: SUCCESS, NOT_FOUND, NO_COPIES, CONTAINER_FULL
            or RULE_VIOLATION
        """
        binder = self.find_binder(binder_name)
        card = self._collection.find_card(card_name)

        if binder is None or card is None:
            return AddCardStatus.NOT_FOUND
        if not self._collection.is_card_available(card.name):
            return AddCardStatus.NO_COPIES
        if binder.is_full():
            return AddCardStatus.CONTAINER_FULL
        if not binder.can_add_card(card):
            return AddCardStatus.RULE_VIOLATION

        self._collection.decrease_count(card.name, 1)
        binder.add_card(card)
        logger.debug("card_moved_to_binder", extra={"card": card.name, "binder": binder.name})
        return AddCardStatus.SUCCESS

    def remove_card_from_binder(self, index: int, binder_name: str) -> bool:
        """Move the card at `index` back to the collection."""
        binder = self.find_binder(binder_name)
        if binder is None:
            return False

        card = binder.remove_card(index)
        if card is None:
            return False

        self._collection.increase_count(card.name, 1)
        logger.debug("card_returned_from_binder", extra={"card": card.name, "binder": binder.name})
        return True

    def can_perform_trade(
        self,
        binder_name: str,
        outgoing_index: int,
        incoming_card: Card | None,
    ) -> bool:
        """Run every trade check without mutating anything."""
        binder = self.find_binder(binder_name)
        if binder is None or incoming_card is None:
            return False
        if not binder.can_trade():
            logger.warning("binder_not_tradeable", extra={"binder": binder.name})
            return False
        if not binder.can_add_card(self._resolve_incoming(incoming_card)):
            logger.warning(
                "trade_card_ineligible",
                extra={"binder": binder.name, "card": incoming_card.name},
            )
            return False
        return binder.is_valid_index(outgoing_index)

    def perform_trade(
        self,
        binder_name: str,
        outgoing_index: int,
        incoming_card: Card | None,
    ) -> bool:
        """
        Trade the card at `outgoing_index` for `incoming_card`, 1-for-1.

        The outgoing card leaves the system for good (no count is restored).
        An incoming card whose name is new to the collection is registered
        with zero available copies, since its one copy goes straight into
        the binder. A card whose name is already known enters the binder
        as the collection's own instance.
        """
        if not self.can_perform_trade(binder_name, outgoing_index, incoming_card):
            return False

        binder = self.find_binder(binder_name)
        incoming = self._resolve_incoming(incoming_card)

        outgoing = binder.remove_card(outgoing_index)

        if self._collection.find_card(incoming.name) is None:
            self._collection.add_new_card(
                incoming.name,
                incoming.base_value,
                incoming.rarity,
                incoming.variant,
            )
            self._collection.decrease_count(incoming.name, 1)
            incoming = self._collection.find_card(incoming.name)

        binder.add_card(incoming)
        logger.info(
            "trade_completed",
            extra={"binder": binder.name, "outgoing": outgoing.name, "incoming": incoming.name},
        )
        return True

    def set_binder_price(self, binder_name: str, price: float) -> bool:
        """Set the custom price of a Luxury binder."""
        binder = self.find_binder(binder_name)
        if not isinstance(binder, LuxuryBinder):
            logger.warning("binder_price_not_settable", extra={"binder": binder_name})
            return False
        if not binder.set_price(price):
            logger.warning(
                "binder_price_rejected",
                extra={"binder": binder.name, "price": price, "value": binder.total_card_value()},
            )
            return False
        return True

    def get_binders(self) -> list[Binder]:
        """Copy of the binder list."""
        return list(self._binders)

    def _resolve_incoming(self, incoming_card: Card) -> Card:
        """The collection's instance of the incoming card, if it already knows the name."""
        known = self._collection.find_card(incoming_card.name)
        return known if known is not None else incoming_card
