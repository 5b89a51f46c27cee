"""
InventorySystem: the single entry point for presentation layers.

Composes the collection, binder and deck managers and keeps the running
money total. Apart from crediting sales, every method delegates straight
to a manager.
"""

import logging

from cardvault.models.binder import Binder
from cardvault.models.card import Card, Rarity, Variant
from cardvault.models.deck import Deck, deck_sale_price
from cardvault.models.failure import AddCardStatus
from cardvault.models.summary import ContainerSummary, InventorySummary
from cardvault.services.binder_manager import BinderManager
from cardvault.services.collection_manager import CollectionManager
from cardvault.services.deck_manager import DeckManager
from cardvault.services.trade import TradeConfirmation, TradeQuote, quote_trade

logger = logging.getLogger(__name__)


class InventorySystem:
    """Facade over the three managers plus the accumulated money."""

    def __init__(self, trade_confirmation_threshold: float | None = None) -> None:
        self._total_money = 0.0
        self._trade_threshold = trade_confirmation_threshold
        self.collection_manager = CollectionManager()
        self.binder_manager = BinderManager(self.collection_manager)
        self.deck_manager = DeckManager(self.collection_manager)

    @property
    def total_money(self) -> float:
        return self._total_money

    def _credit(self, amount: float, source: str) -> None:
        self._total_money += amount
        logger.info("money_credited", extra={"amount": amount, "source": source})

    # --- Sales ---

    def sell_card(self, card_name: str, amount: int = 1) -> bool:
        """Sell `amount` available copies of a card at its calculated value."""
        card = self.collection_manager.find_card(card_name)
        if card is None or not self.collection_manager.sell_card(card_name, amount):
            return False
        self._credit(card.calculated_value * amount, "card")
        return True

    def sell_binder(self, binder_name: str) -> bool:
        price = self.binder_manager.sell_binder(binder_name)
        if price <= 0:
            return False
        self._credit(price, "binder")
        return True

    def sell_deck(self, deck_name: str) -> bool:
        price = self.deck_manager.sell_deck(deck_name)
        if price <= 0:
            return False
        self._credit(price, "deck")
        return True

    # --- Collection ---

    def add_new_card(self, name: str, base_value: float, rarity: Rarity, variant: Variant) -> bool:
        return self.collection_manager.add_new_card(name, base_value, rarity, variant)

    def find_card(self, name: str | None) -> Card | None:
        return self.collection_manager.find_card(name)

    def increase_card_count(self, name: str, amount: int) -> bool:
        return self.collection_manager.increase_count(name, amount)

    def decrease_card_count(self, name: str, amount: int) -> bool:
        return self.collection_manager.decrease_count(name, amount)

    def is_card_available(self, name: str | None) -> bool:
        return self.collection_manager.is_card_available(name)

    def get_card_count(self, name: str | None) -> int:
        return self.collection_manager.get_card_count(name)

    def get_card_types(self) -> list[Card]:
        return self.collection_manager.get_card_types()

    def get_card_counts(self) -> dict[str, int]:
        return self.collection_manager.get_card_counts()

    # --- Binders ---

    def create_binder(self, name: str, binder_type: str) -> bool:
        return self.binder_manager.create_binder(name, binder_type)

    def delete_binder(self, name: str) -> bool:
        return self.binder_manager.delete_binder(name)

    def find_binder(self, name: str | None) -> Binder | None:
        return self.binder_manager.find_binder(name)

    def get_binders(self) -> list[Binder]:
        return self.binder_manager.get_binders()

    def add_card_to_binder(self, card_name: str, binder_name: str) -> AddCardStatus:
        return self.binder_manager.add_card_to_binder(card_name, binder_name)

    def remove_card_from_binder(self, index: int, binder_name: str) -> bool:
        return self.binder_manager.remove_card_from_binder(index, binder_name)

    def set_binder_price(self, binder_name: str, price: float) -> bool:
        return self.binder_manager.set_binder_price(binder_name, price)

    def perform_trade(self, binder_name: str, outgoing_index: int, incoming_card: Card | None) -> bool:
        return self.binder_manager.perform_trade(binder_name, outgoing_index, incoming_card)

    def quote_trade(
        self,
        binder_name: str,
        outgoing_index: int,
        incoming_card: Card | None,
    ) -> TradeQuote | None:
        """
        Quote a trade without touching any state. None if binder or index is invalid.

        A card whose name the collection already knows is priced as the
        collection's own card, since that is the card the trade places.
        """
        binder = self.binder_manager.find_binder(binder_name)
        if binder is None or incoming_card is None:
            return None
        outgoing = binder.card_at(outgoing_index)
        if outgoing is None:
            return None
        known = self.collection_manager.find_card(incoming_card.name)
        incoming = known if known is not None else incoming_card
        return quote_trade(outgoing, incoming, self._trade_threshold)

    def trade(
        self,
        binder_name: str,
        outgoing_index: int,
        incoming_card: Card | None,
        confirm: TradeConfirmation | None = None,
    ) -> bool:
        """
        Quote a trade, ask for confirmation if the value gap requires it,
        then commit it.

        A trade needing confirmation is declined when `confirm` is missing
        or returns False; nothing is mutated in that case.
        """
        quote = self.quote_trade(binder_name, outgoing_index, incoming_card)
        if quote is None:
            return False

        if quote.requires_confirmation and (confirm is None or not confirm(quote)):
            logger.info(
                "trade_declined",
                extra={"binder": binder_name, "value_difference": quote.value_difference},
            )
            return False

        return self.binder_manager.perform_trade(binder_name, outgoing_index, incoming_card)

    # --- Decks ---

    def create_deck(self, name: str, deck_type: str) -> bool:
        return self.deck_manager.create_deck(name, deck_type)

    def delete_deck(self, name: str) -> bool:
        return self.deck_manager.delete_deck(name)

    def find_deck(self, name: str | None) -> Deck | None:
        return self.deck_manager.find_deck(name)

    def get_decks(self) -> list[Deck]:
        return self.deck_manager.get_decks()

    def add_card_to_deck(self, card_name: str, deck_name: str) -> AddCardStatus:
        return self.deck_manager.add_card_to_deck(card_name, deck_name)

    def remove_card_from_deck(self, index: int, deck_name: str) -> bool:
        return self.deck_manager.remove_card_from_deck(index, deck_name)

    # --- Reporting ---

    def summary(self) -> InventorySummary:
        """Snapshot of money, counts and containers."""
        return InventorySummary(
            total_money=self._total_money,
            card_counts=self.get_card_counts(),
            unique_cards=self.collection_manager.unique_cards(),
            total_available=self.collection_manager.total_available(),
            binders=[
                ContainerSummary(
                    name=binder.name,
                    type_name=binder.type_name,
                    card_count=binder.card_count,
                    capacity=binder.MAX_CAPACITY,
                    sellable=binder.is_sellable(),
                    tradeable=binder.can_trade(),
                    sale_price=binder.calculate_price(),
                )
                for binder in self.get_binders()
            ],
            decks=[
                ContainerSummary(
                    name=deck.name,
                    type_name=deck.type_name,
                    card_count=deck.card_count,
                    capacity=deck.MAX_CAPACITY,
                    sellable=deck.is_sellable(),
                    sale_price=deck_sale_price(deck) if deck.is_sellable() else 0.0,
                )
                for deck in self.get_decks()
            ],
        )
