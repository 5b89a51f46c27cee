"""
cardvault services.

Managers that orchestrate card movement, sales and trades.
"""

from cardvault.services.binder_manager import BinderManager
from cardvault.services.collection_manager import CollectionManager
from cardvault.services.deck_manager import DeckManager
from cardvault.services.trade import TradeConfirmation, TradeQuote, quote_trade

__all__ = [
    "BinderManager",
    "CollectionManager",
    "DeckManager",
    "TradeConfirmation",
    "TradeQuote",
    "quote_trade",
]
