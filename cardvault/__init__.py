"""
cardvault: trading card inventory engine.

Tracks card types and quantities, organizes them into binders and decks,
and handles selling and trading.
"""

from cardvault.inventory import InventorySystem

__all__ = ["InventorySystem"]
