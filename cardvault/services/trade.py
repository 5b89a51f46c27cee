"""
Trade quoting.

A trade is checked in two steps: first it is quoted (no state touched),
then, if the value gap is large enough, the caller must confirm it before
it is committed. Declining a quote leaves everything as it was.
"""

from dataclasses import dataclass
from typing import Protocol

from cardvault.config import settings
from cardvault.models.card import Card


@dataclass(frozen=True, slots=True)
class TradeQuote:
    """
    Value comparison of a proposed 1-for-1 trade.

    Attributes:
        outgoing: Card leaving the binder
        incoming: Card entering the binder
        threshold: Value gap at which confirmation is required
    """

    outgoing: Card
    incoming: Card
    threshold: float

    @property
    def value_difference(self) -> float:
        """Absolute gap between the two cards' calculated values."""
        return abs(self.outgoing.calculated_value - self.incoming.calculated_value)

    @property
    def requires_confirmation(self) -> bool:
        """True when the trade may be unfair and must be confirmed."""
        return self.value_difference >= self.threshold


class TradeConfirmation(Protocol):
    """Asks the user whether a quoted trade should go ahead."""

    def __call__(self, quote: TradeQuote) -> bool: ...


def quote_trade(outgoing: Card, incoming: Card, threshold: float | None = None) -> TradeQuote:
    """Quote a trade, using the configured confirmation threshold by default."""
    if threshold is None:
        threshold = settings.trade_confirmation_threshold
    return TradeQuote(outgoing=outgoing, incoming=incoming, threshold=threshold)
