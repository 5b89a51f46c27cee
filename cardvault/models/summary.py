"""
Inventory summary read-models.

Snapshots of the inventory for display. Built fresh on every call and
fully detached from live state.
"""

from pydantic import BaseModel, Field


class ContainerSummary(BaseModel):
    """Summary of a single binder or deck."""

    name: str
    type_name: str
    card_count: int = 0
    capacity: int
    sellable: bool
    tradeable: bool = False
    sale_price: float = Field(
        default=0.0,
        description="Price the container would fetch if sold now (0 when not sellable)",
    )


class InventorySummary(BaseModel):
    """Summary of the whole inventory."""

    total_money: float = 0.0
    card_counts: dict[str, int] = Field(default_factory=dict)
    unique_cards: int = 0
    total_available: int = 0
    binders: list[ContainerSummary] = Field(default_factory=list)
    decks: list[ContainerSummary] = Field(default_factory=list)
