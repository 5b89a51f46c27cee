"""
Card Models.

A Card is a card *type*: one named entry in the collection. Quantities live
in the Collection, never on the Card itself.

INVARIANTS:
- Card construction is the ONLY validation gate for card data
- Cards are frozen (immutable after construction)
- Card identity across the system is the lowercase, trimmed name
"""

import math
from dataclasses import dataclass
from enum import Enum

from cardvault.models.failure import CardValidationError


class Rarity(str, Enum):
    """Card rarity."""

    COMMON = "Common"
    UNCOMMON = "Uncommon"
    RARE = "Rare"
    LEGENDARY = "Legendary"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def is_high_rarity(self) -> bool:
        """Rare and Legendary cards."""
        return self in (Rarity.RARE, Rarity.LEGENDARY)

    @classmethod
    def from_choice(cls, choice: int) -> "Rarity | None":
        """Map a 1-based menu choice to a rarity, or None if out of range."""
        members = list(cls)
        if 0 < choice <= len(members):
            return members[choice - 1]
        return None


class Variant(str, Enum):
    """Card art variant. Each variant scales the card's base value."""

    NORMAL = "Normal"
    EXTENDED_ART = "Extended-art"
    FULL_ART = "Full-art"
    ALT_ART = "Alt-art"

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def multiplier(self) -> float:
        return VARIANT_MULTIPLIERS[self]

    @property
    def is_special(self) -> bool:
        """Every variant other than Normal."""
        return self is not Variant.NORMAL

    @classmethod
    def from_choice(cls, choice: int) -> "Variant | None":
        """Map a 1-based menu choice to a variant, or None if out of range."""
        members = list(cls)
        if 0 < choice <= len(members):
            return members[choice - 1]
        return None


VARIANT_MULTIPLIERS: dict[Variant, float] = {
    Variant.NORMAL: 1.0,
    Variant.EXTENDED_ART: 1.5,
    Variant.FULL_ART: 2.0,
    Variant.ALT_ART: 3.0,
}


def normalize_name(name: str) -> str:
    """Lookup key for a card, binder or deck name."""
    return name.strip().lower()


@dataclass(frozen=True, slots=True)
class Card:
    """
    An immutable card type.

    Only Rare and Legendary cards are conventionally offered in special
    variants, but that is a data-entry concern; any rarity/variant pair
    is accepted here.

    Attributes:
        name: Card name, trimmed (unique across the collection, case-insensitive)
        base_value: Dollar value before the variant multiplier (>= 0)
        rarity: Card rarity
        variant: Card art variant

    Raises:
        CardValidationError: On blank name, negative value, or missing rarity/variant
    """

    name: str
    base_value: float
    rarity: Rarity
    variant: Variant

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise CardValidationError("name", "cannot be null or blank")
        if isinstance(self.base_value, bool) or not isinstance(self.base_value, int | float):
            raise CardValidationError("base value", "must be a number")
        if math.isnan(self.base_value) or self.base_value < 0:
            raise CardValidationError("base value", "cannot be negative")
        if not isinstance(self.rarity, Rarity):
            raise CardValidationError("rarity", "cannot be null")
        if not isinstance(self.variant, Variant):
            raise CardValidationError("variant", "cannot be null")

        object.__setattr__(self, "name", self.name.strip())
        object.__setattr__(self, "base_value", float(self.base_value))

    @property
    def key(self) -> str:
        """Case-insensitive identity of this card type."""
        return normalize_name(self.name)

    @property
    def calculated_value(self) -> float:
        """Real value of the card: base value scaled by the variant multiplier."""
        return self.base_value * self.variant.multiplier

    def same_name(self, name: str) -> bool:
        """Check whether `name` refers to this card (case-insensitive)."""
        return isinstance(name, str) and normalize_name(name) == self.key
