from cardvault.models.binder import (
    BINDER_TYPES,
    Binder,
    CollectorBinder,
    LuxuryBinder,
    NonCuratedBinder,
    PauperBinder,
    RaresBinder,
    SellableBinder,
    create_binder,
)
from cardvault.models.card import VARIANT_MULTIPLIERS, Card, Rarity, Variant, normalize_name
from cardvault.models.collection import Collection
from cardvault.models.deck import (
    DECK_TYPES,
    Deck,
    NormalDeck,
    SellableDeck,
    create_deck,
    deck_sale_price,
)
from cardvault.models.failure import (
    STANDARD_MESSAGES,
    STANDARD_SUGGESTIONS,
    AddCardStatus,
    CardValidationError,
    ContainerValidationError,
    FailureDetail,
    FailureKind,
    KnownError,
    describe_status,
)
from cardvault.models.summary import ContainerSummary, InventorySummary

__all__ = [
    "AddCardStatus",
    "BINDER_TYPES",
    "Binder",
    "Card",
    "CardValidationError",
    "Collection",
    "CollectorBinder",
    "ContainerSummary",
    "ContainerValidationError",
    "DECK_TYPES",
    "Deck",
    "FailureDetail",
    "FailureKind",
    "InventorySummary",
    "KnownError",
    "LuxuryBinder",
    "NonCuratedBinder",
    "NormalDeck",
    "PauperBinder",
    "RaresBinder",
    "Rarity",
    "STANDARD_MESSAGES",
    "STANDARD_SUGGESTIONS",
    "SellableBinder",
    "SellableDeck",
    "VARIANT_MULTIPLIERS",
    "Variant",
    "create_binder",
    "create_deck",
    "deck_sale_price",
    "describe_status",
    "normalize_name",
]
