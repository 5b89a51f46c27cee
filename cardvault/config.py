import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="CARDVAULT_")

    app_name: str = "cardvault"
    debug: bool = False

    log_level: str = "INFO"

    # Trades whose value difference reaches this amount must be confirmed
    # by the caller before they are committed
    trade_confirmation_threshold: float = 1.0


settings = Settings()


# =============================================================================
# CONTAINER LIMITS (constants, not configurable)
# =============================================================================

# Maximum cards a binder can hold (duplicates count individually)
BINDER_CAPACITY = 20

# Maximum cards a deck can hold (all names distinct)
DECK_CAPACITY = 10

# Handling fee charged on sale by Rares and Luxury binders
HANDLING_FEE_RATE = 0.10


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for scripts and interactive sessions."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
