"""
Centralized application configuration implementing the 12-Factor App methodology.
Validation bounds and display formatting are deployment settings, not constants.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Immutable configuration schema backed by environment variables."""

    APP_NAME: str = "LoanCalc"
    VERSION: str = "1.0.0"
    DEBUG: bool = False

    HOST: str = "0.0.0.0"  # nosec
    PORT: int = 8000

    LOG_LEVEL: str = "INFO"

    # Product limits for user input
    MAX_AMOUNT: float = 999_999_999
    MAX_RATE_PERCENT: float = 100
    MIN_TERM_MONTHS: int = 1
    MAX_TERM_MONTHS: int = 360
    DEFAULT_TERM_MONTHS: int = 12

    # "annuity" (fixed installments) or "simple"
    DEFAULT_PAYMENT_METHOD: str = "annuity"

    # Display formatting (Chilean peso by default)
    LOCALE: str = "es-CL"
    CURRENCY_CODE: str = "CLP"
    CURRENCY_SYMBOL: str = "$"
    CURRENCY_FRACTION_DIGITS: int = 0
    THOUSANDS_SEPARATOR: str = "."
    DECIMAL_SEPARATOR: str = ","

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)


settings = Settings()
