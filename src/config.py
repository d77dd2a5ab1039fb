from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Redis (market data cache)
    redis_url: str = "redis://localhost:6379/0"
    market_data_ttl_seconds: int = 86400

    # Fallback market data when no live provider is wired in
    default_conventional_rate: Decimal = Decimal("6.75")
    default_fha_rate: Decimal = Decimal("6.25")
    default_property_tax_rate: Decimal = Decimal("1.2")
    default_property_insurance: Decimal = Decimal("1200")

    default_loan_term_years: int = 30

    # App
    debug: bool = False
    log_level: str = "INFO"


settings = Settings()
