from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # SBA 504 structure: first mortgage + SBA/CDC loan, remainder is the down payment
    first_mortgage_share: float = 0.50
    sba_share: float = 0.40
    sba_term_years: int = 25  # Fixed for real estate
    first_mortgage_terms: tuple[int, ...] = (7, 10, 25)

    # Carrying costs, % of purchase price per year
    property_tax_rate_pct: float = 1.1
    insurance_rate_pct: float = 0.5

    # Share of purchase price treated as depreciable building (land is not)
    building_value_fraction: float = 0.80


settings = Settings()
