from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Terra LCD
    lcd_url: str = "https://phoenix-lcd.terra.dev"
    chain_id: str = "phoenix-1"
    lcd_timeout_seconds: float = 30.0

    # NFT marketplace contract
    market_contract_address: str = ""
    market_code_id: int = 0
    market_label: str = "nft-market"
    market_admin: str = ""

    # Logging
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
