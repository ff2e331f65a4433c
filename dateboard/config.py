from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    log_level: str = "INFO"

    # HTTP server (run.py)
    host: str = "127.0.0.1"
    port: int = 3000

    # Expiry sweeper
    sweep_interval_seconds: float = 5.0

    # Listing id scrambler
    id_key: str = "metalab-dates"
    id_alphabet: str = "23456789abcdefghijkmnpqrstuvwxyz"


settings = Settings()
