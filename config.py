"""
config.py — Konfiguracja aplikacji przez zmienne środowiskowe.
Wszystkie zmienne mają prefiks PLUSMINUS_.
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = "INFO"

    # Arytmetyka (FractionNumberSystem)
    max_factorial_operand: int = 1000
    max_exponent: int = 10_000
    approx_digits: int = 12   # cyfry znaczące dla pierwiastków niewymiernych

    # App
    app_title: str = "PlusMinus"
    app_version: str = "0.1.0"

    model_config = SettingsConfigDict(env_prefix="PLUSMINUS_", env_file=".env", extra="ignore")
