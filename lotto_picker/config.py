"""Application configuration using Pydantic Settings."""

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Database (generated picks log)
    DATABASE_URL: str = "sqlite+aiosqlite:///./lotto_picker.db"

    # App
    APP_NAME: str = "Lotto Picker"
    APP_ENV: str = "development"
    DEBUG: bool = True

    # Historical data
    DATA_DIR: Path = Path("./lottery-data")
    LOTTO_DATA_FILE: str = "lottotexas.csv"
    POWERBALL_DATA_FILE: str = "powerball.csv"

    # Analysis
    RECENT_WINDOW_DAYS: int = 30
    MAX_DRAWS_PER_REQUEST: int = 10

    # Generative-text picks
    AI_ENABLED: bool = True
    XAI_API_KEY: str = ""
    XAI_API_ENDPOINT: str = "https://api.xai.com/v1/generate"
    AI_TIMEOUT_SECONDS: float = 15.0
    AI_MAX_TOKENS: int = 100
    AI_TEMPERATURE: float = 0.7

    def data_file_for(self, game_id: str) -> Path:
        """Path of the historical CSV for a game id."""
        file_names = {
            "lotto": self.LOTTO_DATA_FILE,
            "powerball": self.POWERBALL_DATA_FILE,
        }
        return self.DATA_DIR / file_names.get(game_id, f"{game_id}.csv")


settings = Settings()
