from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# -----------------------------------------------------------------------------
# GAME
# -----------------------------------------------------------------------------

BOARD_SIZE = 3                    # fixed 3x3 grid

PLAYER_ONE_NAME = "Player 1"
PLAYER_TWO_NAME = "Player 2"

# -----------------------------------------------------------------------------
# UI
# -----------------------------------------------------------------------------

WINDOW_TITLE = "Tic-Tac-Toe"

BOARD_BACKGROUND = "#333"
GRID_COLOR = "#555"
X_COLOR = "#8acaff"
O_COLOR = "#ff8a8a"
WIN_LINE_COLOR = "#ffe082"

# -----------------------------------------------------------------------------
# LOGGING
# -----------------------------------------------------------------------------

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


class Settings(BaseSettings):
    """overrides read from TICTACTOE_* environment variables"""

    model_config = SettingsConfigDict(env_prefix="TICTACTOE_", case_sensitive=False)

    log_level: str = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        level = str(v).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()
