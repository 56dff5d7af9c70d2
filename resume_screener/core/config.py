from pydantic_settings import BaseSettings
from pathlib import Path

class Settings(BaseSettings):
    # API Config
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Resume Screener"

    # Paths
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    LOG_DIR: Path = BASE_DIR / "logs"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = True

    # Ranking defaults
    STRONG_FIT_THRESHOLD: float = 70
    COMPARISON_LIMIT: int = 3
    EXTRA_SKILL_LIMIT: int = 10

    # Session history
    HISTORY_LIMIT: int = 20

    class Config:
        case_sensitive = True
        env_file = ".env"

settings = Settings()
