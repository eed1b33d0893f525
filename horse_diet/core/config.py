import os
from pathlib import Path
from pydantic_settings import BaseSettings

PACKAGE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_FEED_DATA_PATH = PACKAGE_DIR / "data" / "feeds.json"


def get_default_database_url() -> str:
    """Get default database URL based on environment."""
    if os.environ.get("DATABASE_URL"):
        return os.environ.get("DATABASE_URL")
    # Serverless hosts only allow writes under /tmp
    if os.environ.get("VERCEL") or os.environ.get("AWS_LAMBDA_FUNCTION_NAME"):
        return "sqlite:////tmp/horse_diet.db"
    return "sqlite:///./horse_diet.db"


class Settings(BaseSettings):
    APP_NAME: str = "Horse Diet Evaluator API"
    DATABASE_URL: str = get_default_database_url()
    FEED_DATA_PATH: str = str(DEFAULT_FEED_DATA_PATH)
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
