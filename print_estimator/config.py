import os

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Print Job Estimator"
    CATALOG_PATH: str = os.path.join(os.path.dirname(__file__), "..", "data", "catalog.json")
    LOG_LEVEL: str = "INFO"

    # Custom-size magnet rate, currency per mm² per 1000 pieces
    MAGNET_UNIT_RATE: float = 0.21

    CORS_ORIGINS: list[str] = ["*"]

    class Config:
        env_file = ".env"


settings = Settings()
