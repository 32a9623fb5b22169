# schedule_api/core/config.py

from pathlib import Path
from typing import List

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

BASE_DIR = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    app_env: str = "dev"
    # PORT is what hosting platforms inject
    app_port: int = Field(8000, validation_alias=AliasChoices("app_port", "port"))
    log_level: str = "INFO"

    service_name: str = "MADI Tutor API"

    # Directory holding schedule_numerator.json / schedule_denominator.json
    schedule_dir: Path = BASE_DIR / "static"

    cors_allow_origins: List[str] = ["*"]

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
