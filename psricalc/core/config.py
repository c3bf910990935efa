from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    PROJECT_NAME: str = "psri-service"
    LOG_LEVEL: str = "INFO"

    # days 3, 5, 7 of a standard germination trial
    DEFAULT_TIME_POINTS: List[float] = [3.0, 5.0, 7.0]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
