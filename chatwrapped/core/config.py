from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)

    app_name: str = "Chat Wrapped"
    environment: Literal["dev", "test", "prod"] = "dev"
    debug: bool = False
    log_level: str = "INFO"

    # Used only when every sampled date has both leading components <= 12.
    default_date_order: Literal["day_first", "month_first", "year_first"] = "day_first"
    date_order_sample_size: int = 50

    max_upload_size_mb: int = 15
    top_n: int = 3


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
