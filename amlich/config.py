from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings read from AMLICH_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="AMLICH_", extra="ignore")

    time_zone: float = 7.0
    cache_capacity: int = Field(2048, ge=1)
    cache_evict_count: int = Field(256, ge=1)
    locale: str = "vi-VN"
    timezone_name: str = "Asia/Ho_Chi_Minh"

    @model_validator(mode="after")
    def _bound_evict_count(self) -> "Settings":
        # A batch never removes more than the whole store.
        if self.cache_evict_count > self.cache_capacity:
            object.__setattr__(self, "cache_evict_count", self.cache_capacity)
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
