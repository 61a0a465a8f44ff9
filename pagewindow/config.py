from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Page size
    DEFAULT_PAGE_SIZE: int = Field(default=10, gt=0)
    PAGE_SIZE_OPTIONS: List[int] = [10, 20, 50, 100]  # UI hint only
    MAX_PAGE_SIZE: Optional[int] = None  # Caps sizes read from the query string

    # Navigation
    PAGE_WINDOW: int = 3  # Neighbor pages on each side of the current one

    # Query string keys
    DEFAULT_NAME: str = "Pager"
    PAGE_SIZE_KEY_SUFFIX: str = "_PageSize"

    model_config = SettingsConfigDict(
        env_prefix="PAGEWINDOW_", env_file=".env", case_sensitive=True, extra="ignore"
    )


settings = Settings()
