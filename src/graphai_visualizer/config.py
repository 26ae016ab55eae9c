from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings

AGENT_INDEX_URL = (
    "https://raw.githubusercontent.com/kawamataryo/graphai-visualizer/main/src/agentIndex.json"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "graphai-visualizer"
    log_level: str = "INFO"

    # ------------------------------------------------------------------
    # Agent reference index
    # ------------------------------------------------------------------
    agent_index_url: str = AGENT_INDEX_URL
    agent_index_timeout: float = 10.0   # seconds

    # "docs": agent links open the agent documentation
    # "source": agent links open the agent source code
    agent_click_action: Literal["docs", "source"] = "docs"

    class Config:
        env_file = ".env"
        env_prefix = "GRAPHAI_VISUALIZER_"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
