"""Application settings and configuration"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Application
    APP_NAME: str = "GitRoast"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # LLM API for roast enrichment
    LLM_PROVIDER: str = "gemini"  # "gemini", "openai", or "anthropic"
    GEMINI_API_KEY: Optional[str] = None
    OPENAI_API_KEY: Optional[str] = None
    ANTHROPIC_API_KEY: Optional[str] = None
    LLM_MODEL: Optional[str] = None  # Provider default when unset
    LLM_TEMPERATURE: float = 0.9
    LLM_MAX_TOKENS: int = 1024
    ROAST_ENRICHMENT_TIMEOUT_SECONDS: float = 20.0

    # GitHub API
    GITHUB_TOKEN: Optional[str] = None
    GITHUB_API_BASE_URL: str = "https://api.github.com"
    GITHUB_TIMEOUT_SECONDS: float = 15.0
    GITHUB_REPO_LIMIT: int = 10
    GITHUB_COMMIT_REPO_LIMIT: int = 3
    GITHUB_COMMITS_PER_REPO: int = 5
    GITHUB_EVENT_LIMIT: int = 30
    USER_AGENT: str = "GitRoast/1.0"

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore extra fields in .env

    def enrichment_api_key(self) -> Optional[str]:
        """Return the credential for the selected LLM provider, if any."""
        keys = {
            "gemini": self.GEMINI_API_KEY,
            "openai": self.OPENAI_API_KEY,
            "anthropic": self.ANTHROPIC_API_KEY,
        }
        key = keys.get(self.LLM_PROVIDER.lower())
        if key and key.strip():
            return key.strip()
        return None


settings = Settings()
