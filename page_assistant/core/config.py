# page_assistant/core/config.py
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """Loads environment variables from .env file."""
    SILICONFLOW_API_KEY: Optional[str] = None
    SILICONFLOW_BASE_URL: str = "https://api.siliconflow.cn/v1"
    LLM_PROVIDER: Literal["siliconflow", "groq"] = "siliconflow"
    LLM_MODEL: str = "deepseek-ai/DeepSeek-V3"

    GROQ_API_KEY: Optional[str] = None
    GROQ_MODEL: str = "llama-3.3-70b-versatile"

    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def llm_name(self) -> str:
        if self.LLM_PROVIDER == "groq":
            return f"Groq ({self.GROQ_MODEL})"
        return f"SiliconFlow ({self.LLM_MODEL})"

    @property
    def api_key(self) -> Optional[str]:
        """The credential for whichever provider is configured."""
        if self.LLM_PROVIDER == "groq":
            return self.GROQ_API_KEY
        return self.SILICONFLOW_API_KEY

# Create a single instance of the settings to be used across the application
settings = Settings()
