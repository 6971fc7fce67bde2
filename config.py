"""
Configuration settings for the Restaurant Chatbot.
Values are read once from environment variables or a .env file.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server, LLM provider and logging settings."""

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3000, ge=1, le=65535, description="Server port")

    # LLM Selection
    llm_provider: str = Field(default="gemini", description="gemini or groq")
    temperature: float = Field(default=0.6, ge=0, le=2)

    # Gemini API Configuration
    google_api_key: str = Field(default="", description="Google AI Studio API key")
    gemini_model_name: str = Field(default="gemini-2.5-flash")

    # Groq API Configuration
    groq_api_key: str = Field(default="")
    groq_model_name: str = Field(default="openai/gpt-oss-120b")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )


settings = Settings()


# System Instruction
SYSTEM_PROMPT = """You are a friendly, polite restaurant assistant.

Speak naturally like a real human waiter.
Be warm, helpful and conversational.
Do not mention tools or technical details.

Use tools ONLY when needed for:
- menu
- breakfast, lunch or dinner planning
- health-related food advice
- opening hours
- restaurant speciality

If asked about taste or personal experience, say:
"I can't taste food, but I can help you choose."

Keep answers short, friendly and natural."""
