"""Application configuration and environment settings"""
from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """Application settings loaded from environment variables"""
    # Chain RPC settings
    RPC_URL: str = Field("https://mainnet.base.org", description="EVM JSON-RPC endpoint")
    RPC_TIMEOUT: float = Field(10.0, description="RPC request timeout in seconds")
    RPC_MAX_RETRIES: int = Field(3, ge=1, description="Attempts per RPC call")

    # Narrative settings
    GEMINI_API_KEY: Optional[str] = Field(None, description="Gemini API key, fallback narrative is used when unset")
    GEMINI_MODEL: str = Field("gemini-2.5-flash", description="Text generation model")
    GEMINI_BASE_URL: str = Field("https://generativelanguage.googleapis.com/v1beta", description="Gemini API base URL")
    NARRATIVE_TEMPERATURE: float = Field(0.7, ge=0.0, le=2.0, description="Sampling temperature")
    NARRATIVE_TIMEOUT: float = Field(30.0, description="Narrative request timeout in seconds")

    # CLI settings
    WALLET_ADDRESS: Optional[str] = Field(None, description="Wallet to estimate when none is passed")
    OUTPUT_DIR: str = Field("./output", description="Directory for output files")
    LOG_LEVEL: str = Field("INFO", description="Root log level")

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True
    )

settings = Settings()
