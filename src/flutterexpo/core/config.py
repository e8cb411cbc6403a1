"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Bridge settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="BRIDGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=3001, gt=0, lt=65536, description="HTTP/WebSocket port")

    # Protocol
    supported_features: list[str] = Field(
        default_factory=lambda: ["ui-translation", "real-time-updates", "multi-language"],
        description="Features announced in CONNECTION_ACK",
    )

    # Code generation
    enable_codegen: bool = Field(default=True, description="Write React sources on UI_UPDATE")
    output_dir: str = Field(default="./generated_react_app", description="Generated app root")
    screen_extension: str = Field(default="tsx", description="Screen/manifest file extension")
    live_update_url: str = Field(
        default="ws://localhost:3001", description="URL generated screens subscribe to"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")
    service_name: str = Field(default="flutterexpo-bridge", description="service key on log events")

    # Validation
    max_message_size: int = Field(default=1024 * 1024, gt=0, description="Max inbound frame size")
    max_json_depth: int = Field(default=200, gt=0, description="Max inbound nesting depth")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
