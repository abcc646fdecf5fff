from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    # Monitoring settings
    ENABLE_TRACING: bool = False
    LOG_LEVEL: str = "INFO"

    # Server settings
    SCATTERVIZ_HOST: str = "0.0.0.0"
    SCATTERVIZ_PORT: int = 8000
    CORS_ORIGINS: str = ""

    # Chart canvas (inner width/height, before the outer legend gutter)
    CHART_WIDTH: int = 960
    CHART_HEIGHT: int = 500

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True
    )

settings = Settings()
