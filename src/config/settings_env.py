from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Development
    DEV_MODE: bool = Field(default=True, description="Enable debug mode")

    # FastAPI
    APP_NAME: str = Field(default="Garage Stay Tracker", description="Application title")
    FASTAPI_HOST: str = Field(default="localhost", description="FastAPI host")
    FASTAPI_PORT: int = Field(default=8080, description="FastAPI port")
    API_PREFIX: str = Field(default="/api/parking", description="Prefix of the parking routes")


# Create settings instance
settings = Settings()
