from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Jobs API"
    app_env: str = "development"
    app_port: int = 8000
    frontend_url: str = "http://localhost:3000"

    # In-memory store, seeded once at startup
    seed_data_path: str = Field(default="data.json", alias="SEED_DATA_PATH")

    # Bearer token -> role. Demo credentials only, not an identity system.
    auth_tokens: dict[str, str] = Field(
        default={"admin-token": "admin", "user-token": "user"},
        alias="AUTH_TOKENS",
    )  # JSON object in the environment

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

settings = Settings()
