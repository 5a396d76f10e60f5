from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


ENV_PATH = Path(__file__).resolve().parents[2] / ".env"

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_PATH, env_file_encoding="utf-8", extra="ignore")

    # App
    env: str = "dev"
    service_name: str = "party-planner-api"
    log_level: str = "INFO"

    # Server (PORT is what the hosting platform sets)
    host: str = "0.0.0.0"
    port: int = 8080

    # /bookpartyprod fails this fraction of requests on purpose
    prod_failure_rate: float = 0.2

    # CORS
    cors_allow_origins: list[str] = ["*"]

    # Telemetry
    telemetry_enabled: bool = False
    otlp_endpoint: str = "http://localhost:4318"  # Jaeger OTLP HTTP


settings = Settings()
