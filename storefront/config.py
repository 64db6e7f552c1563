from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # Landing page and static assets
    static_dir: str = "public"

    # Observability; trace export is off unless an endpoint is configured
    otlp_endpoint: str | None = None

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
