from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "SOLPOS_", "case_sensitive": False}

    # App
    environment: str = "development"
    debug: bool = True
    app_name: str = "SolPos"

    # Logging
    log_json: bool = False
    log_level: str = "INFO"

    # CORS
    cors_origins: str = "*"

    # Upper bound on positions accepted by one batch request
    max_batch_size: int = 1000


settings = Settings()
