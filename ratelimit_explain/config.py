from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    default_audience: str = "user"
    default_style: str = "verbose"
    cors_origins: str = "*"
    log_format: str = "text"
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "RATELIMIT_EXPLAIN_",
    }


settings = Settings()
