from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./fuelcontrol.sqlite3"
    database_ssl: bool = True
    database_ssl_verify: bool = False  # accept the server certificate as-is
    db_pool_size: int = 5
    db_max_overflow: int = 10
    host: str = "0.0.0.0"
    port: int = 3001
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
