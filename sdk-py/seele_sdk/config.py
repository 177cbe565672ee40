from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for talking to a Seele node."""

    # RPC Configuration
    rpc_url: str = "http://127.0.0.1:8037"
    rpc_timeout: float = 10.0  # Seconds per request

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SEELE_",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
