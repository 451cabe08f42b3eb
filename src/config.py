from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "LabelLens"
    debug: bool = False
    log_level: str = "INFO"

    cloud_vision_api_key: Optional[str] = None
    cloud_vision_api_url: str = "https://vision.googleapis.com/v1/images:annotate"
    cloud_vision_max_results: int = 10
    cloud_vision_timeout: float = 15.0

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_reload: bool = False


settings = Settings()
