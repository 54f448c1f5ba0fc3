from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from .. import __version__


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="UPNPDIG_")

    device_url: str = "http://localhost:1400/device_description.xml"
    discover_timeout: int = 3
    http_timeout: float = 10
    verify_ssl: bool = False
    user_agent: str = f"upnpdig/{__version__} UPnP/1.0"
    log_level: str = "WARNING"


settings = Settings()
