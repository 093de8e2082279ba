from pydantic_settings import BaseSettings
from pydantic import Field
from typing import List

class Settings(BaseSettings):
    """Flat settings, read from the environment or a .env file"""

    # === Database Settings ===
    database_path: str = Field(default="./network_inventory.db")

    # === Search Settings ===
    # Comma separated; ports containing any of these are hidden from results
    skip_ports: str = Field(default="Po,Port-Channel,lag")

    # === Web Server Settings ===
    web_host: str = Field(default="0.0.0.0")
    web_port: int = Field(default=8000)

    # === Logging Settings ===
    log_level: str = Field(default="INFO")
    log_file: str = Field(default="./logs/mac_lookup.log")

    class Config:
        env_file = ".env"
        case_sensitive = False

# Global settings instance
settings = Settings()

def parse_skip_ports(value: str) -> List[str]:
    return [item.strip() for item in value.split(',') if item.strip()]

def get_database_path():
    return settings.database_path

def get_skip_ports() -> List[str]:
    return parse_skip_ports(settings.skip_ports)
