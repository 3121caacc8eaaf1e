"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings
from typing import List


class BankKataConfig(BaseSettings):
    """Bank kata service configuration"""
    
    service_name: str = "bank-kata"
    
    # API configuration
    api_host: str = "0.0.0.0"
    api_port: int = 8090
    api_reload: bool = False
    cors_allow_origins: List[str] = ["*"]
    
    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    
    class Config:
        env_prefix = "BANK_KATA_"
        env_file = ".env"
        case_sensitive = False


# Global configuration instance
config = BankKataConfig()


def get_config() -> BankKataConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> BankKataConfig:
    """Reload configuration from environment"""
    global config
    config = BankKataConfig()
    return config
