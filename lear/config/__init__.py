# lear/config/__init__.py

from .config_manager import (
    ConfigManager,
    ServiceConfig,
    ProviderConfig,
    ServerConfig,
    GenerationConfig,
    LoggingConfig,
    load_service_config,
)

__all__ = [
    "ConfigManager",
    "ServiceConfig",
    "ProviderConfig",
    "ServerConfig",
    "GenerationConfig",
    "LoggingConfig",
    "load_service_config",
]
