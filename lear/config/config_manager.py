# lear/config/config_manager.py

import os
import re
import yaml
import logging
from pathlib import Path
from typing import Dict, Any, Optional, List
from dataclasses import dataclass, field

from dotenv import load_dotenv

DEFAULT_MODEL = "ft:gpt-4o-mini-2024-07-18:personal:lear-gpt-arch:CNN73o0G"

@dataclass(frozen=True)
class ProviderConfig:
    """LLM provider configuration"""
    provider: str = "openai"
    model: str = DEFAULT_MODEL
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    timeout: int = 120
    max_tokens: Optional[int] = None

@dataclass(frozen=True)
class ServerConfig:
    """HTTP server configuration"""
    host: str = "0.0.0.0"
    port: int = 3000
    static_dir: Optional[str] = "public"
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

@dataclass(frozen=True)
class GenerationConfig:
    """Generation parameters configuration"""
    temperature: float = 0.7
    repair_temperature: float = 0.5
    max_count: int = 10

@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None

@dataclass(frozen=True)
class ServiceConfig:
    """Everything the service needs, built once at process start."""
    llm: ProviderConfig = field(default_factory=ProviderConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

_PLACEHOLDER = re.compile(r'\$\{([^}]+)\}')

# Provider name -> environment variable holding its API key
_API_KEY_ENV = {
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
    "groq": "GROQ_API_KEY",
}

class ConfigManager:
    """
    Loads service configuration.

    Reads a YAML file (with ``${VAR}`` placeholders resolved from the
    environment), applies environment variable overrides and exposes typed
    sections. ``build_service_config`` returns the immutable
    :class:`ServiceConfig` handed to the rest of the application.
    """

    def __init__(self, config_path: Optional[str] = None, env_file: Optional[str] = ".env"):
        self.config_path = Path(config_path) if config_path else self._get_default_config_path()
        self.logger = logging.getLogger(__name__)

        if env_file and Path(env_file).exists():
            load_dotenv(env_file, override=False)

        self._config: Dict[str, Any] = {}
        self._load_config()

    def _get_default_config_path(self) -> Path:
        """Get default configuration file path"""
        return Path(__file__).parent / "default_config.yaml"

    def _load_config(self):
        """Load configuration from YAML file"""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                content = self._replace_env_placeholders(f.read())
            data = yaml.safe_load(content) or {}
            if not isinstance(data, dict):
                raise yaml.YAMLError("top level of the configuration must be a mapping")
            self._config = data
            self.logger.info(f"Loaded configuration from {self.config_path}")

        except FileNotFoundError:
            self.logger.warning(f"Configuration file not found: {self.config_path}")
            self._config = {}
        except yaml.YAMLError as e:
            self.logger.error(f"Error parsing configuration file: {e}")
            self._config = {}

        self._apply_env_overrides()

    def _replace_env_placeholders(self, text: str) -> str:
        """Replace ${VARIABLE_NAME} patterns with environment values."""
        def replace_placeholder(match):
            env_value = os.getenv(match.group(1))
            if env_value is None:
                # Unset variables become empty so they read as "not configured"
                self.logger.warning(f"Environment variable {match.group(1)} not found")
                return ""
            return env_value

        return _PLACEHOLDER.sub(replace_placeholder, text)

    def _apply_env_overrides(self):
        """Apply environment variable overrides"""
        llm = self._config.setdefault("llm", {}) or {}
        self._config["llm"] = llm

        if os.getenv("LEAR_LLM_PROVIDER"):
            llm["provider"] = os.getenv("LEAR_LLM_PROVIDER").lower()

        if os.getenv("OPENAI_MODEL"):
            llm["model"] = os.getenv("OPENAI_MODEL")

        provider = llm.get("provider", "openai")
        key_env = _API_KEY_ENV.get(provider)
        if key_env and os.getenv(key_env):
            llm["api_key"] = os.getenv(key_env)

        server = self._config.setdefault("server", {}) or {}
        self._config["server"] = server

        if os.getenv("HOST"):
            server["host"] = os.getenv("HOST")

        if os.getenv("PORT"):
            server["port"] = os.getenv("PORT")

        if os.getenv("LEAR_STATIC_DIR"):
            server["static_dir"] = os.getenv("LEAR_STATIC_DIR")

        if os.getenv("LOG_LEVEL"):
            log_config = self._config.get("logging") or {}
            log_config["level"] = os.getenv("LOG_LEVEL")
            self._config["logging"] = log_config

    def get_provider_config(self) -> ProviderConfig:
        """Get LLM provider configuration"""
        llm_config = self._config.get("llm") or {}
        max_tokens = llm_config.get("max_tokens")

        return ProviderConfig(
            provider=str(llm_config.get("provider") or "openai").lower(),
            model=llm_config.get("model") or DEFAULT_MODEL,
            api_key=llm_config.get("api_key") or None,
            base_url=llm_config.get("base_url") or None,
            timeout=int(llm_config.get("timeout", 120)),
            max_tokens=int(max_tokens) if max_tokens else None
        )

    def get_server_config(self) -> ServerConfig:
        """Get HTTP server configuration"""
        server_config = self._config.get("server") or {}
        origins = server_config.get("cors_origins") or ["*"]
        if isinstance(origins, str):
            origins = [o.strip() for o in origins.split(",") if o.strip()]

        return ServerConfig(
            host=server_config.get("host", "0.0.0.0"),
            port=int(server_config.get("port", 3000)),
            static_dir=server_config.get("static_dir", "public") or None,
            cors_origins=list(origins)
        )

    def get_generation_config(self) -> GenerationConfig:
        """Get generation parameters configuration"""
        gen_config = self._config.get("generation") or {}

        return GenerationConfig(
            temperature=float(gen_config.get("temperature", 0.7)),
            repair_temperature=float(gen_config.get("repair_temperature", 0.5)),
            max_count=int(gen_config.get("max_count", 10))
        )

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration"""
        log_config = self._config.get("logging") or {}

        return LoggingConfig(
            level=str(log_config.get("level", "INFO")).upper(),
            format=log_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            file=log_config.get("file")
        )

    def build_service_config(self) -> ServiceConfig:
        """Assemble the immutable service configuration"""
        return ServiceConfig(
            llm=self.get_provider_config(),
            server=self.get_server_config(),
            generation=self.get_generation_config(),
            logging=self.get_logging_config()
        )

    def get_raw_config(self) -> Dict[str, Any]:
        """Get raw configuration dictionary"""
        return self._config.copy()


def load_service_config(config_path: Optional[str] = None) -> ServiceConfig:
    """Convenience wrapper: read the config file and environment once."""
    return ConfigManager(config_path).build_service_config()
