# tests/unit/test_config_manager.py

import pytest
from dataclasses import FrozenInstanceError
from lear.config.config_manager import (
    ConfigManager,
    ServiceConfig,
    DEFAULT_MODEL,
)

ENV_VARS = [
    "OPENAI_API_KEY", "OPENAI_MODEL", "ANTHROPIC_API_KEY", "GROQ_API_KEY",
    "LEAR_LLM_PROVIDER", "LEAR_STATIC_DIR", "HOST", "PORT", "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def write_config(tmp_path, text):
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return str(path)


class TestConfigManager:

    def test_bundled_defaults(self):
        config = ConfigManager(env_file=None).build_service_config()

        assert isinstance(config, ServiceConfig)
        assert config.llm.provider == "openai"
        assert config.llm.model == DEFAULT_MODEL
        assert config.llm.api_key is None
        assert config.server.port == 3000
        assert config.server.static_dir == "public"
        assert config.server.cors_origins == ["*"]
        assert config.generation.temperature == 0.7
        assert config.generation.repair_temperature == 0.5
        assert config.generation.max_count == 10
        assert config.logging.level == "INFO"

    def test_missing_file_falls_back_to_defaults(self, tmp_path):
        config = ConfigManager(str(tmp_path / "missing.yaml"), env_file=None).build_service_config()

        assert config.llm.model == DEFAULT_MODEL
        assert config.server.port == 3000

    def test_invalid_yaml_falls_back_to_defaults(self, tmp_path):
        path = write_config(tmp_path, "- just\n- a list\n")
        config = ConfigManager(path, env_file=None).build_service_config()

        assert config.llm.provider == "openai"

    def test_environment_overrides(self, tmp_path, monkeypatch):
        path = write_config(tmp_path, "llm:\n  model: from-file\nserver:\n  port: 8000\n")
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
        monkeypatch.setenv("OPENAI_MODEL", "from-env")
        monkeypatch.setenv("PORT", "4321")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        config = ConfigManager(path, env_file=None).build_service_config()

        assert config.llm.api_key == "sk-env"
        assert config.llm.model == "from-env"
        assert config.server.port == 4321
        assert config.logging.level == "DEBUG"

    def test_provider_specific_api_key(self, tmp_path, monkeypatch):
        path = write_config(tmp_path, "llm:\n  provider: anthropic\n  model: claude-test\n")
        monkeypatch.setenv("OPENAI_API_KEY", "sk-openai")
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant")

        config = ConfigManager(path, env_file=None).get_provider_config()

        assert config.provider == "anthropic"
        assert config.api_key == "sk-ant"

    def test_provider_from_environment(self, monkeypatch):
        monkeypatch.setenv("LEAR_LLM_PROVIDER", "Groq")
        monkeypatch.setenv("GROQ_API_KEY", "gsk-env")

        config = ConfigManager(env_file=None).get_provider_config()

        assert config.provider == "groq"
        assert config.api_key == "gsk-env"

    def test_placeholders(self, tmp_path, monkeypatch):
        monkeypatch.setenv("MY_BASE_URL", "http://localhost:8080/v1")
        path = write_config(
            tmp_path,
            "llm:\n  base_url: ${MY_BASE_URL}\n  api_key: ${LEAR_UNSET_VARIABLE}\n"
        )
        monkeypatch.delenv("LEAR_UNSET_VARIABLE", raising=False)

        config = ConfigManager(path, env_file=None).get_provider_config()

        assert config.base_url == "http://localhost:8080/v1"
        assert config.api_key is None

    def test_cors_origins_from_string(self, tmp_path):
        path = write_config(tmp_path, "server:\n  cors_origins: 'http://a.test, http://b.test'\n")
        assert ConfigManager(path, env_file=None).get_server_config().cors_origins == [
            "http://a.test", "http://b.test"
        ]

    def test_static_dir_can_be_disabled(self, tmp_path, monkeypatch):
        path = write_config(tmp_path, "server:\n  static_dir: ''\n")
        assert ConfigManager(path, env_file=None).get_server_config().static_dir is None

        monkeypatch.setenv("LEAR_STATIC_DIR", "/srv/www")
        assert ConfigManager(path, env_file=None).get_server_config().static_dir == "/srv/www"

    def test_dotenv_file(self, tmp_path, monkeypatch):
        # Registers OPENAI_API_KEY with monkeypatch so the value load_dotenv writes is undone
        monkeypatch.setenv("OPENAI_API_KEY", "placeholder")
        monkeypatch.delenv("OPENAI_API_KEY")
        env_file = tmp_path / ".env"
        env_file.write_text("OPENAI_API_KEY=sk-from-dotenv\n", encoding="utf-8")

        config = ConfigManager(env_file=str(env_file)).get_provider_config()

        assert config.api_key == "sk-from-dotenv"

    def test_configs_are_frozen(self):
        config = ConfigManager(env_file=None).build_service_config()
        with pytest.raises(FrozenInstanceError):
            config.server.port = 1
