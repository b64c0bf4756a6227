# tests/unit/test_main.py

import logging
import pytest
from unittest.mock import patch

from lear import main as lear_main
from lear.llm.base_llm import LLMError
from lear.utils.logging_config import configure_logging


class TestParseArgs:

    def test_defaults(self):
        args = lear_main.parse_args([])

        assert args.config is None
        assert args.host is None
        assert args.port is None
        assert args.log_level is None

    def test_overrides(self):
        args = lear_main.parse_args(["-c", "my.yaml", "--host", "127.0.0.1", "-p", "8080", "--log-level", "debug"])

        assert args.config == "my.yaml"
        assert args.host == "127.0.0.1"
        assert args.port == 8080
        assert args.log_level == "debug"


class TestMain:

    @pytest.fixture(autouse=True)
    def mock_provider(self, monkeypatch):
        monkeypatch.setenv("LEAR_LLM_PROVIDER", "mock")
        monkeypatch.delenv("PORT", raising=False)
        monkeypatch.delenv("HOST", raising=False)

    def test_runs_server_with_overrides(self):
        with patch.object(lear_main.uvicorn, "run") as run:
            lear_main.main(["--port", "8123", "--host", "127.0.0.1"])

        run.assert_called_once()
        assert run.call_args.kwargs["port"] == 8123
        assert run.call_args.kwargs["host"] == "127.0.0.1"

    def test_startup_failure_exits(self):
        with patch.object(lear_main, "create_app", side_effect=LLMError("OpenAI API key is required")), \
                patch.object(lear_main.uvicorn, "run") as run:
            with pytest.raises(SystemExit) as exc_info:
                lear_main.main([])

        assert exc_info.value.code == 1
        run.assert_not_called()


class TestConfigureLogging:

    def test_level_from_name(self):
        configure_logging("debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self):
        configure_logging("chatty")
        assert logging.getLogger().level == logging.INFO

    def test_http_loggers_quietened(self):
        configure_logging(logging.DEBUG)
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("openai._base_client").level == logging.ERROR

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "lear.log"
        configure_logging("INFO", file=str(log_file))

        logging.getLogger("lear.test").info("limerick logged")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "limerick logged" in log_file.read_text(encoding="utf-8")
