"""
Tests for configuration and structured logging helpers
"""

import io
import json
import logging

from bank_kata import config as config_module
from bank_kata.config import BankKataConfig, get_config, reload_config
from bank_kata.logging_config import JSONFormatter, setup_logging, log_action


class TestConfig:
    """Environment-driven configuration"""
    
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("BANK_KATA_API_PORT", raising=False)
        cfg = BankKataConfig(_env_file=None)
        
        assert cfg.api_port == 8090
        assert cfg.log_format == "json"
        assert cfg.cors_allow_origins == ["*"]

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("BANK_KATA_API_PORT", "9100")
        monkeypatch.setenv("bank_kata_log_level", "DEBUG")
        cfg = BankKataConfig(_env_file=None)
        
        assert cfg.api_port == 9100
        assert cfg.log_level == "DEBUG"

    def test_reload_config(self, monkeypatch):
        original = config_module.config
        try:
            monkeypatch.setenv("BANK_KATA_SERVICE_NAME", "reloaded")
            reloaded = reload_config()
            assert reloaded.service_name == "reloaded"
            assert get_config() is reloaded
        finally:
            config_module.config = original


class TestJSONFormatter:
    """Structured JSON log records"""
    
    def test_fields(self):
        logger = logging.getLogger("test")
        record = logger.makeRecord("test", logging.INFO, __name__, 42, "Test message", (), None)
        record.action = "deposit"
        record.resource = "account"
        
        data = json.loads(JSONFormatter().format(record))
        assert data["message"] == "Test message"
        assert data["level"] == "INFO"
        assert data["action"] == "deposit"
        assert data["resource"] == "account"
        assert data["logger"] == "test"
        assert "extra" not in data

    def test_log_action_writes_json(self):
        logger = setup_logging("INFO", "bank_kata_test_logger")
        stream = io.StringIO()
        logger.handlers[0].setStream(stream)
        
        log_action(logger, "info", "Transaction applied: deposit",
                   action="deposit", resource="account", extra={"balance": 5})
        
        data = json.loads(stream.getvalue().strip())
        assert data["action"] == "deposit"
        assert data["resource"] == "account"
        assert data["extra"] == {"balance": 5}
        assert "correlation_id" not in data

    def test_log_action_respects_level(self):
        logger = setup_logging("WARNING", "bank_kata_quiet_logger")
        stream = io.StringIO()
        logger.handlers[0].setStream(stream)
        
        log_action(logger, "info", "ignored")
        assert stream.getvalue() == ""

    def test_text_format(self):
        logger = setup_logging("INFO", "bank_kata_text_logger", fmt="text")
        stream = io.StringIO()
        logger.handlers[0].setStream(stream)
        
        logger.info("plain message")
        assert "INFO [bank_kata_text_logger] plain message" in stream.getvalue()
