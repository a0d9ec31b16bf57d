"""
Tests de la configuration et du logging
"""
import logging

from app.config import Settings
from core.logging_config import get_logging_config, setup_logging_from_config


def test_defaults(settings):
    assert settings.groq_base_url == "https://api.groq.com/openai/v1"
    assert settings.groq_model == "llama3-70b-8192"
    assert settings.faq_fuzzy_threshold == 0.4
    assert settings.port == 5000
    assert settings.smtp_host == "smtp.gmail.com"
    assert settings.get_lead_recipient() == "agency@example.com"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LEAD_RECIPIENT", "sales@example.com")
    monkeypatch.setenv("FAQ_FUZZY_THRESHOLD", "0.2")

    settings = Settings()

    assert settings.port == 8080
    assert settings.get_lead_recipient() == "sales@example.com"
    assert settings.faq_fuzzy_threshold == 0.2


def test_console_only_logging():
    config = get_logging_config("debug")
    assert set(config["handlers"]) == {"console"}
    assert config["loggers"]["core"]["level"] == "DEBUG"
    assert config["loggers"]["httpx"]["level"] == "WARNING"


def test_file_logging(tmp_path):
    log_file = tmp_path / "logs" / "app.log"

    setup_logging_from_config("INFO", str(log_file))
    logging.getLogger("core.test").info("written to file")
    for handler in logging.getLogger("core").handlers:
        handler.flush()

    assert log_file.exists()
    assert "written to file" in log_file.read_text(encoding="utf-8")

    setup_logging_from_config("INFO")
