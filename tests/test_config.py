import pytest

from student_store.config import Settings


def test_defaults():
    settings = Settings.from_env({})
    assert settings.host == "0.0.0.0"
    assert settings.port == 8080
    assert settings.log_file == "student.log"
    assert settings.cors_allow_origins == ["*"]


def test_from_env():
    settings = Settings.from_env(
        {
            "HOST": "127.0.0.1",
            "PORT": "9000",
            "STUDENT_LOG_FILE": "/tmp/audit.log",
            "CORS_ALLOW_ORIGINS": "http://a.example, http://b.example,",
        }
    )
    assert settings.host == "127.0.0.1"
    assert settings.port == 9000
    assert settings.log_file == "/tmp/audit.log"
    assert settings.cors_allow_origins == ["http://a.example", "http://b.example"]


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8181")
    assert Settings.from_env().port == 8181


def test_bad_port():
    with pytest.raises(ValueError):
        Settings.from_env({"PORT": "eighty"})
