import os

import pytest

from todo_api.errors import ConfigError
from todo_api.settings import get_settings, load_env_file

_VARS = ("DATABASE_URL", "DB_DRIVER", "PORT", "HOST", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    # load_env_file writes os.environ directly
    for name in _VARS:
        os.environ.pop(name, None)


class TestGetSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "./todos.db")
        monkeypatch.setenv("DB_DRIVER", "SQLite3")
        settings = get_settings()
        assert settings.database_url == "./todos.db"
        assert settings.db_driver == "sqlite3"
        assert settings.port == 5000
        assert settings.host == "0.0.0.0"
        assert settings.log_level == "INFO"

    def test_explicit_values(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "/tmp/x.db")
        monkeypatch.setenv("DB_DRIVER", "sqlite")
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("HOST", "127.0.0.1")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        settings = get_settings()
        assert settings.port == 8080
        assert settings.host == "127.0.0.1"
        assert settings.log_level == "DEBUG"

    @pytest.mark.parametrize("missing", ["DATABASE_URL", "DB_DRIVER"])
    def test_missing_required(self, monkeypatch, missing):
        monkeypatch.setenv("DATABASE_URL", "./todos.db")
        monkeypatch.setenv("DB_DRIVER", "sqlite3")
        monkeypatch.delenv(missing)
        with pytest.raises(ConfigError, match=missing):
            get_settings()

    def test_blank_required_counts_as_missing(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "   ")
        monkeypatch.setenv("DB_DRIVER", "sqlite3")
        with pytest.raises(ConfigError):
            get_settings()

    @pytest.mark.parametrize("port", ["abc", "0", "70000"])
    def test_invalid_port(self, monkeypatch, port):
        monkeypatch.setenv("DATABASE_URL", "./todos.db")
        monkeypatch.setenv("DB_DRIVER", "sqlite3")
        monkeypatch.setenv("PORT", port)
        with pytest.raises(ConfigError, match="PORT"):
            get_settings()

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "./todos.db")
        monkeypatch.setenv("DB_DRIVER", "sqlite3")
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        with pytest.raises(ConfigError, match="LOG_LEVEL"):
            get_settings()


class TestLoadEnvFile:
    def test_missing_file(self, tmp_path):
        assert load_env_file(tmp_path / ".env") is False

    def test_reads_values(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "# local settings\n"
            "\n"
            "DATABASE_URL='./data/todos.db'\n"
            'DB_DRIVER="sqlite3"\n'
            "PORT = 6000\n"
            "not a setting\n"
        )
        assert load_env_file(env_file) is True
        assert os.environ["DATABASE_URL"] == "./data/todos.db"
        assert os.environ["DB_DRIVER"] == "sqlite3"
        assert os.environ["PORT"] == "6000"
        assert get_settings().port == 6000

    def test_environment_wins(self, tmp_path, monkeypatch):
        monkeypatch.setenv("PORT", "7000")
        env_file = tmp_path / ".env"
        env_file.write_text("PORT=6000\n")
        load_env_file(env_file)
        assert os.environ["PORT"] == "7000"

    def test_defaults_to_working_directory(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("DB_DRIVER=sqlite3\n")
        monkeypatch.chdir(tmp_path)
        assert load_env_file() is True
        assert os.environ["DB_DRIVER"] == "sqlite3"
