"""Unit tests for mysql_opts.config: loading options from the environment."""

from pathlib import Path

import pytest

from mysql_opts.config import opts_from_env, url_from_env
from mysql_opts.exceptions import ConfigurationError, UnsupportedSchemeError


class TestUrlFromEnv:
    def test_database_url(self) -> None:
        assert url_from_env(environ={"DATABASE_URL": "mysql://a/db"}) == "mysql://a/db"

    def test_database_url_takes_precedence(self) -> None:
        env = {"DATABASE_URL": "mysql://a/db", "MYSQL_URL": "mysql://b/db"}
        assert url_from_env(environ=env) == "mysql://a/db"

    def test_fallback_to_mysql_url(self) -> None:
        env = {"DATABASE_URL": "", "MYSQL_URL": "mysql://b/db"}
        assert url_from_env(environ=env) == "mysql://b/db"

    def test_custom_variables(self) -> None:
        assert url_from_env(["APP_DB"], environ={"APP_DB": "mysql://c/db"}) == "mysql://c/db"

    def test_missing(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            url_from_env(environ={})
        assert "DATABASE_URL" in exc_info.value.message

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATABASE_URL", "mysql://from-os/db")
        assert url_from_env() == "mysql://from-os/db"

    def test_dotenv_file(self, tmp_path: Path) -> None:
        dotenv = tmp_path / ".env"
        dotenv.write_text("MYSQL_URL=mysql://from-file/db\n")
        assert url_from_env(environ={}, dotenv_path=dotenv) == "mysql://from-file/db"

    def test_environment_overrides_dotenv(self, tmp_path: Path) -> None:
        dotenv = tmp_path / ".env"
        dotenv.write_text("DATABASE_URL=mysql://from-file/db\n")
        env = {"DATABASE_URL": "mysql://from-env/db"}
        assert url_from_env(environ=env, dotenv_path=dotenv) == "mysql://from-env/db"


class TestOptsFromEnv:
    def test_parses_url(self) -> None:
        opts = opts_from_env(environ={"DATABASE_URL": "mysql://app:pw@db.internal:3307/inventory"})
        assert opts.user == "app"
        assert opts.ip_or_hostname == "db.internal"
        assert opts.tcp_port == 3307
        assert opts.db_name == "inventory"

    def test_invalid_url_propagates(self) -> None:
        with pytest.raises(UnsupportedSchemeError):
            opts_from_env(environ={"DATABASE_URL": "postgres://localhost/db"})
