"""
Unit tests for core.config.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from core import config
from core.config import AppSettings, write_user_env_vars


class TestAppSettings:
    def test_defaults(self, settings: AppSettings) -> None:
        assert settings.app_id is None
        assert settings.app_secret is None
        assert settings.api_base_url == "https://api.onename.com/v1"
        assert settings.http_timeout_seconds == 20.0

    def test_reads_prefixed_env_vars(self, settings: AppSettings, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BLOCKSTACK_D2_APP_ID", "my-id")
        monkeypatch.setenv("BLOCKSTACK_D2_APP_SECRET", "my-secret")

        loaded = AppSettings(_env_file=None)
        creds = loaded.credentials()

        assert creds.app_id == "my-id"
        assert creds.secret_value == "my-secret"
        assert creds.is_complete

    def test_endpoints_follow_base_url(self, settings: AppSettings, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BLOCKSTACK_D2_API_BASE_URL", "https://mirror.example.org/v1/")

        endpoints = AppSettings(_env_file=None).endpoints()

        assert endpoints.transactions == "https://mirror.example.org/v1/transactions"

    def test_reads_env_file(self, settings: AppSettings, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("BLOCKSTACK_D2_APP_ID=from-file\n", encoding="utf-8")

        assert AppSettings(_env_file=env_file).app_id == "from-file"


class TestUserEnvFile:
    def test_write_creates_and_merges(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(config, "get_user_config_dir", lambda: tmp_path / "cfg")

        write_user_env_vars({"BLOCKSTACK_D2_APP_ID": "one"})
        path = write_user_env_vars({"BLOCKSTACK_D2_APP_SECRET": "two"})

        assert path == tmp_path / "cfg" / ".env"
        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[0].startswith("#")
        assert "BLOCKSTACK_D2_APP_ID=one" in lines
        assert "BLOCKSTACK_D2_APP_SECRET=two" in lines

    def test_xdg_config_home_is_respected(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(config.sys, "platform", "linux")
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        assert config.get_user_config_dir() == tmp_path / "blockstack-d2"
