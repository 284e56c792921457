"""Tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from searchlayer.config.settings import Settings


class TestSettings:
    def test_defaults(self, settings: Settings) -> None:
        assert settings.meilisearch.host == "http://127.0.0.1:7700"
        assert settings.meilisearch.api_key is None
        assert settings.search.adapter == "meilisearch"
        assert settings.search.strict_fast_path is True
        assert settings.search.date_as_integer is True

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEARCHLAYER_MEILISEARCH__HOST", "http://meili:7700")
        monkeypatch.setenv("SEARCHLAYER_MEILISEARCH__API_KEY", "masterKey")
        monkeypatch.setenv("SEARCHLAYER_SEARCH__STRICT_FAST_PATH", "false")

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.meilisearch.host == "http://meili:7700"
        assert settings.meilisearch.api_key == "masterKey"
        assert settings.search.strict_fast_path is False

    def test_from_yaml(self, tmp_path: Path) -> None:
        config = tmp_path / "searchlayer.yaml"
        config.write_text(
            "meilisearch:\n"
            "  host: http://yaml-host:7700\n"
            "  task_timeout_ms: 1000\n"
            "observability:\n"
            "  log_format: console\n"
        )

        settings = Settings.from_yaml(config)

        assert settings.meilisearch.host == "http://yaml-host:7700"
        assert settings.meilisearch.task_timeout_ms == 1000
        assert settings.observability.log_format == "console"

    def test_from_yaml_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            Settings.from_yaml(tmp_path / "missing.yaml")

    def test_rejects_invalid_timeout(self) -> None:
        with pytest.raises(ValueError):
            Settings(_env_file=None, meilisearch={"timeout": 0})  # type: ignore[call-arg]
