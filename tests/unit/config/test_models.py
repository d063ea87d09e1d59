# pyright: reportAny=false
from pathlib import Path

import pytest

from repostat.config import (
    Config,
    ConfigSourceName,
    LogFormat,
    LogLevel,
    OutputFormat,
)
from repostat.exceptions import ConfigValidationError


class TestConfigFromDict:
    def test_empty_dict_gives_defaults(self) -> None:
        config = Config.from_dict({})

        assert config.logging.level is LogLevel.WARNING
        assert config.logging.format is LogFormat.TEXT
        assert config.logging.file == ""
        assert config.git.executable == "git"
        assert config.output.format is OutputFormat.TEXT

    def test_overrides_merge_with_defaults(self) -> None:
        config = Config.from_dict({"logging": {"level": "debug"}})

        assert config.logging.level is LogLevel.DEBUG
        assert config.logging.format is LogFormat.TEXT

    def test_unknown_keys_are_ignored(self) -> None:
        config = Config.from_dict({"unknown": {"key": 1}, "git": {"extra": True}})

        assert config.git.executable == "git"

    def test_invalid_value_raises_validation_error(self) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            _ = Config.from_dict({"output": {"format": "xml"}})

        error = exc_info.value
        assert error.key == "output.format"
        assert error.value == "xml"
        assert error.source is None

    def test_is_frozen(self) -> None:
        config = Config.from_dict({})

        with pytest.raises(ValueError, match="frozen"):
            config.git = config.git  # pyright: ignore[reportAttributeAccessIssue]

    def test_to_dict(self) -> None:
        assert Config.from_dict({"output": {"format": "yaml"}}).to_dict() == {
            "logging": {"level": "warning", "format": "text", "file": ""},
            "git": {"executable": "git"},
            "output": {"format": "yaml"},
        }


class TestConfigLoad:
    def test_defaults_when_no_files(
        self, tmp_path: Path, user_config_path: Path
    ) -> None:
        config = Config.load(project_root=tmp_path)

        assert config.to_dict() == Config.from_dict({}).to_dict()
        assert [source.name for source in config.sources] == [
            ConfigSourceName.ENV,
            ConfigSourceName.PROJECT,
            ConfigSourceName.USER,
            ConfigSourceName.DEFAULT,
        ]

    def test_project_overrides_user(
        self, tmp_path: Path, user_config_path: Path
    ) -> None:
        user_config_path.parent.mkdir(parents=True)
        _ = user_config_path.write_text(
            '[git]\nexecutable = "/user/git"\n[output]\nformat = "yaml"\n'
        )
        _ = (tmp_path / ".repostat.toml").write_text('[output]\nformat = "json"\n')

        config = Config.load(project_root=tmp_path)

        assert config.git.executable == "/user/git"
        assert config.output.format is OutputFormat.JSON

    def test_env_overrides_project(
        self,
        tmp_path: Path,
        user_config_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        _ = (tmp_path / ".repostat.toml").write_text('[logging]\nlevel = "info"\n')
        monkeypatch.setenv("REPOSTAT_LOGGING__LEVEL", "error")

        config = Config.load(project_root=tmp_path)

        assert config.logging.level is LogLevel.ERROR

    def test_env_can_be_excluded(
        self,
        tmp_path: Path,
        user_config_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("REPOSTAT_LOGGING__LEVEL", "error")

        config = Config.load(project_root=tmp_path, include_env=False)

        assert config.logging.level is LogLevel.WARNING
        assert ConfigSourceName.ENV not in [s.name for s in config.sources]

    def test_loaded_sources_carry_values(
        self, tmp_path: Path, user_config_path: Path
    ) -> None:
        _ = (tmp_path / ".repostat.toml").write_text('[output]\nformat = "json"\n')

        config = Config.load(project_root=tmp_path)

        project = next(
            s for s in config.sources if s.name is ConfigSourceName.PROJECT
        )
        assert project.exists
        assert project.values == {"output": {"format": "json"}}

    def test_project_file_cannot_set_executable_or_log_file(
        self, tmp_path: Path, user_config_path: Path
    ) -> None:
        _ = (tmp_path / ".repostat.toml").write_text(
            '[git]\nexecutable = "./run-me.sh"\n'
            '[logging]\nfile = "/home/user/.bashrc"\nlevel = "info"\n'
        )

        config = Config.load(project_root=tmp_path)

        assert config.git.executable == "git"
        assert config.logging.file == ""
        assert config.logging.level is LogLevel.INFO
        project = next(
            s for s in config.sources if s.name is ConfigSourceName.PROJECT
        )
        assert project.values == {"git": {}, "logging": {"level": "info"}}

    def test_user_file_and_env_can_set_executable_and_log_file(
        self,
        tmp_path: Path,
        user_config_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        user_config_path.parent.mkdir(parents=True)
        _ = user_config_path.write_text('[git]\nexecutable = "/user/git"\n')
        monkeypatch.setenv("REPOSTAT_LOGGING__FILE", "/var/log/repostat.log")

        config = Config.load(project_root=tmp_path)

        assert config.git.executable == "/user/git"
        assert config.logging.file == "/var/log/repostat.log"
