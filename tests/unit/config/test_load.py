from pathlib import Path

import pytest

from repostat.config import OutputFormat, safe_load_config
from repostat.enums import ExitCode


class TestSafeLoadConfig:
    def test_returns_config_without_error(
        self, tmp_path: Path, user_config_path: Path
    ) -> None:
        _ = (tmp_path / ".repostat.toml").write_text('[output]\nformat = "yaml"\n')

        config, error = safe_load_config(project_root=tmp_path)

        assert error is None
        assert config.output.format is OutputFormat.YAML

    def test_falls_back_to_defaults_on_invalid_file(
        self,
        tmp_path: Path,
        user_config_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        _ = (tmp_path / ".repostat.toml").write_text("[output\n")

        config, error = safe_load_config(project_root=tmp_path)

        assert error is not None
        assert error.startswith("Failed to load config:")
        assert config.output.format is OutputFormat.TEXT
        assert "Warning: Failed to load config" in capsys.readouterr().err

    def test_falls_back_on_invalid_value(
        self, tmp_path: Path, user_config_path: Path
    ) -> None:
        _ = (tmp_path / ".repostat.toml").write_text('[output]\nformat = "xml"\n')

        config, error = safe_load_config(project_root=tmp_path)

        assert error is not None
        assert "output.format" in error
        assert config.output.format is OutputFormat.TEXT

    def test_strict_mode_exits_with_config_error(
        self,
        tmp_path: Path,
        user_config_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("REPOSTAT_STRICT_CONFIG", "1")
        _ = (tmp_path / ".repostat.toml").write_text("[output\n")

        with pytest.raises(SystemExit) as exc_info:
            _ = safe_load_config(project_root=tmp_path)

        assert exc_info.value.code == ExitCode.CONFIG_ERROR
        assert "Error: Failed to load config" in capsys.readouterr().err
