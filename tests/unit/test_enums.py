from repostat.cli import ExitCode as CliExitCode
from repostat.enums import ExitCode


class TestExitCode:
    def test_values(self) -> None:
        assert [(code.name, int(code)) for code in ExitCode] == [
            ("SUCCESS", 0),
            ("TOOL_UNAVAILABLE", 1),
            ("NOT_A_REPOSITORY", 2),
            ("STATUS_FAILED", 3),
            ("CONFIG_ERROR", 4),
        ]

    def test_cli_reexports_the_same_enum(self) -> None:
        assert CliExitCode is ExitCode
