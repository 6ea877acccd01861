from click.testing import CliRunner

from workerflags._cli import cli

TARGET = "tests.utils.containers:SpawnConfiguration"


class TestApply:
    def test_apply_updates(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["apply", TARGET, "spawn_z_offset=150"])

        assert result.exit_code == 0, result.output
        assert "spawn_z_offset -> spawn_vertical_offset = 150" in result.output
        assert "density_check_maximum -> density_check_max = 20" in result.output

    def test_apply_env_file_then_arguments(
        self, runner: CliRunner, temp_dir: str
    ) -> None:
        with runner.isolated_filesystem(temp_dir=temp_dir):
            with open("flags.env", "w") as f:
                f.write("spawn_z_offset=150\ndensity_check_maximum=7\n")

            result = runner.invoke(
                cli,
                ["apply", TARGET, "density_check_maximum=8", "--env-file", "flags.env"],
            )

        assert result.exit_code == 0, result.output
        assert "spawn_z_offset -> spawn_vertical_offset = 150" in result.output
        assert "density_check_maximum -> density_check_max = 8" in result.output

    def test_unset_restores_default(self, runner: CliRunner) -> None:
        result = runner.invoke(
            cli,
            [
                "apply",
                TARGET,
                "density_check_distance=5",
                "-u",
                "density_check_distance",
            ],
        )

        assert result.exit_code == 0, result.output
        assert "density_check_distance -> density_check_distance = 300" in result.output

    def test_conversion_failure_exits_with_error(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["apply", TARGET, "spawn_z_offset=oops"])

        assert result.exit_code == 1
        assert "spawn_z_offset" in result.output
        assert "'oops'" in result.output

    def test_unbound_flag_is_ignored(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["apply", TARGET, "no_such_flag=1"])

        assert result.exit_code == 0, result.output
        assert "spawn_z_offset -> spawn_vertical_offset = 0" in result.output

    def test_strict_rejects_unbound_flag(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["apply", TARGET, "--strict", "no_such_flag=1"])

        assert result.exit_code == 1
        assert "no_such_flag is not bound" in result.output

    def test_malformed_assignment(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["apply", TARGET, "spawn_z_offset"])

        assert result.exit_code == 2
        assert "NAME=VALUE" in result.output
