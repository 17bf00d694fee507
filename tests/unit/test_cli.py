"""Unit tests for the cvd command line."""

from unittest.mock import patch

import pytest

from cvd.adapters.inbound.cli import EXIT_FAILURE, EXIT_OK, build_parser, main
from cvd.infrastructure.config import Config, InventoryConfig, OutputConfig

GET_CONFIG = "cvd.adapters.inbound.cli.get_config"


def dev_config(devices, busy=(), separator=","):
    return Config(
        inventory=InventoryConfig(
            dev_mode=True,
            simulated_devices=list(devices),
            simulated_busy_devices=list(busy),
        ),
        output=OutputConfig(separator=separator),
    )


def run_cli(config, argv, capsys):
    with patch(GET_CONFIG, return_value=config):
        status = main(argv)
    captured = capsys.readouterr()
    return status, captured.out, captured.err


@pytest.mark.unit
class TestParser:
    """Test argument parsing."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.n is None
        assert args.empty_only is False
        assert args.verbose is False

    def test_flags(self):
        args = build_parser().parse_args(["-n", "2", "-e"])
        assert args.n == 2
        assert args.empty_only is True

    def test_zero_count_is_kept(self):
        assert build_parser().parse_args(["-n", "0"]).n == 0

    @pytest.mark.parametrize("value", ["-1", "two", "1.5"])
    def test_invalid_count_exits_with_usage_error(self, value, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["-n", value])

        assert exc_info.value.code == 2

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--version"])

        assert exc_info.value.code == 0
        assert capsys.readouterr().out.startswith("cvd ")


@pytest.mark.unit
class TestMain:
    """Test end-to-end CLI runs against simulated devices."""

    def test_prints_all_devices_sorted(self, capsys):
        status, out, _ = run_cli(dev_config(["b", "a", "c"]), [], capsys)

        assert status == EXIT_OK
        assert out == "a,b,c\n"

    def test_empty_only(self, capsys):
        status, out, _ = run_cli(dev_config(["b", "a", "c"], busy=["a"]), ["-e"], capsys)

        assert status == EXIT_OK
        assert out == "b,c\n"

    def test_count(self, capsys):
        status, out, _ = run_cli(dev_config(["b", "a", "c"]), ["-n", "2"], capsys)

        assert status == EXIT_OK
        assert out == "a,b\n"

    def test_zero_count_prints_empty_line(self, capsys):
        status, out, _ = run_cli(dev_config(["b", "a", "c"]), ["-n", "0"], capsys)

        assert status == EXIT_OK
        assert out == "\n"

    def test_custom_separator(self, capsys):
        status, out, _ = run_cli(dev_config(["b", "a"], separator=" "), [], capsys)

        assert status == EXIT_OK
        assert out == "a b\n"

    def test_insufficient_devices(self, capsys):
        status, out, err = run_cli(dev_config(["b", "a", "c"]), ["-n", "5"], capsys)

        assert status == EXIT_FAILURE
        assert out == ""
        assert "requested 5" in err
        assert "only 3" in err

    def test_no_devices(self, capsys):
        status, out, err = run_cli(dev_config([]), [], capsys)

        assert status == EXIT_FAILURE
        assert out == ""
        assert "no devices available" in err

    def test_no_empty_devices(self, capsys):
        status, out, err = run_cli(dev_config(["a"], busy=["a"]), ["--empty-only"], capsys)

        assert status == EXIT_FAILURE
        assert "no empty devices available" in err

    def test_tool_not_found(self, capsys, tmp_path, monkeypatch):
        monkeypatch.setenv("PATH", str(tmp_path))

        status, out, err = run_cli(Config(), [], capsys)

        assert status == EXIT_FAILURE
        assert out == ""
        assert "command not found: nvidia-smi" in err

    def test_verbose_logs_to_stderr(self, capsys):
        status, out, err = run_cli(dev_config(["a"]), ["-v"], capsys)

        assert status == EXIT_OK
        assert out == "a\n"
        assert "devices_selected" in err
