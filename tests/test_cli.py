import pytest
from click.testing import CliRunner

from cidrcalc import __version__
from cidrcalc.cli import main
from cidrcalc.config import CalcConfig, set_config


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, *args):
    return runner.invoke(main, ["subnet", *args])


@pytest.mark.parametrize("args, expected", [
    (["total-count", "16"], "65536"),
    (["total-count", "24"], "256"),
    (["total-count", "0"], "4294967296"),
    (["subnet-mask", "24"], "4294967040"),
    (["subnet-mask", "0"], "0"),
    (["subnet-mask", "32"], "4294967295"),
    (["subnet-mask", "27", "--dotted"], "255.255.255.224"),
    (["host-mask", "8"], "255"),
    (["host-mask", "16", "--dotted"], "0.0.255.255"),
    (["network", "169607169", "4294901760"], "169607168"),
    (["network", "10.28.0.1", "255.255.0.0", "--dotted"], "10.28.0.0"),
    (["broadcast", "3232235776", "255"], "3232236031"),
    (["broadcast", "169607424", "31", "--dotted"], "10.28.1.31"),
    (["broadcast", "192.168.1.0", "--count", "256", "--dotted"], "192.168.1.255"),
    (["to-uint", "192.168.1.0"], "3232235776"),
    (["to-ip", "3232236031"], "192.168.1.255"),
])
def test_value_commands(runner, args, expected):
    result = invoke(runner, *args)
    assert result.exit_code == 0, result.output
    assert result.output.strip() == expected


@pytest.mark.parametrize("args, expected", [
    (["overlap", "10.28.0.0/16", "10.28.0.0/25"], "true"),
    (["overlap", "10.28.0.0/25", "10.28.0.128/25"], "false"),
    (["overlap", "10.28.0.5/25", "10.28.0.100/25", "--lenient"], "true"),
    (["in-subnet", "10.28.0.129", "10.28.0.128/25"], "true"),
    (["in-subnet", "10.28.1.36", "10.28.0.128/25"], "false"),
    (["covers", "10.28.0.0/16", "10.28.1.0/27"], "true"),
    (["covers", "10.28.1.0/27", "10.28.0.0/16"], "false"),
])
def test_boolean_commands(runner, args, expected):
    result = invoke(runner, *args)
    assert result.exit_code == 0, result.output
    assert result.output.strip() == expected


@pytest.mark.parametrize("args", [
    ["subnet-mask", "33"],
    ["host-mask", "40"],
    ["total-count", "99"],
    ["to-ip", "4294967296"],
    ["to-uint", "10.28.0"],
    ["network", "10.28.0.999", "4294901760"],
    ["broadcast", "0", "--count", "3"],
    ["overlap", "10.28.0.0/16", "10.28.0.0"],
    ["overlap", "10.28.0.5/25", "10.28.0.0/16"],
    ["in-subnet", "10.28.0.x", "10.28.0.0/16"],
    ["calc", "10.28.0.0/40"],
])
def test_domain_errors_exit_one(runner, args):
    result = invoke(runner, *args)
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_broadcast_needs_exactly_one_source(runner):
    assert invoke(runner, "broadcast", "3232235776").exit_code == 2
    assert invoke(runner, "broadcast", "3232235776", "255", "--count", "256").exit_code == 2


def test_non_integer_prefix_is_usage_error(runner):
    assert invoke(runner, "total-count", "abc").exit_code == 2


def test_calc_table(runner):
    result = invoke(runner, "calc", "192.168.1.0/24")
    assert result.exit_code == 0, result.output
    for value in ("192.168.1.0", "192.168.1.255", "255.255.255.0", "0.0.0.255", "/24", "256", "254",
                  "192.168.1.1", "192.168.1.254"):
        assert value in result.output


def test_calc_lenient(runner):
    result = invoke(runner, "calc", "10.28.0.5/25", "--lenient")
    assert result.exit_code == 0, result.output
    assert "10.28.0.127" in result.output


def test_version(runner):
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_debug_log_file(runner, tmp_path):
    log_file = tmp_path / "logs" / "cidrcalc.log"
    result = runner.invoke(main, ["--debug", "--log-file", str(log_file), "subnet", "subnet-mask", "33"])
    assert result.exit_code == 1
    text = log_file.read_text(encoding="utf-8")
    assert "starting" in text
    assert "OutOfRangeError" in text


def test_unknown_log_level_still_runs_commands(runner):
    set_config(CalcConfig(log_level="VERBOSE"))
    result = invoke(runner, "subnet-mask", "24")
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "4294967040"


@pytest.mark.parametrize("args", [
    ["network", "9" * 5000, "4294901760"],
    ["network", "10.28.0.1", "1" + "0" * 10],
    ["broadcast", "1" + "0" * 4999, "255"],
    ["to-uint", "0" * 5000 + "1000.0.0.0"],
    ["overlap", "10.0.0.0/" + "9" * 5000, "10.0.0.0/8"],
    ["in-subnet", "10.28.0.1", "10.0.0.0/" + "9" * 5000],
])
def test_oversized_numbers_are_domain_errors(runner, args):
    result = invoke(runner, *args)
    assert result.exit_code == 1
    assert "Error:" in result.output
