"""Tests for semvalue CLI."""

from typer.testing import CliRunner

from semvalue.cli.main import app

runner = CliRunner()


def test_render_numbers() -> None:
    """Test rendering a plain release."""
    result = runner.invoke(app, ["render", "1", "2", "3"])

    assert result.exit_code == 0
    assert result.stdout.strip() == "1.2.3"


def test_render_pre_release_and_build() -> None:
    """Test rendering with repeated pre-release and build options."""
    result = runner.invoke(
        app,
        ["render", "2", "0", "0", "--pre", "rc", "-p", "1", "--build", "001"],
    )

    assert result.exit_code == 0
    assert result.stdout.strip() == "2.0.0-rc.1+001"


def test_render_build_only() -> None:
    """Test build identifiers are passed through unvalidated."""
    result = runner.invoke(app, ["render", "1", "0", "0", "-b", "build", "-b", "5"])

    assert result.exit_code == 0
    assert result.stdout.strip() == "1.0.0+build.5"


def test_render_invalid_pre_release() -> None:
    """Test an invalid pre-release identifier is reported."""
    result = runner.invoke(app, ["render", "1", "0", "0", "--pre", "01"])

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert 'Invalid pre-release identifier "01"' in result.output


def test_render_missing_arguments() -> None:
    """Test render requires all three numbers."""
    result = runner.invoke(app, ["render", "1", "0"])

    assert result.exit_code == 2


def test_check_valid_identifiers() -> None:
    """Test checking identifiers that all match the grammar."""
    result = runner.invoke(app, ["check", "alpha", "1", "x-y-z", "99-beta"])

    assert result.exit_code == 0
    assert "'x-y-z'" in result.stdout
    assert "✓ valid" in result.stdout
    assert "All 4 identifiers are valid" in result.stdout


def test_check_invalid_identifiers() -> None:
    """Test invalid identifiers are flagged and fail the command."""
    result = runner.invoke(app, ["check", "alpha", "01", ""])

    assert result.exit_code == 1
    assert "'01'" in result.output
    assert "✗ invalid" in result.output
    assert "2 of 3 identifiers are invalid" in result.output


def test_log_level_option() -> None:
    """Test a valid log level is accepted."""
    result = runner.invoke(app, ["--log-level", "debug", "render", "0", "1", "0"])

    assert result.exit_code == 0
    assert "0.1.0" in result.stdout


def test_log_level_from_environment() -> None:
    """Test the log level can come from the environment."""
    result = runner.invoke(
        app, ["render", "3", "0", "0"], env={"SEMVALUE_LOG_LEVEL": "INFO"}
    )

    assert result.exit_code == 0
    assert "3.0.0" in result.stdout


def test_unknown_log_level() -> None:
    """Test an unknown log level is rejected."""
    result = runner.invoke(
        app,
        ["--log-level", "loud", "render", "1", "0", "0"],
        env={"COLUMNS": "200"},
    )

    assert result.exit_code == 2
    assert "Invalid value" in result.output
    assert "loud" in result.output


def test_log_level_choices_in_help() -> None:
    """Test the accepted log levels are listed in the help text."""
    result = runner.invoke(app, ["--help"], env={"COLUMNS": "200"})

    assert result.exit_code == 0
    assert "--log-level" in result.output
    for level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        assert level in result.output
