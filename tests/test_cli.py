"""CLI tests."""

from click.testing import CliRunner

from moneymask.cli import main


def _run(*args, **kwargs):
    return CliRunner().invoke(main, list(args), **kwargs)


def test_format_groups_digits():
    result = _run("format", "1234567.89")
    assert result.exit_code == 0
    assert result.output == "1.234.567,89\n"


def test_format_with_symbols():
    result = _run("format", "10", "--left-symbol", "$")
    assert result.exit_code == 0
    assert result.output.strip() == "$10,00"


def test_format_precision_zero():
    result = _run("format", "1234", "--precision", "0", "--thousand-separator", ",")
    assert result.output.strip() == "1,234"


def test_format_rejects_large_values():
    result = _run("format", "10000000000000")
    assert result.exit_code == 1
    assert "too many integer digits" in result.output


def test_format_rejects_negative():
    result = _run("format", "--", "-5")
    assert result.exit_code == 1
    assert "negative" in result.output


def test_invalid_right_symbol():
    result = _run("format", "1", "--right-symbol", "x1")
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_unmask_value_and_text():
    result = _run("unmask", "R$ 1.234,56", "--left-symbol", "R$ ")
    assert result.output.strip() == "1234.56"

    result = _run("unmask", "R$ 1.234,56", "--left-symbol", "R$ ", "--text")
    assert result.output.strip() == "1.234,56"


def test_unmask_empty_is_zero():
    result = _run("unmask", "")
    assert result.output.strip() == "0.00"


def test_type_replays_keys():
    result = _run("type", "123456")
    assert result.exit_code == 0
    assert "1.234,56|" in result.output
    assert result.output.strip().endswith("value: 1234.56")


def test_type_backspace():
    result = _run("type", "12<")
    assert result.exit_code == 0
    assert result.output.strip().endswith("value: 0.01")


def test_type_unlocked_cursor():
    result = _run("type", "7", "--initial", "1234.56", "--cursor", "unlocked")
    assert result.exit_code == 0
    # cursor starts after the first digit
    assert "17|.234,56" in result.output


def test_environment_defaults():
    result = _run("format", "5", env={"MONEYMASK_LEFT_SYMBOL": "€ "})
    assert result.output.strip() == "€ 5,00"
