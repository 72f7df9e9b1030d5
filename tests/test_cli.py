import pytest

from intcnv.cli import main
from intcnv.runner import USAGE_LINE


@pytest.mark.parametrize("argv", [[], ["i32"]])
def test_missing_arguments_prints_usage(argv, capsys):
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert captured.out == USAGE_LINE + "\n"
    assert USAGE_LINE == "Usage: intcnv i32 134"
    assert "error: [E002]" in captured.err
    assert f"got {len(argv)} argument" in captured.err


@pytest.mark.parametrize(
    "argv,expected",
    [
        (["i32", "134"], "134"),
        (["u8", "256"], "0"),
        (["i8", "128"], "-128"),
        (["i64", "9223372036854775808"], "-9223372036854775808"),
        (["i8", "-1"], "-1"),
        (["u16", "-1"], "65535"),
    ],
)
def test_prints_result(argv, expected, capsys):
    assert main(argv) == 0
    captured = capsys.readouterr()
    assert captured.out == expected + "\n"
    assert captured.err == ""


def test_extra_arguments_are_ignored(capsys):
    assert main(["u8", "7", "ignored", "also"]) == 0
    assert capsys.readouterr().out == "7\n"


def test_unrecognized_type(capsys):
    assert main(["f32", "1"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "[E001]" in captured.err


def test_malformed_value_lenient(capsys):
    assert main(["u8", "abc"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "0\n"
    assert "warning: [W001]" in captured.err


def test_malformed_value_strict(capsys):
    assert main(["--strict", "u8", "abc"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error: [E003]" in captured.err


def test_negative_value(capsys):
    assert main(["i8", "-129"]) == 0
    assert capsys.readouterr().out == "127\n"


def test_list_types(capsys):
    assert main(["--list-types"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 9
    assert lines[1].split()[:2] == ["u8", "8"]
    assert lines[-1].endswith("-9223372036854775808 .. 9223372036854775807")


def test_help_exits_zero(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "u8, i8, u16" in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv",
    [
        ["u8", "--strict", "12"],
        ["--strict", "u8", "12"],
        ["u8", "12", "--strict"],
    ],
)
def test_options_between_arguments(argv, capsys):
    assert main(argv) == 0
    captured = capsys.readouterr()
    assert captured.out == "12\n"
    assert captured.err == ""


def test_strict_between_arguments_still_rejects(capsys):
    assert main(["u8", "--strict", "abc"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error: [E003]" in captured.err


@pytest.mark.parametrize(
    "argv,expected,code",
    [
        (["u64", "18446744073709551616"], "0", "W002"),
        (["u8", "18446744073709551873"], "1", "W002"),
        (["u8", "12abc"], "12", "W003"),
        (["i8", "255 apples"], "-1", "W003"),
        (["u8", "abc"], "0", "W001"),
    ],
)
def test_warnings_go_to_stderr(argv, expected, code, capsys):
    assert main(argv) == 0
    captured = capsys.readouterr()
    assert captured.out == expected + "\n"
    assert f"warning: [{code}]" in captured.err
