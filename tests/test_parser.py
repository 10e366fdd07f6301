import pytest

from myshell.parser import Command, parse_command


def test_plain_line_keeps_all_tokens() -> None:
    assert parse_command("ls -l /tmp") == Command(["ls", "-l", "/tmp"], False)


def test_runs_of_spaces_give_no_empty_tokens() -> None:
    args, background = parse_command("  echo    a  b ")
    assert args == ["echo", "a", "b"]
    assert background is False


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("sleep 10 #", ["sleep", "10"]),
        ("sleep 10 # ignored tokens", ["sleep", "10"]),
        ("a # b # c", ["a"]),
    ],
)
def test_marker_truncates_and_sets_background(line, expected) -> None:
    args, background = parse_command(line)
    assert args == expected
    assert background is True


def test_marker_must_be_a_whole_token() -> None:
    args, background = parse_command("echo #tag a#b")
    assert args == ["echo", "#tag", "a#b"]
    assert background is False


def test_quotes_and_tabs_are_literal() -> None:
    args, _ = parse_command("echo 'a b'\tc")
    assert args == ["echo", "'a", "b'\tc"]


@pytest.mark.parametrize("line", ["", "     ", "#", "  # echo hi"])
def test_lines_without_a_command_parse_empty(line) -> None:
    assert parse_command(line).args == []


def test_marker_only_still_flags_background() -> None:
    assert parse_command("#") == Command([], True)


@pytest.mark.parametrize(
    "line",
    [
        "ls",
        "grep -n needle haystack.txt",
        "echo #tag a#b c#",
        "git commit -m wip",
        "printf %s\\n x",
    ],
)
def test_rejoining_tokens_reproduces_normalized_line(line) -> None:
    args, background = parse_command(line)
    assert background is False
    assert " ".join(args) == line
