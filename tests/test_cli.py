"""Tests for command line parsing and option validation."""

import pytest

from drawnstories.cli import parse_args, usage, validate_args

URL = "https://drawnstories.ru/comics/Oni-press/rick-and-morty"


def test_url_and_issue_numbers():
    args = parse_args([URL, "001", "003"])

    assert args.url == URL
    assert args.issues == ["001", "003"]
    assert args.output == "."
    assert args.workers == 1


def test_url_is_optional_for_the_parser():
    args = parse_args([])
    assert args.url is None
    assert args.issues == []


def test_options():
    args = parse_args([URL, "-o", "books", "--timeout", "5", "--workers", "4"])

    assert (args.output, args.timeout, args.workers) == ("books", 5.0, 4)


@pytest.mark.parametrize("argv", [[URL, "--timeout", "0"], [URL, "--workers", "0"]])
def test_validate_rejects_bad_values(argv):
    with pytest.raises(SystemExit):
        validate_args(parse_args(argv))


def test_validate_rejects_file_as_output(tmp_path):
    target = tmp_path / "file.txt"
    target.write_text("x")

    with pytest.raises(SystemExit):
        validate_args(parse_args([URL, "-o", str(target)]))


def test_usage_has_two_lines():
    lines = usage().splitlines()
    assert lines[0].startswith("Usage: drawnstories-cbz <URL>")
    assert lines[1].startswith("Example: drawnstories-cbz https://drawnstories.ru/comics/")


def test_option_errors_include_usage():
    with pytest.raises(SystemExit) as excinfo:
        validate_args(parse_args([URL, "--workers", "0"]))

    message = str(excinfo.value.code)
    assert message.startswith("Workers must be at least 1.")
    assert usage().strip() in message
