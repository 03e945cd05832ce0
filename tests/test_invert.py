import pytest

from dstructs.invert import main, reverse_text


@pytest.mark.parametrize("text", ["", "a", "hello world", "racecar", "abc123"])
def test_reverse_matches_slice(text):
    assert reverse_text(text) == text[::-1]


@pytest.mark.parametrize("text", ["stack", "Pilha de chars"])
def test_reverse_twice_is_identity(text):
    assert reverse_text(reverse_text(text)) == text


def test_main_prints_inverse(capsys):
    text = "hello"
    assert main([text]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == f"First size: {len(text)}"
    assert lines[2] == f"the inverse of '{text}' is: {text[::-1]}"
    assert lines[3] == "Last size: 0"


@pytest.mark.parametrize("argv", [[], ["a", "b"]])
def test_main_usage(argv, capsys):
    assert main(argv) == 1
    assert "Usage" in capsys.readouterr().out