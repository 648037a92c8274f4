import pytest

from skyscraper.parsing import InputError, grid_size, parse_clues, validate_input

EXAMPLE = "4 3 2 1 1 2 2 2 4 3 2 1 1 2 2 2"


def test_grid_size_four():
    assert grid_size(EXAMPLE) == 4


def test_grid_size_nine():
    text = "3 3 2 4 3 1 2 4 3 2 2 5 2 1 5 3 2 3 4 2 5 4 2 3 1 6 3 4 2 3 1 4 3 4 2 2"
    assert grid_size(text) == 9


@pytest.mark.parametrize("text", ["", "1 2 3", "1 " * 11 + "1", EXAMPLE + " "])
def test_grid_size_rejects_other_lengths(text):
    with pytest.raises(InputError):
        grid_size(text)


def test_validate_then_parse_round_trip():
    validate_input(EXAMPLE, 4)
    clues = parse_clues(EXAMPLE, 4)
    assert " ".join(str(c) for c in clues) == EXAMPLE


@pytest.mark.parametrize(
    "text",
    [
        "5 3 2 1 1 2 2 2 4 3 2 1 1 2 2 2",
        "0 3 2 1 1 2 2 2 4 3 2 1 1 2 2 2",
        "4,3 2 1 1 2 2 2 4 3 2 1 1 2 2 2",
        "4  3 2 1 1 2 2 2 4 3 2 1 1 2 2",
        "4 3 2 1",
    ],
)
def test_validate_rejects_malformed(text):
    with pytest.raises(InputError):
        validate_input(text, 4)


def test_parse_clues_ignores_other_characters():
    assert parse_clues("4x3-2 1" + " 1" * 12, 4)[:4] == [4, 3, 2, 1]


def test_parse_clues_rejects_wrong_count():
    with pytest.raises(InputError):
        parse_clues("1 2 3", 4)


def test_input_error_message():
    with pytest.raises(InputError, match="^Error$"):
        grid_size("bad")