"""Validating and parsing the clue string given on the command line."""

ERROR_MESSAGE = "Error"

# Accepted input lengths: 4 * size clues separated by single spaces, size 4..9.
_VALID_LENGTHS = frozenset({31, 39, 47, 55, 63, 71})


class InputError(ValueError):
    """Raised when the clue string is malformed."""

    def __init__(self, message: str = ERROR_MESSAGE) -> None:
        super().__init__(message)


def _max_digit(size: int) -> str:
    return chr(ord("0") + size)


def grid_size(text: str) -> int:
    """Return the grid size implied by the length of ``text``."""
    length = len(text)
    if length not in _VALID_LENGTHS:
        raise InputError()
    return ((length + 1) // 2) // 4


def validate_input(text: str, size: int) -> None:
    """Check that ``text`` holds 4 * size digits from 1 to size, single-spaced."""
    expected = size * 4 * 2 - 1
    if len(text) < expected:
        raise InputError()
    top = _max_digit(size)
    for index, char in enumerate(text[:expected]):
        if index % 2 == 0:
            if not "1" <= char <= top:
                raise InputError()
        elif char != " ":
            raise InputError()


def parse_clues(text: str, size: int) -> list[int]:
    """Extract the clue digits from ``text``; there must be exactly 4 * size."""
    top = _max_digit(size)
    clues = [int(char) for char in text if "1" <= char <= top]
    if len(clues) != size * 4:
        raise InputError()
    return clues