from typing import List

from vseprlib.data.constants import FileConstants


def split_record(line: str, delimiter: str = FileConstants.DEFAULT_DELIMITER) -> List[str]:
    """
    Split one raw text line into its fields.

    Empty fields are kept wherever they occur, so ``"1,2,3,"`` gives four
    fields with a trailing empty string and ``""`` gives ``[""]``.
    Args:
        line: Raw line without its line terminator
        delimiter: Single-character field separator
    Returns:
        Fields in their original order
    Raises:
        ValueError: If the delimiter is not exactly one character
    """
    if len(delimiter) != 1:
        raise ValueError(f"Delimiter must be a single character, got {delimiter!r}")
    # str.split with an explicit separator keeps leading, inner and trailing empty fields
    return line.split(delimiter)


def strip_line_terminator(line: str) -> str:
    """Remove a trailing newline or carriage return, keeping all other whitespace."""
    return line.rstrip(FileConstants.LINE_TERMINATORS)
