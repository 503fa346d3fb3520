import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, TextIO, Tuple, Union

from vseprlib.data.constants import FileConstants
from vseprlib.parsing.io.record_tokenizer import strip_line_terminator
from vseprlib.parsing.validation.errors import SourceUnavailableError

logger = logging.getLogger(__name__)


@contextmanager
def open_element_source(path: Union[str, Path]) -> Iterator[TextIO]:
    """
    Open a periodic table data file for reading.

    The handle is closed on every exit path, including errors raised while
    the caller is still consuming lines.
    Args:
        path: Path to the data file
    Yields:
        Text handle positioned at the start of the file
    Raises:
        SourceUnavailableError: If the path is missing, is not a file, or cannot be read
    """
    file_path = Path(path)
    if not file_path.exists():
        raise SourceUnavailableError(str(file_path), "file not found")
    if not file_path.is_file():
        raise SourceUnavailableError(str(file_path), "path is not a file")
    try:
        handle = open(file_path, 'r', encoding=FileConstants.DEFAULT_ENCODING)
    except OSError as e:
        raise SourceUnavailableError(str(file_path), str(e)) from e
    logger.debug("Opened element data source: %s", file_path)
    try:
        yield handle
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailableError(str(file_path), str(e)) from e
    finally:
        handle.close()
        logger.debug("Closed element data source: %s", file_path)


def is_data_line(line: str) -> bool:
    """A line holds an element row only if it starts with a decimal digit."""
    return bool(line) and line[0] in '0123456789'


def iter_data_lines(lines: Iterable[str]) -> Iterator[Tuple[int, str]]:
    """
    Yield admitted lines with their 1-based line numbers.

    Headers, blank lines and comments are skipped silently. Line terminators
    are removed; other whitespace is left in place.
    """
    skipped = 0
    for line_number, raw_line in enumerate(lines, start=1):
        line = strip_line_terminator(raw_line)
        if not is_data_line(line):
            skipped += 1
            continue
        yield line_number, line
    logger.debug("Skipped %d non-data lines", skipped)
