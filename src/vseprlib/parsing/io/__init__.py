"""Line-level input handling: source access, admission and tokenizing."""

from .record_tokenizer import split_record, strip_line_terminator
from .data_handler import open_element_source, is_data_line, iter_data_lines

__all__ = [
    "split_record",
    "strip_line_terminator",
    "open_element_source",
    "is_data_line",
    "iter_data_lines"
]
