import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

from vseprlib.core.elements import ElementRecord, make_lone_pair
from vseprlib.core.registry import ElementRegistry
from vseprlib.data.constants import ElementConstants
from vseprlib.parsing.config.column_schema import ColumnSchema
from vseprlib.parsing.io.data_handler import iter_data_lines, open_element_source
from vseprlib.parsing.io.record_tokenizer import split_record
from vseprlib.parsing.processors.element_extractor import ElementExtractor
from vseprlib.parsing.validation.errors import RowFormatError
from vseprlib.parsing.validation.record_validator import validate_element_record

logger = logging.getLogger(__name__)


class ElementRegistryBuilder:
    """
    Builds an ElementRegistry from periodic table rows.

    Each build call starts from an empty mapping, so one builder can be reused
    and two builds of the same input produce equal registries.
    """

    def __init__(self, schema: Optional[ColumnSchema] = None, skip_malformed_rows: bool = False) -> None:
        self.schema = schema or ColumnSchema.default()
        self.skip_malformed_rows = skip_malformed_rows
        self.extractor = ElementExtractor(self.schema)
        logger.debug("ElementRegistryBuilder initialized (skip_malformed_rows=%s)", skip_malformed_rows)

    # --- Public API ---
    def build_from_file(self, path: Union[str, Path]) -> ElementRegistry:
        """
        Read a data file and build its registry.
        Raises:
            SourceUnavailableError: If the file cannot be opened
            RowFormatError: If a row is malformed and skip_malformed_rows is False
        """
        logger.info("Building element registry from: %s", path)
        with open_element_source(path) as handle:
            return self.build_from_lines(handle)

    def build_from_lines(self, lines: Iterable[str]) -> ElementRegistry:
        """
        Build a registry from raw text lines.

        Non-data lines are skipped, later rows replace earlier rows with the
        same symbol, and the lone pair entry is always added last.
        """
        records: Dict[str, ElementRecord] = {}
        skipped = 0
        for line_number, line in iter_data_lines(lines):
            try:
                record = self._process_line(line, line_number)
            except RowFormatError as e:
                if not self.skip_malformed_rows:
                    raise
                skipped += 1
                logger.warning("Skipping malformed row: %s", e)
                continue
            if record.symbol in records:
                logger.warning("Line %d: duplicate symbol '%s' replaces %s", line_number,
                               record.symbol, records[record.symbol].name)
            records[record.symbol] = record
        element_count = len(records)
        if ElementConstants.LONE_PAIR_SYMBOL in records:
            logger.warning("Data row with reserved symbol '%s' replaced by the lone pair entry",
                           ElementConstants.LONE_PAIR_SYMBOL)
            element_count -= 1
        records[ElementConstants.LONE_PAIR_SYMBOL] = make_lone_pair()
        logger.info("Loaded %d elements (%d malformed rows skipped)", element_count, skipped)
        return ElementRegistry(records)

    def _process_line(self, line: str, line_number: int) -> ElementRecord:
        fields = split_record(line, self.schema.delimiter)
        record = self.extractor.extract(fields, line_number)
        validate_element_record(record, line_number)
        return record
