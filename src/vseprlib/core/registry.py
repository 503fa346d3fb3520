import logging
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

import pandas as pd

from vseprlib.core.elements import ElementRecord
from vseprlib.core.exceptions import ElementNotFoundError
from vseprlib.data.constants import ElementConstants

logger = logging.getLogger(__name__)


class ElementRegistry(Mapping[str, ElementRecord]):
    """
    Read-only mapping from element symbol to ElementRecord.

    Instances are produced by ElementRegistryBuilder and never change after
    construction, so they can be shared between readers without locking.
    """

    def __init__(self, records: Mapping[str, ElementRecord]) -> None:
        self._records = MappingProxyType(dict(records))
        logger.debug("Created element registry with %d entries", len(self._records))

    # --- Mapping protocol ---
    def __getitem__(self, symbol: str) -> ElementRecord:
        try:
            return self._records[symbol]
        except KeyError:
            raise ElementNotFoundError(symbol) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._records

    def get(self, symbol: str, default: Optional[ElementRecord] = None) -> Optional[ElementRecord]:
        return self._records.get(symbol, default)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ElementRegistry):
            return dict(self._records) == dict(other._records)
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} entries)"

    # --- Public API ---
    def get_element(self, symbol: str) -> ElementRecord:
        """Get element by symbol, raising ElementNotFoundError when absent."""
        return self[symbol]

    @property
    def symbols(self) -> Tuple[str, ...]:
        return tuple(self._records)

    @property
    def lone_pair(self) -> ElementRecord:
        return self[ElementConstants.LONE_PAIR_SYMBOL]

    def elements(self) -> List[ElementRecord]:
        """Real elements ordered by atomic number, lone pair excluded."""
        return sorted((record for record in self._records.values() if not record.is_lone_pair),
                      key=lambda record: record.atomic_number)

    def find_by_name(self, name: str) -> ElementRecord:
        """Case-insensitive lookup by full element name."""
        wanted = name.strip().lower()
        for record in self._records.values():
            if record.name.lower() == wanted:
                return record
        raise ElementNotFoundError(name)

    def as_dict(self) -> Dict[str, ElementRecord]:
        """Shallow copy of the underlying mapping."""
        return dict(self._records)

    def to_dataframe(self) -> pd.DataFrame:
        """
        Tabulate all entries for diagnostics and listings.
        Returns:
            DataFrame indexed by symbol, bond radii and color split into columns.
        """
        rows = []
        for symbol, record in self._records.items():
            rows.append({
                'symbol': symbol,
                'name': record.name,
                'atomic_number': record.atomic_number,
                'period_number': record.period_number,
                'electronegativity': record.electronegativity,
                'atomic_radius': record.atomic_radius,
                'single_bond_radius': record.single_bond_radius,
                'double_bond_radius': record.double_bond_radius,
                'triple_bond_radius': record.triple_bond_radius,
                'van_der_waals_radius': record.van_der_waals_radius,
                'red': record.color[0],
                'green': record.color[1],
                'blue': record.color[2],
                'valence_electron_count': record.valence_electron_count,
                'is_geometry_exception': record.is_geometry_exception,
                'is_lone_pair': record.is_lone_pair,
            })
        df = pd.DataFrame(rows)
        if not df.empty:
            df = df.set_index('symbol')
        logger.debug("Exported %d registry entries to DataFrame", len(df))
        return df
