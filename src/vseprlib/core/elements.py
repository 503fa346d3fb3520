import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple

import numpy as np

from vseprlib.data.constants import ElementConstants

logger = logging.getLogger(__name__)

Triple = Tuple[float, float, float]


@dataclass(frozen=True)
class ElementRecord:
    """
    Derived properties of one chemical element.

    Radii are in picometres. ``bond_radii`` holds the single, double and triple
    covalent bond radius in that order; ``color`` is the CPK color with each
    channel normalized to [0, 1]. A zero in any numeric field may mean the
    source value was missing.
    """
    name: str
    symbol: str
    atomic_number: int = 0
    period_number: int = 0
    electronegativity: float = 0.0
    atomic_radius: float = 0.0
    bond_radii: Triple = (0.0, 0.0, 0.0)
    van_der_waals_radius: float = 0.0
    color: Triple = (0.0, 0.0, 0.0)
    valence_electron_count: int = 0
    is_geometry_exception: bool = False
    electron_configuration: str = ""

    @property
    def is_lone_pair(self) -> bool:
        """True for the synthetic lone pair entry."""
        return self.symbol == ElementConstants.LONE_PAIR_SYMBOL

    @property
    def single_bond_radius(self) -> float:
        return self.bond_radii[0]

    @property
    def double_bond_radius(self) -> float:
        return self.bond_radii[1]

    @property
    def triple_bond_radius(self) -> float:
        return self.bond_radii[2]

    @property
    def color_vector(self) -> np.ndarray:
        """Color as a float32 RGB array, ready for uniform upload."""
        return np.asarray(self.color, dtype=np.float32)

    @property
    def bond_radii_array(self) -> np.ndarray:
        return np.asarray(self.bond_radii, dtype=np.float64)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dictionary view of the record."""
        data = asdict(self)
        data['is_lone_pair'] = self.is_lone_pair
        return data


def make_lone_pair() -> ElementRecord:
    """
    Create the synthetic lone pair record.

    The geometry modeler places lone pairs like atoms, so the registry carries
    one placeholder entry with only its name populated.
    """
    logger.debug("Creating lone pair sentinel '%s'", ElementConstants.LONE_PAIR_SYMBOL)
    return ElementRecord(name=ElementConstants.LONE_PAIR_NAME, symbol=ElementConstants.LONE_PAIR_SYMBOL)


def is_geometry_exception(name: str) -> bool:
    """
    Check whether an element's bonding geometry is special-cased downstream.

    The set is closed (beryllium, boron). Names are matched after trimming and
    lower-casing, so 'Boron' and ' boron ' count as well; no other names match.
    """
    return name.strip().lower() in ElementConstants.GEOMETRY_EXCEPTION_NAMES
