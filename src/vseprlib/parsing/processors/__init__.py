"""Row processing: element extraction, valence derivation and registry assembly."""

from .element_extractor import ElementExtractor, decode_color, average_bond_radius
from .valence import derive_valence_electrons, count_outer_shell_electrons, count_f_electrons
from .registry_builder import ElementRegistryBuilder

__all__ = [
    "ElementExtractor",
    "decode_color",
    "average_bond_radius",
    "derive_valence_electrons",
    "count_outer_shell_electrons",
    "count_f_electrons",
    "ElementRegistryBuilder"
]
