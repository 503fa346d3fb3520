"""Constants used for column schema parsing."""

# Top-level keys
DELIMITER_KEY = "delimiter"
COLUMNS_KEY = "columns"

# Identity columns
ATOMIC_NUMBER_KEY = "atomic_number"
SYMBOL_KEY = "symbol"
NAME_KEY = "name"
PERIOD_NUMBER_KEY = "period_number"

# Valence derivation inputs
VALENCE_HINT_KEY = "valence_hint"
ELECTRON_CONFIGURATION_KEY = "electron_configuration"

# Scalar properties
ELECTRONEGATIVITY_KEY = "electronegativity"
ATOMIC_RADIUS_KEY = "atomic_radius"
VAN_DER_WAALS_RADIUS_KEY = "van_der_waals_radius"

# Covalent bond radii
SINGLE_BOND_RADIUS_A_KEY = "single_bond_radius_a"
SINGLE_BOND_RADIUS_B_KEY = "single_bond_radius_b"
DOUBLE_BOND_RADIUS_KEY = "double_bond_radius"
TRIPLE_BOND_RADIUS_KEY = "triple_bond_radius"

# Display
COLOR_KEY = "color"

COLUMN_KEYS = (
    ATOMIC_NUMBER_KEY,
    SYMBOL_KEY,
    VALENCE_HINT_KEY,
    PERIOD_NUMBER_KEY,
    NAME_KEY,
    ELECTRONEGATIVITY_KEY,
    ELECTRON_CONFIGURATION_KEY,
    ATOMIC_RADIUS_KEY,
    VAN_DER_WAALS_RADIUS_KEY,
    SINGLE_BOND_RADIUS_A_KEY,
    SINGLE_BOND_RADIUS_B_KEY,
    DOUBLE_BOND_RADIUS_KEY,
    TRIPLE_BOND_RADIUS_KEY,
    COLOR_KEY,
)

__all__ = [
    "DELIMITER_KEY",
    "COLUMNS_KEY",
    "ATOMIC_NUMBER_KEY",
    "SYMBOL_KEY",
    "NAME_KEY",
    "PERIOD_NUMBER_KEY",
    "VALENCE_HINT_KEY",
    "ELECTRON_CONFIGURATION_KEY",
    "ELECTRONEGATIVITY_KEY",
    "ATOMIC_RADIUS_KEY",
    "VAN_DER_WAALS_RADIUS_KEY",
    "SINGLE_BOND_RADIUS_A_KEY",
    "SINGLE_BOND_RADIUS_B_KEY",
    "DOUBLE_BOND_RADIUS_KEY",
    "TRIPLE_BOND_RADIUS_KEY",
    "COLOR_KEY",
    "COLUMN_KEYS",
]
