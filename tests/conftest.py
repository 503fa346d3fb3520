"""Shared pytest fixtures for vseprlib tests."""
import pytest
from pathlib import Path

from vseprlib.parsing.config.column_schema import ColumnSchema

HEADER = ("atomicNumber,symbol,group,block,period,name,atomicMass,density,meltingPoint,boilingPoint,"
          "phase,discoverer,electronegativity")

# Field values keyed by column schema key; unlisted columns stay empty
SAMPLE_ELEMENTS = {
    'H': dict(atomic_number=1, symbol='H', valence_hint=1, period_number=1, name='hydrogen',
              electronegativity='2.2', electron_configuration='1s1', atomic_radius='53',
              van_der_waals_radius='12000', single_bond_radius_a='32', single_bond_radius_b='31',
              color='255-255-255'),
    'He': dict(atomic_number=2, symbol='He', valence_hint=18, period_number=1, name='helium',
               electron_configuration='1s2', atomic_radius='31', van_der_waals_radius='14000',
               single_bond_radius_a='46', single_bond_radius_b='28', color='217-255-255'),
    'Be': dict(atomic_number=4, symbol='Be', valence_hint=2, period_number=2, name='beryllium',
               electronegativity='1.57', electron_configuration='[He] 2s2', atomic_radius='112',
               van_der_waals_radius='15300', single_bond_radius_a='102', single_bond_radius_b='96',
               double_bond_radius='90', triple_bond_radius='85', color='194-255-0'),
    'B': dict(atomic_number=5, symbol='B', valence_hint=13, period_number=2, name='boron',
              electronegativity='2.04', electron_configuration='[He] 2s2 2p1', atomic_radius='87',
              van_der_waals_radius='19200', single_bond_radius_a='85', single_bond_radius_b='84',
              double_bond_radius='78', triple_bond_radius='73', color='255-181-181'),
    'C': dict(atomic_number=6, symbol='C', valence_hint=14, period_number=2, name='carbon',
              electronegativity='2.55', electron_configuration='[He] 2s2 2p2', atomic_radius='67',
              van_der_waals_radius='17000', single_bond_radius_a='75', single_bond_radius_b='77',
              double_bond_radius='67', triple_bond_radius='60', color='144-144-144'),
    'O': dict(atomic_number=8, symbol='O', valence_hint=16, period_number=2, name='oxygen',
              electronegativity='3.44', electron_configuration='[He] 2s2 2p4', atomic_radius='48',
              van_der_waals_radius='15200', single_bond_radius_a='63', single_bond_radius_b='66',
              double_bond_radius='57', triple_bond_radius='53', color='255-13-13'),
    'Fe': dict(atomic_number=26, symbol='Fe', valence_hint=8, period_number=4, name='iron',
               electronegativity='1.83', electron_configuration='[Ar] 3d6 4s2', atomic_radius='156',
               van_der_waals_radius='19400', single_bond_radius_a='116', single_bond_radius_b='124',
               double_bond_radius='109', triple_bond_radius='102', color='224-102-51'),
    'Ce': dict(atomic_number=58, symbol='Ce', valence_hint='', period_number=6, name='cerium',
               electronegativity='1.12', electron_configuration='[Xe] 4f1 5d1 6s2', atomic_radius='185',
               single_bond_radius_a='163', single_bond_radius_b='', double_bond_radius='137',
               triple_bond_radius='131', color='255-255-199'),
    'Yb': dict(atomic_number=70, symbol='Yb', valence_hint='', period_number=6, name='ytterbium',
               electron_configuration='[Xe] 4f14 6s2', atomic_radius='222', single_bond_radius_a='170',
               single_bond_radius_b='', double_bond_radius='158', color='0-191-56'),
}


def _make_fields(schema: ColumnSchema, **values) -> list:
    fields = [''] * schema.min_field_count
    for key, value in values.items():
        fields[schema.index_of(key)] = str(value)
    return fields


@pytest.fixture(scope="session")
def default_schema():
    """Packaged column schema."""
    return ColumnSchema.default()


@pytest.fixture
def make_fields(default_schema):
    """Factory building a tokenized row from column keys."""
    def factory(**values):
        return _make_fields(default_schema, **values)
    return factory


@pytest.fixture
def make_row(default_schema):
    """Factory building a raw CSV line from column keys."""
    def factory(**values):
        return default_schema.delimiter.join(_make_fields(default_schema, **values))
    return factory


@pytest.fixture
def sample_elements():
    """Field values for a handful of representative elements."""
    return {symbol: dict(values) for symbol, values in SAMPLE_ELEMENTS.items()}


@pytest.fixture
def sample_lines(make_row, sample_elements):
    """Header, blank line and one data row per sample element."""
    lines = [HEADER, ""]
    lines.extend(make_row(**values) for values in sample_elements.values())
    return lines


@pytest.fixture
def write_data_file(tmp_path):
    """Write lines to a CSV file under tmp_path and return its path."""
    def writer(lines, name="periodic_table.csv") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return writer


@pytest.fixture
def sample_data_file(write_data_file, sample_lines):
    """Path to a small periodic table file."""
    return write_data_file(sample_lines)
