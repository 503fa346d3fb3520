"""End-to-end integration tests."""

import pytest

from vseprlib import load_elements, ElementRegistry

EXPECTED = {
    # symbol: (valence electrons, single bond radius, geometry exception)
    'H': (1, 31.5, False),
    'He': (8, 37.0, False),
    'Be': (2, 99.0, True),
    'B': (3, 84.5, True),
    'C': (4, 76.0, False),
    'O': (6, 64.5, False),
    'Fe': (2, 120.0, False),
    'Ce': (3, 81.5, False),
    'Yb': (16, 85.0, False),
}


class TestEndToEnd:
    """End-to-end integration tests."""

    @pytest.fixture
    def registry(self, sample_data_file) -> ElementRegistry:
        return load_elements(sample_data_file)

    @pytest.mark.parametrize("symbol", sorted(EXPECTED))
    def test_derived_properties(self, registry, symbol):
        valence, single_bond, exception = EXPECTED[symbol]
        record = registry[symbol]
        assert record.valence_electron_count == valence
        assert record.single_bond_radius == pytest.approx(single_bond)
        assert record.is_geometry_exception is exception

    def test_registry_contents(self, registry):
        assert set(registry) == set(EXPECTED) | {'LP'}
        assert [record.symbol for record in registry.elements()] == ['H', 'He', 'Be', 'B', 'C', 'O', 'Fe', 'Ce', 'Yb']

    def test_exactly_one_lone_pair(self, registry):
        lone_pairs = [record for record in registry.values() if record.is_lone_pair]
        assert len(lone_pairs) == 1
        assert lone_pairs[0].name == "Lone pair"

    def test_invariants_hold_for_every_record(self, registry):
        for symbol, record in registry.items():
            assert record.symbol == symbol
            assert record.valence_electron_count >= 0, f"{symbol} has negative valence"
            assert all(0.0 <= channel <= 1.0 for channel in record.color), f"{symbol} color out of range"
            assert len(record.bond_radii) == 3
            assert all(radius >= 0.0 for radius in record.bond_radii)

    def test_only_beryllium_and_boron_are_exceptions(self, registry):
        exceptions = {symbol for symbol, record in registry.items() if record.is_geometry_exception}
        assert exceptions == {'Be', 'B'}

    def test_reload_is_idempotent(self, sample_data_file):
        first = load_elements(sample_data_file)
        second = load_elements(sample_data_file)
        assert first == second
        assert first is not second

    def test_dataframe_listing(self, registry):
        df = registry.to_dataframe()
        assert len(df) == len(registry)
        assert df.loc['Yb', 'valence_electron_count'] == 16
        assert df.loc['He', 'van_der_waals_radius'] == pytest.approx(140.0)
