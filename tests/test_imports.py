# test_imports.py
import vseprlib


def test_all_imports():
    """Test that all modules can be imported without circular dependencies."""
    from vseprlib.core.elements import ElementRecord
    from vseprlib.core.registry import ElementRegistry
    from vseprlib.parsing.io.record_tokenizer import split_record
    from vseprlib.parsing.processors.valence import derive_valence_electrons
    from vseprlib.parsing.processors.registry_builder import ElementRegistryBuilder
    from vseprlib.parsing.validation.record_validator import validate_element_record

    assert vseprlib.ElementRecord is ElementRecord
    assert vseprlib.ElementRegistry is ElementRegistry
    assert vseprlib.ElementRegistryBuilder is ElementRegistryBuilder
    assert callable(split_record)
    assert callable(derive_valence_electrons)
    assert callable(validate_element_record)


def test_public_api_exported():
    for name in vseprlib.__all__:
        assert hasattr(vseprlib, name), f"{name} listed in __all__ but not exported"
    assert isinstance(vseprlib.__version__, str)
