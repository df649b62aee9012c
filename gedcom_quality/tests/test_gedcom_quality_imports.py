import pytest


@pytest.mark.parametrize(
    "symbol_name",
    [
        "ComparisonEngine",
        "Dataset",
        "Entry",
        "Family",
        "GedcomDate",
        "LifeEvent",
        "Name",
        "Person",
        "PersonMatcher",
    ],
)
def test_import_symbol(symbol_name):
    """Test that each key symbol can be imported from gedcom_quality."""
    module = __import__("gedcom_quality", fromlist=[symbol_name])
    symbol = getattr(module, symbol_name, None)
    assert symbol is not None, f"{symbol_name} could not be imported"


def test_import_failure():
    """Test that importing a non-existent symbol raises ImportError or AttributeError."""
    with pytest.raises((ImportError, AttributeError)):
        from gedcom_quality import NotARealClass  # noqa: F401
