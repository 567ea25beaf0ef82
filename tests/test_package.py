"""Basic tests for the binit package."""


def test_import_binit():
    """Test that binit can be imported."""
    import binit

    assert hasattr(binit, "__version__")
    assert binit.__version__ == "1.0.0"


def test_version_format():
    """Test that version follows semver format."""
    import binit

    parts = binit.__version__.split(".")
    assert len(parts) == 3
    assert all(p.isdigit() for p in parts)


def test_public_api_exports():
    """Test that the names listed in __all__ exist."""
    import binit

    for name in binit.__all__:
        assert hasattr(binit, name), name
