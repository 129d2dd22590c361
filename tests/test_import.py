"""Verify package imports work correctly."""


def test_import_stackdown() -> None:
    """Test that stackdown can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import stackdown

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert stackdown.__version__ == expected


def test_version_format() -> None:
    from stackdown import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_public_api_exported() -> None:
    import stackdown

    for name in stackdown.__all__:
        assert hasattr(stackdown, name), name
