"""Test palettes module."""

import logging
import pathlib as pl

import pytest as pt
import tomlkit as tk

from stylecolor.color import StyleColor
from stylecolor.palettes import Palette, list_palettes, load_palette, palette_files
from stylecolor.settings import StyleColorSettings

ASSETS = pl.Path(__file__).parent / "assets"


@pt.fixture
def settings():
    return StyleColorSettings(palette_directories=[ASSETS / "palettes"])


def test_list_palettes():
    """Test listing the bundled palettes."""
    palettes = list_palettes(StyleColorSettings())

    # Should contain at least the bundled palettes
    for name in ["basic", "streets"]:
        assert name in palettes

    # Values should be description strings
    for name, description in palettes.items():
        assert isinstance(name, str)
        assert isinstance(description, str)
        assert len(description) > 0


def test_load_palette_basic():
    """Test loading a bundled palette of rgba strings."""
    palette = load_palette("basic", StyleColorSettings())

    assert isinstance(palette, Palette)
    assert palette.name == "basic"
    assert palette.colors["red"] == StyleColor.from_components(255, 0, 0, 1)
    assert palette.colors["transparent"] == StyleColor.from_components(0, 0, 0, 0)


def test_load_palette_expression_arrays():
    """Test colors given as rgba expression arrays."""
    palette = load_palette("streets", StyleColorSettings())

    assert palette.colors["road-primary"] == StyleColor.from_components(
        255, 255, 255, 1
    )
    assert palette.colors["admin-boundary"].alpha == 0.6


def test_load_palette_not_found():
    """Test unknown palettes raise KeyError."""
    with pt.raises(KeyError, match="nonexistent"):
        load_palette("nonexistent", StyleColorSettings())


def test_extra_palette_directory(settings):
    """Test palettes from configured directories."""
    palettes = list_palettes(settings)
    assert palettes["coastal"] == "Sea and shoreline colors"
    assert "basic" in palettes

    palette = load_palette("coastal", settings)
    assert palette.colors["sand"] == StyleColor.from_components(240, 220, 170, 1)
    assert palette.colors["shallow-water"] == StyleColor.from_components(
        120, 190, 220, 0.75
    )


def test_list_palettes_skips_files_without_description(settings, caplog):
    """Test palettes without a description are skipped with a warning."""
    with caplog.at_level(logging.WARNING):
        palettes = list_palettes(settings)

    assert "undescribed" not in palettes
    assert "undescribed.toml" in caplog.text


def test_load_invalid_palette(settings):
    """Test palettes with invalid colors raise ValueError."""
    with pt.raises(ValueError, match="broken.toml"):
        load_palette("broken", settings)


def test_configured_palette_replaces_bundled(tmp_path):
    """Test a configured palette overrides a bundled one of the same name."""
    (tmp_path / "basic.toml").write_text(
        'description = "Replacement"\n\n[colors]\nink = "rgba(10, 10, 10, 1)"\n',
        encoding="utf-8",
    )
    settings = StyleColorSettings(palette_directories=[tmp_path])

    assert palette_files(settings)["basic"] == tmp_path / "basic.toml"
    assert list_palettes(settings)["basic"] == "Replacement"
    assert list(load_palette("basic", settings).colors) == ["ink"]


def test_missing_palette_directory(tmp_path, caplog):
    """Test missing directories are skipped with a warning."""
    missing = tmp_path / "missing"
    settings = StyleColorSettings(palette_directories=[missing])

    with caplog.at_level(logging.WARNING):
        palettes = list_palettes(settings)

    assert "basic" in palettes
    assert str(missing) in caplog.text


def test_palette_from_toml():
    """Test validating a palette from TOML data."""
    toml_path = ASSETS / "palettes" / "coastal.toml"
    with toml_path.open("rt", encoding="utf-8") as fp:
        data = tk.load(fp).unwrap()

    palette = Palette.model_validate({**data, "name": "coastal"})

    assert len(palette.colors) == 3
    assert palette.colors["deep-water"] == StyleColor.from_components(20, 60, 120, 1)


def test_palette_requires_colors():
    """Test a palette needs at least one color."""
    with pt.raises(ValueError):
        Palette(name="empty", description="Nothing", colors={})


def test_palette_toml_roundtrip():
    """Test dumping a palette to TOML and reading it back."""
    palette = load_palette("streets", StyleColorSettings())

    content = palette.to_toml()

    assert 'road-primary = "rgba(255.0, 255.0, 255.0, 1.0)"' in content
    assert Palette.from_toml("streets", content) == palette


def test_palette_file_roundtrip(tmp_path):
    """Test saving a palette to a file and loading it back."""
    palette = load_palette("basic", StyleColorSettings())
    path = tmp_path / "nested" / "mine.toml"

    palette.to_file(path)
    loaded = Palette.from_file(path)

    assert loaded.name == "mine"
    assert loaded.colors == palette.colors


def test_palette_dump_uses_rgba_strings():
    """Test colors serialize in rgba notation."""
    palette = Palette(
        name="tiny",
        description="One color",
        colors={"ink": StyleColor.from_components(1, 2, 3, 0.5)},
    )

    assert palette.model_dump()["colors"] == {"ink": "rgba(1.0, 2.0, 3.0, 0.5)"}


def test_non_utf8_palette(tmp_path, caplog):
    """Test palette files that are not UTF-8 are skipped or rejected."""
    (tmp_path / "latin.toml").write_bytes(
        b'description = "Caf\xe9"\n\n[colors]\nink = "rgba(0, 0, 0, 1)"\n'
    )
    settings = StyleColorSettings(palette_directories=[tmp_path])

    with caplog.at_level(logging.WARNING):
        palettes = list_palettes(settings)

    assert "latin" not in palettes
    assert "basic" in palettes
    assert "latin.toml" in caplog.text

    with pt.raises(ValueError, match="latin.toml"):
        load_palette("latin", settings)
