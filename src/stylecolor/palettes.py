# System
import logging
import pathlib as pl

# Third Party
import pydantic as pc
import tomlkit as tk
from tomlkit.exceptions import TOMLKitError

# Internal
from .color import StyleColor
from .settings import StyleColorSettings

ASSETS_DIRECTORY = pl.Path(__file__).parent / "assets"


class Palette(pc.BaseModel):
    """A named set of colors."""

    name: str = pc.Field(description="Palette name, the TOML file stem")
    description: str = pc.Field(description="Description of the palette")
    colors: dict[str, StyleColor] = pc.Field(
        min_length=1,
        description="Colors by name, as rgba strings or rgba expression arrays",
    )

    def to_toml(self) -> str:
        """Serialize to TOML with colors in rgba notation."""
        doc = tk.document()
        doc["description"] = self.description

        colors_table = tk.table()
        for key, color in self.colors.items():
            colors_table[key] = color.rgba_string
        doc["colors"] = colors_table

        return tk.dumps(doc)

    @classmethod
    def from_toml(cls, name: str, toml_content: str) -> "Palette":
        """Deserialize from TOML."""
        data = tk.loads(toml_content).unwrap()
        return cls.model_validate({**data, "name": name})

    @classmethod
    def from_file(cls, path: pl.Path) -> "Palette":
        """Load from a TOML file named after the palette."""
        with path.open("rt", encoding="utf-8") as fp:
            return cls.from_toml(path.stem, fp.read())

    def to_file(self, path: pl.Path):
        """Save to TOML file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("wt", encoding="utf-8") as fp:
            fp.write(self.to_toml())


def palette_files(settings: StyleColorSettings | None = None) -> dict[str, pl.Path]:
    """
    Find palette files, bundled ones first.

    A palette in a configured directory replaces a bundled palette of the
    same name.
    """
    if settings is None:
        settings = StyleColorSettings()

    files = {}
    for directory in [ASSETS_DIRECTORY, *settings.palette_directories]:
        if not directory.is_dir():
            logging.warning(f"Palette directory {directory} does not exist.")
            continue
        logging.info(f"Searching {directory} for palettes.")
        for path in sorted(directory.glob("*.toml")):
            files[path.stem] = path
    return files


def load_palette(name: str, settings: StyleColorSettings | None = None) -> Palette:
    """Load a palette by name."""
    files = palette_files(settings)

    if name not in files:
        raise KeyError(
            f"Palette '{name}' not found. Available palettes: {sorted(files)}"
        )

    try:
        return Palette.from_file(files[name])
    except (pc.ValidationError, TOMLKitError, UnicodeDecodeError) as e:
        raise ValueError(f"Invalid palette file '{name}.toml': {e}") from e


def list_palettes(settings: StyleColorSettings | None = None) -> dict[str, str]:
    """
    List all available palettes.

    Returns:
        Dictionary mapping palette names to descriptions
    """
    palettes = {}
    for name, path in palette_files(settings).items():
        try:
            with path.open("rt", encoding="utf-8") as fp:
                palettes[name] = str(tk.load(fp)["description"])
        except (KeyError, OSError, TOMLKitError, UnicodeDecodeError) as e:
            # Skip files that don't have the expected structure
            logging.warning(f"Skipping palette file {path}: {e}")
            continue

    return palettes
