# System
import pathlib as pl

# Third Party
import pydantic as pc
import pydantic_settings as ps


class StyleColorSettings(ps.BaseSettings):
    """Runtime configuration, read from STYLECOLOR_* variables or a TOML file."""

    model_config = ps.SettingsConfigDict(env_prefix="STYLECOLOR_")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        config_file = getattr(cls, "_config_file", None)

        sources = [init_settings]

        # Add TOML config file source if config file is specified
        if config_file is not None:
            sources.append(
                ps.TomlConfigSettingsSource(settings_cls, toml_file=config_file)
            )

        sources.extend([env_settings, file_secret_settings])
        return tuple(sources)

    palette_directories: list[pl.Path] = pc.Field(
        default_factory=list,
        description="Extra directories searched for palette TOML files. "
        "Env usage: STYLECOLOR_PALETTE_DIRECTORIES='[\"./palettes\"]'",
    )

    @classmethod
    def from_config_file(
        cls, config_file: pl.Path, **values
    ) -> "StyleColorSettings":
        """Load settings with values from a TOML config file.

        Keyword arguments take precedence over the file.
        """
        cls._config_file = pl.Path(config_file)
        try:
            return cls(**values)
        finally:
            if hasattr(cls, "_config_file"):
                delattr(cls, "_config_file")
