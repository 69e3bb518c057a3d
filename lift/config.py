"""Configuration management using pydantic-settings."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

# Directories and files containing any of these substrings are never scanned
DEFAULT_EXCLUDE_PATTERNS: tuple[str, ...] = (
    "node_modules",
    ".git",
    "dist",
    "build",
    "out",
    "coverage",
    ".next",
    ".nuxt",
    ".output",
    ".vercel",
    ".netlify",
)


class Settings(BaseSettings):
    """Run options, layered from CLI arguments, environment, .env and lift.yaml."""

    model_config = SettingsConfigDict(
        env_prefix="LIFT_",
        env_file=".env",
        env_file_encoding="utf-8",
        yaml_file="lift.yaml",
        extra="ignore",
        frozen=True,
    )

    # Paths
    input_path: Path = Path(".")
    output_path: Path = Path(".")

    # Filtering
    include_globs: tuple[str, ...] = ()
    exclude_globs: tuple[str, ...] = ()

    # Extra exclusion substrings - stored as comma-separated string in .env
    extra_excludes: str = ""

    # Behaviour
    generate_index: bool = False
    silent: bool = False

    @property
    def exclude_patterns(self) -> tuple[str, ...]:
        """Default deny-list plus any configured extras."""
        extras = tuple(p.strip() for p in self.extra_excludes.split(",") if p.strip())
        return DEFAULT_EXCLUDE_PATTERNS + extras

    @field_validator("include_globs", "exclude_globs", mode="before")
    @classmethod
    def normalize_globs(cls, v: object) -> object:
        """Accept a single pattern and drop blank entries."""
        if v is None:
            return ()
        if isinstance(v, str):
            v = [v]
        if isinstance(v, (list, tuple)):
            return tuple(str(p).strip() for p in v if str(p).strip())
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
        )


def get_settings(**overrides) -> Settings:
    """Load settings, letting explicit keyword arguments win over every other source."""
    return Settings(**overrides)
