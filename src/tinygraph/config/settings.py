"""TinyGraphSettings — the single configuration object.

Sources, highest priority first: explicit keyword overrides, ``TINYGRAPH_*``
environment variables (``__`` separates nested sections), the nearest
``tinygraph.toml``, and the defaults baked into :mod:`tinygraph.config.models`.
"""

from __future__ import annotations

import os
import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, TomlConfigSettingsSource

from tinygraph.config.models import GraphDefaultsConfig, LoggingConfig, PageRankConfig

CONFIG_FILENAME = "tinygraph.toml"
CONFIG_ENV_VAR = "TINYGRAPH_CONFIG"

# File picked by load() for the construction in progress.
_toml_file: ContextVar[Path | None] = ContextVar("_toml_file", default=None)


class ConfigError(ValueError):
    """Raised when a tinygraph.toml cannot be parsed."""


def find_config(start: Path | None = None) -> Path | None:
    """Locate the config file for *start* (default: cwd).

    ``TINYGRAPH_CONFIG`` wins when set; it names the file directly and
    yields None if that file is missing. Otherwise the nearest
    ``tinygraph.toml`` in *start* or any parent directory is returned.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


class TinyGraphSettings(BaseSettings):
    """Frozen settings for tinygraph.

    Attributes:
        config_path: The TOML file the settings were read from, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TINYGRAPH_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    graph: GraphDefaultsConfig = Field(default_factory=GraphDefaultsConfig)
    pagerank: PageRankConfig = Field(default_factory=PageRankConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_file = _toml_file.get()
        if toml_file is None:
            return (init_settings, env_settings)
        try:
            toml_source = TomlConfigSettingsSource(settings_cls, toml_file=toml_file)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_file}: {exc}"
            raise ConfigError(msg) from exc
        return (init_settings, env_settings, toml_source)

    @classmethod
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        start: Path | None = None,
        **overrides: Any,
    ) -> TinyGraphSettings:
        """Build settings, discovering ``tinygraph.toml`` unless *config_path* is given.

        An explicit *config_path* that does not exist is ignored.
        """
        if config_path:
            toml_file = Path(config_path) if Path(config_path).is_file() else None
        else:
            toml_file = find_config(start)

        token = _toml_file.set(toml_file)
        try:
            return cls(config_path=toml_file, **overrides)
        finally:
            _toml_file.reset(token)
