"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, tinygraph.toml only contains
overrides. An empty file (or no file at all) yields the defaults below.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class GraphDefaultsConfig(BaseModel):
    """[graph] section — flags applied to graphs built from settings."""

    model_config = {"frozen": True}

    directed: bool = True
    weighted: bool = False


class PageRankConfig(BaseModel):
    """[pagerank] section."""

    model_config = {"frozen": True}

    alpha: float = Field(default=0.85, gt=0.0, lt=1.0)
    max_iter: int = Field(default=100, gt=0)
    tol: float = Field(default=1.0e-6, gt=0.0)


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True}

    verbose: bool = False
    log_json: bool = False
