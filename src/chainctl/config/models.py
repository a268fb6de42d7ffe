"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, chainctl.toml only contains overrides.
A fresh project needs nothing at all; ``[node] chain_name`` is the usual first entry.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

# --- chainctl.toml sections ---


class NodeConfig(BaseModel):
    """[node] section."""

    model_config = {"frozen": True}

    chain_name: str | None = None
    data_dir: Path | None = None


class BinariesConfig(BaseModel):
    """[binaries] section.

    ``location`` overrides binary discovery; when unset the locator falls
    back to ``PATH`` and then to the default install directories.
    """

    model_config = {"frozen": True}

    location: Path | None = None
    util: str = "multichain-util"
    daemon: str = "multichaind"
    cli: str = "multichain-cli"
    search_paths: list[Path] = Field(
        default_factory=lambda: [
            Path("/usr/local/bin"),
            Path("/usr/bin"),
            Path("C:/multichain"),
            Path("C:/"),
        ]
    )
