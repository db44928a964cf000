from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import os
import yaml

# Source fields the flattener reads; REST Countries accepts at most 10 per request.
DEFAULT_FIELDS = ("name", "region", "capital", "languages", "population", "area", "flags")


@dataclass(frozen=True)
class SourceConfig:
    url: str
    timeout_seconds: float
    fields: tuple[str, ...] = DEFAULT_FIELDS
    local_path: str | None = None


def _project_root() -> Path:
    # Resolve from this file: .../src/utils/config.py -> project root is 3 parents up.
    return Path(__file__).resolve().parents[2]


def load_source_config(path: str | None = None) -> SourceConfig:
    """
    Load the country source config from YAML.

    Precedence:
    - explicit `path`
    - env `COUNTRY_TABLE_CONFIG`
    - project default `config/countries.yaml`

    A relative `source.local_path` is resolved against the project root.
    """
    cfg_path = Path(path or os.getenv("COUNTRY_TABLE_CONFIG") or (_project_root() / "config" / "countries.yaml"))
    cfg = load_yaml(cfg_path)
    src = cfg.get("source") or {}

    url = src.get("url")
    timeout_seconds = src.get("timeout_seconds")
    fields = src.get("fields") or DEFAULT_FIELDS
    local_path = src.get("local_path")

    missing: list[str] = []
    if not url:
        missing.append("source.url")
    if timeout_seconds is None:
        missing.append("source.timeout_seconds")
    if missing:
        raise ValueError(f"Missing {', '.join(missing)} in {cfg_path}")

    if local_path:
        p = Path(str(local_path))
        local_path = str(p if p.is_absolute() else _project_root() / p)

    return SourceConfig(
        url=str(url),
        timeout_seconds=float(timeout_seconds),
        fields=tuple(str(f) for f in fields),
        local_path=local_path or None,
    )


def load_yaml(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    return yaml.safe_load(p.read_text(encoding="utf-8")) or {}
