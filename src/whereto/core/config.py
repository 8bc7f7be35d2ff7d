"""Configuration helpers for filesystem layout and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class PathsConfig:
    root: Path
    data_dir: Path

    @staticmethod
    def from_root(root: Path) -> "PathsConfig":
        root = root.resolve()
        return PathsConfig(root=root, data_dir=root / "data")


@dataclass(frozen=True)
class Settings:
    data_file: Path
    distance_min: int = 200
    distance_max: int = 500
    symmetric_distances: bool = False
    coordinates_file: Optional[Path] = None


def resolve_package_root() -> Path:
    return Path(__file__).resolve().parent.parent


def load_paths() -> PathsConfig:
    return PathsConfig.from_root(resolve_package_root())


def _env_flag(name: str) -> bool:
    raw = os.getenv(name, "").strip().lower()
    return raw in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _env_path(name: str) -> Optional[Path]:
    raw = os.getenv(name, "").strip()
    return Path(raw) if raw else None


def load_settings(data_file: Optional[Path] = None, coordinates_file: Optional[Path] = None) -> Settings:
    if data_file is None:
        data_file = _env_path("WHERETO_DATA_FILE") or load_paths().data_dir / "flights.json"
    if coordinates_file is None:
        coordinates_file = _env_path("WHERETO_COORDINATES_FILE")
    distance_min = _env_int("WHERETO_DISTANCE_MIN", 200)
    distance_max = _env_int("WHERETO_DISTANCE_MAX", 500)
    if distance_min < 0 or distance_max < distance_min:
        raise ValueError(f"invalid distance range [{distance_min}, {distance_max}]")
    return Settings(
        data_file=Path(data_file),
        distance_min=distance_min,
        distance_max=distance_max,
        symmetric_distances=_env_flag("WHERETO_SYMMETRIC_DISTANCES"),
        coordinates_file=Path(coordinates_file) if coordinates_file else None,
    )
