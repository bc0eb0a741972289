from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .exceptions import ConfigError

logger = logging.getLogger(__name__)


def _as_int(value: Any) -> int:
    # bools and fractional floats are not sizes
    if isinstance(value, bool):
        raise ValueError(f"expected an integer, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"expected an integer, got {value!r}")
    return int(value)


def _as_seed(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, str):
        v = value.strip().lower()
        if v in {"", "none", "null", "random"}:
            return None
        return int(v, 0)
    return _as_int(value)


_ENV_MAPPING = {
    "DELVE_WIDTH": ("width", int),
    "DELVE_HEIGHT": ("height", int),
    "DELVE_MAX_ROOMS": ("max_rooms", int),
    "DELVE_ROOM_MIN_SIZE": ("room_min_size", int),
    "DELVE_ROOM_MAX_SIZE": ("room_max_size", int),
    "DELVE_SEED": ("seed", _as_seed),
}


@dataclass
class GenerationSettings:
    """Map size and room parameters for one generation run.

    Sources, lowest to highest precedence:
    - packaged defaults (delve/data/default_generation.yaml)
    - a YAML file, keys at top level or under ``generation:``
    - environment variables (prefix: DELVE_)

    A ``seed`` of None means a fresh, non-reproducible layout every run.
    """

    width: int = 80
    height: int = 45
    max_rooms: int = 30
    room_min_size: int = 6
    room_max_size: int = 10
    seed: Optional[int] = None

    def validate(self) -> None:
        """Raise ConfigError unless rooms of every allowed size fit the grid."""
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"Map size must be positive, got {self.width}x{self.height}")
        if self.max_rooms < 0:
            raise ConfigError(f"max_rooms must be >= 0, got {self.max_rooms}")
        if self.room_min_size <= 0:
            raise ConfigError(f"room_min_size must be positive, got {self.room_min_size}")
        if self.room_min_size > self.room_max_size:
            raise ConfigError(
                f"room_min_size ({self.room_min_size}) exceeds room_max_size ({self.room_max_size})"
            )
        if self.room_max_size >= self.width or self.room_max_size >= self.height:
            raise ConfigError(
                f"room_max_size {self.room_max_size} does not fit a {self.width}x{self.height} map"
            )

    def as_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)

    # ------------------------ Loading & Overrides ------------------------
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GenerationSettings":
        allowed = {f.name for f in dataclasses.fields(cls)}
        unknown = set(data) - allowed
        if unknown:
            logger.warning("Ignoring unknown generation settings: %s", sorted(unknown))
        try:
            filtered = {k: (_as_seed(v) if k == "seed" else _as_int(v)) for k, v in data.items() if k in allowed}
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Invalid generation setting: {exc}") from exc
        obj = cls(**filtered)
        obj.validate()
        return obj

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
        env = env if env is not None else os.environ
        out: Dict[str, Any] = {}
        for env_key, (field_name, caster) in _ENV_MAPPING.items():
            if env_key in env and env[env_key] != "":
                try:
                    out[field_name] = caster(env[env_key])
                except ValueError as exc:
                    raise ConfigError(f"Invalid env for {env_key}={env[env_key]!r}: {exc}") from exc
        return out

    @staticmethod
    def _section(doc: Any, origin: str) -> Dict[str, Any]:
        if doc is None:
            return {}
        if not isinstance(doc, dict):
            raise ConfigError(f"Expected a mapping in {origin}, got {type(doc).__name__}")
        if isinstance(doc.get("generation"), dict):
            return dict(doc["generation"])
        return {k: v for k, v in doc.items() if not isinstance(v, dict)}

    @classmethod
    def from_yaml_file(cls, path: Path) -> Dict[str, Any]:
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")
        try:
            with path.open("r", encoding="utf-8") as f:
                doc = yaml.safe_load(f)
        except OSError as exc:
            raise ConfigError(f"Cannot read {path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigError(f"Failed to parse {path}: {exc}") from exc
        logger.debug("Loaded generation settings from %s", path)
        return cls._section(doc, str(path))

    @classmethod
    def packaged_defaults(cls) -> Dict[str, Any]:
        try:
            text = resources.files("delve.data").joinpath("default_generation.yaml").read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.warning("Default generation settings not found; falling back to dataclass defaults.")
            return cls().as_dict()
        return cls._section(yaml.safe_load(text), "default_generation.yaml")

    @classmethod
    def load(
        cls,
        path: Optional[Path | str] = None,
        env: Optional[Mapping[str, str]] = None,
    ) -> "GenerationSettings":
        # Order of precedence (lowest to highest): defaults < file < env
        data: Dict[str, Any] = cls.packaged_defaults()
        if path is not None:
            data.update(cls.from_yaml_file(Path(path).expanduser()))
        data.update(cls.from_env(env))
        return cls.from_dict(data)


__all__ = ["GenerationSettings"]
