"""Centralized configuration and resource resolution for plotparse.

This module exposes :func:`get_settings` returning the canonical locations of
the lexicon files the extractor can be pointed at (society dictionary, alias
table) and of the structured event log. Paths can be customized via
environment variables or by pointing ``PLOTPARSE_CONFIG_FILE`` to a TOML/YAML
document.
"""
from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

__all__ = ["ResourcePaths", "get_settings", "reset_settings"]

_PROJECT_ROOT = Path(__file__).resolve().parents[2]
_CONFIG_CACHE: Optional["ResourcePaths"] = None
_CONFIG_SOURCE: Optional[Path] = None


@dataclass(frozen=True)
class ResourcePaths:
    """Resolved filesystem locations for project resources."""

    project_root: Path
    resources_dir: Path
    lexicon_dir: Path
    society_dictionary: Path
    alias_table: Path
    log_path: Optional[Path]

    def as_dict(self) -> Dict[str, str]:
        """Expose the resolved paths as plain strings (useful for logging)."""

        return {
            "project_root": str(self.project_root),
            "resources_dir": str(self.resources_dir),
            "lexicon_dir": str(self.lexicon_dir),
            "society_dictionary": str(self.society_dictionary),
            "alias_table": str(self.alias_table),
            "log_path": str(self.log_path) if self.log_path is not None else "",
        }


def _normalize_path(value: Optional[str | Path], *, base: Optional[Path]) -> Optional[Path]:
    if value is None or value == "":
        return None
    candidate = Path(value).expanduser()
    if not candidate.is_absolute():
        if base is not None:
            candidate = (base / candidate).expanduser()
        if not candidate.is_absolute():
            candidate = (_PROJECT_ROOT / candidate).expanduser()
    return candidate.resolve()


def _load_config_file(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file '{path}' does not exist")
    suffix = path.suffix.lower()
    if suffix == ".toml":
        with path.open("rb") as handle:
            return tomllib.load(handle)
    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle)
            return loaded or {}
    raise ValueError(f"Unsupported config file format: '{suffix}'")


def _coalesce_mapping(source: Mapping[str, Any] | None) -> Mapping[str, Any]:
    if not isinstance(source, Mapping):
        return {}
    return source


def _build_paths(config_file: Optional[Path]) -> ResourcePaths:
    config_data: Mapping[str, Any] = {}
    config_dir: Optional[Path] = None
    if config_file is not None:
        config_file = _normalize_path(config_file, base=_PROJECT_ROOT)
        if config_file is not None:
            config_data = _load_config_file(config_file)
            config_dir = config_file.parent

    paths_section = _coalesce_mapping(config_data.get("paths"))
    lexicon_section = _coalesce_mapping(paths_section.get("lexicon"))

    env = os.environ

    resources_dir = _normalize_path(
        env.get("PLOTPARSE_RESOURCES_DIR") or paths_section.get("resources"),
        base=config_dir,
    ) or (_PROJECT_ROOT / "resources").resolve()

    lexicon_dir = _normalize_path(
        env.get("PLOTPARSE_LEXICON_DIR") or lexicon_section.get("dir"),
        base=config_dir,
    ) or (resources_dir / "lexicon").resolve()

    society_dictionary = _normalize_path(
        env.get("PLOTPARSE_SOCIETIES_PATH") or lexicon_section.get("societies"),
        base=config_dir,
    ) or (lexicon_dir / "societies.txt").resolve()

    alias_table = _normalize_path(
        env.get("PLOTPARSE_ALIASES_PATH") or lexicon_section.get("aliases"),
        base=config_dir,
    ) or (lexicon_dir / "aliases.json").resolve()

    log_path = _normalize_path(
        env.get("PLOTPARSE_LOG_PATH") or paths_section.get("log"),
        base=config_dir,
    )

    return ResourcePaths(
        project_root=_PROJECT_ROOT.resolve(),
        resources_dir=resources_dir,
        lexicon_dir=lexicon_dir,
        society_dictionary=society_dictionary,
        alias_table=alias_table,
        log_path=log_path,
    )


def get_settings(*, refresh: bool = False, config_file: str | Path | None = None) -> ResourcePaths:
    """Return the cached :class:`ResourcePaths` configuration.

    Parameters
    ----------
    refresh:
        When ``True`` the cached configuration is discarded and recomputed.
    config_file:
        Optional explicit path to the configuration document. When provided the
        returned instance is not cached globally, allowing callers (e.g. tests)
        to override settings temporarily.
    """

    global _CONFIG_CACHE, _CONFIG_SOURCE

    explicit_path = Path(config_file).expanduser() if config_file is not None else None

    if explicit_path is not None:
        return _build_paths(explicit_path)

    env_path = os.getenv("PLOTPARSE_CONFIG_FILE")
    source_path = Path(env_path).expanduser() if env_path else None

    if refresh or _CONFIG_CACHE is None or _CONFIG_SOURCE != source_path:
        _CONFIG_CACHE = _build_paths(source_path)
        _CONFIG_SOURCE = source_path

    return _CONFIG_CACHE


def reset_settings() -> None:
    """Clear the cached configuration (mainly useful for tests)."""

    global _CONFIG_CACHE, _CONFIG_SOURCE
    _CONFIG_CACHE = None
    _CONFIG_SOURCE = None
