"""Export option snapshots and configuration loading (.pageassets.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .registry import DirectoryLayout

CONFIG_FILENAME = ".pageassets.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass(frozen=True)
class ExportOptions:
    """Immutable snapshot of the options that steer asset rendering.

    inline_style, inline_script, inline_media, inline_html, inline_font:
        When true, resources of that category with an ``auto`` policy are
        embedded into the page. All default to false.
    offline_resources:
        When false, resources with an online mirror URL are referenced by that
        URL instead of the exported copy. Defaults to true.
    web_style_paths:
        When true, filenames and paths are rewritten to lowercase,
        forward-slash, dash-separated form. Defaults to false.
    """

    inline_style: bool = False
    inline_script: bool = False
    inline_media: bool = False
    inline_html: bool = False
    inline_font: bool = False
    offline_resources: bool = True
    web_style_paths: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "ExportOptions":
        """Build options from a loosely-typed mapping, ignoring unknown keys."""
        if not data:
            return cls()
        values: Dict[str, bool] = {}
        for raw_key, raw_value in data.items():
            key = _OPTION_ALIASES.get(_normalise_key(str(raw_key)))
            if key is None:
                continue
            parsed = _as_bool(raw_value)
            if parsed is not None:
                values[key] = parsed
        return cls(**values)

    def with_overrides(self, **changes: bool) -> "ExportOptions":
        return replace(self, **changes)

    def as_dict(self) -> Dict[str, bool]:
        return {item.name: getattr(self, item.name) for item in fields(self)}


_OPTION_ALIASES: Dict[str, str] = {
    "inline_style": "inline_style",
    "inline_css": "inline_style",
    "inline_script": "inline_script",
    "inline_js": "inline_script",
    "inline_media": "inline_media",
    "inline_html": "inline_html",
    "inline_html_fragment": "inline_html",
    "inline_font": "inline_font",
    "inline_fonts": "inline_font",
    "offline_resources": "offline_resources",
    "web_style_paths": "web_style_paths",
}


@dataclass
class PageAssetsConfig:
    """Represents the settings defined in .pageassets.yml."""

    root: Path
    options: ExportOptions = field(default_factory=ExportOptions)
    layout: DirectoryLayout = field(default_factory=DirectoryLayout)
    source_root: Optional[Path] = None
    minify: bool = False


def load_config(config_path: Path) -> PageAssetsConfig:
    """Load configuration from disk; a missing file yields defaults."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return PageAssetsConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    options = ExportOptions.from_mapping(_as_dict(data.get("export")))

    layout = DirectoryLayout()
    directories = _as_dict(data.get("directories"))
    if directories:
        overrides = {
            name: value
            for name, value in ((key, _as_str(directories.get(key))) for key in _LAYOUT_KEYS)
            if value
        }
        layout = replace(layout, **overrides)

    source_root_str = _as_str(data.get("source_root"))
    source_root = (root / source_root_str).resolve() if source_root_str else None

    return PageAssetsConfig(
        root=root,
        options=options,
        layout=layout,
        source_root=source_root,
        minify=_as_bool(data.get("minify")) or False,
    )


_LAYOUT_KEYS = ("library", "styles", "scripts", "media", "html", "fonts")


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _normalise_key(key: str) -> str:
    return key.strip().lower().replace("-", "_")


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "on", "1"}:
            return True
        if lowered in {"false", "no", "off", "0"}:
            return False
    return None


__all__ = ["CONFIG_FILENAME", "ConfigError", "ExportOptions", "PageAssetsConfig", "load_config"]
