"""Configuration loading for htmlfmt (.htmlfmt.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .constants import CONFIG_FILENAME, DEFAULT_INDENT_SIZE


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class PrettifyConfig:
    """Indentation settings for the pretty printer."""

    indent_size: int = DEFAULT_INDENT_SIZE
    use_tabs: bool = False


@dataclass
class MinifyConfig:
    """Settings for the minifier."""

    remove_comments: bool = True


@dataclass
class HtmlFmtConfig:
    """Represents the settings defined in .htmlfmt.yml."""

    root: Path
    prettify: PrettifyConfig = field(default_factory=PrettifyConfig)
    minify: MinifyConfig = field(default_factory=MinifyConfig)

    def with_overrides(
        self,
        *,
        indent_size: Optional[int] = None,
        use_tabs: Optional[bool] = None,
        remove_comments: Optional[bool] = None,
    ) -> "HtmlFmtConfig":
        """Return a copy with every non-``None`` override applied."""
        prettify = self.prettify
        if indent_size is not None:
            prettify = replace(prettify, indent_size=_check_indent_size(indent_size))
        if use_tabs is not None:
            prettify = replace(prettify, use_tabs=use_tabs)
        minify = self.minify
        if remove_comments is not None:
            minify = replace(minify, remove_comments=remove_comments)
        return replace(self, prettify=prettify, minify=minify)


def load_config(config_path: Path) -> HtmlFmtConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return HtmlFmtConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    prettify = PrettifyConfig()
    prettify_data = _as_dict(data.get("prettify"), "prettify")
    if "indent_size" in prettify_data:
        indent_size = _as_int(prettify_data["indent_size"])
        if indent_size is None:
            raise ConfigError("prettify.indent_size must be an integer")
        prettify.indent_size = _check_indent_size(indent_size)
    if "use_tabs" in prettify_data:
        prettify.use_tabs = _require_bool(prettify_data["use_tabs"], "prettify.use_tabs")

    minify = MinifyConfig()
    minify_data = _as_dict(data.get("minify"), "minify")
    if "remove_comments" in minify_data:
        minify.remove_comments = _require_bool(
            minify_data["remove_comments"], "minify.remove_comments"
        )

    return HtmlFmtConfig(root=root, prettify=prettify, minify=minify)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _check_indent_size(value: int) -> int:
    if value < 0:
        raise ConfigError(f"indent_size must be zero or positive, got {value}")
    return value


def _as_dict(value: Any, key: str) -> Dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{key} must be a mapping")
    return value


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _require_bool(value: Any, key: str) -> bool:
    result = _as_bool(value)
    if result is None:
        raise ConfigError(f"{key} must be a boolean")
    return result


__all__ = ["ConfigError", "HtmlFmtConfig", "MinifyConfig", "PrettifyConfig", "load_config"]
