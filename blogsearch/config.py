from __future__ import annotations

from dataclasses import asdict, dataclass, field, replace
from pathlib import Path
from typing import Any
import json
import os
import re

import yaml

from blogsearch.errors import ConfigError


@dataclass(frozen=True)
class ContentConfig:
    root: str = "docs"
    file_extensions: list[str] = field(default_factory=lambda: [".md"])
    blog_dir: str = "blog"
    resources_dir: str = "res"
    course_file: str = "course.md"
    slides_file: str = "slides.md"


@dataclass(frozen=True)
class SearchConfig:
    default_limit: int = 20
    max_limit: int = 50
    snippet_size: int = 180
    exact_match_score: int = 1000
    words_per_minute: int = 60


@dataclass(frozen=True)
class BrowseConfig:
    default_limit: int = 10
    max_limit: int = 50


@dataclass(frozen=True)
class IndexConfig:
    build_timeout_seconds: float = 30.0


@dataclass(frozen=True)
class MaintenanceConfig:
    domain_mappings: dict[str, str] = field(default_factory=dict)
    redundant_tags: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class APIConfig:
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = field(default_factory=lambda: ["*"])


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class AppConfig:
    content: ContentConfig = field(default_factory=ContentConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    browse: BrowseConfig = field(default_factory=BrowseConfig)
    index: IndexConfig = field(default_factory=IndexConfig)
    maintenance: MaintenanceConfig = field(default_factory=MaintenanceConfig)
    api: APIConfig = field(default_factory=APIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


_SECTIONS = {
    "content": ContentConfig,
    "search": SearchConfig,
    "browse": BrowseConfig,
    "index": IndexConfig,
    "maintenance": MaintenanceConfig,
    "api": APIConfig,
    "logging": LoggingConfig,
}

# ${VAR:-default} or ${VAR-default}
_env_pattern = re.compile(r"\$\{([^:}-]+):?-?([^}]*)\}")


def _expand_env(value: Any) -> Any:
    """Recursively expand env vars in strings inside dicts/lists."""
    if isinstance(value, str):
        return _env_pattern.sub(
            lambda match: os.environ.get(match.group(1), match.group(2)), value
        )
    if isinstance(value, dict):
        return {k: _expand_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_expand_env(v) for v in value]
    return value


def _coalesce(base: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in updates.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _coalesce(merged[key], value)
        else:
            merged[key] = value
    return merged


def _from_dict(data: dict[str, Any]) -> AppConfig:
    sections = {}
    for name, section_cls in _SECTIONS.items():
        section_data = data.get(name) or {}
        try:
            sections[name] = section_cls(**section_data)
        except TypeError as e:
            raise ConfigError(f"Invalid '{name}' section: {e}") from e
    return AppConfig(**sections)


def load_config(path: str | Path | None) -> AppConfig:
    """Load configuration from a YAML or JSON file.

    Values missing from the file fall back to defaults. ``None`` returns the
    default configuration.
    """
    if path is None:
        return AppConfig()

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    raw = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() in {".json"}:
            data = json.loads(raw)
        else:
            data = yaml.safe_load(raw) or {}
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot parse {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a mapping: {path}")

    # Legacy flat key
    if "content_root" in data:
        content_data = data.get("content") or {}
        content_data["root"] = data.pop("content_root")
        data["content"] = content_data

    merged = _coalesce(asdict(AppConfig()), _expand_env(data))
    return _from_dict(merged)


def load_env_overrides(config: AppConfig) -> AppConfig:
    env_root = os.getenv("BLOGSEARCH_CONTENT_ROOT")
    if env_root:
        return replace(config, content=replace(config.content, root=env_root))
    return config


def resolve_path(value: str, base: Path | None = None) -> Path:
    path = Path(value)
    if path.is_absolute():
        return path
    base = base or Path.cwd()
    return (base / path).resolve()
