"""
Loading and validation of LinkScout settings.
Pydantic describes the schema; YAML and JSON files are supported.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from link_scout import __version__


class CrawlConfig(BaseModel):
    """Settings for one LinkScout run."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    url: Optional[str] = Field(None, description="Seed URL, or path to a file with one URL per line.")
    cookie: Optional[str] = Field(None, description="Raw Cookie header value.")
    authorization: Optional[str] = Field(None, description="Raw Authorization header value.")
    recursive: bool = Field(False, description="Crawl same-host links found on the seed page.")
    output: Optional[Path] = Field(None, description="Result file; .json selects JSON output.")
    user_agent: str = Field(f"LinkScout/{__version__}", min_length=1, description="User-Agent header.")
    timeout: Optional[float] = Field(None, gt=0, description="Per-request timeout in seconds.")
    concurrency: int = Field(20, ge=1, description="Maximum number of pages fetched at once.")

    @field_validator("url", "cookie", "authorization", mode="before")
    def _blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    def merged(self, **overrides: Any) -> CrawlConfig:
        """Return a copy with every override that is not ``None`` applied and validated."""
        data = self.model_dump()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return CrawlConfig(**data)


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> CrawlConfig:
    """
    Read a YAML or JSON file and return a validated CrawlConfig.
    Without a path the defaults are returned.
    """
    if path is None:
        return CrawlConfig()

    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return CrawlConfig(**data)


__all__ = ["CrawlConfig", "ValidationError", "load_config"]
