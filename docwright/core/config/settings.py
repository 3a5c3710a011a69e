"""
Settings
========

• Reads optional YAML settings from   <cwd>/docwright.yaml
• Environment variables override the file:
      DOCWRIGHT_OUTPUT_DIR
      DOCWRIGHT_LOG_LEVEL
• Explicit keyword arguments override both.

    output_dir:        ./output
    categories:        [requirements, designs, output]
    fallback_category: output
    log_level:         INFO
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from docwright.core.exceptions              import ConfigError
from docwright.core.models.enums            import Category
from docwright.core.services.document_store import DEFAULT_CATEGORIES, DocumentStore

log = logging.getLogger(__name__)

ENV_OUTPUT_DIR = "DOCWRIGHT_OUTPUT_DIR"
ENV_LOG_LEVEL  = "DOCWRIGHT_LOG_LEVEL"


class Settings:
    # --------------------------------------------------------------------- init
    def __init__(
        self,
        *,
        output_dir: str | Path = "output",
        categories: Tuple[str, ...] = DEFAULT_CATEGORIES,
        fallback_category: str = Category.OUTPUT.value,
        log_level: str = "INFO",
    ) -> None:
        if not isinstance(categories, (list, tuple)) or not all(
            isinstance(c, str) and c.strip() for c in categories
        ):
            raise ConfigError(f"categories must be a list of names, got {categories!r}")

        self.output_dir = Path(output_dir)
        self.categories = tuple(categories)
        self.fallback_category = fallback_category
        self.log_level = str(log_level).upper()

        if not self.categories:
            raise ConfigError("at least one category is required")
        if self.fallback_category not in self.categories:
            raise ConfigError(
                f"fallback_category {self.fallback_category!r} is not one of {list(self.categories)}"
            )
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ConfigError(f"unknown log_level {log_level!r}")

    # ----------------------------------------------------------------- public API
    @classmethod
    def load(cls, conf_path: str | Path = "docwright.yaml", **overrides: Any) -> "Settings":
        """File → environment → keyword overrides, later wins."""
        values: Dict[str, Any] = cls._load_file(Path.cwd() / conf_path)

        if env_dir := os.getenv(ENV_OUTPUT_DIR):
            values["output_dir"] = env_dir
        if env_level := os.getenv(ENV_LOG_LEVEL):
            values["log_level"] = env_level

        values.update({k: v for k, v in overrides.items() if v is not None})

        unknown = set(values) - {"output_dir", "categories", "fallback_category", "log_level"}
        if unknown:
            raise ConfigError(f"unknown settings: {sorted(unknown)}")
        return cls(**values)

    def document_store(self) -> DocumentStore:
        return DocumentStore(
            self.output_dir,
            categories=self.categories,
            fallback_category=self.fallback_category,
        )

    # ---------------------------------------------------------------- helpers
    @staticmethod
    def _load_file(path: Path) -> Dict[str, Any]:
        if not path.exists():
            return {}
        try:
            with open(path, "r", encoding="utf-8") as fp:
                data: Optional[Any] = yaml.safe_load(fp)
        except yaml.YAMLError as exc:
            raise ConfigError(f"could not parse {path}: {exc}") from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"{path} must contain a mapping, got {type(data).__name__}")
        log.debug("Loaded settings from %s", path)
        return data

    # ---------------------------------------------------------------- repr
    def __repr__(self) -> str:
        return f"<Settings {self.output_dir.as_posix()} fallback={self.fallback_category}>"
