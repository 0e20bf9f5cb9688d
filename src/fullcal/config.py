from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional
import logging
import os

import yaml
from dotenv import find_dotenv, load_dotenv

CONFIG_ENV_VAR = "FULLCAL_CONFIG"

@dataclass(frozen=True)
class JsonConfig:
    indent: Optional[int] = None
    ensure_ascii: bool = True          # non-ASCII escaped as \uXXXX
    compact_separators: bool = True    # "," and ":" without padding

    def dumps_kwargs(self) -> Dict[str, Any]:
        kwargs: Dict[str, Any] = {
            "indent": self.indent,
            "ensure_ascii": self.ensure_ascii,
            "allow_nan": False,
        }
        if self.compact_separators:
            kwargs["separators"] = (",", ":")
        return kwargs

@dataclass(frozen=True)
class LoggingConfig:
    level: str = "WARNING"

@dataclass(frozen=True)
class AppConfig:
    json: JsonConfig = field(default_factory=JsonConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

def load_config(path: str) -> AppConfig:
    p = Path(path)
    data: Dict[str, Any] = yaml.safe_load(p.read_text(encoding="utf-8")) or {}

    json_section = data.get("json", {}) or {}
    logging_section = data.get("logging", {}) or {}

    indent = json_section.get("indent")

    return AppConfig(
        json=JsonConfig(
            indent=int(indent) if indent is not None else None,
            ensure_ascii=bool(json_section.get("ensure_ascii", True)),
            compact_separators=bool(json_section.get("compact_separators", True)),
        ),
        logging=LoggingConfig(
            level=str(logging_section.get("level", "WARNING")).upper(),
        ),
    )

def load_config_from_env() -> AppConfig:
    load_dotenv(find_dotenv(usecwd=True))
    path = os.environ.get(CONFIG_ENV_VAR)
    if not path or not Path(path).exists():
        return AppConfig()
    return load_config(path)

def configure_logging(cfg: AppConfig) -> logging.Logger:
    logger = logging.getLogger("fullcal")
    logger.setLevel(cfg.logging.level)
    return logger
