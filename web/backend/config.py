#!/usr/bin/env python3
"""
Configuration for the Talent Match web application.

Shares config.yaml and the DATABASE_URL override with the command line, and
adds the web server section on top.
"""

import os
from pathlib import Path
from functools import lru_cache
from typing import Dict, Any
from pydantic import BaseModel, Field

from core.config_loader import DatabaseConfig, MatchingConfig, apply_env_overrides, read_config_file


class WebConfig(BaseModel):
    """Web server configuration."""
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)


class WebAppConfig(BaseModel):
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    web: WebConfig = Field(default_factory=WebConfig)
    matching: MatchingConfig = Field(default_factory=MatchingConfig)


def _apply_web_overrides(config_dict: Dict[str, Any]) -> Dict[str, Any]:
    web = config_dict.get('web') or {}
    if 'WEB_HOST' in os.environ:
        web['host'] = os.environ['WEB_HOST']
    if 'WEB_PORT' in os.environ:
        web['port'] = int(os.environ['WEB_PORT'])
    if web:
        config_dict['web'] = web
    return config_dict


@lru_cache()
def get_config() -> WebAppConfig:
    """
    Load config.yaml from the project root, apply environment overrides.

    Cached for the life of the process.
    """
    raw = read_config_file(str(get_project_root() / 'config.yaml'))
    raw = _apply_web_overrides(apply_env_overrides(raw))
    return WebAppConfig(**raw)


def get_project_root() -> Path:
    return Path(__file__).parent.parent.parent
