from __future__ import annotations

import os
from typing import Literal, Optional

import yaml
from pydantic import BaseModel


class KmsConfig(BaseModel):
    """Key-management backend settings."""

    backend: Literal["inmemory", "gcp"] = "inmemory"


class SecretManagerConfig(BaseModel):
    """Secret storage backend settings."""

    backend: Literal["inmemory", "gcp"] = "inmemory"


class ChewieConfig(BaseModel):
    """Top-level configuration model."""

    kms: KmsConfig = KmsConfig()
    secret_manager: SecretManagerConfig = SecretManagerConfig()


def load_config(path: Optional[str] = None) -> ChewieConfig:
    """Load configuration from YAML file.

    Args:
        path: Optional path to config file. Falls back to CHEWIE_CONFIG env
            variable or 'chewie.yaml' in the current directory.
    """

    config_path = path or os.getenv("CHEWIE_CONFIG", "chewie.yaml")
    if os.path.exists(config_path):
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
        return ChewieConfig(**data)
    return ChewieConfig()
