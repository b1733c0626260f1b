"""
Configuration loading utilities.
"""
import os
import yaml
from dataclasses import fields
from typing import Dict, Any
from .settings import PharmacoDBSettings


def load_yaml_config(path: str) -> Dict[str, Any]:
    """Load configuration from a YAML file."""
    if not os.path.exists(path):
        return {}

    with open(path, 'r') as f:
        return yaml.safe_load(f) or {}


def load_settings_from_yaml(path: str) -> PharmacoDBSettings:
    """Load PharmacoDBSettings from a YAML file.

    Keys that are not settings fields are ignored; missing keys keep their defaults.
    """
    data = load_yaml_config(path)
    valid_keys = {f.name for f in fields(PharmacoDBSettings)}
    filtered_data = {k: v for k, v in data.items() if k in valid_keys}
    return PharmacoDBSettings(**filtered_data)
