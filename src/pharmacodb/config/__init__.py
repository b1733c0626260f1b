"""
Configuration for the PharmacoDB API.
"""
from .settings import PharmacoDBSettings
from .loader import load_yaml_config, load_settings_from_yaml

__all__ = [
    'PharmacoDBSettings',
    'load_yaml_config',
    'load_settings_from_yaml',
]
