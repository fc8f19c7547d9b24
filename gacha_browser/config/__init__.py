"""
Config package for gacha_browser.

Responsible for:
- the GlobalConfig model
- loading global.json (load_global_config)
"""

from .model import GlobalConfig
from .loader import load_global_config

__all__ = ["GlobalConfig", "load_global_config"]
