"""
Top-level package for the gacha drop-rate browser.

This package exposes the core architecture (domain, services, UI adapters).
Most code should import from submodules such as:
    gacha_browser.core
    gacha_browser.services
    gacha_browser.ui
"""

__all__: list[str] = []
