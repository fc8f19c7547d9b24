"""
Service layer: owns long-lived resources (the loaded dataset) on behalf
of the UI adapters.
"""

from .dataset_service import DatasetService, LoadStatus

__all__ = ["DatasetService", "LoadStatus"]
