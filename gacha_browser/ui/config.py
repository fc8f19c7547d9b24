from dataclasses import dataclass

from gacha_browser.config.model import GlobalConfig
from gacha_browser.services.dataset_service import DatasetService


@dataclass
class AppConfig:
    """
    Shared state for the Dash app: parsed config and the dataset service.
    Passed into layout + callback registration functions instead of using
    module-level globals.
    """
    global_config: GlobalConfig
    dataset_service: DatasetService

    @property
    def location_label(self) -> str:
        return self.global_config.location_label
