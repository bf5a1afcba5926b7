import logging

from images_resizer.controllers.resize_controller import ResizeController
from images_resizer.models.config_model import ResizeConfig
from images_resizer.models.errors import ResizeJobError

logger = logging.getLogger(__name__)


class ImagesResizerApp:
    def __init__(self, config: ResizeConfig) -> None:
        self._config = config
        self._controller = ResizeController()

    def run(self) -> int:
        # any failed job fails the whole run; files written so far stay on disk
        try:
            self._controller.run(self._config)
        except (ResizeJobError, OSError) as exc:
            logger.error("Error: %s", exc)
            return 1
        return 0
