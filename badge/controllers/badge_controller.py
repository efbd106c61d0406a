"""Контроллер бейджа: оркестрация сервисов для проверки и форматирования.

SOLID:
- SRP: класс только задаёт порядок шагов; логика изображений — в сервисах.
- DIP: сервисы передаются как поля и подменяются в тестах.
Clean Code:
- Первый же нарушенный шаг прерывает выполнение своей ошибкой.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

from badge.errors import BadgeError, NotHappyError
from badge.models.badge_model import DEFAULT_MOOD_RULES, MoodRules, ValidationOutcome
from badge.services.image_service import ImageService
from badge.services.mask_service import MaskService
from badge.services.mood_service import MoodService
from badge.services.validation_service import ValidationService

logger = logging.getLogger(__name__)

OUTPUT_PATH = "output.png"

CHECK_SUCCESS_MESSAGE = "Image is valid, circular, and conveys a happy feeling."
FORMAT_SUCCESS_MESSAGE = "Image is now circular in the output.png file!"


@dataclass
class BadgeController:
    """Связывает шаги проверки и форматирования бейджа.

    Ответственности:
    - Проверка (`check`): формат -> размеры -> круг -> настроение.
    - Форматирование (`format`): маска -> destination-in -> PNG в `output_path`.
    - Превращение классифицированных ошибок в `ValidationOutcome` (`run`).
    """
    mood_rules: MoodRules = DEFAULT_MOOD_RULES
    output_path: Union[str, Path] = OUTPUT_PATH

    _image_service: ImageService = field(default_factory=ImageService)
    _mask_service: MaskService = field(default_factory=MaskService)

    def __post_init__(self) -> None:
        self._validation_service = ValidationService(self._mask_service)
        self._mood_service = MoodService(self.mood_rules)

    def check(self, file_path: Union[str, Path]) -> str:
        """Проверяет файл, не изменяя его и ничего не записывая.

        Returns:
            Сообщение об успехе.

        Raises:
            BadgeError: подкласс, соответствующий первому нарушенному правилу.
        """
        # формат и размеры берутся из заголовка до декодирования растра
        info = self._image_service.read_info(file_path)
        self._validation_service.check_format(info.format)
        self._validation_service.check_dimensions(info.width, info.height)

        image_data = self._image_service.load_image(file_path)

        rgba = self._image_service.to_rgba_array(image_data.pil_image)
        self._validation_service.check_circular(rgba, image_data.width, image_data.height)

        dominant = self._image_service.dominant_color(image_data.pil_image)
        if not self._mood_service.is_happy_rgb(dominant):
            raise NotHappyError()

        return CHECK_SUCCESS_MESSAGE

    def format(self, file_path: Union[str, Path]) -> str:
        """Вырезает круг и пишет PNG; исходный файл не трогается.

        Файл `output_path` появляется только после успешного кодирования.
        """
        image_data = self._image_service.load_image(file_path)
        mask_png = self._mask_service.create_circular_mask(image_data.width, image_data.height, raw=False)
        badge = self._image_service.composite_dest_in(image_data.pil_image, mask_png)
        written = self._image_service.save_png(badge, self.output_path)
        logger.debug("Badge written to %s", written)
        return FORMAT_SUCCESS_MESSAGE

    def run(self, file_path: Union[str, Path], check: bool = False) -> ValidationOutcome:
        """Один запуск инструмента: ошибки проверки превращаются в результат."""
        try:
            message = self.check(file_path) if check else self.format(file_path)
        except BadgeError as exc:
            logger.debug("Run failed: %s", exc.reason.value)
            return ValidationOutcome.failure(exc.reason, exc.message)
        return ValidationOutcome.success(message)
