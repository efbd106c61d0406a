"""Модели данных для изображений.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from PIL import Image


@dataclass(frozen=True)
class ImageInfo:
    """Сведения из заголовка файла, без декодирования растра.

    Fields:
        width: Ширина, px.
        height: Высота, px.
        format: Формат, который сообщил декодер, например "PNG" или "JPEG".
    """
    width: int
    height: int
    format: Optional[str]


@dataclass(frozen=True)
class ImageData:
    """Неизменяемая модель декодированного изображения.

    Fields:
        pil_image: Загруженное изображение PIL, всегда в режиме "RGBA".
        width: Ширина, px.
        height: Высота, px.
        format: Формат, который сообщил декодер.
    """
    pil_image: Image.Image
    width: int
    height: int
    format: Optional[str]
