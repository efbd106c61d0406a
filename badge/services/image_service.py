"""Загрузка изображений с диска, статистика цвета, композиция и запись PNG.

Принципы:
- SRP: класс отвечает только за доступ к растру (декодирование, кодирование,
  альфа-композиция), без правил проверки бейджа.
- LSP/ISP: возвращает `ImageData` с предсказуемыми полями; интерфейс узкий и конкретный.
"""
from __future__ import annotations

import io
import logging
import warnings
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union

import numpy as np
from PIL import Image, ImageChops, UnidentifiedImageError

from badge.errors import FileMissingError, MetadataUnreadableError
from badge.models.badge_model import ColorSample
from badge.models.image_model import ImageData, ImageInfo

logger = logging.getLogger(__name__)

# корзин гистограммы на канал
DOMINANT_BINS = 16


class ImageService:
    @contextmanager
    def _open(self, file_path: Union[str, Path]) -> Iterator[Image.Image]:
        """Открывает файл лениво: читается только заголовок.

        Raises:
            FileMissingError: если путь не существует или не указывает на файл.
            MetadataUnreadableError: если файл не распознан как изображение,
                слишком велик для декодера или у него нет размеров.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise FileMissingError()

        try:
            with warnings.catch_warnings(record=True) as caught:
                warnings.simplefilter("always", Image.DecompressionBombWarning)
                source = Image.open(path)
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
            raise MetadataUnreadableError() from exc
        for warning in caught:
            logger.debug("%s: %s", path, warning.message)

        with source:
            width, height = source.size
            if not width or not height:
                raise MetadataUnreadableError()
            yield source

    def read_info(self, file_path: Union[str, Path]) -> ImageInfo:
        """Размеры и формат из заголовка, без декодирования растра."""
        with self._open(file_path) as source:
            width, height = source.size
            return ImageInfo(width=width, height=height, format=source.format)

    def load_image(self, file_path: Union[str, Path]) -> ImageData:
        """Загружает изображение с диска и возвращает его вместе с метаданными.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `ImageData` c `PIL.Image.Image` (в режиме RGBA), размерами и форматом.

        Raises:
            FileMissingError, MetadataUnreadableError: см. `_open`; вторая также
                при ошибке декодирования растра.
        """
        with self._open(file_path) as source:
            fmt = source.format
            try:
                pil_image = source.convert("RGBA")
            except OSError as exc:
                raise MetadataUnreadableError() from exc

        width, height = pil_image.size
        logger.debug("Loaded %s: %dx%d, format=%s", file_path, width, height, fmt)
        return ImageData(pil_image=pil_image, width=width, height=height, format=fmt)

    def to_rgba_array(self, image: Image.Image) -> np.ndarray:
        """
        Возвращает копию растра как uint8-массив формы (height, width, 4).
        """
        return np.array(image.convert("RGBA"), dtype=np.uint8)

    def dominant_color(self, image: Image.Image) -> ColorSample:
        """
        Доминирующий цвет: 3D-гистограмма по 16 корзин на канал без учёта альфы.
        Возвращает центр самой населённой корзины; при равенстве — корзину
        с меньшим индексом в порядке (r, g, b).
        """
        rgb = np.asarray(image.convert("RGB"), dtype=np.uint8).reshape(-1, 3)
        bin_size = 256 // DOMINANT_BINS
        idx = (rgb // bin_size).astype(np.int64)
        flat = (idx[:, 0] * DOMINANT_BINS + idx[:, 1]) * DOMINANT_BINS + idx[:, 2]
        hist = np.bincount(flat, minlength=DOMINANT_BINS ** 3)
        best = int(np.argmax(hist))

        r_bin, rest = divmod(best, DOMINANT_BINS * DOMINANT_BINS)
        g_bin, b_bin = divmod(rest, DOMINANT_BINS)
        half = bin_size // 2
        color = (r_bin * bin_size + half, g_bin * bin_size + half, b_bin * bin_size + half)
        logger.debug("Dominant color %s (%d of %d pixels)", color, int(hist[best]), rgb.shape[0])
        return color

    def composite_dest_in(self, image: Image.Image, mask_png: bytes) -> Image.Image:
        """
        Композиция "destination-in": цвет берётся из `image`, итоговая альфа
        равна alpha(image) * alpha(mask) / 255. Цвет маски не используется.
        Исходное изображение не изменяется.
        """
        with Image.open(io.BytesIO(mask_png)) as mask_source:
            mask = mask_source.convert("RGBA")
        if mask.size != image.size:
            raise ValueError(f"Mask size {mask.size} does not match image size {image.size}")

        result = image.convert("RGBA")
        combined_alpha = ImageChops.multiply(result.getchannel("A"), mask.getchannel("A"))
        result.putalpha(combined_alpha)
        return result

    def encode_png(self, image: Image.Image) -> bytes:
        buffer = io.BytesIO()
        image.save(buffer, format="PNG")
        return buffer.getvalue()

    def save_png(self, image: Image.Image, output_path: Union[str, Path]) -> Path:
        """Кодирует в память и только затем пишет файл целиком."""
        data = self.encode_png(image)
        path = Path(output_path)
        path.write_bytes(data)
        logger.debug("Wrote %d bytes to %s", len(data), path)
        return path
