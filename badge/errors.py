"""Классифицированные ошибки проверки и форматирования бейджа."""
from __future__ import annotations

from typing import Optional

from badge.models.badge_model import FailureReason


class BadgeError(Exception):
    """Базовая ошибка. Сообщение по умолчанию задаётся в подклассе."""

    reason: FailureReason
    default_message = "Badge processing failed."

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self.args[0])


class FileMissingError(BadgeError, FileNotFoundError):
    reason = FailureReason.FILE_MISSING
    default_message = "File does not exist."


class MetadataUnreadableError(BadgeError):
    reason = FailureReason.METADATA_UNREADABLE
    default_message = "Failed to read image metadata."


class WrongFormatError(BadgeError):
    reason = FailureReason.WRONG_FORMAT
    default_message = "Image format is not PNG."


class OversizeError(BadgeError):
    reason = FailureReason.OVERSIZE
    default_message = "Image dimensions exceed 512x512 pixels."


class NonCircularError(BadgeError):
    reason = FailureReason.NON_CIRCULAR
    default_message = "Image has non-transparent pixels outside the circle."


class NotHappyError(BadgeError):
    reason = FailureReason.NOT_HAPPY
    default_message = "Image does not convey a happy feeling."
