"""Config settings – Settings base class and SelectionSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from dataselect.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class SelectionSettings(Settings):
    """Defaults applied when binding query parameters and configuring logging.

    Read from ``DATASELECT_*`` environment variables, e.g.
    ``DATASELECT_MAX_ITEMS_PER_PAGE=500``.
    """

    _prefix: ClassVar[str] = "DATASELECT"

    default_items_per_page: int = 10
    max_items_per_page: int = 1000
    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        if self.default_items_per_page < 1:
            raise InvalidSettingValueError(
                "default_items_per_page", self.default_items_per_page, "must be >= 1"
            )
        if self.max_items_per_page < 1:
            raise InvalidSettingValueError(
                "max_items_per_page", self.max_items_per_page, "must be >= 1"
            )
        if self.default_items_per_page > self.max_items_per_page:
            raise InvalidSettingValueError(
                "default_items_per_page",
                self.default_items_per_page,
                f"must not exceed max_items_per_page ({self.max_items_per_page})",
            )


__all__ = ["SelectionSettings", "Settings"]
