"""
Process-wide pricing settings.

The evaluation date is the "today" of every pricing call: fixings on or
before it come from history, later ones are projected. Term structures built
without an explicit reference date float with it.
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Iterator
from contextlib import contextmanager

from equityflow.observable import Observable

logger = logging.getLogger(__name__)


class Settings(Observable):
    """Holds the evaluation date and notifies dependents when it moves."""

    def __init__(self) -> None:
        super().__init__()
        self._evaluation_date: datetime.date | None = None

    @property
    def evaluation_date(self) -> datetime.date:
        """Pinned evaluation date, or the system date when none is set."""
        if self._evaluation_date is None:
            return datetime.date.today()
        return self._evaluation_date

    @evaluation_date.setter
    def evaluation_date(self, value: datetime.date | None) -> None:
        if value == self._evaluation_date:
            return
        logger.debug("evaluation date set to %s", value)
        self._evaluation_date = value
        self.notify_observers()

    @property
    def is_pinned(self) -> bool:
        return self._evaluation_date is not None


settings = Settings()


@contextmanager
def saved_settings() -> Iterator[Settings]:
    """Restore the evaluation date on exit, whatever happened inside."""
    saved = settings._evaluation_date
    try:
        yield settings
    finally:
        settings.evaluation_date = saved
