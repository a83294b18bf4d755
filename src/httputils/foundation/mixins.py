"""Mixins shared by transports and the request executor."""

import logging
from typing import Any


class LoggerMixin:
    """Mixin that provides automatic logger creation.

    This mixin automatically creates a logger based on the class's module name.
    The logger is available as `self._logger` or `cls._logger`.
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        """Automatically create logger for each subclass.

        Args:
            **kwargs: Additional keyword arguments passed to super().__init_subclass__.
        """
        super().__init_subclass__(**kwargs)
        module = cls.__module__
        cls._logger = logging.getLogger(module)  # type: ignore[attr-defined]
