# -*- coding: utf-8 -*-
"""
User-facing error notification.

Store, orchestrator and startup registration report failures through
a Notifier so they never raise past the user action that triggered them.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class Notifier(ABC):
    """Receives titled error notifications."""

    @abstractmethod
    def notify_error(self, title: str, message: str) -> None:
        """
        Report an error to the user.

        Args:
            title: Short dialog title naming the failed operation.
            message: Error detail.
        """


class LogNotifier(Notifier):
    """Notifier that only writes to the log. Used when no UI is attached."""

    def notify_error(self, title: str, message: str) -> None:
        logger.error("%s: %s", title, message)
