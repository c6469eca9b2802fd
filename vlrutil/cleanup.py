"""Base class for objects that must release a resource exactly when told."""

from __future__ import annotations

import warnings
from abc import ABC, abstractmethod
from typing import Any

from .result import SResult


class AutoCleanupBase(ABC):
    """Runs :meth:`do_cleanup` on exit from a ``with`` block.

    Set ``cleanup_enabled`` to False to skip the cleanup. An instance that is
    discarded without cleanup having been triggered emits a ResourceWarning.
    """

    def __init__(self) -> None:
        self.cleanup_enabled = True
        self.cleanup_called = False

    @abstractmethod
    def do_cleanup(self) -> Any:
        """Release the resource; implemented by subclasses."""

    def on_destroy_do_cleanup(self) -> Any:
        """Mark cleanup as triggered and run it unless disabled.

        Returns the result of :meth:`do_cleanup`, or a "no work done"
        success when cleanup is disabled.
        """
        self.cleanup_called = True
        if not self.cleanup_enabled:
            return SResult(SResult.SUCCESS_NO_WORK_DONE)
        return self.do_cleanup()

    def __enter__(self) -> AutoCleanupBase:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.on_destroy_do_cleanup()

    def __del__(self) -> None:
        if not getattr(self, "cleanup_called", True):
            warnings.warn(
                f"{type(self).__name__} discarded without cleanup",
                ResourceWarning,
                stacklevel=2,
            )