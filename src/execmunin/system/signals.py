"""
Signal handling for the scheduler loop.

SIGINT and SIGTERM stop the scheduler after the current sleep or script and
terminate whatever plugin is running at that moment.
"""

import logging
import signal
from typing import Any, Callable, List, Optional

logger = logging.getLogger(__name__)


class SignalHandler:
    """
    Installs SIGINT/SIGTERM handlers that invoke shutdown callbacks.

    The previous handlers are kept so they can be restored with
    cleanup_signal_handlers().
    """

    SIGNALS = (signal.SIGINT, signal.SIGTERM)

    def __init__(self, *callbacks: Callable[[], None]):
        self.callbacks: List[Callable[[], None]] = list(callbacks)
        self._original_handlers = {}
        self._signal_handlers_set = False
        self.received_signal: Optional[int] = None

    def setup_signal_handlers(self) -> None:
        """Install the shutdown handlers."""
        try:
            for signum in self.SIGNALS:
                self._original_handlers[signum] = signal.signal(signum, self._handle_signal)
            self._signal_handlers_set = True
            logger.debug("Signal handlers installed")
        except ValueError as e:
            # signal.signal() only works in the main thread
            logger.warning(f"Failed to set up signal handlers: {e}")

    def cleanup_signal_handlers(self) -> None:
        """Restore the handlers that were active before setup."""
        if not self._signal_handlers_set:
            return

        try:
            for signum, handler in self._original_handlers.items():
                if handler is not None:
                    signal.signal(signum, handler)
            logger.debug("Signal handlers restored")
        finally:
            self._original_handlers.clear()
            self._signal_handlers_set = False

    def _handle_signal(self, signum: int, frame: Any) -> None:
        if self.received_signal is not None:
            logger.warning("Shutdown already in progress.")
            return
        self.received_signal = signum
        logger.info(f"Signal {signal.Signals(signum).name} received, shutting down")
        for callback in self.callbacks:
            callback()
