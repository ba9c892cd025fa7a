"""
Interval scheduling of plugin rounds.

Every round runs all scripts in order and then sleeps until the round's
deadline (start + interval). The remaining time is recomputed after every
wake-up, so early wake-ups are absorbed. A round that overruns its interval
is followed immediately by the next one: no round is ever skipped.
"""

import logging
import threading
import time
from typing import Callable, Optional

from ..models import ShimConfig
from ..plugins import PluginRunner

logger = logging.getLogger(__name__)


class RoundScheduler:
    """
    Drives a PluginRunner once per interval until shutdown is requested.
    """

    def __init__(
        self,
        config: ShimConfig,
        runner: PluginRunner,
        clock: Callable[[], float] = time.time,
        sleep: Optional[Callable[[float], object]] = None,
    ):
        self.config = config
        self.runner = runner
        self.clock = clock
        self.shutdown_requested = threading.Event()
        # Waiting on the event lets a shutdown request cut the sleep short.
        self.sleep = sleep or self.shutdown_requested.wait
        self.rounds_completed = 0

    def request_shutdown(self) -> None:
        self.shutdown_requested.set()

    def run_round(self) -> int:
        """Run every configured script once, in order. Returns values emitted."""
        emitted = 0
        for script_path in self.config.scripts:
            if self.shutdown_requested.is_set():
                break
            emitted += self.runner.run_script(script_path)
        self.rounds_completed += 1
        return emitted

    def wait_until(self, deadline: float) -> None:
        """Sleep until the deadline, re-checking the clock after each wake-up."""
        remaining = deadline - self.clock()
        while remaining > 0 and not self.shutdown_requested.is_set():
            self.sleep(remaining)
            remaining = deadline - self.clock()

    def run_forever(self, max_rounds: Optional[int] = None) -> None:
        """
        Run rounds until shutdown is requested.

        Args:
            max_rounds: Stop after this many rounds; None runs without limit
        """
        logger.info(
            f"Running {len(self.config.scripts)} scripts every {self.config.interval} seconds"
        )
        rounds = 0
        while not self.shutdown_requested.is_set():
            if max_rounds is not None and rounds >= max_rounds:
                break
            deadline = self.clock() + self.config.interval
            emitted = self.run_round()
            rounds += 1
            logger.debug(f"Round {self.rounds_completed} emitted {emitted} values")
            if max_rounds is not None and rounds >= max_rounds:
                break
            self.wait_until(deadline)

        logger.info(f"Scheduler stopped after {rounds} rounds")
