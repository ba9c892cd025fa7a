"""
Execution of Munin plugins.

Each plugin is started with no arguments, its standard output is read line
by line until the plugin closes it, and every `<field>.value <number>` line
is handed to the emitter. The plugin's standard error is inherited, not
captured, and its exit status is not inspected.
"""

import logging
import subprocess
import time
from typing import Callable, Iterator, Optional

from ..models import ShimConfig
from ..system import terminate_process_tree
from ..validation import ErrorSeverity, SpawnError, handle_subprocess_error
from .emitter import PutvalEmitter
from .parser import parse_value_line

logger = logging.getLogger(__name__)


class PluginRunner:
    """
    Runs one plugin at a time and translates its output.
    """

    def __init__(self, config: ShimConfig, emitter: Optional[PutvalEmitter] = None,
                 clock: Callable[[], float] = time.time):
        self.config = config
        self.emitter = emitter or PutvalEmitter()
        self.clock = clock
        self.active_process: Optional[subprocess.Popen] = None

    def spawn(self, script_path: str) -> subprocess.Popen:
        """
        Start a plugin with its stdout connected to a text pipe.

        The new process becomes the active process before this returns.

        Raises:
            SpawnError: If the plugin cannot be executed
        """
        try:
            self.active_process = subprocess.Popen(
                [script_path],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            raise SpawnError(script_path, e) from e
        return self.active_process

    def iter_output_lines(self, script_path: str) -> Iterator[str]:
        """
        Yield the plugin's output lines as they are produced.

        The sequence ends when the plugin closes its standard output; the
        process is reaped afterwards. A new call starts a new process.

        Raises:
            SpawnError: If the plugin cannot be executed
        """
        process = self.spawn(script_path)
        logger.debug(f"Started `{script_path}' with PID {process.pid}")
        try:
            with process.stdout:
                yield from process.stdout
        finally:
            process.wait()
            self.active_process = None

    def run_script(self, script_path: str) -> int:
        """
        Run one plugin and emit a PUTVAL line for every value it prints.

        Launch failures are logged and skipped for this round only.

        Args:
            script_path: Path of the plugin executable

        Returns:
            Number of values emitted
        """
        timestamp = int(self.clock())
        emitted = 0
        try:
            for line in self.iter_output_lines(script_path):
                parsed = parse_value_line(line)
                if parsed is None:
                    continue
                self.emitter.emit_value(self.config, script_path, parsed, timestamp)
                emitted += 1
        except SpawnError as e:
            handle_subprocess_error(
                error=e,
                command=script_path,
                severity=ErrorSeverity.ERROR,
                reraise=False,
                logger=logger,
            )
        return emitted

    def terminate_active(self) -> None:
        """Terminate the plugin currently running, if any."""
        process = self.active_process
        if process is None or process.poll() is not None:
            return
        terminate_process_tree(process.pid, f"plugin {process.args[0]}")
