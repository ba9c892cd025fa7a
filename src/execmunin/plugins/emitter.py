"""
PUTVAL record formatting and emission.

collectd's exec plugin reads one command per line from our standard output:

    PUTVAL "<host>/munin-<plugin>/<type>" interval=<seconds> <time>:<value>
"""

import logging
import os
import sys
from typing import Optional, TextIO

from ..models import ParsedLine, ShimConfig, ValueRecord

logger = logging.getLogger(__name__)


def build_identifier(hostname: str, plugin_instance: str, type_name: str) -> str:
    """Compose the `<host>/munin-<instance>/<type>` identifier."""
    return f"{hostname}/munin-{plugin_instance}/{type_name}"


def escape_identifier(identifier: str) -> str:
    """Backslash-escape double quotes so the identifier can be quoted."""
    return identifier.replace('"', '\\"')


def format_putval(record: ValueRecord) -> str:
    """Render a ValueRecord as a newline-terminated PUTVAL line."""
    identifier = escape_identifier(
        build_identifier(record.hostname, record.plugin_instance, record.type_name)
    )
    return f'PUTVAL "{identifier}" interval={record.interval} {record.timestamp}:{record.value}\n'


class PutvalEmitter:
    """
    Writes PUTVAL lines to a text stream, flushing after each one.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        # Resolved lazily so that tests capturing sys.stdout see the output.
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def emit(self, record: ValueRecord) -> None:
        line = format_putval(record)
        self.stream.write(line)
        self.stream.flush()
        logger.debug(f"Emitted {line.rstrip()}")

    def emit_value(self, config: ShimConfig, script_path: str,
                   parsed: ParsedLine, timestamp: int) -> ValueRecord:
        """
        Translate one parsed plugin line and emit it.

        Args:
            config: Runtime configuration (type map, host name, interval)
            script_path: Path of the plugin that produced the line
            parsed: The matched field and value
            timestamp: Epoch second at which the plugin was started

        Returns:
            The record that was written
        """
        record = ValueRecord(
            hostname=config.hostname,
            plugin_instance=os.path.basename(script_path),
            type_name=config.resolve_type(parsed.field),
            interval=config.interval,
            timestamp=timestamp,
            value=parsed.value,
        )
        self.emit(record)
        return record
