"""
Defaults taken from the environment collectd's exec plugin sets up.
"""

import logging
import os
import socket
from typing import Mapping, Optional

from ..models import DEFAULT_HOSTNAME, DEFAULT_INTERVAL

logger = logging.getLogger(__name__)

INTERVAL_ENV_VAR = "COLLECTD_INTERVAL"
HOSTNAME_ENV_VAR = "COLLECTD_HOSTNAME"


def default_interval(environ: Optional[Mapping[str, str]] = None) -> int:
    """
    Return the interval collectd asked for, or DEFAULT_INTERVAL.

    collectd exports the interval as a float string such as "10.000", so the
    value is read as a float and truncated.
    """
    env = os.environ if environ is None else environ
    raw = env.get(INTERVAL_ENV_VAR)
    if not raw:
        return DEFAULT_INTERVAL

    try:
        interval = int(float(raw))
    except (ValueError, OverflowError):
        logger.warning(f"Ignoring non-numeric {INTERVAL_ENV_VAR}={raw!r}, using {DEFAULT_INTERVAL}")
        return DEFAULT_INTERVAL

    if interval <= 0:
        logger.warning(f"Ignoring non-positive {INTERVAL_ENV_VAR}={raw!r}, using {DEFAULT_INTERVAL}")
        return DEFAULT_INTERVAL
    return interval


def default_hostname(environ: Optional[Mapping[str, str]] = None) -> str:
    """Resolve the host name: environment, then the system name, then "localhost"."""
    env = os.environ if environ is None else environ
    hostname = env.get(HOSTNAME_ENV_VAR)
    if hostname:
        return hostname

    try:
        hostname = socket.gethostname()
    except OSError as e:
        logger.debug(f"socket.gethostname() failed: {e}")
        hostname = ""
    return hostname or DEFAULT_HOSTNAME
