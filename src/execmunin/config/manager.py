"""
Configuration assembly.

Combines the file loader, the environment defaults and the interpreter into
the single ShimConfig the rest of the program runs on.
"""

import logging
from pathlib import Path
from typing import Mapping, Optional, Union

from ..models import ShimConfig
from .environment import default_hostname, default_interval
from .interpreter import interpret_config
from .loader import load_config_file

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("/etc/exec-munin.conf")


def build_shim_config(
    config_path: Union[str, Path] = DEFAULT_CONFIG_PATH,
    environ: Optional[Mapping[str, str]] = None,
) -> ShimConfig:
    """
    Load the configuration file and resolve it into a ShimConfig.

    Args:
        config_path: Path to the configuration file
        environ: Environment to read collectd defaults from (defaults to os.environ)

    Returns:
        The immutable configuration for this process

    Raises:
        ConfigLoadError: If the configuration file is missing or malformed
    """
    config_data = load_config_file(config_path)
    return interpret_config(
        config_data,
        interval=default_interval(environ),
        hostname=default_hostname(environ),
    )
