"""
Process tree termination for running plugins.

Used when exec-munin is asked to shut down while a plugin is still running,
so the plugin and anything it forked do not outlive us.
"""

import logging
from typing import List

import psutil

logger = logging.getLogger(__name__)

TERMINATE_TIMEOUT = 3.0
KILL_TIMEOUT = 2.0


def _collect_tree(pid: int) -> List[psutil.Process]:
    parent = psutil.Process(pid)
    try:
        children = parent.children(recursive=True)
    except (psutil.NoSuchProcess, psutil.AccessDenied):
        children = []
    return [parent] + children


def _signal_all(processes: List[psutil.Process], force: bool) -> None:
    for process in processes:
        try:
            if force:
                process.kill()
            else:
                process.terminate()
        except psutil.NoSuchProcess:
            continue
        except psutil.AccessDenied:
            logger.warning(f"Access denied signalling PID {process.pid}")


def terminate_process_tree(pid: int, name: str) -> None:
    """
    Terminate a process and all of its descendants.

    Sends SIGTERM first and SIGKILL to whatever is still alive after
    TERMINATE_TIMEOUT seconds.

    Args:
        pid: PID of the tree's root process
        name: Human-readable name for log messages
    """
    if pid <= 0:
        logger.warning(f"Invalid PID {pid} for {name}, skipping termination")
        return

    try:
        processes = _collect_tree(pid)
    except psutil.NoSuchProcess:
        logger.debug(f"Process {name} (PID: {pid}) already terminated")
        return

    logger.info(f"Terminating {name} (PID: {pid}) and {len(processes) - 1} children")
    _signal_all(processes, force=False)
    _, alive = psutil.wait_procs(processes, timeout=TERMINATE_TIMEOUT)
    if not alive:
        return

    logger.warning(f"{len(alive)} processes of {name} ignored SIGTERM, killing them")
    _signal_all(alive, force=True)
    _, alive = psutil.wait_procs(alive, timeout=KILL_TIMEOUT)
    for process in alive:
        logger.error(f"Failed to kill PID {process.pid} of {name}")
