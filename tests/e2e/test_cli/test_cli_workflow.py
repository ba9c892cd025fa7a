"""
End-to-end tests for the exec-munin command line.
"""

import os
import signal
import subprocess
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from execmunin.cli.main import build_parser, main_cli
from execmunin.config import DEFAULT_CONFIG_PATH

SRC_DIR = Path(__file__).resolve().parents[3] / "src"


@pytest.mark.e2e
class TestMainCli:
    """Test cases for main_cli."""

    def test_default_config_path(self):
        args = build_parser().parse_args([])

        assert args.config == DEFAULT_CONFIG_PATH
        assert args.verbose is False

    def test_missing_config_exits_with_status_1(self, temp_dir):
        with pytest.raises(SystemExit) as exc_info:
            main_cli(["--config", str(temp_dir / "missing.conf")])

        assert exc_info.value.code == 1

    def test_runs_scheduler_with_loaded_config(self, make_script, write_config):
        plugin = make_script("cpu", 'echo "user.value 5"')
        path = write_config(f"Script {plugin}\nInterval 15\n")

        with patch("execmunin.cli.main.RoundScheduler") as mock_scheduler_class:
            assert main_cli(["-c", str(path)]) == 0

        config = mock_scheduler_class.call_args.args[0]
        assert config.scripts == (plugin,)
        assert config.interval == 15
        mock_scheduler_class.return_value.run_forever.assert_called_once_with()


@pytest.mark.e2e
class TestDaemonProcess:
    """Run the real daemon in a subprocess."""

    def test_emits_putval_and_stops_on_sigterm(self, make_script, write_config):
        plugin = make_script("sensors", 'echo "temp.value 23.5"\necho "graph_title x"')
        path = write_config(f"AddType temperature temp\nScript {plugin}\nInterval 3600\n")
        env = dict(os.environ, COLLECTD_HOSTNAME="myhost", PYTHONPATH=str(SRC_DIR))

        process = subprocess.Popen(
            [sys.executable, "-m", "execmunin", "--config", str(path)],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            env=env,
        )
        try:
            line = process.stdout.readline()
            assert line.startswith('PUTVAL "myhost/munin-sensors/temperature" interval=3600 ')
            assert line.rstrip().endswith(":23.5")

            process.send_signal(signal.SIGTERM)
            stdout, stderr = process.communicate(timeout=10)
        finally:
            if process.poll() is None:
                process.kill()
                process.communicate()

        assert process.returncode == 0
        assert stdout == ""
        assert "Loading configuration file" in stderr
