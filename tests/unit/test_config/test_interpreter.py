"""
Unit tests for configuration interpretation.

Tests AddType, Script and Interval handling, including the tolerated and
rejected value shapes.
"""

import logging

import pytest

from execmunin.config.interpreter import interpret_config, option_entries
from execmunin.models import DEFAULT_HOSTNAME, DEFAULT_INTERVAL
from execmunin.validation import ConfigShapeError


@pytest.mark.unit
class TestOptionEntries:
    """Test cases for option shape normalisation."""

    def test_absent_option(self):
        assert option_entries({}, "script") == []

    def test_single_string(self):
        assert option_entries({"script": "/a"}, "script") == ["/a"]

    def test_list_of_strings(self):
        assert option_entries({"script": ["/a", "/b"]}, "script") == ["/a", "/b"]

    @pytest.mark.parametrize("value", [{"nested": "block"}, ["/a", {"x": "y"}], 5])
    def test_unsupported_shapes_raise(self, value):
        with pytest.raises(ConfigShapeError) as exc_info:
            option_entries({"script": value}, "script")

        assert exc_info.value.option == "script"


@pytest.mark.unit
class TestAddType:
    """Test cases for the field -> type map."""

    def test_single_entry_maps_every_field(self):
        config = interpret_config({"addtype": "voltage in out"})

        assert dict(config.type_map) == {"in": "voltage", "out": "voltage"}

    def test_multiple_entries(self):
        config = interpret_config({"addtype": ["voltage in out", "temperature temp"]})

        assert config.type_map["in"] == "voltage"
        assert config.type_map["temp"] == "temperature"

    def test_later_entry_wins(self):
        config = interpret_config({"addtype": ["voltage in out", "if_octets in"]})

        assert config.type_map["in"] == "if_octets"
        assert config.type_map["out"] == "voltage"

    def test_entry_without_fields_is_ignored(self, caplog):
        with caplog.at_level(logging.WARNING):
            config = interpret_config({"addtype": "voltage"})

        assert dict(config.type_map) == {}
        assert "names no fields" in caplog.text

    def test_block_shape_is_skipped(self, caplog):
        with caplog.at_level(logging.ERROR):
            config = interpret_config({"addtype": {"voltage": {}}, "interval": "10"})

        assert dict(config.type_map) == {}
        assert config.interval == 10
        assert "addtype" in caplog.text


@pytest.mark.unit
class TestScripts:
    """Test cases for script validation."""

    def test_valid_scripts_keep_order(self, make_script):
        first = make_script("b_plugin", "true")
        second = make_script("a_plugin", "true")

        config = interpret_config({"script": [first, second]})

        assert config.scripts == (first, second)

    def test_missing_script_is_dropped(self, make_script, temp_dir, caplog):
        good = make_script("cpu", "true")
        missing = str(temp_dir / "missing")

        with caplog.at_level(logging.WARNING):
            config = interpret_config({"script": [missing, good]})

        assert config.scripts == (good,)
        assert f"Script `{missing}' doesn't exist." in caplog.text

    def test_non_executable_script_is_dropped(self, make_script, caplog):
        plain = make_script("plain", "true", executable=False)
        good = make_script("cpu", "true")

        with caplog.at_level(logging.WARNING):
            config = interpret_config({"script": [good, plain]})

        assert config.scripts == (good,)
        assert f"Script `{plain}' exists but is not executable." in caplog.text

    def test_nested_block_is_skipped(self, make_script):
        config = interpret_config({"script": {"cpu": {}}})

        assert config.scripts == ()


@pytest.mark.unit
class TestInterval:
    """Test cases for the Interval option."""

    def test_defaults_are_used_without_options(self):
        config = interpret_config({})

        assert config.interval == DEFAULT_INTERVAL
        assert config.hostname == DEFAULT_HOSTNAME

    def test_positive_interval_overrides_default(self):
        config = interpret_config({"interval": "60"}, interval=10)

        assert config.interval == 60

    @pytest.mark.parametrize("value", ["0", "-5", "abc", "1.5", "", "1_0", "٣"])
    def test_invalid_interval_keeps_default(self, value):
        config = interpret_config({"interval": value}, interval=10)

        assert config.interval == 10

    def test_hostname_is_passed_through(self):
        config = interpret_config({}, hostname="myhost")

        assert config.hostname == "myhost"

    def test_unknown_options_are_ignored(self):
        config = interpret_config({"verbose": "1", "interval": "20"})

        assert config.interval == 20
