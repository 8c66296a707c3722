import pytest
import yaml

from virtualpad_control.client.config_loader import DEFAULT_CONFIG_PATH, ConfigError, load_config, validate_config

"""
Tests for the YAML configuration loader.
"""

def test_missing_file_means_defaults(tmp_path):
    assert load_config(tmp_path / "missing.yaml") == {}


def test_empty_file_means_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")

    assert load_config(path) == {}


def test_loads_values(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("admin_tool: /usr/bin/virtualpad-admin\ntimeout: null\nlog_level: DEBUG\n")

    assert load_config(str(path)) == {"admin_tool": "/usr/bin/virtualpad-admin", "timeout": None, "log_level": "DEBUG"}


def test_malformed_file_raises(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("admin_tool: [unclosed\n")

    with pytest.raises(yaml.YAMLError):
        load_config(path)


def test_packaged_default_config():
    config = load_config(DEFAULT_CONFIG_PATH)

    assert config["admin_tool"] == "virtualpad-admin"
    assert config["timeout"] == 10.0


def test_accepts_admin_tool_as_word_list(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("admin_tool: [python3, /opt/virtualpad/admin.py]\ntimeout: 2.5\n")

    assert load_config(path) == {"admin_tool": ["python3", "/opt/virtualpad/admin.py"], "timeout": 2.5}


@pytest.mark.parametrize("content", [
    "- just\n- a list\n",
    "admin_tool: ''\n",
    "admin_tool: []\n",
    "admin_tool: [python3, 42]\n",
    "admin_tool: 17\n",
    "timeout: 0\n",
    "timeout: -3\n",
    "timeout: soon\n",
    "timeout: yes\n",
    "log_level: LOUD\n",
])
def test_unusable_values_are_rejected(tmp_path, content):
    path = tmp_path / "config.yaml"
    path.write_text(content)

    with pytest.raises(ConfigError):
        load_config(path)


def test_validate_config_leaves_unknown_keys_alone():
    config = {"admin_tool": "virtualpad-admin", "timeout": None, "log_level": "debug", "extra": {"x": 1}}

    assert validate_config(config) is config
