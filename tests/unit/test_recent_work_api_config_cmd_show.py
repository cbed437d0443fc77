"""cmd_show output."""

import pytest

from recent_work.api.config.cmd_show import cmd_show

pytestmark = pytest.mark.config


def test_cmd_show_with_config_file(recent_work_home, config_dict, run_cmd):
    result = run_cmd(cmd_show)
    assert result.success is True
    assert result.output["errors"] == []
    assert result.output["warnings"] == []
    assert result.output["config_path"] == str(recent_work_home.resolve() / "config.json")
    assert result.output["content"]["output_dir"] == config_dict["output_dir"]


def test_cmd_show_without_config_file_warns(tmp_path, monkeypatch, run_cmd):
    monkeypatch.setenv("RECENT_WORK_HOME", str(tmp_path))
    result = run_cmd(cmd_show)
    assert result.success is True
    assert len(result.output["warnings"]) == 1
    assert result.output["content"]["retention"] == {"max_files": 100, "max_age_hours": 48.0}


def test_cmd_show_invalid_config(tmp_path, monkeypatch, run_cmd):
    monkeypatch.setenv("RECENT_WORK_HOME", str(tmp_path))
    (tmp_path / "config.json").write_text("{")
    result = run_cmd(cmd_show)
    assert result.success is False
    assert result.output["errors"]
    assert result.output["content"] == {}
