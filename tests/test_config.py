from __future__ import annotations

import pytest

from lstheme import config
from lstheme.constants import DEFAULT_CONFIG


def test_missing_file_gives_defaults(tmp_path):
    cfg = config.load_config(tmp_path / "config.yaml")

    assert cfg == DEFAULT_CONFIG
    assert cfg is not DEFAULT_CONFIG


def test_values_are_loaded(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "color: always\n"
        "color_scale: size\n"
        "colors:\n"
        "  ls: 'di=34'\n"
        "  exa: 'reset:*.txt=31'\n",
        encoding="utf-8",
    )

    cfg = config.load_config(path)

    assert cfg["color"] == "always"
    assert cfg["color_scale"] == "size"
    assert cfg["log_dir"] is None
    assert cfg["colors"] == {"ls": "di=34", "exa": "reset:*.txt=31"}


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding="utf-8")

    assert config.load_config(path) == DEFAULT_CONFIG


def test_wrong_types_fall_back(tmp_path, lstheme_caplog):
    path = tmp_path / "config.yaml"
    path.write_text("color: 3\ncolors: [1, 2]\n", encoding="utf-8")

    cfg = config.load_config(path)

    assert cfg["color"] is None
    assert cfg["colors"] == {"ls": None, "exa": None}
    messages = [r.getMessage() for r in lstheme_caplog.records if r.levelname == "WARNING"]
    assert any("color" in m for m in messages)
    assert any("colors" in m for m in messages)


def test_invalid_yaml_exits(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("color: [always\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        config.load_config(path)

    assert excinfo.value.code == 1


def test_non_mapping_exits(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- always\n- never\n", encoding="utf-8")

    with pytest.raises(SystemExit):
        config.load_config(path)


def test_environment_wins_over_config():
    cfg = {"colors": {"ls": "di=31", "exa": "da=31"}}
    env = {"LS_COLORS": "di=32", "EZA_COLORS": "da=32"}

    assert config.colour_environment(cfg, env) == env


def test_config_fills_unset_variables():
    cfg = {"colors": {"ls": "di=31", "exa": "da=31"}}

    merged = config.colour_environment(cfg, {"HOME": "/home/someone"})

    assert merged == {"HOME": "/home/someone", "LS_COLORS": "di=31", "EZA_COLORS": "da=31"}


def test_exa_colors_variable_blocks_config_fallback():
    cfg = {"colors": {"ls": None, "exa": "da=31"}}

    merged = config.colour_environment(cfg, {"EXA_COLORS": "da=33"})

    assert "EZA_COLORS" not in merged
    assert "LS_COLORS" not in merged
