# tests/ui/test_app.py
"""
コマンドライン引数の解析と、Qtに依存しないメインウィンドウ補助関数の単体テスト。
"""
from pathlib import Path

import pytest

from chip8_core.ui.app import build_arg_parser, resolve_config

# @intent:test_suite 引数と設定ファイルの統合を検証します。

def test_defaults_without_arguments():
    config = resolve_config(build_arg_parser().parse_args([]))
    assert config.rom_path is None
    assert config.display.scale == 10
    assert config.log_level == "INFO"

def test_arguments_override_config(tmp_path):
    config_file = tmp_path / "machine.yaml"
    config_file.write_text("rom: a.ch8\nlog_level: ERROR\ndisplay:\n  scale: 4\n")

    args = build_arg_parser().parse_args(
        ["b.ch8", "--config", str(config_file), "--scale", "6", "--log-level", "debug"])
    config = resolve_config(args)

    assert config.rom_path == Path("b.ch8")
    assert config.display.scale == 6
    assert config.log_level == "DEBUG"

def test_config_rom_is_used_without_positional(tmp_path):
    config_file = tmp_path / "machine.yaml"
    config_file.write_text("rom: a.ch8\n")
    config = resolve_config(build_arg_parser().parse_args(["--config", str(config_file)]))
    assert config.rom_path == tmp_path / "a.ch8"

def test_non_positive_scale_is_rejected():
    with pytest.raises(ValueError, match="--scale"):
        resolve_config(build_arg_parser().parse_args(["--scale", "0"]))

def test_invalid_log_level_exits():
    with pytest.raises(SystemExit):
        build_arg_parser().parse_args(["--log-level", "LOUD"])
