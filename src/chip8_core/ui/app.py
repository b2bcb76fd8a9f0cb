# src/chip8_core/ui/app.py
"""
PySide6アプリケーションのエントリポイント。
コマンドライン引数と設定ファイルを読み込み、メインウィンドウを起動します。
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from chip8_core.config.loader import LOG_LEVELS, ConfigLoader
from chip8_core.config.models import MachineConfig

def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="chip8-core", description="CHIP-8 virtual machine")
    parser.add_argument("rom", nargs="?", type=Path, help="Program image to load (.ch8 or Intel HEX)")
    parser.add_argument("--config", type=Path, help="YAML machine configuration")
    parser.add_argument("--scale", type=int, help="Display scale factor (overrides config)")
    parser.add_argument("--log-level", choices=LOG_LEVELS, type=str.upper, help="Logging level (overrides config)")
    return parser

# @intent:responsibility 引数と設定ファイルを統合したMachineConfigを生成します。
def resolve_config(args: argparse.Namespace) -> MachineConfig:
    config = ConfigLoader().load_from_file(args.config) if args.config else MachineConfig()
    if args.rom is not None:
        config.rom_path = args.rom
    if args.scale is not None:
        if args.scale <= 0:
            raise ValueError(f"--scale must be a positive integer: {args.scale}")
        config.display.scale = args.scale
    if args.log_level is not None:
        config.log_level = args.log_level
    return config

# @intent:responsibility アプリケーションを起動し、メインウィンドウを表示します。
def main(argv: Optional[List[str]] = None) -> int:
    """
    アプリケーションのメイン関数。
    """
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        config = resolve_config(args)
    except (OSError, ValueError) as e:
        parser.error(str(e))

    logging.basicConfig(level=config.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # Qtはウィンドウを作るまで読み込まない（--help などをQtなしで動かすため）
    from PySide6.QtWidgets import QApplication
    from .main_window import MainWindow

    app = QApplication(sys.argv[:1])
    main_win = MainWindow(config)
    main_win.show()
    if config.rom_path is not None and main_win.load_error is None:
        main_win.run_action.trigger()
    return app.exec()

if __name__ == '__main__':
    sys.exit(main())
