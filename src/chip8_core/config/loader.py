from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from chip8_core.core.state import KEY_COUNT
from .models import DEFAULT_KEYMAP, DisplayConfig, MachineConfig

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

class ConfigLoader:
    def load_from_file(self, path: Union[str, Path]) -> MachineConfig:
        path = Path(path)
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
        return self._parse_config(data or {}, base_dir=path.parent)

    def load_from_string(self, text: str, base_dir: Optional[Path] = None) -> MachineConfig:
        return self._parse_config(yaml.safe_load(text) or {}, base_dir=base_dir)

    def _parse_config(self, data: Dict[str, Any], base_dir: Optional[Path] = None) -> MachineConfig:
        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping, got {type(data).__name__}")

        rom_path = None
        if data.get("rom"):
            rom_path = Path(data["rom"])
            # ROMのパスは設定ファイルのあるディレクトリからの相対パスとして解決する
            if not rom_path.is_absolute() and base_dir is not None:
                rom_path = base_dir / rom_path

        # Parse Display
        display_data = data.get("display", {}) or {}
        display = DisplayConfig(
            scale=self._parse_positive(display_data.get("scale", 10), "display.scale"),
            foreground=str(display_data.get("foreground", "#E0E0E0")),
            background=str(display_data.get("background", "#101010")),
        )

        # Parse Keymap
        keymap = dict(DEFAULT_KEYMAP)
        if "keymap" in data:
            keymap = {}
            for key_name, index_value in (data.get("keymap") or {}).items():
                index = self._parse_int(index_value)
                if not 0 <= index < KEY_COUNT:
                    raise ValueError(f"Keypad index out of range for key '{key_name}': {index_value}")
                keymap[str(key_name).upper()] = index

        log_level = str(data.get("log_level", "INFO")).upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {log_level}")

        seed = data.get("random_seed")

        return MachineConfig(
            rom_path=rom_path,
            cycles_per_second=self._parse_positive(data.get("cycles_per_second", 700), "cycles_per_second"),
            timer_hz=self._parse_positive(data.get("timer_hz", 60), "timer_hz"),
            random_seed=self._parse_int(seed) if seed is not None else None,
            log_level=log_level,
            display=display,
            keymap=keymap,
        )

    def _parse_positive(self, value: Any, name: str) -> int:
        result = self._parse_int(value)
        if result <= 0:
            raise ValueError(f"{name} must be a positive integer: {value}")
        return result

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            if value.lower().startswith("0x"):
                return int(value, 16)
            return int(value)
        raise ValueError(f"Invalid integer format: {value}")
