from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from chip8_core.common.types import KeyMap

# COSMAC VIP keypad      QWERTY
#   1 2 3 C              1 2 3 4
#   4 5 6 D              Q W E R
#   7 8 9 E              A S D F
#   A 0 B F              Z X C V
DEFAULT_KEYMAP: KeyMap = {
    "1": 0x1, "2": 0x2, "3": 0x3, "4": 0xC,
    "Q": 0x4, "W": 0x5, "E": 0x6, "R": 0xD,
    "A": 0x7, "S": 0x8, "D": 0x9, "F": 0xE,
    "Z": 0xA, "X": 0x0, "C": 0xB, "V": 0xF,
}

@dataclass
class DisplayConfig:
    scale: int = 10
    foreground: str = "#E0E0E0"
    background: str = "#101010"

@dataclass
class MachineConfig:
    rom_path: Optional[Path] = None
    cycles_per_second: int = 700
    timer_hz: int = 60
    random_seed: Optional[int] = None
    log_level: str = "INFO"
    display: DisplayConfig = field(default_factory=DisplayConfig)
    keymap: KeyMap = field(default_factory=lambda: dict(DEFAULT_KEYMAP))
