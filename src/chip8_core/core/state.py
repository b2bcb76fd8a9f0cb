# src/chip8_core/core/state.py
"""
Core Layer (マシン状態)

このモジュールは、CHIP-8仮想マシンのアーキテクチャ状態（メモリ、レジスタ、
スタック、表示バッファ）を保持するデータ構造と、その定数を定義します。
"""
from dataclasses import dataclass, field
from typing import List

# @intent:constant アドレス空間と表示サイズの定義。
MEMORY_SIZE = 4096
PROGRAM_START = 0x200
MAX_PROGRAM_SIZE = MEMORY_SIZE - PROGRAM_START  # 3584 bytes
DISPLAY_WIDTH = 64
DISPLAY_HEIGHT = 32
REGISTER_COUNT = 16
STACK_DEPTH = 16
KEY_COUNT = 16
FLAG_REGISTER = 0xF
GLYPH_SIZE = 5

# @intent:constant 16進数字0-Fの組み込みフォント（1文字5バイト、計80バイト）。
# メモリの先頭(0x000-0x04F)に配置されます。
FONTSET = bytes([
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
])


def _initial_memory() -> bytearray:
    memory = bytearray(MEMORY_SIZE)
    memory[0:len(FONTSET)] = FONTSET
    return memory


# @intent:responsibility CHIP-8のアーキテクチャ状態を全て保持します。
# @intent:rationale 状態は単一の可変データクラスに集約し、命令ハンドラはこれを直接書き換えます。
#                  タイマー値はTimersが所有するため、ここには含みません。
@dataclass
class Chip8State:
    """
    CHIP-8マシンのレジスタ、メモリ、スタック、表示バッファを保持するデータクラス。
    生成直後はフォントのみがロードされ、PCは0x200を指します。
    """
    pc: int = PROGRAM_START  # Program Counter
    sp: int = 0x0000         # Stack Pointer
    i: int = 0x0000          # Index Register
    v: bytearray = field(default_factory=lambda: bytearray(REGISTER_COUNT))  # V0-VF
    stack: List[int] = field(default_factory=lambda: [0] * STACK_DEPTH)
    memory: bytearray = field(default_factory=_initial_memory)
    display: bytearray = field(default_factory=lambda: bytearray(DISPLAY_WIDTH * DISPLAY_HEIGHT))

    # @intent:responsibility 全ての値を複製した独立した状態オブジェクトを返します。
    def clone(self) -> "Chip8State":
        return Chip8State(
            pc=self.pc,
            sp=self.sp,
            i=self.i,
            v=bytearray(self.v),
            stack=list(self.stack),
            memory=bytearray(self.memory),
            display=bytearray(self.display),
        )

    def clear_display(self) -> None:
        self.display[:] = bytes(len(self.display))
