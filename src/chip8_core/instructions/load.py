# src/chip8_core/instructions/load.py
"""
レジスタへのロード命令の実装。
"""
from typing import TYPE_CHECKING

from chip8_core.core.snapshot import Operation
from .base import advance

if TYPE_CHECKING:
    from chip8_core.core.cpu import Chip8Cpu

# --- 6XNN ---
# @intent:responsibility VX に即値NNをロードします。
def execute_load_imm(cpu: "Chip8Cpu", op: Operation) -> None:
    cpu.state.v[op.x] = op.nn
    advance(cpu.state)

# --- 7XNN ---
# @intent:responsibility VX に即値NNを加算します。8bitで折り返し、VFは変更しません。
def execute_add_imm(cpu: "Chip8Cpu", op: Operation) -> None:
    cpu.state.v[op.x] = (cpu.state.v[op.x] + op.nn) & 0xFF
    advance(cpu.state)

# --- ANNN ---
def execute_load_index(cpu: "Chip8Cpu", op: Operation) -> None:
    cpu.state.i = op.nnn
    advance(cpu.state)

# --- CXNN ---
# @intent:responsibility VX に (乱数 mod 256) AND NN をロードします。
def execute_random(cpu: "Chip8Cpu", op: Operation) -> None:
    cpu.state.v[op.x] = (cpu.host.random_int() % 0x100) & op.nn
    advance(cpu.state)
