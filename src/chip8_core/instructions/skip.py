# src/chip8_core/instructions/skip.py
"""
条件スキップ命令の実装。
条件が成立すると次の命令を読み飛ばします(PC+4)。不成立ならPC+2です。
"""
from typing import TYPE_CHECKING

from chip8_core.core.snapshot import Operation
from .base import report_unknown, skip_if

if TYPE_CHECKING:
    from chip8_core.core.cpu import Chip8Cpu

# --- 3XNN ---
def execute_skip_eq_imm(cpu: "Chip8Cpu", op: Operation) -> None:
    skip_if(cpu.state, cpu.state.v[op.x] == op.nn)

# --- 4XNN ---
def execute_skip_ne_imm(cpu: "Chip8Cpu", op: Operation) -> None:
    skip_if(cpu.state, cpu.state.v[op.x] != op.nn)

# --- 5XY0 ---
# @intent:rationale 下位4bitは検査しません（5XY1なども5XY0として扱います）。
def execute_skip_eq_reg(cpu: "Chip8Cpu", op: Operation) -> None:
    skip_if(cpu.state, cpu.state.v[op.x] == cpu.state.v[op.y])

# --- 9XY0 ---
def execute_skip_ne_reg(cpu: "Chip8Cpu", op: Operation) -> None:
    skip_if(cpu.state, cpu.state.v[op.x] != cpu.state.v[op.y])

# --- EX9E / EXA1 ---
# @intent:responsibility VXの値をキー番号としてホストに問い合わせ、押下状態に応じてスキップします。
def execute_key_skip(cpu: "Chip8Cpu", op: Operation) -> None:
    key = cpu.state.v[op.x]
    if op.nn == 0x9E:
        skip_if(cpu.state, cpu.host.key_state(key))
    elif op.nn == 0xA1:
        skip_if(cpu.state, not cpu.host.key_state(key))
    else:
        report_unknown(cpu, op)
