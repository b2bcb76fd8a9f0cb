# src/chip8_core/instructions/control.py
"""
制御命令（画面クリア、サブルーチン、ジャンプ）の実装。
"""
from typing import TYPE_CHECKING

from chip8_core.core.host import LogLevel
from chip8_core.core.snapshot import Operation
from chip8_core.core.state import STACK_DEPTH
from .base import advance, report

if TYPE_CHECKING:
    from chip8_core.core.cpu import Chip8Cpu

# --- 0 family ---
# @intent:responsibility 00E0 (CLS) と 00EE (RET) を実行します。それ以外の0NNNは未実装としてストールします。
def execute_system(cpu: "Chip8Cpu", op: Operation) -> None:
    state = cpu.state
    if op.opcode == 0x00E0:
        state.clear_display()
        advance(state)
        cpu.host.render()
    elif op.opcode == 0x00EE:
        # SPは16bitとして減算し、添字にのみ4bitマスクをかける
        state.sp = (state.sp - 1) & 0xFFFF
        state.pc = (state.stack[state.sp & 0xF] + 2) & 0xFFFF
    else:
        # 0NNN: machine code routine (RCA 1802) is not supported
        report(cpu, LogLevel.ERROR, f"Opcode 0NNN is not implemented: 0x{op.opcode_hex}")

# --- 1NNN ---
# @intent:responsibility 絶対アドレスへジャンプします。
def execute_jump(cpu: "Chip8Cpu", op: Operation) -> None:
    cpu.state.pc = op.nnn

# --- 2NNN ---
# @intent:responsibility 現在のPCをスタックに積み、サブルーチンへジャンプします。
# @intent:rationale 16段を超える呼び出しはスタック外を破壊する代わりに、エラーとして報告しストールさせます。
def execute_call(cpu: "Chip8Cpu", op: Operation) -> None:
    state = cpu.state
    if state.sp >= STACK_DEPTH:
        report(cpu, LogLevel.ERROR, f"Stack overflow: call to 0x{op.nnn:03X} at depth {state.sp}")
        return
    state.stack[state.sp] = state.pc
    state.sp += 1
    state.pc = op.nnn

# --- BNNN ---
# @intent:responsibility NNN + V0 へジャンプします。
def execute_jump_v0(cpu: "Chip8Cpu", op: Operation) -> None:
    cpu.state.pc = op.nnn + cpu.state.v[0]
