# src/chip8_core/instructions/alu.py
"""
算術論理演算命令(8XYN)の実装。
"""
from typing import TYPE_CHECKING, Callable

from chip8_core.core.snapshot import Operation
from chip8_core.core.state import Chip8State, FLAG_REGISTER
from .base import advance, report_unknown

if TYPE_CHECKING:
    from chip8_core.core.cpu import Chip8Cpu

# @intent:utility_function フラグをVFへ書き込んだ後に、書き込み後のレジスタ値から結果を計算してVXへ格納します。
# @intent:rationale X=F または Y=F の場合、演算には新しいフラグ値が使われます。
def _store_with_flag(state: Chip8State, x: int, y: int, flag: int, compute: Callable[[int, int], int]) -> None:
    state.v[FLAG_REGISTER] = flag
    state.v[x] = compute(state.v[x], state.v[y]) & 0xFF

def _assign(vx: int, vy: int) -> int:
    return vy

def _or(vx: int, vy: int) -> int:
    return vx | vy

def _and(vx: int, vy: int) -> int:
    return vx & vy

def _xor(vx: int, vy: int) -> int:
    return vx ^ vy

# @intent:map 下位4bitからフラグを変更しない論理演算へのマッピング。
LOGIC_OPS = {
    0x0: _assign,
    0x1: _or,
    0x2: _and,
    0x3: _xor,
}

# @intent:responsibility 8XYN 命令を下位4bitで振り分けて実行します。
def execute_alu(cpu: "Chip8Cpu", op: Operation) -> None:
    state = cpu.state
    vx = state.v[op.x]
    vy = state.v[op.y]

    logic = LOGIC_OPS.get(op.n)
    if logic:
        state.v[op.x] = logic(vx, vy)
    elif op.n == 0x4:
        # ADD: VF = 1 iff the unsigned sum exceeds 0xFF
        _store_with_flag(state, op.x, op.y, 1 if vx + vy > 0xFF else 0, lambda a, b: a + b)
    elif op.n == 0x5:
        # SUB: VF = 0 on borrow, 1 otherwise
        _store_with_flag(state, op.x, op.y, 0 if vy > vx else 1, lambda a, b: a - b)
    elif op.n == 0x6:
        _store_with_flag(state, op.x, op.y, vx & 0x1, lambda a, b: a >> 1)
    elif op.n == 0x7:
        # SUBN: VX = VY - VX
        _store_with_flag(state, op.x, op.y, 0 if vx > vy else 1, lambda a, b: b - a)
    elif op.n == 0xE:
        _store_with_flag(state, op.x, op.y, vx >> 7, lambda a, b: a << 1)
    else:
        report_unknown(cpu, op)
        return

    advance(state)
