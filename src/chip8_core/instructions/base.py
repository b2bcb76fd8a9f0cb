# src/chip8_core/instructions/base.py
"""
CHIP-8命令実装用の共通ユーティリティ。
"""
import inspect
import os
from typing import TYPE_CHECKING

from chip8_core.core.host import LogLevel
from chip8_core.core.snapshot import Operation
from chip8_core.core.state import Chip8State, MEMORY_SIZE

if TYPE_CHECKING:
    from chip8_core.core.cpu import Chip8Cpu

ADDRESS_MASK = MEMORY_SIZE - 1

# @intent:utility_function PCを次の命令へ進めます。
def advance(state: Chip8State, count: int = 1) -> None:
    state.pc = (state.pc + 2 * count) & 0xFFFF

# @intent:utility_function 条件が成立すれば次の命令を読み飛ばし(PC+4)、そうでなければPC+2とします。
def skip_if(state: Chip8State, condition: bool) -> None:
    advance(state, 2 if condition else 1)

# @intent:utility_function メモリを4096バイトで折り返してアクセスします。
def read_byte(state: Chip8State, addr: int) -> int:
    return state.memory[addr & ADDRESS_MASK]

def write_byte(state: Chip8State, addr: int, value: int) -> None:
    state.memory[addr & ADDRESS_MASK] = value & 0xFF

# @intent:utility_function depth段上の呼び出し元を "ファイル名:行番号" 形式で返します。
def _caller_location(depth: int) -> str:
    frame = inspect.currentframe()
    for _ in range(depth):
        frame = frame.f_back
    return f"{os.path.basename(frame.f_code.co_filename)}:{frame.f_lineno}"

# @intent:utility_function 呼び出し元の位置を付けてホストのログへ転送します。
def report(cpu: "Chip8Cpu", level: LogLevel, message: str) -> None:
    cpu.host.log(level, _caller_location(2), message)

# @intent:utility_function 未実装・未知の命令を報告します。PCは進めません（ストール）。
def report_unknown(cpu: "Chip8Cpu", op: Operation) -> None:
    cpu.host.log(LogLevel.ERROR, _caller_location(2), f"Unknown opcode: 0x{op.opcode_hex} at 0x{cpu.state.pc:03X}")
