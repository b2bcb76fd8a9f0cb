# src/chip8_core/instructions/__init__.py
"""
CHIP-8命令セット実装パッケージ。
"""
from typing import TYPE_CHECKING

from chip8_core.core.snapshot import OpcodeFamily, Operation
from .maps import EXECUTE_MAP

if TYPE_CHECKING:
    from chip8_core.core.cpu import Chip8Cpu

# @intent:responsibility 16bit命令語をデコードします。
def decode_opcode(opcode: int) -> Operation:
    """
    命令語からファミリーと各オペランドフィールドを切り出し、Operationオブジェクトを返します。
    """
    opcode &= 0xFFFF
    return Operation(
        opcode=opcode,
        family=OpcodeFamily(opcode >> 12),
        x=(opcode & 0x0F00) >> 8,
        y=(opcode & 0x00F0) >> 4,
        n=opcode & 0x000F,
        nn=opcode & 0x00FF,
        nnn=opcode & 0x0FFF,
    )

# @intent:responsibility デコードされた命令を実行します。
def execute_instruction(operation: Operation, cpu: "Chip8Cpu") -> None:
    """
    命令ファミリーに対応するハンドラを呼び出します。PCの更新はハンドラの責務です。
    """
    EXECUTE_MAP[operation.family](cpu, operation)
