# src/chip8_core/instructions/maps.py
"""
命令ファミリーと命令実装のマッピング定義。
"""
from chip8_core.core.snapshot import OpcodeFamily
from . import alu
from . import control
from . import display
from . import load
from . import misc
from . import skip

# @intent:map 命令ファミリーから実行関数へのマッピングテーブル。
EXECUTE_MAP = {
    # Control
    OpcodeFamily.SYSTEM: control.execute_system,
    OpcodeFamily.JUMP: control.execute_jump,
    OpcodeFamily.CALL: control.execute_call,
    OpcodeFamily.JUMP_V0: control.execute_jump_v0,

    # Skip
    OpcodeFamily.SKIP_EQ_IMM: skip.execute_skip_eq_imm,
    OpcodeFamily.SKIP_NE_IMM: skip.execute_skip_ne_imm,
    OpcodeFamily.SKIP_EQ_REG: skip.execute_skip_eq_reg,
    OpcodeFamily.SKIP_NE_REG: skip.execute_skip_ne_reg,
    OpcodeFamily.KEY_SKIP: skip.execute_key_skip,

    # Load
    OpcodeFamily.LOAD_IMM: load.execute_load_imm,
    OpcodeFamily.ADD_IMM: load.execute_add_imm,
    OpcodeFamily.LOAD_INDEX: load.execute_load_index,
    OpcodeFamily.RANDOM: load.execute_random,

    # ALU
    OpcodeFamily.ALU: alu.execute_alu,

    # Display
    OpcodeFamily.DRAW: display.execute_draw,

    # Timers / Memory
    OpcodeFamily.MISC: misc.execute_misc,
}

# @intent:invariant 全ての命令ファミリーに実行関数が割り当てられていること。
_missing = set(OpcodeFamily) - set(EXECUTE_MAP)
if _missing:
    raise RuntimeError(f"No handler for opcode families: {sorted(f.name for f in _missing)}")
