# src/chip8_core/instructions/misc.py
"""
FXNN 命令（タイマー、キー入力待ち、インデックスレジスタ、BCD、レジスタ一括転送）の実装。
"""
from typing import TYPE_CHECKING

from chip8_core.core.snapshot import Operation
from chip8_core.core.state import GLYPH_SIZE, KEY_COUNT
from .base import advance, read_byte, report_unknown, write_byte

if TYPE_CHECKING:
    from chip8_core.core.cpu import Chip8Cpu

# --- FX07 ---
def execute_get_delay(cpu: "Chip8Cpu", op: Operation) -> None:
    cpu.state.v[op.x] = cpu.timers.get_delay()
    advance(cpu.state)

# --- FX0A ---
# @intent:responsibility キーが押されるまで待ち、最初に見つかったキー番号をVXに格納します。
# @intent:rationale ブロッキングはせず、押下キーがなければPCを進めずに戻ります。
#                  ホストが次のサイクルを呼ぶと同じ命令が再実行されます。
def execute_wait_key(cpu: "Chip8Cpu", op: Operation) -> None:
    for key in range(KEY_COUNT):
        if cpu.host.key_state(key):
            cpu.state.v[op.x] = key
            advance(cpu.state)
            return

# --- FX15 ---
def execute_set_delay(cpu: "Chip8Cpu", op: Operation) -> None:
    cpu.timers.set_delay(cpu.state.v[op.x])
    advance(cpu.state)

# --- FX18 ---
def execute_set_sound(cpu: "Chip8Cpu", op: Operation) -> None:
    cpu.timers.set_sound(cpu.state.v[op.x])
    advance(cpu.state)

# --- FX1E ---
# @intent:responsibility I に VX を加算します。オーバーフローフラグは変更しません。
def execute_add_index(cpu: "Chip8Cpu", op: Operation) -> None:
    cpu.state.i = (cpu.state.i + cpu.state.v[op.x]) & 0xFFFF
    advance(cpu.state)

# --- FX29 ---
# @intent:responsibility I を VX の下位4bitに対応するフォントグリフの先頭アドレスに設定します。
def execute_font_address(cpu: "Chip8Cpu", op: Operation) -> None:
    cpu.state.i = (cpu.state.v[op.x] & 0xF) * GLYPH_SIZE
    advance(cpu.state)

# --- FX33 ---
# @intent:responsibility VX の10進3桁（百、十、一の位）を I, I+1, I+2 に格納します。
def execute_store_bcd(cpu: "Chip8Cpu", op: Operation) -> None:
    state = cpu.state
    value = state.v[op.x]
    write_byte(state, state.i, value // 100)
    write_byte(state, state.i + 1, (value // 10) % 10)
    write_byte(state, state.i + 2, value % 10)
    advance(state)

# --- FX55 ---
# @intent:responsibility V0 から VX までを I から始まるメモリへ書き込みます。Iは変化しません。
def execute_store_registers(cpu: "Chip8Cpu", op: Operation) -> None:
    state = cpu.state
    for index in range(op.x + 1):
        write_byte(state, state.i + index, state.v[index])
    advance(state)

# --- FX65 ---
# @intent:responsibility I から始まるメモリを V0 から VX へ読み込みます。Iは変化しません。
def execute_load_registers(cpu: "Chip8Cpu", op: Operation) -> None:
    state = cpu.state
    for index in range(op.x + 1):
        state.v[index] = read_byte(state, state.i + index)
    advance(state)

# @intent:map 下位8bitから実行関数へのマッピングテーブル。
MISC_MAP = {
    0x07: execute_get_delay,
    0x0A: execute_wait_key,
    0x15: execute_set_delay,
    0x18: execute_set_sound,
    0x1E: execute_add_index,
    0x29: execute_font_address,
    0x33: execute_store_bcd,
    0x55: execute_store_registers,
    0x65: execute_load_registers,
}

# @intent:responsibility FXNN 命令を下位8bitで振り分けます。未知の組み合わせは報告してストールします。
def execute_misc(cpu: "Chip8Cpu", op: Operation) -> None:
    executor = MISC_MAP.get(op.nn)
    if executor:
        executor(cpu, op)
    else:
        report_unknown(cpu, op)
