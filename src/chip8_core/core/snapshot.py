# src/chip8_core/core/snapshot.py
"""
デコード済み命令とサイクル結果の不変データ構造

命令語から切り出した各フィールドと、1サイクル実行の結果を記録します。
ホストへの情報提供と、停止（ストール）の検出に用いる責務を負います。
"""
from dataclasses import dataclass
from enum import IntEnum


# @intent:responsibility 命令語の上位4bitで選択される命令ファミリーの閉じた列挙を定義します。
class OpcodeFamily(IntEnum):
    SYSTEM = 0x0       # 00E0, 00EE
    JUMP = 0x1         # 1NNN
    CALL = 0x2         # 2NNN
    SKIP_EQ_IMM = 0x3  # 3XNN
    SKIP_NE_IMM = 0x4  # 4XNN
    SKIP_EQ_REG = 0x5  # 5XY0
    LOAD_IMM = 0x6     # 6XNN
    ADD_IMM = 0x7      # 7XNN
    ALU = 0x8          # 8XYN
    SKIP_NE_REG = 0x9  # 9XY0
    LOAD_INDEX = 0xA   # ANNN
    JUMP_V0 = 0xB      # BNNN
    RANDOM = 0xC       # CXNN
    DRAW = 0xD         # DXYN
    KEY_SKIP = 0xE     # EX9E, EXA1
    MISC = 0xF         # FXNN


# @intent:responsibility デコードされた1命令の内容を記録します。
@dataclass(frozen=True) # 不変データ構造
class Operation:
    """
    16bit命令語と、そこから切り出したオペランドフィールドを保持するデータクラス。
    """
    opcode: int           # 例: 0xD125
    family: OpcodeFamily  # 上位4bit
    x: int = 0            # 0x0F00 >> 8
    y: int = 0            # 0x00F0 >> 4
    n: int = 0            # 0x000F
    nn: int = 0           # 0x00FF
    nnn: int = 0          # 0x0FFF

    @property
    def opcode_hex(self) -> str:
        return f"{self.opcode:04X}"


# @intent:responsibility 1サイクルの実行結果を不変に記録します。
@dataclass(frozen=True) # 不変データ構造
class Snapshot:
    """
    1サイクルの実行結果。

    stalled はサイクルの前後でPCが動かなかったことを示します。未実装命令、キー入力待ち、
    スタック溢れのほか、自分自身へのジャンプでもTrueになります。
    """
    pc: int               # 命令をフェッチしたアドレス
    operation: Operation
    stalled: bool
    cycle_count: int      # リセット以降の累計サイクル数
