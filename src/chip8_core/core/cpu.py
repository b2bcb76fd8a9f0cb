# src/chip8_core/core/cpu.py
"""
Core Layer (CHIP-8 CPU)

このモジュールは、マシン状態の管理と命令サイクル（フェッチ→デコード→実行）の駆動を提供します。
具体的な命令の振る舞いはInstruction Layerに移譲されます。
"""
from typing import Dict, List, Optional

from chip8_core.common.types import RegisterInfo, RegisterLayoutInfo
from chip8_core.core.host import HostInterface, LogLevel
from chip8_core.core.snapshot import Operation, Snapshot
from chip8_core.core.state import Chip8State, MEMORY_SIZE, PROGRAM_START
from chip8_core.core.timers import Timers
from chip8_core.instructions import decode_opcode, execute_instruction
from chip8_core.instructions.base import report

# @intent:responsibility CHIP-8の状態と命令サイクル、タイマーティックを管理します。
class Chip8Cpu:
    """
    CHIP-8仮想マシンのCPU。

    ホストは `step()` を命令実行レートで、`timer_tick()` を別の固定レート（通常60Hz）で
    呼び出します。内部にスレッドやタイマー割り込みは持ちません。
    """
    # @intent:responsibility マシン状態を初期化し、ホスト機能への参照を保持します。
    # @intent:pre-condition `host`はHostInterfaceを実装している必要があります。
    def __init__(self, host: HostInterface, timers: Optional[Timers] = None):
        self._host = host
        self._timers: Timers = timers if timers is not None else Timers()
        self._state: Chip8State = self._create_initial_state()
        self._cycle_count: int = 0
        # @intent:rationale Stateオブジェクトはプロパティ経由で公開し、命令ハンドラが直接書き換えます。

    @property
    def state(self) -> Chip8State:
        return self._state

    @property
    def host(self) -> HostInterface:
        return self._host

    @property
    def timers(self) -> Timers:
        return self._timers

    @property
    def cycle_count(self) -> int:
        return self._cycle_count

    # @intent:responsibility 初期状態（フォントのみロード済み、PC=0x200）を生成します。
    def _create_initial_state(self) -> Chip8State:
        return Chip8State()

    # @intent:responsibility CPUをリセットし、初期状態に戻します。ロード済みのプログラムも消去されます。
    def reset(self) -> None:
        self._state = self._create_initial_state()
        self._timers.set_delay(0)
        self._timers.set_sound(0)
        self._cycle_count = 0

    # @intent:responsibility 現在のCPUの状態を返します。
    def get_state(self) -> Chip8State:
        return self._state

    # @intent:responsibility 外部から保存済みの状態を復元します。
    def restore_state(self, state: Chip8State) -> None:
        self._state = state.clone()

    # @intent:responsibility 同じ値を持つ独立したCPUを生成します。
    # @intent:post-condition 複製先のタイマー値はアクセサ経由で読んだ値になり、
    #                       ホスト機能は複製元のものに置き換えられます（マージはしません）。
    def copy(self) -> "Chip8Cpu":
        duplicate = Chip8Cpu(self._host, timers=self._timers.clone())
        duplicate._state = self._state.clone()
        duplicate._cycle_count = self._cycle_count
        return duplicate

    # @intent:responsibility プログラムイメージを0x200からメモリへコピーします。
    # @intent:pre-condition len(code) + 0x200 <= 4096 であること。命令の妥当性は検査しません。
    def load_code(self, code: bytes) -> None:
        """
        バイト列をそのまま0x200以降に配置します。
        """
        end = PROGRAM_START + len(code)
        self._state.memory[PROGRAM_START:end] = code
        report(self, LogLevel.INFO, f"Loaded {len(code)} bytes at 0x{PROGRAM_START:03X}")

    # @intent:responsibility 現在のPCから2バイトをビッグエンディアンで読み、命令語を返します。
    def _fetch(self) -> int:
        memory = self._state.memory
        pc = self._state.pc
        return (memory[pc % MEMORY_SIZE] << 8) | memory[(pc + 1) % MEMORY_SIZE]

    def _decode(self, opcode: int) -> Operation:
        return decode_opcode(opcode)

    def _execute(self, operation: Operation) -> None:
        execute_instruction(operation, self)

    # @intent:responsibility CPUを1命令サイクル進め、その結果のスナップショットを返します。
    # @intent:rationale PCの更新は命令ハンドラの責務とし、ここでは行いません。
    #                  PCが進まなかったサイクルはストールとしてSnapshotに記録されます。
    def step(self) -> Snapshot:
        """
        1サイクル（フェッチ→デコード→実行）を実行します。
        """
        initial_pc = self._state.pc

        opcode = self._fetch()
        operation = self._decode(opcode)
        self._execute(operation)

        self._cycle_count += 1
        return Snapshot(
            pc=initial_pc,
            operation=operation,
            stalled=self._state.pc == initial_pc,
            cycle_count=self._cycle_count,
        )

    def exec_cycle(self) -> None:
        self.step()

    # @intent:responsibility ディレイ/サウンドタイマーを1ティック進めます。
    def timer_tick(self) -> None:
        self._timers.tick(self._host.beep)

    # @intent:responsibility UI表示用に、現在のレジスタ値を辞書形式で提供します。
    def get_register_map(self) -> Dict[str, int]:
        s = self._state
        registers = {f"V{index:X}": value for index, value in enumerate(s.v)}
        registers.update({
            "I": s.i, "PC": s.pc, "SP": s.sp,
            "DT": self._timers.get_delay(), "ST": self._timers.get_sound(),
        })
        return registers

    # @intent:responsibility UIのレジスタ表示レイアウト（グループ化）を定義します。
    def get_register_layout(self) -> List[RegisterLayoutInfo]:
        return [
            RegisterLayoutInfo("General", [RegisterInfo(f"V{index:X}", 8) for index in range(16)]),
            RegisterLayoutInfo("Pointers", [
                RegisterInfo("I", 16), RegisterInfo("PC", 16), RegisterInfo("SP", 16)
            ]),
            RegisterLayoutInfo("Timers", [
                RegisterInfo("DT", 8), RegisterInfo("ST", 8)
            ]),
        ]
