# src/chip8_core/core/timers.py
"""
タイマーサブシステム

ディレイタイマーとサウンドタイマー（いずれも8bitのカウントダウンカウンタ）を管理します。
ホストは get/set をオーバーライドしたサブクラスを渡すことで、独自のタイマー源に差し替えられます。
"""
from typing import Callable


# @intent:responsibility 2つの独立した8bitタイマーの読み書きと、外部からのティックによる減算を提供します。
class Timers:
    """
    既定のタイマー実装。値は内部フィールドに保持されます。
    """
    def __init__(self, delay: int = 0, sound: int = 0):
        self._delay = delay & 0xFF
        self._sound = sound & 0xFF

    def get_delay(self) -> int:
        return self._delay

    def set_delay(self, value: int) -> None:
        self._delay = value & 0xFF

    def get_sound(self) -> int:
        return self._sound

    def set_sound(self, value: int) -> None:
        self._sound = value & 0xFF

    # @intent:responsibility タイマーを1ティック進めます。
    # @intent:pre-condition ホストが一定の周期（通常60Hz）で1回ずつ呼び出すこと。
    # @intent:post-condition 各タイマーは高々1だけ減り、0未満にはなりません。
    #                       サウンドタイマーが1から0になったティックでのみ on_sound_expired が1回呼ばれます。
    def tick(self, on_sound_expired: Callable[[], None]) -> None:
        """
        ディレイ、サウンドの各タイマーが0より大きければ1減らします。
        """
        delay = self.get_delay()
        sound = self.get_sound()

        if delay > 0:
            self.set_delay(delay - 1)

        if sound > 0:
            if sound == 1:
                on_sound_expired()
            self.set_sound(sound - 1)

    # @intent:responsibility 現在値をアクセサ経由で読み取り、独立したタイマーを生成します。
    # @intent:rationale 独自のタイマー源を持つサブクラスは、このメソッドをオーバーライドして源を共有できます。
    def clone(self) -> "Timers":
        return Timers(delay=self.get_delay(), sound=self.get_sound())
