# src/chip8_core/ui/window_host.py
"""
ウィンドウアプリケーション用のホスト機能実装。
"""
import logging
import random
from typing import Callable, Optional

from chip8_core.core.host import HostInterface, LogLevel
from .keypad import Keypad

core_logger = logging.getLogger("chip8_core")

# @intent:map コアのLogLevelから標準loggingのレベルへの対応表。
LOGGING_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.FATAL: logging.CRITICAL,
}

# @intent:responsibility キーパッド、描画/ブザーのコールバック、乱数源を束ねてHostInterfaceとして提供します。
# @intent:rationale Qtのシグナルに依存させず、コールバックで受け渡すことでQObjectとABCの
#                  メタクラス衝突を避け、UIなしでもテストできるようにします。
class WindowHost(HostInterface):
    def __init__(self,
                 keypad: Keypad,
                 on_render: Callable[[], None],
                 on_beep: Callable[[], None],
                 seed: Optional[int] = None):
        self._keypad = keypad
        self._on_render = on_render
        self._on_beep = on_beep
        self._rng = random.Random(seed)

    def render(self) -> None:
        self._on_render()

    def key_state(self, index: int) -> bool:
        return self._keypad.is_pressed(index)

    def beep(self) -> None:
        self._on_beep()

    def random_int(self) -> int:
        return self._rng.randrange(0x8000)

    # @intent:responsibility コアの診断メッセージを "chip8_core" ロガーへ転送します。
    def log(self, level: LogLevel, location: str, message: str) -> None:
        core_logger.log(LOGGING_LEVELS[level], "[%s] %s", location, message)
