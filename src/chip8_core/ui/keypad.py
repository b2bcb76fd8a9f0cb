# src/chip8_core/ui/keypad.py
"""
16キーのキーパッド状態と、ホスト側キー名からキーパッド番号への対応付け。
Qtに依存しないため、UIなしでもテストできます。
"""
from typing import List, Optional

from chip8_core.common.types import KeyMap
from chip8_core.core.state import KEY_COUNT

# @intent:responsibility 各キー(0x0-0xF)の押下状態を保持します。
class Keypad:
    def __init__(self):
        self._pressed: List[bool] = [False] * KEY_COUNT

    def press(self, index: int) -> None:
        self._pressed[index] = True

    def release(self, index: int) -> None:
        self._pressed[index] = False

    # @intent:responsibility ウィンドウがフォーカスを失った時などに全キーを離します。
    def release_all(self) -> None:
        self._pressed = [False] * KEY_COUNT

    # @intent:pre-condition 範囲外の番号は「押されていない」として扱います。
    def is_pressed(self, index: int) -> bool:
        if not 0 <= index < KEY_COUNT:
            return False
        return self._pressed[index]

# @intent:responsibility ホストのキー名（"Q", "1" など）をキーパッド番号に変換します。
class KeyMapper:
    def __init__(self, keymap: KeyMap):
        self._keymap = {name.upper(): index for name, index in keymap.items()}

    def lookup(self, key_name: str) -> Optional[int]:
        if not key_name:
            return None
        return self._keymap.get(key_name.upper())
