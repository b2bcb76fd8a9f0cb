# src/chip8_core/ui/display_view.py
"""
64x32 の表示バッファを拡大して描画するウィジェット。
"""
from typing import Iterator, Optional, Tuple

from PySide6.QtCore import QSize
from PySide6.QtGui import QColor, QPainter, QPaintEvent
from PySide6.QtWidgets import QWidget

from chip8_core.config.models import DisplayConfig
from chip8_core.core.state import DISPLAY_HEIGHT, DISPLAY_WIDTH

# @intent:responsibility 表示バッファの内容を保持し、点灯ピクセルを前景色の矩形として描画します。
class DisplayView(QWidget):
    def __init__(self, config: Optional[DisplayConfig] = None, parent=None):
        super().__init__(parent)
        config = config or DisplayConfig()
        self._scale = config.scale
        self._foreground = QColor(config.foreground)
        self._background = QColor(config.background)
        self._buffer = bytearray(DISPLAY_WIDTH * DISPLAY_HEIGHT)
        self.setMinimumSize(DISPLAY_WIDTH * 2, DISPLAY_HEIGHT * 2)

    def apply_config(self, config: DisplayConfig) -> None:
        self._scale = config.scale
        self._foreground = QColor(config.foreground)
        self._background = QColor(config.background)
        self.updateGeometry()
        self.update()

    def sizeHint(self) -> QSize:
        return QSize(DISPLAY_WIDTH * self._scale, DISPLAY_HEIGHT * self._scale)

    # @intent:responsibility 表示バッファをコピーして再描画を要求します。
    # @intent:rationale コアは次の命令でバッファを書き換えるため、通知を受けた時点で複製します。
    def update_display(self, buffer: bytes) -> None:
        self._buffer[:] = buffer
        self.update()

    # @intent:responsibility 点灯しているピクセルの座標(x, y)を行優先で列挙します。
    def lit_pixels(self) -> Iterator[Tuple[int, int]]:
        for index, pixel in enumerate(self._buffer):
            if pixel:
                yield index % DISPLAY_WIDTH, index // DISPLAY_WIDTH

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.fillRect(self.rect(), self._background)

        # ウィジェットのサイズに合わせて整数倍で拡大する
        scale = max(1, min(self.width() // DISPLAY_WIDTH, self.height() // DISPLAY_HEIGHT))
        offset_x = (self.width() - DISPLAY_WIDTH * scale) // 2
        offset_y = (self.height() - DISPLAY_HEIGHT * scale) // 2

        for x, y in self.lit_pixels():
            painter.fillRect(offset_x + x * scale, offset_y + y * scale, scale, scale, self._foreground)
        painter.end()
