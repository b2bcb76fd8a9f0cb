# src/chip8_core/ui/register_view.py
"""
CPUのレジスタとタイマーを表示する読み取り専用ウィジェット。
Chip8Cpuのレイアウト情報を利用して動的にUIを構築します。
"""
from typing import Dict, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QFontDatabase
from PySide6.QtWidgets import QFormLayout, QGridLayout, QGroupBox, QLabel, QVBoxLayout, QWidget

from chip8_core.core.cpu import Chip8Cpu

# 汎用レジスタは2列で並べる
GENERAL_COLUMNS = 2

# @intent:responsibility CPUのレジスタ値を表示するUIウィジェットを提供します。
class RegisterView(QWidget):
    """
    Chip8Cpu.get_register_layout() のグループ定義に従ってラベルを生成し、
    update_registers() で現在値に更新します。
    """
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setStyleSheet("background-color: #121212; color: #BBBBBB;")

        self._layout = QVBoxLayout(self)
        self._layout.setContentsMargins(5, 5, 5, 5)

        self._font_family = QFontDatabase.systemFont(QFontDatabase.FixedFont).family()
        self._register_labels: Dict[str, QLabel] = {}
        self._register_widths: Dict[str, int] = {}
        self._cpu: Optional[Chip8Cpu] = None

    # @intent:responsibility 表示対象のCPUを設定し、UIレイアウトを構築します。
    def set_cpu(self, cpu: Chip8Cpu) -> None:
        self._cpu = cpu
        self._setup_ui()
        self.update_registers()

    def _setup_ui(self):
        while self._layout.count():
            item = self._layout.takeAt(0)
            if item.widget():
                item.widget().deleteLater()
        self._register_labels.clear()
        self._register_widths.clear()

        for group in self._cpu.get_register_layout():
            group_box = QGroupBox(group.group_name)
            group_box.setStyleSheet("QGroupBox { font-weight: bold; color: #EEE; } QGroupBox::title { color: #00AAAA; }")

            if len(group.registers) > 4:
                grid = QGridLayout(group_box)
                for position, reg in enumerate(group.registers):
                    row, column = divmod(position, GENERAL_COLUMNS)
                    grid.addWidget(QLabel(f"{reg.name}:"), row, column * 2)
                    grid.addWidget(self._create_value_label(reg.name, reg.width), row, column * 2 + 1)
            else:
                form = QFormLayout(group_box)
                form.setLabelAlignment(Qt.AlignLeft)
                for reg in group.registers:
                    form.addRow(QLabel(f"{reg.name}:"), self._create_value_label(reg.name, reg.width))

            self._layout.addWidget(group_box)

        self._layout.addStretch()

    def _create_value_label(self, name: str, width: int) -> QLabel:
        hex_width = (width + 3) // 4 # 16bit -> 4chars, 8bit -> 2chars
        self._register_widths[name] = hex_width
        label_value = QLabel(f"0x{'0' * hex_width}")
        label_value.setObjectName(f"value_{name}")
        label_value.setStyleSheet(f"font-family: '{self._font_family}', monospace; color: #FFD700;")
        label_value.setAlignment(Qt.AlignRight)
        self._register_labels[name] = label_value
        return label_value

    # @intent:responsibility 現在のCPU状態を取得し、レジスタの表示値を更新します。
    def update_registers(self):
        if not self._cpu:
            return

        for name, value in self._cpu.get_register_map().items():
            if name in self._register_labels:
                width = self._register_widths[name]
                self._register_labels[name].setText(f"0x{value:0{width}X}")
