# src/chip8_core/ui/main_window.py
"""
メインウィンドウの実装。
表示ウィジェットとレジスタビューを保持し、命令サイクルとタイマーティックを
2つの QTimer で駆動します。
"""
import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QEvent, QTimer, Qt, Slot
from PySide6.QtGui import QAction, QCloseEvent, QColor, QKeyEvent, QKeySequence, QPalette
from PySide6.QtWidgets import QApplication, QDockWidget, QFileDialog, QMainWindow, QMessageBox, QToolBar

from chip8_core.config.builder import MachineBuilder
from chip8_core.config.loader import ConfigLoader
from chip8_core.config.models import MachineConfig
from chip8_core.core.cpu import Chip8Cpu
from chip8_core.core.snapshot import OpcodeFamily, Snapshot
from .display_view import DisplayView
from .keypad import Keypad, KeyMapper
from .register_view import RegisterView
from .window_host import WindowHost

logger = logging.getLogger(__name__)

# 命令サイクル用タイマーの周期(ms)。1周期あたりに cycles_per_second に見合う命令数を実行する。
CYCLE_INTERVAL_MS = 16
# 同一アドレスでこの回数連続してPCが進まなければステータスバーに表示する
STALL_THRESHOLD = 120

# @intent:utility_function 1回のタイマー周期で実行する命令数を計算します。
def cycles_per_slice(cycles_per_second: int, interval_ms: int = CYCLE_INTERVAL_MS) -> int:
    return max(1, round(cycles_per_second * interval_ms / 1000))

# @intent:utility_function タイマーティックの周期(ms)を計算します。
def tick_interval_ms(timer_hz: int) -> int:
    return max(1, round(1000 / timer_hz))

# @intent:utility_function ストールしたサイクルがキー入力待ち(FX0A)によるものかを判定します。
def is_key_wait(snapshot: Snapshot) -> bool:
    op = snapshot.operation
    return op.family == OpcodeFamily.MISC and op.nn == 0x0A


# @intent:responsibility アプリケーションのメインウィンドウを定義し、UIとエミュレーションループを組み立てます。
class MainWindow(QMainWindow):
    """
    アプリケーションのメインウィンドウクラス。
    """
    def __init__(self, config: Optional[MachineConfig] = None, parent=None):
        super(MainWindow, self).__init__(parent)
        self._config = config or MachineConfig()
        self.setWindowTitle("CHIP-8 Core")

        self.keypad = Keypad()
        self._key_mapper = KeyMapper(self._config.keymap)
        self._stall_pc = None
        self._stall_count = 0

        self.display_view = DisplayView(self._config.display)
        self.setCentralWidget(self.display_view)

        self._set_dark_theme()
        self._create_register_dock()
        self._create_toolbar()
        self._create_menus()
        self._create_timers()

        self._setup_backend()
        self._update_ui_state(False)

    # @intent:responsibility 設定に基づいてCPUを生成し、ビューに接続します。
    # @intent:rationale プログラムのロードに失敗しても空のマシンで起動を継続し、エラーはログに残します。
    def _setup_backend(self) -> Optional[str]:
        self.host = WindowHost(
            self.keypad,
            on_render=self._refresh_display,
            on_beep=QApplication.beep,
            seed=self._config.random_seed,
        )
        error = None
        try:
            self.cpu = MachineBuilder().build_machine(self._config, self.host)
        except (OSError, ValueError) as e:
            logger.error("Failed to load program image: %s", e)
            error = str(e)
            self.cpu = Chip8Cpu(self.host)

        self.load_error = error
        self._stall_pc = None
        self._stall_count = 0
        self.register_view.set_cpu(self.cpu)
        self._refresh_display()
        if error:
            self.statusBar().showMessage(f"Failed to load program image: {error}")
        elif self._config.rom_path:
            self.statusBar().showMessage(f"Loaded {Path(self._config.rom_path).name}")
        return error

    def _create_timers(self):
        self.cycle_timer = QTimer(self)
        self.cycle_timer.setInterval(CYCLE_INTERVAL_MS)
        self.cycle_timer.timeout.connect(self._run_slice)

        self.tick_timer = QTimer(self)
        self.tick_timer.setInterval(tick_interval_ms(self._config.timer_hz))
        self.tick_timer.timeout.connect(self._timer_tick)

    def _create_menus(self):
        file_menu = self.menuBar().addMenu("File")

        self.load_rom_action = QAction("Load ROM...", self)
        self.load_rom_action.setShortcut("Ctrl+O")
        self.load_rom_action.triggered.connect(self._load_rom_file)
        file_menu.addAction(self.load_rom_action)

        self.load_config_action = QAction("Load Config...", self)
        self.load_config_action.triggered.connect(self._load_config_file)
        file_menu.addAction(self.load_config_action)

    # @intent:responsibility 実行制御用のツールバーを作成します。
    def _create_toolbar(self):
        toolbar = QToolBar("Main Toolbar")
        toolbar.setFocusPolicy(Qt.NoFocus)
        self.addToolBar(toolbar)

        self.run_action = QAction("Run", self)
        self.run_action.triggered.connect(self._run)
        toolbar.addAction(self.run_action)

        self.pause_action = QAction("Pause", self)
        self.pause_action.triggered.connect(self._pause)
        toolbar.addAction(self.pause_action)

        self.step_action = QAction("Step", self)
        self.step_action.triggered.connect(self._step)
        toolbar.addAction(self.step_action)

        self.reset_action = QAction("Reset", self)
        self.reset_action.triggered.connect(self._reset)
        toolbar.addAction(self.reset_action)

    def _create_register_dock(self):
        dock = QDockWidget("Registers", self)
        dock.setAllowedAreas(Qt.RightDockWidgetArea)
        self.register_view = RegisterView()
        dock.setWidget(self.register_view)
        self.addDockWidget(Qt.RightDockWidgetArea, dock)

    def is_running(self) -> bool:
        return self.cycle_timer.isActive()

    # @intent:responsibility 実行状態に応じてUIコンポーネントの有効/無効を切り替えます。
    def _update_ui_state(self, is_running: bool):
        self.run_action.setEnabled(not is_running)
        self.step_action.setEnabled(not is_running)
        self.pause_action.setEnabled(is_running)

    @Slot()
    def _run(self):
        self.cycle_timer.start()
        self.tick_timer.start()
        self._update_ui_state(True)

    @Slot()
    def _pause(self):
        self.cycle_timer.stop()
        self.tick_timer.stop()
        self._update_ui_state(False)
        self.register_view.update_registers()

    @Slot()
    def _step(self):
        self._observe(self.cpu.step())
        self.register_view.update_registers()

    # @intent:responsibility 設定されたプログラムを再ロードして初期状態から再開できるようにします。
    @Slot()
    def _reset(self) -> Optional[str]:
        was_running = self.is_running()
        self._pause()
        error = self._setup_backend()
        if was_running and error is None:
            self._run()
        return error

    # @intent:responsibility 1タイマー周期分の命令を実行します。
    @Slot()
    def _run_slice(self):
        for _ in range(cycles_per_slice(self._config.cycles_per_second)):
            snapshot = self.cpu.step()
            self._observe(snapshot)
            if snapshot.stalled:
                # 同じ命令を繰り返すだけなので、残りは次の周期に回す
                break
        self.register_view.update_registers()

    @Slot()
    def _timer_tick(self):
        self.cpu.timer_tick()

    # @intent:responsibility 同一アドレスでの連続ストールを検出し、ステータスバーに通知します。
    def _observe(self, snapshot: Snapshot) -> None:
        if not snapshot.stalled:
            self._stall_pc = None
            self._stall_count = 0
            return

        if snapshot.pc == self._stall_pc:
            self._stall_count += 1
        else:
            self._stall_pc = snapshot.pc
            self._stall_count = 1

        if is_key_wait(snapshot):
            self.statusBar().showMessage("Waiting for key...")
        elif self._stall_count == STALL_THRESHOLD:
            message = f"Stalled at 0x{snapshot.pc:03X} (opcode 0x{snapshot.operation.opcode_hex})"
            logger.warning(message)
            self.statusBar().showMessage(message)

    def _refresh_display(self):
        self.display_view.update_display(self.cpu.state.display)

    @Slot()
    def _load_rom_file(self):
        file_name, _ = QFileDialog.getOpenFileName(
            self, "Open Program Image", "", "CHIP-8 Programs (*.ch8 *.c8 *.hex *.ihx);;All Files (*)")
        if file_name:
            self._config.rom_path = Path(file_name)
            error = self._reset()
            if error:
                QMessageBox.critical(self, "Error", f"Failed to load program image: {error}")

    @Slot()
    def _load_config_file(self):
        file_name, _ = QFileDialog.getOpenFileName(
            self, "Open Config", "", "YAML Files (*.yaml *.yml);;All Files (*)")
        if file_name:
            try:
                self.apply_config(ConfigLoader().load_from_file(file_name))
            except (OSError, ValueError) as e:
                QMessageBox.critical(self, "Error", f"Failed to load config: {e}")

    # @intent:responsibility 新しい設定を適用し、マシンを再構築します。
    def apply_config(self, config: MachineConfig) -> None:
        self._config = config
        self._key_mapper = KeyMapper(config.keymap)
        self.tick_timer.setInterval(tick_interval_ms(config.timer_hz))
        self.display_view.apply_config(config.display)
        logging.getLogger().setLevel(config.log_level)
        self._reset()

    def keyPressEvent(self, event: QKeyEvent):
        index = self._key_mapper.lookup(QKeySequence(event.key()).toString())
        if index is None:
            super().keyPressEvent(event)
            return
        if not event.isAutoRepeat():
            self.keypad.press(index)

    def keyReleaseEvent(self, event: QKeyEvent):
        index = self._key_mapper.lookup(QKeySequence(event.key()).toString())
        if index is None:
            super().keyReleaseEvent(event)
            return
        if not event.isAutoRepeat():
            self.keypad.release(index)

    # @intent:responsibility ウィンドウが非アクティブになったら押下中のキーを全て離します。
    def changeEvent(self, event: QEvent):
        if event.type() == QEvent.ActivationChange and not self.isActiveWindow():
            self.keypad.release_all()
        super().changeEvent(event)

    def _set_dark_theme(self):
        dark_palette = QPalette()
        dark_palette.setColor(QPalette.Window, QColor(29, 29, 29))
        dark_palette.setColor(QPalette.WindowText, QColor(224, 224, 224))
        dark_palette.setColor(QPalette.Base, QColor(30, 30, 30))
        dark_palette.setColor(QPalette.Button, QColor(53, 53, 53))
        dark_palette.setColor(QPalette.ButtonText, QColor(224, 224, 224))
        dark_palette.setColor(QPalette.Highlight, QColor(42, 130, 218))
        QApplication.setPalette(dark_palette)

    # @intent:responsibility ウィンドウが閉じられる際に駆動タイマーを停止します。
    def closeEvent(self, event: QCloseEvent):
        self.cycle_timer.stop()
        self.tick_timer.stop()
        event.accept()
