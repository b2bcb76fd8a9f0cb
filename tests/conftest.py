# tests/conftest.py
"""
テスト共通のフィクスチャ。
呼び出しを記録する FakeHost と、それに接続した Chip8Cpu を提供します。
"""
import pytest

from chip8_core.core.cpu import Chip8Cpu
from chip8_core.core.host import HostInterface


class FakeHost(HostInterface):
    """
    描画/ブザー/ログの呼び出し回数を記録し、キー状態と乱数値を外部から設定できるホスト。
    """
    def __init__(self):
        self.render_count = 0
        self.beep_count = 0
        self.logs = []
        self.pressed = set()
        self.key_queries = []
        self.random_value = 0

    def render(self) -> None:
        self.render_count += 1

    def key_state(self, index: int) -> bool:
        self.key_queries.append(index)
        return index in self.pressed

    def beep(self) -> None:
        self.beep_count += 1

    def random_int(self) -> int:
        return self.random_value

    def log(self, level, location, message) -> None:
        self.logs.append((level, location, message))


@pytest.fixture
def host():
    return FakeHost()


@pytest.fixture
def cpu(host):
    return Chip8Cpu(host)


@pytest.fixture
def run_program(cpu):
    """
    命令語のリストを0x200からロードし、指定サイクル数だけ実行するヘルパー。
    """
    def _run(words, cycles=None):
        code = b"".join(word.to_bytes(2, "big") for word in words)
        cpu.load_code(code)
        snapshots = [cpu.step() for _ in range(len(words) if cycles is None else cycles)]
        return snapshots
    return _run


