# src/chip8_core/core/host.py
"""
ホスト機能インターフェース

コアが呼び出すが自身では実装しない機能（描画通知、キー状態の問い合わせ、
ブザー通知、乱数源、ログ出力）を抽象化します。
具体的な実装は組み込み先のアプリケーションが提供します。
"""
import random
from abc import ABC, abstractmethod
from enum import IntEnum


# @intent:responsibility ログの重要度を定義します。
class LogLevel(IntEnum):
    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4


# @intent:responsibility コアが利用するホスト機能の抽象インターフェースを定義します。
# @intent:rationale key_stateのみ既定の実装を持ちません。キー入力を使う命令があるプログラムでは
#                  ホストが必ず提供する必要があるためです。その他は何もしない既定動作を持ちます。
class HostInterface(ABC):
    """
    ホストアプリケーションが提供する機能の集合。
    コアはこのインターフェースへの参照のみを保持し、実装を所有しません。
    """

    # @intent:responsibility 表示バッファが更新されたことをホストに通知します。
    def render(self) -> None:
        """
        表示バッファを変更する命令（画面クリア、スプライト描画）の後に呼ばれます。
        ホストは次の変更が行われる前にバッファを読み取ることが期待されます。
        """
        pass

    # @intent:responsibility 指定されたキー(0x0-0xF)が押されているかを返します。
    @abstractmethod
    def key_state(self, index: int) -> bool:
        """
        キーパッドの指定されたキーが押下中であればTrueを返します。副作用を持ってはいけません。
        """
        pass

    # @intent:responsibility サウンドタイマーが0に到達したことをホストに通知します。
    def beep(self) -> None:
        pass

    # @intent:responsibility 乱数を返します。
    def random_int(self) -> int:
        """
        非負の整数を返します。既定はシード指定のない標準の擬似乱数源です。
        再現性が必要な場合はホストがシード付きの乱数源を提供してください。
        """
        return random.randrange(0x8000)

    # @intent:responsibility コアからの診断メッセージを受け取ります。既定は破棄します。
    def log(self, level: LogLevel, location: str, message: str) -> None:
        pass
