"""
共通の型定義を提供するモジュール。
コア、設定、UIなど複数のレイヤーで使用される汎用的な型エイリアスなどを定義します。
"""
from typing import Dict, List, NamedTuple

# @intent:data_structure ホスト側のキー名とキーパッド番号(0x0-0xF)を対応付ける辞書の型エイリアス。
# Config, UIのキー入力処理で共通して使用されます。
KeyMap = Dict[str, int]

# @intent:data_structure 単一のレジスタの表示定義。UIが動的にフィールドを生成するために使用される。
class RegisterInfo(NamedTuple):
    name: str
    width: int  # ビット幅 (8 or 16)

# @intent:data_structure レジスタグループの表示定義。関連するレジスタ（例: "General", "Pointers"）をまとめる。
class RegisterLayoutInfo(NamedTuple):
    group_name: str
    registers: List[RegisterInfo]
