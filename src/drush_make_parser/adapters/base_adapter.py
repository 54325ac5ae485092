"""makefile 読み込み用アダプタ（基底クラス）.

makefile の取得元（ローカルファイルなど）を共通インターフェースで扱うための
抽象基底クラスを定義します。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class MakefileSource:
    """パーサーへ渡す makefile の内容.

    Attributes:
        path: 読み込んだファイルのパス
        text: 行走査用の全文
        top_level: セクション外（先頭）のキー・値（例: {"core": "7.x", "api": "2"}）
    """

    path: Path
    text: str
    top_level: dict[str, str] = field(default_factory=dict)


class BaseAdapter(ABC):
    """入力アダプタの基底クラス.

    全ての makefile アダプタはこのクラスを継承し、read()/validate() を実装します。
    """

    @abstractmethod
    def read(self) -> MakefileSource:
        """makefile を読み込み、全文とトップレベルのキー・値を返す.

        Raises:
            ManifestLoadError: ファイルを読めない、またはキー・値構造として解釈できない場合
        """
        ...

    @abstractmethod
    def validate(self, source: MakefileSource) -> bool:
        """読み込んだ内容の整合性を検証する."""
        ...
