"""Makefile parser exceptions.

カスタム例外クラスを定義します。
"""


class ManifestLoadError(Exception):
    """makefile を読み込めない場合の例外.

    ファイルが存在しない/読めない、またはトップレベルのキー・値構造として
    解釈できない場合に送出します。行単位の内容の不備では送出しません。

    Attributes:
        path: 読み込み対象のファイルパス
        reason: 失敗理由
    """

    def __init__(self, path: str, reason: str) -> None:
        """例外初期化.

        Args:
            path: 読み込み対象のファイルパス
            reason: 失敗理由
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load makefile: {path} ({reason})")
