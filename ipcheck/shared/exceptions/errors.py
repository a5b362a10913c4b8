"""カスタム例外定義"""


class IpCheckError(Exception):
    """ipcheck基底例外"""

    pass


class NetworkError(IpCheckError):
    """通信レベルのエラー（接続失敗、タイムアウト等）"""

    pass


class HttpStatusError(IpCheckError):
    """2xx以外のHTTPステータス"""

    def __init__(self, code: int, url: str = "") -> None:
        self.code = code
        self.url = url
        super().__init__(f"Unexpected response: {code}" + (f" ({url})" if url else ""))


class ProviderError(IpCheckError):
    """
    プロバイダー側の論理エラー

    本文で報告されたエラー（success=false）に加え、
    JSONとして解析できない・オブジェクトでない等の不正な本文もこの型で扱う。
    """

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Provider error: {detail}")


class StorageError(IpCheckError):
    """設定ファイル保存関連のエラー"""

    pass


class ConfigurationError(IpCheckError):
    """設定エラー"""

    pass
