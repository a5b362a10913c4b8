"""HTTPクライアント"""

from typing import Any, Optional

import requests

from ..exceptions.errors import HttpStatusError, NetworkError, ProviderError
from ..logging.config import get_logger

logger = get_logger(__name__)

DEFAULT_USER_AGENT = "ipcheck/1.0 (+https://github.com/seefa/ipcheck)"


class HTTPClient:
    """
    JSON取得用HTTPクライアント

    Features:
    - 接続・読み込みタイムアウトを個別に設定
    - セッション管理（コンテキストマネージャーでクローズ）
    - レスポンスは成功・失敗に関わらず必ずクローズ

    リトライは行わない（フォールバックは呼び出し側の責務）。
    """

    def __init__(
        self,
        connect_timeout: float = 10.0,
        read_timeout: float = 10.0,
        user_agent: Optional[str] = None,
    ) -> None:
        """
        Args:
            connect_timeout: 接続タイムアウト（秒）
            read_timeout: 読み込みタイムアウト（秒）
            user_agent: User-Agentヘッダー
        """
        self.timeout = (connect_timeout, read_timeout)
        self.user_agent = user_agent or DEFAULT_USER_AGENT

        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        """セッションを作成"""
        session = requests.Session()
        session.headers.update(
            {
                "User-Agent": self.user_agent,
                "Accept": "application/json",
            }
        )
        return session

    def get_json(self, url: str, params: Optional[dict[str, Any]] = None) -> Any:
        """
        GETリクエストを送信し、JSON本文を返す

        Args:
            url: リクエストURL
            params: クエリパラメータ

        Returns:
            デコード済みのJSON値

        Raises:
            NetworkError: 通信に失敗した場合
            HttpStatusError: ステータスが200〜299以外の場合
            ProviderError: 本文がJSONとして解析できない場合（不正な本文全般をこの型で扱う）
        """
        logger.debug(f"GET request to {url}")
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.debug(f"GET request failed: {url} - {e}")
            raise NetworkError(f"Failed to GET {url}: {e}") from e

        with response:
            if not 200 <= response.status_code <= 299:
                raise HttpStatusError(response.status_code, url)

            try:
                payload = response.json()
            except ValueError as e:
                # requests.JSONDecodeErrorはValueErrorのサブクラス
                raise ProviderError("Malformed response body") from e

        logger.debug(f"GET request successful: {url} (status={response.status_code})")
        return payload

    def close(self) -> None:
        """セッションをクローズ"""
        if self.session:
            self.session.close()
            logger.debug("HTTP session closed")

    def __enter__(self) -> "HTTPClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
