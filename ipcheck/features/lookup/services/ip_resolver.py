"""IP情報解決サービス（フォールバック付き）"""

from typing import Callable, Optional

from ..domain.models import IpInfo
from ..providers.ipify_provider import IpifyProvider
from ..providers.ipwho_provider import IpWhoProvider
from ....infrastructure.config.settings import Settings
from ....shared.exceptions.errors import IpCheckError
from ....shared.http.client import HTTPClient
from ....shared.logging.config import get_logger

logger = get_logger(__name__)

ClientFactory = Callable[[], HTTPClient]


class IpResolver:
    """
    公開IPアドレスと位置情報を解決するサービス

    1. プライマリ（位置情報付き）エンドポイントに問い合わせ
    2. 失敗した場合のみフォールバック（IPのみ）エンドポイントに問い合わせ
    3. フォールバックも結果を返さなければプライマリのエラーを送出

    呼び出し間で状態を持たないため、複数スレッドから同時に呼び出してよい。
    """

    def __init__(
        self,
        primary_url: str,
        fallback_url: str,
        connect_timeout: float = 10.0,
        read_timeout: float = 10.0,
        user_agent: Optional[str] = None,
        client_factory: Optional[ClientFactory] = None,
    ) -> None:
        """
        Args:
            primary_url: プライマリエンドポイントURL
            fallback_url: フォールバックエンドポイントURL
            connect_timeout: 接続タイムアウト（秒）
            read_timeout: 読み込みタイムアウト（秒）
            user_agent: User-Agentヘッダー
            client_factory: 呼び出しごとにHTTPクライアントを生成する関数
        """
        self.primary = IpWhoProvider(primary_url)
        self.fallback = IpifyProvider(fallback_url)
        self.client_factory = client_factory or (
            lambda: HTTPClient(
                connect_timeout=connect_timeout,
                read_timeout=read_timeout,
                user_agent=user_agent,
            )
        )

        logger.debug(
            f"IpResolver initialized: primary={primary_url}, fallback={fallback_url}, "
            f"timeout=({connect_timeout}s, {read_timeout}s)"
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "IpResolver":
        """設定からリゾルバーを作成"""
        connect_timeout, read_timeout = settings.timeout
        return cls(
            primary_url=settings.primary_url,
            fallback_url=settings.fallback_url,
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
            user_agent=settings.user_agent,
        )

    def resolve(self) -> IpInfo:
        """
        IP情報を解決

        Returns:
            IpInfo: 解決したIP情報（フォールバック時はIPのみ）

        Raises:
            NetworkError: プライマリの通信に失敗し、フォールバックも結果なし
            HttpStatusError: プライマリが2xx以外を返し、フォールバックも結果なし
            ProviderError: プライマリがエラーを報告し、フォールバックも結果なし
        """
        with self.client_factory() as client:
            try:
                return self.primary.fetch(client)
            except IpCheckError as primary_error:
                logger.warning(f"Primary lookup failed: {primary_error}")

                fallback_info = self._fetch_fallback(client)
                if fallback_info is None:
                    raise

                logger.info(f"Fallback lookup succeeded: ip={fallback_info.ip}")
                return fallback_info

    def _fetch_fallback(self, client: HTTPClient) -> Optional[IpInfo]:
        """
        フォールバックに問い合わせる（例外は送出しない）

        Returns:
            Optional[IpInfo]: IPのみのレコード（取得できない場合はNone）
        """
        try:
            info = self.fallback.fetch(client)
        except Exception as e:
            logger.warning(f"Fallback lookup failed: {e}")
            return None

        if info is None:
            logger.warning("Fallback lookup returned a blank IP")
        return info
