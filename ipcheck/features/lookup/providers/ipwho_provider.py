"""ipwho.is 形式のIPジオロケーションプロバイダー（プライマリ）"""
from typing import Any

from ..domain.models import IpInfo
from ....shared.exceptions.errors import ProviderError
from ....shared.http.client import HTTPClient
from ....shared.logging.config import get_logger
from ....shared.utils.json_fields import opt_bool, opt_float, opt_object, opt_string

logger = get_logger(__name__)

UNKNOWN_ERROR = "Unknown error"


class IpWhoProvider:
    """位置情報付きでIPを返すプロバイダー"""

    def __init__(self, url: str) -> None:
        """
        Args:
            url: エンドポイントURL
        """
        self.url = url

    def fetch(self, client: HTTPClient) -> IpInfo:
        """
        IP情報を取得

        Args:
            client: HTTPクライアント

        Returns:
            IpInfo: 取得したIP情報

        Raises:
            NetworkError: 通信に失敗した場合
            HttpStatusError: ステータスが2xx以外の場合
            ProviderError: プロバイダーがエラーを報告した場合
        """
        payload = client.get_json(self.url)
        info = parse_ipwho_payload(payload)
        logger.debug(f"Primary lookup succeeded: ip={info.ip}")
        return info


def parse_ipwho_payload(payload: Any) -> IpInfo:
    """
    レスポンス本文をIpInfoに変換

    successが無い場合は成功として扱う。

    Raises:
        ProviderError: 本文がオブジェクトでない場合、またはsuccessがfalseの場合
    """
    if not isinstance(payload, dict):
        raise ProviderError("Malformed response body")

    if not opt_bool(payload, "success", default=True):
        reason = opt_string(payload, "message")
        raise ProviderError(reason if reason.strip() else UNKNOWN_ERROR)

    timezone = opt_object(payload, "timezone")

    return IpInfo(
        ip=opt_string(payload, "ip"),
        type=opt_string(payload, "type"),
        continent=opt_string(payload, "continent"),
        continent_code=opt_string(payload, "continent_code"),
        country=opt_string(payload, "country"),
        region=opt_string(payload, "region"),
        city=opt_string(payload, "city"),
        timezone_id=opt_string(timezone, "id"),
        timezone_abbr=opt_string(timezone, "abbr"),
        org=opt_string(payload, "org"),
        isp=opt_string(payload, "isp"),
        latitude=opt_float(payload, "latitude"),
        longitude=opt_float(payload, "longitude"),
    )
