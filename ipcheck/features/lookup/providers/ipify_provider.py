"""ipify 形式のIP専用プロバイダー（フォールバック）"""
from typing import Any, Optional

from ..domain.models import IpInfo
from ....shared.http.client import HTTPClient
from ....shared.utils.json_fields import opt_string


class IpifyProvider:
    """IPアドレスのみを返すプロバイダー"""

    def __init__(self, url: str) -> None:
        self.url = url

    def fetch(self, client: HTTPClient) -> Optional[IpInfo]:
        """
        IPアドレスを取得

        Returns:
            Optional[IpInfo]: IPのみのレコード（ipが空の場合はNone）

        Raises:
            IpCheckError: 通信・ステータス・本文の解析に失敗した場合
        """
        return parse_ipify_payload(client.get_json(self.url))


def parse_ipify_payload(payload: Any) -> Optional[IpInfo]:
    """{"ip": "..."} をIpInfoに変換（ipが空ならNone）"""
    ip = opt_string(payload, "ip").strip()
    if not ip:
        return None
    return IpInfo.ip_only(ip)
