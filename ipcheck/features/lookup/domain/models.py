"""IP情報取得機能のドメインモデル"""
from dataclasses import asdict, dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class IpInfo:
    """
    IPアドレスと位置情報

    不明なテキスト項目は空文字列、不明な座標はNoneで表す（NaNは使わない）。
    """

    ip: str = ""
    type: str = ""  # "IPv4" / "IPv6"
    continent: str = ""
    continent_code: str = ""
    country: str = ""
    region: str = ""
    city: str = ""
    timezone_id: str = ""
    timezone_abbr: str = ""
    org: str = ""
    isp: str = ""
    latitude: Optional[float] = None  # 緯度
    longitude: Optional[float] = None  # 経度

    @classmethod
    def ip_only(cls, ip: str) -> "IpInfo":
        """IPアドレスのみを持つレコードを作成"""
        return cls(ip=ip)

    @property
    def has_coordinates(self) -> bool:
        """緯度・経度の両方が存在するか"""
        return self.latitude is not None and self.longitude is not None

    def to_dict(self) -> dict[str, Any]:
        """辞書に変換"""
        return asdict(self)
