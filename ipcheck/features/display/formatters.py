"""IP情報の表示用フォーマッター"""

import math
from typing import Optional

from ..lookup.domain.models import IpInfo

PLACEHOLDER = "—"

DISPLAY_LABELS = (
    "IP",
    "Type",
    "Location",
    "Continent",
    "Timezone",
    "Organization",
    "ISP",
    "Coordinates",
)


def is_blank(text: Optional[str]) -> bool:
    """空文字列・空白のみ・Noneかどうか"""
    return text is None or not text.strip()


def or_placeholder(text: Optional[str]) -> str:
    """空ならプレースホルダーを返す"""
    return PLACEHOLDER if is_blank(text) else text


def _pair(main: str, extra: str) -> str:
    # "main (extra)"、片方のみならその値、両方空ならプレースホルダー
    if is_blank(main) and is_blank(extra):
        return PLACEHOLDER
    if not is_blank(main) and not is_blank(extra):
        return f"{main} ({extra})"
    return extra if is_blank(main) else main


def format_location(info: IpInfo) -> str:
    """国 / 地域 / 都市"""
    parts = [part for part in (info.country, info.region, info.city) if not is_blank(part)]
    return " / ".join(parts) or PLACEHOLDER


def format_continent(info: IpInfo) -> str:
    """大陸（大陸コード）"""
    return _pair(info.continent, info.continent_code)


def format_timezone(info: IpInfo) -> str:
    """タイムゾーンID（略称）"""
    return _pair(info.timezone_id, info.timezone_abbr)


def format_coordinates(info: IpInfo) -> str:
    """緯度・経度を小数点以下4桁で表示"""
    lat, lon = info.latitude, info.longitude
    if lat is None or lon is None or not (math.isfinite(lat) and math.isfinite(lon)):
        return PLACEHOLDER
    return f"{lat:.4f}, {lon:.4f}"


def build_display(info: IpInfo) -> dict[str, str]:
    """
    画面表示用のラベルと値の対応を作成

    Args:
        info: IP情報

    Returns:
        dict[str, str]: DISPLAY_LABELSの順に並んだ表示値
    """
    return {
        "IP": or_placeholder(info.ip),
        "Type": or_placeholder(info.type),
        "Location": format_location(info),
        "Continent": format_continent(info),
        "Timezone": format_timezone(info),
        "Organization": or_placeholder(info.org),
        "ISP": or_placeholder(info.isp),
        "Coordinates": format_coordinates(info),
    }


def empty_display() -> dict[str, str]:
    """取得失敗時の表示（すべてプレースホルダー）"""
    return {label: PLACEHOLDER for label in DISPLAY_LABELS}


def render_table(display: dict[str, str]) -> str:
    """ラベルを揃えたテキスト表に整形"""
    width = max(len(label) for label in display)
    return "\n".join(f"{label.ljust(width)} : {value}" for label, value in display.items())
