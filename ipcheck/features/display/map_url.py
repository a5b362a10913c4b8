"""地図埋め込みURLの作成"""

import math
from urllib.parse import urlencode

from ..lookup.domain.models import IpInfo

BLANK_PAGE = "about:blank"
OSM_EMBED_URL = "https://www.openstreetmap.org/export/embed.html"


def build_map_url(info: IpInfo, delta: float = 0.05) -> str:
    """
    OpenStreetMapの埋め込みURLを作成（APIキー不要）

    Args:
        info: IP情報
        delta: 中心から表示範囲の端までの度数

    Returns:
        str: 埋め込みURL（座標が無い場合は"about:blank"）
    """
    lat, lon = info.latitude, info.longitude
    if lat is None or lon is None or not (math.isfinite(lat) and math.isfinite(lon)):
        return BLANK_PAGE

    bbox = f"{lon - delta},{lat - delta},{lon + delta},{lat + delta}"
    query = urlencode(
        {"bbox": bbox, "layer": "mapnik", "marker": f"{lat},{lon}"},
        safe=",",
    )
    return f"{OSM_EMBED_URL}?{query}"
