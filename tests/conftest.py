"""共通フィクスチャ"""
from typing import Any

import pytest

from ipcheck.features.lookup.services.ip_resolver import IpResolver

PRIMARY_URL = "https://primary.test/"
FALLBACK_URL = "https://fallback.test/"


@pytest.fixture
def primary_url() -> str:
    return PRIMARY_URL


@pytest.fixture
def fallback_url() -> str:
    return FALLBACK_URL


@pytest.fixture
def resolver() -> IpResolver:
    return IpResolver(primary_url=PRIMARY_URL, fallback_url=FALLBACK_URL)


@pytest.fixture
def ipwho_payload() -> dict[str, Any]:
    """ipwho.is の成功レスポンス"""
    return {
        "ip": "81.2.69.142",
        "success": True,
        "type": "IPv4",
        "continent": "Europe",
        "continent_code": "EU",
        "country": "United Kingdom",
        "country_code": "GB",
        "region": "England",
        "city": "London",
        "latitude": 51.5074,
        "longitude": -0.1278,
        "connection": {"asn": 20712, "org": "Andrews & Arnold Ltd"},
        "org": "Andrews & Arnold Ltd",
        "isp": "Andrews & Arnold Ltd",
        "timezone": {"id": "Europe/London", "abbr": "GMT", "utc": "+00:00"},
    }
