"""IpResolverのテスト（HTTPはresponsesでスタブ）"""

import logging

import pytest
import requests
import responses

from ipcheck.features.lookup.domain.models import IpInfo
from ipcheck.features.lookup.services.ip_resolver import IpResolver
from ipcheck.infrastructure.config.settings import Settings
from ipcheck.shared.exceptions.errors import HttpStatusError, NetworkError, ProviderError
from ipcheck.shared.http.client import HTTPClient


@responses.activate
def test_primary_success_skips_fallback(resolver, primary_url, ipwho_payload) -> None:
    """プライマリが成功すればフォールバックは呼ばない"""
    responses.add(responses.GET, primary_url, json=ipwho_payload, status=200)

    info = resolver.resolve()

    assert info.ip == "81.2.69.142"
    assert info.city == "London"
    assert info.timezone_abbr == "GMT"
    assert len(responses.calls) == 1


@responses.activate
def test_network_failure_uses_fallback_ip(resolver, primary_url, fallback_url) -> None:
    """プライマリの通信失敗時はフォールバックのIPのみを返す"""
    responses.add(responses.GET, primary_url, body=requests.ConnectionError("unreachable"))
    responses.add(responses.GET, fallback_url, json={"ip": "1.2.3.4"}, status=200)

    info = resolver.resolve()

    assert info == IpInfo(ip="1.2.3.4")
    assert info.latitude is None
    assert info.longitude is None


@responses.activate
def test_status_error_propagates_when_fallback_fails(resolver, primary_url, fallback_url) -> None:
    """フォールバックも失敗した場合はプライマリのステータスエラー"""
    responses.add(responses.GET, primary_url, status=500)
    responses.add(responses.GET, fallback_url, status=503)

    with pytest.raises(HttpStatusError) as exc_info:
        resolver.resolve()

    assert exc_info.value.code == 500
    assert len(responses.calls) == 2


@responses.activate
def test_status_error_propagates_when_fallback_ip_is_blank(
    resolver, primary_url, fallback_url
) -> None:
    """フォールバックのipが空ならプライマリのエラー"""
    responses.add(responses.GET, primary_url, status=500)
    responses.add(responses.GET, fallback_url, json={"ip": ""}, status=200)

    with pytest.raises(HttpStatusError) as exc_info:
        resolver.resolve()

    assert exc_info.value.code == 500


@responses.activate
def test_network_error_propagates_when_fallback_is_unreachable(
    resolver, primary_url, fallback_url
) -> None:
    """両方とも通信失敗ならプライマリのNetworkError"""
    responses.add(responses.GET, primary_url, body=requests.ConnectTimeout("primary timeout"))
    responses.add(responses.GET, fallback_url, body=requests.ConnectionError("fallback down"))

    with pytest.raises(NetworkError) as exc_info:
        resolver.resolve()

    assert "primary timeout" in str(exc_info.value)


@responses.activate
def test_provider_error_propagates_when_fallback_body_is_malformed(
    resolver, primary_url, fallback_url
) -> None:
    """フォールバックの本文が壊れていてもプライマリのProviderError"""
    responses.add(
        responses.GET,
        primary_url,
        json={"success": False, "message": "Invalid IP address"},
        status=200,
    )
    responses.add(responses.GET, fallback_url, body="<html>oops</html>", status=200)

    with pytest.raises(ProviderError) as exc_info:
        resolver.resolve()

    assert exc_info.value.detail == "Invalid IP address"


@responses.activate
def test_provider_error_falls_back(resolver, primary_url, fallback_url) -> None:
    """success=falseでもフォールバックがIPを返せば成功"""
    responses.add(responses.GET, primary_url, json={"success": False}, status=200)
    responses.add(responses.GET, fallback_url, json={"ip": "2001:db8::1"}, status=200)

    assert resolver.resolve() == IpInfo(ip="2001:db8::1")


@responses.activate
def test_consecutive_calls_are_independent(resolver, primary_url, fallback_url) -> None:
    """呼び出しごとにそれぞれ問い合わせる（キャッシュしない）"""
    responses.add(responses.GET, primary_url, status=502)
    responses.add(responses.GET, fallback_url, json={"ip": "1.2.3.4"}, status=200)

    first = resolver.resolve()
    second = resolver.resolve()

    assert first == second == IpInfo(ip="1.2.3.4")
    assert len(responses.calls) == 4


class _TrackingClient(HTTPClient):
    closed = 0

    def close(self) -> None:
        type(self).closed += 1
        super().close()


@pytest.mark.parametrize("primary_status,fallback_status", [(200, 200), (500, 500), (500, 200)])
@responses.activate
def test_client_is_closed_on_every_path(
    primary_url, fallback_url, ipwho_payload, primary_status, fallback_status
) -> None:
    """成功・失敗に関わらずHTTPセッションをクローズする"""
    _TrackingClient.closed = 0
    responses.add(responses.GET, primary_url, json=ipwho_payload, status=primary_status)
    responses.add(responses.GET, fallback_url, json={"ip": "1.2.3.4"}, status=fallback_status)
    resolver = IpResolver(primary_url, fallback_url, client_factory=_TrackingClient)

    try:
        resolver.resolve()
    except HttpStatusError:
        pass

    assert _TrackingClient.closed == 1


@responses.activate
def test_from_settings_uses_configured_urls(monkeypatch) -> None:
    """設定のURLとタイムアウトを使用する"""
    monkeypatch.setenv("IPCHECK_PRIMARY_URL", "https://geo.example/")
    monkeypatch.setenv("IPCHECK_CONNECT_TIMEOUT_MS", "2500")
    responses.add(responses.GET, "https://geo.example/", json={"ip": "9.9.9.9"}, status=200)

    resolver = IpResolver.from_settings(Settings(_env_file=None))

    assert resolver.resolve().ip == "9.9.9.9"
    with resolver.client_factory() as client:
        assert client.timeout == (2.5, 10.0)


HUGE_LATITUDE_BODY = '{"ip": "81.2.69.142", "latitude": 1' + "0" * 400 + ', "longitude": 12.5}'


@responses.activate
def test_out_of_range_coordinate_is_absent(resolver, primary_url) -> None:
    """floatに収まらない整数座標はNoneとして扱い、プライマリの結果を返す"""
    responses.add(
        responses.GET,
        primary_url,
        body=HUGE_LATITUDE_BODY,
        status=200,
        content_type="application/json",
    )

    info = resolver.resolve()

    assert info.ip == "81.2.69.142"
    assert info.latitude is None
    assert info.longitude == 12.5
    assert len(responses.calls) == 1


@responses.activate
def test_failed_lookup_is_not_logged_as_error(resolver, primary_url, fallback_url, caplog) -> None:
    """失敗の記録は呼び出し側に任せる（リゾルバーはWARNINGまで）"""
    responses.add(responses.GET, primary_url, status=500)
    responses.add(responses.GET, fallback_url, status=500)

    with caplog.at_level(logging.DEBUG, logger="ipcheck"), pytest.raises(HttpStatusError):
        resolver.resolve()

    resolver_records = [
        record for record in caplog.records if record.name.endswith("ip_resolver")
    ]
    assert resolver_records
    assert all(record.levelno <= logging.WARNING for record in resolver_records)
