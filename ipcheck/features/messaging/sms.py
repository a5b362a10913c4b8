"""SMSリンクの作成"""

from urllib.parse import quote

from ..display.formatters import PLACEHOLDER, is_blank


def build_sms_uri(phone: str, ip: str) -> str:
    """
    IPアドレスを本文とするsmsto:リンクを作成

    Args:
        phone: 送信先電話番号
        ip: 送信するIPアドレス

    Returns:
        str: smsto:<phone>?body=<ip>

    Raises:
        ValueError: IPまたは電話番号が空の場合
    """
    if is_blank(ip) or ip.strip() == PLACEHOLDER:
        raise ValueError("missing IP")
    if is_blank(phone):
        raise ValueError("missing phone number")

    return f"smsto:{quote(phone.strip(), safe='+')}?body={quote(ip.strip(), safe='')}"
