"""JSONオブジェクトから値を取り出すユーティリティ"""

import math
from typing import Any, Mapping, Optional


def opt_string(obj: Optional[Mapping[str, Any]], key: str) -> str:
    """
    文字列フィールドを取得

    - キーが無い、値がnull、オブジェクト/配列の場合は空文字列
    - 数値・真偽値は文字列に変換
    """
    if not isinstance(obj, Mapping):
        return ""

    value = obj.get(key)
    if value is None or isinstance(value, (dict, list)):
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def opt_object(obj: Optional[Mapping[str, Any]], key: str) -> Optional[Mapping[str, Any]]:
    """ネストしたオブジェクトを取得（オブジェクト以外はNone）"""
    if not isinstance(obj, Mapping):
        return None

    value = obj.get(key)
    return value if isinstance(value, Mapping) else None


def opt_float(obj: Optional[Mapping[str, Any]], key: str) -> Optional[float]:
    """
    数値フィールドをfloatとして取得

    キーが無い、null、数値に変換できない、有限でない（NaN/Infinity）、
    floatの範囲を超える整数の場合はNone。
    """
    if not isinstance(obj, Mapping):
        return None

    value = obj.get(key)
    if value is None or isinstance(value, bool):
        return None

    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None

    return number if math.isfinite(number) else None


def opt_bool(obj: Optional[Mapping[str, Any]], key: str, default: bool) -> bool:
    """
    真偽値フィールドを取得

    文字列の"true"/"false"（大文字小文字を問わない）も受け付ける。
    それ以外の値、またはキーが無い場合はdefault。
    """
    if not isinstance(obj, Mapping):
        return default

    value = obj.get(key)
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered == "true":
            return True
        if lowered == "false":
            return False
    return default
