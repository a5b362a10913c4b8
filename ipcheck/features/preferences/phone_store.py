"""電話番号の保存（JSONファイル）"""

import json
from pathlib import Path
from typing import Any, Union

from ...shared.exceptions.errors import StorageError
from ...shared.logging.config import get_logger

logger = get_logger(__name__)

PHONE_KEY = "phone_number"


class PhoneNumberStore:
    """
    SMS送信先の電話番号を保存するストア

    設定ファイル内の他のキーは保持したまま、PHONE_KEYのみを読み書きする。
    """

    def __init__(self, path: Union[str, Path]) -> None:
        """
        Args:
            path: 設定ファイルのパス（"~"は展開される）
        """
        self.path = Path(path).expanduser()

    def load(self) -> str:
        """
        保存済みの電話番号を取得

        Returns:
            str: 電話番号（未保存の場合は空文字列）

        Raises:
            StorageError: ファイルの読み込みに失敗した場合
        """
        value = self._read().get(PHONE_KEY)
        return value if isinstance(value, str) else ""

    def save(self, phone: str) -> str:
        """
        電話番号を保存（前後の空白は除去）

        Returns:
            str: 保存した電話番号

        Raises:
            StorageError: ファイルの書き込みに失敗した場合
        """
        phone = phone.strip()
        data = self._read()
        data[PHONE_KEY] = phone

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Failed to write preferences to {self.path}: {e}") from e

        logger.info(f"Phone number saved to {self.path}")
        return phone

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}

        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, ValueError) as e:
            raise StorageError(f"Failed to read preferences from {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageError(f"Invalid preferences file: {self.path}")
        return data
