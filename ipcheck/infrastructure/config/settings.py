"""アプリケーション設定（Pydantic Settings）"""
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """アプリケーション設定"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="IPCHECK_",
        case_sensitive=False,
        extra="ignore",
    )

    # Project
    project_name: str = Field(
        default="ipcheck",
        description="プロジェクト名",
    )
    environment: str = Field(
        default="development",
        description="環境 (development, staging, production)",
    )

    # Lookup
    primary_url: str = Field(
        default="https://ipwho.is/",
        description="IPジオロケーションのプライマリエンドポイント",
    )
    fallback_url: str = Field(
        default="https://api.ipify.org?format=json",
        description="IPのみを返すフォールバックエンドポイント",
    )
    connect_timeout_ms: int = Field(
        default=10000,
        description="接続タイムアウト（ミリ秒）",
    )
    read_timeout_ms: int = Field(
        default=10000,
        description="読み込みタイムアウト（ミリ秒）",
    )
    user_agent: str = Field(
        default="ipcheck/1.0 (+https://github.com/seefa/ipcheck)",
        description="HTTPリクエストのUser-Agent",
    )

    # Display
    map_delta: float = Field(
        default=0.05,
        description="地図埋め込みの表示範囲（中心からの度数）",
    )

    # Preferences
    preferences_path: str = Field(
        default="~/.ipcheck/preferences.json",
        description="電話番号などを保存する設定ファイルのパス",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="ログレベル (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # HTTP API
    port: int = Field(
        default=8080,
        description="HTTPサーバーのポート番号",
    )

    @field_validator("connect_timeout_ms", "read_timeout_ms")
    @classmethod
    def _check_positive_timeout(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("timeout must be positive")
        return value

    @property
    def timeout(self) -> tuple[float, float]:
        """(接続, 読み込み)タイムアウトを秒で返す"""
        return (self.connect_timeout_ms / 1000, self.read_timeout_ms / 1000)

    @property
    def is_production(self) -> bool:
        """本番環境かどうか"""
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        """開発環境かどうか"""
        return self.environment.lower() == "development"
