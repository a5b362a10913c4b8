"""HTTPサーバー（FastAPI）"""
from typing import Any

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from .features.display.formatters import build_display
from .features.display.map_url import build_map_url
from .features.lookup.services.ip_resolver import IpResolver
from .infrastructure.config.settings import Settings
from .shared.exceptions.errors import IpCheckError
from .shared.logging.config import get_logger, setup_logging

# 設定を読み込み
settings = Settings()

# ロギングを設定
setup_logging(level=settings.log_level)
logger = get_logger(__name__)

app = FastAPI(
    title="ipcheck",
    description="公開IPアドレスと位置情報を返すサービス",
    version="1.0.0",
)


def get_resolver() -> IpResolver:
    """リクエストごとのリゾルバー（状態を持たないため毎回作成）"""
    return IpResolver.from_settings(settings)


@app.get("/")
def root() -> dict[str, Any]:
    """ルートエンドポイント"""
    return {
        "service": "ipcheck",
        "version": "1.0.0",
        "status": "running",
        "environment": settings.environment,
    }


@app.get("/health")
def health() -> dict[str, str]:
    """ヘルスチェックエンドポイント"""
    return {"status": "healthy"}


@app.get("/ip")
def lookup_ip(resolver: IpResolver = Depends(get_resolver)) -> dict[str, Any]:
    """
    公開IPアドレスと位置情報を返す

    同期関数のためスレッドプールで実行され、イベントループを塞がない。
    """
    info = resolver.resolve()
    return {
        **info.to_dict(),
        "display": build_display(info),
        "map_url": build_map_url(info, delta=settings.map_delta),
    }


@app.exception_handler(IpCheckError)
async def lookup_exception_handler(request: Request, exc: IpCheckError) -> JSONResponse:
    """IP取得失敗時のハンドラー"""
    logger.error(f"IP lookup failed: {exc}")
    return JSONResponse(
        status_code=502,
        content={"message": "IP lookup failed", "detail": str(exc)},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """グローバル例外ハンドラー"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"message": "Internal server error", "detail": str(exc)},
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
