"""CLIエントリーポイント"""
import argparse
import json
import sys
from typing import Optional

from pydantic import ValidationError

from .features.display.formatters import build_display, empty_display, render_table
from .features.display.map_url import build_map_url
from .features.lookup.services.ip_resolver import IpResolver
from .features.messaging.sms import build_sms_uri
from .features.preferences.phone_store import PhoneNumberStore
from .infrastructure.config.settings import Settings
from .shared.exceptions.errors import ConfigurationError, IpCheckError
from .shared.logging.config import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """引数パーサーを作成"""
    parser = argparse.ArgumentParser(
        description="公開IPアドレスと位置情報を表示するツール"
    )

    parser.add_argument(
        "--env-file",
        type=str,
        default=".env",
        help="環境変数ファイルのパス（デフォルト: .env）",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="ログレベル",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="結果をJSONで出力",
    )

    parser.add_argument(
        "--map",
        action="store_true",
        help="地図埋め込みURLを表示",
    )

    parser.add_argument(
        "--save-phone",
        type=str,
        metavar="NUMBER",
        help="SMS送信先の電話番号を保存",
    )

    parser.add_argument(
        "--sms",
        action="store_true",
        help="保存済みの電話番号宛にIPを送るsmsto:リンクを表示",
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """
    メインエントリーポイント

    Returns:
        int: 終了コード（0: 成功, 1: 失敗, 130: 中断）
    """
    args = build_parser().parse_args(argv)

    try:
        try:
            settings = Settings(_env_file=args.env_file)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

        if args.log_level:
            settings.log_level = args.log_level

        setup_logging(level=settings.log_level)
        logger.debug(f"Environment: {settings.environment}")

        store = PhoneNumberStore(settings.preferences_path)
        if args.save_phone is not None:
            store.save(args.save_phone)

        resolver = IpResolver.from_settings(settings)
        try:
            info = resolver.resolve()
        except IpCheckError as e:
            logger.error(f"IP lookup failed: {e}")
            print(render_table(empty_display()))
            return 1

        if args.json:
            print(
                json.dumps(
                    {
                        **info.to_dict(),
                        "map_url": build_map_url(info, delta=settings.map_delta),
                    },
                    ensure_ascii=False,
                    indent=2,
                )
            )
        else:
            print(render_table(build_display(info)))
            if args.map:
                print(build_map_url(info, delta=settings.map_delta))

        if args.sms:
            try:
                print(build_sms_uri(store.load(), info.ip))
            except ValueError as e:
                logger.error(f"Cannot build SMS link: {e}")
                return 1

        return 0

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130  # SIGINT
    except Exception as e:
        logger.error(f"Application failed: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
