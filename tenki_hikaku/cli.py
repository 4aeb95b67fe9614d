import argparse
import json
import logging
import sys

import httpx

from .client import GEMINI_MODEL, GeminiClient
from .render import render_comparison
from .service import WeatherFetchError, fetch_weather_comparison

LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"
FETCH_FAILED = "予報データの取得に失敗しました。もう一度お試しください。"


def configure_logging(verbosity: int):
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format=LOG_FORMAT)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="8大天気予報比較")
    parser.add_argument("location", nargs="?", help="地域名または緯度経度（例: 渋谷、札幌、35.689,139.691）")
    parser.add_argument("--model", "-m", default=GEMINI_MODEL, help=f"使用するモデル名（デフォルト: {GEMINI_MODEL}）")
    parser.add_argument("--json", action="store_true", help="結果をJSONで出力")
    parser.add_argument("--list-models", action="store_true", help="利用可能なモデル一覧を表示")
    parser.add_argument("--verbose", "-v", action="count", default=0, help="ログを詳しく表示（-vv でデバッグ）")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if not args.list_models and not (args.location or "").strip():
        parser.error("地域名を指定してください")

    try:
        client = GeminiClient()
    except ValueError as e:
        print(f"{FETCH_FAILED}\n({e})", file=sys.stderr)
        return 1

    with client:
        if args.list_models:
            try:
                models = client.list_models()
            except httpx.HTTPError as e:
                print(f"モデル一覧を取得できませんでした: {e}", file=sys.stderr)
                return 1
            print("=== 利用可能なモデル ===")
            for m in models:
                print(f"  - {m['name']}")
            return 0

        try:
            result = fetch_weather_comparison(client, args.location, args.model)
        except WeatherFetchError:
            print(FETCH_FAILED, file=sys.stderr)
            return 1

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(render_comparison(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
