import logging
import time
from datetime import date

import httpx

from .client import GEMINI_MODEL, GeminiClient
from .models import ComparisonResult
from .parsing import parse
from .prompt import build_prompt, looks_like_coordinates

logger = logging.getLogger(__name__)


class WeatherFetchError(Exception):
    """予報データの取得に失敗した"""


def fetch_weather_comparison(client: GeminiClient, location: str, model: str | None = None, *,
                             today: date | None = None) -> ComparisonResult:
    """指定地点の今日の予報を8サイト分まとめて取得する"""
    location = location.strip()
    if not location:
        raise ValueError("地点が指定されていません")
    model = model or GEMINI_MODEL

    if looks_like_coordinates(location):
        logger.info("緯度経度で検索: %s（地名はモデルが特定）", location)

    start = time.perf_counter()
    logger.info("予報を検索中: %s (model=%s)", location, model)
    try:
        text, citations = client.search(model, build_prompt(location))
    except (httpx.HTTPError, KeyError, ValueError) as e:
        logger.error("Gemini API エラー (%.2fs): %s", time.perf_counter() - start, e)
        raise WeatherFetchError(f"予報データの取得に失敗しました: {e}") from e

    logger.info("返答を受信 (%.2fs, %d文字, 引用元%d件)",
                time.perf_counter() - start, len(text), len(citations))
    if not text:
        logger.warning("返答が空でした: %s", location)

    result = parse(text, location, citations, today=today)
    logger.debug("予報サイト%d件を解析: %s", len(result.providers), result.location)
    return result
