from dataclasses import replace
from datetime import date, datetime
from typing import Sequence
from zoneinfo import ZoneInfo

from ..models import CitationRecord, ComparisonResult
from .citations import CITATION_RULES, CitationRule, match_citation
from .classifier import ClassifiedReply, classify
from .normalize import clean_rain, clean_temp, finalize, infer_icon

JST = ZoneInfo("Asia/Tokyo")
WEEKDAYS = "月火水木金土日"


def format_date(day: date) -> str:
    """日付ラベル（例: 10月19日月曜日）"""
    return f"{day.month}月{day.day}日{WEEKDAYS[day.weekday()]}曜日"


def parse(raw_text: str, original_location: str,
          citations: Sequence[CitationRecord], *,
          today: date | None = None) -> ComparisonResult:
    """モデルの返答テキストを予報比較の結果に変換する（例外は投げない）"""
    citations = tuple(citations)
    reply = classify(raw_text or "", original_location)

    providers = []
    for draft in reply.drafts:
        record = finalize(draft)
        match = match_citation(record.source_name, citations)
        if match is not None:
            record = replace(record, url=match.uri)
        providers.append(record)

    if today is None:
        today = datetime.now(JST).date()

    return ComparisonResult(
        location=reply.detected_location,
        date=format_date(today),
        summary=reply.raw_summary.strip(),
        providers=tuple(providers),
        citations=citations,
    )


__all__ = [
    "CITATION_RULES",
    "CitationRule",
    "ClassifiedReply",
    "classify",
    "clean_rain",
    "clean_temp",
    "finalize",
    "format_date",
    "infer_icon",
    "match_citation",
    "parse",
]
