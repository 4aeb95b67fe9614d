import re

from ..models import IconCategory, ProviderDraft, ProviderRecord

MISSING = "-"
MISSING_TOKENS = {"", "-", "n/a", "null"}

# 先に一致したカテゴリを採用する（「雨時々曇り」は rain）
ICON_KEYWORDS: list[tuple[IconCategory, tuple[str, ...]]] = [
    (IconCategory.SNOW, ("snow", "雪")),
    (IconCategory.THUNDER, ("thunder", "lightning", "雷")),
    (IconCategory.RAIN, ("rain", "drizzle", "shower", "雨")),
    (IconCategory.CLOUDY, ("cloud", "overcast", "曇")),
    (IconCategory.SUNNY, ("sun", "clear", "fair", "晴")),
]

_NOT_TEMP_CHAR = re.compile(r"[^0-9.\-]")
_NOT_DIGIT = re.compile(r"[^0-9]")
_FULLWIDTH_DIGITS = str.maketrans("０１２３４５６７８９", "0123456789")


def _clean_number(value: str | None, pattern: re.Pattern, suffix: str) -> str:
    if value is None or value.strip().lower() in MISSING_TOKENS:
        return MISSING
    # 全角数字を半角に揃えてから数字以外を落とす
    digits = pattern.sub("", value.translate(_FULLWIDTH_DIGITS))
    return f"{digits}{suffix}" if digits else MISSING


def clean_temp(value: str | None) -> str:
    """気温を "18°" 形式に整える。取得できなければ "-" """
    return _clean_number(value, _NOT_TEMP_CHAR, "°")


def clean_rain(value: str | None) -> str:
    """降水確率を "40%" 形式に整える。取得できなければ "-" """
    return _clean_number(value, _NOT_DIGIT, "%")


def infer_icon(condition: str | None) -> IconCategory:
    """天気の文言からアイコン種別を推定"""
    if not condition:
        return IconCategory.UNKNOWN
    text = condition.lower()
    for category, keywords in ICON_KEYWORDS:
        if any(keyword in text for keyword in keywords):
            return category
    return IconCategory.UNKNOWN


def finalize(draft: ProviderDraft) -> ProviderRecord:
    """下書きを確定。欠けている項目は既定値で埋める"""
    return ProviderRecord(
        source_name=draft.source_name or "Unknown",
        condition=draft.condition or "---",
        high_temp=draft.high_temp or MISSING,
        low_temp=draft.low_temp or MISSING,
        rain_prob=draft.rain_prob or MISSING,
        icon=draft.icon or IconCategory.UNKNOWN,
    )
