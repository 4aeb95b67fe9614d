from typing import Sequence

from .models import ComparisonResult, IconCategory, ProviderRecord

ICON_GLYPHS = {
    IconCategory.SUNNY: "☀",
    IconCategory.CLOUDY: "☁",
    IconCategory.RAIN: "☂",
    IconCategory.SNOW: "❄",
    IconCategory.THUNDER: "⚡",
    IconCategory.UNKNOWN: "?",
}

# (サイト名に含まれるキーワード, 表示名)。上から順に判定
PROVIDER_LABELS: list[tuple[tuple[str, ...], str]] = [
    (("yahoo",), "Yahoo!天気"),
    (("tenki",), "tenki.jp"),
    (("weathernews", "ウェザーニューズ"), "Weathernews"),
    (("jma", "気象庁"), "気象庁 (JMA)"),
    (("nhk",), "NHK 防災"),
    (("map", "マップ"), "Weather Map"),
    (("goo",), "goo天気"),
    (("accu",), "AccuWeather"),
]

NO_SUMMARY = "要約はありません。"


def provider_label(source_name: str) -> str:
    """予報サイトの表示名。知らないサイトは元の名前のまま"""
    name = source_name.lower()
    for keywords, label in PROVIDER_LABELS:
        if any(k in name for k in keywords):
            return label
    return source_name


def temperature_value(display: str) -> float | None:
    """表示用の気温（例: 18°）を数値に。"-" などは None"""
    try:
        return float(display.rstrip("°"))
    except ValueError:
        return None


def temperature_spread(providers: Sequence[ProviderRecord]) -> dict:
    """最高・最低気温それぞれのばらつき（最小値と最大値）"""
    spread = {}
    for key, attr in (("high", "high_temp"), ("low", "low_temp")):
        values = [v for v in (temperature_value(getattr(p, attr)) for p in providers) if v is not None]
        spread[key] = (min(values), max(values)) if values else None
    return spread


def _format_degrees(value: float) -> str:
    return f"{value:g}°"


def render_provider(provider: ProviderRecord) -> str:
    glyph = ICON_GLYPHS.get(provider.icon, ICON_GLYPHS[IconCategory.UNKNOWN])
    line = (f"{glyph} {provider_label(provider.source_name)}: {provider.condition}"
            f"  最高 {provider.high_temp} / 最低 {provider.low_temp}  降水 {provider.rain_prob}")
    if provider.url:
        line += f"\n    {provider.url}"
    return line


def render_comparison(result: ComparisonResult) -> str:
    """比較結果をターミナル表示用のテキストにする"""
    lines = [f"=== {result.location} {result.date} の予報比較 ===", ""]

    if result.providers:
        lines.extend(render_provider(p) for p in result.providers)
    else:
        lines.append("予報データがありません")

    lines.append("")
    spread = temperature_spread(result.providers)
    labels = {"high": "最高気温", "low": "最低気温"}
    for key, label in labels.items():
        if spread[key] is not None:
            low, high = spread[key]
            lines.append(f"{label}のばらつき: {_format_degrees(low)} 〜 {_format_degrees(high)}"
                         f" (差 {_format_degrees(high - low)})")

    lines += ["", "=== 要約 ===", result.summary or NO_SUMMARY]

    if result.citations:
        lines += ["", "=== 参考リンク ==="]
        for i, citation in enumerate(result.citations, 1):
            lines.append(f"{i}. {citation.title or citation.uri}\n   {citation.uri}")

    return "\n".join(lines)
