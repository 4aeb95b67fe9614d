import re

# 返答の ---SOURCE:...--- ブロックの並び順
PROVIDERS = [
    "tenki.jp",
    "JMA",
    "Weathernews",
    "NHK",
    "Yahoo",
    "Weather Map",
    "goo Weather",
    "AccuWeather",
]

PROVIDER_DESCRIPTIONS = [
    "tenki.jp",
    "JMA (Japan Meteorological Agency / 気象庁)",
    "Weathernews (ウェザーニューズ)",
    "NHK Weather (NHK 防災)",
    "Yahoo! Weather (Yahoo!天気)",
    "Weather Map (ウェザーマップ)",
    "goo Weather (goo天気)",
    "AccuWeather",
]

_COORDINATES = re.compile(r"^\s*-?\d+(\.\d+)?\s*,\s*-?\d+(\.\d+)?\s*$")

PROMPT_TEMPLATE = """\
Act as a precise Japanese weather data aggregator.

Input Location: "{location}"

CRITICAL STEP 1 (Location Identification):
- If the input "{location}" is a coordinate pair (e.g., "35.689, 139.691"), you MUST first identify the specific Japanese address at the City or Ward level (市区町村).
- Example: "35.689, 139.691" -> "東京都新宿区"
- If it is already a place name, use it as is.
- The "Detected Location" in your output MUST be this specific Japanese City/Ward name, NOT the coordinates.

Task:
Search for the weather forecast for this detected location for TODAY (current date).

You MUST retrieve data from these exact {count} sources:
{source_list}

For EACH source, extract the following data for today:
- Condition: In Japanese (e.g., 晴れ, 曇り, 雨, 雪). Keep it short.
- High Temp: Number only (Celsius). Use "-" if unavailable.
- Low Temp: Number only (Celsius). Use "-" if unavailable.
- Rain Probability: Maximum probability for the rest of the day (Number only). Use "-" if unavailable.

Output Format (Strictly follow this structure, no markdown tables):

Detected Location: [Specific City/Ward Name in Japanese (e.g. 新宿区, 横浜市)]

{blocks}
---SUMMARY---
[Write a concise summary in Japanese (approx 150-200 chars). Compare the forecasts specifically noting any major disagreements among the {count} sources.]
"""

BLOCK_TEMPLATE = """\
---SOURCE: {name}---
Condition: [Value]
High: [Value]
Low: [Value]
Rain: [Value]
"""


def looks_like_coordinates(location: str) -> bool:
    """緯度経度の組（例: 35.689, 139.691）かどうか"""
    return bool(_COORDINATES.match(location))


def build_prompt(location: str) -> str:
    """8つの予報サイトを比較させる検索プロンプトを組み立てる"""
    source_list = "\n".join(f"{i}. {d}" for i, d in enumerate(PROVIDER_DESCRIPTIONS, 1))
    blocks = "\n".join(BLOCK_TEMPLATE.format(name=name) for name in PROVIDERS)
    return PROMPT_TEMPLATE.format(
        location=location,
        count=len(PROVIDERS),
        source_list=source_list,
        blocks=blocks,
    )
