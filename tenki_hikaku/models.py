from dataclasses import asdict, dataclass, field
from enum import Enum


class IconCategory(str, Enum):
    SUNNY = "sunny"
    CLOUDY = "cloudy"
    RAIN = "rain"
    SNOW = "snow"
    THUNDER = "thunder"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class CitationRecord:
    """検索で参照されたWebページ（uri と title）"""
    uri: str
    title: str = ""


@dataclass
class ProviderDraft:
    """行走査中の未完成な予報レコード"""
    source_name: str | None = None
    condition: str | None = None
    high_temp: str | None = None
    low_temp: str | None = None
    rain_prob: str | None = None
    icon: IconCategory | None = None


@dataclass(frozen=True)
class ProviderRecord:
    """1つの予報サイトの今日の予報。気温・降水確率は表示用文字列（"-" は不明）"""
    source_name: str
    condition: str
    high_temp: str
    low_temp: str
    rain_prob: str
    icon: IconCategory = IconCategory.UNKNOWN
    url: str | None = None


@dataclass(frozen=True)
class ComparisonResult:
    location: str
    date: str
    summary: str
    providers: tuple[ProviderRecord, ...] = field(default_factory=tuple)
    citations: tuple[CitationRecord, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        """JSON出力用の辞書に変換"""
        data = asdict(self)
        data["providers"] = [{**p, "icon": p["icon"].value} for p in data["providers"]]
        data["citations"] = list(data["citations"])
        return data
