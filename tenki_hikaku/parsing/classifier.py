from dataclasses import dataclass, field
from enum import Enum

from ..models import ProviderDraft
from .normalize import clean_rain, clean_temp, infer_icon

LOCATION_MARKER = "Detected Location:"
SUMMARY_MARKER = "---SUMMARY---"
SOURCE_MARKER = "---SOURCE:"
SOURCE_CLOSE = "---"
LOCATION_PLACEHOLDERS = {"undefined", "null"}
TEMPLATE_ECHO = "Specific City/Ward Name"


class State(Enum):
    HEADER = "header"
    IN_PROVIDER = "in_provider"
    IN_SUMMARY = "in_summary"


@dataclass
class ClassifiedReply:
    detected_location: str
    raw_summary: str = ""
    drafts: list[ProviderDraft] = field(default_factory=list)


def _value_after_colon(line: str) -> str:
    return line.partition(":")[2].strip()


def _set_condition(draft: ProviderDraft, value: str):
    draft.condition = value
    draft.icon = infer_icon(value)


def _set_high(draft: ProviderDraft, value: str):
    draft.high_temp = clean_temp(value)


def _set_low(draft: ProviderDraft, value: str):
    draft.low_temp = clean_temp(value)


def _set_rain(draft: ProviderDraft, value: str):
    draft.rain_prob = clean_rain(value)


# 小文字化した行頭 → 下書きへの書き込み
FIELD_SETTERS = {
    "condition:": _set_condition,
    "high:": _set_high,
    "low:": _set_low,
    "rain:": _set_rain,
}


class LineClassifier:
    """モデルの返答を1行ずつ走査する状態機械"""

    def __init__(self, fallback_location: str):
        self.state = State.HEADER
        self.reply = ClassifiedReply(detected_location=fallback_location)
        self.draft: ProviderDraft | None = None
        self._summary_lines: list[str] = []

    def feed(self, line: str):
        if self.state is State.IN_SUMMARY:
            self._summary_lines.append(line + "\n")
            return

        trimmed = line.strip()
        if trimmed.startswith(LOCATION_MARKER):
            self._detect_location(trimmed[len(LOCATION_MARKER):].strip())
        elif trimmed.startswith(SUMMARY_MARKER):
            self._flush()
            self.state = State.IN_SUMMARY
        elif trimmed.startswith(SOURCE_MARKER):
            self._flush()
            name = trimmed[len(SOURCE_MARKER):].partition(SOURCE_CLOSE)[0].strip()
            self.draft = ProviderDraft(source_name=name)
            self.state = State.IN_PROVIDER
        elif self.state is State.IN_PROVIDER:
            self._extract_field(trimmed)

    def finish(self) -> ClassifiedReply:
        self._flush()
        self.reply.raw_summary = "".join(self._summary_lines)
        return self.reply

    def _detect_location(self, value: str):
        # "[新宿区]" は括弧を外して採用、雛形そのものは無視
        if value.startswith("[") and value.endswith("]"):
            value = value[1:-1].strip()
            if TEMPLATE_ECHO in value:
                return
        if value and value.lower() not in LOCATION_PLACEHOLDERS:
            self.reply.detected_location = value

    def _extract_field(self, line: str):
        lower = line.lower()
        for prefix, setter in FIELD_SETTERS.items():
            if lower.startswith(prefix):
                setter(self.draft, _value_after_colon(line))
                return

    def _flush(self):
        if self.draft is not None:
            self.reply.drafts.append(self.draft)
            self.draft = None
        if self.state is State.IN_PROVIDER:
            self.state = State.HEADER


def classify(text: str, fallback_location: str) -> ClassifiedReply:
    """返答テキストを地点・要約・予報サイトごとの下書きに分類"""
    classifier = LineClassifier(fallback_location)
    for line in text.split("\n"):
        classifier.feed(line)
    return classifier.finish()
