from dataclasses import dataclass
from typing import Sequence

from ..models import CitationRecord


@dataclass(frozen=True)
class CitationRule:
    """予報サイト名のキーワードと、対応する引用元 uri/title のキーワード"""
    name_keywords: tuple[str, ...]
    uri_keywords: tuple[str, ...]
    title_keywords: tuple[str, ...] = ()

    def applies_to(self, source: str) -> bool:
        return any(k in source for k in self.name_keywords)

    def matches(self, citation: CitationRecord) -> bool:
        uri = citation.uri.lower()
        title = citation.title.lower()
        return (any(k in uri for k in self.uri_keywords)
                or any(k in title for k in self.title_keywords))


# サイト名に "weather" を含むものは weathernews の引用にも当たる
CITATION_RULES: list[CitationRule] = [
    CitationRule(("tenki",), ("tenki.jp",)),
    CitationRule(("yahoo",), ("yahoo",)),
    CitationRule(("weather", "ウェザー"), ("weathernews",)),
    CitationRule(("jma", "気象庁"), ("jma.go.jp",), ("気象庁",)),
    CitationRule(("nhk",), ("nhk.or.jp",), ("nhk",)),
    CitationRule(("map",), ("weathermap",), ("ウェザーマップ",)),
    CitationRule(("goo",), ("goo",)),
    CitationRule(("accu",), ("accuweather",)),
]


def match_citation(source_name: str, citations: Sequence[CitationRecord],
                   rules: Sequence[CitationRule] = CITATION_RULES) -> CitationRecord | None:
    """予報サイトに対応する最初の引用元を返す。見つからなければ None"""
    source = source_name.lower()
    applicable = [rule for rule in rules if rule.applies_to(source)]
    if not applicable:
        return None
    for citation in citations:
        if any(rule.matches(citation) for rule in applicable):
            return citation
    return None
