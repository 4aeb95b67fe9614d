from tenki_hikaku.models import CitationRecord
from tenki_hikaku.parsing.citations import CitationRule, match_citation

CITATIONS = [
    CitationRecord(uri="https://weathernews.jp/onebox/tenki/tokyo/13104/", title="新宿区の天気 - ウェザーニュース"),
    CitationRecord(uri="https://tenki.jp/forecast/3/16/4410/13104/", title="tenki.jp"),
    CitationRecord(uri="https://vertexaisearch.cloud.google.com/grounding-api-redirect/abc", title="気象庁 | 天気予報"),
    CitationRecord(uri="https://www3.nhk.or.jp/news/weather/", title="NHK"),
    CitationRecord(uri="https://weather.yahoo.co.jp/weather/jp/13/4410/13104.html", title="Yahoo!天気"),
    CitationRecord(uri="https://weathermap.jp/", title="ウェザーマップ"),
    CitationRecord(uri="https://weather.goo.ne.jp/forecast/city/13104/", title="goo天気"),
    CitationRecord(uri="https://www.accuweather.com/ja/jp/shinjuku/", title="AccuWeather"),
]


def _uri(name, citations=CITATIONS):
    match = match_citation(name, citations)
    return match.uri if match else None


def test_each_provider_finds_its_citation():
    assert _uri("tenki.jp") == CITATIONS[1].uri
    assert _uri("JMA") == CITATIONS[2].uri
    assert _uri("気象庁") == CITATIONS[2].uri
    assert _uri("NHK") == CITATIONS[3].uri
    assert _uri("Yahoo") == CITATIONS[4].uri
    assert _uri("Weathernews") == CITATIONS[0].uri


def test_first_match_in_list_order_wins():
    # "Weather Map" / "AccuWeather" も weather を含むので weathernews の引用が先に当たる
    assert _uri("Weather Map") == CITATIONS[0].uri
    assert _uri("AccuWeather") == CITATIONS[0].uri
    assert _uri("Weather Map", CITATIONS[1:]) == CITATIONS[5].uri
    assert _uri("AccuWeather", CITATIONS[1:]) == CITATIONS[7].uri


def test_match_is_case_insensitive():
    citations = [CitationRecord(uri="https://WWW.JMA.GO.JP/bosai/", title="")]
    assert _uri("jma", citations) == citations[0].uri


def test_unknown_provider_gets_no_citation():
    assert match_citation("Windy", CITATIONS) is None


def test_no_matching_citation():
    citations = [CitationRecord(uri="https://example.com/", title="example")]
    assert match_citation("tenki.jp", citations) is None
    assert match_citation("tenki.jp", []) is None


def test_custom_rules():
    rules = [CitationRule(("windy",), ("windy.com",))]
    citations = [CitationRecord(uri="https://www.windy.com/35.6/139.7", title="Windy")]
    assert match_citation("Windy", citations, rules) == citations[0]
    assert match_citation("tenki.jp", CITATIONS, rules) is None
