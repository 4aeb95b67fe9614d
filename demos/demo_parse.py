"""返答パーサのデモ（APIを呼ばずにサンプル返答を解析して表示）"""

import argparse
from pathlib import Path

from tenki_hikaku.models import CitationRecord
from tenki_hikaku.parsing import parse
from tenki_hikaku.render import render_comparison

SAMPLE_REPLY = """\
Detected Location: 新宿区

---SOURCE: tenki.jp---
Condition: 晴れ時々曇り
High: 20
Low: 11
Rain: 10

---SOURCE: JMA---
Condition: 曇り一時雨
High: 19℃
Low: 12℃
Rain: 40%

---SOURCE: AccuWeather---
Condition: Partly sunny
High: N/A
Low: 10
Rain: -

---SUMMARY---
概ね晴れの予報ですが、気象庁のみ午後のにわか雨を予想しています。
最高気温は19〜20度で各社ほぼ一致しています。
"""

SAMPLE_CITATIONS = [
    CitationRecord(uri="https://tenki.jp/forecast/3/16/4410/13104/", title="新宿区の天気 - tenki.jp"),
    CitationRecord(uri="https://www.jma.go.jp/bosai/forecast/#area_type=offices&area_code=130000", title="気象庁 天気予報"),
]


def main():
    parser = argparse.ArgumentParser(description="返答パーサデモ")
    parser.add_argument("--file", "-f", type=Path, help="解析する返答テキストのファイル（省略でサンプル）")
    parser.add_argument("--location", "-l", default="東京", help="元の入力地点")
    args = parser.parse_args()

    text = args.file.read_text() if args.file else SAMPLE_REPLY
    citations = [] if args.file else SAMPLE_CITATIONS

    result = parse(text, args.location, citations)
    print(render_comparison(result))


if __name__ == "__main__":
    main()
