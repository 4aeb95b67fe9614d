"""Google検索付き generateContent のデモ（返答テキストと引用元をそのまま表示）"""

import argparse

from tenki_hikaku.client import GEMINI_MODEL, GeminiClient
from tenki_hikaku.prompt import build_prompt


def main():
    parser = argparse.ArgumentParser(description="検索付き生成デモ")
    parser.add_argument("location", nargs="?", default="東京", help="地域名（デフォルト: 東京）")
    parser.add_argument("--model", "-m", default=GEMINI_MODEL, help="使用するモデル名")
    parser.add_argument("--show-prompt", action="store_true", help="送信するプロンプトを表示")
    args = parser.parse_args()

    prompt = build_prompt(args.location)
    if args.show_prompt:
        print("=== prompt ===")
        print(prompt)

    with GeminiClient() as client:
        print(f"\n=== generateContent ({args.model}, location={args.location}) ===")
        text, citations = client.search(args.model, prompt)

    print(f"response:\n{text}")
    print(f"\n=== 引用元 ({len(citations)}件) ===")
    for c in citations:
        print(f"  - {c.title}\n    {c.uri}")


if __name__ == "__main__":
    main()
