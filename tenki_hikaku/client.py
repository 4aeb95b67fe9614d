import logging
import os

import httpx

from .models import CitationRecord

GEMINI_BASE_URL = os.getenv("GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
SEARCH_TOOLS = [{"google_search": {}}]

logger = logging.getLogger(__name__)


class GeminiClient:
    def __init__(self, api_key: str | None = None, base_url: str = GEMINI_BASE_URL,
                 transport: httpx.BaseTransport | None = None):
        self.api_key = api_key or os.getenv("GEMINI_API_KEY")
        if not self.api_key:
            raise ValueError("GEMINI_API_KEY が設定されていません")
        self.base_url = base_url.rstrip("/")
        self.client = httpx.Client(
            timeout=httpx.Timeout(10.0, read=120.0),
            headers={"x-goog-api-key": self.api_key},
            transport=transport,
        )

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        self.client.close()

    def list_models(self) -> list[dict]:
        """利用可能なモデル一覧を取得"""
        response = self.client.get(f"{self.base_url}/models")
        response.raise_for_status()
        return response.json().get("models", [])

    def generate_content(self, model: str, prompt: str, tools: list[dict] | None = None) -> dict:
        """テキスト生成（単発プロンプト）"""
        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        if tools is not None:
            payload["tools"] = tools
        logger.debug("generateContent model=%s tools=%s", model, tools)
        response = self.client.post(f"{self.base_url}/models/{model}:generateContent", json=payload)
        response.raise_for_status()
        return response.json()

    def search(self, model: str, prompt: str) -> tuple[str, list[CitationRecord]]:
        """Google検索付きで生成し、(返答テキスト, 引用元リスト) を返す"""
        data = self.generate_content(model, prompt, tools=SEARCH_TOOLS)
        candidates = data.get("candidates") or []
        if not candidates:
            logger.warning("候補が返されませんでした (model=%s)", model)
            return "", []
        candidate = candidates[0]
        return extract_text(candidate), extract_citations(candidate)


def extract_text(candidate: dict) -> str:
    """候補の text パートを連結"""
    parts = (candidate.get("content") or {}).get("parts") or []
    return "".join(part.get("text") or "" for part in parts)


def extract_citations(candidate: dict) -> list[CitationRecord]:
    """groundingChunks の web 要素を引用元として取り出す"""
    chunks = (candidate.get("groundingMetadata") or {}).get("groundingChunks") or []
    citations = []
    for chunk in chunks:
        web = chunk.get("web")
        if not web or not web.get("uri"):
            continue
        citations.append(CitationRecord(uri=web["uri"], title=web.get("title") or ""))
    return citations
