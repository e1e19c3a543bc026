"""User-facing message catalog.

Texts are looked up by key and an explicit language code. There is no
process-wide "current language"; callers pass the language they render in
(usually ``Settings.language``).
"""

from typing import Literal, TypeAlias

Language: TypeAlias = Literal["ja", "en"]

DEFAULT_LANGUAGE: Language = "ja"
SUPPORTED_LANGUAGES: tuple[Language, ...] = ("ja", "en")

_CATALOG: dict[str, dict[Language, str]] = {
    "invalid_endpoint": {
        "ja": "無効なURLです",
        "en": "The service URL is invalid.",
    },
    "request_serialization": {
        "ja": "リクエストの作成に失敗しました",
        "en": "Failed to build the request.",
    },
    "transport": {
        "ja": "ネットワーク接続を確認してください",
        "en": "Please check your network connection.",
    },
    "invalid_response": {
        "ja": "サーバーからの応答が無効です",
        "en": "The server returned an invalid response.",
    },
    "http_client": {
        "ja": "クライアントエラーが発生しました（ステータスコード: {status_code}）",
        "en": "A client error occurred (status code: {status_code}).",
    },
    "http_server": {
        "ja": "サーバーエラーが発生しました（ステータスコード: {status_code}）",
        "en": "A server error occurred (status code: {status_code}).",
    },
    "http_unexpected": {
        "ja": "予期しないステータスコードを受信しました（ステータスコード: {status_code}）",
        "en": "Received an unexpected status code (status code: {status_code}).",
    },
    "response_decode": {
        "ja": "データの解析に失敗しました",
        "en": "Failed to read the server data.",
    },
    "input_validation": {
        "ja": "入力内容が正しくありません",
        "en": "Please check your input.",
    },
    "unclassified": {
        "ja": "不明なエラーが発生しました",
        "en": "An unknown error occurred.",
    },
    "unexpected_error": {
        "ja": "予期しないエラーが発生しました",
        "en": "An unexpected error occurred.",
    },
    "citizen_day_none": {"ja": "なし", "en": "None"},
    "coast_yes": {"ja": "あり", "en": "Yes"},
    "coast_no": {"ja": "なし", "en": "No"},
}


def normalize_language(language: str | None) -> Language:
    """Map an arbitrary language code onto a supported one."""
    if language == "en":
        return "en"
    return DEFAULT_LANGUAGE


def text(key: str, language: str | None = DEFAULT_LANGUAGE, **params: object) -> str:
    """Return the localized text for key, formatted with params.

    Raises:
        KeyError: If key is not in the catalog.
    """
    template = _CATALOG[key][normalize_language(language)]
    return template.format(**params) if params else template
