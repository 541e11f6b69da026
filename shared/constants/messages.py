from __future__ import annotations

DEFAULT_LOCALE = "en"

PAYMENT_PROCESSING_FAILED = "payment_processing_failed"

_CATALOGUE: dict[str, dict[str, str]] = {
    "en": {
        PAYMENT_PROCESSING_FAILED: (
            "Payment could not be processed, please check the details you entered"
        ),
    },
    "ja": {
        PAYMENT_PROCESSING_FAILED: "決済処理に失敗しました。入力内容をご確認ください",
    },
}


def _language(locale: str | None) -> str:
    if not locale:
        return DEFAULT_LOCALE
    return locale.replace("_", "-").split("-", 1)[0].lower()


def translate(key: str, locale: str | None = None) -> str:
    messages = _CATALOGUE.get(_language(locale), _CATALOGUE[DEFAULT_LOCALE])
    if key in messages:
        return messages[key]
    return _CATALOGUE[DEFAULT_LOCALE].get(key, key)


def supported_locales() -> tuple[str, ...]:
    return tuple(_CATALOGUE)
