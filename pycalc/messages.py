"""User-facing validation messages, keyed by locale and failure reason value."""

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "empty": "Please enter at least one character.",
        "unbalanced brackets": "Brackets are not balanced.",
        "illegal order": "Invalid expression.",
    },
    "ko": {
        "empty": "한 글자 이상 입력해주세요",
        "unbalanced brackets": "괄호가 올바르지 않습니다",
        "illegal order": "잘못된 수식입니다.",
    },
}


def check_locale(locale: str) -> str:
    """
    Check that messages exist for `locale`.

    Raises
    ------
    ValueError
        If the locale is not supported.
    """
    if locale not in MESSAGES:
        raise ValueError(
            f"Unknown message locale '{locale}'. Supported: {', '.join(MESSAGES)}"
        )
    return locale
