# Order matters: backslashes first so later escapes are not doubled.
_JSON_ESCAPES = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\t", "\\t"),
)

_REQUEST_TEMPLATE = '{"contents":[{"parts":[{"text":"%s"}]}]}'


def _needs_unicode_escape(ch: str) -> bool:
    code = ord(ch)
    return code < 0x20 or 0xD800 <= code <= 0xDFFF


def escape_json_string(value: str) -> str:
    """Escape `value` for use inside a JSON string literal."""
    for raw, escaped in _JSON_ESCAPES:
        value = value.replace(raw, escaped)
    # Remaining control characters are not legal inside JSON strings, and lone
    # surrogates cannot be encoded as UTF-8.
    return "".join(f"\\u{ord(ch):04x}" if _needs_unicode_escape(ch) else ch for ch in value)


def build_request_body(prompt: str) -> str:
    return _REQUEST_TEMPLATE % escape_json_string(prompt)
