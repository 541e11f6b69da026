from shared.utils.http_auth import basic_auth_header
from shared.utils.validation import ensure_currency_code, ensure_minor_units, require_identifier

__all__ = [
    "basic_auth_header",
    "ensure_currency_code",
    "ensure_minor_units",
    "require_identifier",
]
