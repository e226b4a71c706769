from typing import Optional
from flask import request


def mask_sensitive_data(data: Optional[str], visible_chars: int = 4) -> str:
    """
    Mask sensitive values (contacts, addresses) before they reach the logs

    Args:
        data: Value to mask
        visible_chars: Number of trailing characters kept visible

    Returns:
        Masked value
    """
    if not data:
        return ''

    if len(data) <= visible_chars:
        return '*' * len(data)

    masked_length = len(data) - visible_chars
    return '*' * masked_length + data[-visible_chars:]


def get_client_ip() -> Optional[str]:
    """
    Network origin of the current request

    Behind a proxy, wrap the app with werkzeug's ProxyFix so remote_addr
    already reflects X-Forwarded-For.
    """
    return request.remote_addr
