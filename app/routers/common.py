from fastapi import HTTPException

from app.errors import GatewayError, NotConfigured


def gateway_http_error(error: GatewayError, prefix: str = "") -> HTTPException:
    """Map a gateway failure to the one-line message shown to the user."""
    status_code = 400 if isinstance(error, NotConfigured) else 502
    return HTTPException(status_code=status_code, detail=f"{prefix}{error}")
