class GatewayError(Exception):
    """Base class for every failure reported by the GitHub gateway."""


class NotConfigured(GatewayError):
    def __init__(self, message: str = "GitHub settings not configured"):
        super().__init__(message)


class TransportError(GatewayError):
    pass


class DecodeError(GatewayError):
    pass


class RemoteRejected(GatewayError):
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
