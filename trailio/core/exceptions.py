class ProviderError(Exception):
    """Raised when an external provider call fails or returns an unusable payload."""

    def __init__(self, provider: str, message: str, status: int = None):
        self.provider = provider
        self.status = status
        self.message = message
        super().__init__(f"{provider}: {message}")
