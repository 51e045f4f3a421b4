"""
Application errors.

ServiceUnavailableError is raised when the retrieval augmentor is misconfigured
(e.g. RETRIEVER_URL missing). It is not caught by the API layer.
"""


class ServiceUnavailableError(Exception):
    """Raised when a required service (e.g. the retrieval augmentor) is unavailable or misconfigured."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
