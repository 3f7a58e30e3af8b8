"""
Structured error types for gcp_monitored_resource.

Only the namespace file read is wrapped by the resolver; metadata and
environment signal failures reach the caller unchanged.
"""


class MonitoredResourceError(Exception):
    """Structured resolution error with an optional fix suggestion."""

    def __init__(self, message: str, suggestion: str | None = None):
        self.suggestion = suggestion
        super().__init__(message)

    def to_message(self) -> str:
        """Format the error with suggestion."""
        parts = [str(self)]
        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")
        return " | ".join(parts)


class MetadataServerError(MonitoredResourceError):
    """The metadata server could not be reached or rejected a request."""

    def __init__(
        self,
        message: str,
        path: str,
        status_code: int | None = None,
        suggestion: str | None = None,
    ):
        self.path = path
        self.status_code = status_code
        super().__init__(message, suggestion=suggestion)


class NamespaceReadError(MonitoredResourceError):
    """The Kubernetes namespace file could not be read."""

    def __init__(self, message: str, path: str):
        self.path = path
        super().__init__(
            message,
            suggestion="Check that the service account token volume is mounted into the pod",
        )
