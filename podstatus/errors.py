"""Exceptions raised by podstatus."""


class PodStatusError(Exception):
    """Base class for podstatus errors."""


class ClientSetupError(PodStatusError):
    """Cluster credentials or configuration could not be loaded."""


class ListFailure(PodStatusError):
    """
    A list call against the cluster failed (network, auth or API error).

    Raised instead of returning an empty list, so callers can always tell a
    namespace with no pods apart from a failed call.
    """

    def __init__(self, namespace: str, resource: str = "pods", cause: BaseException | None = None) -> None:
        self.namespace = namespace
        self.resource = resource
        self.cause = cause
        # ApiException carries the HTTP status; transport errors do not
        self.status: int | None = getattr(cause, "status", None)
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"failed to list {resource} in namespace '{namespace}'{detail}")
