"""Remote backend boundary: REST and auth client."""

from gm_tracker.boundary.remote.rest_client import RemoteBackendClient

__all__ = ["RemoteBackendClient"]
