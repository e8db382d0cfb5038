"""Registry page domain entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RegistryPage:
    """Raw answer of the registry's search endpoint.

    Attributes:
        status_code: HTTP status returned by the registry
        text: Response body, treated as opaque HTML
    """

    status_code: int
    text: str

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300
