"""CaptchaProvider protocol - application code depends on this, not the concrete verifier."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CaptchaProvider(Protocol):
    def verify(self, client_response: str, remote_ip: str = "") -> bool: ...
