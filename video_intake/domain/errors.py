from __future__ import annotations


class DomainError(Exception):
    pass


class DomainValidationError(DomainError):
    pass


class DomainInvariantError(DomainError):
    pass


class DomainDependencyError(DomainError):
    pass


class FileTooLargeError(DomainValidationError):
    def __init__(self, *, slot: str, size: int, max_bytes: int, reason: str) -> None:
        super().__init__(reason)
        self.slot = slot
        self.size = size
        self.max_bytes = max_bytes


class TransportError(DomainDependencyError):
    pass


class ResponseFormatError(DomainError):
    pass
