# SPDX-License-Identifier: MIT


class StudioError(Exception):
    """Base class for every error raised by studio_portal."""


class ConfigurationError(StudioError):
    """The backing store or the application configuration is unusable."""


class PersistenceError(StudioError):
    """A read or write against the document store failed."""

    def __init__(self, operation: str, collection: str, record_id: str) -> None:
        super().__init__(f"{operation} failed for {collection}/{record_id}")
        self.operation = operation
        self.collection = collection
        self.record_id = record_id


class RecordNotFoundError(StudioError):
    def __init__(self, kind: str, record_id: str) -> None:
        super().__init__(f"no {kind} with id {record_id!r}")
        self.kind = kind
        self.record_id = record_id
