from __future__ import annotations


class TextStoreError(Exception):
    """
    Base class for every failure raised by a text store.

    `identifier` is the path, key or pattern the failing call was given.
    """

    def __init__(self, identifier: str, message: str | None = None):
        self.identifier = identifier
        super().__init__(message or identifier)


class TextNotFoundError(TextStoreError):
    """No content exists under the identifier."""

    def __init__(self, identifier: str):
        super().__init__(identifier, f"no text stored under {identifier!r}")


class TextIOError(TextStoreError):
    """The storage medium failed for a reason other than absence."""


class PathPatternError(TextStoreError):
    pass


class WildcardInParentError(PathPatternError):
    def __init__(self, identifier: str):
        super().__init__(identifier, f"wildcards are only allowed in the last component: {identifier!r}")


class NonexistentParentError(PathPatternError):
    def __init__(self, identifier: str):
        super().__init__(identifier, f"parent directory does not exist: {identifier!r}")
