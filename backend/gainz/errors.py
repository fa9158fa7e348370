# gainz/errors.py
"""
Store error taxonomy.

Validation rejections (blank names, unparseable numbers) are not errors and never
raise; they come back from the repositories as ``None``.
"""


class StoreError(Exception):
    """Base class for store failures surfaced to callers."""


class PersistenceError(StoreError):
    """A commit failed. The unit of work was rolled back before this was raised."""


class StoreInitError(StoreError):
    """The store could not be opened or created. Terminal for the process."""


class ActiveSessionExistsError(StoreError):
    """Raised when single-active-session enforcement is on and one is already open."""


class InvalidMoveError(StoreError, ValueError):
    def __init__(self, source: int, destination: int, size: int):
        super().__init__(f"cannot move {source} -> {destination} in a list of {size}")
        self.source = source
        self.destination = destination
        self.size = size
