class IniStoreError(Exception):
    """Base class for pyinistore errors."""


class SourceUnavailableError(IniStoreError):
    """Raised when a configuration source cannot be read or parsed."""


class DestinationUnwritableError(IniStoreError):
    """Raised when the store cannot be written to its target."""
