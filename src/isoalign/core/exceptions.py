"""isoalign core exceptions."""


class ConfigurationError(ValueError):
    """Exception raised when invalid alignment parameters or component configuration are provided."""


class PatternExtractionError(ValueError):
    """Exception raised when isotope patterns cannot be extracted from a sample feature list."""


class ProcessStatusError(ValueError):
    """Exception raised when an action cannot be performed on a task due to its current status."""


class RegistryError(ValueError):
    """Exception raised when an entry is not found in a registry."""


class RepeatedIdError(ValueError):
    """Exception raised when trying to add a resource with an existing id."""


class RowNotFound(ValueError):
    """Exception raised when a master row is not found in the row store."""
