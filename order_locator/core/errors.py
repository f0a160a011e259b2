class OrderLocatorError(Exception):
    """Base class for failures surfaced to the HTTP layer."""


class StorageError(OrderLocatorError):
    """The order store could not be reached, written or read."""


class GeocodeError(OrderLocatorError):
    """The geocoding provider failed or could not resolve an address."""


class ValidationError(OrderLocatorError):
    """The submitted order could not be read from the request."""
