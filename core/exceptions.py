"""
Exceptions shared by the matching engine, the collection flow and the store.
"""


class ServiceException(Exception):
    """Base exception for service layer errors."""
    pass


class ValidationException(ServiceException):
    """Raised when a reply cannot be parsed for the current stage."""
    pass


class RecordNotFoundException(ServiceException):
    """Raised when an expected record is absent."""
    pass


class StoreException(ServiceException):
    """Raised when the persistence layer fails."""
    pass


class ConfigurationException(ServiceException):
    """Raised on a catalog/code mismatch, e.g. an unknown category or record kind."""
    pass
