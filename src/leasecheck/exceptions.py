"""
Custom exceptions for lease check runs.
"""


class LeaseCheckError(Exception):
    """Base exception for lease check errors"""
    pass


class InvalidRequestError(LeaseCheckError):
    """Raised when a run request is missing required input"""
    pass


class MalformedRecordError(LeaseCheckError):
    """Raised when an instrument record cannot be read"""
    pass


class ConfigurationError(LeaseCheckError):
    """Raised when the settings file is missing or invalid"""
    pass
