"""
Address Manager Exceptions
"""


class AddressManagerError(Exception):
    """Base exception for credential and address manager errors"""

    pass


class ConfigurationError(AddressManagerError):
    """Invalid address source configuration"""

    pass


class MissingCredentialError(AddressManagerError):
    """Operation requires a credential the manager does not hold"""

    pass


class FeatureNotAvailableError(AddressManagerError, NotImplementedError):
    """Capability is deferred and not yet implemented"""

    pass
