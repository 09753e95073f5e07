class RegistrationException(Exception):
    """Base exception for failures of a registration run. All of them are terminal."""
    pass


class ConfigurationException(RegistrationException):
    """Raised when a required setting is missing at startup."""
    pass


class RemoteCallFailedException(RegistrationException):
    """Raised when a provider call fails; the message names the call and its key argument."""
    pass


class ResourceNotFoundException(RegistrationException):
    """Raised when an expected task, attachment, interface or hosted zone is absent."""
    pass


class NoPublicAssociationException(RegistrationException):
    """Raised when the task's network interface has no public IP."""
    pass


class MetadataDecodeException(RegistrationException):
    """Raised when the task metadata document cannot be decoded."""
    pass


class RegistrationTimeoutException(RegistrationException):
    """Raised when a registration run exceeds its deadline."""
    pass
