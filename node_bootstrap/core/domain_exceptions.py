from dataclasses import dataclass


class DomainException(Exception):
    """
    Base class for exceptions thrown for domain (business logic) errors.
    """


class ConfigurationResolutionException(DomainException):
    """
    Thrown when a node configuration cannot be resolved, e.g. when the chain specification fails
    to load or the database configuration step rejects its inputs.
    """


@dataclass
class PlatformDirectoryException(ConfigurationResolutionException):
    """
    Thrown when the platform cannot supply a default application-data root for the node.
    """

    app_name: str
    author: str

    def __str__(self) -> str:
        return (
            f"Could not determine a default application directory for app={self.app_name!r} "
            f"author={self.author!r}; pass an explicit base path instead"
        )


class TracingFlagAlreadySetException(DomainException):
    """
    Thrown when the process-wide tracing flag is written a second time.
    """
