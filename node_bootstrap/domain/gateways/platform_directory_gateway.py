from abc import ABC, abstractmethod
from pathlib import Path


class PlatformDirectoryGateway(ABC):
    """
    Base class for looking up the platform's per-user application data root.
    """

    @abstractmethod
    def get_app_root(self, app_name: str, author: str) -> Path:
        """
        Returns the default data root for the application, creating it if necessary.

        Args:
            app_name: Name of the application, usually the executable name
            author: Vendor of the application; some platforms nest app data under it

        Raises:
            PlatformDirectoryException: if the platform has no usable data root
        """
