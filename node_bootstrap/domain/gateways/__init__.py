from .platform_directory_gateway import PlatformDirectoryGateway

__all__ = ("PlatformDirectoryGateway",)
