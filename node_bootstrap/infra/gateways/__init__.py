from .appdirs_platform_directory_gateway import AppdirsPlatformDirectoryGateway

__all__ = ("AppdirsPlatformDirectoryGateway",)
