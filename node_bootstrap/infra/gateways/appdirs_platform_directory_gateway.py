from pathlib import Path

import appdirs
from node_bootstrap.core.domain_exceptions import PlatformDirectoryException
from node_bootstrap.core.loggers import logger_name, make_logger
from node_bootstrap.domain.gateways import PlatformDirectoryGateway

logger = make_logger(logger_name())


class AppdirsPlatformDirectoryGateway(PlatformDirectoryGateway):
    def get_app_root(self, app_name: str, author: str) -> Path:
        data_dir = appdirs.user_data_dir(app_name, author)
        # expanduser leaves "~" in place when no home directory can be determined
        if not data_dir or data_dir.startswith("~"):
            raise PlatformDirectoryException(app_name=app_name, author=author)

        app_root = Path(data_dir)
        try:
            app_root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise PlatformDirectoryException(app_name=app_name, author=author) from e
        logger.info(f"Using platform data root `{app_root}`")
        return app_root
