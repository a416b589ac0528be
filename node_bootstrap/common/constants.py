NODE_NAME_MAX_LENGTH: int = 32

# directory layout under the base path
CHAINS_DIR: str = "chains"
DEFAULT_NETWORK_CONFIG_PATH: str = "network"

DEFAULT_DATABASE_CACHE_SIZE: int = 128  # MiB
DEFAULT_MAX_RUNTIME_INSTANCES: int = 8
DEFAULT_STATE_CACHE_SIZE: int = 0
