"""Global constants for magento-deploy"""

APP_NAME = "magento-deploy"
LOG_FORMAT = "%(message)s"

# Config / state versions
CONFIG_VERSION = "1.0"
STATE_VERSION = "1.0"

# Project identification
PROJECT_CONFIG_FILE = ".magento-deploy.yaml"
DEPLOY_STATE_FILE = ".magento-deploy.json"

# Package types
PACKAGE_TYPE_CORE = "magento-core"
PACKAGE_TYPE_MODULE = "magento-module"
PACKAGE_TYPE_THEME = "magento-theme"
DEFAULT_PACKAGE_TYPE = "library"

# Deploy strategies
STRATEGY_SYMLINK = "symlink"
STRATEGY_COPY = "copy"
STRATEGY_NONE = "none"
DEFAULT_DEPLOY_STRATEGY = STRATEGY_SYMLINK

# Package types that are resolved but never deployed
DEFAULT_IGNORED_TYPES = (
    "library",
    "metapackage",
    "project",
    "composer-plugin",
    "composer-installer",
)

# Directory defaults
DEFAULT_VENDOR_DIR = "vendor"
DEFAULT_INSTALLED_FILE = "composer/installed.json"

# Mapping sources
MODMAN_FILE = "modman"
MAP_EXTRA_KEY = "map"
DEFAULT_MAP_EXCLUDES = frozenset([
    MODMAN_FILE,
    "composer.json",
    ".git",
])

# Environment variables
ENV_ROOT_DIR = "MAGENTO_DEPLOY_ROOT_DIR"
ENV_VENDOR_DIR = "MAGENTO_DEPLOY_VENDOR_DIR"
ENV_DEPLOY_STRATEGY = "MAGENTO_DEPLOY_STRATEGY"
ENV_LOG_LEVEL = "MAGENTO_DEPLOY_LOG_LEVEL"


# Error codes
class ErrorCode:
    CONFIG_ERROR = "MD001"
    NOT_INITIALIZED = "MD002"
    ALREADY_INITIALIZED = "MD003"
    UNSUPPORTED_PACKAGE_TYPE = "MD004"
    STRATEGY_DEPLOY_FAILED = "MD010"
    SOURCE_MISSING = "MD011"
    TARGET_OCCUPIED = "MD012"
    DEPLOY_IO_ERROR = "MD013"


# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ERROR = "✗"
EMOJI_WARNING = "⚠"
EMOJI_ARROW = "→"
