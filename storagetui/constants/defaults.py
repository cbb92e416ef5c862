"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# UI defaults
# ============================================================================

THEME_DEFAULT: Final = "textual-dark"
DETAILS_FOLLOW_CONTENT_DEFAULT: Final = True

# ============================================================================
# Config file location
# ============================================================================

CONFIG_ENV_VAR: Final = "STORAGETUI_CONFIG"
CONFIG_DIR_DEFAULT: Final = "~/.config/storagetui"
CONFIG_FILE_NAME: Final = "settings.yaml"

# ============================================================================
# Logging defaults
# ============================================================================

LOG_LEVEL_DEFAULT: Final = "WARNING"
LOG_FORMAT_DEFAULT: Final = "%(asctime)s %(levelname)s %(name)s: %(message)s"

__all__ = [
    "CONFIG_DIR_DEFAULT",
    "CONFIG_ENV_VAR",
    "CONFIG_FILE_NAME",
    "DETAILS_FOLLOW_CONTENT_DEFAULT",
    "LOG_FORMAT_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "THEME_DEFAULT",
]
