from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Resolves the per-user application directory that holds the optional
configuration file and the diagnostic log.
"""

import os

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "ArchiveListing"
UNIX_APP_DIR_NAME = ".archive_listing"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/ArchiveListing
    - Linux/Mac: ~/.archive_listing

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    # Posix fallback (Linux/Mac)
    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_path(path: str) -> str:
    """
    Expand user and environment shortcuts and return an absolute path.

    Args:
        path: Raw input path string (may contain ~ or $VAR).

    Returns:
        str: Normalized absolute path.
    """
    return os.path.abspath(os.path.expandvars(os.path.expanduser(path.strip())))
