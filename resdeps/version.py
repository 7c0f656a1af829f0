"""Version information for resdeps."""

RESDEPS_VERSION_MAJOR = 1
RESDEPS_VERSION_MINOR = 0
RESDEPS_VERSION_PATCH = 0
RESDEPS_VERSION = f"{RESDEPS_VERSION_MAJOR}.{RESDEPS_VERSION_MINOR}.{RESDEPS_VERSION_PATCH}"

# Catalog document layout understood by the loaders
CATALOG_FORMAT_VERSION = "1.0"


def get_version_string() -> str:
    """Get full version string."""
    return f"resdeps {RESDEPS_VERSION} (catalog format {CATALOG_FORMAT_VERSION})"


def get_version_info() -> dict:
    """Get version information as dictionary."""
    return {
        "resdeps": {
            "major": RESDEPS_VERSION_MAJOR,
            "minor": RESDEPS_VERSION_MINOR,
            "patch": RESDEPS_VERSION_PATCH,
            "version": RESDEPS_VERSION,
        },
        "catalog_format": CATALOG_FORMAT_VERSION,
    }
