"""Default configuration values and file content."""

from podexplorer.catalog.client import DEFAULT_API_BASE_URL
from podexplorer.config.schema import GlobalConfig
from podexplorer.query.pipeline import DEFAULT_PAGE_SIZE

DEFAULT_GLOBAL_CONFIG = GlobalConfig()


def get_default_config_content() -> str:
    """Get default config.yaml content with comments."""
    return f"""# Podcast Explorer configuration
version: "1"

# Catalog API (listing at /, detail at /id/<podcast-id>)
api_base_url: {DEFAULT_API_BASE_URL}

# Podcasts per page when browsing
page_size: {DEFAULT_PAGE_SIZE}

# HTTP timeout in seconds
request_timeout: 30.0

# Sort used when --sort is not given
# (title-asc, title-desc, updated-newest, updated-oldest)
default_sort: title-asc

# Logging level (DEBUG, INFO, WARNING, ERROR)
log_level: WARNING

# Terminal color theme (auto, dark, light)
theme: auto
"""
