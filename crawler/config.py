"""
Configuration for the URL crawler.
Defines request bounds, crawl limits, server binding and logging settings.
Values come from the environment (a local .env file is loaded first).
"""

import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv(Path.cwd() / '.env')


def _env_int(name, default):
    """Read an integer setting, keeping the default when the value is malformed."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# HTTP server binding
HOST = os.getenv("HOST", "0.0.0.0")
PORT = _env_int("PORT", 3001)

# Network timeout for HTTP requests (seconds)
REQUEST_TIMEOUT = _env_int("REQUEST_TIMEOUT", 8)

# Redirects followed per request before the fetch is failed
MAX_REDIRECTS = _env_int("MAX_REDIRECTS", 5)

# Request identification
USER_AGENT = os.getenv("USER_AGENT", "URL-Crawler-Bot/1.0")
ACCEPT_HEADER = os.getenv("ACCEPT_HEADER", "text/html")

# Page budget used when a crawl request does not specify maxUrls
DEFAULT_MAX_URLS = _env_int("DEFAULT_MAX_URLS", 100)

# Worker threads available to background crawl jobs
MAX_PARALLEL_JOBS = _env_int("MAX_PARALLEL_JOBS", 3)

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE") or None

# CORS origins, comma separated ("*" allows any origin)
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",")
    if origin.strip()
]
