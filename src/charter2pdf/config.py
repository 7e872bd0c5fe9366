"""Local configuration for charter2pdf."""

from __future__ import annotations

import os
from pathlib import Path


DEFAULT_CACHE_DIR = ".charter2pdf_cache"
DEFAULT_CACHE_TTL_SECONDS = 24 * 60 * 60
DEFAULT_RENDER_URL = "http://localhost:3000/api/export-pdf"
DEFAULT_EXPORT_TIMEOUT_S = 60.0
DEFAULT_EXPORT_MAX_RETRIES = 2
DEFAULT_EXPORT_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "charter2pdf/0.1"
DEFAULT_LOG_LEVEL = "INFO"

# Page geometry: letter paper (11in) minus 1in top and bottom margins, at 72pt/in.
DEFAULT_PAGE_HEIGHT_PT = 648.0
DEFAULT_ORPHAN_THRESHOLD_PT = 100.0
DEFAULT_TOC_ENTRIES_PER_PAGE = 25

# Local-only cache directory for exported documents.
CHARTER2PDF_CACHE_PATH = Path(os.getenv("CHARTER2PDF_CACHE_PATH", DEFAULT_CACHE_DIR)).expanduser().resolve()
CHARTER2PDF_CACHE_TTL_SECONDS = int(os.getenv("CHARTER2PDF_CACHE_TTL_SECONDS", str(DEFAULT_CACHE_TTL_SECONDS)))
CHARTER2PDF_RENDER_URL = os.getenv("CHARTER2PDF_RENDER_URL", DEFAULT_RENDER_URL)
CHARTER2PDF_EXPORT_TIMEOUT_S = float(os.getenv("CHARTER2PDF_EXPORT_TIMEOUT_S", str(DEFAULT_EXPORT_TIMEOUT_S)))
CHARTER2PDF_EXPORT_MAX_RETRIES = int(os.getenv("CHARTER2PDF_EXPORT_MAX_RETRIES", str(DEFAULT_EXPORT_MAX_RETRIES)))
CHARTER2PDF_EXPORT_BACKOFF_S = float(os.getenv("CHARTER2PDF_EXPORT_BACKOFF_S", str(DEFAULT_EXPORT_BACKOFF_S)))
CHARTER2PDF_USER_AGENT = os.getenv("CHARTER2PDF_USER_AGENT", DEFAULT_USER_AGENT)
CHARTER2PDF_LOG_LEVEL = os.getenv("CHARTER2PDF_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

CHARTER2PDF_PAGE_HEIGHT_PT = float(os.getenv("CHARTER2PDF_PAGE_HEIGHT_PT", str(DEFAULT_PAGE_HEIGHT_PT)))
CHARTER2PDF_ORPHAN_THRESHOLD_PT = float(
    os.getenv("CHARTER2PDF_ORPHAN_THRESHOLD_PT", str(DEFAULT_ORPHAN_THRESHOLD_PT))
)
CHARTER2PDF_TOC_ENTRIES_PER_PAGE = int(
    os.getenv("CHARTER2PDF_TOC_ENTRIES_PER_PAGE", str(DEFAULT_TOC_ENTRIES_PER_PAGE))
)
