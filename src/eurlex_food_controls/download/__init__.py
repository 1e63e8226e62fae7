"""Downloader exports."""

from eurlex_food_controls.download.eurlex import (
    DownloadResult,
    download_document,
    download_eurlex,
    extract_name_from_url,
    fetch_html,
    main,
)

__all__ = [
    "DownloadResult",
    "download_document",
    "download_eurlex",
    "extract_name_from_url",
    "fetch_html",
    "main",
]
