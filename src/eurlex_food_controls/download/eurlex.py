"""EUR-Lex HTML downloader with Playwright and a plain requests fallback."""

from __future__ import annotations

import argparse
import logging
import re
from dataclasses import dataclass
from pathlib import Path

import requests

logger = logging.getLogger(__name__)

MIN_CONTENT_BYTES = 1000
REQUEST_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/120.0.0.0 Safari/537.36",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}
FALLBACK_STATUSES = {"playwright_missing", "browser_error", "navigation_error", "content_too_short"}


@dataclass
class DownloadResult:
    """Structured downloader result for orchestration and observability."""

    ok: bool
    status: str
    error: str | None
    output_path: Path
    final_url: str | None
    bytes_written: int
    method: str


def _failure(status: str, error: str, output_path: Path, url: str | None, method: str) -> DownloadResult:
    return DownloadResult(
        ok=False,
        status=status,
        error=error,
        output_path=output_path,
        final_url=url,
        bytes_written=0,
        method=method,
    )


def extract_name_from_url(url: str) -> str:
    """Extract a reasonable filename from EUR-Lex URL."""
    if "uri=" in url:
        uri_part = url.split("uri=")[-1].split("&")[0]
        name = uri_part.replace("OJ:", "").replace("CELEX:", "")
        name = re.sub(r"[^a-zA-Z0-9_-]", "_", name)
        return name
    return "document"


def with_language(url: str, lang: str) -> str:
    return re.sub(r"/[A-Z]{2}/TXT/", f"/{lang}/TXT/", url)


def _write(content: str, output_path: Path, url: str, method: str) -> DownloadResult:
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
    except OSError as e:
        logger.error("Could not write %s: %s", output_path, e)
        return _failure("write_error", str(e), output_path, url, method)

    logger.info("Saved %d bytes to %s", len(content), output_path)
    return DownloadResult(
        ok=True,
        status="ok",
        error=None,
        output_path=output_path,
        final_url=url,
        bytes_written=len(content),
        method=method,
    )


def _render(browser, url: str) -> str:
    """Load `url` in a fresh browser context and return the rendered HTML."""
    context = browser.new_context(user_agent=REQUEST_HEADERS["User-Agent"])
    page = context.new_page()
    page.goto(url, wait_until="networkidle", timeout=60000)
    page.wait_for_selector("body", timeout=30000)
    return page.content()


def download_eurlex(url: str, output_path: Path, lang: str = "EN") -> DownloadResult:
    """Download HTML from EUR-Lex using Playwright."""
    try:
        from playwright.sync_api import sync_playwright
    except ImportError:
        logger.warning("Playwright not installed. Run: pip install playwright && playwright install chromium")
        return _failure("playwright_missing", "Playwright not installed.", output_path, None, "playwright")

    url = with_language(url, lang)
    logger.info("Downloading %s -> %s", url, output_path)

    with sync_playwright() as p:
        try:
            browser = p.chromium.launch(headless=True)
        except Exception as e:
            logger.error("Could not launch Chromium: %s", e)
            return _failure("browser_error", str(e), output_path, url, "playwright")

        try:
            content = _render(browser, url)
        except Exception as e:
            logger.error("Navigation to %s failed: %s", url, e)
            return _failure("navigation_error", str(e), output_path, url, "playwright")
        finally:
            browser.close()

    if len(content) < MIN_CONTENT_BYTES:
        logger.warning("Page content seems too short, might be a challenge page")
        return _failure(
            "content_too_short",
            f"Page content shorter than {MIN_CONTENT_BYTES} bytes.",
            output_path,
            url,
            "playwright",
        )

    if "<table" not in content:
        logger.warning("No table found in %s", url)

    return _write(content, output_path, url, "playwright")


def fetch_html(url: str, timeout: float = 60.0) -> str:
    """Fetch a document with requests; raises `requests.RequestException` on failure."""
    response = requests.get(url, headers=REQUEST_HEADERS, timeout=timeout, allow_redirects=True)
    response.raise_for_status()
    return response.text


def download_document(url: str, output_path: Path, lang: str = "EN", timeout: float = 60.0) -> DownloadResult:
    """Download with Playwright, fall back to requests."""
    if output_path.exists() and output_path.stat().st_size > MIN_CONTENT_BYTES:
        logger.info("Reusing %s", output_path)
        return DownloadResult(
            ok=True,
            status="already_downloaded",
            error=None,
            output_path=output_path,
            final_url=None,
            bytes_written=0,
            method="cache",
        )

    result = download_eurlex(url, output_path, lang=lang)
    if result.ok or result.status not in FALLBACK_STATUSES:
        return result

    url = with_language(url, lang)
    logger.info("Falling back to requests for %s (%s)", url, result.status)
    try:
        content = fetch_html(url, timeout=timeout)
    except requests.RequestException as e:
        logger.error("Request to %s failed: %s", url, e)
        return _failure("requests_error", str(e), output_path, url, "requests")
    if len(content) < MIN_CONTENT_BYTES:
        return _failure(
            "content_too_short",
            f"Page content shorter than {MIN_CONTENT_BYTES} bytes.",
            output_path,
            url,
            "requests",
        )
    return _write(content, output_path, url, "requests")


def main() -> None:
    parser = argparse.ArgumentParser(description="Download EUR-Lex HTML documents")
    parser.add_argument("url", help="EUR-Lex URL")
    parser.add_argument("name", nargs="?", help="Output filename (without .html)")
    parser.add_argument("--lang", "-l", default="EN", help="Language code (default: EN)")
    parser.add_argument("--output-dir", "-o", default="downloads/eur-lex", help="Output directory")

    args = parser.parse_args()

    name = args.name or extract_name_from_url(args.url)
    output_path = Path(args.output_dir) / f"{name}.html"

    result = download_document(args.url, output_path, args.lang)
    if result.ok:
        print(f"Saved {output_path} ({result.method})")
    else:
        print(f"Error: {result.status}: {result.error}")
    raise SystemExit(0 if result.ok else 1)


if __name__ == "__main__":
    main()
