"""
Screenshot capture with optional Allure attachment.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional, Union

import allure
from loguru import logger
from playwright.sync_api import Page

from .exceptions import ScreenshotError


def timestamped_path(directory: Union[str, Path], name: str) -> Path:
    """Build ``<directory>/<name>_<YYYYmmdd_HHMMSS>.png``."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return Path(directory) / f"{name}_{timestamp}.png"


def take_screenshot(
    page: Page,
    path: Union[str, Path],
    full_page: bool = False,
    attach: bool = True,
    name: Optional[str] = None,
) -> Path:
    """
    Take screenshot and optionally attach to Allure.

    Args:
        page: Page to capture
        path: Destination PNG file; parent directories are created
        full_page: Capture full scrollable page
        attach: Whether to attach to the Allure report
        name: Attachment name (defaults to the file stem)

    Returns:
        Path to saved screenshot

    Raises:
        ScreenshotError: When the file cannot be written
    """
    filepath = Path(path)
    try:
        filepath.parent.mkdir(parents=True, exist_ok=True)
        png = page.screenshot(full_page=full_page)
        filepath.write_bytes(png)
    except OSError as e:
        raise ScreenshotError(f"Unable to write screenshot to {filepath}: {e}") from e

    if attach:
        allure.attach(
            png,
            name=name or filepath.stem,
            attachment_type=allure.attachment_type.PNG,
        )

    logger.debug(f"Screenshot saved: {filepath}")
    return filepath


__all__ = [
    "take_screenshot",
    "timestamped_path",
]
