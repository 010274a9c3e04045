"""cvexport/render/chromium.py

HTML -> PDF through headless Chromium (Playwright).
"""

import logging
import time

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from cvexport.core import AppError, ErrorCode, ErrorReason
from cvexport.core.config import settings
from cvexport.render.types import PageOptions

logger = logging.getLogger("cvexport.render")

# A4 at 96 DPI
VIEWPORT = {"width": 794, "height": 1123}

CHROMIUM_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
    "--no-first-run",
    "--no-zygote",
    "--disable-background-timer-throttling",
    "--disable-renderer-backgrounding",
]


class ChromiumRenderer:
    def __init__(self, *, executable_path: str | None = None, timeout_seconds: int | None = None):
        self.executable_path = executable_path if executable_path is not None else settings.CHROME_BIN
        self.timeout_ms = (timeout_seconds or settings.RENDER_TIMEOUT_SECONDS) * 1000

    def render_to_pdf(self, html: str, options: PageOptions | None = None) -> bytes:
        options = options or PageOptions()
        launch_kwargs: dict = {"headless": True, "args": CHROMIUM_ARGS}
        if self.executable_path:
            launch_kwargs["executable_path"] = self.executable_path

        t0 = time.perf_counter()
        try:
            with sync_playwright() as p:
                browser = p.chromium.launch(**launch_kwargs)
                try:
                    page = browser.new_page(viewport=VIEWPORT)
                    page.set_content(html, wait_until="networkidle", timeout=self.timeout_ms)
                    pdf_bytes = page.pdf(
                        format=options.page_size,
                        print_background=options.print_background,
                        margin=options.margins.as_dict(),
                    )
                finally:
                    browser.close()
        except PlaywrightError as e:
            logger.error("render.failed", extra={"error": str(e), "html_chars": len(html)})
            raise AppError(
                code=ErrorCode.RENDER_FAILED,
                reason=ErrorReason.RENDER_FAILED,
                message="Could not render the CV to PDF",
                status_code=500,
            ) from e

        logger.info(
            "render.done",
            extra={
                "html_chars": len(html),
                "pdf_bytes": len(pdf_bytes),
                "duration_ms": int((time.perf_counter() - t0) * 1000),
            },
        )
        return pdf_bytes
