"""
Print, share and scroll actions on a rendered report document.

The host environment (browser shell, desktop wrapper, headless runner) owns
the actual print dialog, clipboard and scrolling. DocumentActions only
decides what to hand over and which notification to publish.
"""
import logging
import os
import re
from abc import ABC, abstractmethod
from typing import List, Optional

from intel_reports.config.settings import ReportSettings
from intel_reports.errors import ClipboardError
from intel_reports.notifications.notifier import Notifier
from intel_reports.rendering.document import ReportDocument, render_document_html

logger = logging.getLogger(__name__)

LINK_COPIED_MESSAGE = "Link copied to clipboard"
LINK_COPY_FAILED_MESSAGE = "Failed to copy link"


class HostEnvironment(ABC):
    """Capabilities the surrounding application provides."""

    @abstractmethod
    def print_document(self, html: str, title: str) -> Optional[str]:
        """Open the print flow for a standalone HTML page."""
        pass

    @abstractmethod
    def copy_to_clipboard(self, text: str):
        """Copy text; raise ClipboardError when the clipboard is unavailable."""
        pass

    @abstractmethod
    def scroll_to(self, anchor: str):
        pass


class HeadlessHost(HostEnvironment):
    """Host for servers and tests: printing writes an HTML file, clipboard and scroll are recorded."""

    def __init__(self, output_dir: str = "output", clipboard_available: bool = True):
        self.output_dir = output_dir
        self.clipboard_available = clipboard_available
        self.clipboard: Optional[str] = None
        self.scrolled_to: List[str] = []
        self.printed: List[str] = []

    def print_document(self, html: str, title: str) -> Optional[str]:
        os.makedirs(self.output_dir, exist_ok=True)
        slug = re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-") or "report"
        path = os.path.join(self.output_dir, f"{slug}.html")
        with open(path, "w", encoding="utf-8") as f:
            f.write(html)
        self.printed.append(path)
        logger.info(f"Printable report written to {path}")
        return path

    def copy_to_clipboard(self, text: str):
        if not self.clipboard_available:
            raise ClipboardError("Clipboard is not available")
        self.clipboard = text

    def scroll_to(self, anchor: str):
        self.scrolled_to.append(anchor)


class DocumentActions:
    """User-triggered actions on the displayed document."""

    def __init__(self, host: HostEnvironment, notifier: Notifier, settings: ReportSettings):
        self.host = host
        self.notifier = notifier
        self.settings = settings

    def share_url(self) -> str:
        return f"{self.settings.public_base_url.rstrip('/')}/reports"

    def print_report(self, document: ReportDocument) -> Optional[str]:
        """Hand the printable page to the host. The table of contents is hidden in print."""
        return self.host.print_document(render_document_html(document), document.title)

    def share(self) -> bool:
        """Copy the reports page link and report the result as a notification."""
        try:
            self.host.copy_to_clipboard(self.share_url())
        except Exception as e:
            logger.warning(f"Copying share link failed: {e}")
            self.notifier.error(LINK_COPY_FAILED_MESSAGE)
            return False
        self.notifier.success(LINK_COPIED_MESSAGE)
        return True

    def scroll_to_section(self, document: ReportDocument, section_id: str) -> bool:
        """Mark a section active in the table of contents and scroll it into view."""
        if not document.toc.select(section_id):
            logger.debug(f"Ignoring scroll to unknown section {section_id}")
            return False
        section = document.get_section(section_id)
        self.host.scroll_to(section.anchor)
        return True
