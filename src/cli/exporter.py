"""Writing converted documents to disk.

Provides single-file HTML export and a zip bundle holding the original
XML next to the converted HTML.
"""

import logging
import os
import zipfile
from pathlib import Path
from typing import Optional

from .errors import ExportError
from .models import DEFAULT_BUNDLE_NAME

logger = logging.getLogger(__name__)

STDIN_SOURCE = "-"
STDIN_STEM = "stdin"
BUNDLE_ORIGINAL_NAME = "original.xml"
BUNDLE_CONVERTED_NAME = "converted.html"


class Exporter:
    """Writes HTML files and conversion bundles.

    Output goes to ``output_dir`` when set, otherwise next to each input
    (standard input goes to the working directory).

    Example:
        >>> exporter = Exporter(output_dir="./html")
        >>> exporter.write_html("feed.xml", "<div>...</div>")
        PosixPath('html/feed.html')
    """

    def __init__(self, output_dir: Optional[str] = None):
        """Initialize Exporter.

        Args:
            output_dir: Target directory (None writes next to each input)
        """
        self.output_dir = output_dir

    @staticmethod
    def stem_for(source: str) -> str:
        """Base name used for files derived from ``source``."""
        if source == STDIN_SOURCE:
            return STDIN_STEM
        return Path(source).stem

    def _target_dir(self, source: str) -> Path:
        if self.output_dir:
            return Path(self.output_dir)
        if source == STDIN_SOURCE:
            return Path(".")
        return Path(source).parent

    def _ensure_dir(self, directory: Path) -> None:
        try:
            os.makedirs(directory, exist_ok=True)
        except OSError as e:
            raise ExportError(str(directory), 'create_directory', str(e))

    def html_path_for(self, source: str) -> Path:
        """Path of the HTML file written for ``source``."""
        return self._target_dir(source) / f"{self.stem_for(source)}.html"

    def bundle_path_for(self, source: str, bundle_name: str = DEFAULT_BUNDLE_NAME) -> Path:
        """Path of the zip bundle written for ``source``."""
        name = bundle_name.replace("{stem}", self.stem_for(source))
        return self._target_dir(source) / name

    def write_html(self, source: str, html: str) -> Path:
        """Write converted HTML for ``source``.

        Returns:
            Path of the written file

        Raises:
            ExportError: If the directory or file cannot be written
        """
        path = self.html_path_for(source)
        self._ensure_dir(path.parent)
        try:
            path.write_text(html, encoding='utf-8')
        except OSError as e:
            raise ExportError(str(path), 'write', str(e))

        logger.info(f"Wrote {path}")
        return path

    def write_bundle(
        self,
        source: str,
        xml_text: str,
        html: str,
        bundle_name: str = DEFAULT_BUNDLE_NAME,
    ) -> Path:
        """Write a zip archive with ``original.xml`` and ``converted.html``.

        Returns:
            Path of the written archive

        Raises:
            ExportError: If the archive cannot be written
        """
        path = self.bundle_path_for(source, bundle_name)
        self._ensure_dir(path.parent)
        try:
            with zipfile.ZipFile(path, 'w', compression=zipfile.ZIP_DEFLATED) as archive:
                archive.writestr(BUNDLE_ORIGINAL_NAME, xml_text)
                archive.writestr(BUNDLE_CONVERTED_NAME, html)
        except OSError as e:
            raise ExportError(str(path), 'bundle', str(e))

        logger.info(f"Wrote bundle {path}")
        return path
