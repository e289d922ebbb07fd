"""
File Saver Utility for assembled figures

This module hands assembled Plotly figures to the rendering backend and
writes the result to disk:
- HTML (interactive, via Plotly's HTML writer)
- SVG / PNG (static, requires kaleido)

The output format is chosen by the file extension.
"""

from pathlib import Path
from typing import Union
import plotly.graph_objects as go

from src.graph_engine.core import settings
from src.shared_lib.utils.logger import get_logger

logger = get_logger(__name__)


class FileSaver:
    """
    Manager for saving figures to disk.

    Example Usage:
        >>> saver = FileSaver(output_dir=Path("graphs"))
        >>> saver.save(fig, "distribution.html")
        >>> saver.save(fig, "distribution.svg")
    """

    STATIC_FORMATS = ("svg", "png")

    def __init__(self, output_dir: Union[str, Path] = settings.OUTPUT_DIR):
        """
        Initialize FileSaver.

        Args:
            output_dir: Directory where figures will be saved.
                        Will be created if it doesn't exist
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        logger.debug(f"FileSaver initialized with output_dir: {self.output_dir}")

    @classmethod
    def output_format(cls, filename: Union[str, Path]) -> str:
        """
        Return the output format given by the filename extension.

        Raises:
            ValueError: If the extension is not html, svg or png
        """
        extension = Path(filename).suffix.lower().lstrip(".")
        if extension != "html" and extension not in cls.STATIC_FORMATS:
            raise ValueError(
                f"Unsupported output format '{extension}' for {filename}. "
                f"Supported: html, {', '.join(cls.STATIC_FORMATS)}"
            )
        return extension

    def save(self, fig: go.Figure, filename: str) -> Path:
        """Save a figure in the format given by the filename extension."""
        extension = self.output_format(filename)
        if extension == "html":
            return self.save_html(fig, filename)
        return self.save_image(fig, filename, image_format=extension)

    def save_html(
        self,
        fig: go.Figure,
        filename: str,
        include_plotlyjs: Union[str, bool] = settings.PLOTLY_JS_MODE,
    ) -> Path:
        """
        Save figure as interactive HTML file.

        Args:
            fig: Figure to save
            filename: File name inside the output directory
            include_plotlyjs: How to include Plotly.js library
                - "cdn": Load from CDN (smaller file, requires internet)
                - "inline": Embed full library (larger file, works offline)
                - "directory": Reference a plotly.min.js next to the file

        Returns:
            Path: Full path to saved HTML file

        Raises:
            IOError: If file cannot be written
        """
        filepath = self.output_dir / filename

        try:
            fig.write_html(
                str(filepath),
                include_plotlyjs=include_plotlyjs,
                config={
                    "displayModeBar": True,
                    "displaylogo": False,
                },
            )
        except OSError as e:
            logger.error(f"Failed to save HTML file: {e}", exc_info=True)
            raise IOError(f"Could not save HTML to {filepath}: {e}") from e

        logger.info(f"Graph saved as HTML: {filepath} ({self._get_file_size(filepath)})")
        return filepath

    def save_image(
        self,
        fig: go.Figure,
        filename: str,
        image_format: str = "svg",
        scale: float = settings.IMAGE_SCALE,
    ) -> Path:
        """
        Save figure as a static image.

        IMPORTANT: Requires 'kaleido' package to be installed:
            pip install kaleido

        Width and height come from the figure layout (``graph.width`` and
        ``graph.height``); when unset, kaleido's defaults apply.

        Args:
            fig: Figure to save
            filename: File name inside the output directory
            image_format: "svg" or "png"
            scale: Scaling factor for resolution

        Returns:
            Path: Full path to saved image

        Raises:
            ImportError: If kaleido is not installed
            IOError: If file cannot be written
        """
        filepath = self.output_dir / filename

        try:
            fig.write_image(str(filepath), format=image_format, scale=scale)
        except ImportError as e:
            error_msg = (
                "Kaleido package not installed. To save static images, install it:\n"
                "  pip install kaleido"
            )
            logger.error(error_msg)
            raise ImportError(error_msg) from e
        except (OSError, ValueError) as e:
            logger.error(f"Failed to save {image_format.upper()} file: {e}", exc_info=True)
            raise IOError(f"Could not save {image_format.upper()} to {filepath}: {e}") from e

        logger.info(
            f"Graph saved as {image_format.upper()}: {filepath} "
            f"(scale={scale}, {self._get_file_size(filepath)})"
        )
        return filepath

    def _get_file_size(self, filepath: Path) -> str:
        """
        Get human-readable file size.

        Returns:
            str: Formatted file size (e.g., "1.2 MB", "345 KB")
        """
        try:
            size_bytes = filepath.stat().st_size
        except OSError:
            return "unknown size"

        if size_bytes < 1024:
            return f"{size_bytes} bytes"
        elif size_bytes < 1024 * 1024:
            return f"{size_bytes / 1024:.1f} KB"
        else:
            return f"{size_bytes / (1024 * 1024):.1f} MB"
