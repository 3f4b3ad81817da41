#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adf/renderers/base.py
"""Base class for ADF document renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from md2adf.adf.nodes import AdfDocument
from md2adf.exceptions import InvalidOptionsError
from md2adf.options.base import BaseRendererOptions
from md2adf.utils.io_utils import OutputTarget, write_text


class BaseRenderer(ABC):
    """Abstract base class for renderers of finished ADF documents.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        self.options = options

    @abstractmethod
    def render_to_string(self, document: AdfDocument) -> str:
        """Render the document to a string."""

    def render(self, document: AdfDocument, output: OutputTarget) -> None:
        """Render the document and write it to ``output``.

        Parameters
        ----------
        document : AdfDocument
            Document to render
        output : str, Path, IO[bytes], or IO[str]
            File path or file-like object; text is written as UTF-8

        """
        write_text(self.render_to_string(document), output)

    @staticmethod
    def _validate_options_type(
        options: BaseRendererOptions | None, expected_type: type, renderer_name: str
    ) -> None:
        """Raise InvalidOptionsError if options are not an ``expected_type``."""
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
