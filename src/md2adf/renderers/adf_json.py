#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2adf/renderers/adf_json.py
"""ADF JSON rendering from AdfDocument.

This module provides the AdfJsonRenderer class which serializes a finished
ADF document to JSON text using the adf.serialization module.
"""

from __future__ import annotations

from md2adf.adf.nodes import AdfDocument
from md2adf.adf.serialization import adf_to_json
from md2adf.options.adf import AdfRendererOptions
from md2adf.renderers.base import BaseRenderer


class AdfJsonRenderer(BaseRenderer):
    """Render AdfDocument values to ADF JSON.

    Parameters
    ----------
    options : AdfRendererOptions or None, default = None
        JSON rendering options

    Examples
    --------
    Compact output (the default):
        >>> from md2adf.adf import DocumentBuilder
        >>> builder = DocumentBuilder()
        >>> _ = builder.begin_code_block().append_text("a = 42")
        >>> AdfJsonRenderer().render_to_string(builder.finish())
        '{"type": "doc", "version": 1, "content": [{"type": "codeBlock", "content": [{"type": "text", "text": "a = 42"}]}]}'

    Pretty printed:
        >>> renderer = AdfJsonRenderer(AdfRendererOptions(indent=2))

    """

    def __init__(self, options: AdfRendererOptions | None = None):
        """Initialize the ADF JSON renderer with options."""
        BaseRenderer._validate_options_type(options, AdfRendererOptions, "adf")
        options = options or AdfRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: AdfRendererOptions = options

    def render_to_string(self, document: AdfDocument) -> str:
        """Render a document to ADF JSON text.

        Parameters
        ----------
        document : AdfDocument
            The document to render

        Returns
        -------
        str
            JSON text

        """
        return adf_to_json(
            document,
            indent=self.options.indent,
            ensure_ascii=self.options.ensure_ascii,
            sort_keys=self.options.sort_keys,
        )
