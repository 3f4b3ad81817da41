#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers for finished ADF documents."""

from md2adf.renderers.adf_json import AdfJsonRenderer
from md2adf.renderers.base import BaseRenderer

__all__ = ["AdfJsonRenderer", "BaseRenderer"]
