"""Base classes for parser and renderer options.

This module defines the foundation classes for the option dataclasses used
throughout the md2adf conversion pipeline.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Copy-on-write helpers for frozen option dataclasses.

    Option objects are shared freely between parsers, renderers and threads,
    so they are never mutated; callers derive variants with
    :meth:`create_updated` instead.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy with the given fields replaced.

        Field validation in ``__post_init__`` runs again on the copy.

        Parameters
        ----------
        **kwargs : Any
            Field values to override

        Returns
        -------
        Self
            The updated copy; the original is left untouched

        """
        return replace(self, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Return the option values keyed by field name."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Parsers turn source text into the generic syntax tree consumed by the
    converter. Subclasses define format-specific options as frozen dataclass
    fields.
    """


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Renderers turn a finished ADF document into an output representation.
    Subclasses define format-specific options as frozen dataclass fields.
    """
