#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the md2adf library.

This module defines the exception classes raised while converting Markdown
into Atlassian Document Format (ADF) and while loading or configuring the
pieces of the pipeline.

Exception Hierarchy
-------------------
- Md2AdfError (base exception)

  - UnsupportedNodeError (Markdown construct outside the supported subset)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a component)
    - AdfValidationError (malformed ADF data passed to the loader)

  - BuilderFinishedError (use of a consumed document builder)

"""

from typing import Any


class Md2AdfError(Exception):
    """Base exception class for all md2adf-specific errors.

    Catching this will catch all library-specific errors. Failures of the
    underlying Markdown parser are not wrapped and propagate unchanged.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class UnsupportedNodeError(Md2AdfError):
    """Exception raised when the converter meets an unsupported Markdown node.

    Only paragraphs and code blocks are accepted at the top level, and only
    plain text and links inside a paragraph. Any other node kind aborts the
    whole conversion with this error; no partial document is produced.

    Parameters
    ----------
    node_kind : str
        Kind of the offending node in the generic syntax tree (e.g. "heading")
    context : str, default "document"
        Where the node was found: "document" for top-level nodes,
        "paragraph" for inline children of a paragraph
    message : str, optional
        Custom error message. If not provided, one naming the kind is generated
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    node_kind : str
        The rejected node kind
    context : str
        The location of the rejected node

    """

    def __init__(
        self,
        node_kind: str,
        context: str = "document",
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the unsupported node error."""
        if message is None:
            if context == "paragraph":
                message = f"Only text and link nodes are supported inside a paragraph, found '{node_kind}'"
            else:
                message = f"Only paragraph and code nodes are supported, found '{node_kind}'"
        super().__init__(message, original_error=original_error)
        self.node_kind = node_kind
        self.context = context


UnsupportedNode = UnsupportedNodeError


class ValidationError(Md2AdfError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided.

    For example, passing AdfRendererOptions to the Markdown parser.

    Parameters
    ----------
    component_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        component_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{component_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


class AdfValidationError(ValidationError):
    """Exception raised when ADF data does not match the supported schema.

    Parameters
    ----------
    message : str
        Description of the problem
    path : str, optional
        Location of the offending value, e.g. "/content/0/content/1"

    """

    def __init__(self, message: str, path: str | None = None, original_error: Exception | None = None):
        """Initialize the ADF validation error."""
        if path:
            message = f"{message} (at {path})"
        super().__init__(message, parameter_name="data", original_error=original_error)
        self.path = path


class BuilderFinishedError(Md2AdfError):
    """Exception raised when a document builder is used after finish()."""

    def __init__(self, message: str = "DocumentBuilder has already been finished"):
        """Initialize the builder error."""
        super().__init__(message)


__all__ = [
    "Md2AdfError",
    "UnsupportedNodeError",
    "UnsupportedNode",
    "ValidationError",
    "InvalidOptionsError",
    "AdfValidationError",
    "BuilderFinishedError",
]
