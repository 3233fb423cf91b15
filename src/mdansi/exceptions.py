#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the mdansi library.

This module defines the exception classes raised while configuring and running
the terminal renderer. They carry more context than the generic built-ins so
callers (the command line in particular) can report failures precisely.

Exception Hierarchy
-------------------
- MdAnsiError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a renderer)

  - RenderingError (output generation failures)
    - RenderDepthExceededError (document nested deeper than allowed)

"""

from typing import Any, Sequence


class MdAnsiError(Exception):
    """Base exception class for all mdansi-specific errors.

    Catching this will catch every exception raised deliberately by the
    library.

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


class ValidationError(MdAnsiError):
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
    """Exception raised when a renderer receives the wrong options class.

    Parameters
    ----------
    renderer_name : str
        Name of the renderer that received the options
    expected_type : type
        The options class the renderer expects
    received_type : type
        The options class that was actually passed

    """

    def __init__(self, renderer_name: str, expected_type: type, received_type: type):
        """Initialize the error with the mismatched option types."""
        message = (
            f"Invalid options type for '{renderer_name}' renderer. "
            f"Expected {expected_type.__name__}, got {received_type.__name__}."
        )
        super().__init__(message, parameter_name="options", parameter_value=received_type)
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class RenderingError(MdAnsiError):
    """Exception raised when output rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class RenderDepthExceededError(RenderingError):
    """Exception raised when block or span nesting exceeds the configured maximum depth.

    Only raised when the renderer runs in strict mode; otherwise an over-nested
    block is skipped, over-nested spans are flattened to their plain text, and
    either is reported as a diagnostic.

    Parameters
    ----------
    path : sequence of int
        Child indices leading from the document root to the offending block
    max_depth : int
        The configured maximum nesting depth
    stage : {"block", "inline"}, default "block"
        Whether blocks or inline spans were nested too deeply

    """

    def __init__(self, path: Sequence[int], max_depth: int, stage: str = "block"):
        """Initialize the error with the offending block path."""
        self.path = tuple(path)
        self.max_depth = max_depth
        super().__init__(
            f"{stage.capitalize()} nesting exceeds maximum depth of {max_depth} at {format_node_path(self.path)}",
            rendering_stage=stage,
        )


def format_node_path(path: Sequence[int]) -> str:
    """Format a child-index path as ``document[0][2][1]``."""
    return "document" + "".join(f"[{index}]" for index in path)
