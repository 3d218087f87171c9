#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the md2adoc library.

This module defines specialized exception classes for the error conditions
that can occur while converting a Markdown document tree to AsciiDoc.

Exception Hierarchy
-------------------
- Md2AdocError (base exception)

  - ValidationError (parameter/option/input validation)
    - InvalidOptionsError (wrong options class for parser or renderer)
    - MalformedInputError (input that does not have the required shape)

  - ParsingError (Markdown front-end failures)

  - RenderingError (output generation failures)
    - UnsupportedNodeError (node kind the renderer does not know)

  - DependencyError (missing/incompatible packages)

"""

from typing import Any


class Md2AdocError(Exception):
    """Base exception class for all md2adoc-specific errors.

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


class ValidationError(Md2AdocError):
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
    """Exception raised when an incorrect options class is provided.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class MalformedInputError(ValidationError):
    """Exception raised when input text does not have the required shape.

    Raised, for example, when the HTML table converter is handed a fragment
    that does not start with a ``<table`` tag.

    Parameters
    ----------
    message : str
        Description of the problem
    input_text : str, optional
        The offending input (kept for debugging; only a preview is shown)

    """

    def __init__(self, message: str, input_text: str | None = None, original_error: Exception | None = None):
        """Initialize the malformed input error."""
        super().__init__(message, parameter_name="input", parameter_value=input_text, original_error=original_error)
        self.input_text = input_text


class ParsingError(Md2AdocError):
    """Exception raised when the Markdown front end fails to build a tree.

    Parameters
    ----------
    message : str
        Description of the parsing error
    parsing_stage : str, optional
        Stage where parsing failed (e.g., "tokenize", "tree_building")

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error with stage information."""
        super().__init__(message, original_error=original_error)
        self.parsing_stage = parsing_stage


class RenderingError(Md2AdocError):
    """Exception raised when AsciiDoc output cannot be produced.

    Parameters
    ----------
    message : str
        Description of the rendering error
    rendering_stage : str, optional
        Stage where rendering failed

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error with stage information."""
        super().__init__(message, original_error=original_error)
        self.rendering_stage = rendering_stage


class UnsupportedNodeError(RenderingError):
    """Exception raised when the renderer meets a node kind it cannot handle.

    This signals that the node model and the renderer have drifted apart.
    The whole conversion is aborted; the node is never skipped.

    Parameters
    ----------
    node : object
        The node that could not be rendered

    Attributes
    ----------
    node_type : str
        Class name of the unsupported node

    """

    def __init__(self, node: Any, message: str | None = None):
        """Initialize the error from the offending node."""
        node_type = type(node).__name__
        if message is None:
            message = f"Don't know how to handle node {node_type}: {node!r}"
        super().__init__(message, rendering_stage="visit")
        self.node = node
        self.node_type = node_type


class DependencyError(Md2AdocError):
    """Exception raised when required dependencies are missing or incompatible.

    Parameters
    ----------
    converter_name : str
        Name of the component that requires the dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    original_import_error : ImportError, optional
        The original ImportError, if any

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches or []
        self.original_import_error = original_import_error

        if message is None:
            parts = []
            if missing_packages:
                pkg_list = ", ".join(f"'{pkg}{spec}'" for pkg, spec in missing_packages)
                parts.append(f"'{converter_name}' requires the following packages: {pkg_list}")
            if self.version_mismatches:
                mismatch_list = ", ".join(
                    f"'{pkg}' (requires {req}, installed {inst})" for pkg, req, inst in self.version_mismatches
                )
                parts.append(f"version mismatches: {mismatch_list}")
            packages = " ".join(f'"{pkg}{spec}"' for pkg, spec in missing_packages)
            if not packages:
                packages = " ".join(f'"{pkg}{req}"' for pkg, req, _ in self.version_mismatches)
            message = "; ".join(parts) + f". Install with: pip install --upgrade {packages}"

        super().__init__(message, original_error=original_import_error)


__all__ = [
    "Md2AdocError",
    "ValidationError",
    "InvalidOptionsError",
    "MalformedInputError",
    "ParsingError",
    "RenderingError",
    "UnsupportedNodeError",
    "DependencyError",
]
