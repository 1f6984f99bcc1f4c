#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the norgfmt library.

This module defines specialized exception classes for the error conditions
that can occur while loading a syntax tree and rendering it back to
canonical Norg text. Every error is terminal: the first one raised during a
run aborts the whole render, no partial output is produced.

Exception Hierarchy
-------------------
- NorgFmtError (base exception)

  - ValidationError (parameter/option validation)

  - FileError (file access and I/O)

  - ParsingError (syntax tree could not be obtained or decoded)

  - RenderingError (tree-to-text failures)
    - MissingRequiredChildError (structural precondition of a formatter violated)
    - MalformedSpanError (a node's byte span is not valid text)

  - DependencyError (missing/incompatible optional packages)

"""

from typing import Any


class NorgFmtError(Exception):
    """Base exception class for all norgfmt-specific errors.

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


class ValidationError(NorgFmtError):
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


class FileError(NorgFmtError):
    """Exception raised when an input or output file cannot be used.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class ParsingError(NorgFmtError):
    """Exception raised when a syntax tree cannot be obtained.

    Raised when the external parser reports syntax errors, or when a
    serialized tree is not in the expected interchange format.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(NorgFmtError):
    """Exception raised when rendering a syntax tree to text fails.

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


class MissingRequiredChildError(RenderingError):
    """Exception raised when a node lacks a child its formatter requires.

    For example a heading without a star prefix, or an attached modifier
    without its opening delimiter.

    Parameters
    ----------
    context : str
        Short description of the violated precondition (e.g. "heading has no stars")
    node_kind : str, optional
        Kind tag of the node being formatted

    """

    def __init__(self, context: str, node_kind: str | None = None):
        """Initialize the missing child error."""
        message = f"{context} (while formatting '{node_kind}')" if node_kind else context
        super().__init__(message, rendering_stage=node_kind)
        self.context = context
        self.node_kind = node_kind


class MalformedSpanError(RenderingError):
    """Exception raised when a node's byte span cannot be decoded as text.

    Parameters
    ----------
    start_byte : int
        Start offset of the offending span
    end_byte : int
        End offset of the offending span
    message : str, optional
        Custom error message
    original_error : Exception, optional
        The decoding error, if any

    """

    def __init__(
        self,
        start_byte: int,
        end_byte: int,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the malformed span error."""
        if message is None:
            message = f"Span [{start_byte}, {end_byte}) is not valid UTF-8 text in the source"
        super().__init__(message, rendering_stage="span", original_error=original_error)
        self.start_byte = start_byte
        self.end_byte = end_byte


class DependencyError(NorgFmtError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    converter_name : str
        Name of the component requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    install_command : str, optional
        Suggested pip install command to resolve the issue
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        install_command: str = "",
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
        self.original_import_error = original_import_error
        if message is None:
            message_parts = []

            if missing_packages:
                pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
                message_parts.append(f"{converter_name} requires the following packages: {pkg_list}")

            if version_mismatches:
                mismatch_str = ", ".join(
                    f"'{name}' (requires {required}, but {installed} is installed)"
                    for name, required, installed in version_mismatches
                )
                message_parts.append(f"{converter_name} has version mismatches: {mismatch_str}")

            message = "\n".join(message_parts)

            if install_command:
                message += f"\nInstall with: {install_command}"
            else:
                all_packages = missing_packages + [(name, req) for name, req, _ in version_mismatches]
                if all_packages:
                    packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in all_packages)
                    message += f"\nInstall with: pip install --upgrade {packages_str}"

        super().__init__(message)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.install_command = install_command
