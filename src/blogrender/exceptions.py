#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the blogrender library.

This module defines the typed failures a render call can produce. Only the
renderer facade, the Markdown parser adapter and the command-line entry point
raise them; metadata extraction, link resolution, list extraction and the
transpiler itself degrade to partial output instead of failing.

Exception Hierarchy
-------------------
- BlogRenderError (base exception)

  - ValidationError (parameter/option validation)
    - ConfigurationError (invalid configuration file or values)

  - FileError (file access and I/O)
    - FileReadError (source or template missing/unreadable)
      - DocumentNotFoundError (requested document does not exist)
    - FileWriteError (output write failures)

  - ParsingError (Markdown parsing failures)
    - MarkdownParseError (grammar rejected input)
    - LanguageError (grammar binding could not be loaded)

  - TemplateError (reserved for template failures)

  - MissingMetadataError (reserved for strict metadata mode)

  - SecurityError (security violations)
    - InvalidPathError (document path escapes the content root)

  - DependencyError (missing/incompatible packages)

Every class carries an ``error_type`` code so callers such as an HTTP layer
can map failures to responses without inspecting the class hierarchy.

"""

from __future__ import annotations

from typing import Any


class BlogRenderError(Exception):
    """Base exception class for all blogrender-specific errors.

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

    error_type = "INTERNAL_ERROR"

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(BlogRenderError):
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

    error_type = "VALIDATION_ERROR"

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


class ConfigurationError(ValidationError):
    """Exception raised when a configuration file or value cannot be used.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    config_path : str, optional
        Path of the configuration file being loaded
    original_error : Exception, optional
        The original exception that caused this error

    """

    error_type = "CONFIGURATION_ERROR"

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error."""
        super().__init__(message, parameter_name="config", parameter_value=config_path, original_error=original_error)
        self.config_path = config_path


class FileError(BlogRenderError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    error_type = "FILE_ERROR"

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileReadError(FileError):
    """Exception raised when a document or template cannot be read.

    Parameters
    ----------
    file_path : str
        Path to the file that could not be read
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    error_type = "FILE_READ_ERROR"

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file read error."""
        if message is None:
            message = f"Failed to read file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class DocumentNotFoundError(FileReadError):
    """Exception raised when the requested document does not exist."""

    error_type = "NOT_FOUND"

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(file_path, message=message, original_error=original_error)


class FileWriteError(FileError):
    """Exception raised when writing rendered output fails.

    Parameters
    ----------
    file_path : str
        Path to the output file that failed to write
    message : str, optional
        Custom error message. If not provided, uses default message
    original_error : Exception, optional
        The original exception that caused this error

    """

    error_type = "FILE_WRITE_ERROR"

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file write error."""
        if message is None:
            message = f"Failed to write file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class ParsingError(BlogRenderError):
    """Exception raised when Markdown parsing fails.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    error_type = "PARSING_ERROR"

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class MarkdownParseError(ParsingError):
    """Exception raised when the grammar produces no usable syntax tree."""

    error_type = "MARKDOWN_PARSE_ERROR"

    def __init__(self, message: str | None = None, original_error: Exception | None = None):
        """Initialize the Markdown parse error."""
        super().__init__(
            message or "Failed to parse markdown content", parsing_stage="parse", original_error=original_error
        )


class LanguageError(ParsingError):
    """Exception raised when the Markdown grammar cannot be bound to a parser."""

    error_type = "LANGUAGE_ERROR"

    def __init__(self, message: str | None = None, original_error: Exception | None = None):
        """Initialize the language setup error."""
        super().__init__(
            message or "Failed to set markdown language", parsing_stage="language", original_error=original_error
        )


class TemplateError(BlogRenderError):
    """Exception reserved for template application failures."""

    error_type = "TEMPLATE_ERROR"


class MissingMetadataError(BlogRenderError):
    """Exception reserved for documents lacking required front matter.

    Parameters
    ----------
    key : str
        The metadata key that was required but absent

    """

    error_type = "MISSING_METADATA_ERROR"

    def __init__(self, key: str, original_error: Exception | None = None):
        """Initialize the missing metadata error."""
        super().__init__(f"Missing required metadata: {key}", original_error)
        self.key = key


class SecurityError(BlogRenderError):
    """Base exception for security violations."""

    error_type = "SECURITY_ERROR"


class InvalidPathError(SecurityError):
    """Exception raised when a document path would escape the content root.

    Parameters
    ----------
    message : str
        Description of the rejected path
    requested_path : str, optional
        The document identifier as supplied by the caller

    """

    error_type = "INVALID_PATH_ERROR"

    def __init__(self, message: str, requested_path: str | None = None, original_error: Exception | None = None):
        """Initialize the invalid path error."""
        super().__init__(message, original_error)
        self.requested_path = requested_path


class DependencyError(BlogRenderError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    converter_name : str
        Name of the component requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_import_error : ImportError, optional
        The first ImportError encountered while checking packages

    """

    error_type = "DEPENDENCY_ERROR"

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
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

            all_packages = missing_packages + [(name, req) for name, req, _ in version_mismatches]
            if all_packages:
                packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in all_packages)
                message += f"\nInstall with: pip install --upgrade {packages_str}"

        super().__init__(message, original_import_error)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
