#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the tidyconf library.

Malformed option values and unknown option names are not exceptional:
they are recorded as diagnostics and parsing carries on. The classes below
cover the conditions that do abort an operation.

Exception Hierarchy
-------------------
- TidyConfError (base exception)

  - ValidationError (programmatic misuse of the option store)
    - OptionTypeError (typed accessor used on an option of another kind)

  - ConfigFileError (configuration file cannot be opened or decoded)
    - ConfigFormatError (structured config file is malformed)

  - ConfigWriteError (configuration cannot be saved)

"""

from __future__ import annotations

from typing import Any


class TidyConfError(Exception):
    """Base exception class for all tidyconf-specific errors.

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


class ValidationError(TidyConfError):
    """Exception raised when an option is accessed in an invalid way.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the option involved
    parameter_value : any, optional
        The offending value
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


class OptionTypeError(ValidationError):
    """Exception raised when a typed accessor does not match the option kind.

    Parameters
    ----------
    option_name : str
        Canonical name of the option
    expected : str
        Value kind the accessor works with
    actual : str
        Value kind declared by the option descriptor

    """

    def __init__(self, option_name: str, expected: str, actual: str):
        """Initialize the option type error."""
        message = f"Option '{option_name}' holds {actual} values, not {expected}"
        super().__init__(message, parameter_name=option_name, parameter_value=actual)
        self.expected = expected
        self.actual = actual


class ConfigFileError(TidyConfError):
    """Exception raised when a configuration file cannot be read.

    Covers a missing or unreadable file as well as an unresolvable
    character encoding name for the file.

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


class ConfigFormatError(ConfigFileError):
    """Exception raised when a TOML, YAML or JSON config file is malformed."""


class ConfigWriteError(TidyConfError):
    """Exception raised when a configuration cannot be written.

    Parameters
    ----------
    message : str
        Description of the write error
    output_path : str, optional
        Target path of the failed write
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, output_path: str | None = None, original_error: Exception | None = None):
        """Initialize the write error."""
        super().__init__(message, original_error=original_error)
        self.output_path = output_path
