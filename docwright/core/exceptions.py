"""
docwright.core.exceptions
=========================

Error taxonomy shared by the parsing and persistence layers.

• ValidationError     – required content missing after extraction, or a
                         SaveRequest that must never reach the disk.
• DocumentWriteError  – directory creation / file write failed; wraps the
                         original OSError untouched.
• ConfigError         – settings file or overrides are inconsistent.

A declined save (file exists, overwrite not requested) is *not* an error;
see core.models.save_result.
"""

from __future__ import annotations


class DocwrightError(Exception):
    """Base class for every error raised by docwright."""


class ValidationError(DocwrightError):
    def __init__(self, message: str, *, remediation: str | None = None) -> None:
        self.remediation = remediation
        super().__init__(message if not remediation else f"{message}\n\n{remediation}")
        self.reason = message


class DocumentWriteError(DocwrightError):
    def __init__(self, message: str, cause: OSError) -> None:
        super().__init__(f"{message}: {cause}")
        self.cause = cause


class ConfigError(DocwrightError):
    pass
