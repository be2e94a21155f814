"""
Error taxonomy for the conversion service.
Every error carries the HTTP status it is rendered with; main.py registers a
single handler that turns them into plain-text responses.
"""
from typing import Optional


class Yt2Mp3Error(Exception):
    """Base exception for request-terminating errors."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidRequest(Yt2Mp3Error):
    """A required query parameter is missing or blank."""

    status_code = 400


class ProcessLaunchError(Yt2Mp3Error):
    """The OS could not start the extraction tool."""

    status_code = 500


class ToolError(Yt2Mp3Error):
    """The extraction tool exited with a non-zero status."""

    status_code = 400

    def __init__(self, returncode: int, stderr: str):
        super().__init__(stderr)
        self.returncode = returncode
        self.stderr = stderr


class ToolTimeout(Yt2Mp3Error):
    """The extraction tool did not finish in time and was killed."""

    status_code = 504


class MetadataParseError(Yt2Mp3Error):
    """The tool succeeded but printed something that is not JSON."""

    status_code = 500


class ClientDisconnected(Yt2Mp3Error):
    """The HTTP client went away before the response was ready."""

    status_code = 499


class UnhandledFault(Yt2Mp3Error):
    """Any other failure inside a handler (file I/O, unexpected errors)."""

    status_code = 500
