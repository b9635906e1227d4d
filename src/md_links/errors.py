"""Errors raised by the md-links pipeline."""

from pathlib import Path
from typing import Union


class MdLinksError(Exception):
    """Base class for pipeline errors."""

    message = "md-links error"

    def __init__(self, path: Union[str, Path, None] = None):
        self.path = path
        detail = f"{self.message}: {path}" if path is not None else self.message
        super().__init__(detail)


class FileNotFound(MdLinksError, FileNotFoundError):
    message = "File/directory not found"


class IncompatibleFileType(MdLinksError, ValueError):
    message = "Incompatible file: not a Markdown file"


class EmptyFile(MdLinksError, ValueError):
    message = "Unable to read the file because it is empty"


class NoLinksFound(MdLinksError):
    message = "No links found in this file"
