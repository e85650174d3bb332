"""Exceptions raised by the check kit."""

import json
import os


def _quote(value):
    """Return value as a double-quoted string with escapes."""
    if isinstance(value, os.PathLike):
        value = os.fspath(value)
    return json.dumps(str(value), ensure_ascii=False)


class CheckError(Exception):
    """Base of every error the kit raises."""

    message = "check error"

    def __init__(self, detail=None):
        self.detail = detail
        if detail is None:
            text = self.message
        else:
            text = f"{self.message}: {_quote(detail)}"
        super().__init__(text)


class InvalidLastArgError(CheckError):
    """The last argument given to a check was not acceptable."""

    message = "invalid last arg error"


class InvalidDirectoryError(CheckError):
    """A path expected to be a directory is not one."""

    message = "invalid directory"


class InvalidFileError(CheckError):
    """A path expected to be a regular file is not one."""

    message = "invalid file"


class ReadPastEndOfDataError(CheckError):
    """A simulated reader was read again after reporting end of data."""

    message = "read past end of data"


class ForcedOutOfSpaceError(CheckError):
    """A simulated writer reached its configured byte limit."""

    message = "forced out of space"