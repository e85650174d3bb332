"""Removal helpers for test files and directories, and unix script cleanup."""

import os
import shutil

from chkkit.errors import InvalidDirectoryError, InvalidFileError

_SPACE_CUTOUTS = " \t"
_SHEBANG = "#!/"

INVALID_SCRIPT_MESSAGE = (
    "invalid unix script:  first line must start with '#!/' "
    "after optional whitespace"
)


def remove_test_dir(path, dir_mode=0o700):
    """Remove the directory tree at path; a missing path is not an error.

    Raises InvalidDirectoryError when path exists but is not a directory.
    """
    if not os.path.lexists(path):
        return
    if not os.path.isdir(path):
        raise InvalidDirectoryError(path)
    os.chmod(path, dir_mode)
    shutil.rmtree(path)


def remove_test_file(path, file_mode=0o600):
    """Remove the file at path; a missing path is not an error.

    Raises InvalidFileError when path exists but is a directory.
    """
    if not os.path.lexists(path):
        return
    if os.path.isdir(path):
        raise InvalidFileError(path)
    os.chmod(path, file_mode)
    os.remove(path)


def clean_unix_script(lines):
    """Return script text with leading blank lines and first-line indent removed.

    Every line loses trailing blanks; later lines lose as much leading
    indentation as the first line had.  Raises ValueError when the first
    non-blank line does not start with '#!/'.
    """
    out = []
    trim_first = 0
    for entry in lines:
        for raw in entry.split("\n"):
            line = raw.rstrip(_SPACE_CUTOUTS)
            if not out:
                if not line:
                    continue
                stripped = line.lstrip(_SPACE_CUTOUTS)
                if not stripped.startswith(_SHEBANG):
                    raise ValueError(INVALID_SCRIPT_MESSAGE)
                trim_first = len(line) - len(stripped)
                out.append(stripped)
            elif trim_first > 0 and len(line) >= trim_first:
                out.append(line[trim_first:])
            else:
                out.append(line)
    return "".join(f"{line}\n" for line in out)