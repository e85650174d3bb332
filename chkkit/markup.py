"""Internal markup used to decorate got/want output and its display form."""

import enum
from dataclasses import dataclass

MARK_WNT_ON = "|-|WntOn|-|"
MARK_WNT_OFF = "|-|WntOff|-|"
MARK_GOT_ON = "|-|GoTOn|-|"
MARK_GOT_OFF = "|-|GoTOff|-|"
MARK_DEL_ON = "|-|DeLOn|-|"
MARK_DEL_OFF = "|-|DeLOff|-|"
MARK_INS_ON = "|-|InSOn|-|"
MARK_INS_OFF = "|-|InSOff|-|"
MARK_CHG_ON = "|-|ChGOn|-|"
MARK_CHG_OFF = "|-|ChGOff|-|"
MARK_SEP_ON = "|-|SePOn|-|"
MARK_SEP_OFF = "|-|SePOff|-|"
MARK_MSG_ON = "|-|MsGOn|-|"
MARK_MSG_OFF = "|-|MsGOff|-|"

LABEL_WANT = "WNT"
LABEL_GOT = "GOT"


class DiffType(enum.Enum):
    """Which side of a difference is being rendered."""

    GOT = "got"
    WANT = "want"
    MERGE = "merge"


@dataclass(frozen=True)
class DisplayMarks:
    """Strings that replace the internal marks when output is displayed."""

    del_on: str = "\x1b[31m"
    del_off: str = "\x1b[0m"
    ins_on: str = "\x1b[32m"
    ins_off: str = "\x1b[0m"
    chg_on: str = "\x1b[33m"
    chg_off: str = "\x1b[0m"
    sep_on: str = "\x1b[90m"
    sep_off: str = "\x1b[0m"
    wnt_on: str = "\x1b[36m"
    wnt_off: str = "\x1b[0m"
    got_on: str = "\x1b[35m"
    got_off: str = "\x1b[0m"
    msg_on: str = "\x1b[1m"
    msg_off: str = "\x1b[0m"

    def replacements(self):
        """Yield (internal mark, display string) pairs in resolution order."""
        yield MARK_DEL_ON, self.del_on
        yield MARK_DEL_OFF, self.del_off
        yield MARK_INS_ON, self.ins_on
        yield MARK_INS_OFF, self.ins_off
        yield MARK_CHG_ON, self.chg_on
        yield MARK_CHG_OFF, self.chg_off
        yield MARK_SEP_ON, self.sep_on
        yield MARK_SEP_OFF, self.sep_off
        yield MARK_WNT_ON, self.wnt_on
        yield MARK_WNT_OFF, self.wnt_off
        yield MARK_GOT_ON, self.got_on
        yield MARK_GOT_OFF, self.got_off
        yield MARK_MSG_ON, self.msg_on
        yield MARK_MSG_OFF, self.msg_off


def want_label(msg):
    """Prefix msg with the marked-up want label."""
    return f"{MARK_WNT_ON}{LABEL_WANT}: {MARK_WNT_OFF}{msg}"


def got_label(msg):
    """Prefix msg with the marked-up got label."""
    return f"{MARK_GOT_ON}{LABEL_GOT}: {MARK_GOT_OFF}{msg}"


def mark_ins(text):
    """Mark text as inserted."""
    return MARK_INS_ON + text + MARK_INS_OFF


def mark_del(text):
    """Mark text as deleted."""
    return MARK_DEL_ON + text + MARK_DEL_OFF


def mark_chg(got, wnt, diff_type):
    """Mark a changed span as seen from the got side, want side or both."""
    if diff_type is DiffType.GOT:
        return MARK_CHG_ON + got + MARK_CHG_OFF
    if diff_type is DiffType.WANT:
        return MARK_CHG_ON + wnt + MARK_CHG_OFF
    return (
        MARK_DEL_ON + wnt + MARK_DEL_OFF
        + MARK_SEP_ON + "/" + MARK_SEP_OFF
        + MARK_INS_ON + got + MARK_INS_OFF
    )


def mark_msg(text):
    """Mark text as a user message."""
    return MARK_MSG_ON + text + MARK_MSG_OFF


def resolve_marks(line, display=None):
    """Replace every internal mark in line with its display string."""
    display = display or DisplayMarks()
    for mark, shown in display.replacements():
        line = line.replace(mark, shown)
    return line


def got_wnt(got, wnt):
    """Join labelled got and want values, starting multi-line values on a new line."""
    prefix = "\n" if "\n" in got or "\n" in wnt else ""
    return got_label(prefix + got) + "\n" + want_label(prefix + wnt)