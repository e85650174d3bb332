import pytest

from chkkit.markup import (
    LABEL_GOT,
    LABEL_WANT,
    MARK_CHG_OFF,
    MARK_CHG_ON,
    MARK_DEL_OFF,
    MARK_DEL_ON,
    MARK_GOT_OFF,
    MARK_GOT_ON,
    MARK_INS_OFF,
    MARK_INS_ON,
    MARK_MSG_OFF,
    MARK_MSG_ON,
    MARK_SEP_OFF,
    MARK_SEP_ON,
    MARK_WNT_OFF,
    MARK_WNT_ON,
    DiffType,
    DisplayMarks,
    got_label,
    got_wnt,
    mark_chg,
    mark_del,
    mark_ins,
    mark_msg,
    resolve_marks,
    want_label,
)

MSG = "<-- MSG -->"

TEST_MARKS = DisplayMarks(
    del_on="⨴",
    del_off="⨵",
    ins_on="⨭",
    ins_off="⨮",
    chg_on="«",
    chg_off="»",
    sep_on="⧚",
    sep_off="⧛",
    got_on="{",
    got_off="}",
    wnt_on="[",
    wnt_off="]",
    msg_on="<",
    msg_off=">",
)


def test_want_label():
    assert want_label(MSG) == MARK_WNT_ON + LABEL_WANT + ": " + MARK_WNT_OFF + MSG


def test_got_label():
    assert got_label(MSG) == MARK_GOT_ON + LABEL_GOT + ": " + MARK_GOT_OFF + MSG


def test_mark_ins_and_del():
    assert mark_ins(MSG) == MARK_INS_ON + MSG + MARK_INS_OFF
    assert mark_del(MSG) == MARK_DEL_ON + MSG + MARK_DEL_OFF


def test_mark_chg_got():
    assert mark_chg(MSG, MSG.lower(), DiffType.GOT) == MARK_CHG_ON + MSG + MARK_CHG_OFF


def test_mark_chg_want():
    assert (
        mark_chg(MSG, MSG.lower(), DiffType.WANT)
        == MARK_CHG_ON + MSG.lower() + MARK_CHG_OFF
    )


def test_mark_chg_merge():
    assert mark_chg(MSG, MSG.lower(), DiffType.MERGE) == (
        MARK_DEL_ON + MSG.lower() + MARK_DEL_OFF
        + MARK_SEP_ON + "/" + MARK_SEP_OFF
        + MARK_INS_ON + MSG + MARK_INS_OFF
    )


def test_mark_msg():
    assert mark_msg("ABC") == MARK_MSG_ON + "ABC" + MARK_MSG_OFF


@pytest.mark.parametrize(
    ("marked", "expected"),
    [
        (mark_ins("ABC"), "⨭ABC⨮"),
        (mark_del("ABC"), "⨴ABC⨵"),
        (mark_chg("ABC", "DEF", DiffType.GOT), "«ABC»"),
        (mark_chg("ABC", "DEF", DiffType.WANT), "«DEF»"),
        (mark_chg("ABC", "DEF", DiffType.MERGE), "⨴DEF⨵⧚/⧛⨭ABC⨮"),
        (mark_msg("ABC"), "<ABC>"),
        (got_label("x"), "{GOT: }x"),
        (want_label("y"), "[WNT: ]y"),
    ],
)
def test_resolve_marks_with_custom_display(marked, expected):
    assert resolve_marks(marked, TEST_MARKS) == expected


def test_resolve_marks_default_display():
    marks = DisplayMarks()
    assert resolve_marks(mark_ins("ABC")) == marks.ins_on + "ABC" + marks.ins_off
    assert "|-|" not in resolve_marks(mark_chg("A", "B", DiffType.MERGE))


def test_resolve_marks_leaves_plain_text():
    assert resolve_marks("no marks here", TEST_MARKS) == "no marks here"


def test_got_wnt_single_line():
    assert got_wnt("a", "b") == (
        MARK_GOT_ON + "GOT: " + MARK_GOT_OFF + "a\n"
        + MARK_WNT_ON + "WNT: " + MARK_WNT_OFF + "b"
    )


def test_got_wnt_multi_line_prefix():
    result = resolve_marks(got_wnt("AB\n", "AC"), TEST_MARKS)
    assert result == "{GOT: }\nAB\n\n[WNT: ]\nAC"