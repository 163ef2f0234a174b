import pytest
from keynotation.keysymdef import KEYSYM_NAMES, LATIN1_SUPPLEMENT, VOID_SYMBOL
from keynotation.keysyms import DEFAULT_KEYSYMS, KeysymTable


def test_latin1_table_is_complete():
    assert len(LATIN1_SUPPLEMENT) == 96
    assert KEYSYM_NAMES["nobreakspace"] == 0xA0
    assert KEYSYM_NAMES["multiply"] == 0xD7
    assert KEYSYM_NAMES["ssharp"] == 0xDF
    assert KEYSYM_NAMES["eacute"] == 0xE9
    assert KEYSYM_NAMES["division"] == 0xF7
    assert KEYSYM_NAMES["ydiaeresis"] == 0xFF


@pytest.mark.parametrize(
    "name,keyval",
    (
        ("a", 0x61),
        ("Z", 0x5A),
        ("0", 0x30),
        ("space", 0x20),
        ("minus", 0x2D),
        ("asciitilde", 0x7E),
        ("Agrave", 0xC0),
        ("Return", 0xFF0D),
        ("Henkan", 0xFF23),
        ("Zenkaku_Hankaku", 0xFF2A),
        ("Page_Up", 0xFF55),
        ("F1", 0xFFBE),
        ("F12", 0xFFC9),
        ("F35", 0xFFE0),
        ("KP_5", 0xFFB5),
        ("Shift_L", 0xFFE1),
        ("Hyper_R", 0xFFEE),
        # single characters
        ("-", 0x2D),
        ("é", 0xE9),
        ("あ", 0x1003042),
        # unicode and raw keyvals
        ("U3042", 0x1003042),
        ("U+3042", 0x1003042),
        ("U0041", 0x41),
        ("0x1008ff13", 0x1008FF13),
        # unicode keysyms for Latin-1 characters are the Latin-1 keysym
        ("0x1000041", 0x41),
        ("0x01000061", 0x61),
    ),
)
def test_resolve_name(name: str, keyval: int):
    assert DEFAULT_KEYSYMS.resolve_name(name) == keyval


@pytest.mark.parametrize("name", ("bogus", "", "\n", "VoidSymbol", "usleep", "0x0", "U12", "0x01000000"))
def test_resolve_name_not_found(name: str):
    assert DEFAULT_KEYSYMS.resolve_name(name) == DEFAULT_KEYSYMS.VOID == VOID_SYMBOL


@pytest.mark.parametrize(
    "keyval,name",
    (
        (0x61, "a"),
        (0x20, "space"),
        (0xFF55, "Prior"),
        (0xFF23, "Henkan_Mode"),
        (0x1003042, "U3042"),
        (0x1000041, "A"),
        (0x10000E9, "eacute"),
        (0x1000000, None),
        (0x1008FF13, "0x1008ff13"),
        (VOID_SYMBOL, None),
        (0, None),
    ),
)
def test_canonical_name(keyval: int, name):
    assert DEFAULT_KEYSYMS.canonical_name(keyval) == name


@pytest.mark.parametrize(
    "keyval,char",
    (
        (0x61, "a"),
        (0xE9, "é"),
        (0x1003042, "あ"),
        (0xFF08, "\b"),
        (0xFF09, "\t"),
        (0xFF0D, "\r"),
        (0xFF1B, "\x1b"),
        (0xFFFF, "\x7f"),
        (0xFF8D, "\r"),
        (0xFFB3, "3"),
        (0xFFAB, "+"),
        (0xFFE1, "\0"),
        (0xFF51, "\0"),
        (0x1008FF13, "\0"),
    ),
)
def test_literal_char(keyval: int, char: str):
    assert DEFAULT_KEYSYMS.literal_char(keyval) == char


def test_custom_names():
    table = KeysymTable(names={"Foo": 0x1000, "foo": 0x1000})
    assert table.resolve_name("foo") == 0x1000
    assert table.canonical_name(0x1000) == "Foo"
    # single characters and unicode names don't need a table entry
    assert table.resolve_name("a") == 0x61
    assert table.resolve_name("space") == VOID_SYMBOL


def test_canonical_names_resolve_back():
    for name, keyval in KEYSYM_NAMES.items():
        if keyval == VOID_SYMBOL:
            continue
        canonical = DEFAULT_KEYSYMS.canonical_name(keyval)
        assert DEFAULT_KEYSYMS.resolve_name(canonical) == keyval, name
