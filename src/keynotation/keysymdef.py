import string

# X11 keysym values, from X11/keysymdef.h. Only the keys an input method
# realistically binds are listed; anything else can still be written as
# U+codepoint ("U3042") or a raw hex keyval ("0x1008ff13").
# Where several names share a value, the first one listed is canonical.

VOID_SYMBOL = 0xFFFFFF

ASCII_PUNCTUATION = {
    "space": 0x20,
    "exclam": 0x21,
    "quotedbl": 0x22,
    "numbersign": 0x23,
    "dollar": 0x24,
    "percent": 0x25,
    "ampersand": 0x26,
    "apostrophe": 0x27,
    "parenleft": 0x28,
    "parenright": 0x29,
    "asterisk": 0x2A,
    "plus": 0x2B,
    "comma": 0x2C,
    "minus": 0x2D,
    "period": 0x2E,
    "slash": 0x2F,
    "colon": 0x3A,
    "semicolon": 0x3B,
    "less": 0x3C,
    "equal": 0x3D,
    "greater": 0x3E,
    "question": 0x3F,
    "at": 0x40,
    "bracketleft": 0x5B,
    "backslash": 0x5C,
    "bracketright": 0x5D,
    "asciicircum": 0x5E,
    "underscore": 0x5F,
    "grave": 0x60,
    "braceleft": 0x7B,
    "bar": 0x7C,
    "braceright": 0x7D,
    "asciitilde": 0x7E,
}

# 0xa0 through 0xff, sixteen per row
LATIN1_SUPPLEMENT = (
    "nobreakspace exclamdown cent sterling currency yen brokenbar section "
    "diaeresis copyright ordfeminine guillemotleft notsign hyphen registered macron "
    "degree plusminus twosuperior threesuperior acute mu paragraph periodcentered "
    "cedilla onesuperior masculine guillemotright onequarter onehalf threequarters questiondown "
    "Agrave Aacute Acircumflex Atilde Adiaeresis Aring AE Ccedilla "
    "Egrave Eacute Ecircumflex Ediaeresis Igrave Iacute Icircumflex Idiaeresis "
    "ETH Ntilde Ograve Oacute Ocircumflex Otilde Odiaeresis multiply "
    "Oslash Ugrave Uacute Ucircumflex Udiaeresis Yacute THORN ssharp "
    "agrave aacute acircumflex atilde adiaeresis aring ae ccedilla "
    "egrave eacute ecircumflex ediaeresis igrave iacute icircumflex idiaeresis "
    "eth ntilde ograve oacute ocircumflex otilde odiaeresis division "
    "oslash ugrave uacute ucircumflex udiaeresis yacute thorn ydiaeresis"
).split()

FUNCTION_KEYS = {
    "BackSpace": 0xFF08,
    "Tab": 0xFF09,
    "Linefeed": 0xFF0A,
    "Clear": 0xFF0B,
    "Return": 0xFF0D,
    "Pause": 0xFF13,
    "Scroll_Lock": 0xFF14,
    "Sys_Req": 0xFF15,
    "Escape": 0xFF1B,
    "Delete": 0xFFFF,
    # Japanese keyboard support
    "Multi_key": 0xFF20,
    "Kanji": 0xFF21,
    "Muhenkan": 0xFF22,
    "Henkan_Mode": 0xFF23,
    "Henkan": 0xFF23,
    "Romaji": 0xFF24,
    "Hiragana": 0xFF25,
    "Katakana": 0xFF26,
    "Hiragana_Katakana": 0xFF27,
    "Zenkaku": 0xFF28,
    "Hankaku": 0xFF29,
    "Zenkaku_Hankaku": 0xFF2A,
    "Touroku": 0xFF2B,
    "Massyo": 0xFF2C,
    "Kana_Lock": 0xFF2D,
    "Kana_Shift": 0xFF2E,
    "Eisu_Shift": 0xFF2F,
    "Eisu_toggle": 0xFF30,
    # cursor control
    "Home": 0xFF50,
    "Left": 0xFF51,
    "Up": 0xFF52,
    "Right": 0xFF53,
    "Down": 0xFF54,
    "Prior": 0xFF55,
    "Page_Up": 0xFF55,
    "Next": 0xFF56,
    "Page_Down": 0xFF56,
    "End": 0xFF57,
    "Begin": 0xFF58,
    # misc
    "Select": 0xFF60,
    "Print": 0xFF61,
    "Execute": 0xFF62,
    "Insert": 0xFF63,
    "Undo": 0xFF65,
    "Redo": 0xFF66,
    "Menu": 0xFF67,
    "Find": 0xFF68,
    "Cancel": 0xFF69,
    "Help": 0xFF6A,
    "Break": 0xFF6B,
    "Mode_switch": 0xFF7E,
    "Num_Lock": 0xFF7F,
    "ISO_Level3_Shift": 0xFE03,
    "ISO_Left_Tab": 0xFE20,
}

KEYPAD_KEYS = {
    "KP_Space": 0xFF80,
    "KP_Tab": 0xFF89,
    "KP_Enter": 0xFF8D,
    "KP_Home": 0xFF95,
    "KP_Left": 0xFF96,
    "KP_Up": 0xFF97,
    "KP_Right": 0xFF98,
    "KP_Down": 0xFF99,
    "KP_Prior": 0xFF9A,
    "KP_Next": 0xFF9B,
    "KP_End": 0xFF9C,
    "KP_Begin": 0xFF9D,
    "KP_Insert": 0xFF9E,
    "KP_Delete": 0xFF9F,
    "KP_Multiply": 0xFFAA,
    "KP_Add": 0xFFAB,
    "KP_Separator": 0xFFAC,
    "KP_Subtract": 0xFFAD,
    "KP_Decimal": 0xFFAE,
    "KP_Divide": 0xFFAF,
    "KP_Equal": 0xFFBD,
}

MODIFIER_KEYS = {
    "Shift_L": 0xFFE1,
    "Shift_R": 0xFFE2,
    "Control_L": 0xFFE3,
    "Control_R": 0xFFE4,
    "Caps_Lock": 0xFFE5,
    "Shift_Lock": 0xFFE6,
    "Meta_L": 0xFFE7,
    "Meta_R": 0xFFE8,
    "Alt_L": 0xFFE9,
    "Alt_R": 0xFFEA,
    "Super_L": 0xFFEB,
    "Super_R": 0xFFEC,
    "Hyper_L": 0xFFED,
    "Hyper_R": 0xFFEE,
}

# keysyms outside Latin-1 and the Unicode range which still produce a character
CONTROL_CHARACTERS = {
    FUNCTION_KEYS["BackSpace"]: "\b",
    FUNCTION_KEYS["Tab"]: "\t",
    FUNCTION_KEYS["Linefeed"]: "\n",
    FUNCTION_KEYS["Clear"]: "\x0b",
    FUNCTION_KEYS["Return"]: "\r",
    FUNCTION_KEYS["Escape"]: "\x1b",
    FUNCTION_KEYS["Delete"]: "\x7f",
    KEYPAD_KEYS["KP_Space"]: " ",
    KEYPAD_KEYS["KP_Tab"]: "\t",
    KEYPAD_KEYS["KP_Enter"]: "\r",
    KEYPAD_KEYS["KP_Multiply"]: "*",
    KEYPAD_KEYS["KP_Add"]: "+",
    KEYPAD_KEYS["KP_Separator"]: ",",
    KEYPAD_KEYS["KP_Subtract"]: "-",
    KEYPAD_KEYS["KP_Decimal"]: ".",
    KEYPAD_KEYS["KP_Divide"]: "/",
    KEYPAD_KEYS["KP_Equal"]: "=",
}
CONTROL_CHARACTERS.update({0xFFB0 + digit: str(digit) for digit in range(10)})


def _build_names() -> dict[str, int]:
    names: dict[str, int] = {}
    names.update(ASCII_PUNCTUATION)
    for ch in string.digits + string.ascii_uppercase + string.ascii_lowercase:
        names[ch] = ord(ch)
    for offset, name in enumerate(LATIN1_SUPPLEMENT):
        names[name] = 0xA0 + offset
    names.update(FUNCTION_KEYS)
    names.update(KEYPAD_KEYS)
    for digit in range(10):
        names[f"KP_{digit}"] = 0xFFB0 + digit
    for number in range(1, 36):
        names[f"F{number}"] = 0xFFBE + number - 1
    names.update(MODIFIER_KEYS)
    names["VoidSymbol"] = VOID_SYMBOL
    return names


KEYSYM_NAMES = _build_names()
