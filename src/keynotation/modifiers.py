from __future__ import annotations

import enum


# Bit positions match the X11/GDK modifier state, plus the dummy modifiers
# used for NICOLA (thumb-shift) input.
class ModifierType(enum.IntFlag):
    NONE = 0
    SHIFT = 1 << 0
    LOCK = 1 << 1
    CONTROL = 1 << 2
    MOD1 = 1 << 3
    MOD2 = 1 << 4
    MOD3 = 1 << 5
    MOD4 = 1 << 6
    MOD5 = 1 << 7

    LSHIFT = 1 << 22
    RSHIFT = 1 << 23
    USLEEP = 1 << 24

    SUPER = 1 << 26
    HYPER = 1 << 27
    META = 1 << 28
    RELEASE = 1 << 30

    @classmethod
    def union(cls, *flags: ModifierType) -> ModifierType:
        accum = cls.NONE
        for flag in flags:
            accum |= flag
        return accum

    def set(self, flag: ModifierType) -> ModifierType:
        return self | flag

    def test(self, flag: ModifierType) -> bool:
        return (self & flag) != 0


SYNTHETIC_MODIFIERS = ModifierType.LSHIFT | ModifierType.RSHIFT | ModifierType.USLEEP

# Tokens accepted before the key in "(control meta x)".
LONG_MODIFIERS = {
    "shift": ModifierType.SHIFT,
    "control": ModifierType.CONTROL,
    "meta": ModifierType.META,
    "hyper": ModifierType.HYPER,
    "super": ModifierType.SUPER,
    "alt": ModifierType.MOD1,
    "lshift": ModifierType.LSHIFT,
    "rshift": ModifierType.RSHIFT,
    "release": ModifierType.RELEASE,
}

# Tokens accepted in the Emacs-style "C-M-x" form; only a limited set is supported.
SHORT_MODIFIERS = {
    "S": ModifierType.SHIFT,
    "C": ModifierType.CONTROL,
    "A": ModifierType.MOD1,
    "M": ModifierType.META,
    "G": ModifierType.MOD5,
}

# Output order when formatting. Not alphabetical, and shift is never written.
FORMAT_ORDER = (
    ("control", ModifierType.CONTROL),
    ("meta", ModifierType.META),
    ("hyper", ModifierType.HYPER),
    ("super", ModifierType.SUPER),
    ("alt", ModifierType.MOD1),
    ("lshift", ModifierType.LSHIFT),
    ("rshift", ModifierType.RSHIFT),
    ("usleep", ModifierType.USLEEP),
    ("release", ModifierType.RELEASE),
)


def modifier_tokens(modifiers: ModifierType) -> list[str]:
    return [token for token, flag in FORMAT_ORDER if modifiers & flag]
