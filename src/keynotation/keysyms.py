"""Keysym lookup: names to keyvals, and keyvals to canonical names and characters.

The notation parser only talks to a KeysymService, so an input method that
already has a keysym table (from IBus, xkbcommon, etc) can hand that in instead.
"""
from __future__ import annotations

import collections.abc
import re
import typing

import attr

from .keysymdef import CONTROL_CHARACTERS, KEYSYM_NAMES, VOID_SYMBOL

UNICODE_OFFSET = 0x01000000
MAX_KEYVAL = 0x1FFFFFFF

_UNICODE_NAME = re.compile(r"U\+?([0-9A-Fa-f]{4,6})")
_HEX_NAME = re.compile(r"0x([0-9A-Fa-f]{1,8})")


class KeysymService(typing.Protocol):
    VOID: int

    def resolve_name(self, token: str) -> int:
        ...

    def canonical_name(self, keyval: int) -> typing.Optional[str]:
        ...

    def literal_char(self, keyval: int) -> str:
        ...


def is_latin1_key(keyval: int):
    return 0x20 <= keyval <= 0x7E or 0xA0 <= keyval <= 0xFF


def is_unicode_key(keyval: int):
    return (keyval & 0xFF000000) == UNICODE_OFFSET and keyval - UNICODE_OFFSET < 0x110000


def keyval_from_codepoint(codepoint: int) -> int:
    if is_latin1_key(codepoint):
        return codepoint
    if 0 < codepoint < 0x110000:
        return UNICODE_OFFSET + codepoint
    return VOID_SYMBOL


def _first_names(names: collections.abc.Mapping[str, int]) -> dict[int, str]:
    by_keyval: dict[int, str] = {}
    for name, keyval in names.items():
        by_keyval.setdefault(keyval, name)
    return by_keyval


@attr.frozen
class KeysymTable:
    VOID: typing.ClassVar[int] = VOID_SYMBOL

    names: collections.abc.Mapping[str, int] = attr.field(factory=lambda: dict(KEYSYM_NAMES), repr=False)
    _by_keyval: dict[int, str] = attr.field(init=False, repr=False, eq=False)

    @_by_keyval.default
    def _default_by_keyval(self):
        return _first_names(self.names)

    def resolve_name(self, token: str) -> int:
        if token in self.names:
            return self.names[token]
        if len(token) == 1:
            if ord(token) < 0x20:
                return VOID_SYMBOL
            return keyval_from_codepoint(ord(token))
        if m := _UNICODE_NAME.fullmatch(token):
            return keyval_from_codepoint(int(m.group(1), 16))
        if m := _HEX_NAME.fullmatch(token):
            keyval = int(m.group(1), 16)
            if is_unicode_key(keyval):
                return keyval_from_codepoint(keyval - UNICODE_OFFSET)
            if 0 < keyval <= MAX_KEYVAL:
                return keyval
        return VOID_SYMBOL

    def canonical_name(self, keyval: int) -> typing.Optional[str]:
        # U+0041 written as a unicode keysym is still "A"
        if is_unicode_key(keyval):
            keyval = keyval_from_codepoint(keyval - UNICODE_OFFSET)
        if keyval == VOID_SYMBOL or keyval <= 0:
            return None
        if keyval in self._by_keyval:
            return self._by_keyval[keyval]
        if is_unicode_key(keyval):
            return "U{:04X}".format(keyval - UNICODE_OFFSET)
        return "0x{:08x}".format(keyval)

    def literal_char(self, keyval: int) -> str:
        if is_latin1_key(keyval):
            return chr(keyval)
        if is_unicode_key(keyval):
            return chr(keyval - UNICODE_OFFSET)
        return CONTROL_CHARACTERS.get(keyval, "\0")


DEFAULT_KEYSYMS = KeysymTable()
