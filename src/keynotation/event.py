from __future__ import annotations

import datetime
import enum
import typing

import msgspec

from .commontypes import UnknownKeysym
from .keysyms import DEFAULT_KEYSYMS, KeysymService
from .modifiers import SYNTHETIC_MODIFIERS, ModifierType
from .notation import DUAL_ROLE_KEYS, NULL_CHAR, format_notation, is_double_press, parse_notation

ONE_MICROSECOND = datetime.timedelta(microseconds=1)


class KeyKind(enum.Enum):
    # looked up through the keysym service; code is the matching character, if any
    SYMBOLIC = enum.auto()
    # no name, only a character
    LITERAL = enum.auto()
    # NICOLA extensions: dual-role shift, double press, usleep
    SYNTHETIC = enum.auto()


class KeyEvent(msgspec.Struct, frozen=True):
    name: typing.Optional[str] = None
    code: str = NULL_CHAR
    modifiers: ModifierType = ModifierType.NONE

    @classmethod
    def from_string(cls, key: str, keysyms: typing.Optional[KeysymService] = None):
        parsed = parse_notation(key, keysyms)
        return cls(name=parsed.name, code=parsed.code, modifiers=parsed.modifiers)

    @classmethod
    def from_keysym(cls, keyval: int, modifiers: ModifierType = ModifierType.NONE, keysyms: typing.Optional[KeysymService] = None):
        if keysyms is None:
            keysyms = DEFAULT_KEYSYMS
        name = None if keyval == keysyms.VOID else keysyms.canonical_name(keyval)
        if name is None:
            raise UnknownKeysym(hex(keyval))
        return cls(name=name, code=keysyms.literal_char(keyval), modifiers=modifiers)

    @classmethod
    def usleep(cls, duration: datetime.timedelta):
        return cls(name=str(duration // ONE_MICROSECOND), code=NULL_CHAR, modifiers=ModifierType.USLEEP)

    def copy(self):
        return KeyEvent(name=self.name, code=self.code, modifiers=self.modifiers)

    def with_modifiers(self, modifiers: ModifierType):
        return msgspec.structs.replace(self, modifiers=modifiers)

    def to_string(self) -> str:
        return format_notation(self.name, self.code, self.modifiers)

    def __str__(self):
        return self.to_string()

    def base_equal(self, other: KeyEvent) -> bool:
        """Compare key identity only, ignoring modifiers."""
        return self.code == other.code and self.name == other.name

    @property
    def kind(self) -> KeyKind:
        if self.name is None:
            return KeyKind.LITERAL
        if self.modifiers & SYNTHETIC_MODIFIERS or self.name in DUAL_ROLE_KEYS or is_double_press(self.name):
            return KeyKind.SYNTHETIC
        return KeyKind.SYMBOLIC

    @property
    def sleep_duration(self) -> typing.Optional[datetime.timedelta]:
        if not self.modifiers & ModifierType.USLEEP or self.name is None or not self.name.isdigit():
            return None
        return int(self.name) * ONE_MICROSECOND
