"""Parse and format the textual key notation used in keybinding configuration.

Five forms are recognized, tried in this order:

    (usleep 100)        timing pseudo-event between keys (NICOLA)
    (control meta x)    long form, any modifiers, one key at the end
    [fj]                simultaneous double key press (NICOLA); exactly 4 characters
    C-M-x               Emacs-style short form, limited modifiers
    x                   bare keysym name

Each form has a matcher which returns None when the text isn't in its shape,
raises KeyEventFormatError when it is in its shape but broken, and otherwise
returns a ParsedKey. The first matcher not returning None wins.
"""
from __future__ import annotations

import collections.abc
import enum
import logging
import typing

import msgspec

from .commontypes import MalformedNotation, UnknownKeysym
from .keysyms import DEFAULT_KEYSYMS, KeysymService
from .modifiers import LONG_MODIFIERS, SHORT_MODIFIERS, ModifierType, modifier_tokens

logger = logging.getLogger(__name__)

NULL_CHAR = "\0"
DUAL_ROLE_KEYS = frozenset(("lshift", "rshift"))


class NotationForm(enum.Enum):
    USLEEP = enum.auto()
    LONG = enum.auto()
    DOUBLE_PRESS = enum.auto()
    SHORT = enum.auto()


class ParsedKey(msgspec.Struct, frozen=True):
    name: typing.Optional[str]
    code: str
    modifiers: ModifierType
    form: NotationForm


Matcher = collections.abc.Callable[[str, KeysymService], typing.Optional[ParsedKey]]


def is_double_press(token: str):
    # the length includes the brackets, so only two keys fit between them
    return token.startswith("[") and token.endswith("]") and len(token) == 4


def lookup_keysym(token: str, keysyms: KeysymService) -> tuple[typing.Optional[str], str]:
    keyval = keysyms.resolve_name(token)
    if keyval == keysyms.VOID:
        raise UnknownKeysym(token)
    return keysyms.canonical_name(keyval), keysyms.literal_char(keyval)


def _key_token(token: str, modifiers: ModifierType, form: NotationForm, keysyms: KeysymService):
    if token in DUAL_ROLE_KEYS:
        # dual-role shift keys carry no modifiers, whatever preceded them
        if modifiers:
            logger.debug("Discarding modifiers %r before %s", modifiers, token)
        return ParsedKey(name=token, code=NULL_CHAR, modifiers=ModifierType.NONE, form=form)
    name, code = lookup_keysym(token, keysyms)
    return ParsedKey(name=name, code=code, modifiers=modifiers, form=form)


def match_usleep(key: str, keysyms: KeysymService):
    if not (key.startswith("(usleep ") and key.endswith(")")):
        return None
    tokens = key[1:-1].split(" ")
    if len(tokens) != 2:
        raise MalformedNotation("usleep requires duration", key)
    return ParsedKey(name=tokens[1], code=NULL_CHAR, modifiers=ModifierType.USLEEP, form=NotationForm.USLEEP)


def match_long_form(key: str, keysyms: KeysymService):
    if not (key.startswith("(") and key.endswith(")")):
        return None
    *modifier_names, key_token = key[1:-1].split(" ")
    modifiers = ModifierType.NONE
    for modifier_name in modifier_names:
        if modifier_name not in LONG_MODIFIERS:
            raise MalformedNotation(f"unknown modifier {modifier_name}", modifier_name)
        modifiers |= LONG_MODIFIERS[modifier_name]
    return _key_token(key_token, modifiers, NotationForm.LONG, keysyms)


def match_double_press(key: str, keysyms: KeysymService):
    if not is_double_press(key):
        return None
    return ParsedKey(name=key, code=NULL_CHAR, modifiers=ModifierType.NONE, form=NotationForm.DOUBLE_PRESS)


def match_short_form(key: str, keysyms: KeysymService):
    index = key.rfind("-")
    modifiers = ModifierType.NONE
    if index > 0:
        for modifier_name in key[:index].split("-"):
            if modifier_name in SHORT_MODIFIERS:
                modifiers |= SHORT_MODIFIERS[modifier_name]
            else:
                # TODO: decide whether this should raise like the long form does
                logger.debug("Ignoring unknown modifier %r in %r", modifier_name, key)
        key_token = key[index + 1 :]
    else:
        key_token = key
    return _key_token(key_token, modifiers, NotationForm.SHORT, keysyms)


MATCHERS: tuple[Matcher, ...] = (
    match_usleep,
    match_long_form,
    match_double_press,
    match_short_form,
)


def parse_notation(key: str, keysyms: typing.Optional[KeysymService] = None) -> ParsedKey:
    if keysyms is None:
        keysyms = DEFAULT_KEYSYMS
    for matcher in MATCHERS:
        parsed = matcher(key, keysyms)
        if parsed is not None:
            return parsed
    raise MalformedNotation("unrecognized key notation", key)


def format_notation(name: typing.Optional[str], code: str, modifiers: ModifierType) -> str:
    base = name if name is not None else code
    if not modifiers:
        return base
    return "({})".format(" ".join([*modifier_tokens(modifiers), base]))
