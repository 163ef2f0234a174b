"""cattrs hooks so settings classes can hold KeyEvent and ModifierType fields.

Key events are stored in their notation form, and modifier masks as a list of
the long-form modifier tokens ("alt", not "mod1"):

    @dataclasses.dataclass
    class Keybindings:
        abort: KeyEvent
        toggle: list[KeyEvent]

    notation_converter.structure({"abort": "C-g", "toggle": ["Zenkaku_Hankaku", "(control j)"]}, Keybindings)
"""
import typing

import cattrs

from .event import KeyEvent
from .keysyms import KeysymService
from .modifiers import LONG_MODIFIERS, ModifierType


def _modifier_names() -> dict[ModifierType, str]:
    names = {flag: name for name, flag in LONG_MODIFIERS.items()}
    names[ModifierType.USLEEP] = "usleep"
    # lock and mod2..mod5 have no notation token
    for flag in ModifierType:
        names.setdefault(flag, flag.name.lower())
    return names


MODIFIER_NAMES = _modifier_names()
NAMED_MODIFIERS = {name: flag for flag, name in MODIFIER_NAMES.items()}


def unstructure_modifiers(modifiers: ModifierType) -> list[str]:
    return [MODIFIER_NAMES[flag] for flag in ModifierType if flag and modifiers & flag]


def structure_modifiers(v: list[str], typ: type[ModifierType]) -> ModifierType:
    unknown = [n for n in v if n not in NAMED_MODIFIERS]
    if unknown:
        raise ValueError(f"Unexpected modifiers {unknown}")
    return ModifierType.union(*(NAMED_MODIFIERS[n] for n in v))


def make_converter(keysyms: typing.Optional[KeysymService] = None) -> cattrs.Converter:
    converter = cattrs.Converter()
    converter.register_unstructure_hook(KeyEvent, KeyEvent.to_string)
    converter.register_structure_hook(KeyEvent, lambda v, _: KeyEvent.from_string(v, keysyms))
    converter.register_unstructure_hook(ModifierType, unstructure_modifiers)
    converter.register_structure_hook(ModifierType, structure_modifiers)
    return converter


notation_converter = make_converter()
