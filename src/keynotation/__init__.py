from .commontypes import KeyEventFormatError, MalformedNotation, UnknownKeysym
from .event import KeyEvent, KeyKind
from .keysyms import DEFAULT_KEYSYMS, KeysymService, KeysymTable
from .modifiers import ModifierType
from .notation import format_notation, parse_notation

__all__ = [
    "DEFAULT_KEYSYMS",
    "KeyEvent",
    "KeyEventFormatError",
    "KeyKind",
    "KeysymService",
    "KeysymTable",
    "MalformedNotation",
    "ModifierType",
    "UnknownKeysym",
    "format_notation",
    "parse_notation",
]
