"""Directional navigation implementations."""

from focusnav.navigation.elements import ElementArena
from focusnav.navigation.host import FunctionalHost
from focusnav.navigation.move import MoveRouter, map_move_key
from focusnav.navigation.resolver import DirectionalResolver, is_better_target

__all__ = [
    "DirectionalResolver",
    "ElementArena",
    "FunctionalHost",
    "MoveRouter",
    "is_better_target",
    "map_move_key",
]
