"""
Engine enum definitions shared by the catalogs, map info and score.

Integer values match the engine schema so wire codes can be resolved with
try_enum() / enum_or_default().
"""

from enum import IntEnum

from sc2link.data.enum_utils import NumericParseableEnum, ParseableEnum, variant_checkers


@variant_checkers
class Race(NumericParseableEnum, IntEnum):
    NO_RACE = 0
    TERRAN = 1
    ZERG = 2
    PROTOSS = 3
    RANDOM = 4


class PlayerType(IntEnum):
    PARTICIPANT = 1
    COMPUTER = 2
    OBSERVER = 3


class Difficulty(IntEnum):
    """Built-in AI difficulty, only reported for computer players."""

    VERY_EASY = 1
    EASY = 2
    MEDIUM = 3
    MEDIUM_HARD = 4
    HARD = 5
    HARDER = 6
    VERY_HARD = 7
    CHEAT_VISION = 8
    CHEAT_MONEY = 9
    CHEAT_INSANE = 10


class AIBuild(IntEnum):
    """Built-in AI strategy, only reported for computer players."""

    RANDOM_BUILD = 1
    RUSH = 2
    TIMING = 3
    POWER = 4
    MACRO = 5
    AIR = 6


@variant_checkers
class Attribute(ParseableEnum, IntEnum):
    """Unit attributes used for bonus damage."""

    LIGHT = 1
    ARMORED = 2
    BIOLOGICAL = 3
    MECHANICAL = 4
    ROBOTIC = 5
    PSIONIC = 6
    MASSIVE = 7
    STRUCTURE = 8
    HOVER = 9
    HEROIC = 10
    SUMMONED = 11


@variant_checkers
class TargetType(ParseableEnum, IntEnum):
    """What a weapon or effect can hit."""

    GROUND = 1
    AIR = 2
    ANY = 3


class AbilityTarget(IntEnum):
    """What an ability must be given as target when issued."""

    NONE = 1
    POINT = 2
    UNIT = 3
    POINT_OR_UNIT = 4
    POINT_OR_NONE = 5


@variant_checkers
class ScoreType(ParseableEnum, IntEnum):
    CURRICULUM = 1
    MELEE = 2
