from enum import Enum


class GameMode(Enum):
    NORMAL = 0
    MULTIWORLD = 1


class Logic(Enum):
    NORMAL = 0
    HARD = 1


class KeysanityMode(Enum):
    NONE = 0
    ZELDA = 1
    METROID = 2
    BOTH = 3


class Goal(Enum):
    DEFEAT_BOTH = 0
    DEFEAT_GANON = 1
    DEFEAT_MOTHER_BRAIN = 2


class Medallion(Enum):
    BOMBOS = "Bombos"
    ETHER = "Ether"
    QUAKE = "Quake"


class Reward(Enum):
    NONE = 0
    AGAHNIM = 1
    PENDANT_GREEN = 2
    PENDANT_NON_GREEN = 3
    CRYSTAL_BLUE = 4
    CRYSTAL_RED = 5
    KRAID = 6
    PHANTOON = 7
    DRAYGON = 8
    RIDLEY = 9


class RegionCapability(Enum):
    REWARD = 0
    MEDALLION = 1


class LocationType(Enum):
    REGULAR = 0
    HIDDEN = 1
    VISIBLE = 2
    CHOZO = 3
    NOT_IN_DUNGEON = 4


class LocationUsefulness(Enum):
    USELESS = 0
    NICE_TO_HAVE = 1
    MANDATORY = 2
    SWORD = 3


class PrintLevel(Enum):
    SILENT = -1
    ERROR = 0
    WARN = 1
    INFO = 2
    VERBOSE = 3


CRYSTALS = (Reward.CRYSTAL_BLUE, Reward.CRYSTAL_RED)
PENDANTS = (Reward.PENDANT_GREEN, Reward.PENDANT_NON_GREEN)
METROID_BOSSES = (Reward.KRAID, Reward.PHANTOON, Reward.DRAYGON, Reward.RIDLEY)
