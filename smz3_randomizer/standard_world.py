from .items import ItemType
from .models.enums import *
from .world import World
from .regions.zelda.light_world import LightWorldNorthWest, LightWorldNorthEast, LightWorldSouth, \
    LightWorldDeathMountainWest, LightWorldDeathMountainEast
from .regions.zelda.dark_world import DarkWorldNorthWest, DarkWorldNorthEast, DarkWorldSouth, DarkWorldMire, \
    DarkWorldDeathMountainWest, DarkWorldDeathMountainEast
from .regions.zelda.dungeons import CastleTower, EasternPalace, DesertPalace, TowerOfHera, PalaceOfDarkness, \
    SwampPalace, SkullWoods, ThievesTown, IcePalace, MiseryMire, TurtleRock, GanonsTower
from .regions.metroid.crateria import Crateria
from .regions.metroid.brinstar import GreenBrinstar, PinkBrinstar, RedBrinstar, KraidsLair
from .regions.metroid.wrecked_ship import WreckedShip
from .regions.metroid.norfair import UpperNorfair, LowerNorfair
from .regions.metroid.maridia import InnerMaridia


# Construction order is the canonical location order used by the fill
REGION_CLASSES = (
    CastleTower, EasternPalace, DesertPalace, TowerOfHera, PalaceOfDarkness, SwampPalace, SkullWoods,
    ThievesTown, IcePalace, MiseryMire, TurtleRock, GanonsTower,
    LightWorldDeathMountainWest, LightWorldDeathMountainEast, LightWorldNorthWest, LightWorldNorthEast,
    LightWorldSouth, DarkWorldNorthWest, DarkWorldNorthEast, DarkWorldSouth, DarkWorldMire,
    DarkWorldDeathMountainWest, DarkWorldDeathMountainEast,
    Crateria, GreenBrinstar, PinkBrinstar, RedBrinstar, KraidsLair, WreckedShip, UpperNorfair,
    InnerMaridia, LowerNorfair,
)

# 2 red crystals, 5 blue crystals, the green pendant and the other two pendants
REWARD_POOL = (
    Reward.CRYSTAL_RED, Reward.CRYSTAL_RED,
    Reward.CRYSTAL_BLUE, Reward.CRYSTAL_BLUE, Reward.CRYSTAL_BLUE, Reward.CRYSTAL_BLUE, Reward.CRYSTAL_BLUE,
    Reward.PENDANT_GREEN,
    Reward.PENDANT_NON_GREEN, Reward.PENDANT_NON_GREEN,
)

# Single locations worth a hint on their own
HINT_LOCATION_NAMES = (
    "Master Sword Pedestal", "Ether Tablet", "Bombos Tablet", "Sahasrahla", "Pyramid Fairy - Left",
    "Pyramid Fairy - Right", "Sick Kid", "King Zora", "Old Man", "Spike Cave", "Hammer Pegs",
    "Bumper Cave", "Blacksmith", "Purple Chest", "Magic Bat", "Floating Island", "Lake Hylia Island",
    "Mimic Cave", "Energy Tank, Gauntlet", "Bombs", "Charge Beam", "X-Ray Scope", "Spazer",
    "Varia Suit", "Gravity Suit", "Ice Beam", "Speed Booster", "Wave Beam", "Screw Attack",
    "Plasma Beam", "Space Jump", "Energy Tank, Ridley", "Reserve Tank, Wrecked Ship",
)

HINT_DUNGEONS = (
    "Castle Tower", "Eastern Palace", "Desert Palace", "Tower of Hera", "Palace of Darkness",
    "Swamp Palace", "Skull Woods", "Thieves' Town", "Ice Palace", "Misery Mire", "Turtle Rock",
    "Ganon's Tower",
)


class StandardWorld(World):
    """The combined Zelda/Super Metroid world every seed is built on."""

    hint_location_names = HINT_LOCATION_NAMES
    hint_dungeons = HINT_DUNGEONS

    def create_regions(self):
        return [region_class(self, self.config) for region_class in REGION_CLASSES]

    def reward_pool(self):
        return list(REWARD_POOL)

    @property
    def boss_location_names(self):
        return {region.name: region.boss_location for region in self.regions if region.boss_location is not None}

    @property
    def important_location_names(self):
        return [name for name in self.hint_location_names if self.has_location(name)]

    def can_beat_ganon(self, items):
        return items.crystal_count() >= self.config.ganon_crystal_count and \
            (self.config.open_pyramid or self.get_region("Ganon's Tower").can_complete(items)) and \
            items.has(ItemType.MOON_PEARL) and items.master_sword() and \
            items.has(ItemType.BOW) and items.has(ItemType.SILVER_ARROWS) and items.can_light_torches() and \
            self.get_region("Dark World North East").can_enter(items)

    def can_beat_mother_brain(self, items):
        cards = not self.config.metroid_keysanity or items.has(ItemType.CARD_CRATERIA_BOSS)
        return cards and items.reward_count(*METROID_BOSSES) >= len(METROID_BOSSES) and \
            items.can_use_power_bombs() and items.has(ItemType.SUPER) and items.has(ItemType.ICE_BEAM) and \
            items.has(ItemType.VARIA) and items.has_energy_reserves(4)

    def can_beat_game(self, items):
        if self.config.goal == Goal.DEFEAT_GANON:
            return self.can_beat_ganon(items)
        if self.config.goal == Goal.DEFEAT_MOTHER_BRAIN:
            return self.can_beat_mother_brain(items)
        return self.can_beat_ganon(items) and self.can_beat_mother_brain(items)
