from ...items import ItemType
from ...models.enums import *
from ...world import Location
from ..base import ZeldaRegion, Dungeon, MedallionDungeon


class CastleTower(ZeldaRegion):
    name = "Castle Tower"
    capabilities = frozenset([RegionCapability.REWARD])
    default_reward = Reward.AGAHNIM

    def __init__(self, world, config):
        ZeldaRegion.__init__(self, world, config)
        self.region_items = [ItemType.KEY_CT]
        self.locations = [
            Location(self, 256 + 101, "Castle Tower - Foyer"),
            Location(self, 256 + 102, "Castle Tower - Dark Maze",
                     lambda items: items.has(ItemType.LAMP) and items.has(ItemType.KEY_CT)),
        ]

    def entry(self, items):
        return items.can_kill_many_enemies() and (items.has(ItemType.CAPE) or items.master_sword())

    def can_complete(self, items):
        return self.can_enter(items) and items.has(ItemType.LAMP) and items.has(ItemType.KEY_CT, 2) and items.sword()


class EasternPalace(Dungeon):
    name = "Eastern Palace"
    boss_location = "Eastern Palace - Armos Knights"

    def __init__(self, world, config):
        Dungeon.__init__(self, world, config)
        self.region_items = [ItemType.BIG_KEY_EP, ItemType.MAP_EP, ItemType.COMPASS_EP]
        self.locations = [
            Location(self, 256 + 103, "Eastern Palace - Cannonball Chest"),
            Location(self, 256 + 104, "Eastern Palace - Map Chest"),
            Location(self, 256 + 105, "Eastern Palace - Compass Chest"),
            Location(self, 256 + 106, "Eastern Palace - Big Chest",
                     lambda items: items.has(ItemType.BIG_KEY_EP)),
            Location(self, 256 + 107, "Eastern Palace - Big Key Chest",
                     lambda items: items.has(ItemType.LAMP)),
            Location(self, 256 + 108, "Eastern Palace - Armos Knights",
                     lambda items: items.has(ItemType.BIG_KEY_EP) and items.has(ItemType.BOW) and items.has(ItemType.LAMP)),
        ]


class DesertPalace(Dungeon):
    name = "Desert Palace"
    boss_location = "Desert Palace - Lanmolas"

    def __init__(self, world, config):
        Dungeon.__init__(self, world, config)
        self.region_items = [ItemType.KEY_DP, ItemType.BIG_KEY_DP, ItemType.MAP_DP, ItemType.COMPASS_DP]
        self.locations = [
            Location(self, 256 + 109, "Desert Palace - Big Chest",
                     lambda items: items.has(ItemType.BIG_KEY_DP)),
            Location(self, 256 + 110, "Desert Palace - Torch",
                     lambda items: items.has(ItemType.BOOTS)),
            Location(self, 256 + 111, "Desert Palace - Map Chest"),
            Location(self, 256 + 112, "Desert Palace - Big Key Chest",
                     lambda items: items.has(ItemType.KEY_DP)),
            Location(self, 256 + 113, "Desert Palace - Compass Chest",
                     lambda items: items.has(ItemType.KEY_DP)),
            Location(self, 256 + 114, "Desert Palace - Lanmolas",
                     lambda items: items.can_lift_light() and items.can_light_torches() and
                     items.has(ItemType.BIG_KEY_DP) and items.has(ItemType.KEY_DP) and self.can_beat_boss(items)),
        ]

    def can_beat_boss(self, items):
        return items.sword() or items.has(ItemType.HAMMER) or items.has(ItemType.BOW) or \
            items.has(ItemType.FIREROD) or items.has(ItemType.ICEROD) or \
            items.has(ItemType.BYRNA) or items.has(ItemType.SOMARIA)

    def entry(self, items):
        return items.has(ItemType.BOOK) or \
            items.has(ItemType.MIRROR) and items.can_lift_heavy() and items.has(ItemType.FLUTE) or \
            items.can_access_misery_mire_portal(self.config) and items.has(ItemType.MIRROR)


class TowerOfHera(Dungeon):
    name = "Tower of Hera"
    boss_location = "Tower of Hera - Moldorm"

    def __init__(self, world, config):
        Dungeon.__init__(self, world, config)
        self.region_items = [ItemType.KEY_TH, ItemType.BIG_KEY_TH, ItemType.MAP_TH, ItemType.COMPASS_TH]
        self.locations = [
            Location(self, 256 + 115, "Tower of Hera - Basement Cage"),
            Location(self, 256 + 116, "Tower of Hera - Map Chest"),
            Location(self, 256 + 117, "Tower of Hera - Big Key Chest",
                     lambda items: items.has(ItemType.KEY_TH) and items.can_light_torches()),
            Location(self, 256 + 118, "Tower of Hera - Compass Chest",
                     lambda items: items.has(ItemType.BIG_KEY_TH)),
            Location(self, 256 + 119, "Tower of Hera - Big Chest",
                     lambda items: items.has(ItemType.BIG_KEY_TH)),
            Location(self, 256 + 120, "Tower of Hera - Moldorm",
                     lambda items: items.has(ItemType.BIG_KEY_TH) and (items.sword() or items.has(ItemType.HAMMER))),
        ]

    def entry(self, items):
        return (items.has(ItemType.MIRROR) or items.has(ItemType.HOOKSHOT) and items.has(ItemType.HAMMER)) and \
            self.region("Light World Death Mountain West").can_enter(items)


class PalaceOfDarkness(Dungeon):
    name = "Palace of Darkness"
    boss_location = "Palace of Darkness - Helmasaur King"

    def __init__(self, world, config):
        Dungeon.__init__(self, world, config)
        self.region_items = [ItemType.KEY_PD, ItemType.BIG_KEY_PD, ItemType.MAP_PD, ItemType.COMPASS_PD]
        self.locations = [
            Location(self, 256 + 121, "Palace of Darkness - Shooter Room"),
            Location(self, 256 + 122, "Palace of Darkness - Big Key Chest",
                     lambda items: items.has(ItemType.KEY_PD)),
            Location(self, 256 + 123, "Palace of Darkness - Stalfos Basement",
                     lambda items: items.has(ItemType.KEY_PD)),
            Location(self, 256 + 124, "Palace of Darkness - The Arena - Bridge",
                     lambda items: items.has(ItemType.KEY_PD)),
            Location(self, 256 + 125, "Palace of Darkness - The Arena - Ledge",
                     lambda items: items.has(ItemType.BOW)),
            Location(self, 256 + 126, "Palace of Darkness - Map Chest",
                     lambda items: items.has(ItemType.BOW)),
            Location(self, 256 + 127, "Palace of Darkness - Compass Chest",
                     lambda items: items.has(ItemType.KEY_PD, 2)),
            Location(self, 256 + 128, "Palace of Darkness - Harmless Hellway",
                     lambda items: items.has(ItemType.KEY_PD, 2)),
            Location(self, 256 + 129, "Palace of Darkness - Dark Basement - Left",
                     lambda items: items.can_light_torches() and items.has(ItemType.KEY_PD, 2)),
            Location(self, 256 + 130, "Palace of Darkness - Dark Basement - Right",
                     lambda items: items.can_light_torches() and items.has(ItemType.KEY_PD, 2)),
            Location(self, 256 + 131, "Palace of Darkness - Dark Maze - Top",
                     lambda items: items.has(ItemType.LAMP) and items.has(ItemType.KEY_PD, 3)),
            Location(self, 256 + 132, "Palace of Darkness - Dark Maze - Bottom",
                     lambda items: items.has(ItemType.LAMP) and items.has(ItemType.KEY_PD, 3)),
            Location(self, 256 + 133, "Palace of Darkness - Big Chest",
                     lambda items: items.has(ItemType.LAMP) and items.has(ItemType.BIG_KEY_PD) and items.has(ItemType.KEY_PD, 3)),
            Location(self, 256 + 134, "Palace of Darkness - Helmasaur King",
                     lambda items: items.has(ItemType.LAMP) and items.has(ItemType.HAMMER) and items.has(ItemType.BOW) and
                     items.has(ItemType.BIG_KEY_PD) and items.has(ItemType.KEY_PD, 3)),
        ]

    def entry(self, items):
        return items.has(ItemType.MOON_PEARL) and self.region("Dark World North East").can_enter(items)


class SwampPalace(Dungeon):
    name = "Swamp Palace"
    boss_location = "Swamp Palace - Arrghus"

    def __init__(self, world, config):
        Dungeon.__init__(self, world, config)
        self.region_items = [ItemType.KEY_SP, ItemType.BIG_KEY_SP, ItemType.MAP_SP, ItemType.COMPASS_SP]
        self.locations = [
            Location(self, 256 + 135, "Swamp Palace - Entrance",
                     allow=lambda item, items: self.keysanity or item.is_(ItemType.KEY_SP, self.world)),
            Location(self, 256 + 136, "Swamp Palace - Map Chest",
                     lambda items: items.has(ItemType.KEY_SP)),
            Location(self, 256 + 137, "Swamp Palace - Big Chest",
                     lambda items: items.has(ItemType.KEY_SP) and items.has(ItemType.HAMMER) and items.has(ItemType.BIG_KEY_SP)),
            Location(self, 256 + 138, "Swamp Palace - Compass Chest",
                     lambda items: items.has(ItemType.KEY_SP) and items.has(ItemType.HAMMER)),
            Location(self, 256 + 139, "Swamp Palace - West Chest",
                     lambda items: items.has(ItemType.KEY_SP) and items.has(ItemType.HAMMER)),
            Location(self, 256 + 140, "Swamp Palace - Big Key Chest",
                     lambda items: items.has(ItemType.KEY_SP) and items.has(ItemType.HAMMER)),
            Location(self, 256 + 141, "Swamp Palace - Flooded Room - Left", self.can_reach_back),
            Location(self, 256 + 142, "Swamp Palace - Flooded Room - Right", self.can_reach_back),
            Location(self, 256 + 143, "Swamp Palace - Waterfall Room", self.can_reach_back),
            Location(self, 256 + 144, "Swamp Palace - Arrghus", self.can_reach_back),
        ]

    def can_reach_back(self, items):
        return items.has(ItemType.KEY_SP) and items.has(ItemType.HAMMER) and items.has(ItemType.HOOKSHOT)

    def entry(self, items):
        return items.has(ItemType.MOON_PEARL) and items.has(ItemType.MIRROR) and items.has(ItemType.FLIPPERS) and \
            self.region("Dark World South").can_enter(items)


class SkullWoods(Dungeon):
    name = "Skull Woods"
    boss_location = "Skull Woods - Mothula"

    def __init__(self, world, config):
        Dungeon.__init__(self, world, config)
        self.region_items = [ItemType.KEY_SW, ItemType.BIG_KEY_SW, ItemType.MAP_SW, ItemType.COMPASS_SW]
        self.locations = [
            Location(self, 256 + 145, "Skull Woods - Pot Prison"),
            Location(self, 256 + 146, "Skull Woods - Compass Chest"),
            Location(self, 256 + 147, "Skull Woods - Big Chest",
                     lambda items: items.has(ItemType.BIG_KEY_SW)),
            Location(self, 256 + 148, "Skull Woods - Map Chest"),
            Location(self, 256 + 149, "Skull Woods - Pinball Room"),
            Location(self, 256 + 150, "Skull Woods - Big Key Chest"),
            Location(self, 256 + 151, "Skull Woods - Bridge Room",
                     lambda items: items.has(ItemType.FIREROD)),
            Location(self, 256 + 152, "Skull Woods - Mothula",
                     lambda items: items.has(ItemType.FIREROD) and items.sword() and items.has(ItemType.KEY_SW, 3)),
        ]

    def entry(self, items):
        return items.has(ItemType.MOON_PEARL) and self.region("Dark World North West").can_enter(items)


class ThievesTown(Dungeon):
    name = "Thieves' Town"
    boss_location = "Thieves' Town - Blind"

    def __init__(self, world, config):
        Dungeon.__init__(self, world, config)
        self.region_items = [ItemType.KEY_TT, ItemType.BIG_KEY_TT, ItemType.MAP_TT, ItemType.COMPASS_TT]
        self.locations = [
            Location(self, 256 + 153, "Thieves' Town - Map Chest"),
            Location(self, 256 + 154, "Thieves' Town - Ambush Chest"),
            Location(self, 256 + 155, "Thieves' Town - Compass Chest"),
            Location(self, 256 + 156, "Thieves' Town - Big Key Chest"),
            Location(self, 256 + 157, "Thieves' Town - Attic",
                     lambda items: items.has(ItemType.BIG_KEY_TT) and items.has(ItemType.KEY_TT)),
            Location(self, 256 + 158, "Thieves' Town - Blind's Cell",
                     lambda items: items.has(ItemType.BIG_KEY_TT)),
            # The key may sit in this chest: the chest is then opened without one
            Location(self, 256 + 159, "Thieves' Town - Big Chest",
                     lambda items: items.has(ItemType.BIG_KEY_TT) and items.has(ItemType.HAMMER) and
                     (self.get_location("Thieves' Town - Big Chest").item_is(ItemType.KEY_TT, self.world) or items.has(ItemType.KEY_TT)),
                     always_allow=lambda item, items: item.is_(ItemType.KEY_TT, self.world) and items.has(ItemType.HAMMER)),
            Location(self, 256 + 160, "Thieves' Town - Blind",
                     lambda items: items.has(ItemType.BIG_KEY_TT) and items.has(ItemType.KEY_TT) and self.can_beat_boss(items)),
        ]

    def can_beat_boss(self, items):
        return items.sword() or items.has(ItemType.HAMMER) or items.has(ItemType.SOMARIA) or items.has(ItemType.BYRNA)

    def entry(self, items):
        return items.has(ItemType.MOON_PEARL) and self.region("Dark World North West").can_enter(items)


class IcePalace(Dungeon):
    name = "Ice Palace"
    boss_location = "Ice Palace - Kholdstare"

    def __init__(self, world, config):
        Dungeon.__init__(self, world, config)
        self.region_items = [ItemType.KEY_IP, ItemType.BIG_KEY_IP, ItemType.MAP_IP, ItemType.COMPASS_IP]
        self.locations = [
            Location(self, 256 + 161, "Ice Palace - Compass Chest"),
            Location(self, 256 + 162, "Ice Palace - Spike Room",
                     lambda items: items.has(ItemType.KEY_IP)),
            Location(self, 256 + 163, "Ice Palace - Map Chest",
                     lambda items: items.has(ItemType.HAMMER) and items.can_lift_light() and items.has(ItemType.KEY_IP)),
            Location(self, 256 + 164, "Ice Palace - Big Key Chest",
                     lambda items: items.has(ItemType.HAMMER) and items.can_lift_light() and items.has(ItemType.KEY_IP)),
            Location(self, 256 + 165, "Ice Palace - Iced T Room",
                     lambda items: items.has(ItemType.KEY_IP)),
            Location(self, 256 + 166, "Ice Palace - Freezor Chest"),
            Location(self, 256 + 167, "Ice Palace - Big Chest",
                     lambda items: items.has(ItemType.BIG_KEY_IP)),
            Location(self, 256 + 168, "Ice Palace - Kholdstare",
                     lambda items: items.has(ItemType.BIG_KEY_IP) and items.has(ItemType.HAMMER) and items.can_lift_light() and
                     items.has(ItemType.KEY_IP, 2)),
        ]

    def entry(self, items):
        return items.has(ItemType.MOON_PEARL) and items.has(ItemType.FLIPPERS) and items.can_lift_heavy() and \
            items.can_melt_freezors()


class MiseryMire(MedallionDungeon):
    name = "Misery Mire"
    boss_location = "Misery Mire - Vitreous"

    def __init__(self, world, config):
        MedallionDungeon.__init__(self, world, config)
        self.region_items = [ItemType.KEY_MM, ItemType.BIG_KEY_MM, ItemType.MAP_MM, ItemType.COMPASS_MM]
        self.locations = [
            Location(self, 256 + 169, "Misery Mire - Main Lobby",
                     lambda items: items.has(ItemType.KEY_MM) or items.has(ItemType.BIG_KEY_MM)),
            Location(self, 256 + 170, "Misery Mire - Map Chest",
                     lambda items: items.has(ItemType.KEY_MM) or items.has(ItemType.BIG_KEY_MM)),
            Location(self, 256 + 171, "Misery Mire - Bridge Chest"),
            Location(self, 256 + 172, "Misery Mire - Spike Chest"),
            Location(self, 256 + 173, "Misery Mire - Compass Chest",
                     lambda items: items.can_light_torches() and items.has(ItemType.KEY_MM, 2)),
            Location(self, 256 + 174, "Misery Mire - Big Key Chest",
                     lambda items: items.can_light_torches() and items.has(ItemType.KEY_MM, 2)),
            Location(self, 256 + 175, "Misery Mire - Big Chest",
                     lambda items: items.has(ItemType.BIG_KEY_MM)),
            Location(self, 256 + 176, "Misery Mire - Vitreous",
                     lambda items: items.has(ItemType.BIG_KEY_MM) and items.has(ItemType.LAMP) and items.has(ItemType.SOMARIA)),
        ]

    def entry(self, items):
        return items.sword() and items.has(ItemType.MOON_PEARL) and \
            (items.has(ItemType.BOOTS) or items.has(ItemType.HOOKSHOT)) and \
            self.region("Dark World Mire").can_enter(items)


class TurtleRock(MedallionDungeon):
    name = "Turtle Rock"
    boss_location = "Turtle Rock - Trinexx"

    def __init__(self, world, config):
        MedallionDungeon.__init__(self, world, config)
        self.region_items = [ItemType.KEY_TR, ItemType.BIG_KEY_TR, ItemType.MAP_TR, ItemType.COMPASS_TR]
        self.locations = [
            Location(self, 256 + 177, "Turtle Rock - Compass Chest"),
            Location(self, 256 + 178, "Turtle Rock - Roller Room - Left",
                     lambda items: items.has(ItemType.FIREROD)),
            Location(self, 256 + 179, "Turtle Rock - Roller Room - Right",
                     lambda items: items.has(ItemType.FIREROD)),
            Location(self, 256 + 180, "Turtle Rock - Chain Chomps",
                     lambda items: items.has(ItemType.KEY_TR)),
            Location(self, 256 + 181, "Turtle Rock - Big Key Chest",
                     lambda items: items.has(ItemType.KEY_TR, 2)),
            Location(self, 256 + 182, "Turtle Rock - Big Chest",
                     lambda items: items.has(ItemType.BIG_KEY_TR) and items.has(ItemType.KEY_TR, 2)),
            Location(self, 256 + 183, "Turtle Rock - Crystaroller Room",
                     lambda items: items.has(ItemType.BIG_KEY_TR) and items.has(ItemType.KEY_TR, 2)),
            Location(self, 256 + 184, "Turtle Rock - Trinexx",
                     lambda items: items.has(ItemType.BIG_KEY_TR) and items.has(ItemType.KEY_TR, 2) and
                     items.has(ItemType.LAMP) and items.has(ItemType.FIREROD) and items.has(ItemType.ICEROD)),
        ]

    def entry(self, items):
        return items.sword() and items.has(ItemType.MOON_PEARL) and items.can_lift_heavy() and \
            items.has(ItemType.HAMMER) and items.has(ItemType.SOMARIA) and \
            self.region("Light World Death Mountain East").can_enter(items)


class GanonsTower(ZeldaRegion):
    name = "Ganon's Tower"
    boss_location = "Ganon's Tower - Moldorm Chest"

    def __init__(self, world, config):
        ZeldaRegion.__init__(self, world, config)
        self.region_items = [ItemType.KEY_GT, ItemType.BIG_KEY_GT, ItemType.MAP_GT, ItemType.COMPASS_GT]
        self.locations = [
            Location(self, 256 + 185, "Ganon's Tower - Bob's Torch",
                     lambda items: items.has(ItemType.BOOTS)),
            Location(self, 256 + 186, "Ganon's Tower - DMs Room - Top Left", self.can_cross_pits),
            Location(self, 256 + 187, "Ganon's Tower - DMs Room - Top Right", self.can_cross_pits),
            Location(self, 256 + 188, "Ganon's Tower - Map Chest",
                     lambda items: items.has(ItemType.HAMMER) and (items.has(ItemType.HOOKSHOT) or items.has(ItemType.BOOTS)) and
                     items.has(ItemType.KEY_GT)),
            Location(self, 256 + 189, "Ganon's Tower - Firesnake Room",
                     lambda items: self.can_cross_pits(items) and items.has(ItemType.KEY_GT)),
            Location(self, 256 + 190, "Ganon's Tower - Tile Room",
                     lambda items: items.has(ItemType.SOMARIA)),
            Location(self, 256 + 191, "Ganon's Tower - Compass Room - Top Left", self.can_pass_torch_room),
            Location(self, 256 + 192, "Ganon's Tower - Compass Room - Top Right", self.can_pass_torch_room),
            Location(self, 256 + 193, "Ganon's Tower - Hope Room - Left"),
            Location(self, 256 + 194, "Ganon's Tower - Hope Room - Right"),
            Location(self, 256 + 195, "Ganon's Tower - Bob's Chest", self.can_reach_center),
            Location(self, 256 + 196, "Ganon's Tower - Big Chest",
                     lambda items: self.can_reach_center(items) and items.has(ItemType.BIG_KEY_GT)),
            Location(self, 256 + 197, "Ganon's Tower - Big Key Chest", self.can_reach_center),
            Location(self, 256 + 198, "Ganon's Tower - Mini Helmasaur Room - Left", self.can_climb),
            Location(self, 256 + 199, "Ganon's Tower - Mini Helmasaur Room - Right", self.can_climb),
            Location(self, 256 + 200, "Ganon's Tower - Moldorm Chest",
                     lambda items: self.can_climb(items) and items.has(ItemType.HOOKSHOT) and
                     (items.sword() or items.has(ItemType.HAMMER))),
        ]

    def can_cross_pits(self, items):
        return items.has(ItemType.HAMMER) and items.has(ItemType.HOOKSHOT)

    def can_pass_torch_room(self, items):
        return items.has(ItemType.SOMARIA) and items.has(ItemType.FIREROD) and items.has(ItemType.KEY_GT)

    def can_reach_center(self, items):
        return items.has(ItemType.KEY_GT) and (self.can_cross_pits(items) or
                                               items.has(ItemType.SOMARIA) and items.has(ItemType.FIREROD))

    def can_climb(self, items):
        return items.has(ItemType.BIG_KEY_GT) and items.has(ItemType.KEY_GT, 2) and \
            items.has(ItemType.BOW) and items.can_light_torches()

    def entry(self, items):
        return items.has(ItemType.MOON_PEARL) and \
            self.region("Dark World Death Mountain East").can_enter(items) and \
            items.crystal_count() >= self.config.gt_crystal_count
