from ...items import ItemType
from ...models.enums import *
from ...world import Location
from ..base import ZeldaRegion


class LightWorldNorthWest(ZeldaRegion):
    name = "Light World North West"
    area = "Light World"

    def __init__(self, world, config):
        ZeldaRegion.__init__(self, world, config)
        self.locations = [
            Location(self, 256 + 14, "Master Sword Pedestal",
                     lambda items: items.reward_count(Reward.PENDANT_GREEN) >= 1 and items.reward_count(Reward.PENDANT_NON_GREEN) >= 2),
            Location(self, 256 + 15, "Mushroom"),
            Location(self, 256 + 16, "Lost Woods Hideout"),
            Location(self, 256 + 17, "Lumberjack Tree",
                     lambda items: items.has_reward(Reward.AGAHNIM) and items.has(ItemType.BOOTS)),
            Location(self, 256 + 18, "Pegasus Rocks",
                     lambda items: items.has(ItemType.BOOTS)),
            Location(self, 256 + 19, "Graveyard Ledge",
                     lambda items: items.has(ItemType.MIRROR) and items.has(ItemType.MOON_PEARL) and
                     self.region("Dark World North West").can_enter(items)),
            Location(self, 256 + 20, "King's Tomb",
                     lambda items: items.has(ItemType.BOOTS) and (items.can_lift_heavy() or
                     items.has(ItemType.MIRROR) and items.has(ItemType.MOON_PEARL) and
                     self.region("Dark World North West").can_enter(items))),
            Location(self, 256 + 21, "Kakariko Well - Top"),
            Location(self, 256 + 22, "Kakariko Well - Left"),
            Location(self, 256 + 23, "Kakariko Well - Middle"),
            Location(self, 256 + 24, "Kakariko Well - Right"),
            Location(self, 256 + 25, "Kakariko Well - Bottom"),
            Location(self, 256 + 26, "Blind's Hideout - Top"),
            Location(self, 256 + 27, "Blind's Hideout - Left"),
            Location(self, 256 + 28, "Blind's Hideout - Right"),
            Location(self, 256 + 29, "Blind's Hideout - Far Left"),
            Location(self, 256 + 30, "Blind's Hideout - Far Right"),
            Location(self, 256 + 31, "Bottle Merchant"),
            Location(self, 256 + 32, "Chicken House"),
            Location(self, 256 + 33, "Sick Kid",
                     lambda items: items.has(ItemType.BOTTLE)),
            Location(self, 256 + 34, "Kakariko Tavern"),
            Location(self, 256 + 35, "Magic Bat",
                     lambda items: items.has(ItemType.HAMMER) or
                     items.has(ItemType.MOON_PEARL) and items.has(ItemType.MIRROR) and items.can_lift_heavy()),
        ]


class LightWorldNorthEast(ZeldaRegion):
    name = "Light World North East"
    area = "Light World"

    def __init__(self, world, config):
        ZeldaRegion.__init__(self, world, config)
        self.locations = [
            Location(self, 256 + 36, "King Zora",
                     lambda items: items.can_lift_light() or items.has(ItemType.FLIPPERS)),
            Location(self, 256 + 37, "Zora's Ledge",
                     lambda items: items.has(ItemType.FLIPPERS)),
            Location(self, 256 + 38, "Waterfall Fairy - Left",
                     lambda items: items.has(ItemType.FLIPPERS)),
            Location(self, 256 + 39, "Waterfall Fairy - Right",
                     lambda items: items.has(ItemType.FLIPPERS)),
            Location(self, 256 + 40, "Potion Shop"),
            Location(self, 256 + 41, "Sahasrahla's Hut - Left"),
            Location(self, 256 + 42, "Sahasrahla's Hut - Middle"),
            Location(self, 256 + 43, "Sahasrahla's Hut - Right"),
            Location(self, 256 + 44, "Sahasrahla",
                     lambda items: items.has_reward(Reward.PENDANT_GREEN)),
        ]


class LightWorldSouth(ZeldaRegion):
    name = "Light World South"
    area = "Light World"

    def __init__(self, world, config):
        ZeldaRegion.__init__(self, world, config)
        self.locations = [
            Location(self, 256 + 45, "Maze Race"),
            Location(self, 256 + 46, "Library",
                     lambda items: items.has(ItemType.BOOTS)),
            Location(self, 256 + 47, "Flute Spot",
                     lambda items: items.has(ItemType.SHOVEL)),
            Location(self, 256 + 48, "South of Grove",
                     lambda items: items.has(ItemType.MIRROR) and self.region("Dark World South").can_enter(items)),
            Location(self, 256 + 49, "Link's House"),
            Location(self, 256 + 50, "Aginah's Cave"),
            Location(self, 256 + 51, "Mini Moldorm Cave - Far Left"),
            Location(self, 256 + 52, "Mini Moldorm Cave - Left"),
            Location(self, 256 + 53, "Mini Moldorm Cave - Right"),
            Location(self, 256 + 54, "Mini Moldorm Cave - Far Right"),
            Location(self, 256 + 55, "Mini Moldorm Cave - NPC"),
            Location(self, 256 + 56, "Ice Rod Cave"),
            Location(self, 256 + 57, "Hobo",
                     lambda items: items.has(ItemType.FLIPPERS)),
            Location(self, 256 + 58, "Bombos Tablet",
                     lambda items: items.has(ItemType.BOOK) and items.has(ItemType.MIRROR) and items.master_sword() and
                     self.region("Dark World South").can_enter(items)),
            Location(self, 256 + 59, "Cave 45",
                     lambda items: items.has(ItemType.MIRROR) and self.region("Dark World South").can_enter(items)),
            Location(self, 256 + 60, "Checkerboard Cave",
                     lambda items: items.has(ItemType.MIRROR) and items.can_lift_light() and
                     self.region("Dark World Mire").can_enter(items)),
            Location(self, 256 + 61, "Desert Ledge",
                     lambda items: self.region("Desert Palace").can_enter(items)),
            Location(self, 256 + 62, "Lake Hylia Island",
                     lambda items: items.has(ItemType.FLIPPERS) and items.has(ItemType.MOON_PEARL) and items.has(ItemType.MIRROR) and
                     (self.region("Dark World South").can_enter(items) or self.region("Dark World North East").can_enter(items))),
            Location(self, 256 + 63, "Sunken Treasure"),
        ]


class LightWorldDeathMountainWest(ZeldaRegion):
    name = "Light World Death Mountain West"
    area = "Death Mountain"

    def __init__(self, world, config):
        ZeldaRegion.__init__(self, world, config)
        self.locations = [
            Location(self, 256 + 0, "Ether Tablet",
                     lambda items: items.has(ItemType.BOOK) and items.master_sword() and
                     (items.has(ItemType.MIRROR) or items.has(ItemType.HAMMER) and items.has(ItemType.HOOKSHOT))),
            Location(self, 256 + 1, "Spectacle Rock",
                     lambda items: items.has(ItemType.MIRROR)),
            Location(self, 256 + 2, "Spectacle Rock Cave"),
            Location(self, 256 + 3, "Old Man",
                     lambda items: items.has(ItemType.LAMP)),
        ]

    def entry(self, items):
        return items.has(ItemType.FLUTE) or items.can_lift_light() and items.has(ItemType.LAMP) or \
            items.can_access_death_mountain_portal()


class LightWorldDeathMountainEast(ZeldaRegion):
    name = "Light World Death Mountain East"
    area = "Death Mountain"

    def __init__(self, world, config):
        ZeldaRegion.__init__(self, world, config)
        self.locations = [
            Location(self, 256 + 4, "Floating Island",
                     lambda items: items.has(ItemType.MIRROR) and items.has(ItemType.MOON_PEARL) and items.can_lift_heavy()),
            Location(self, 256 + 5, "Spiral Cave"),
            Location(self, 256 + 6, "Paradox Cave Upper - Left"),
            Location(self, 256 + 7, "Paradox Cave Upper - Right"),
            Location(self, 256 + 8, "Paradox Cave Lower - Far Left"),
            Location(self, 256 + 9, "Paradox Cave Lower - Left"),
            Location(self, 256 + 10, "Paradox Cave Lower - Middle"),
            Location(self, 256 + 11, "Paradox Cave Lower - Right"),
            Location(self, 256 + 12, "Paradox Cave Lower - Far Right"),
            Location(self, 256 + 13, "Mimic Cave",
                     lambda items: items.has(ItemType.MIRROR) and items.has(ItemType.HAMMER) and items.has(ItemType.MOON_PEARL)),
        ]

    def entry(self, items):
        return self.region("Light World Death Mountain West").can_enter(items) and \
            (items.has(ItemType.HAMMER) and items.has(ItemType.MIRROR) or items.has(ItemType.HOOKSHOT))
