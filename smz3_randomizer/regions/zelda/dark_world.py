from ...items import ItemType
from ...models.enums import *
from ...world import Location
from ..base import ZeldaRegion


def can_reach_dark_world(items, config):
    return items.has(ItemType.MOON_PEARL) and (
        (items.has_reward(Reward.AGAHNIM) or items.can_access_dark_world_portal(config) and items.has(ItemType.FLIPPERS)) and
        items.has(ItemType.HOOKSHOT) and (items.has(ItemType.FLIPPERS) or items.can_lift_light() or items.has(ItemType.HAMMER)) or
        items.has(ItemType.HAMMER) and items.can_lift_light() or
        items.can_lift_heavy())


class DarkWorldNorthWest(ZeldaRegion):
    name = "Dark World North West"
    area = "Dark World"

    def __init__(self, world, config):
        ZeldaRegion.__init__(self, world, config)
        self.locations = [
            Location(self, 256 + 71, "Brewery"),
            Location(self, 256 + 72, "C-Shaped House"),
            Location(self, 256 + 73, "Chest Game"),
            Location(self, 256 + 74, "Hammer Pegs",
                     lambda items: items.can_lift_heavy() and items.has(ItemType.HAMMER)),
            Location(self, 256 + 75, "Bumper Cave",
                     lambda items: items.can_lift_light() and items.has(ItemType.CAPE)),
            Location(self, 256 + 76, "Blacksmith",
                     lambda items: items.can_lift_heavy()),
            Location(self, 256 + 77, "Purple Chest",
                     lambda items: items.can_lift_heavy()),
        ]

    def entry(self, items):
        return can_reach_dark_world(items, self.config)


class DarkWorldNorthEast(ZeldaRegion):
    name = "Dark World North East"
    area = "Dark World"

    def __init__(self, world, config):
        ZeldaRegion.__init__(self, world, config)
        self.locations = [
            Location(self, 256 + 78, "Catfish",
                     lambda items: items.has(ItemType.MOON_PEARL) and items.can_lift_light()),
            Location(self, 256 + 79, "Pyramid"),
            Location(self, 256 + 80, "Pyramid Fairy - Left", self.can_reach_pyramid_fairy),
            Location(self, 256 + 81, "Pyramid Fairy - Right", self.can_reach_pyramid_fairy),
        ]

    def can_reach_pyramid_fairy(self, items):
        return items.reward_count(Reward.CRYSTAL_RED) >= 2 and items.has(ItemType.MOON_PEARL) and \
            self.region("Dark World South").can_enter(items) and \
            (items.has(ItemType.HAMMER) or items.has(ItemType.MIRROR) and items.has_reward(Reward.AGAHNIM))

    def entry(self, items):
        return items.has_reward(Reward.AGAHNIM) or \
            items.has(ItemType.MOON_PEARL) and (
                items.has(ItemType.HAMMER) and items.can_lift_light() or
                items.can_lift_heavy() and items.has(ItemType.FLIPPERS) or
                items.can_access_dark_world_portal(self.config) and items.has(ItemType.FLIPPERS))


class DarkWorldSouth(ZeldaRegion):
    name = "Dark World South"
    area = "Dark World"

    def __init__(self, world, config):
        ZeldaRegion.__init__(self, world, config)
        self.locations = [
            Location(self, 256 + 82, "Digging Game"),
            Location(self, 256 + 83, "Stumpy"),
            Location(self, 256 + 84, "Hype Cave - Top"),
            Location(self, 256 + 85, "Hype Cave - Middle Right"),
            Location(self, 256 + 86, "Hype Cave - Middle Left"),
            Location(self, 256 + 87, "Hype Cave - Bottom"),
            Location(self, 256 + 88, "Hype Cave - NPC"),
        ]

    def entry(self, items):
        return can_reach_dark_world(items, self.config)


class DarkWorldMire(ZeldaRegion):
    name = "Dark World Mire"
    area = "Dark World"

    def __init__(self, world, config):
        ZeldaRegion.__init__(self, world, config)
        self.locations = [
            Location(self, 256 + 89, "Mire Shed - Left",
                     lambda items: items.has(ItemType.MOON_PEARL)),
            Location(self, 256 + 90, "Mire Shed - Right",
                     lambda items: items.has(ItemType.MOON_PEARL)),
        ]

    def entry(self, items):
        return items.has(ItemType.FLUTE) and items.can_lift_heavy() or items.can_access_misery_mire_portal(self.config)


class DarkWorldDeathMountainWest(ZeldaRegion):
    name = "Dark World Death Mountain West"
    area = "Dark World"

    def __init__(self, world, config):
        ZeldaRegion.__init__(self, world, config)
        self.locations = [
            Location(self, 256 + 64, "Spike Cave",
                     lambda items: items.has(ItemType.MOON_PEARL) and items.has(ItemType.HAMMER) and items.can_lift_light() and
                     (items.can_extend_magic() and items.has(ItemType.CAPE) or items.has(ItemType.BYRNA)) and
                     self.region("Light World Death Mountain West").can_enter(items)),
        ]


class DarkWorldDeathMountainEast(ZeldaRegion):
    name = "Dark World Death Mountain East"
    area = "Dark World"

    def __init__(self, world, config):
        ZeldaRegion.__init__(self, world, config)
        self.locations = [
            Location(self, 256 + 65, "Hookshot Cave - Top Right",
                     lambda items: items.has(ItemType.MOON_PEARL) and items.has(ItemType.HOOKSHOT)),
            Location(self, 256 + 66, "Hookshot Cave - Top Left",
                     lambda items: items.has(ItemType.MOON_PEARL) and items.has(ItemType.HOOKSHOT)),
            Location(self, 256 + 67, "Hookshot Cave - Bottom Left",
                     lambda items: items.has(ItemType.MOON_PEARL) and items.has(ItemType.HOOKSHOT)),
            Location(self, 256 + 68, "Hookshot Cave - Bottom Right",
                     lambda items: items.has(ItemType.MOON_PEARL) and (items.has(ItemType.HOOKSHOT) or items.has(ItemType.BOOTS))),
            Location(self, 256 + 69, "Superbunny Cave - Top",
                     lambda items: items.has(ItemType.MOON_PEARL)),
            Location(self, 256 + 70, "Superbunny Cave - Bottom",
                     lambda items: items.has(ItemType.MOON_PEARL)),
        ]

    def entry(self, items):
        return items.can_lift_heavy() and self.region("Light World Death Mountain East").can_enter(items)
