from ...items import ItemType
from ...models.enums import *
from ...world import Location
from ..base import MetroidRegion, BossRegion


class UpperNorfair(MetroidRegion):
    name = "Upper Norfair"
    area = "Norfair Upper"

    def __init__(self, world, config):
        MetroidRegion.__init__(self, world, config)
        self.locations = [
            Location(self, 38, "Missile (lava room)",
                     lambda items: self.card(items, ItemType.CARD_NORFAIR_L1) and items.has(ItemType.VARIA) and
                     items.has(ItemType.SUPER) and items.has(ItemType.MORPH),
                     LocationType.HIDDEN),
            Location(self, 39, "Ice Beam",
                     lambda items: self.card(items, ItemType.CARD_NORFAIR_L1) and items.has(ItemType.SUPER) and
                     items.can_pass_bomb_passages() and (items.has(ItemType.VARIA) or items.has_energy_reserves(3)),
                     LocationType.CHOZO),
            Location(self, 40, "Hi-Jump Boots",
                     lambda items: items.can_open_red_doors() and items.can_pass_bomb_passages(),
                     LocationType.CHOZO),
            Location(self, 41, "Energy Tank (Hi-Jump Boots)",
                     lambda items: items.can_open_red_doors(),
                     LocationType.VISIBLE),
            Location(self, 42, "Missile (bubble Norfair)",
                     lambda items: self.card(items, ItemType.CARD_NORFAIR_L1) and items.can_hell_run(self.config.logic),
                     LocationType.VISIBLE),
            Location(self, 43, "Speed Booster",
                     lambda items: self.card(items, ItemType.CARD_NORFAIR_L1) and items.has(ItemType.SUPER) and
                     items.can_hell_run(self.config.logic),
                     LocationType.CHOZO),
            Location(self, 44, "Wave Beam",
                     lambda items: self.card(items, ItemType.CARD_NORFAIR_L1) and items.can_open_red_doors() and
                     items.can_hell_run(self.config.logic) and
                     (items.has(ItemType.MORPH) or items.has(ItemType.GRAPPLE) or items.has(ItemType.HI_JUMP) or
                      items.has(ItemType.SPACE_JUMP)),
                     LocationType.CHOZO),
        ]

    def entry(self, items):
        return (items.can_destroy_bomb_walls() or items.has(ItemType.SPEED_BOOSTER)) and \
            items.has(ItemType.SUPER) and items.has(ItemType.MORPH) or \
            items.can_access_norfair_upper_portal()


class LowerNorfair(BossRegion):
    name = "Lower Norfair"
    area = "Norfair Lower"
    default_reward = Reward.RIDLEY
    boss_location = "Energy Tank, Ridley"

    def __init__(self, world, config):
        BossRegion.__init__(self, world, config)
        self.locations = [
            Location(self, 45, "Missile (Gold Torizo)",
                     lambda items: items.can_use_power_bombs() and items.has(ItemType.SPACE_JUMP) and items.has(ItemType.SUPER),
                     LocationType.VISIBLE),
            Location(self, 46, "Super Missile (Gold Torizo)",
                     lambda items: items.can_destroy_bomb_walls() and items.has(ItemType.SUPER),
                     LocationType.HIDDEN),
            Location(self, 47, "Screw Attack",
                     lambda items: items.can_destroy_bomb_walls() and
                     (items.has(ItemType.SPACE_JUMP) or items.has(ItemType.SPEED_BOOSTER) or items.can_fly()),
                     LocationType.CHOZO),
            Location(self, 48, "Power Bomb (Power Bombs of shame)",
                     lambda items: items.can_use_power_bombs(),
                     LocationType.VISIBLE),
            Location(self, 49, "Energy Tank, Firefleas", location_type=LocationType.VISIBLE),
            Location(self, 50, "Energy Tank, Ridley",
                     lambda items: self.card(items, ItemType.CARD_LOWER_NORFAIR_BOSS) and items.can_use_power_bombs() and
                     items.has(ItemType.SUPER) and items.has(ItemType.CHARGE) and items.has_energy_reserves(3),
                     LocationType.HIDDEN),
        ]

    def entry(self, items):
        if not items.has(ItemType.VARIA):
            return False
        from_upper = self.region("Upper Norfair").can_enter(items) and items.can_use_power_bombs() and \
            items.has(ItemType.SUPER) and (items.has(ItemType.SPACE_JUMP) or items.has(ItemType.GRAVITY))
        from_portal = items.can_access_norfair_lower_portal() and items.can_destroy_bomb_walls() and \
            items.has(ItemType.SUPER) and (items.can_fly() or items.has(ItemType.SPEED_BOOSTER) or items.has(ItemType.HI_JUMP))
        return from_upper or from_portal
