from ...items import ItemType
from ...models.enums import *
from ...world import Location
from ..base import MetroidRegion, BossRegion


class GreenBrinstar(MetroidRegion):
    name = "Green Brinstar"
    area = "Brinstar"

    def __init__(self, world, config):
        MetroidRegion.__init__(self, world, config)
        self.locations = [
            Location(self, 10, "Power Bomb (green Brinstar bottom)",
                     lambda items: self.card(items, ItemType.CARD_BRINSTAR_L1) and items.can_use_power_bombs(),
                     LocationType.VISIBLE),
            Location(self, 11, "Missile (green Brinstar below super missile)",
                     lambda items: items.can_pass_bomb_passages() and items.can_open_red_doors(),
                     LocationType.VISIBLE),
            Location(self, 12, "Super Missile (green Brinstar top)",
                     lambda items: items.can_open_red_doors() and (items.has(ItemType.MORPH) or items.has(ItemType.SPEED_BOOSTER)),
                     LocationType.VISIBLE),
            Location(self, 13, "Reserve Tank, Brinstar",
                     lambda items: items.can_open_red_doors() and (items.has(ItemType.MORPH) or items.has(ItemType.SPEED_BOOSTER)),
                     LocationType.CHOZO),
            Location(self, 14, "Missile (green Brinstar behind missile)",
                     lambda items: items.can_pass_bomb_passages() and items.can_open_red_doors(),
                     LocationType.HIDDEN),
            Location(self, 15, "Energy Tank, Etecoons",
                     lambda items: self.card(items, ItemType.CARD_BRINSTAR_L1) and items.can_use_power_bombs(),
                     LocationType.VISIBLE),
        ]

    def entry(self, items):
        return items.can_destroy_bomb_walls() or items.has(ItemType.SPEED_BOOSTER)


class PinkBrinstar(MetroidRegion):
    name = "Pink Brinstar"
    area = "Brinstar"

    def __init__(self, world, config):
        MetroidRegion.__init__(self, world, config)
        self.locations = [
            Location(self, 16, "Super Missile (pink Brinstar)",
                     lambda items: items.can_pass_bomb_passages() and items.has(ItemType.SUPER),
                     LocationType.CHOZO),
            Location(self, 17, "Missile (pink Brinstar top)", location_type=LocationType.VISIBLE),
            Location(self, 18, "Missile (pink Brinstar bottom)", location_type=LocationType.VISIBLE),
            Location(self, 19, "Charge Beam",
                     lambda items: items.can_pass_bomb_passages(),
                     LocationType.CHOZO),
            Location(self, 20, "Power Bomb (pink Brinstar)",
                     lambda items: items.can_use_power_bombs() and items.has(ItemType.SUPER),
                     LocationType.VISIBLE),
            Location(self, 21, "Energy Tank, Waterway",
                     lambda items: items.can_use_power_bombs() and items.can_open_red_doors() and
                     items.has(ItemType.SPEED_BOOSTER),
                     LocationType.VISIBLE),
        ]

    def entry(self, items):
        return items.can_open_red_doors() and (items.can_destroy_bomb_walls() or items.has(ItemType.SPEED_BOOSTER)) or \
            items.can_use_power_bombs()


class RedBrinstar(MetroidRegion):
    name = "Red Brinstar"
    area = "Brinstar"

    def __init__(self, world, config):
        MetroidRegion.__init__(self, world, config)
        self.locations = [
            Location(self, 22, "X-Ray Scope",
                     lambda items: items.can_use_power_bombs() and items.can_open_red_doors() and
                     (items.has(ItemType.GRAPPLE) or items.has(ItemType.SPACE_JUMP)),
                     LocationType.CHOZO),
            Location(self, 23, "Power Bomb (red Brinstar sidehopper room)",
                     lambda items: items.can_use_power_bombs() and items.has(ItemType.SUPER),
                     LocationType.VISIBLE),
            Location(self, 24, "Power Bomb (red Brinstar spike room)",
                     lambda items: items.has(ItemType.SUPER),
                     LocationType.CHOZO),
            Location(self, 25, "Missile (red Brinstar spike room)",
                     lambda items: items.can_use_power_bombs() and items.has(ItemType.SUPER),
                     LocationType.VISIBLE),
            Location(self, 26, "Spazer",
                     lambda items: items.can_pass_bomb_passages() and items.has(ItemType.SUPER),
                     LocationType.CHOZO),
        ]

    def entry(self, items):
        return items.has(ItemType.SUPER) and items.can_destroy_bomb_walls() and items.has(ItemType.MORPH) or \
            items.can_access_norfair_upper_portal() and (items.has(ItemType.ICE_BEAM) or items.has(ItemType.HI_JUMP) or
                                                         items.has(ItemType.SPACE_JUMP))


class KraidsLair(BossRegion):
    name = "Kraid's Lair"
    area = "Brinstar"
    default_reward = Reward.KRAID
    boss_location = "Varia Suit"

    def __init__(self, world, config):
        BossRegion.__init__(self, world, config)
        self.locations = [
            Location(self, 27, "Energy Tank, Kraid",
                     lambda items: self.card(items, ItemType.CARD_BRINSTAR_BOSS),
                     LocationType.HIDDEN),
            Location(self, 28, "Varia Suit",
                     lambda items: self.card(items, ItemType.CARD_BRINSTAR_BOSS),
                     LocationType.CHOZO),
            Location(self, 29, "Missile (Kraid)",
                     lambda items: items.can_use_power_bombs(),
                     LocationType.HIDDEN),
        ]

    def entry(self, items):
        return (items.can_destroy_bomb_walls() or items.has(ItemType.SPEED_BOOSTER) or items.can_access_norfair_upper_portal()) and \
            items.has(ItemType.SUPER) and items.can_pass_bomb_passages()
