from ...items import ItemType
from ...models.enums import *
from ...world import Location
from ..base import MetroidRegion


class Crateria(MetroidRegion):
    name = "Crateria"

    def __init__(self, world, config):
        MetroidRegion.__init__(self, world, config)
        self.locations = [
            Location(self, 0, "Power Bomb (Crateria surface)",
                     lambda items: self.card(items, ItemType.CARD_CRATERIA_L1) and
                     (items.has(ItemType.SPEED_BOOSTER) or items.can_fly()),
                     LocationType.VISIBLE),
            Location(self, 1, "Missile (outside Wrecked Ship bottom)",
                     lambda items: self.region("Wrecked Ship").can_enter(items),
                     LocationType.VISIBLE),
            Location(self, 2, "Energy Tank, Gauntlet",
                     lambda items: self.can_enter_gauntlet(items) and items.has_energy_reserves(1),
                     LocationType.VISIBLE),
            Location(self, 3, "Missile (Crateria bottom)",
                     lambda items: items.can_destroy_bomb_walls(),
                     LocationType.VISIBLE),
            Location(self, 4, "Bombs",
                     lambda items: self.card(items, ItemType.CARD_CRATERIA_BOSS) and
                     items.can_open_red_doors() and items.has(ItemType.MORPH),
                     LocationType.CHOZO),
            Location(self, 5, "Energy Tank, Terminator",
                     lambda items: items.can_destroy_bomb_walls() or items.has(ItemType.SPEED_BOOSTER),
                     LocationType.VISIBLE),
            Location(self, 6, "Missile (Crateria gauntlet right)",
                     lambda items: self.can_enter_gauntlet(items) and items.can_pass_bomb_passages(),
                     LocationType.VISIBLE),
            Location(self, 7, "Missile (Crateria gauntlet left)",
                     lambda items: self.can_enter_gauntlet(items) and items.can_pass_bomb_passages(),
                     LocationType.VISIBLE),
            Location(self, 8, "Super Missile (Crateria)",
                     lambda items: items.can_use_power_bombs() and items.has(ItemType.SPEED_BOOSTER) and
                     items.has_energy_reserves(1),
                     LocationType.VISIBLE),
            Location(self, 9, "Missile (Crateria middle)",
                     lambda items: items.can_pass_bomb_passages(),
                     LocationType.VISIBLE),
        ]

    def can_enter_gauntlet(self, items):
        return self.card(items, ItemType.CARD_CRATERIA_L1) and items.has(ItemType.MORPH) and \
            (items.can_fly() or items.has(ItemType.SPEED_BOOSTER))
