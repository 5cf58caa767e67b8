from ...items import ItemType
from ...models.enums import *
from ...world import Location
from ..base import BossRegion


class WreckedShip(BossRegion):
    name = "Wrecked Ship"
    default_reward = Reward.PHANTOON
    boss_location = "Gravity Suit"

    def __init__(self, world, config):
        BossRegion.__init__(self, world, config)
        self.locations = [
            Location(self, 30, "Missile (Wrecked Ship middle)", location_type=LocationType.VISIBLE),
            Location(self, 31, "Reserve Tank, Wrecked Ship",
                     lambda items: self.can_unpower(items) and items.has(ItemType.SPEED_BOOSTER) and
                     items.can_use_power_bombs() and (items.has(ItemType.VARIA) or items.has_energy_reserves(2)),
                     LocationType.CHOZO),
            Location(self, 32, "Missile (Gravity Suit)",
                     lambda items: self.can_unpower(items) and (items.has(ItemType.VARIA) or items.has_energy_reserves(1)),
                     LocationType.VISIBLE),
            Location(self, 33, "Missile (Wrecked Ship top)", self.can_unpower, LocationType.VISIBLE),
            Location(self, 34, "Energy Tank, Wrecked Ship",
                     lambda items: self.can_unpower(items) and
                     (items.has(ItemType.HI_JUMP) or items.has(ItemType.SPACE_JUMP) or
                      items.has(ItemType.SPEED_BOOSTER) or items.has(ItemType.GRAVITY)),
                     LocationType.VISIBLE),
            Location(self, 35, "Super Missile (Wrecked Ship left)", self.can_unpower, LocationType.VISIBLE),
            Location(self, 36, "Right Super, Wrecked Ship", self.can_unpower, LocationType.VISIBLE),
            Location(self, 37, "Gravity Suit",
                     lambda items: self.can_unpower(items) and (items.has(ItemType.VARIA) or items.has_energy_reserves(1)),
                     LocationType.CHOZO),
        ]

    # Phantoon has to fall before the ship powers back on
    def can_unpower(self, items):
        return self.card(items, ItemType.CARD_WRECKED_SHIP_BOSS) and items.can_pass_bomb_passages()

    def entry(self, items):
        return items.has(ItemType.SUPER) and (
            (items.has(ItemType.SPEED_BOOSTER) or items.has(ItemType.GRAPPLE) or items.has(ItemType.SPACE_JUMP) or
             items.has(ItemType.GRAVITY)) and items.can_use_power_bombs() or
            items.can_access_maridia_portal() and items.has(ItemType.HI_JUMP))
