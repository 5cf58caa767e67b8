from ...items import ItemType
from ...models.enums import *
from ...world import Location
from ..base import BossRegion


class InnerMaridia(BossRegion):
    name = "Inner Maridia"
    area = "Maridia"
    default_reward = Reward.DRAYGON
    boss_location = "Space Jump"

    def __init__(self, world, config):
        BossRegion.__init__(self, world, config)
        self.locations = [
            Location(self, 51, "Missile (yellow Maridia)",
                     lambda items: items.can_pass_bomb_passages(),
                     LocationType.VISIBLE),
            Location(self, 52, "Super Missile (yellow Maridia)",
                     lambda items: items.can_pass_bomb_passages(),
                     LocationType.VISIBLE),
            Location(self, 53, "Energy Tank, Mama turtle",
                     lambda items: items.can_fly() or items.has(ItemType.SPEED_BOOSTER) or items.has(ItemType.GRAPPLE),
                     LocationType.VISIBLE),
            Location(self, 54, "Missile (left Maridia sand pit room)",
                     lambda items: items.can_spring_ball_jump() or items.has(ItemType.HI_JUMP),
                     LocationType.VISIBLE),
            Location(self, 55, "Plasma Beam",
                     lambda items: self.can_defeat_draygon(items) and
                     (items.has(ItemType.SCREW_ATTACK) or items.has(ItemType.CHARGE)) and
                     (items.has(ItemType.HI_JUMP) or items.can_fly()),
                     LocationType.CHOZO),
            Location(self, 56, "Space Jump", self.can_defeat_draygon, LocationType.CHOZO),
        ]

    def can_defeat_draygon(self, items):
        return self.card(items, ItemType.CARD_MARIDIA_BOSS) and items.has(ItemType.GRAVITY) and \
            (items.has(ItemType.SPEED_BOOSTER) and items.has(ItemType.HI_JUMP) or items.can_fly()) and \
            items.has(ItemType.SUPER)

    def entry(self, items):
        return items.has(ItemType.GRAVITY) and (
            items.has(ItemType.SUPER) and items.can_use_power_bombs() and
            self.region("Red Brinstar").can_enter(items) or
            items.can_access_maridia_portal())
