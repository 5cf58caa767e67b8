from ..models.enums import *
from ..world import Region


class ZeldaRegion(Region):
    pass


class MetroidRegion(Region):

    # Keycards only gate anything when they are shuffled into the pool
    def card(self, items, card):
        return not self.config.metroid_keysanity or items.has(card)


class Dungeon(ZeldaRegion):
    """A Zelda dungeon. Reward dungeons hand out their token once the boss location is reachable."""

    capabilities = frozenset([RegionCapability.REWARD])
    shuffle_reward = True


class MedallionDungeon(Dungeon):
    capabilities = frozenset([RegionCapability.REWARD, RegionCapability.MEDALLION])


class BossRegion(MetroidRegion):
    capabilities = frozenset([RegionCapability.REWARD])
    shuffle_reward = False
