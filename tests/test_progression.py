from unittest import TestCase

from smz3_randomizer.items import Item, ItemType
from smz3_randomizer.models.config import Config
from smz3_randomizer.models.enums import *
from smz3_randomizer.progression import Progression


class ProgressionTests(TestCase):
    def test_SameItemCountsOnce(self):
        sword = Item(ItemType.PROGRESSIVE_SWORD, progression=True)
        items = Progression()
        self.assertTrue(items.add(sword))
        self.assertFalse(items.add(sword))
        self.assertEqual(items.count(ItemType.PROGRESSIVE_SWORD), 1)
        self.assertFalse(items.master_sword())

        items.add(Item(ItemType.PROGRESSIVE_SWORD, ordinal=2, progression=True))
        self.assertTrue(items.master_sword())

    def test_TemporaryItemsAreAllCounted(self):
        items = Progression()
        for ordinal in range(1, 7):
            self.assertTrue(items.add(Item(ItemType.ETANK, ordinal=ordinal)))
        self.assertEqual(items.count(ItemType.ETANK), 6)

        items = Progression([Item(ItemType.MORPH)])
        self.assertTrue(items.add(Item(ItemType.BOMBS)))
        self.assertTrue(items.can_ibj())

    def test_TemporaryRegionsAreAllCompleted(self):
        items = Progression()
        for _ in range(3):
            self.assertTrue(items.add_reward(Reward.CRYSTAL_BLUE, object()))
        self.assertEqual(items.crystal_count(), 3)

    def test_CapabilitiesFollowItems(self):
        items = Progression()
        self.assertFalse(items.can_ibj())
        items.add(Item(ItemType.MORPH))
        self.assertFalse(items.can_ibj())
        items.add(Item(ItemType.BOMBS))
        self.assertTrue(items.can_ibj())
        self.assertTrue(items.can_fly())
        self.assertTrue(items.can_destroy_bomb_walls())

    def test_EnergyReserves(self):
        items = Progression([Item(ItemType.ETANK), Item(ItemType.ETANK, ordinal=2), Item(ItemType.RESERVE_TANK)])
        self.assertTrue(items.has_energy_reserves(3))
        self.assertFalse(items.has_energy_reserves(4))
        self.assertFalse(items.can_hell_run())
        self.assertTrue(items.can_hell_run(Logic.HARD))

    def test_Rewards(self):
        items = Progression(rewards=[Reward.CRYSTAL_RED, Reward.CRYSTAL_BLUE, Reward.PENDANT_GREEN])
        self.assertEqual(items.crystal_count(), 2)
        self.assertEqual(items.pendant_count(), 1)
        self.assertFalse(items.has_reward(Reward.AGAHNIM))

        region = object()
        self.assertTrue(items.add_reward(Reward.AGAHNIM, region))
        self.assertFalse(items.add_reward(Reward.AGAHNIM, region))
        self.assertTrue(items.has_completed(region))
        self.assertEqual(items.reward_count(Reward.AGAHNIM), 1)

    def test_CopyIsIndependent(self):
        items = Progression([Item(ItemType.HOOKSHOT)])
        clone = items.copy()
        clone.add(Item(ItemType.HAMMER))
        self.assertTrue(clone.has(ItemType.HAMMER))
        self.assertFalse(items.has(ItemType.HAMMER))
        self.assertEqual(len(items), 1)

    def test_PortalsDependOnKeycards(self):
        items = Progression([Item(t) for t in [ItemType.MORPH, ItemType.POWER_BOMB, ItemType.SUPER,
                                               ItemType.GRAVITY, ItemType.SPEED_BOOSTER]])
        self.assertTrue(items.can_access_dark_world_portal(Config()))
        self.assertFalse(items.can_access_dark_world_portal(Config(keysanity_mode=KeysanityMode.METROID)))
        items.add(Item(ItemType.CARD_MARIDIA_BOSS))
        self.assertTrue(items.can_access_dark_world_portal(Config(keysanity_mode=KeysanityMode.METROID)))
