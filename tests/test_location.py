import random
from unittest import TestCase

from smz3_randomizer.items import Item, ItemType, create_progression_items
from smz3_randomizer.models.config import Config
from smz3_randomizer.models.enums import *
from smz3_randomizer.progression import Progression
from smz3_randomizer.standard_world import StandardWorld


class LocationRuleTests(TestCase):
    def setUp(self):
        self.world = StandardWorld(Config())
        self.other = StandardWorld(Config(game_mode=GameMode.MULTIWORLD, id=1), "Other", 1)

    def test_WorldLayout(self):
        self.assertEqual(len(self.world.reward_regions), 15)
        self.assertEqual(len(self.world.shuffled_reward_regions), 10)
        self.assertEqual([region.name for region in self.world.medallion_regions], ["Misery Mire", "Turtle Rock"])
        self.assertEqual(len(self.world.create_items()), len(self.world.locations))

    def test_ThievesTownBigChestHoldsItsOwnKey(self):
        location = self.world.get_location("Thieves' Town - Big Chest")
        key = Item(ItemType.KEY_TT, self.world, progression=True)
        hammer_only = Progression([Item(ItemType.HAMMER)])

        self.assertTrue(location.can_fill(key, hammer_only))
        self.assertFalse(location.can_fill(key, Progression()))
        self.assertIsNone(location.item)

    def test_SwampPalaceEntranceNeedsItsKey(self):
        location = self.world.get_location("Swamp Palace - Entrance")
        nothing = Progression()

        self.assertTrue(location.can_fill(Item(ItemType.KEY_SP, self.world), nothing, check_logic=False))
        self.assertFalse(location.can_fill(Item(ItemType.HOOKSHOT, self.world), nothing, check_logic=False))

        keysanity = StandardWorld(Config(keysanity_mode=KeysanityMode.ZELDA))
        location = keysanity.get_location("Swamp Palace - Entrance")
        self.assertTrue(location.can_fill(Item(ItemType.HOOKSHOT, keysanity), nothing, check_logic=False))

    def test_DungeonItemsStayHome(self):
        nothing = Progression()
        key = Item(ItemType.BIG_KEY_EP, self.world)

        self.assertTrue(self.world.get_location("Eastern Palace - Cannonball Chest").can_fill(key, nothing, check_logic=False))
        self.assertFalse(self.world.get_location("Sick Kid").can_fill(key, nothing, check_logic=False))
        self.assertFalse(self.other.get_location("Eastern Palace - Cannonball Chest").can_fill(key, nothing, check_logic=False))

    def test_KeycardsRoamFreely(self):
        card = Item(ItemType.CARD_CRATERIA_L1, self.world)
        self.assertTrue(self.world.get_location("Sick Kid").can_fill(card, Progression(), check_logic=False))

    def test_MedallionGatesEntry(self):
        mire = self.world.get_region("Misery Mire")
        mire.medallion = ItemType.ETHER
        self.assertFalse(mire.can_enter(Progression([Item(ItemType.BOMBOS)])))

    def test_RegionLookups(self):
        self.assertTrue(self.world.has_region("Ganon's Tower"))
        self.assertFalse(self.world.has_location("Nowhere"))
        with self.assertRaises(KeyError):
            self.world.get_location("Nowhere")


class PredicateMonotonicityTests(TestCase):
    def test_MoreItemsNeverCloseALocation(self):
        world = StandardWorld(Config())
        for region in world.medallion_regions:
            region.medallion = ItemType.QUAKE
        items = create_progression_items(world)
        random.Random(3).shuffle(items)

        opened = set()
        for end in range(0, len(items) + 1, 10):
            progression = Progression(items[:end])
            available = set(location.name for location in world.locations if location.available(progression))
            self.assertTrue(opened <= available)
            opened = available


class ItemCategoryTests(TestCase):
    def test_Classification(self):
        self.assertTrue(Item(ItemType.KEY_TT).is_key)
        self.assertTrue(Item(ItemType.BIG_KEY_TT).is_big_key)
        self.assertTrue(Item(ItemType.CARD_MARIDIA_BOSS).is_keycard)
        self.assertFalse(Item(ItemType.CARD_MARIDIA_BOSS).is_dungeon_item)
        self.assertTrue(Item(ItemType.TWENTY_RUPEES).is_junk)
        self.assertTrue(Item(ItemType.ONE_RUPEE).is_junk)
        self.assertFalse(Item(ItemType.HOOKSHOT).is_junk)
