import random
from unittest import TestCase

from smz3_randomizer.errors import FillError, InvalidConfigurationError
from smz3_randomizer.fill import Filler, assumed_progression
from smz3_randomizer.items import Item, ItemFactory, ItemPool, ItemType
from smz3_randomizer.models.config import Config, PlandoConfig
from smz3_randomizer.models.enums import *
from smz3_randomizer.playthrough import Playthrough
from smz3_randomizer.standard_world import StandardWorld
from smz3_randomizer.world import Location, Region, World


class HammerRegion(Region):
    name = "Hammer Region"

    def __init__(self, world, config):
        Region.__init__(self, world, config)
        self.locations = [
            Location(self, 1, "Open Chest"),
            Location(self, 2, "Hammer Chest", lambda items: items.has(ItemType.HAMMER)),
            Location(self, 3, "Hookshot Chest", lambda items: items.has(ItemType.HOOKSHOT)),
        ]


class HammerWorld(World):
    def create_regions(self):
        return [HammerRegion(self, self.config)]

    def create_items(self):
        factory = ItemFactory(self)
        return ItemPool(progression=[factory.create(ItemType.HAMMER, True), factory.create(ItemType.HOOKSHOT, True)],
                        junk=factory.create_junk(1))


class AssumedFillTests(TestCase):
    def test_ItemsNeverLockThemselves(self):
        for seed in range(20):
            world = HammerWorld(Config())
            Filler([world], world.config, random.Random(seed)).fill()

            self.assertEqual(world.empty_locations(), [])
            self.assertFalse(world.get_location("Hammer Chest").item_is(ItemType.HAMMER))
            self.assertFalse(world.get_location("Hookshot Chest").item_is(ItemType.HOOKSHOT))

    def test_AssumedProgressionCollectsReachableItems(self):
        world = HammerWorld(Config())
        world.get_location("Open Chest").item = Item(ItemType.HAMMER, world, progression=True)
        world.get_location("Hammer Chest").item = Item(ItemType.HOOKSHOT, world, progression=True)

        progressions = assumed_progression([world], [])
        self.assertTrue(progressions[world.id].has(ItemType.HAMMER))
        self.assertTrue(progressions[world.id].has(ItemType.HOOKSHOT))

        world.get_location("Open Chest").item = None
        progressions = assumed_progression([world], [])
        self.assertFalse(progressions[world.id].has(ItemType.HOOKSHOT))

    def test_ItemsAreCreditedToTheirOwner(self):
        first = HammerWorld(Config(game_mode=GameMode.MULTIWORLD, id=0), "First", 0)
        second = HammerWorld(Config(game_mode=GameMode.MULTIWORLD, id=1), "Second", 1)
        first.get_location("Open Chest").item = Item(ItemType.HAMMER, second, progression=True)

        progressions = assumed_progression([first, second], [Item(ItemType.HOOKSHOT, first, progression=True)])
        self.assertTrue(progressions[first.id].has(ItemType.HOOKSHOT))
        self.assertFalse(progressions[first.id].has(ItemType.HAMMER))
        self.assertTrue(progressions[second.id].has(ItemType.HAMMER))

    def test_NoRoomRaisesFillError(self):
        world = HammerWorld(Config())
        filler = Filler([world], world.config, random.Random(1))
        world.get_location("Open Chest").item = Item(ItemType.TWENTY_RUPEES, world)

        with self.assertRaises(FillError):
            filler.assumed_fill([Item(ItemType.HAMMER, world, progression=True)], [], world.locations)


class MultiworldPlaythroughTests(TestCase):
    def test_ItemsFoundElsewhereReachTheirOwner(self):
        owner = HammerWorld(Config(game_mode=GameMode.MULTIWORLD, id=0), "Owner", 0)
        other = HammerWorld(Config(game_mode=GameMode.MULTIWORLD, id=1), "Other", 1)
        other.get_location("Open Chest").item = Item(ItemType.HAMMER, owner, progression=True)
        owner.get_location("Open Chest").item = Item(ItemType.TWENTY_RUPEES, owner)
        owner.get_location("Hammer Chest").item = Item(ItemType.TEN_ARROWS, owner)
        other.get_location("Hammer Chest").item = Item(ItemType.TEN_BOMBS, other)

        locations = owner.locations + other.locations
        spheres, progressions = Playthrough.generate_spheres(locations, [owner, other])

        self.assertEqual(len(spheres), 2)
        self.assertFalse(spheres[0].progressions[owner.id].has(ItemType.HAMMER))
        self.assertTrue(spheres[1].progressions[owner.id].has(ItemType.HAMMER))
        self.assertFalse(spheres[1].progressions[other.id].has(ItemType.HAMMER))
        self.assertEqual(spheres[1].locations, [owner.get_location("Hammer Chest")])
        self.assertFalse(progressions[other.id].has(ItemType.HAMMER))

class StandardFillTests(TestCase):
    def test_RewardsAndMedallions(self):
        world = StandardWorld(Config(turtle_rock_medallion=Medallion.QUAKE))
        filler = Filler([world], world.config, random.Random(5))
        filler.assign_rewards(world)
        filler.assign_medallions(world)

        rewards = [region.reward for region in world.shuffled_reward_regions]
        self.assertEqual(rewards.count(Reward.CRYSTAL_RED), 2)
        self.assertEqual(rewards.count(Reward.CRYSTAL_BLUE), 5)
        self.assertEqual(rewards.count(Reward.PENDANT_GREEN), 1)
        self.assertEqual(rewards.count(Reward.PENDANT_NON_GREEN), 2)
        self.assertEqual(world.get_region("Castle Tower").reward, Reward.AGAHNIM)
        self.assertEqual(world.get_region("Kraid's Lair").reward, Reward.KRAID)

        self.assertEqual(world.get_region("Turtle Rock").medallion, ItemType.QUAKE)
        self.assertIn(world.get_region("Misery Mire").medallion, [ItemType.BOMBOS, ItemType.ETHER, ItemType.QUAKE])

    def test_PlandoPlacements(self):
        plando = PlandoConfig(items={"Sick Kid": "Hookshot"}, rewards={"Eastern Palace": "crystal_red"},
                              medallions={"Misery Mire": "ether"})
        world = StandardWorld(Config(plando=plando))
        filler = Filler([world], world.config, random.Random(5))
        filler.pools[world.id] = world.create_items()
        filler.apply_plando()
        filler.assign_rewards(world)
        filler.assign_medallions(world)

        self.assertTrue(world.get_location("Sick Kid").item_is(ItemType.HOOKSHOT, world))
        self.assertFalse(any(item.type == ItemType.HOOKSHOT for item in filler.pools[world.id].progression))
        self.assertEqual(world.get_region("Eastern Palace").reward, Reward.CRYSTAL_RED)
        self.assertEqual(world.get_region("Misery Mire").medallion, ItemType.ETHER)

    def test_InvalidPlando(self):
        for items in [{"Nowhere": "Hookshot"}, {"Sick Kid": "Triforce Piece"}, {"Sick Kid": "Eastern Palace Big Key"}]:
            world = StandardWorld(Config(plando=PlandoConfig(items=items)))
            filler = Filler([world], world.config, random.Random(5))
            filler.pools[world.id] = world.create_items()
            with self.assertRaises(InvalidConfigurationError):
                filler.apply_plando()
