import json
from unittest import TestCase

from smz3_randomizer.errors import GenerationCancelled, InvalidConfigurationError, RandomizerGenerationException
from smz3_randomizer.hints import GameHintService
from smz3_randomizer.items import ItemFactory, ItemPool, ItemType
from smz3_randomizer.models.config import Config
from smz3_randomizer.models.enums import *
from smz3_randomizer.randomizer import Randomizer, VERSION
from smz3_randomizer.world import Location, Region, World


class LockedRegion(Region):
    name = "Locked Region"

    def __init__(self, world, config):
        Region.__init__(self, world, config)
        self.locations = [
            Location(self, 1, "Open Chest"),
            Location(self, 2, "Locked Chest", lambda items: items.has(ItemType.HOOKSHOT)),
        ]


class LockedWorld(World):
    def create_regions(self):
        return [LockedRegion(self, self.config)]

    def create_items(self):
        factory = ItemFactory(self)
        return ItemPool(progression=[factory.create(ItemType.HAMMER, True)], junk=factory.create_junk(1))


class Cancelled:
    def is_set(self):
        return True


def placements(seed_data):
    return [(location.name, location.item.name) for world in seed_data.worlds for location in world.locations]


class SeedGenerationTests(TestCase):
    @classmethod
    def setUpClass(cls):
        cls.randomizer = Randomizer()
        cls.seed_data = cls.randomizer.generate_seed(Config(), "12345")
        cls.world = cls.seed_data.worlds[0]

    def test_EveryLocationIsFilled(self):
        self.assertEqual(self.world.empty_locations(), [])
        self.assertEqual(self.seed_data.seed, "12345")
        self.assertEqual(self.seed_data.primary_config.seed, "12345")
        self.assertEqual(self.seed_data.mode, "normal")

    def test_SeedIsDeterministic(self):
        again = Randomizer().generate_seed(Config(), "12345")
        self.assertEqual(placements(again), placements(self.seed_data))
        self.assertEqual([region.reward for region in again.worlds[0].reward_regions],
                         [region.reward for region in self.world.reward_regions])

    def test_SpheresOnlyNeedEarlierItems(self):
        spheres = self.seed_data.playthrough.spheres
        self.assertEqual(sum(len(sphere) for sphere in spheres), len(self.world.locations))
        for index, sphere in enumerate(spheres):
            for location in sphere.locations:
                self.assertTrue(location.available(sphere.progressions[location.world.id]))
                if index > 0:
                    self.assertFalse(location.available(spheres[index - 1].progressions[location.world.id]))

    def test_DungeonItemsStayInTheirDungeon(self):
        for location in self.world.locations:
            if location.item.is_dungeon_item:
                self.assertIn(location.item.type, location.region.region_items)

    def test_Spoiler(self):
        spoiler = json.loads(self.randomizer.generate_spoiler())
        self.assertEqual(spoiler["version"], VERSION)
        self.assertEqual(spoiler["seed"], "12345")
        self.assertEqual(len(spoiler["players"]), 1)
        self.assertEqual(len(spoiler["players"][0]["items"]), len(self.world.locations))
        self.assertEqual(sorted(spoiler["players"][0]["medallions"]), ["Misery Mire", "Turtle Rock"])
        self.assertEqual(len(spoiler["playthrough"]), len(self.seed_data.playthrough))

    def test_GraphVisualization(self):
        graph = self.randomizer.generate_graph_visualization()
        self.assertIn("cluster_0", graph.source)
        self.assertIn("Sphere 1", graph.source)

    def test_Hints(self):
        data = self.seed_data.world_generation_data[0]
        self.assertTrue(len(data.hints) > 0)
        self.assertEqual(len(set(data.hints)), len(data.hints))
        self.assertEqual(len(data.dungeon_importance), 12)

    def test_LocationImportance(self):
        service = GameHintService()
        worlds = self.seed_data.worlds
        important = service.get_important_locations(worlds)
        pearl = next(location for location in self.world.locations if location.item.is_(ItemType.MOON_PEARL))
        sword = next(location for location in self.world.locations if location.item.is_(ItemType.PROGRESSIVE_SWORD))
        rupees = next(location for location in self.world.locations if location.item.is_(ItemType.TWENTY_RUPEES))

        self.assertEqual(service.check_if_locations_are_important(worlds, important, [pearl]), LocationUsefulness.MANDATORY)
        self.assertIn(service.check_if_locations_are_important(worlds, important, [sword]),
                      [LocationUsefulness.SWORD, LocationUsefulness.MANDATORY])
        self.assertEqual(service.check_if_locations_are_important(worlds, important, [rupees]), LocationUsefulness.USELESS)
        self.assertEqual(service.check_if_locations_are_important(worlds, important, []), LocationUsefulness.USELESS)


class RaceSeedTests(TestCase):
    def test_RaceHidesThePlaythrough(self):
        randomizer = Randomizer()
        seed_data = randomizer.generate_seed(Config(race=True, goal=Goal.DEFEAT_MOTHER_BRAIN), 777)

        self.assertEqual(len(seed_data.playthrough), 0)
        self.assertNotIn("playthrough", json.loads(randomizer.generate_spoiler()))
        self.assertEqual(seed_data.worlds[0].empty_locations(), [])


class MultiworldTests(TestCase):
    def test_TwoPlayers(self):
        configs = [Config(game_mode=GameMode.MULTIWORLD, player_name="Second", id=1),
                   Config(game_mode=GameMode.MULTIWORLD, player_name="First", id=0)]
        seed_data = Randomizer().generate_seed(configs, 4242)

        self.assertEqual([world.player for world in seed_data.worlds], ["First", "Second"])
        self.assertEqual(seed_data.primary_config.player_name, "First")
        self.assertEqual(seed_data.mode, "multiworld")
        locations = [location for world in seed_data.worlds for location in world.locations]
        for world in seed_data.worlds:
            owned = [location for location in locations if location.item.world is world]
            self.assertEqual(len(owned), len(world.locations))


class GenerationFailureTests(TestCase):
    def test_RetriesAreBounded(self):
        randomizer = Randomizer(max_retries=3, world_class=LockedWorld)
        with self.assertRaises(RandomizerGenerationException):
            randomizer.generate_seed(Config(), 1)

    def test_InvalidPlayers(self):
        with self.assertRaises(InvalidConfigurationError):
            Randomizer().generate_seed([])
        with self.assertRaises(InvalidConfigurationError):
            Randomizer().generate_seed([Config(player_name="A"), Config(player_name="B", id=1)])
        with self.assertRaises(InvalidConfigurationError):
            Randomizer().generate_seed([Config(game_mode=GameMode.MULTIWORLD, player_name="A"),
                                        Config(game_mode=GameMode.MULTIWORLD, player_name="B")])

    def test_Cancellation(self):
        with self.assertRaises(GenerationCancelled):
            Randomizer().generate_seed(Config(), 1, Cancelled())
