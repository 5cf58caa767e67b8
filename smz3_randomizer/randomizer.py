import hashlib
import json
import logging
import os
import random
import uuid
from datetime import datetime, timezone

import graphviz

from .errors import FillError, PlaythroughError, RandomizerGenerationException, InvalidConfigurationError
from .fill import Filler
from .hints import GameHintService, HINT_LINES
from .models.config import Config
from .models.enums import *
from .models.seed_data import SeedData, WorldGenerationData
from .playthrough import Playthrough
from .standard_world import StandardWorld

VERSION = "1.0.0"

MAX_RANDO_RETRIES = 100
MAX_SEED_NUMBER = 999999999
GAME_NAME = "SMZ3"

PRINT_LEVELS = {
    PrintLevel.ERROR: logging.ERROR,
    PrintLevel.WARN: logging.WARNING,
    PrintLevel.INFO: logging.INFO,
    PrintLevel.VERBOSE: logging.DEBUG,
}


def parse_seed(seed=None) -> int:
    """Turns whatever the player typed into a seed number.

    Numbers are used as they are, any other text is hashed, and nothing at all picks a random seed.
    """
    if isinstance(seed, int) and not isinstance(seed, bool):
        return seed
    text = "" if seed is None else str(seed).strip()
    if not text:
        return random.randint(0, MAX_SEED_NUMBER)
    try:
        return int(text)
    except ValueError:
        digest = hashlib.sha256(text.encode("utf-8")).digest()
        return int.from_bytes(digest[:4], "little") % (MAX_SEED_NUMBER + 1)


def generate_filename(config: Config, seed_number, extension="json") -> str:
    def getLogic(logic):
        if logic.value == Logic.NORMAL.value:
            return "_N"
        if logic.value == Logic.HARD.value:
            return "_H"

    def getKeysanity(keysanity_mode):
        if keysanity_mode.value == KeysanityMode.NONE.value:
            return ""
        if keysanity_mode.value == KeysanityMode.ZELDA.value:
            return "_kz"
        if keysanity_mode.value == KeysanityMode.METROID.value:
            return "_km"
        if keysanity_mode.value == KeysanityMode.BOTH.value:
            return "_kb"

    def getGoal(goal, crystals):
        if goal.value == Goal.DEFEAT_BOTH.value:
            return "_DB" + str(crystals)
        if goal.value == Goal.DEFEAT_GANON.value:
            return "_DG" + str(crystals)
        if goal.value == Goal.DEFEAT_MOTHER_BRAIN.value:
            return "_MB"

    def getSwitch(switch, param):
        if switch:
            return "_" + param
        return ""

    filename = GAME_NAME + "_v" + VERSION
    filename += getLogic(config.logic)
    filename += getGoal(config.goal, config.ganon_crystal_count)
    filename += getKeysanity(config.keysanity_mode)
    filename += getSwitch(config.multiworld, "mw")
    filename += getSwitch(config.race, "race")
    filename += "_" + str(seed_number) + "." + extension

    return filename


class Randomizer:
    def __init__(self, log_path: str = None, max_retries: int = MAX_RANDO_RETRIES, world_class=StandardWorld):
        if log_path:
            if os.path.dirname(log_path) and not os.path.exists(os.path.dirname(log_path)):
                os.makedirs(os.path.dirname(log_path))
            logging.basicConfig(filename=log_path, filemode='w', format='%(message)s', level=logging.DEBUG)
        self.logger = logging.getLogger("SMZ3")
        self.max_retries = max_retries
        self.world_class = world_class
        self.seed_data = None
        self.spoiler = None
        self.graph_viz = None

    def generate_seed(self, configs, seed=None, cancellation=None) -> SeedData:
        if isinstance(configs, Config):
            configs = [configs]
        configs = self.__validate_configs__(configs)
        primary_config = configs[0]

        seed_number = parse_seed(seed if seed not in (None, "") else primary_config.seed)
        primary_config.seed = str(seed_number)
        self.__configure_console__(primary_config.printlevel)
        self.logger.info("Seed: " + str(seed_number) + " | Race: " + str(primary_config.race) +
                         " | World Count: " + str(len(configs)))

        worlds, playthrough = self.__generate_worlds__(configs, primary_config, seed_number, cancellation)

        hint_service = GameHintService(HINT_LINES, self.logger)
        important_locations = hint_service.get_important_locations(worlds)
        world_generation_data = []
        for world in worlds:
            dungeon_importance = hint_service.get_dungeon_importance(world, worlds, important_locations)
            hints = hint_service.get_in_game_hints(world, worlds, playthrough, seed_number, important_locations)
            world_generation_data.append(WorldGenerationData(world, hints, dungeon_importance))

        self.seed_data = SeedData(
            guid=uuid.uuid4().hex,
            seed=seed if isinstance(seed, str) and seed else primary_config.seed,
            game=GAME_NAME,
            mode=primary_config.game_mode.name.lower(),
            world_generation_data=world_generation_data,
            playthrough=Playthrough(worlds, [], primary_config) if primary_config.race else playthrough,
            configs=configs,
            primary_config=primary_config,
        )
        self.spoiler = self.__build_spoiler__(self.seed_data)
        self.graph_viz = None
        return self.seed_data

    def generate_spoiler(self) -> str:
        return json.dumps(self.spoiler)

    def generate_graph_visualization(self) -> graphviz.Digraph:
        if self.graph_viz is None:
            self.graph_viz = self.__build_graph__(self.seed_data)
        return self.graph_viz

    def __validate_configs__(self, configs):
        if not configs:
            raise InvalidConfigurationError("At least one player is required")
        configs = sorted(configs, key=lambda config: config.id)
        for config in configs:
            config.validate()

        ids = [config.id for config in configs]
        if len(set(ids)) != len(ids):
            raise InvalidConfigurationError("Player ids must be unique")
        if len(configs) > 1 and any(not config.multiworld for config in configs):
            raise InvalidConfigurationError("More than one player requires multiworld mode")
        return configs

    def __configure_console__(self, printlevel):
        if printlevel == PrintLevel.SILENT or printlevel not in PRINT_LEVELS:
            return
        if not any(getattr(handler, "smz3_console", False) for handler in self.logger.handlers):
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter('%(message)s'))
            handler.smz3_console = True
            self.logger.addHandler(handler)
        for handler in self.logger.handlers:
            if getattr(handler, "smz3_console", False):
                handler.setLevel(PRINT_LEVELS[printlevel])
        if self.logger.getEffectiveLevel() > PRINT_LEVELS[printlevel]:
            self.logger.setLevel(PRINT_LEVELS[printlevel])

    def __generate_worlds__(self, configs, primary_config, seed_number, cancellation):
        last_error = None
        for seed_adj in range(self.max_retries):
            if seed_adj > 0:
                self.logger.info("Trying again... attempt " + str(seed_adj + 1))

            rnd = random.Random(seed_number + seed_adj)
            if primary_config.race:
                for i in range(rnd.randint(100, 1000)):
                    _ = rnd.randint(0, 10000)

            worlds = [self.world_class(config, config.player_name, config.id, config.player_guid) for config in configs]
            try:
                Filler(worlds, primary_config, rnd, self.logger, cancellation).fill()
                playthrough = Playthrough.generate(worlds, primary_config, cancellation)
            except (FillError, PlaythroughError) as e:
                self.logger.warning("Attempt " + str(seed_adj + 1) + " failed: " + str(e))
                last_error = e
                continue
            return worlds, playthrough

        self.logger.error("ERROR: Max number of seed adjustments exceeded")
        raise RandomizerGenerationException("Unable to generate a seed after " + str(self.max_retries) + " attempts") \
            from last_error

    def __build_spoiler__(self, seed_data):
        primary_config = seed_data.primary_config

        spoiler = dict()
        spoiler["version"] = VERSION
        spoiler["seed"] = str(seed_data.seed)
        spoiler["guid"] = seed_data.guid
        spoiler["date"] = str(datetime.now(timezone.utc))
        spoiler["mode"] = seed_data.mode
        spoiler["goal"] = primary_config.goal.name
        spoiler["logic"] = primary_config.logic.name
        spoiler["keysanity"] = primary_config.keysanity_mode.name
        spoiler["race"] = primary_config.race

        players = []
        for data in seed_data.world_generation_data:
            world = data.world
            player = dict()
            player["player"] = world.player
            player["id"] = world.id
            player["rewards"] = {region.name: region.reward.name for region in world.reward_regions}
            player["medallions"] = {region.name: region.medallion.value for region in world.medallion_regions}
            player["dungeon_importance"] = {name: usefulness.name for name, usefulness in data.dungeon_importance.items()}
            player["hints"] = data.hints

            items = []
            for location in world.locations:
                item_name = location.item.name
                if seed_data.mode == GameMode.MULTIWORLD.name.lower():
                    item_name += " (" + location.item.world.player + ")"
                items.append({"location": location.name, "name": item_name})
            player["items"] = items
            players.append(player)
        spoiler["players"] = players

        if not primary_config.race:
            spoiler["playthrough"] = seed_data.playthrough.to_list()

        return spoiler

    def __build_graph__(self, seed_data):
        graph = graphviz.Digraph(graph_attr=[('concentrate', 'true'),
                                             ('rankdir', 'TB')], strict=True)
        graph.attr('node', shape='box')
        if seed_data is None or seed_data.playthrough is None:
            return graph

        playthrough = seed_data.playthrough
        previous = None
        for sphere_id, sphere in enumerate(playthrough.spheres):
            sphere_node = f"sphere_{sphere_id}"
            with graph.subgraph(name=f"cluster_{sphere_id}") as c:
                c.attr(label=f"Sphere {sphere_id + 1}", color="black")
                c.node(sphere_node, f"Sphere {sphere_id + 1}")
                for location in sphere.locations:
                    if not location.item.progression:
                        continue
                    node_name = f"location_{location.world.id}_{location.id}"
                    c.node(node_name, playthrough.location_name(location) + "\n" + playthrough.item_name(location.item))
                    c.edge(sphere_node, node_name)
            if previous is not None:
                graph.edge(previous, sphere_node)
            previous = sphere_node

        return graph
