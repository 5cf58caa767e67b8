import logging

from .errors import FillError, GenerationCancelled, InvalidConfigurationError
from .items import ItemType, ItemCategory
from .models.enums import *
from .progression import Progression

# Dungeon items go in this order inside each dungeon: the big key has the fewest legal spots
DUNGEON_ITEM_ORDER = (ItemCategory.BIG_KEY, ItemCategory.SMALL_KEY, ItemCategory.MAP, ItemCategory.COMPASS)

# Settings that pin a medallion, by region name
CONFIGURED_MEDALLIONS = {
    "Misery Mire": "misery_mire_medallion",
    "Turtle Rock": "turtle_rock_medallion",
}


def credit_rewards(regions, progressions):
    """Hands out the reward of every completable region until nothing changes."""
    credited = False
    progressed = True
    while progressed:
        progressed = False
        for region in regions:
            items = progressions[region.world.id]
            if not items.has_completed(region) and region.can_complete(items):
                items.add_reward(region.reward, region)
                progressed = True
                credited = True
    return credited


def assumed_progression(worlds, assumed_items, locations=None):
    """Builds the Progression of every world as if all of assumed_items were already owned.

    Filled locations reachable under that assumption are collected as well, and so are the
    rewards of every region that can be completed, until a fixpoint is reached. Each item is
    credited to the world that owns it; each location is judged with its own world's state.
    """
    progressions = {world.id: Progression() for world in worlds}
    for item in assumed_items:
        progressions[item.world.id].add(item)

    if locations is None:
        locations = [location for world in worlds for location in world.locations]
    pending = [location for location in locations if location.item is not None]
    reward_regions = [region for world in worlds for region in world.reward_regions]

    progressed = True
    while progressed:
        progressed = credit_rewards(reward_regions, progressions)
        remaining = []
        for location in pending:
            if location.available(progressions[location.world.id]):
                progressions[location.item.world.id].add(location.item)
                progressed = True
            else:
                remaining.append(location)
        pending = remaining

    return progressions


class Filler:
    """Places every world's item pool, in tiers, so that the seed stays completable."""

    def __init__(self, worlds, config, random, logger=None, cancellation=None):
        self.worlds = worlds
        self.config = config
        self.random = random
        self.logger = logger or logging.getLogger("SMZ3")
        self.cancellation = cancellation
        self.locations = [location for world in worlds for location in world.locations]
        self.pools = {}

    def check_cancelled(self):
        if self.cancellation is not None and self.cancellation.is_set():
            raise GenerationCancelled("Seed generation was cancelled")

    def fill(self):
        for world in self.worlds:
            self.pools[world.id] = world.create_items()

        self.apply_plando()
        for world in self.worlds:
            self.assign_rewards(world)
            self.assign_medallions(world)

        dungeon = [item for world in self.worlds for item in self.pools[world.id].dungeon]
        progression = [item for world in self.worlds for item in self.pools[world.id].progression]
        nice = [item for world in self.worlds for item in self.pools[world.id].nice]
        junk = [item for world in self.worlds for item in self.pools[world.id].junk]

        self.random.shuffle(dungeon)
        self.random.shuffle(progression)

        self.logger.info("Placing " + str(len(dungeon)) + " dungeon items")
        self.fill_dungeon_items(dungeon, progression)

        self.logger.info("Placing " + str(len(progression)) + " progression items")
        self.assumed_fill(progression, [], self.locations)

        self.logger.info("Placing " + str(len(nice)) + " nice items")
        self.fast_fill(nice)

        self.logger.info("Placing " + str(len(junk)) + " junk items")
        self.fast_fill(junk)

        self.logger.info("All " + str(len(self.locations)) + " locations filled")
        return self.worlds

    ##########################################################################
    #                             Fixed placements
    ##########################################################################
    def apply_plando(self):
        for world in self.worlds:
            plando = world.config.plando
            if plando is None or plando.is_empty():
                continue
            self.logger.info("Applying plando placements for " + world.player)
            pool = self.pools[world.id]
            for location_name, item_name in plando.items.items():
                if not world.has_location(location_name):
                    raise InvalidConfigurationError("Unknown plando location: " + location_name)
                try:
                    item_type = ItemType.from_name(item_name)
                except ValueError as e:
                    raise InvalidConfigurationError(str(e)) from e

                location = world.get_location(location_name)
                if location.item is not None:
                    raise InvalidConfigurationError("Plando places two items at " + location_name)
                item = self.take_from_pool(pool, item_type)
                if item is None:
                    raise InvalidConfigurationError("No " + item_type.value + " left in the pool for " + location_name)
                if not location.can_fill(item, Progression(), check_logic=False):
                    raise InvalidConfigurationError(item.name + " can't be placed at " + location_name)

                location.item = item
                self.logger.debug("Plando: " + item.name + " at " + location_name)

    def take_from_pool(self, pool, item_type):
        for items in [pool.progression, pool.dungeon, pool.nice, pool.junk]:
            for item in items:
                if item.type == item_type:
                    items.remove(item)
                    return item
        return None

    def assign_rewards(self, world):
        pool = world.reward_pool()
        regions = world.shuffled_reward_regions
        fixed = {}
        plando = world.config.plando
        if plando is not None:
            for region_name, reward_name in plando.rewards.items():
                if not world.has_region(region_name) or world.get_region(region_name) not in regions:
                    raise InvalidConfigurationError("Region " + region_name + " can't hold a shuffled reward")
                try:
                    reward = Reward[reward_name.upper()] if isinstance(reward_name, str) else reward_name
                    pool.remove(reward)
                except (KeyError, ValueError) as e:
                    raise InvalidConfigurationError("Reward " + str(reward_name) + " isn't available for " + region_name) from e
                fixed[region_name] = reward

        open_regions = [region for region in regions if region.name not in fixed]
        if len(pool) != len(open_regions):
            raise InvalidConfigurationError(str(len(pool)) + " rewards for " + str(len(open_regions)) + " reward regions")

        self.random.shuffle(pool)
        for region in regions:
            region.reward = fixed[region.name] if region.name in fixed else pool.pop()
            self.logger.debug(region.name + " rewards " + region.reward.name)

    def assign_medallions(self, world):
        plando = world.config.plando
        for region in world.medallion_regions:
            medallion = None
            if plando is not None and region.name in plando.medallions:
                try:
                    medallion = Medallion[plando.medallions[region.name].upper()]
                except (KeyError, AttributeError) as e:
                    raise InvalidConfigurationError("Invalid medallion for " + region.name) from e
            elif region.name in CONFIGURED_MEDALLIONS:
                medallion = getattr(world.config, CONFIGURED_MEDALLIONS[region.name])
            if medallion is None:
                medallion = self.random.choice(list(Medallion))
            region.medallion = ItemType[medallion.name]
            self.logger.debug(region.name + " requires " + region.medallion.value)

    ##########################################################################
    #                              Item placement
    ##########################################################################
    def fill_dungeon_items(self, dungeon, progression):
        for world in self.worlds:
            for region in world.regions:
                if not region.region_items:
                    continue
                for category in DUNGEON_ITEM_ORDER:
                    items = [item for item in dungeon
                             if item.world is world and item.type in region.region_items and item.category & category]
                    for item in items:
                        dungeon.remove(item)
                        self.place(item, dungeon + progression, region.locations)

    def assumed_fill(self, items, base_items, locations):
        while items:
            item = items.pop(0)
            self.place(item, items + base_items, locations)

    def place(self, item, assumed_items, candidates):
        self.check_cancelled()
        progressions = assumed_progression(self.worlds, assumed_items, self.locations)
        eligible = [location for location in candidates
                    if location.item is None and location.can_fill(item, progressions[location.world.id])]
        if not eligible:
            self.logger.warning("No location left for " + repr(item))
            raise FillError("Unable to place " + item.name + " for " + item.world.player)

        location = self.random.choice(eligible)
        location.item = item
        self.logger.debug("Placed " + repr(item) + " at " + location.name + " (" + location.world.player + ")")
        return location

    # Ignores reachability; only the hard rules of each location apply
    def fast_fill(self, items):
        empty = [location for location in self.locations if location.item is None]
        self.random.shuffle(empty)
        nothing = Progression()
        for item in items:
            self.check_cancelled()
            location = next((location for location in empty if location.can_fill(item, nothing, check_logic=False)), None)
            if location is None:
                self.logger.warning("No location left for " + repr(item))
                raise FillError("Unable to place " + item.name + " for " + item.world.player)
            empty.remove(location)
            location.item = item
            self.logger.debug("Placed " + repr(item) + " at " + location.name + " (" + location.world.player + ")")
