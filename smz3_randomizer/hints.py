import logging
import random

from .items import ItemType, ItemCategory
from .models.enums import *
from .playthrough import Playthrough

HINT_LINES = {
    "location_has_item": "{0} holds {1}.",
    "location_is_mandatory": "{0} is on the way of the hero.",
    "location_has_useful_item": "{0} holds something useful.",
    "location_has_sword": "{0} holds a sword.",
    "location_is_empty": "{0} is not worth your time.",
    "dungeon_medallion": "{0} needs {1} to open.",
}

# The first few of these in the playthrough are not counted as important on their own
AMMO_ITEMS = (ItemType.MISSILE, ItemType.SUPER, ItemType.POWER_BOMB, ItemType.ETANK, ItemType.RESERVE_TANK)
ALWAYS_IMPORTANT_ITEMS = (ItemType.SUPER, ItemType.POWER_BOMB, ItemType.PROGRESSIVE_SWORD, ItemType.SILVER_ARROWS)
PROGRESSION_HINT_COUNT = 8


class GameHintService:
    """Classifies how much a group of locations matters to beating the seed, and words hints about it."""

    def __init__(self, hint_lines=None, logger=None):
        self.hint_lines = dict(HINT_LINES if hint_lines is None else hint_lines)
        self.logger = logger or logging.getLogger("SMZ3")

    def get_important_locations(self, worlds):
        """Locations whose contents can matter to any goal: boss drops, keys and progression."""
        spheres, _ = Playthrough.generate_spheres([location for world in worlds for location in world.locations], worlds)
        ammo = []
        for sphere in spheres:
            for location in sphere.locations:
                if location.item.type not in AMMO_ITEMS:
                    continue
                same = [other for other in ammo if other.item.type == location.item.type and other.item.world is location.item.world]
                if len(same) < 3:
                    ammo.append(location)

        important = []
        for world in worlds:
            boss_locations = set(world.boss_location_names.values())
            for location in world.locations:
                item = location.item
                if location.name in boss_locations or item.progression or \
                        item.is_key or item.is_big_key or item.is_keycard or \
                        item.type in ALWAYS_IMPORTANT_ITEMS:
                    important.append(location)

        seen = set(important)
        important += [location for location in ammo if location not in seen]
        return important

    def check_if_locations_are_important(self, worlds, important_locations, locations):
        """Replays the seed without the given locations to see what would be lost.

        MANDATORY when some world can no longer reach its goal, SWORD when the locations hold a
        progressive sword, NICE_TO_HAVE when they hold anything useful, USELESS otherwise.
        """
        excluded = set(locations)
        remaining = [location for location in important_locations if location not in excluded]
        _, progressions = Playthrough.generate_spheres(remaining, worlds)

        for world in worlds:
            if not world.can_beat_game(progressions[world.id]):
                return LocationUsefulness.MANDATORY

        if any(location.item.is_(ItemType.PROGRESSIVE_SWORD) for location in locations):
            return LocationUsefulness.SWORD

        useful = [location.item for location in locations
                  if location.item.progression and not location.item.is_junk or
                  location.item.is_in_category(ItemCategory.NICE)]
        return LocationUsefulness.NICE_TO_HAVE if useful else LocationUsefulness.USELESS

    def get_dungeon_importance(self, world, worlds, important_locations=None):
        if important_locations is None:
            important_locations = self.get_important_locations(worlds)
        importance = {}
        for name in world.hint_dungeons:
            if world.has_region(name):
                region = world.get_region(name)
                importance[name] = self.check_if_locations_are_important(worlds, important_locations, region.locations)
        return importance

    def get_in_game_hints(self, world, worlds, playthrough, seed, important_locations=None):
        rnd = random.Random(seed)
        late_spheres = playthrough.spheres[len(playthrough.spheres) - int(len(playthrough.spheres) * 0.5):]
        important = important_locations if important_locations is not None else self.get_important_locations(worlds)

        hints = []
        hints += self.get_progression_item_hints(world, late_spheres, rnd)
        hints += self.get_dungeon_hints(world, worlds, important)
        hints += self.get_location_hints(world)
        hints += self.get_medallion_hints(world)

        unique = []
        for hint in hints:
            if hint not in unique:
                unique.append(hint)
        for hint in unique:
            self.logger.debug(hint)
        rnd.shuffle(unique)
        return unique

    def get_progression_item_hints(self, world, spheres, rnd, count=PROGRESSION_HINT_COUNT):
        locations = [location for sphere in spheres for location in sphere.locations
                     if location.item.world is world and location.item.progression and
                     not location.item.is_junk]
        rnd.shuffle(locations)
        hints = [self.format("location_has_item", self.location_name(world, location), self.item_name(world, location.item))
                 for location in locations[:count]]
        self.logger.info("Generated " + str(len(hints)) + " progression item hints")
        return hints

    def get_dungeon_hints(self, world, worlds, important):
        hints = []
        for name, usefulness in self.get_dungeon_importance(world, worlds, important).items():
            hints.append(self.usefulness_hint(usefulness, name + self.world_suffix(world, world)))
        self.logger.info("Generated " + str(len(hints)) + " dungeon hints")
        return hints

    def get_location_hints(self, world):
        hints = []
        for name in world.important_location_names:
            location = world.get_location(name)
            hints.append(self.format("location_has_item", self.location_name(world, location), self.item_name(world, location.item)))
        self.logger.info("Generated " + str(len(hints)) + " location hints")
        return hints

    def get_medallion_hints(self, world):
        return [self.format("dungeon_medallion", region.name, region.medallion.value)
                for region in world.medallion_regions if region.medallion is not None]

    def usefulness_hint(self, usefulness, name):
        if usefulness == LocationUsefulness.MANDATORY:
            return self.format("location_is_mandatory", name)
        elif usefulness == LocationUsefulness.NICE_TO_HAVE:
            return self.format("location_has_useful_item", name)
        elif usefulness == LocationUsefulness.SWORD:
            return self.format("location_has_sword", name)
        return self.format("location_is_empty", name)

    def format(self, line, *args):
        return self.hint_lines[line].format(*args)

    def location_name(self, world, location):
        return location.name + self.world_suffix(world, location.world)

    def item_name(self, world, item):
        if not world.config.multiworld:
            return item.name
        return item.name + (" belonging to you" if item.world is world else " belonging to " + item.world.player)

    def world_suffix(self, world, location_world):
        if not world.config.multiworld:
            return ""
        return " in your world" if location_world is world else " in " + location_world.player + "'s world"
