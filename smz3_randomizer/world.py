import uuid

from .items import create_item_pool
from .models.enums import *


def always(items):
    return True


def allow_any(item, items):
    return True


class Location:
    """A single item slot.

    `access` takes the owning world's Progression. `allow` may veto an item outright;
    `always_allow` accepts an item even when `access` fails, which lets a key sit behind
    the very lock it opens.
    """

    def __init__(self, region, id, name, access=None, location_type=LocationType.REGULAR, allow=None, always_allow=None):
        self.region = region
        self.id = id
        self.name = name
        self.type = location_type
        self.access = access or always
        self.allow = allow or allow_any
        self.always_allow = always_allow
        self.item = None

    @property
    def world(self):
        return self.region.world

    @property
    def has_always_allow(self):
        return self.always_allow is not None

    def is_filled(self):
        return self.item is not None

    def item_is(self, item_type, world=None):
        return self.item is not None and self.item.is_(item_type, world)

    def available(self, items):
        return self.region.can_enter(items) and self.access(items)

    # Checks whether item could live here given the items the player will hold.
    # The item is placed for the duration of the check: some predicates look at
    # their own contents.
    def can_fill(self, item, items, check_logic=True):
        old_item = self.item
        self.item = item
        try:
            if self.has_always_allow and check_logic and self.always_allow(item, items):
                return True
            if not self.region.can_fill(item) or not self.allow(item, items):
                return False
            return not check_logic or self.available(items)
        finally:
            self.item = old_item

    def __repr__(self):
        return "<Location " + self.name + " (" + self.world.player + ")>"


class Region:
    """A named group of locations sharing an entry requirement.

    Capabilities (reward, medallion) are declared by subclasses and fixed at construction.
    """

    name = ""
    area = ""
    capabilities = frozenset()
    default_reward = Reward.NONE
    shuffle_reward = False
    boss_location = None

    def __init__(self, world, config):
        self.world = world
        self.config = config
        self.region_items = []
        self.locations = []
        self.reward = self.default_reward if self.has_reward else None
        self.medallion = None
        self.area = self.area or self.name

    @property
    def has_reward(self):
        return RegionCapability.REWARD in self.capabilities

    @property
    def has_medallion(self):
        return RegionCapability.MEDALLION in self.capabilities

    @property
    def keysanity(self):
        return self.config.zelda_keysanity

    def region(self, name):
        return self.world.get_region(name)

    def get_location(self, name):
        for location in self.locations:
            if location.name == name:
                return location
        raise KeyError(name)

    def is_region_item(self, item):
        return item.world is self.world and item.type in self.region_items

    # Dungeon items stay home unless keysanity is on
    def can_fill(self, item):
        if not item.is_dungeon_item or self.keysanity:
            return True
        return self.is_region_item(item)

    def can_enter(self, items):
        if self.has_medallion and (self.medallion is None or not items.has(self.medallion)):
            return False
        return items.memo(self, lambda: self.entry(items))

    def entry(self, items):
        return True

    def can_complete(self, items):
        if self.boss_location is None:
            return False
        return self.get_location(self.boss_location).available(items)

    def __repr__(self):
        return "<Region " + self.name + ">"


class World:
    """One player's region/location graph plus the settings it was built with."""

    important_location_names = []
    boss_location_names = {}
    hint_location_names = []
    hint_dungeons = []

    def __init__(self, config, player="Player", id=0, guid=None):
        self.config = config
        self.player = player
        self.id = id
        self.guid = guid or uuid.uuid4().hex
        self.regions = self.create_regions()
        self._regions_by_name = {}
        self._locations_by_name = {}
        for region in self.regions:
            if region.name in self._regions_by_name:
                raise ValueError("Duplicate region " + region.name)
            self._regions_by_name[region.name] = region
            for location in region.locations:
                if location.name in self._locations_by_name:
                    raise ValueError("Duplicate location " + location.name)
                self._locations_by_name[location.name] = location
        self.locations = [location for region in self.regions for location in region.locations]

    def create_regions(self):
        return []

    def create_items(self):
        return create_item_pool(self)

    # The rewards shuffled over the reward regions flagged for shuffling
    def reward_pool(self):
        return []

    def can_beat_game(self, items):
        return all(location.available(items) for location in self.locations)

    def get_region(self, name):
        return self._regions_by_name[name]

    def get_location(self, name):
        return self._locations_by_name[name]

    def has_location(self, name):
        return name in self._locations_by_name

    def has_region(self, name):
        return name in self._regions_by_name

    @property
    def reward_regions(self):
        return [region for region in self.regions if region.has_reward]

    @property
    def shuffled_reward_regions(self):
        return [region for region in self.regions if region.has_reward and region.shuffle_reward]

    @property
    def medallion_regions(self):
        return [region for region in self.regions if region.has_medallion]

    def empty_locations(self):
        return [location for location in self.locations if location.item is None]

    def __repr__(self):
        return "<World " + self.player + " #" + str(self.id) + ">"
