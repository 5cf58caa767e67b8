from .errors import GenerationCancelled, PlaythroughError
from .fill import credit_rewards
from .progression import Progression

MAX_SPHERES = 250


class Sphere:
    """Locations that open up together, with the Progression of every world that opened them."""

    def __init__(self, locations, progressions):
        self.locations = list(locations)
        self.progressions = progressions

    @property
    def items(self):
        return [location.item for location in self.locations]

    def __len__(self):
        return len(self.locations)


class Playthrough:
    def __init__(self, worlds, spheres, config=None):
        self.worlds = worlds
        self.spheres = spheres
        self.config = config

    @staticmethod
    def generate_spheres(locations, worlds, cancellation=None):
        """Walks the given locations from an empty inventory, one wave of reachable locations at a time.

        Returns the spheres found and the final Progression of every world. Locations that never
        become reachable are simply left out; callers decide whether that is an error.
        """
        progressions = {world.id: Progression() for world in worlds}
        reward_regions = [region for world in worlds for region in world.reward_regions]
        unresolved = [location for location in locations if location.item is not None]
        spheres = []

        while unresolved and len(spheres) < MAX_SPHERES:
            if cancellation is not None and cancellation.is_set():
                raise GenerationCancelled("Seed generation was cancelled")

            credit_rewards(reward_regions, progressions)
            available = [location for location in unresolved if location.available(progressions[location.world.id])]
            if not available:
                break

            snapshot = {world_id: items.copy() for world_id, items in progressions.items()}
            spheres.append(Sphere(available, snapshot))
            for location in available:
                progressions[location.item.world.id].add(location.item)

            found = set(available)
            unresolved = [location for location in unresolved if location not in found]

        credit_rewards(reward_regions, progressions)
        return spheres, progressions

    @classmethod
    def generate(cls, worlds, config=None, cancellation=None):
        locations = [location for world in worlds for location in world.locations]
        empty = [location for location in locations if location.item is None]
        if empty:
            raise PlaythroughError(str(len(empty)) + " locations were left empty")

        spheres, progressions = cls.generate_spheres(locations, worlds, cancellation)

        resolved = sum(len(sphere) for sphere in spheres)
        if resolved < len(locations):
            found = set(location for sphere in spheres for location in sphere.locations)
            unreachable = [location.name for location in locations if location not in found]
            raise PlaythroughError("Unreachable locations after " + str(len(spheres)) + " spheres: " +
                                   ", ".join(unreachable[:10]))

        for world in worlds:
            if not world.can_beat_game(progressions[world.id]):
                raise PlaythroughError(world.player + " can't reach the goal")

        return cls(worlds, spheres, config)

    def location_name(self, location):
        if len(self.worlds) > 1:
            return location.name + " (" + location.world.player + ")"
        return location.name

    def item_name(self, item):
        if len(self.worlds) > 1:
            return item.name + " (" + item.world.player + ")"
        return item.name

    def to_list(self):
        return [{self.location_name(location): self.item_name(location.item) for location in sphere.locations}
                for sphere in self.spheres]

    def __len__(self):
        return len(self.spheres)
