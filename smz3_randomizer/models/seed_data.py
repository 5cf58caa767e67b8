class WorldGenerationData:
    def __init__(self, world, hints=None, dungeon_importance=None):
        self.world = world
        self.hints = list(hints or [])
        self.dungeon_importance = dict(dungeon_importance or {})

    @property
    def locations(self):
        return {location.name: location.item for location in self.world.locations}

    @property
    def rewards(self):
        return {region.name: region.reward for region in self.world.reward_regions}

    @property
    def medallions(self):
        return {region.name: region.medallion for region in self.world.medallion_regions}


class SeedData:
    def __init__(self, guid: str, seed: str, game: str, mode: str, world_generation_data: list = None,
                 playthrough=None, configs: list = None, primary_config=None):
        self.guid = guid
        self.seed = seed
        self.game = game
        self.mode = mode
        self.world_generation_data = list(world_generation_data or [])
        self.playthrough = playthrough
        self.configs = list(configs or [])
        self.primary_config = primary_config

    @property
    def worlds(self):
        return [data.world for data in self.world_generation_data]
