import uuid

from .enums import *
from ..errors import InvalidConfigurationError


class PlandoConfig:
    """Fixed placements requested by the player, keyed by location/region name."""

    def __init__(self, items: dict = None, rewards: dict = None, medallions: dict = None, file_name: str = ""):
        self.items = dict(items or {})
        self.rewards = dict(rewards or {})
        self.medallions = dict(medallions or {})
        self.file_name = file_name

    def is_empty(self):
        return not self.items and not self.rewards and not self.medallions


class Config:
    def __init__(self,
                 seed: str = "",
                 game_mode: GameMode = GameMode.NORMAL,
                 logic: Logic = Logic.NORMAL,
                 keysanity_mode: KeysanityMode = KeysanityMode.NONE,
                 goal: Goal = Goal.DEFEAT_BOTH,
                 ganon_crystal_count: int = 7,
                 gt_crystal_count: int = 7,
                 open_pyramid: bool = False,
                 misery_mire_medallion: Medallion = None,
                 turtle_rock_medallion: Medallion = None,
                 race: bool = False,
                 player_name: str = "Player",
                 id: int = 0,
                 player_guid: str = None,
                 plando: PlandoConfig = None,
                 printlevel: PrintLevel = PrintLevel.SILENT
                 ):
        self.seed = seed
        self.game_mode = game_mode
        self.logic = logic
        self.keysanity_mode = keysanity_mode
        self.goal = goal
        self.ganon_crystal_count = ganon_crystal_count
        self.gt_crystal_count = gt_crystal_count
        self.open_pyramid = open_pyramid
        self.misery_mire_medallion = misery_mire_medallion
        self.turtle_rock_medallion = turtle_rock_medallion
        self.race = race
        self.player_name = player_name
        self.id = id
        self.player_guid = player_guid or uuid.uuid4().hex
        self.plando = plando
        self.printlevel = printlevel

    @property
    def zelda_keysanity(self):
        return self.keysanity_mode in (KeysanityMode.ZELDA, KeysanityMode.BOTH)

    @property
    def metroid_keysanity(self):
        return self.keysanity_mode in (KeysanityMode.METROID, KeysanityMode.BOTH)

    @property
    def multiworld(self):
        return self.game_mode == GameMode.MULTIWORLD

    # Checked before any item is placed; a failure here is never retried
    def validate(self):
        enum_fields = [
            ("game_mode", GameMode),
            ("logic", Logic),
            ("keysanity_mode", KeysanityMode),
            ("goal", Goal),
            ("printlevel", PrintLevel),
        ]
        for field, enum_type in enum_fields:
            if not isinstance(getattr(self, field), enum_type):
                raise InvalidConfigurationError("Invalid " + field + ": " + repr(getattr(self, field)))

        for field in ["ganon_crystal_count", "gt_crystal_count"]:
            value = getattr(self, field)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0 or value > 7:
                raise InvalidConfigurationError(field + " must be between 0 and 7, got " + repr(value))

        for field in ["misery_mire_medallion", "turtle_rock_medallion"]:
            value = getattr(self, field)
            if value is not None and not isinstance(value, Medallion):
                raise InvalidConfigurationError("Invalid " + field + ": " + repr(value))

        if not isinstance(self.id, int) or self.id < 0:
            raise InvalidConfigurationError("Player id must be a non-negative integer")

        if not self.player_name:
            raise InvalidConfigurationError("Player name can't be empty")

        if self.plando is not None and not isinstance(self.plando, PlandoConfig):
            raise InvalidConfigurationError("Plando settings must be a PlandoConfig")

        if self.plando is not None and self.race:
            raise InvalidConfigurationError("Can't have plando placements in a race seed")

        return True
