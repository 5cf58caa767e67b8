import json
import numbers

from smz3_randomizer.models.enums import *

from ..exceptions.exceptions import InvalidRequestParameters


class GenerateSeedRequest(object):
    schema = {
        'type': 'object',
        'properties': {
            'seed': {'type': ['number', 'string']},
            'logic': {'type': 'number'},
            'keysanity': {'type': 'number'},
            'goal': {'type': 'number'},
            'ganonCrystals': {'type': 'number'},
            'gtCrystals': {'type': 'number'},
            'openPyramid': {'type': 'boolean'},
            'race': {'type': 'boolean'},
            'miseryMireMedallion': {'type': 'string'},
            'turtleRockMedallion': {'type': 'string'},
            'players': {
                'type': 'array',
                'items': {'type': 'string'}
            },
        },
        'required': []
    }

    def __init__(self, payload):
        self._validateSeed(payload)
        self._validateLogic(payload)
        self._validateKeysanity(payload)
        self._validateGoal(payload)
        self._validateCrystals(payload)
        self._validateMedallions(payload)
        self._validatePlayers(payload)
        self._validateSwitches(payload)

#region Validation Methods
    def _validateSeed(self, payload):
        seed = payload.get("seed")

        if isinstance(seed, numbers.Number) and seed >= 0:
            self.seed = int(seed)
        elif isinstance(seed, str):
            self.seed = seed.strip()
        else:
            self.seed = ""

    def _validateLogic(self, payload):
        try:
            self.logic = Logic(payload.get("logic", Logic.NORMAL.value))
        except ValueError:
            self.logic = Logic.NORMAL

    def _validateKeysanity(self, payload):
        try:
            self.keysanity_mode = KeysanityMode(payload.get("keysanity", KeysanityMode.NONE.value))
        except ValueError:
            self.keysanity_mode = KeysanityMode.NONE

    def _validateGoal(self, payload):
        try:
            self.goal = Goal(payload.get("goal", Goal.DEFEAT_BOTH.value))
        except ValueError:
            self.goal = Goal.DEFEAT_BOTH

    def _validateCrystals(self, payload):
        def getCount(name):
            count = payload.get(name)
            if count is None:
                return 7
            if isinstance(count, bool) or int(count) != count or count < 0 or count > 7:
                raise InvalidRequestParameters(name + " must be a whole number between 0 and 7")
            return int(count)

        self.ganon_crystal_count = getCount("ganonCrystals")
        self.gt_crystal_count = getCount("gtCrystals")

    def _validateMedallions(self, payload):
        def getMedallion(name):
            medallion = payload.get(name)
            if medallion is None or medallion == "random":
                return None
            try:
                return Medallion[medallion.upper()]
            except KeyError:
                raise InvalidRequestParameters("Unknown medallion for " + name + ": " + medallion)

        self.misery_mire_medallion = getMedallion("miseryMireMedallion")
        self.turtle_rock_medallion = getMedallion("turtleRockMedallion")

    def _validatePlayers(self, payload):
        players = payload.get("players")

        if not players:
            self.players = ["Player"]
        else:
            self.players = [player.strip() for player in players]

        if any(not player for player in self.players):
            raise InvalidRequestParameters("Player names can't be empty")
        if len(set(self.players)) != len(self.players):
            raise InvalidRequestParameters("Player names must be unique")

    def _validateSwitches(self, payload):
        def getSwitch(switch):
            if switch is None:
                return False
            return switch

        self.open_pyramid = getSwitch(payload.get("openPyramid"))
        self.race = getSwitch(payload.get("race"))

#endregion

    def to_json(self):
        return json.dumps({
            "seed": self.seed,
            "logic": self.logic.value,
            "keysanity": self.keysanity_mode.value,
            "goal": self.goal.value,
            "ganonCrystals": self.ganon_crystal_count,
            "gtCrystals": self.gt_crystal_count,
            "openPyramid": self.open_pyramid,
            "race": self.race,
            "players": self.players,
        })
