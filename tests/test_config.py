from unittest import TestCase

from smz3_randomizer.errors import InvalidConfigurationError
from smz3_randomizer.models.config import Config, PlandoConfig
from smz3_randomizer.models.enums import *


class ConfigValidationTests(TestCase):
    def test_DefaultConfigIsValid(self):
        self.assertTrue(Config().validate())

    def test_KeysanityFlags(self):
        self.assertFalse(Config().zelda_keysanity)
        self.assertTrue(Config(keysanity_mode=KeysanityMode.ZELDA).zelda_keysanity)
        self.assertFalse(Config(keysanity_mode=KeysanityMode.ZELDA).metroid_keysanity)
        both = Config(keysanity_mode=KeysanityMode.BOTH)
        self.assertTrue(both.zelda_keysanity and both.metroid_keysanity)

    def test_CrystalCountOutOfRange(self):
        for count in [-1, 8, True, "7"]:
            with self.assertRaises(InvalidConfigurationError):
                Config(ganon_crystal_count=count).validate()
            with self.assertRaises(InvalidConfigurationError):
                Config(gt_crystal_count=count).validate()

    def test_InvalidEnums(self):
        with self.assertRaises(InvalidConfigurationError):
            Config(logic="hard").validate()
        with self.assertRaises(InvalidConfigurationError):
            Config(misery_mire_medallion="Ether").validate()

    def test_PlayerFields(self):
        with self.assertRaises(InvalidConfigurationError):
            Config(player_name="").validate()
        with self.assertRaises(InvalidConfigurationError):
            Config(id=-1).validate()

    def test_PlandoRace(self):
        self.assertTrue(Config(plando=PlandoConfig(items={"Sick Kid": "Hookshot"})).validate())
        with self.assertRaises(InvalidConfigurationError):
            Config(plando=PlandoConfig(items={"Sick Kid": "Hookshot"}), race=True).validate()
