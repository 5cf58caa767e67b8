from unittest import TestCase

from smz3_randomizer.models.config import Config
from smz3_randomizer.models.enums import *
from smz3_randomizer.randomizer import generate_filename, parse_seed, VERSION, MAX_SEED_NUMBER


class FilenameGenerationTests(TestCase):
    def test_GenerateDefaultFilename(self):
        EXPECTED = "SMZ3_v" + VERSION + "_N_DB7_12345.json"

        filename = generate_filename(Config(), 12345)
        self.assertEqual(filename, EXPECTED)

    def test_GenerateFilenameWithSwitches(self):
        EXPECTED = "SMZ3_v" + VERSION + "_H_MB_kb_race_777.sfc"

        config = Config(logic=Logic.HARD, goal=Goal.DEFEAT_MOTHER_BRAIN, keysanity_mode=KeysanityMode.BOTH, race=True)
        filename = generate_filename(config, 777, "sfc")
        self.assertEqual(filename, EXPECTED)

    def test_GenerateMultiworldFilename(self):
        EXPECTED = "SMZ3_v" + VERSION + "_N_DG5_kz_mw_1.json"

        config = Config(game_mode=GameMode.MULTIWORLD, goal=Goal.DEFEAT_GANON, ganon_crystal_count=5,
                        keysanity_mode=KeysanityMode.ZELDA)
        filename = generate_filename(config, 1)
        self.assertEqual(filename, EXPECTED)


class SeedParsingTests(TestCase):
    def test_NumericSeedsAreKept(self):
        self.assertEqual(parse_seed(42), 42)
        self.assertEqual(parse_seed("12345"), 12345)
        self.assertEqual(parse_seed(" 99 "), 99)

    def test_TextSeedsAreHashed(self):
        seed = parse_seed("moon pearl")
        self.assertEqual(seed, parse_seed("moon pearl"))
        self.assertNotEqual(seed, parse_seed("moon pearls"))
        self.assertTrue(0 <= seed <= MAX_SEED_NUMBER)

    def test_EmptySeedIsRandom(self):
        for seed in ["", None, "   "]:
            value = parse_seed(seed)
            self.assertTrue(0 <= value <= MAX_SEED_NUMBER)
