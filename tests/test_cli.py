import json
import os
import shutil
import tempfile
from unittest import TestCase

from smz3_cli.__main__ import main, parser
from smz3_randomizer.models.enums import *


class CommandLineTests(TestCase):
    def setUp(self):
        self.output = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.output)

    def test_ParseArguments(self):
        args = parser.parse_args(["--keysanity", "both", "--goal", "defeat-ganon", "--crystals", "5", "--race"])
        self.assertEqual(args.keysanity, KeysanityMode.BOTH)
        self.assertEqual(args.goal, Goal.DEFEAT_GANON)
        self.assertEqual(args.crystals, 5)
        self.assertTrue(args.race)
        self.assertEqual(args.players, ["Player"])

    def test_WritesSpoilerAndGraph(self):
        filename = main(["--seed", "31337", "--output", self.output, "--graph"])

        with open(os.path.join(self.output, filename)) as f:
            spoiler = json.load(f)
        self.assertEqual(spoiler["seed"], "31337")
        self.assertTrue(os.path.exists(os.path.join(self.output, filename[:-len("json")] + "gv")))
