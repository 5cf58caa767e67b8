from unittest import TestCase, mock

from smz3_api.application import app, create_configs
from smz3_api.exceptions.exceptions import InvalidRequestParameters
from smz3_api.requests.generate_seed_request import GenerateSeedRequest
from smz3_randomizer.errors import RandomizerGenerationException
from smz3_randomizer.models.enums import *


class GenerateSeedRequestTests(TestCase):
    def test_Defaults(self):
        request_data = GenerateSeedRequest({})
        self.assertEqual(request_data.seed, "")
        self.assertEqual(request_data.logic, Logic.NORMAL)
        self.assertEqual(request_data.keysanity_mode, KeysanityMode.NONE)
        self.assertEqual(request_data.goal, Goal.DEFEAT_BOTH)
        self.assertEqual(request_data.ganon_crystal_count, 7)
        self.assertEqual(request_data.players, ["Player"])
        self.assertFalse(request_data.race)

    def test_UnknownEnumsFallBack(self):
        request_data = GenerateSeedRequest({"logic": 9, "keysanity": 3, "goal": 2})
        self.assertEqual(request_data.logic, Logic.NORMAL)
        self.assertEqual(request_data.keysanity_mode, KeysanityMode.BOTH)
        self.assertEqual(request_data.goal, Goal.DEFEAT_MOTHER_BRAIN)

    def test_InvalidParameters(self):
        for payload in [{"ganonCrystals": 9}, {"gtCrystals": 2.5}, {"miseryMireMedallion": "Firerod"},
                        {"players": ["Link", "Link"]}, {"players": [" "]}]:
            with self.assertRaises(InvalidRequestParameters):
                GenerateSeedRequest(payload)

    def test_MultiplePlayersMakeMultiworld(self):
        configs = create_configs(GenerateSeedRequest({"players": ["Link", "Samus"], "seed": 12}))
        self.assertEqual([config.id for config in configs], [0, 1])
        self.assertTrue(all(config.multiworld for config in configs))
        self.assertEqual(configs[0].seed, "12")


class GenerateSeedEndpointTests(TestCase):
    def setUp(self):
        self.client = app.test_client()

    def test_SchemaViolation(self):
        response = self.client.post("/v1/seed/generate", json={"logic": "hard"})
        self.assertEqual(response.status_code, 400)
        self.assertIn("not of type", response.get_json()["errors"])

    def test_InvalidCrystals(self):
        response = self.client.post("/v1/seed/generate", json={"ganonCrystals": 8})
        self.assertEqual(response.status_code, 400)
        self.assertIn("ganonCrystals", response.get_json()["errors"])

    def test_GenerationFailure(self):
        with mock.patch("smz3_api.application.Randomizer") as randomizer:
            randomizer.return_value.generate_seed.side_effect = RandomizerGenerationException("Unable to generate a seed")
            response = self.client.post("/v1/seed/generate", json={"seed": 1})

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.get_json()["errors"], "Unable to generate a seed")

    def test_GenerateSeed(self):
        response = self.client.post("/v1/seed/generate", json={"seed": 2468, "goal": 1})
        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertEqual(data["seed"], "2468")
        self.assertTrue(data["filename"].endswith("_2468.json"))
        self.assertEqual(data["spoiler"]["goal"], "DEFEAT_GANON")
