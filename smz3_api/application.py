from flask import Flask, request, Response, make_response, jsonify
from flask_expects_json import expects_json

from smz3_randomizer.errors import InvalidConfigurationError, RandomizerGenerationException
from smz3_randomizer.models.config import Config
from smz3_randomizer.models.enums import *
from smz3_randomizer.randomizer import Randomizer, generate_filename

from .exceptions.exceptions import InvalidRequestParameters
from .requests.generate_seed_request import GenerateSeedRequest
from .config import MAX_RETRIES

app = Flask(__name__)


@app.errorhandler(400)
def bad_request(errors):
    # Schema failures carry a jsonschema ValidationError, other aborts a plain string
    message = getattr(errors.description, 'message', errors.description)
    return make_response(jsonify({'errors': str(message)}), 400)


def create_configs(request_data: GenerateSeedRequest):
    game_mode = GameMode.MULTIWORLD if len(request_data.players) > 1 else GameMode.NORMAL
    configs = []
    for id, player in enumerate(request_data.players):
        configs.append(Config(seed=str(request_data.seed), game_mode=game_mode, logic=request_data.logic,
                              keysanity_mode=request_data.keysanity_mode, goal=request_data.goal,
                              ganon_crystal_count=request_data.ganon_crystal_count,
                              gt_crystal_count=request_data.gt_crystal_count,
                              open_pyramid=request_data.open_pyramid,
                              misery_mire_medallion=request_data.misery_mire_medallion,
                              turtle_rock_medallion=request_data.turtle_rock_medallion,
                              race=request_data.race, player_name=player, id=id))
    return configs


@app.route("/v1/seed/generate", methods=["POST"])
@expects_json(GenerateSeedRequest.schema)
def generateSeed() -> Response:
    try:
        request_data = GenerateSeedRequest(request.get_json())
        configs = create_configs(request_data)

        randomizer = Randomizer(max_retries=MAX_RETRIES)
        seed_data = randomizer.generate_seed(configs, request_data.seed)

        return make_response(jsonify({
            'guid': seed_data.guid,
            'seed': str(seed_data.seed),
            'filename': generate_filename(seed_data.primary_config, seed_data.primary_config.seed, "json"),
            'spoiler': randomizer.spoiler,
        }), 200)
    except InvalidRequestParameters as e:
        return make_response(jsonify({'errors': e.message}), e.status_code)
    except InvalidConfigurationError as e:
        return make_response(jsonify({'errors': str(e)}), 400)
    except RandomizerGenerationException as e:
        return make_response(jsonify({'errors': str(e)}), 500)


if __name__ == '__main__':
    app.run(debug=True)
