import os

from smz3_randomizer.randomizer import MAX_RANDO_RETRIES

MAX_RETRIES: int = int(os.environ.get("SMZ3_MAX_RETRIES", MAX_RANDO_RETRIES))
