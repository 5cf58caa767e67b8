import os
import sys
import argparse

from smz3_randomizer.models.config import Config
from smz3_randomizer.models.enums import *
from smz3_randomizer.randomizer import Randomizer, generate_filename


def enum_argument(enum_type):
    def parse(value):
        try:
            return enum_type[value.upper().replace("-", "_")]
        except KeyError:
            raise argparse.ArgumentTypeError("invalid choice: " + value)
    return parse


parser = argparse.ArgumentParser(description="Generate a randomly seeded SMZ3 spoiler")
parser.add_argument('-o', '--output', dest="output", type=str, required=False, default=".")
parser.add_argument('-s', '--seed', dest="seed", type=str, required=False, default="")
parser.add_argument('-l', '--logic', dest="logic", type=enum_argument(Logic), required=False, default=Logic.NORMAL)
parser.add_argument('-k', '--keysanity', dest="keysanity", type=enum_argument(KeysanityMode), required=False, default=KeysanityMode.NONE)
parser.add_argument('-g', '--goal', dest="goal", type=enum_argument(Goal), required=False, default=Goal.DEFEAT_BOTH)
parser.add_argument('--crystals', dest="crystals", type=int, choices=range(0, 8), required=False, default=7)
parser.add_argument('--gt-crystals', dest="gt_crystals", type=int, choices=range(0, 8), required=False, default=7)
parser.add_argument('--mire-medallion', dest="mire_medallion", type=enum_argument(Medallion), required=False, default=None)
parser.add_argument('--turtle-medallion', dest="turtle_medallion", type=enum_argument(Medallion), required=False, default=None)
parser.add_argument('--players', dest="players", type=str, nargs='+', required=False, default=["Player"])
parser.add_argument('--retries', dest="retries", type=int, required=False, default=100)
parser.add_argument('--log', dest="log", type=str, required=False, default=None)
parser.add_argument('--open-pyramid', dest="open_pyramid", action='store_true')
parser.add_argument('--race', dest="race", action='store_true')
parser.add_argument('--graph', dest="graph", action='store_true')
parser.add_argument('-v', '--verbose', dest="verbose", action='store_true')

parser.set_defaults(open_pyramid=False)
parser.set_defaults(race=False)
parser.set_defaults(graph=False)
parser.set_defaults(verbose=False)


def main(argv):
    args = parser.parse_args(argv)

    game_mode = GameMode.MULTIWORLD if len(args.players) > 1 else GameMode.NORMAL
    printlevel = PrintLevel.INFO if args.verbose else PrintLevel.SILENT
    configs = [Config(seed=args.seed, game_mode=game_mode, logic=args.logic, keysanity_mode=args.keysanity, goal=args.goal,
                      ganon_crystal_count=args.crystals, gt_crystal_count=args.gt_crystals, open_pyramid=args.open_pyramid,
                      misery_mire_medallion=args.mire_medallion, turtle_rock_medallion=args.turtle_medallion,
                      race=args.race, player_name=player, id=id, printlevel=printlevel)
               for id, player in enumerate(args.players)]

    randomizer = Randomizer(args.log, args.retries)
    seed_data = randomizer.generate_seed(configs, args.seed)

    spoiler_filename = generate_filename(seed_data.primary_config, seed_data.primary_config.seed, "json")
    write_spoiler(randomizer.generate_spoiler(), spoiler_filename, args.output)

    if args.graph:
        graph_filename = generate_filename(seed_data.primary_config, seed_data.primary_config.seed, "gv")
        write_graph(randomizer.generate_graph_visualization(), graph_filename, args.output)

    return spoiler_filename


def write_spoiler(spoiler, filename, output_path):
    if not os.path.exists(output_path):
        os.makedirs(output_path)
    f = open(os.path.join(output_path, filename), "w+")
    f.write(spoiler)
    f.close()
    print("Spoiler created: " + filename)


def write_graph(graph, filename, output_path):
    if not os.path.exists(output_path):
        os.makedirs(output_path)
    f = open(os.path.join(output_path, filename), "w+")
    f.write(graph.source)
    f.close()
    print("Graph created: " + filename)


if __name__ == "__main__":
    main(sys.argv[1:])
