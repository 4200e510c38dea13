"""
Command line runner for headless evolution sessions.

Usage:
    python -m petri simulate [--generations 10] [--steps 2500] [--seed 42]
                             [--creatures 40] [--food 60]
                             [--mutation-chance 0.01] [--mutation-coeff 0.3]
                             [--output best.bin] [--verbosity 1]

Runs a World for the requested number of generations, printing
fitness statistics after each one. With --output, the brain of the
best creature of the final generation is written with
`serialize_weights`.
"""
import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from .evolution import EvolutionConfig
from .networks import clone_network, serialize_weights
from .rand import PetriRand
from .simulation import SimulationConfig, World

logger = logging.getLogger(__name__)


class CommandError(Exception):
    """Raised when a command cannot complete; reported without a traceback."""


class Command:
    help = 'Evolve creature brains in a headless world'

    def __init__(self, stdout=None, stderr=None):
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            '--generations',
            type=int,
            default=10,
            help='Number of generations to run (default: 10)',
        )
        parser.add_argument(
            '--steps',
            type=int,
            default=None,
            help='Steps per generation (default: 2500)',
        )
        parser.add_argument(
            '--seed',
            type=int,
            default=None,
            help='Seed for a reproducible run (default: clock entropy)',
        )
        parser.add_argument(
            '--creatures',
            type=int,
            default=40,
            help='Number of creatures (default: 40)',
        )
        parser.add_argument(
            '--food',
            type=int,
            default=60,
            help='Number of food items (default: 60)',
        )
        parser.add_argument(
            '--mutation-chance',
            type=float,
            default=0.01,
            help='Per-gene mutation probability (default: 0.01)',
        )
        parser.add_argument(
            '--mutation-coeff',
            type=float,
            default=0.3,
            help='Largest per-gene mutation magnitude (default: 0.3)',
        )
        parser.add_argument(
            '--output',
            type=str,
            default=None,
            help='Write the best final brain to this file',
        )
        parser.add_argument(
            '--verbosity',
            type=int,
            default=1,
            choices=[0, 1, 2, 3],
            help='Logging level: 0=warnings, 1=info, 2+=debug (default: 1)',
        )

    def handle(self, **options) -> None:
        config = SimulationConfig(
            creatures=options['creatures'],
            food=options['food'],
            evolution=EvolutionConfig(
                mutation_chance=options['mutation_chance'],
                mutation_coeff=options['mutation_coeff'],
            ),
        )
        if options['steps'] is not None:
            config = replace(config, generation_length=options['steps'])

        if options['generations'] < 1:
            raise CommandError("--generations must be at least 1")
        if config.generation_length < 1:
            raise CommandError("--steps must be at least 1")

        seed = options['seed']
        rng = PetriRand.with_seed(seed) if seed is not None else PetriRand.new()
        logger.debug(f"Starting from {rng!r}")

        try:
            world = World(config, rng)
        except ValueError as e:
            raise CommandError(str(e)) from e

        self.stdout.write(
            f"Evolving {config.creatures} creatures for {options['generations']} "
            f"generations of {config.generation_length} steps\n"
        )

        best_network = None
        for _ in range(options['generations']):
            world.simulate(config.generation_length - world.age)

            best = world.best_creature()
            if best is not None:
                best_network = clone_network(best.brain.network)

            generation = world.generation
            stats = world.evolve()

            if stats is None:
                self.stdout.write(f"Gen {generation}: no food eaten, evolution skipped\n")
            else:
                self.stdout.write(f"Gen {generation}: {stats}\n")

        if options['output']:
            if best_network is None:
                raise CommandError("No creature to save")
            path = Path(options['output'])
            try:
                path.write_bytes(serialize_weights(best_network))
            except OSError as e:
                raise CommandError(f"Cannot write {path}: {e.strerror or e}") from e
            logger.info(f"Wrote {best_network.parameter_count} weights to {path}")
            self.stdout.write(f"Best brain saved to: {path}\n")


def configure_logging(verbosity: int) -> None:
    levels = {0: logging.WARNING, 1: logging.INFO}
    logging.basicConfig(
        level=levels.get(verbosity, logging.DEBUG),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog='petri', description='Petri evolution simulator')
    subparsers = parser.add_subparsers(dest='command', required=True)

    command = Command()
    simulate = subparsers.add_parser('simulate', help=Command.help)
    command.add_arguments(simulate)

    options = vars(parser.parse_args(argv))
    configure_logging(options['verbosity'])

    try:
        command.handle(**options)
    except CommandError as e:
        command.stderr.write(f"Error: {e}\n")
        return 1
    return 0
