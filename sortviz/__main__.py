import argparse
import logging

from .algorithms import ALGORITHMS, run_to_completion
from .config import DEFAULT_ALGORITHM, DEFAULT_ARRAY_SIZE, DEFAULT_SPEED
from .controller import PlaybackController
from .logging_config import setup_logging
from .model import ArrayModel
from .presenter import LogPresenter

logger = logging.getLogger("sortviz")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="sortviz", description="Sorting algorithm visualizer")
    parser.add_argument('--algorithm', choices=list(ALGORITHMS), default=DEFAULT_ALGORITHM,
                        help='Algorithm selected at start-up')
    parser.add_argument('--size', type=int, default=DEFAULT_ARRAY_SIZE, help='Number of bars')
    parser.add_argument('--speed', type=int, default=DEFAULT_SPEED, help='Playback speed, 1-10')
    parser.add_argument('--seed', type=int, help='Random seed for the generated array')
    parser.add_argument('--list', nargs='+', type=int, help='Sort these values instead of a random array')
    parser.add_argument('--headless', action='store_true',
                        help='Run once in real time without a window, logging progress')
    parser.add_argument('--instant', action='store_true',
                        help='Run once without a window and without pacing')
    parser.add_argument('--debug', action='store_true', help='Verbose logging')
    parser.add_argument('--trace-steps', action='store_true',
                        help='With --debug, also log statistics after every step')
    parser.add_argument('--log-file', help='Also write the log to this file')
    return parser.parse_args(argv)


def run_headless(args):
    controller = PlaybackController(LogPresenter(), array=args.list, algorithm=args.algorithm,
                                    size=args.size, speed=args.speed, seed=args.seed)
    controller.play()
    controller.run_until_idle()
    if not controller.is_sorted:
        logger.warning("Headless run ended out of order")
    return controller.array, controller.statistics


def run_instant(args):
    controller = PlaybackController(array=args.list, size=args.size, seed=args.seed)
    values = controller.array
    steps = run_to_completion(args.algorithm, values)
    if not ArrayModel(values).is_sorted():
        logger.warning("Instant run ended out of order")
    logger.info("%s: %d steps, result %s", ALGORITHMS[args.algorithm].name, len(steps), values)
    return values


def main(argv=None):
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.INFO, args.log_file,
                  step_detail=args.trace_steps)

    if args.instant:
        run_instant(args)
    elif args.headless:
        values, stats = run_headless(args)
        logger.info("Sorted: %s", values)
        logger.info("Statistics: %s", stats)
    else:
        from .ui import run
        run(args.algorithm, args.size, args.speed, seed=args.seed, values=args.list)


if __name__ == "__main__":
    main()
