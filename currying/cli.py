import argparse
import logging
import math
import threading

from currying.configuration import Settings
from currying.curry import PLACEHOLDER as _, make_curried
from currying.flatten import flat
from currying.simple import simple_curry
from currying.throttle import Throttle


def demo_curry(settings):
    curried_sum = simple_curry(lambda a, b, c: a + b + c)
    print(curried_sum(1, 2, 3))
    print(curried_sum(1, 2)(3))
    print(curried_sum(1)(2)(3))


def demo_placeholder(settings):
    curried_join = make_curried(lambda a, b, c: f"{a}_{b}_{c}")
    print(curried_join(_, _, 3, 4)(1, _)(2, 5))


def demo_flat(settings):
    nested = [1, 2, None, [3, 4, [5, 6, [7, 8, [9, 10]]]]]
    print(flat(nested, math.inf))


def demo_throttle(settings):
    calls = []
    done = threading.Event()

    def record(value):
        calls.append(value)
        print(value)
        if len(calls) == 2:
            done.set()

    throttled = Throttle.from_config(record, settings)
    for value in ("A", "B", "C"):
        throttled(value)
    done.wait(timeout=settings.wait * 10 + 1)
    throttled.cancel()


DEMOS = {
    'curry': demo_curry,
    'placeholder': demo_placeholder,
    'flat': demo_flat,
    'throttle': demo_throttle,
}


def build_parser():
    parser = argparse.ArgumentParser(description='Runs the currying toolkit demos',
                                     epilog='Enjoy the program! :)')

    parser.add_argument('demo',
                        choices=tuple(DEMOS) + ('all',),
                        nargs='?',
                        default='all',
                        help='demo to run')

    parser.add_argument('--config',
                        type=str,
                        default=None,
                        help='json settings file (WAIT, LOGLEVEL)')

    parser.add_argument('--wait',
                        type=float,
                        default=None,
                        help='throttle window in seconds')

    parser.add_argument('--verbose',
                        action='store_true',
                        help='log at debug level')

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    settings = Settings.load_file(args.config) if args.config else Settings()
    settings = settings.override(wait=args.wait)

    logging.basicConfig(level=logging.DEBUG if args.verbose else settings.log_level,
                        format='%(asctime)s %(name)s %(levelname)s %(message)s')

    names = tuple(DEMOS) if args.demo == 'all' else (args.demo,)
    for name in names:
        DEMOS[name](settings)
    return 0
