import argparse
import json
import logging
import random
import sys

from data import Wheel, WheelDefinitionError, default_wheel, load_wheel
from engine import simulate

logger = logging.getLogger("spinwheel")


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Weighted spin wheel")
    parser.add_argument("wheel", nargs="?", help="path to a wheel definition (JSON)")
    parser.add_argument("--seed", type=int, default=None, help="seed the random source")
    parser.add_argument(
        "--simulate",
        type=int,
        metavar="ROUNDS",
        default=0,
        help="run ROUNDS headless spins and print the outcome distribution",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def run_gui(wheel: Wheel, seed: int | None) -> int:
    from PySide6 import QtWidgets

    from engine import SpinEngine
    from widgets import QtFrameScheduler, SoundsManager, SpinWindow

    app = QtWidgets.QApplication(sys.argv[:1])
    rng = random.Random(seed)
    engine = SpinEngine(QtFrameScheduler(app), rng=rng.random, config=wheel.spin_config)
    w = SpinWindow(wheel, sounds=SoundsManager(), engine=engine)
    w.show()
    return app.exec()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        wheel: Wheel = load_wheel(args.wheel) if args.wheel else default_wheel()
    except FileNotFoundError:
        print(f"Wheel file not found: {args.wheel}", file=sys.stderr)
        return 1
    except WheelDefinitionError as e:
        print(f"Invalid wheel: {e}", file=sys.stderr)
        return 1

    logger.info("wheel %r: %d segments", wheel.name, len(wheel.segments))
    if args.simulate > 0:
        logger.info("simulating %d rounds (seed=%s)", args.simulate, args.seed)
        report = simulate(wheel.segments, wheel.spin_config, rounds=args.simulate, seed=args.seed)
        print(json.dumps(report.to_dict(), indent=2))
        return 0

    return run_gui(wheel, args.seed)


if __name__ == "__main__":
    sys.exit(main())
