"""
Demo entry point showing bars and spinners in the terminal.
"""

import argparse
import sys
import threading
import time

from rich.console import Console

from .config import (
    FRAMES_ARROWS,
    FRAMES_BOUNCE,
    FRAMES_DOTS,
    FRAMES_LINES,
    FRAMES_PROGRESS,
    STYLE_BLOCKS,
    STYLE_DEFAULT,
    STYLE_DOTS,
    STYLE_MINIMAL,
)
from .indicators import Bar, Spinner
from .managers import MultiBar
from .utils import green, setup_logging

console = Console()

STYLES = {
    "default": STYLE_DEFAULT,
    "blocks": STYLE_BLOCKS,
    "dots": STYLE_DOTS,
    "minimal": STYLE_MINIMAL,
}

FRAME_SETS = {
    "lines": FRAMES_LINES,
    "dots": FRAMES_DOTS,
    "bounce": FRAMES_BOUNCE,
    "arrows": FRAMES_ARROWS,
    "progress": FRAMES_PROGRESS,
}


def demo_bar(steps: int, delay: float, style: str, eta: bool) -> None:
    """Fill a single bar in steps."""
    bar = Bar(STYLES[style], show_eta=eta)

    console.print("Starting...")
    bar.start()
    try:
        for i in range(steps):
            bar.set_progress((i + 1) / steps)
            time.sleep(delay)
    finally:
        bar.stop()
    console.print("Finished!")


def demo_spinner(seconds: float, frames: str) -> None:
    """Spin for a fixed time."""
    with Spinner(frames=FRAME_SETS[frames], prefix="Working ", suffix=" please wait"):
        time.sleep(seconds)
    print(green("Done!"))


def demo_multi(steps: int, delay: float) -> None:
    """Run two named bars, one after the other, fed from a worker thread."""
    bars = MultiBar()
    bars.add("download", "Downloading", width=30)
    bars.add("verify", "Verifying", width=30, filled_char="=", empty_char="-")

    for name in bars.names():
        bars.start(name)

        def work(bar_name: str = name) -> None:
            for i in range(steps):
                bars.set_progress(bar_name, (i + 1) / steps)
                time.sleep(delay)

        worker = threading.Thread(target=work)
        worker.start()
        worker.join()
        bars.stop(name)

    bars.stop_all()


def cli():
    """CLI entry point with argument parsing."""
    parser = argparse.ArgumentParser(
        description="termgauge demo - terminal progress bars and spinners",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log lifecycle and resize events to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    bar_parser = subparsers.add_parser("bar", help="Show a progress bar")
    bar_parser.add_argument("--steps", type=int, default=10)
    bar_parser.add_argument("--delay", type=float, default=0.5)
    bar_parser.add_argument("--style", choices=sorted(STYLES), default="default")
    bar_parser.add_argument(
        "--eta", action="store_true", help="Show estimated time remaining"
    )

    spinner_parser = subparsers.add_parser("spinner", help="Show a spinner")
    spinner_parser.add_argument("--seconds", type=float, default=3.0)
    spinner_parser.add_argument("--frames", choices=sorted(FRAME_SETS), default="lines")

    multi_parser = subparsers.add_parser("multi", help="Show two named bars")
    multi_parser.add_argument("--steps", type=int, default=10)
    multi_parser.add_argument("--delay", type=float, default=0.2)

    args = parser.parse_args()
    setup_logging(verbose=args.verbose)

    if getattr(args, "steps", 1) <= 0:
        parser.error("--steps must be positive")

    try:
        if args.command == "bar":
            demo_bar(args.steps, args.delay, args.style, args.eta)
        elif args.command == "spinner":
            demo_spinner(args.seconds, args.frames)
        else:
            demo_multi(args.steps, args.delay)
    except KeyboardInterrupt:
        console.print("\nInterrupted")
        sys.exit(130)


if __name__ == "__main__":
    cli()
