import argparse
import logging
import sys

from asciifly.logging_config import setup_logging


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="asciifly", description="Animated ASCII butterfly")
    parser.add_argument("--terminal", action="store_true", help="draw in this terminal instead of a window")
    parser.add_argument("--fps", type=float, default=30.0, help="terminal frame rate")
    parser.add_argument("--frames", type=int, default=None, help="terminal: stop after this many frames")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)
    if not args.fps > 0:
        parser.error(f"--fps must be positive, got {args.fps}")
    if args.frames is not None and args.frames < 0:
        parser.error(f"--frames must not be negative, got {args.frames}")

    level = logging.DEBUG if args.verbose else logging.INFO
    if args.terminal:
        # frames own stdout
        setup_logging(level, stream=sys.stderr)
        from asciifly.utils.terminal import run_terminal
        run_terminal(fps=args.fps, max_frames=args.frames)
        return 0

    setup_logging(level)
    from asciifly.utils.qt_view import main as qt_main
    return qt_main([sys.argv[0]])


if __name__ == "__main__":
    sys.exit(main())
