"""A very tiny CLI.

Invoke using e.g. ``python -m zbuf report`` or ``python -m zbuf svg scene.svg``.
"""

import sys
import logging
import argparse

import zbuf


def main(argv=None):
    # The first element of sys.argv is the program, whether that is
    # zbuf/__main__.py or the installed console script
    if argv is None:
        argv = sys.argv[1:]

    # Defaults and aliases
    if not argv:
        argv = ["help"]
    if argv == ["--version"]:
        argv = ["version"]

    # Let the rest to argparse

    parser = argparse.ArgumentParser(
        prog="zbuf",
        description="Draw the demo scene of overlapping squares",
    )

    parser.add_argument(
        "command",
        action="store",
        help="The command to run: 'help', 'version', 'report', 'svg' or 'show'",
    )
    parser.add_argument(
        "filename", nargs="?", default="zbuf.svg", help="The output file for 'svg'"
    )
    parser.add_argument(
        "--size", type=int, default=400, help="The surface width in pixels (even)"
    )

    args = parser.parse_args(argv)
    command = args.command.lower()

    if command == "help":
        parser.print_help()
    elif command == "version":
        print("zbuf v" + zbuf.__version__)
    elif command == "report":
        scene = zbuf.default_scene(args.size)
        for line in scene.report():
            print(line)
    elif command == "svg":
        scene = zbuf.default_scene(args.size)
        surface = zbuf.SvgSurface(args.size, args.size, args.filename)
        surface.render(scene.positions, scene.colors)
        print(f"Wrote {scene.rasterizer.pixel_count} pixels to {surface.filename}")
    elif command == "show":
        from zbuf.utils.show import Viewer

        if zbuf.logger.level > logging.INFO:
            zbuf.logger.setLevel(logging.INFO)
        if not zbuf.logger.handlers:
            zbuf.logger.addHandler(logging.StreamHandler())
        Viewer(zbuf.default_scene(args.size)).show()
    else:
        print(f"Invalid command '{command}'")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
