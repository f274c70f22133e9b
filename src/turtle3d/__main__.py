#!/usr/bin/env python3
"""
CLI for turtle3d scripts.

Usage:
    python -m turtle3d check SCRIPT
    python -m turtle3d run SCRIPT [--backend dxf|pyglet|record] [--output NAME]
                                  [--config FILE.yaml] [--unit N] [--origin STR]
                                  [--log FILE] [-v]

Examples:
    # Check a script for syntax errors
    python -m turtle3d check examples/square.turtle

    # Render a script to square.dxf
    python -m turtle3d run examples/square.turtle --output square

    # Show a script in an OpenGL window, home at the top left
    python -m turtle3d run examples/square.turtle --backend pyglet --origin tl

    # Dump the issued draw commands as JSON
    python -m turtle3d run examples/square.turtle --backend record --output cmds.json
"""

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path

from turtle3d.config import TurtleConfig, load_config
from turtle3d.errors import ScriptError, TurtleError
from turtle3d.events import CommandLog
from turtle3d.script import parse_script, run_script
from turtle3d.turtle import Turtle

logger = logging.getLogger("turtle3d")

BACKENDS = ("dxf", "pyglet", "record")


def make_surface(backend, config):
    """Create the drawable for ``backend`` sized from ``config``."""
    if backend == "dxf":
        from turtle3d.ezdxf_drawable import ezdxfDraw
        return ezdxfDraw(config.width, config.height)
    elif backend == "pyglet":
        from turtle3d.pyglet_drawable import pygletDraw
        return pygletDraw(config.width, config.height)
    from turtle3d.recording_drawable import RecordingDraw
    return RecordingDraw(config.width, config.height)


def read_script(path):
    source_path = Path(path)
    if not source_path.exists():
        raise ScriptError(f"script not found: {source_path}")
    return parse_script(source_path.read_text())


def cmd_check(args):
    """Check a script for syntax errors."""
    commands = read_script(args.file)
    print(f"OK: {Path(args.file).name} - {len(commands)} command(s), no errors")
    return 0


def cmd_run(args):
    """Run a script on the selected backend."""
    config = load_config(args.config) if args.config else TurtleConfig()
    changes = {}
    if args.unit is not None:
        changes["unit"] = args.unit
    if args.origin is not None:
        changes["origin"] = args.origin
    if changes:
        config = config.updated(**changes)

    commands = read_script(args.file)
    surface = make_surface(args.backend, config)
    log = CommandLog() if args.log else None
    turtle = Turtle(surface, config=config, log=log)
    count = run_script(turtle, commands)
    logger.info("ran %d command(s) from %s", count, args.file)

    if log is not None:
        Path(args.log).write_text(log.to_script())
        logger.info("wrote command log %s", args.log)

    if args.backend == "record":
        records = [dataclasses.asdict(c) for c in surface.commands]
        if args.output:
            with open(args.output, "w", encoding="utf-8") as fp:
                json.dump(records, fp, indent=2)
                fp.write("\n")
        else:
            print(f"{len(records)} draw command(s)")
        return 0

    if args.backend == "dxf":
        surface.filename = args.output or Path(args.file).stem
    surface.display()
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='python -m turtle3d',
        description='pseudo 3D turtle graphics script runner',
    )
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log every turtle command')
    # -v is also accepted after the action; SUPPRESS keeps the
    # subparser from resetting a flag given before it
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('-v', '--verbose', action='store_true', default=argparse.SUPPRESS,
                        help='Log every turtle command')

    subparsers = parser.add_subparsers(dest='action', required=True)

    check_parser = subparsers.add_parser('check', parents=[common], help='Check a script for errors')
    check_parser.add_argument('file', help='Turtle script')

    run_parser = subparsers.add_parser('run', parents=[common], help='Run a script')
    run_parser.add_argument('file', help='Turtle script')
    run_parser.add_argument('-b', '--backend', choices=BACKENDS, default='dxf',
                            help='Drawing backend (default: dxf)')
    run_parser.add_argument('-o', '--output', metavar='NAME',
                            help='DXF file name without extension, or JSON file for record')
    run_parser.add_argument('-c', '--config', metavar='FILE', help='YAML configuration file')
    run_parser.add_argument('--unit', type=float, help='Unit length in surface units')
    run_parser.add_argument('--origin', help='Home placement, e.g. tl, mc, br')
    run_parser.add_argument('--log', metavar='FILE', help='Write the executed commands to FILE')

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')

    try:
        if args.action == 'check':
            return cmd_check(args)
        elif args.action == 'run':
            return cmd_run(args)
        parser.print_help()
        return 1
    except (TurtleError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == '__main__':
    sys.exit(main())
