"""CaveGen CLI entry point.

Provides subcommands for running the HTTP API and for generating a cave in the
terminal. Accepts configuration via flags and environment variables, with
optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import os
import signal
import sys
from textwrap import dedent

from colorama import Fore, Style
from colorama import init as _color_init
from dotenv import load_dotenv


def _load_version() -> str:
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "VERSION")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        return "0.1.0"


__version__ = _load_version()


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    CaveGen

    Generate connected cave layouts and their marching-squares meshes, either
    through the HTTP API server or directly in the terminal. Configuration can
    be provided via CLI flags or environment variables. If both are present,
    CLI flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          HOST                               Bind address for the web server (default: 0.0.0.0)
          PORT                               Port for the web server (default: 5000)
          CAVEGEN_LOG_LEVEL                  debug | info | warn | error (default: info)
          CAVEGEN_LOG_JSON                   1 to emit JSON log lines
          CAVEGEN_ENABLE_GENERATION_METRICS  0 to skip metrics collection
          CAVEGEN_DISABLE_CACHE              1 to regenerate on every request

        Examples:
          # Run the API server on the default host and port
          python run.py server

          # Print a 60x40 cave for a named seed
          python run.py generate --width 60 --height 40 --seed "crystal grotto"

          # Random seed, write the full cave (rooms + mesh) to a JSON file
          python run.py generate --random-seed --json cave.json
        """
    )

    parser = argparse.ArgumentParser(
        prog="CaveGen",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )

    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"CaveGen {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    # server subcommand
    server_parser = subparsers.add_parser(
        "server",
        help="Run the HTTP API server",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Run the Flask cave generation API",
    )
    server_parser.add_argument(
        "--host",
        default=None,
        help="Host interface to bind (default: env HOST or 0.0.0.0)",
    )
    server_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: env PORT or 5000)",
    )
    server_parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable Flask debug mode with verbose error pages",
    )
    server_parser.set_defaults(command="server")

    # generate subcommand
    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a cave and print it",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate a cave, print its ASCII overlay and a summary.",
    )
    gen_parser.add_argument("--width", type=int, default=80)
    gen_parser.add_argument("--height", type=int, default=60)
    gen_parser.add_argument("--fill", dest="fill_percentage", type=float, default=47, help="Wall fill percentage 0-100")
    gen_parser.add_argument("--smoothing", dest="smoothing_iterations", type=int, default=5)
    gen_parser.add_argument("--wall-min", dest="wall_size_minimum", type=int, default=50)
    gen_parser.add_argument("--room-min", dest="room_size_minimum", type=int, default=50)
    gen_parser.add_argument("--seed", default="cave")
    gen_parser.add_argument("--random-seed", dest="use_random_seed", action="store_true")
    gen_parser.add_argument("--json", dest="json_path", default=None, help="Write the cave (rooms, metrics, mesh) to this file")
    gen_parser.add_argument("--no-color", dest="no_color", action="store_true", help="Disable colored output")
    gen_parser.set_defaults(command="generate")

    # If no subcommand provided, default to server
    if len(argv) == 0:
        argv = ["server"]

    args = parser.parse_args(argv)
    return args


def _color_enabled(args) -> bool:
    if getattr(args, "no_color", False):
        return False
    return sys.stdout.isatty()


def run_generate(args) -> int:
    from cavegen.cave import Cave, CaveConfig, ConfigError, NoViableRoomsError
    from cavegen.cave.debug import render_ascii
    from cavegen.cave.tiles import TILE_CHARS, WALL

    color = _color_enabled(args)
    config = CaveConfig(
        width=args.width,
        height=args.height,
        fill_percentage=args.fill_percentage,
        smoothing_iterations=args.smoothing_iterations,
        wall_size_minimum=args.wall_size_minimum,
        room_size_minimum=args.room_size_minimum,
        seed=args.seed,
        use_random_seed=args.use_random_seed,
    )
    try:
        cave = Cave(config)
    except ConfigError as e:
        print(f"[ERROR] Invalid {e.field}: {e.message}")
        return 2
    except NoViableRoomsError as e:
        print(f"[ERROR] {e} - try another seed or a lower fill percentage")
        return 1

    wall_char = TILE_CHARS[WALL]
    for row in render_ascii(cave.grid):
        if color:
            row = row.replace(wall_char, f"{Fore.BLUE}{wall_char}{Style.RESET_ALL}")
        print(row)

    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if color else text

    print()
    print(f"{label('Seed:'):10} {cave.seed}")
    print(f"{label('Rooms:'):10} {len(cave.rooms)} (main room {cave.main_room.size} tiles)")
    print(f"{label('Passages:'):10} {len(cave.passages)}")
    print(f"{label('Mesh:'):10} {cave.mesh.vertex_count} vertices, {cave.mesh.triangle_count} triangles")

    if args.json_path:
        with open(args.json_path, "w", encoding="utf-8") as f:
            json.dump(cave.to_dict(), f)
        print(f"{label('Written:'):10} {args.json_path}")
    return 0


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    # Load .env if requested (default .env otherwise, no error if missing)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        load_dotenv()

    mode = (getattr(args, "command", None) or "server").lower()
    if mode == "generate":
        return run_generate(args)

    host = getattr(args, "host", None) or os.getenv("HOST", "0.0.0.0")
    port = int(getattr(args, "port", None) or os.getenv("PORT", "5000"))

    def handle_sigint(sig, frame):
        print("\n[INFO] Shutting down server...")
        sys.exit(0)

    signal.signal(signal.SIGINT, handle_sigint)

    # Import server entrypoint only after environment is ready
    from cavegen.logging_utils import log
    from cavegen.server import start_server

    color = _color_enabled(args)
    title = f"{Fore.CYAN}{Style.BRIGHT}CaveGen API Bootup{Style.RESET_ALL}" if color else "CaveGen API Bootup"
    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if color else "=" * 40
    print("\n".join([divider, f"  {title}", divider, f"  Host: {host}", f"  Port: {port}", divider, ""]))
    log.info(event="startup", mode=mode, host=host, port=port)

    start_server(host=host, port=port, debug=getattr(args, "debug", False))
    return 0


if __name__ == "__main__":
    _color_init()
    sys.exit(main(sys.argv[1:]))
