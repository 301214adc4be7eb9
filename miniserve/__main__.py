import argparse
import logging
import sys

from werkzeug.serving import make_server

from miniserve.config import DEFAULT_INTERFACE, DEFAULT_PORT, ServerConfig
from miniserve.errors import BindError, ConfigurationError
from miniserve.file_server import create_app

log = logging.getLogger("miniserve")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="miniserve",
        description="Serve a file or a directory over HTTP",
    )
    parser.add_argument("path", metavar="PATH", help="Which path to serve")
    parser.add_argument("-v", "--verbose", action="store_true", help="Be verbose")
    parser.add_argument(
        "-p", "--port", default=str(DEFAULT_PORT), help=f"Port to use (default: {DEFAULT_PORT})"
    )
    parser.add_argument(
        "-i",
        "--if",
        dest="interface",
        default=DEFAULT_INTERFACE,
        help=f"Interface to listen on (default: {DEFAULT_INTERFACE})",
    )
    return parser


def setup_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING, format="[%(levelname)s] %(message)s")
        # Werkzeug logs every request at INFO
        logging.getLogger("werkzeug").setLevel(logging.WARNING)


def bind(config: ServerConfig, app):
    try:
        return make_server(str(config.interface), config.port, app, threaded=True)
    except (OSError, SystemExit) as e:
        # werkzeug exits on a port already in use instead of raising
        raise BindError(f"Couldn't bind server on {config.interface}:{config.port}: {e}") from e


def banner(config: ServerConfig) -> str:
    return "\n".join(
        [
            f"miniserve is serving your files at {config.url}",
            f"Currently serving path {config.path.resolve()}",
            "Quit by pressing CTRL-C",
        ]
    )


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    try:
        config = ServerConfig.create(
            args.path, port=args.port, interface=args.interface, verbose=args.verbose
        )
        app = create_app(config)
        server = bind(config, app)
    except (ConfigurationError, BindError) as e:
        log.error("%s", e)
        return 1

    print(banner(config))
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
