from pathlib import Path

from flask import Flask, current_app, jsonify, request, send_file

from miniserve.config import ServerConfig
from miniserve.errors import ForbiddenError, NotFoundError
from miniserve.listing import list_directory, render_listing
from miniserve.paths import PathKind, classify, resolve_under_root

CHALLENGE_REALM = "lol"
CHALLENGE_HEADER = f'Basic realm="{CHALLENGE_REALM}"'


def add_challenge_header(response):
    # Advertised only, credentials are never checked
    response.headers["WWW-Authenticate"] = CHALLENGE_HEADER
    return response


RESPONSE_STAGES = (add_challenge_header,)


def _send(path: Path):
    try:
        return send_file(path)
    except OSError:
        raise NotFoundError() from None


def serve_root_file():
    path = current_app.config["ROOT"]
    if not path.is_file():
        current_app.logger.warning("Served file %s is gone", path)
        raise NotFoundError()
    return _send(path)


def serve_tree(subpath=""):
    root = current_app.config["ROOT"]
    try:
        local_path = resolve_under_root(root, subpath)
    except ForbiddenError:
        current_app.logger.warning("Refused path outside of root: %r", subpath)
        raise
    except (OSError, ValueError):
        raise NotFoundError() from None
    url_path = local_path.relative_to(root).as_posix()
    if url_path == ".":
        url_path = ""
    try:
        if local_path.is_dir():
            entries = list_directory(local_path, url_path)
        elif local_path.is_file():
            return _send(local_path)
        else:
            raise NotFoundError()
    except (OSError, ValueError):
        current_app.logger.warning("Can't read %s", local_path)
        raise NotFoundError() from None
    if request.args.get("format") == "json":
        return jsonify([entry.to_dict() for entry in entries])
    return render_listing(url_path, entries)


def install_routes(app: Flask, kind: PathKind) -> None:
    if kind is PathKind.DIRECTORY:
        app.add_url_rule("/", "serve_tree", serve_tree)
        app.add_url_rule("/<path:subpath>", "serve_tree", serve_tree)
    elif kind is PathKind.SINGLE_FILE:
        app.add_url_rule("/", "serve_root_file", serve_root_file)
    else:
        raise ValueError(f"unknown path kind: {kind!r}")


def create_app(config: ServerConfig) -> Flask:
    app = Flask(__name__)
    root = config.path.resolve()
    kind = classify(root)
    app.config.update(MINISERVE=config, ROOT=root, PATH_KIND=kind)
    install_routes(app, kind)
    for stage in RESPONSE_STAGES:
        app.after_request(stage)
    return app
