import argparse
import logging
import os
import sys

from src.logging_setup import configure_logging
from src.snippet import DEFAULT_OWNER, KeyScheme, SnippetError, resolve
from src.store import create_remote_store


logger = logging.getLogger("snippets")


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run(
        "src.api.server:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
    )
    return 0


def _new_store(args: argparse.Namespace) -> int:
    try:
        store_id = create_remote_store(args.url)
    except SnippetError as exc:
        logger.error("Could not create store: %s", exc)
        return 1
    print(store_id)
    return 0


def _uid(args: argparse.Namespace) -> int:
    print(resolve(args.platform, args.owner, args.name, KeyScheme.parse(args.scheme)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Store and render executable snippets"
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "INFO"),
        help="Logging level (default: INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP server")
    serve.add_argument(
        "--host",
        default=os.getenv("HOST", "0.0.0.0"),
        help="Interface to bind (default: 0.0.0.0)",
    )
    serve.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("PORT", "8000")),
        help="Port to listen on (default: $PORT or 8000)",
    )
    serve.add_argument(
        "--reload",
        action="store_true",
        help="Reload on code changes",
    )
    serve.set_defaults(handler=_serve)

    new_store = subparsers.add_parser("new-store", help="Create a remote store and print its id")
    new_store.add_argument(
        "--url",
        default=os.getenv("STORE_URL", "https://store.homebots.io"),
        help="Base URL of the resource store service",
    )
    new_store.set_defaults(handler=_new_store)

    uid = subparsers.add_parser("uid", help="Print the storage key of a snippet identity")
    uid.add_argument("platform", help="Snippet platform, for example shell or node")
    uid.add_argument("name", help="Snippet name")
    uid.add_argument(
        "--owner",
        default=DEFAULT_OWNER,
        help=f"Snippet owner (default: {DEFAULT_OWNER})",
    )
    uid.add_argument(
        "--scheme",
        choices=[scheme.value for scheme in KeyScheme],
        default=os.getenv("SNIPPETS_KEY_SCHEME", KeyScheme.HASHED.value),
        help="Key scheme (default: hashed)",
    )
    uid.set_defaults(handler=_uid)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
