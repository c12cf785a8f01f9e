"""Command-line curation of the catalog and global defaults.

Acts as the configured administrator unless ``--as`` names another identity,
so every change still passes the administrator check.
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from sqlalchemy.orm import Session

from autorotate.core.security import create_access_token
from autorotate.core.settings import settings
from autorotate.db.session import SessionLocal
from autorotate.init_db import init_db
from autorotate.services.errors import RotationError
from autorotate.services.gallery import Gallery


def load_images(gallery: Gallery, caller: str, path: Path) -> list[int]:
    """Append every ``{"reference", "attribution"}`` entry of a JSON file.

    Returns:
        The catalog indices assigned, in file order.
    """
    entries: Any = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(entries, list):
        raise ValueError(f"{path} must contain a JSON list")
    indices = []
    for entry in entries:
        indices.append(gallery.push_image(caller, entry["reference"], entry["attribution"]))
    return indices


def apply_defaults(
    gallery: Gallery,
    caller: str,
    *,
    tick_duration: int | None = None,
    index_offset: int | None = None,
    use_most_recent: bool | None = None,
) -> None:
    """Change only the default fields that were supplied."""
    if tick_duration is not None:
        gallery.set_default_tick_duration(caller, tick_duration)
    if index_offset is not None:
        gallery.set_default_index_offset(caller, index_offset)
    if use_most_recent is not None:
        gallery.set_default_use_most_recent(caller, use_most_recent)


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def parse_flag(value: str) -> bool:
    """Parse a command-line boolean, rejecting anything unrecognised."""
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise argparse.ArgumentTypeError(f"expected a boolean, got {value!r}")


def _run(db: Session, args: argparse.Namespace) -> None:
    gallery = Gallery(db)
    caller = args.caller or gallery.administrator()

    if args.command == "load-images":
        indices = load_images(gallery, caller, Path(args.path))
        print(f"[curate] appended {len(indices)} images, catalog size {gallery.num_images()}")
    elif args.command == "set-defaults":
        apply_defaults(
            gallery,
            caller,
            tick_duration=args.tick_duration,
            index_offset=args.index_offset,
            use_most_recent=args.use_most_recent,
        )
        print(f"[curate] defaults now {gallery.global_defaults()}")
    elif args.command == "transfer-admin":
        gallery.transfer_administration(caller, args.new_administrator)
        print(f"[curate] administrator is now {args.new_administrator}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Curate the rotating image catalog")
    parser.add_argument("--as", dest="caller", default=None, help="Identity to act as")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init-db", help="Create tables and seed singleton records")

    load = subparsers.add_parser("load-images", help="Append images from a JSON file")
    load.add_argument("path")

    defaults = subparsers.add_parser("set-defaults", help="Change global default settings")
    defaults.add_argument("--tick-duration", type=int, default=None)
    defaults.add_argument("--index-offset", type=int, default=None)
    defaults.add_argument(
        "--use-most-recent",
        default=None,
        type=parse_flag,
    )

    transfer = subparsers.add_parser("transfer-admin", help="Hand over administration")
    transfer.add_argument("new_administrator")

    token = subparsers.add_parser("token", help="Print a bearer token for an identity")
    token.add_argument("identity")
    return parser


def main() -> None:
    args = build_parser().parse_args()

    if args.command == "init-db":
        init_db()
        print(f"[curate] initialized {settings.effective_database_url}")
        return
    if args.command == "token":
        print(create_access_token(args.identity))
        return

    db = SessionLocal()
    try:
        _run(db, args)
    except (RotationError, ValueError, KeyError, OSError) as exc:
        print(f"[curate] ERROR: {exc}", file=sys.stderr)
        sys.exit(1)
    finally:
        db.close()


if __name__ == "__main__":
    main()
