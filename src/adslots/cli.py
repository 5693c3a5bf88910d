"""CLI commands for inspecting and exercising persisted slot state."""

from __future__ import annotations

import argparse
import sys

from .config.runtime import get_settings
from .domain.circular_index import distinct_pair
from .domain.interleave import interleave
from .domain.slot_store import SlotStore
from .models.ad import Ad
from .models.feed import FeedEntry
from .observability import configure_logging
from .wiring import build_engine, build_store, resolve_layout


def _print_feed(feed: list[FeedEntry]) -> None:
    for position, entry in enumerate(feed):
        if entry.is_ad:
            print(f"{position:3d}  ad       {entry.payload.id}  {entry.payload.title}")
        else:
            print(f"{position:3d}  content  {entry.payload}")


def show(namespace: str) -> None:
    """Print the persisted index of every slot of a page."""
    layout = resolve_layout(namespace)
    store = SlotStore(build_store())
    for key in layout.keys:
        value = store.read(key)
        print(f"{key}: {'-' if value is None else value}")


def reset(namespace: str) -> None:
    """Forget the persisted indices of a page."""
    layout = resolve_layout(namespace)
    store = SlotStore(build_store())
    for key in layout.keys:
        store.clear(key)
    print(f"Cleared {len(layout.keys)} slot keys for {layout.namespace}.")


def fetch(namespace: str) -> None:
    """Fetch both pools, initialise the page's slots and print the assignment."""
    engine = build_engine(namespace=namespace)
    assignment = engine.mount()
    if not assignment:
        print("No ads available.")
        return
    for key, index in assignment.items():
        ad = engine.ad_for(key)
        title = ad.title if ad is not None else "-"
        print(f"{key}: {index}  {title}")


def preview(items: int, large_ads: int) -> None:
    """Print the interleaved feed for synthetic content and ads, offline."""
    content = [f"item-{i + 1}" for i in range(items)]
    pool = [
        Ad(id=f"ad-{i}", banner_url=f"https://example.com/ad-{i}.png", title=f"Sponsored {i}")
        for i in range(large_ads)
    ]
    indices = distinct_pair(None, None, len(pool)) if pool else ()
    _print_feed(interleave(content, pool, indices))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Inspect and exercise ad slot rotation state")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    for name, help_text in (
        ("show", "Show persisted slot indices of a page"),
        ("reset", "Clear persisted slot indices of a page"),
        ("fetch", "Fetch ad pools and initialise a page's slots"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument(
            "--page",
            default=None,
            help="Page namespace, e.g. LOCALNEWS (default: ADSLOTS_PAGE_NAMESPACE)",
        )

    preview_parser = subparsers.add_parser("preview", help="Print an interleaved feed offline")
    preview_parser.add_argument("--items", type=int, default=5, help="Number of content items")
    preview_parser.add_argument("--large-ads", type=int, default=2, help="Size of the large-ad pool")

    args = parser.parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    if args.command in {"show", "reset", "fetch"}:
        namespace = args.page or settings.page_namespace
        try:
            resolve_layout(namespace)
        except ValueError as e:
            print(f"Error: invalid page namespace {namespace!r}: {e}", file=sys.stderr)
            sys.exit(2)
        {"show": show, "reset": reset, "fetch": fetch}[args.command](namespace)
    elif args.command == "preview":
        if args.items < 0 or args.large_ads < 0:
            print("Error: --items and --large-ads must be >= 0", file=sys.stderr)
            sys.exit(2)
        preview(args.items, args.large_ads)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
