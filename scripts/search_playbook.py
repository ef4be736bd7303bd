"""Search the playbook from the command line and print the matching phases, themes and cards."""

from __future__ import annotations

import argparse
import sys

from loguru import logger

from controllers.playbook_controller import PlaybookController
from repositories.playbook_repository import CatalogLoadError, PlaybookRepository
from utils.constants import LOGS_DIR, NO_QUOTES_MESSAGE
from utils.highlight import highlight_text
from utils.logging_config import configure_logging
from utils.playbook_models import PlaybookView


def format_view(view: PlaybookView) -> str:
    """Render a display tree as indented text with ``**match**`` emphasis."""
    if view.empty_state is not None:
        return f"{view.empty_state.title}\n{view.empty_state.hint}"
    lines: list[str] = []
    for phase in view.phases:
        lines.append(phase.name)
        for theme in phase.themes:
            lines.append(f"  [{theme.code}] {theme.name}")
            if theme.description:
                lines.append(f"      {theme.description}")
            for card in theme.cards:
                name = highlight_text(card.name, view.term, "**", "**")
                lines.append(f"    {card.pattern_id}  {name}")
    return "\n".join(lines)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("term", nargs="?", default="", help="Search term (blank shows everything)")
    parser.add_argument("--data", help="Dataset directory or http(s) base URL")
    parser.add_argument(
        "--quotes",
        metavar="PATTERN_ID/THEME_CODE",
        help="Print the supporting quotes for one card instead of searching",
    )
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging(LOGS_DIR, level="DEBUG" if args.verbose else "WARNING")

    controller = PlaybookController(PlaybookRepository(args.data))
    try:
        controller.load()
    except CatalogLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    controller.current_term = args.term
    if args.quotes:
        pattern_id, _, theme_code = args.quotes.partition("/")
        detail = controller.open_detail(pattern_id, theme_code)
        if detail is None:
            logger.warning(f"Unknown pattern {pattern_id}")
            print(f"Unknown pattern: {pattern_id}", file=sys.stderr)
            return 1
        print(f"{detail.pattern.id}: {detail.pattern.name}")
        if not detail.has_quotes:
            print(f"  {NO_QUOTES_MESSAGE}")
        for quote in detail.quotes:
            suffix = f" - {quote.author}" if quote.author else ""
            print(f'  "{quote.quote_text}"{suffix}')
        return 0

    print(format_view(controller.search(args.term)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
