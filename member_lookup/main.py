"""Application entrypoint."""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Sequence

import httpx

from member_lookup.config import get_settings
from member_lookup.domain.models import SessionStatus
from member_lookup.i18n import I18nService
from member_lookup.logging import configure_logging, logger
from member_lookup.presentation.view_models import SearchView, build_search_view
from member_lookup.services.directory import DirectoryClient
from member_lookup.services.session import SearchSession

EXIT_OK = 0
EXIT_SEARCH_FAILED = 1
EXIT_EMPTY_QUERY = 2


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="member-lookup",
        description="Verify membership by name or membership number.",
    )
    parser.add_argument("query", help="Member name or membership number.")
    parser.add_argument("--page", type=_positive_int, default=1)
    parser.add_argument("--page-size", type=_positive_int, default=None)
    return parser.parse_args(argv)


def render_view(view: SearchView, i18n: I18nService) -> str:
    if view.error:
        return view.error
    if view.is_searching:
        return i18n.gettext("search.searching")
    if view.show_empty:
        return "\n".join([i18n.gettext("results.empty.title"), view.empty_message])

    lines = [view.count_label, ""]
    for card in view.members:
        lines.extend(
            [
                f"{card.full_name} [{card.status_label}]",
                f"  {i18n.gettext('card.member_id')}: {card.membership_number}",
                f"  {i18n.gettext('card.category')}: {card.category_label}",
                f"  {i18n.gettext('card.member_since')}: {card.member_since}",
                f"  {i18n.gettext('card.duration')}: {card.duration}",
                "",
            ]
        )
    pagination = view.pagination
    if pagination.visible:
        pages = " ".join(
            f"[{page}]" if page == pagination.current_page else str(page)
            for page in pagination.window
        )
        lines.append(
            i18n.gettext(
                "pagination.page",
                current=pagination.current_page,
                total=pagination.total_pages,
            )
            + f"  {pages}"
        )
        lines.append(pagination.range_label)
    return "\n".join(lines).rstrip()


async def run(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(stream=sys.stderr)
    settings = get_settings()
    i18n = I18nService(default_locale=settings.default_language)
    page_size = args.page_size or settings.directory.page_size

    if not args.query.strip():
        print(i18n.gettext("search.prompt"), file=sys.stderr)
        return EXIT_EMPTY_QUERY

    async with httpx.AsyncClient() as client:
        directory = DirectoryClient(client, settings=settings.directory)
        session = SearchSession(directory.fetch_members, page_size=page_size)
        await session.submit(args.query)
        if args.page > 1:
            await session.go_to_page(args.page)

    view = build_search_view(session.state, page_size=page_size, i18n=i18n)
    print(render_view(view, i18n))
    logger.info(
        "member_lookup_finished",
        environment=settings.environment,
        status=session.state.status.value,
        count=session.total_count,
    )
    if session.state.status is SessionStatus.ERROR:
        return EXIT_SEARCH_FAILED
    return EXIT_OK


def main() -> None:
    sys.exit(asyncio.run(run()))


if __name__ == "__main__":
    main()
