"""Interactive CLI client for the /api/chat endpoint."""

from __future__ import annotations

import argparse
import logging

from weekwise.board.handoff import HandoffBuffer
from weekwise.client.api import WeekwiseApi
from weekwise.client.chat_session import ChatSession
from weekwise.config import settings
from weekwise.utils.constants import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES
from weekwise.utils.messages import CHAT_TEXT, localized


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Chat with weekwise to generate a weekly plan")
    parser.add_argument(
        "--url",
        default=settings.api_base_url,
        help="Gateway API base URL",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=settings.client_timeout_seconds,
        help="Request timeout in seconds",
    )
    parser.add_argument(
        "--language",
        choices=SUPPORTED_LANGUAGES,
        default=DEFAULT_LANGUAGE,
        help="Conversation language",
    )
    parser.add_argument(
        "--handoff",
        default=settings.handoff_path,
        help="Where to store the generated plan for weekwise-plan",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.WARNING)

    buffer = HandoffBuffer(args.handoff)
    api = WeekwiseApi(args.url, timeout=args.timeout)
    session = ChatSession(api, language=args.language, on_plan=buffer.put)

    print(session.messages[0].content)
    print("\nType your messages. Ctrl+D or 'exit' to quit.")

    while not session.completed:
        try:
            user_input = input("> ").strip()
        except EOFError:
            print()
            break

        if not user_input:
            continue
        if user_input.lower() in {"exit", "quit"}:
            break

        reply = session.send(user_input)
        if reply is not None:
            print(reply.content)

    if session.completed:
        print()
        print(localized(CHAT_TEXT, session.language, "completed_title"))
        print(localized(CHAT_TEXT, session.language, "completed_subtitle"))
        print(f"{localized(CHAT_TEXT, session.language, 'print_button')}: weekwise-plan --handoff {args.handoff}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
