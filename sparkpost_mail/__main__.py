"""Command line entry point.

Usage::

    python -m sparkpost_mail payload --to a@x.com --cc "b@x.com=Bob" --subject Hi --text Hello
    python -m sparkpost_mail send --to a@x.com --subject Hi --text Hello

Addresses are given as ``email`` or ``email=Name``.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

import structlog

from .client import TransmissionClient
from .config import SparkPostAPIConfig
from .errors import MessageError
from .logging import setup_logging
from .message import Message

logger = structlog.get_logger()


def _address(value: str) -> str | dict[str, str]:
    email, sep, name = value.partition("=")
    if sep:
        return {email: name}
    return email


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="python -m sparkpost_mail")
    parser.add_argument("mode", choices=("payload", "send"))
    parser.add_argument("--from", dest="sender", type=_address)
    parser.add_argument("--reply-to", type=_address)
    parser.add_argument("--to", action="append", type=_address, default=[])
    parser.add_argument("--cc", action="append", type=_address, default=[])
    parser.add_argument("--bcc", action="append", type=_address, default=[])
    parser.add_argument("--list-id", help="Stored recipient list id (replaces --to/--cc/--bcc)")
    parser.add_argument("--subject", default="")
    parser.add_argument("--text")
    parser.add_argument("--html")
    parser.add_argument("--attach", action="append", default=[], metavar="PATH")
    parser.add_argument("--campaign-id", default="")
    return parser


def build_message(args: argparse.Namespace) -> Message:
    message = Message().set_subject(args.subject).set_campaign_id(args.campaign_id)
    if args.sender:
        message.set_from(args.sender)
    if args.reply_to:
        message.set_reply_to(args.reply_to)
    if args.list_id:
        message.set_stored_recipients_list(args.list_id)
    else:
        if args.to:
            message.set_to(args.to)
        # one call so the Cc header lists every copy recipient
        if args.cc:
            message.set_cc(args.cc)
        if args.bcc:
            message.set_bcc(args.bcc)
    if args.text is not None:
        message.set_text_body(args.text)
    if args.html is not None:
        message.set_html_body(args.html)
    for path in args.attach:
        message.attach(path)
    return message


async def _send(message: Message) -> dict:
    client = TransmissionClient(SparkPostAPIConfig())
    await client.start()
    try:
        return await client.send(message)
    finally:
        await client.stop()


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    setup_logging()

    try:
        message = build_message(args)
    except MessageError as exc:
        logger.error("message_build_failed", error=str(exc))
        sys.exit(1)

    if args.mode == "payload":
        json.dump(message.to_payload(), sys.stdout, indent=2)
        sys.stdout.write("\n")
    else:
        results = asyncio.run(_send(message))
        json.dump(results, sys.stdout, indent=2)
        sys.stdout.write("\n")


if __name__ == "__main__":
    main()
