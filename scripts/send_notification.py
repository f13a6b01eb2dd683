"""Utility script to send a push notification from the command line."""

from __future__ import annotations

import argparse
import json

from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.notifications import (
    SEND_TYPES,
    DispatchEngine,
    build_payload,
    send_notification,
)
from app.config import configure_logging, get_settings
from app.domain.entities import TopicDispatchResult
from app.domain.errors import PushDispatchError
from app.infrastructure.database import SessionLocal, initialize_database
from app.infrastructure.push import build_delivery_channel


def _parse_data(raw: list[str]) -> dict[str, str]:
    data: dict[str, str] = {}
    for entry in raw:
        key, separator, value = entry.partition("=")
        if not separator or not key:
            raise argparse.ArgumentTypeError(f"Data entries must look like key=value: {entry!r}")
        data[key] = value
    return data


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments for a notification send."""

    parser = argparse.ArgumentParser(
        description="Send a push notification through the configured delivery channel.",
    )
    parser.add_argument("type", choices=SEND_TYPES, help="Target selector")
    parser.add_argument("--title", required=True)
    parser.add_argument("--body", required=True)
    parser.add_argument("--user-id", help="Owner of the devices when type is 'user'")
    parser.add_argument(
        "--token",
        dest="tokens",
        action="append",
        default=[],
        help="Push token when type is 'tokens'; repeat for several tokens",
    )
    parser.add_argument("--topic", help="Topic name when type is 'topic'")
    parser.add_argument("--platform", help="android, ios or web when type is 'platform'")
    parser.add_argument(
        "--data",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Custom data entry; repeat for several entries",
    )
    parser.add_argument("--image-url")
    parser.add_argument("--click-action")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Validate with the delivery channel without notifying any device.",
    )
    return parser.parse_args(argv)


def _format_outcome(outcome) -> str:
    if isinstance(outcome, TopicDispatchResult):
        return json.dumps(
            {
                "success": outcome.success,
                "topic": outcome.topic,
                "message_id": outcome.message_id,
                "error": outcome.error,
            },
            indent=2,
        )
    return json.dumps(
        {
            "success": outcome.success,
            "total_sent": outcome.total_sent,
            "total_failed": outcome.total_failed,
            "results": [
                {
                    "token": result.token,
                    "success": result.success,
                    "message_id": result.message_id,
                    "error": result.error,
                }
                for result in outcome.results
            ],
        },
        indent=2,
    )


def main(argv: list[str] | None = None) -> None:
    """Send a notification using the provided command line arguments."""

    args = parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    try:
        payload = build_payload(
            title=args.title,
            body=args.body,
            data=_parse_data(args.data),
            image_url=args.image_url,
            click_action=args.click_action,
        )
        channel = build_delivery_channel(settings)
    except (argparse.ArgumentTypeError, PushDispatchError) as exc:
        raise SystemExit(f"Could not prepare the notification: {exc}") from exc

    initialize_database()

    session = SessionLocal()
    try:
        outcome = send_notification(
            session,
            DispatchEngine(channel, settings),
            send_type=args.type,
            payload=payload,
            user_id=args.user_id,
            tokens=args.tokens,
            topic=args.topic,
            platform=args.platform,
            dry_run=args.dry_run,
        )
    except PushDispatchError as exc:
        raise SystemExit(f"Could not send the notification: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Database error while sending the notification: {exc}") from exc
    else:
        print(_format_outcome(outcome))
    finally:
        session.close()
        channel.close()


if __name__ == "__main__":
    main()
