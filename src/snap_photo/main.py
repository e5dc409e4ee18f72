"""Command line entrypoint: serve the API or run a capture cycle."""

import argparse
import asyncio
from collections.abc import Awaitable, Sequence
from pathlib import Path

import uvicorn

from snap_photo.app_logging import configure_logging
from snap_photo.config import FACING_MODES, Settings
from snap_photo.containers import ClientContainer, build_client_container
from snap_photo.services.capture import CaptureView
from snap_photo.services.feedback_form import FeedbackForm
from snap_photo.services.gallery import PhotoGallery


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snap-photo", description="Snap Photo: quick snap & collect memories"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    serve = commands.add_parser("serve", help="Run the photo and feedback API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)

    capture = commands.add_parser("capture", help="Take one photo with the webcam")
    capture.add_argument("--delay-ms", type=int, default=None)
    capture.add_argument("--facing", choices=FACING_MODES, default=None)
    capture.add_argument(
        "--save-dir", type=Path, default=None, help="Also write the photo here"
    )

    feedback = commands.add_parser("feedback", help="Send feedback")
    feedback.add_argument("--name", required=True)
    feedback.add_argument("--message", required=True)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return a process exit code."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    configure_logging(settings.log_level)
    if args.command == "serve":
        uvicorn.run("snap_photo.api.asgi:app", host=args.host, port=args.port)
        return 0
    container = build_client_container(settings)
    if args.command == "capture":
        return asyncio.run(_with_container(container, _capture(container, args)))
    return asyncio.run(_with_container(container, _feedback(container, args)))


async def _with_container(container: ClientContainer, work: Awaitable[int]) -> int:
    try:
        return await work
    finally:
        await container.close_resources()


async def _capture(container: ClientContainer, args: argparse.Namespace) -> int:
    settings = container.settings
    gallery = PhotoGallery(container.photo_client)
    view = CaptureView(
        media_source=container.media_source,
        capturer=container.frame_capturer,
        gallery=gallery,
        delay_ms=args.delay_ms if args.delay_ms is not None else settings.capture_delay_ms,
        preferred_facing=args.facing or settings.preferred_facing,
        flash_seconds=settings.flash_ms / 1000,
        on_tick=lambda remaining: print(remaining, flush=True),
        on_flash=lambda on: print("*flash*", flush=True) if on else None,
    )
    async with view:
        photo = await view.run()
    if view.camera_error:
        print(view.camera_error)
        return 1
    if photo is None:
        print(gallery.banner or "No photo captured")
        return 1
    print(gallery.message)
    print(f"Saved photo {photo.id}")
    if args.save_dir is not None:
        path = gallery.download(photo, args.save_dir)
        if path is None:
            print(gallery.banner)
            return 1
        print(f"Wrote {path}")
    return 0


async def _feedback(container: ClientContainer, args: argparse.Namespace) -> int:
    form = FeedbackForm(container.feedback_client, name=args.name, message=args.message)
    record = await form.submit()
    if record is None:
        print(form.error)
        return 1
    print(form.thank_you)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
