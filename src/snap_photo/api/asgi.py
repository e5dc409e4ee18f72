"""ASGI entrypoint for the snap photo API."""

from snap_photo.api.app import create_app
from snap_photo.containers import build_container

app = create_app(build_container())
