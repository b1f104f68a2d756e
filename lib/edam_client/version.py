from __future__ import annotations

from importlib import metadata

DIST_NAME = "edam-client"


def client_version() -> str:
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return "0.0.0"
