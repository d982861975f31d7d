"""Configuration helpers for the Brawl Stars API client."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional
import json


@dataclass(slots=True, frozen=True)
class ClientConfig:
    """Options decided once when a :class:`~brawl_api.http.client.Client` is built.

    ``auto_hashtag`` controls whether tags given without a leading ``#`` get one
    inserted when a route is rendered. ``enable_async`` controls whether the
    client also owns an :class:`httpx.AsyncClient` for the ``a_*`` methods.
    """

    auto_hashtag: bool = True
    enable_async: bool = True
    timeout: float = 15.0
    connect_timeout: float = 5.0


@dataclass(slots=True)
class SampleTags:
    player: Optional[str] = None
    club: Optional[str] = None


@dataclass(slots=True)
class Credentials:
    """Represents the API key plus the sample tags used by live checks."""

    key: str
    tags: SampleTags = field(default_factory=SampleTags)


class CredentialLoaderError(RuntimeError):
    """Raised when credentials cannot be loaded."""


def _load_raw_credentials(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise CredentialLoaderError(
            f"Credential file '{path}' does not exist. Create it with a 'key' entry holding your API token."
        )
    try:
        with path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
    except json.JSONDecodeError as exc:
        raise CredentialLoaderError(f"Invalid JSON in credential file: {path}") from exc
    if not isinstance(raw, dict):
        raise CredentialLoaderError(f"Credential file '{path}' must contain a JSON object.")
    return raw


def load_credentials(path: str | Path) -> Credentials:
    """Load credentials from ``credentials.json`` or another file.

    Parameters
    ----------
    path:
        Path to the credential file.

    Returns
    -------
    Credentials
        Parsed credential values.
    """

    raw = _load_raw_credentials(Path(path))

    key = raw.get("key")
    if not isinstance(key, str) or not key.strip():
        raise CredentialLoaderError("Credential 'key' is required but missing or empty.")

    tags = raw.get("tags") or {}
    if not isinstance(tags, dict):
        raise CredentialLoaderError("Credential 'tags' must be an object when present.")

    return Credentials(
        key=key.strip(),
        tags=SampleTags(player=tags.get("player"), club=tags.get("club")),
    )


__all__ = ["ClientConfig", "Credentials", "CredentialLoaderError", "SampleTags", "load_credentials"]
