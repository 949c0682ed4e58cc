"""Resolve a ResourceSet from JSON resource bundles."""

import json
from pathlib import Path

from ..config import NEUTRAL_LOCALE, PathLike, resolve_bundle_dir, resolve_locale
from ..logging_config import get_logger
from ..models import ResourceSet

logger = get_logger(__name__)

# Canonical bundle key -> ResourceSet field
BUNDLE_KEYS = {
    "Cancel": "cancel",
    "Help": "help",
    "Reset": "reset",
    "HelpMessage": "help_message",
}


class ResourceBundleError(ValueError):
    """A resource bundle is missing, unreadable or malformed."""


def _candidate_locales(locale: str) -> list[str]:
    """Fallback chain for a locale tag: de-at -> de -> en."""
    parts = locale.split("-")
    chain = ["-".join(parts[:i]) for i in range(len(parts), 0, -1)]
    if NEUTRAL_LOCALE not in chain:
        chain.append(NEUTRAL_LOCALE)
    return chain


def _read_bundle(path: Path) -> dict[str, str]:
    """Read one bundle file and validate its shape."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ResourceBundleError(f"Cannot read resource bundle {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ResourceBundleError(f"Resource bundle {path} must be a JSON object")

    bundle = {}
    for key in BUNDLE_KEYS:
        if key not in raw:
            continue
        if not isinstance(raw[key], str):
            raise ResourceBundleError(f"Resource {key!r} in {path} must be a string")
        bundle[key] = raw[key]
    return bundle


def available_locales(bundle_dir: PathLike | None = None) -> list[str]:
    """List locales that have a bundle in the directory."""
    directory = resolve_bundle_dir(bundle_dir)
    return sorted(path.stem for path in directory.glob("*.json"))


def load_resource_set(
    locale: str | None = None,
    bundle_dir: PathLike | None = None,
) -> ResourceSet:
    """
    Build a ResourceSet for a locale.

    Keys missing from a specific bundle are taken from the next bundle in the
    fallback chain, ending with the neutral one.

    Args:
        locale: Locale tag such as "de-AT". Defaults to the configured locale.
        bundle_dir: Directory holding <locale>.json bundles. Defaults to the
                    bundles shipped with the package.

    Returns:
        Resolved ResourceSet

    Raises:
        ResourceBundleError: If a bundle is malformed or a key is missing
                             from every bundle in the chain.
    """
    locale = resolve_locale(locale)
    directory = resolve_bundle_dir(bundle_dir)

    merged: dict[str, str] = {}
    resolved_locale = None
    for candidate in _candidate_locales(locale):
        path = directory / f"{candidate}.json"
        if not path.is_file():
            continue

        if resolved_locale is None:
            resolved_locale = candidate
        for key, value in _read_bundle(path).items():
            merged.setdefault(key, value)

    if resolved_locale is None:
        raise ResourceBundleError(f"No resource bundle for {locale!r} in {directory}")

    if resolved_locale != locale:
        logger.warning("No resource bundle for %s, using %s", locale, resolved_locale)

    missing = [key for key in BUNDLE_KEYS if key not in merged]
    if missing:
        raise ResourceBundleError(
            f"Resource bundle for {locale!r} is missing keys: {', '.join(missing)}"
        )

    try:
        return ResourceSet(
            locale=resolved_locale,
            **{field: merged[key] for key, field in BUNDLE_KEYS.items()},
        )
    except ValueError as e:
        raise ResourceBundleError(f"Invalid resource bundle for {locale!r}: {e}") from e
