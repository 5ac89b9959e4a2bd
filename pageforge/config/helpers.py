"""Utility helpers shared by the pageforge configuration loader."""

from __future__ import annotations

import typing as typ

from .models import NavElementConfig, SiteConfigError

NAV_ELEMENTS_KEY = "nav-elements"


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_str(payload: typ.Mapping[str, typ.Any], key: str, context: str) -> str:
    """Return ``payload[key]`` as a string, raising when missing or not text."""
    value = payload.get(key)
    if not isinstance(value, str):
        msg = f"{context} requires a string '{key}'."
        raise SiteConfigError(msg)
    return value


def _build_nav_elements(raw: object | None) -> list[NavElementConfig]:
    """Build navigation entries from the raw ``nav-elements`` list.

    Entries keep their configured order; an absent or null value yields an
    empty menu.
    """
    if raw is None:
        return []
    if not isinstance(raw, list):
        msg = f"'{NAV_ELEMENTS_KEY}' must be a list."
        raise SiteConfigError(msg)

    elements: list[NavElementConfig] = []
    for index, payload in enumerate(raw, start=1):
        match payload:
            case dict():
                context = f"Navigation element {index}"
                elements.append(
                    NavElementConfig(
                        title=_require_str(payload, "title", context),
                        href=_require_str(payload, "href", context),
                    )
                )
            case _:
                msg = f"Navigation element {index} must be a mapping."
                raise SiteConfigError(msg)
    return elements


__all__ = ["NAV_ELEMENTS_KEY", "_build_nav_elements", "_optional_str", "_require_str"]
