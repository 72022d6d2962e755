# SPDX-License-Identifier: Apache-2.0
"""Slug-keyed registry of site presentation sinks."""

from __future__ import annotations

from typing import Iterable, TypeVar

from .base import SiteRenderer

_RendererT = TypeVar("_RendererT", bound=SiteRenderer)

_REGISTRY: dict[str, type[SiteRenderer]] = {}


class UnknownRendererError(KeyError):
    """Raised when no sink is registered under the requested slug."""

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__(
            f"Unknown site renderer '{slug}'. Available: {', '.join(slugs())}"
        )

    def __str__(self) -> str:
        return str(self.args[0])


def register(renderer_cls: type[_RendererT]) -> type[_RendererT]:
    """Register ``renderer_cls`` under its ``slug``; usable as a decorator."""

    if not issubclass(renderer_cls, SiteRenderer):
        raise TypeError("renderer must inherit SiteRenderer")
    slug = renderer_cls.slug
    if not slug:
        raise ValueError("renderer slug must be non-empty")
    if slug in _REGISTRY:
        raise ValueError(f"renderer slug already registered: {slug}")
    _REGISTRY[slug] = renderer_cls
    return renderer_cls


def slugs() -> list[str]:
    return sorted(_REGISTRY)


def get(slug: str) -> type[SiteRenderer]:
    try:
        return _REGISTRY[slug]
    except KeyError:
        raise UnknownRendererError(slug) from None


def create(slug: str, **options) -> SiteRenderer:
    """Instantiate the sink registered under ``slug`` with renderer options."""

    return get(slug)(**options)


def available() -> Iterable[type[SiteRenderer]]:
    return [_REGISTRY[slug] for slug in slugs()]
