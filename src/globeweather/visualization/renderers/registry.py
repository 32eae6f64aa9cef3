# SPDX-License-Identifier: Apache-2.0
"""Registry of bundle renderers keyed by slug."""

from __future__ import annotations

from typing import Iterable, TypeVar

from .base import BundleRenderer

_RendererT = TypeVar("_RendererT", bound=BundleRenderer)

_REGISTRY: dict[str, type[BundleRenderer]] = {}


def register(renderer_cls: type[_RendererT]) -> type[_RendererT]:
    """Class decorator adding ``renderer_cls`` under its ``slug``."""

    if not issubclass(renderer_cls, BundleRenderer):
        raise TypeError("renderer must inherit BundleRenderer")
    slug = renderer_cls.slug
    if not slug:
        raise ValueError("renderer slug must be non-empty")
    if slug in _REGISTRY:
        raise ValueError(f"renderer slug already registered: {slug}")
    _REGISTRY[slug] = renderer_cls
    return renderer_cls


def get(slug: str) -> type[BundleRenderer]:
    try:
        return _REGISTRY[slug]
    except KeyError as exc:
        raise KeyError(f"unknown renderer slug: {slug}") from exc


def create(slug: str, **options) -> BundleRenderer:
    return get(slug)(**options)


def available() -> Iterable[type[BundleRenderer]]:
    return _REGISTRY.values()
