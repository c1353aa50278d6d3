from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from siteo.core.config import Settings


LOCAL_HOST_MARKERS = ('localhost', '127.0.0.1')


class HostClassification(str, Enum):
    PLATFORM = 'platform'
    TENANT_CUSTOM_DOMAIN = 'tenant_custom_domain'


def _strip_port(host: str) -> str:
    return host.strip().split(':', 1)[0].lower()


def classify_host(
    host: str, *, platform_hosts: Iterable[str], preview_suffixes: Iterable[str]
) -> HostClassification:
    normalized = _strip_port(host)
    if not normalized:
        return HostClassification.PLATFORM

    for marker in LOCAL_HOST_MARKERS:
        if marker in normalized:
            return HostClassification.PLATFORM

    # Substring match: every preview deployment (foo-git-main.vercel.app) is a platform host.
    for suffix in preview_suffixes:
        if suffix and suffix.lower() in normalized:
            return HostClassification.PLATFORM

    if normalized in {item.lower() for item in platform_hosts}:
        return HostClassification.PLATFORM

    return HostClassification.TENANT_CUSTOM_DOMAIN


@dataclass(frozen=True)
class DomainClassifier:
    platform_hosts: tuple[str, ...]
    preview_suffixes: tuple[str, ...]

    @classmethod
    def from_settings(cls, settings: Settings) -> DomainClassifier:
        return cls(
            platform_hosts=tuple(settings.platform_hosts),
            preview_suffixes=tuple(settings.preview_host_suffixes),
        )

    def classify(self, host: str) -> HostClassification:
        return classify_host(host, platform_hosts=self.platform_hosts, preview_suffixes=self.preview_suffixes)
