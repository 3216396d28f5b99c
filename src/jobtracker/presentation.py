"""Badge colours and icons for each application status."""
from __future__ import annotations

import html
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .entries import ApplicationStatus


@dataclass(frozen=True)
class StatusStyle:
    color: str
    background: str
    foreground: str
    icon: str
    glyph: str


STATUS_STYLES: Mapping[ApplicationStatus, StatusStyle] = MappingProxyType(
    {
        ApplicationStatus.APPLIED: StatusStyle("blue", "#dbeafe", "#1e40af", "send", "➤"),
        ApplicationStatus.INTERVIEW: StatusStyle("yellow", "#fef9c3", "#854d0e", "calendar", "📅"),
        ApplicationStatus.OFFER: StatusStyle("green", "#dcfce7", "#166534", "check", "✅"),
        ApplicationStatus.REJECTED: StatusStyle("red", "#fee2e2", "#991b1b", "x", "❌"),
    }
)

_missing = set(ApplicationStatus) - set(STATUS_STYLES)
if _missing:  # pragma: no cover - guards future enum additions
    raise RuntimeError(f"No badge style for: {sorted(status.value for status in _missing)}")


def status_badge_html(status: ApplicationStatus) -> str:
    style = STATUS_STYLES[status]
    return (
        f'<span class="status-badge status-{style.color}" '
        f'style="background:{style.background};color:{style.foreground};'
        f'padding:0.15rem 0.5rem;border-radius:0.375rem;font-size:0.875rem;font-weight:500;">'
        f"{style.glyph} {html.escape(status.value)}</span>"
    )
