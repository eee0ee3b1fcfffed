"""Shared colours and small label factories for service widgets."""

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QLabel

from temple.domain import Priority, StatusLabel

# (background, foreground)
STATUS_COLORS = {
    StatusLabel.CRITICAL: ("#fde2e1", "#9b1c1c"),
    StatusLabel.BUSY: ("#fef3c7", "#92400e"),
    StatusLabel.MODERATE: ("#dcfce7", "#166534"),
    StatusLabel.LIGHT: ("#dcfce7", "#166534"),
}

PRIORITY_COLORS = {
    Priority.HIGH: ("#fde2e1", "#9b1c1c"),
    Priority.MEDIUM: ("#fef3c7", "#92400e"),
    Priority.LOW: ("#dcfce7", "#166534"),
}

PROGRESS_COLORS = {
    StatusLabel.CRITICAL: "#ef4444",
    StatusLabel.BUSY: "#eab308",
    StatusLabel.MODERATE: "#22c55e",
    StatusLabel.LIGHT: "#22c55e",
}


def badge(text: str = "") -> QLabel:
    label = QLabel(text)
    label.setAlignment(Qt.AlignmentFlag.AlignCenter)
    return label


def paint_badge(label: QLabel, colors):
    background, foreground = colors
    label.setStyleSheet(
        f"background: {background}; color: {foreground}; border-radius: 8px;"
        " padding: 2px 8px; font-weight: 600;"
    )


def progress_style(status: StatusLabel) -> str:
    return (
        "QProgressBar { border: 1px solid #d6deeb; border-radius: 4px; background: #f1f5f9; }"
        f" QProgressBar::chunk {{ background: {PROGRESS_COLORS[status]}; border-radius: 4px; }}"
    )


def alert_label(text: str) -> QLabel:
    label = QLabel(text)
    label.setWordWrap(True)
    label.setStyleSheet(
        "background: #fef2f2; border: 1px solid #fecaca; border-radius: 6px;"
        " color: #b91c1c; padding: 6px;"
    )
    return label
