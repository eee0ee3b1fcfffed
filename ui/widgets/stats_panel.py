from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QFrame, QGridLayout, QLabel, QVBoxLayout, QWidget

STAT_CARDS = [
    ("total_waiting", "Total Devotees", "Currently in queue", "#2563eb"),
    ("active_services", "Active Services", "Currently running", "#16a34a"),
    ("average_wait_minutes", "Average Wait", "Estimated time", "#9333ea"),
    ("critical_queues", "Critical Queues", "At 90% or more", "#ea580c"),
]


def _stat_card(title: str, caption: str, color: str):
    card = QFrame()
    card.setStyleSheet(f"QFrame {{ background: {color}; border-radius: 10px; }} QLabel {{ color: white; }}")
    layout = QVBoxLayout(card)
    layout.setContentsMargins(12, 10, 12, 10)

    title_label = QLabel(title)
    title_label.setStyleSheet("font-size: 12px; font-weight: 600;")
    value_label = QLabel("–")
    value_label.setStyleSheet("font-size: 22px; font-weight: bold;")
    caption_label = QLabel(caption)
    caption_label.setStyleSheet("font-size: 11px;")

    layout.addWidget(title_label)
    layout.addWidget(value_label)
    layout.addWidget(caption_label)
    return card, value_label


class StatsPanel(QWidget):
    """Row of headline numbers taken from ``queue_summary``."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.values = {}
        self._build_ui()

    def _build_ui(self):
        grid = QGridLayout(self)
        grid.setContentsMargins(0, 0, 0, 0)
        grid.setHorizontalSpacing(12)

        for column, (key, title, caption, color) in enumerate(STAT_CARDS):
            card, value = _stat_card(title, caption, color)
            value.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)
            self.values[key] = value
            grid.addWidget(card, 0, column)

    def update_from_snapshot(self, snapshot):
        summary = snapshot.summary
        for key, label in self.values.items():
            label.setText(self._format_value(key, summary.get(key)))

    @staticmethod
    def _format_value(key, value):
        if value is None:
            return "–"
        if key == "average_wait_minutes":
            return f"{value} min"
        return str(value)
