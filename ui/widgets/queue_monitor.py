from PyQt6.QtWidgets import (
    QFrame,
    QGridLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QVBoxLayout,
    QWidget,
)

from temple.domain import (
    StatusLabel,
    capacity_percentage,
    estimated_wait_minutes,
    is_near_full,
    status_label,
)

from .badges import PRIORITY_COLORS, STATUS_COLORS, alert_label, badge, paint_badge, progress_style
from .history_plot import HistoryPlotWidget

PERCENT_COLORS = {
    StatusLabel.CRITICAL: "#dc2626",
    StatusLabel.BUSY: "#ca8a04",
    StatusLabel.MODERATE: "#16a34a",
    StatusLabel.LIGHT: "#16a34a",
}

SUMMARY_KEYS = [
    ("total_waiting", "Total Devotees"),
    ("active_services", "Active Services"),
    ("average_wait_minutes", "Avg Wait (min)"),
    ("critical_queues", "Critical Queues"),
]


class MonitorCard(QFrame):
    """Live status of one service queue."""

    def __init__(self, service, parent=None):
        super().__init__(parent)
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self._build_ui()
        self.update_service(service)

    def _build_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(6)

        header = QHBoxLayout()
        titles = QVBoxLayout()
        self.name_label = QLabel()
        self.name_label.setStyleSheet("font-size: 15px; font-weight: bold;")
        self.time_slot_label = QLabel()
        self.time_slot_label.setStyleSheet("color: #6b7280;")
        titles.addWidget(self.name_label)
        titles.addWidget(self.time_slot_label)
        header.addLayout(titles, stretch=1)
        self.status_badge = badge()
        header.addWidget(self.status_badge)
        layout.addLayout(header)

        capacity_row = QHBoxLayout()
        capacity_row.addWidget(QLabel("Queue Capacity"))
        capacity_row.addStretch()
        self.percent_label = QLabel()
        capacity_row.addWidget(self.percent_label)
        layout.addLayout(capacity_row)

        self.progress = QProgressBar()
        self.progress.setRange(0, 100)
        self.progress.setTextVisible(False)
        self.progress.setFixedHeight(10)
        layout.addWidget(self.progress)

        counts_row = QHBoxLayout()
        self.current_label = QLabel()
        self.max_label = QLabel()
        counts_row.addWidget(self.current_label)
        counts_row.addStretch()
        counts_row.addWidget(self.max_label)
        layout.addLayout(counts_row)

        wait_row = QHBoxLayout()
        wait_caption = QLabel("Estimated Wait")
        wait_caption.setStyleSheet("color: #1e40af; font-weight: 600;")
        self.wait_label = QLabel()
        self.wait_label.setStyleSheet("color: #1d4ed8; font-size: 16px; font-weight: bold;")
        wait_row.addWidget(wait_caption)
        wait_row.addStretch()
        wait_row.addWidget(self.wait_label)
        layout.addLayout(wait_row)

        priority_row = QHBoxLayout()
        priority_row.addWidget(QLabel("Priority"))
        self.priority_badge = badge()
        priority_row.addWidget(self.priority_badge)
        priority_row.addStretch()
        layout.addLayout(priority_row)

        self.alert = alert_label("Queue approaching capacity! Consider redirecting devotees.")
        layout.addWidget(self.alert)

    def update_service(self, service):
        percentage = capacity_percentage(service)
        status = status_label(percentage)

        name = service.name if service.is_active else f"{service.name}  (Inactive)"
        self.name_label.setText(name)
        self.time_slot_label.setText(service.time_slot)
        self.status_badge.setText(status.value)
        paint_badge(self.status_badge, STATUS_COLORS[status])

        self.percent_label.setText(f"{percentage:.0f}%")
        self.percent_label.setStyleSheet(f"color: {PERCENT_COLORS[status]}; font-weight: 600;")
        self.progress.setValue(int(min(percentage, 100.0)))
        self.progress.setStyleSheet(progress_style(status))
        self.current_label.setText(f"Current: {service.current_queue}")
        self.max_label.setText(f"Max: {service.max_capacity}")

        self.wait_label.setText(f"{estimated_wait_minutes(service.current_queue)} min")
        self.priority_badge.setText(service.priority.value.upper())
        paint_badge(self.priority_badge, PRIORITY_COLORS[service.priority])
        self.alert.setVisible(is_near_full(service))
        self.setEnabled(service.is_active)


class QueueMonitorPanel(QWidget):
    """Real-time queue monitor: one card per service plus session totals."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.cards = {}
        self._build_ui()

    def _build_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(10)

        title = QLabel("Real-time Queue Monitor")
        title.setStyleSheet("font-size: 18px; font-weight: bold;")
        layout.addWidget(title)

        self.cards_grid = QGridLayout()
        self.cards_grid.setSpacing(12)
        layout.addLayout(self.cards_grid)

        summary_group = QGroupBox("Queue Summary")
        summary_grid = QGridLayout()
        self.summary_values = {}
        for column, (key, caption) in enumerate(SUMMARY_KEYS):
            value = QLabel("–")
            value.setStyleSheet("font-size: 20px; font-weight: bold;")
            summary_grid.addWidget(value, 0, column)
            summary_grid.addWidget(QLabel(caption), 1, column)
            self.summary_values[key] = value
        summary_group.setLayout(summary_grid)
        layout.addWidget(summary_group)

        self.history_plot = HistoryPlotWidget()
        self.history_plot.setMinimumHeight(200)
        layout.addWidget(self.history_plot, stretch=1)

    def update_from_snapshot(self, snapshot):
        for index, service in enumerate(snapshot.services):
            card = self.cards.get(service.service_id)
            if card is None:
                card = MonitorCard(service)
                self.cards[service.service_id] = card
                self.cards_grid.addWidget(card, index // 2, index % 2)
            else:
                card.update_service(service)

        for key, label in self.summary_values.items():
            value = snapshot.summary.get(key)
            label.setText("–" if value is None else str(value))

        self.history_plot.update_from_snapshot(snapshot)
