from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
)

from temple.domain import (
    RejectionReason,
    capacity_percentage,
    is_near_full,
    rejection_reason,
    status_label,
)

from .badges import PRIORITY_COLORS, alert_label, badge, paint_badge, progress_style

BUTTON_TEXT = {
    None: "Generate Token",
    RejectionReason.SERVICE_INACTIVE: "Service Inactive",
    RejectionReason.QUEUE_FULL: "Queue Full",
}


class ServiceCard(QFrame):
    """Dashboard card for one service with a direct token button."""

    generate_requested = pyqtSignal(str)

    def __init__(self, service, parent=None):
        super().__init__(parent)
        self.service = service
        self.setFrameShape(QFrame.Shape.StyledPanel)
        self._build_ui()
        self.update_service(service)

    def _build_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        header = QHBoxLayout()
        self.name_label = QLabel()
        self.name_label.setStyleSheet("font-size: 15px; font-weight: bold; color: #1f2937;")
        self.priority_badge = badge()
        header.addWidget(self.name_label, stretch=1)
        header.addWidget(self.priority_badge)
        layout.addLayout(header)

        self.description_label = QLabel()
        self.description_label.setWordWrap(True)
        self.description_label.setStyleSheet("color: #4b5563;")
        layout.addWidget(self.description_label)

        self.time_slot_label = QLabel()
        self.time_slot_label.setStyleSheet("color: #4b5563;")
        layout.addWidget(self.time_slot_label)

        status_row = QHBoxLayout()
        status_row.addWidget(QLabel("Queue Status"))
        status_row.addStretch()
        self.queue_label = QLabel()
        self.queue_label.setStyleSheet("font-weight: 600;")
        status_row.addWidget(self.queue_label)
        layout.addLayout(status_row)

        self.progress = QProgressBar()
        self.progress.setRange(0, 100)
        self.progress.setTextVisible(False)
        self.progress.setFixedHeight(8)
        layout.addWidget(self.progress)

        self.alert = alert_label("Queue nearly full!")
        layout.addWidget(self.alert)

        self.generate_button = QPushButton()
        self.generate_button.setMinimumHeight(34)
        self.generate_button.clicked.connect(self._on_generate_clicked)
        layout.addWidget(self.generate_button)

    def update_service(self, service):
        self.service = service
        percentage = capacity_percentage(service)
        reason = rejection_reason(service)

        marker = "▶" if service.is_active else "⏸"
        self.name_label.setText(f"{service.name}  {marker}")
        self.priority_badge.setText(service.priority.value)
        paint_badge(self.priority_badge, PRIORITY_COLORS[service.priority])
        self.description_label.setText(service.description)
        self.time_slot_label.setText(service.time_slot)
        self.queue_label.setText(f"{service.current_queue} / {service.max_capacity}")

        self.progress.setValue(int(min(percentage, 100.0)))
        self.progress.setStyleSheet(progress_style(status_label(percentage)))
        self.alert.setVisible(is_near_full(service))

        self.generate_button.setText(BUTTON_TEXT[reason])
        self.generate_button.setEnabled(reason is None)

        background = "#fff7ed" if service.is_active else "#f3f4f6"
        self.setStyleSheet(f"ServiceCard {{ background: {background}; border-radius: 10px; }}")

    def _on_generate_clicked(self):
        self.generate_requested.emit(self.service.service_id)
