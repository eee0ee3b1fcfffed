from PyQt6.QtCore import QTimer, pyqtSignal
from PyQt6.QtWidgets import (
    QComboBox,
    QFrame,
    QGridLayout,
    QGroupBox,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from temple.domain import (
    REJECTION_MESSAGES,
    RejectionReason,
    TokenIssued,
    estimated_wait_minutes,
    rejection_reason,
)
from temple.store import IssueToken

from .badges import PRIORITY_COLORS, badge, paint_badge

ERROR_STYLE = "color: #b91c1c; font-weight: 600;"
SUCCESS_STYLE = "color: #15803d; font-weight: 600;"


class TokenGeneratorPanel(QWidget):
    """Lucky dip: pick an active service and draw a token for it."""

    token_issued = pyqtSignal(str, str)      # token code, service id
    token_rejected = pyqtSignal(str, str)    # service id, reason

    def __init__(self, store, draw_delay_ms: int = 2000, parent=None):
        super().__init__(parent)
        self.store = store
        self._draw_delay_ms = max(int(draw_delay_ms), 0)
        self._pending_service_id = None

        self._draw_timer = QTimer(self)
        self._draw_timer.setSingleShot(True)
        self._draw_timer.timeout.connect(self._complete_draw)

        self._build_ui()
        self.sync_once()

    def _build_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(12)

        title = QLabel("✨ Lucky Dip Token Generator ✨")
        title.setStyleSheet("font-size: 20px; font-weight: bold; color: #9a3412;")
        helper = QLabel("Generate your token for temple services through a fair lucky dip.")
        helper.setStyleSheet("color: #c2410c;")
        layout.addWidget(title)
        layout.addWidget(helper)

        layout.addWidget(QLabel("Select Service (Sava)"))
        self.service_combo = QComboBox()
        self.service_combo.setPlaceholderText("Choose a temple service")
        self.service_combo.currentIndexChanged.connect(self._refresh_details)
        layout.addWidget(self.service_combo)

        self.details_frame = QFrame()
        self.details_frame.setFrameShape(QFrame.Shape.StyledPanel)
        details = QVBoxLayout(self.details_frame)
        self.details_name = QLabel()
        self.details_name.setStyleSheet("font-weight: bold;")
        self.details_priority = badge()
        self.details_description = QLabel()
        self.details_description.setWordWrap(True)
        self.details_info = QLabel()
        self.details_info.setStyleSheet("color: #6b7280;")
        for widget in (
            self.details_name,
            self.details_priority,
            self.details_description,
            self.details_info,
        ):
            details.addWidget(widget)
        layout.addWidget(self.details_frame)

        self.generate_button = QPushButton("🎫 Generate Lucky Token")
        self.generate_button.setMinimumHeight(44)
        self.generate_button.clicked.connect(self._on_generate_clicked)
        layout.addWidget(self.generate_button)

        self.message_label = QLabel()
        self.message_label.setWordWrap(True)
        layout.addWidget(self.message_label)

        self.token_group = QGroupBox("Your Lucky Token")
        token_layout = QVBoxLayout()
        self.token_label = QLabel()
        self.token_label.setStyleSheet("font-size: 30px; font-weight: bold; color: #15803d;")
        token_layout.addWidget(self.token_label)
        token_layout.addWidget(
            QLabel("Please save this token number and proceed to the service counter.")
        )
        self.token_group.setLayout(token_layout)
        self.token_group.setVisible(False)
        layout.addWidget(self.token_group)

        stats = QGridLayout()
        self.stat_labels = {}
        for column, (key, caption) in enumerate(
            [
                ("active_services", "Active Services"),
                ("total_waiting", "Total Queue"),
                ("average_wait_minutes", "Avg. Wait Time"),
            ]
        ):
            value = QLabel("–")
            value.setStyleSheet("font-size: 18px; font-weight: bold;")
            stats.addWidget(value, 0, column)
            stats.addWidget(QLabel(caption), 1, column)
            self.stat_labels[key] = value
        layout.addLayout(stats)
        layout.addStretch()

    # ---- public API ----

    def set_draw_delay(self, delay_ms: int):
        self._draw_delay_ms = max(int(delay_ms), 0)

    def is_generating(self) -> bool:
        return self._pending_service_id is not None

    def sync_once(self):
        self.update_from_snapshot(self.store.get_snapshot())

    def update_from_snapshot(self, snapshot):
        selected = self.service_combo.currentData()
        block = self.service_combo.blockSignals(True)
        try:
            self.service_combo.clear()
            for service in snapshot.services:
                if not service.is_active:
                    continue
                self.service_combo.addItem(
                    f"{service.name}  ({service.current_queue}/{service.max_capacity})",
                    service.service_id,
                )
            index = self.service_combo.findData(selected) if selected is not None else -1
            self.service_combo.setCurrentIndex(index)
        finally:
            self.service_combo.blockSignals(block)

        summary = snapshot.summary
        for key, label in self.stat_labels.items():
            value = summary.get(key)
            if value is None:
                label.setText("–")
            elif key == "average_wait_minutes":
                label.setText(f"{value} min")
            else:
                label.setText(str(value))

        # A reset clears the store's last token.
        if snapshot.last_token is None:
            self.token_label.clear()
            self.token_group.setVisible(False)

        self._refresh_details()

    # ---- internals ----

    def _refresh_details(self, *_):
        service_id = self.service_combo.currentData()
        service = self.store.get(service_id) if service_id is not None else None
        self.details_frame.setVisible(service is not None)
        if service is None:
            return

        self.details_name.setText(service.name)
        self.details_priority.setText(f"{service.priority.value} priority")
        paint_badge(self.details_priority, PRIORITY_COLORS[service.priority])
        self.details_description.setText(service.description)
        self.details_info.setText(
            f"Time: {service.time_slot}\n"
            f"Current Queue: {service.current_queue} / {service.max_capacity}\n"
            f"Estimated Wait: {estimated_wait_minutes(service.current_queue)} minutes"
        )

    def _on_generate_clicked(self):
        if self.is_generating():
            return

        service_id = self.service_combo.currentData()
        if service_id is None:
            self._show_message("Please select a service: choose a sava to generate a token for.", ERROR_STYLE)
            return

        service = self.store.get(service_id)
        reason = RejectionReason.NOT_FOUND if service is None else rejection_reason(service)
        if reason is not None:
            self._reject(service_id, reason)
            return

        self._pending_service_id = service_id
        self.generate_button.setEnabled(False)
        self.generate_button.setText("Generating Lucky Token...")
        self.message_label.clear()
        self._draw_timer.start(self._draw_delay_ms)

    def _complete_draw(self):
        service_id = self._pending_service_id
        self._pending_service_id = None
        self.generate_button.setEnabled(True)
        self.generate_button.setText("🎫 Generate Lucky Token")
        if service_id is None:
            return

        # State may have changed while the draw was running.
        result = self.store.dispatch(IssueToken(service_id))
        if isinstance(result, TokenIssued):
            service = self.store.get(service_id)
            self.token_label.setText(result.token_code)
            self.token_group.setVisible(True)
            self._show_message(
                f"Token generated! Your lucky token: {result.token_code} for {service.name}",
                SUCCESS_STYLE,
            )
            self.token_issued.emit(result.token_code, service_id)
        else:
            self._reject(service_id, result.reason)

    def _reject(self, service_id, reason: RejectionReason):
        self._show_message(REJECTION_MESSAGES[reason], ERROR_STYLE)
        self.token_rejected.emit(service_id, reason.value)

    def _show_message(self, text: str, style: str):
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)
