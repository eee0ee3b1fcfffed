"""Main application window assembling all widgets."""

from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QScrollArea,
    QTabWidget,
    QVBoxLayout,
    QWidget,
)

from temple.domain import REJECTION_MESSAGES, RejectionReason, TokenIssued
from temple.store import IssueToken, ResetQueues

from .widgets.dashboard_panel import DashboardPanel
from .widgets.queue_monitor import QueueMonitorPanel
from .widgets.settings_panel import SettingsPanel
from .widgets.token_generator import TokenGeneratorPanel

HEADER_STYLE = "background: #ea580c; color: white;"
HEADER_BADGE_STYLE = (
    "background: rgba(255, 255, 255, 60); color: white; border-radius: 8px; padding: 4px 10px;"
)


def _scrollable(widget: QWidget) -> QScrollArea:
    area = QScrollArea()
    area.setWidgetResizable(True)
    area.setWidget(widget)
    return area


class MainWindow(QMainWindow):
    def __init__(self, store, settings, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Temple Crowd Management System")
        self.store = store
        self.settings = settings

        self._build_ui()
        self.store.subscribe(self._on_store_changed)
        self._on_store_changed(self.store.get_snapshot())

    def _build_ui(self):
        central = QWidget()
        self.setCentralWidget(central)

        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        layout.addWidget(self._build_header())

        self.tabs = QTabWidget()
        self.dashboard_panel = DashboardPanel()
        self.token_generator = TokenGeneratorPanel(self.store, self.settings.draw_delay_ms)
        self.queue_monitor = QueueMonitorPanel()
        self.settings_panel = SettingsPanel(self.settings)

        self.tabs.addTab(_scrollable(self.dashboard_panel), "Dashboard")
        self.tabs.addTab(_scrollable(self.token_generator), "Generate Token")
        self.tabs.addTab(_scrollable(self.queue_monitor), "Monitor Queue")
        self.tabs.addTab(self.settings_panel, "Settings")
        layout.addWidget(self.tabs, stretch=1)

        self.dashboard_panel.generate_requested.connect(self._on_card_generate_requested)
        self.token_generator.token_issued.connect(self._on_token_issued)
        self.token_generator.token_rejected.connect(self._on_token_rejected)
        self.settings_panel.draw_delay_changed.connect(self.token_generator.set_draw_delay)
        self.settings_panel.reset_requested.connect(self._on_reset_requested)

    def _build_header(self) -> QWidget:
        header = QWidget()
        header.setStyleSheet(HEADER_STYLE)
        row = QHBoxLayout(header)
        row.setContentsMargins(16, 12, 16, 12)

        titles = QVBoxLayout()
        title = QLabel("श्री मंदिर प्रबंधन")
        title.setStyleSheet("font-size: 24px; font-weight: bold;")
        subtitle = QLabel("Temple Crowd Management System")
        titles.addWidget(title)
        titles.addWidget(subtitle)
        row.addLayout(titles, stretch=1)

        self.devotees_badge = QLabel()
        self.devotees_badge.setStyleSheet(HEADER_BADGE_STYLE)
        self.active_badge = QLabel()
        self.active_badge.setStyleSheet(HEADER_BADGE_STYLE)
        row.addWidget(self.devotees_badge)
        row.addWidget(self.active_badge)
        return header

    def _on_store_changed(self, snapshot):
        summary = snapshot.summary
        self.devotees_badge.setText(f"{summary['total_waiting']} Devotees")
        self.active_badge.setText(f"{summary['active_services']} Active Services")

        self.dashboard_panel.update_from_snapshot(snapshot)
        self.token_generator.update_from_snapshot(snapshot)
        self.queue_monitor.update_from_snapshot(snapshot)

    def _on_card_generate_requested(self, service_id: str):
        result = self.store.dispatch(IssueToken(service_id))
        if isinstance(result, TokenIssued):
            self._on_token_issued(result.token_code, service_id)
        else:
            self.statusBar().showMessage(result.message, 5000)

    def _on_token_issued(self, token_code: str, service_id: str):
        service = self.store.get(service_id)
        name = service.name if service is not None else service_id
        self.statusBar().showMessage(f"Token {token_code} issued for {name}", 5000)

    def _on_token_rejected(self, service_id: str, reason: str):
        self.statusBar().showMessage(REJECTION_MESSAGES[RejectionReason(reason)], 5000)

    def _on_reset_requested(self):
        self.store.dispatch(ResetQueues())
        self.statusBar().showMessage("Queues reset", 3000)
