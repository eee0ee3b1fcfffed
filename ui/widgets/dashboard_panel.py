from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import QGridLayout, QLabel, QVBoxLayout, QWidget

from .service_card import ServiceCard
from .stats_panel import StatsPanel

CARDS_PER_ROW = 3


class DashboardPanel(QWidget):
    """Headline statistics above a grid of service cards."""

    generate_requested = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self.cards = {}
        self._build_ui()

    def _build_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(14)

        self.stats_panel = StatsPanel()
        layout.addWidget(self.stats_panel)

        heading = QLabel("Temple Services (Savas)")
        heading.setStyleSheet("font-size: 18px; font-weight: 600; color: #1f2937;")
        layout.addWidget(heading)

        self.cards_grid = QGridLayout()
        self.cards_grid.setSpacing(12)
        layout.addLayout(self.cards_grid)
        layout.addStretch()

    def update_from_snapshot(self, snapshot):
        self.stats_panel.update_from_snapshot(snapshot)
        for index, service in enumerate(snapshot.services):
            card = self.cards.get(service.service_id)
            if card is None:
                card = ServiceCard(service)
                card.generate_requested.connect(self.generate_requested.emit)
                self.cards[service.service_id] = card
                self.cards_grid.addWidget(card, index // CARDS_PER_ROW, index % CARDS_PER_ROW)
            else:
                card.update_service(service)
