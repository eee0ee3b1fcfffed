"""Convenience imports for UI widgets."""

from .dashboard_panel import DashboardPanel
from .history_plot import HistoryPlotWidget
from .queue_monitor import QueueMonitorPanel
from .service_card import ServiceCard
from .settings_panel import SettingsPanel
from .stats_panel import StatsPanel
from .token_generator import TokenGeneratorPanel

__all__ = [
    "DashboardPanel",
    "HistoryPlotWidget",
    "QueueMonitorPanel",
    "ServiceCard",
    "SettingsPanel",
    "StatsPanel",
    "TokenGeneratorPanel",
]
