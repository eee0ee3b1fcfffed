import pyqtgraph as pg
from PyQt6.QtWidgets import QVBoxLayout, QWidget


class HistoryPlotWidget(QWidget):
    """Plots the total number of devotees waiting after each store change."""

    def __init__(self, parent=None):
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setBackground("#ffffff")
        self.plot_widget.showGrid(x=True, y=True, alpha=0.25)
        axis_pen = pg.mkPen(color="#52606d", width=1)
        for axis in ("left", "bottom"):
            ax = self.plot_widget.getAxis(axis)
            ax.setPen(axis_pen)
            ax.setTextPen(axis_pen)
        self.plot_widget.setLabel("left", "Devotees waiting")
        self.plot_widget.setLabel("bottom", "Queue updates")
        self.plot_widget.setTitle("Total queue over the session", color="#102a43")

        pen = pg.mkPen(color=(234, 88, 12), width=3)
        self._curve = self.plot_widget.plot(pen=pen, fillLevel=0, brush=(234, 88, 12, 40))
        layout.addWidget(self.plot_widget)

    def update_from_snapshot(self, snapshot):
        # The store already bounds the history length.
        totals = snapshot.history
        self._curve.setData(list(range(len(totals))), totals)
