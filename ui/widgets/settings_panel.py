from PyQt6.QtCore import pyqtSignal, Qt
from PyQt6.QtWidgets import (
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)


def _format_label(text: str) -> QLabel:
    label = QLabel(text)
    label.setStyleSheet("font-weight: bold; color: #102a43;")
    return label


class SettingsPanel(QWidget):
    """Temple settings: lucky-dip timing and a reset of all queues."""

    draw_delay_changed = pyqtSignal(int)
    reset_requested = pyqtSignal()

    def __init__(self, settings, parent=None):
        super().__init__(parent)
        self.settings = settings
        self._build_ui()
        self._sync_with_settings()

    def _build_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(12)

        header = QLabel("Temple Settings")
        header.setStyleSheet("font-size: 18px; font-weight: bold;")
        helper = QLabel("Configure service timings and crowd management parameters.")
        helper.setWordWrap(True)
        layout.addWidget(header)
        layout.addWidget(helper)

        parameters_group = QGroupBox("Lucky dip")
        form_layout = QFormLayout()
        form_layout.setFormAlignment(form_layout.formAlignment() | Qt.AlignmentFlag.AlignLeft)
        form_layout.setHorizontalSpacing(12)

        self.draw_delay_spin = QSpinBox()
        self.draw_delay_spin.setRange(0, 10000)
        self.draw_delay_spin.setSingleStep(250)
        self.draw_delay_spin.setSuffix(" ms")
        self.draw_delay_spin.setToolTip("Pause before the drawn token is revealed")
        self.draw_delay_spin.valueChanged.connect(self._on_draw_delay_changed)

        form_layout.addRow(_format_label("Draw animation"), self.draw_delay_spin)
        parameters_group.setLayout(form_layout)
        layout.addWidget(parameters_group)

        actions_group = QGroupBox("Queues")
        button_row = QHBoxLayout()
        self.reset_button = QPushButton("Reset queues")
        self.reset_button.setMinimumHeight(38)
        self.reset_button.clicked.connect(self.reset_requested.emit)
        button_row.addWidget(self.reset_button)
        button_row.addStretch()
        actions_group.setLayout(button_row)
        layout.addWidget(actions_group)
        layout.addStretch()

    def _sync_with_settings(self):
        try:
            block = self.draw_delay_spin.blockSignals(True)
            self.draw_delay_spin.setValue(self.settings.draw_delay_ms)
        finally:
            self.draw_delay_spin.blockSignals(block)

    def _on_draw_delay_changed(self, value: int):
        self.draw_delay_changed.emit(value)
