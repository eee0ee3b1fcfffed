import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402  (platform must be set first)

from temple.config import Settings  # noqa: E402
from temple.domain import Priority, Service  # noqa: E402
from temple.store import ResetQueues, ServiceStore  # noqa: E402
from ui.widgets.settings_panel import SettingsPanel  # noqa: E402
from ui.widgets.token_generator import TokenGeneratorPanel  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


def _store():
    services = [
        Service("open", "Darshan", "", 10, 3, True, "", Priority.HIGH),
        Service("full", "Abhishekam", "", 2, 2, True, "", Priority.MEDIUM),
    ]
    return ServiceStore(services)


def _draw(panel, service_id):
    panel.service_combo.setCurrentIndex(panel.service_combo.findData(service_id))
    panel._on_generate_clicked()
    if panel.is_generating():
        panel._draw_timer.stop()
        panel._complete_draw()


def test_reset_hides_last_token(qapp):
    store = _store()
    panel = TokenGeneratorPanel(store, draw_delay_ms=0)

    _draw(panel, "open")
    assert not panel.token_group.isHidden()
    assert panel.token_label.text() == store.last_token.token_code

    store.dispatch(ResetQueues())
    panel.update_from_snapshot(store.get_snapshot())

    assert panel.token_group.isHidden()
    assert panel.token_label.text() == ""


def test_full_queue_emits_rejection(qapp):
    store = _store()
    panel = TokenGeneratorPanel(store, draw_delay_ms=0)
    rejections = []
    panel.token_rejected.connect(lambda service_id, reason: rejections.append((service_id, reason)))

    _draw(panel, "full")

    assert rejections == [("full", "QueueFull")]
    assert panel.message_label.text() == "This service has reached maximum capacity."
    assert store.get("full").current_queue == 2


def test_settings_panel_emits_draw_delay_and_reset(qapp):
    panel = SettingsPanel(Settings(_env_file=None, draw_delay_ms=500))
    delays, resets = [], []
    panel.draw_delay_changed.connect(delays.append)
    panel.reset_requested.connect(lambda: resets.append(True))

    assert panel.draw_delay_spin.value() == 500
    panel.draw_delay_spin.setValue(1000)
    panel.reset_button.click()

    assert delays == [1000]
    assert resets == [True]
