"""Smoke tests for the Qt shell, run on the offscreen platform."""

from __future__ import annotations

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from spgen import gui_qt  # noqa: E402
from spgen.config import DEFAULT_CONFIG  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def window(qapp):
    win = gui_qt.SecurePassWindow()
    yield win
    win.close()


def test_generator_starts_with_password(window):
    password = window.generator_tab.password_field.toPlainText()
    assert len(password) == DEFAULT_CONFIG.length


def test_generate_uses_widget_values(window):
    tab = window.generator_tab
    tab.length_spin.setValue(24)
    tab.checks["symbols"].setChecked(False)
    tab.on_generate_clicked()
    password = tab.password_field.toPlainText()
    assert len(password) == 24
    assert password.isalnum()
    assert tab.config.length == 24


def test_invalid_config_reports_error(window, monkeypatch):
    tab = window.generator_tab
    errors = []
    monkeypatch.setattr(tab, "_show_error", errors.append)
    before = tab.password_field.toPlainText()
    for key in ("uppercase", "lowercase", "numbers", "symbols"):
        tab.checks[key].setChecked(False)
    tab.on_generate_clicked()
    assert errors == ["At least one character type must be selected"]
    assert tab.password_field.toPlainText() == before


def test_preset_selection_sets_classes(window):
    tab = window.generator_tab
    index = tab.preset_combo.findData("wifi")
    tab.preset_combo.setCurrentIndex(index)
    assert tab.length_spin.value() == 20
    assert not tab.checks["symbols"].isChecked()
    assert tab.password_field.toPlainText().isalnum()


def test_analyzer_updates_live(window):
    tab = window.analyzer_tab
    tab.password_edit.setText("pass123")
    assert "Weak" in tab.strength_meter.label.text()
    tab.password_edit.setText("")
    assert tab.strength_meter.label.text() == "Strength: –"


class TestClipboard:
    @pytest.fixture
    def clipboard(self, qapp):
        from PySide6.QtGui import QGuiApplication

        cb = QGuiApplication.clipboard()
        cb.clear()
        yield cb
        cb.clear()

    def test_copy_puts_password_on_clipboard(self, window, clipboard):
        tab = window.generator_tab
        tab.copy_to_clipboard()
        assert clipboard.text() == tab.password_field.toPlainText()
        assert tab._clipboard_timer.isActive()

    def test_timeout_clears_copied_password(self, window, clipboard):
        tab = window.generator_tab
        tab.copy_to_clipboard()
        tab._on_clipboard_timeout()
        assert clipboard.text() == ""
        assert tab.status_label.text() == "Clipboard cleared for safety."

    def test_timeout_clears_after_regenerate(self, window, clipboard):
        tab = window.generator_tab
        tab.copy_to_clipboard()
        copied = clipboard.text()
        tab.on_generate_clicked()
        assert tab.password_field.toPlainText() != copied
        tab._on_clipboard_timeout()
        assert clipboard.text() == ""

    def test_timeout_leaves_foreign_clipboard_content(self, window, clipboard):
        tab = window.generator_tab
        tab.copy_to_clipboard()
        clipboard.setText("something the user copied later")
        tab._on_clipboard_timeout()
        assert clipboard.text() == "something the user copied later"

    def test_auto_copy_after_generation(self, window, clipboard):
        tab = window.generator_tab
        tab.autocopy_check.setChecked(True)
        tab.on_generate_clicked()
        assert clipboard.text() == tab.password_field.toPlainText()
        assert tab._clipboard_timer.isActive()

    def test_no_auto_copy_by_default(self, window, clipboard):
        tab = window.generator_tab
        assert not tab.autocopy_check.isChecked()
        tab.on_generate_clicked()
        assert clipboard.text() == ""
