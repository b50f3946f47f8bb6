"""Tests for the main window hosting the converter form."""

import pytest
from unittest.mock import patch

from tempconv.core import FormMode
from tempconv.gui.main_window import MainWindow
from tempconv.gui.models.settings import SettingsStore
from tempconv.gui.styles.theme import is_dark_mode


@pytest.fixture
def settings(settings_path):
    return SettingsStore(settings_path)


@pytest.fixture
def window(qtbot, settings):
    win = MainWindow(settings)
    qtbot.addWidget(win)
    return win


class TestLifecycle:

    def test_window_owns_a_fresh_form_state(self, window):
        assert window.form.state is window.form_state
        assert window.form_state.mode is FormMode.CELSIUS_IS_SOURCE

    def test_each_window_has_its_own_state(self, qtbot, settings):
        first = MainWindow(settings)
        second = MainWindow(settings)
        qtbot.addWidget(first)
        qtbot.addWidget(second)
        first.form.flip()
        assert second.form_state.mode is FormMode.CELSIUS_IS_SOURCE

    def test_close_saves_layout(self, window, settings_path):
        window.close()
        reloaded = SettingsStore(settings_path)
        assert reloaded.get_window_geometry() is not None
        assert reloaded.get_splitter_state() is not None


class TestStatusBar:

    def test_initial_direction(self, window):
        assert window.status_bar.currentMessage() == "Converting Celsius to Fahrenheit"

    def test_shows_result_after_convert(self, window):
        window.form.celsius_field.setText("100")
        window.form.convert()
        assert window.status_bar.currentMessage() == "100.0 °C = 212.0 °F"

    def test_shows_direction_after_flip(self, window):
        window.form.flip()
        assert window.status_bar.currentMessage() == "Converting Fahrenheit to Celsius"

    def test_shows_error_after_invalid_input(self, window):
        with patch("tempconv.gui.widgets.converter_form.QMessageBox"):
            window.form._on_convert_clicked()
        assert "empty" in window.status_bar.currentMessage()

    def test_reset_form_restores_default_direction(self, window):
        window.form.flip()
        window._reset_form()
        assert window.form_state.mode is FormMode.CELSIUS_IS_SOURCE
        assert window.status_bar.currentMessage() == "Converting Celsius to Fahrenheit"


class TestConsoleLogging:

    def test_conversion_is_logged_to_console(self, window):
        window.form.celsius_field.setText("0")
        window.form.convert()
        window._drain_log_queue()
        assert "Converted 0.0 °C -> 32.0 °F" in window.console.text_edit.toPlainText()

    def test_flip_is_logged_to_console(self, window):
        window.form.flip()
        window._drain_log_queue()
        assert "Direction flipped: °F -> °C" in window.console.text_edit.toPlainText()

    def test_invalid_input_is_logged_as_warning(self, window):
        window.form.celsius_field.setText("abc")
        with patch("tempconv.gui.widgets.converter_form.QMessageBox"):
            window.form._on_convert_clicked()
        window._drain_log_queue()
        assert "[WARNING] Invalid temperature 'abc'" in window.console.text_edit.toPlainText()

    def test_debug_diagnostics_reach_console(self, window):
        window.form.celsius_field.setText("10")
        window.form._on_convert_clicked()
        window.form._on_flip_clicked()
        window._drain_log_queue()
        text = window.console.text_edit.toPlainText()
        assert "Main window created" in text
        assert "[INFO] convert trigger finished" in text
        assert "[INFO] flip trigger finished" in text

    def test_clear_console(self, window):
        window.console.append_log("INFO", "x")
        window._clear_console()
        assert window.console.text_edit.toPlainText() == ""


class TestTheme:

    def test_toggle_theme_persists_and_applies(self, window, settings_path):
        window._toggle_theme(True)
        assert is_dark_mode()
        assert SettingsStore(settings_path).get_dark_mode()

        window._toggle_theme(False)
        assert not is_dark_mode()

    def test_windows_sharing_settings_follow_dark_mode(self, qtbot, window, settings):
        other = MainWindow(settings)
        qtbot.addWidget(other)
        window._toggle_theme(True)
        assert other.dark_mode_action.isChecked()

    def test_dark_mode_restored_from_settings(self, qtbot, settings):
        settings.set_dark_mode(True)
        win = MainWindow(settings)
        qtbot.addWidget(win)
        assert win.dark_mode_action.isChecked()
        assert is_dark_mode()
