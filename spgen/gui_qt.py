"""
Tabbed Qt GUI for the Secure Password Generator.

Tabs:
- Generator: configurable password generator with strength meter
- Analyzer: live strength meter for a typed or pasted password
- About: password hygiene recommendations
"""

from __future__ import annotations

import sys
from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QFont, QGuiApplication
from PySide6.QtWidgets import (
    QApplication,
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QGridLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QLineEdit,
    QCheckBox,
    QComboBox,
    QGroupBox,
    QMessageBox,
    QTabWidget,
    QProgressBar,
    QTextEdit,
)

from .config import (
    DEFAULT_CONFIG,
    MAX_LENGTH,
    MIN_LENGTH,
    PRESETS,
    SECURITY_RECOMMENDATIONS,
    PasswordConfig,
    validate_config,
)
from .entropy import (
    MAX_SCORE,
    EntropyResult,
    analyze_password_strength,
    estimate_cracking_time,
    format_entropy,
)
from .generator import generate_password

# Strength bar colors keyed by EntropyResult.color
BAR_COLORS = {
    "red": "#ef4444",
    "orange": "#f97316",
    "yellow": "#eab308",
    "green": "#22c55e",
    "emerald": "#10b981",
}

CLIPBOARD_CLEAR_MS = 15000


# ---------- shared strength widget ----------


class StrengthMeter(QWidget):
    """
    Progress bar + label + details for one EntropyResult.
    """

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(6)

        self.bar = QProgressBar()
        self.bar.setRange(0, 100)
        self.bar.setValue(0)
        self.bar.setTextVisible(False)

        self.label = QLabel("Strength: –")
        self.label.setAlignment(Qt.AlignCenter)

        self.details = QLabel("")
        self.details.setAlignment(Qt.AlignCenter)

        layout.addWidget(self.bar)
        layout.addWidget(self.label)
        layout.addWidget(self.details)

    def show_password(self, password: str) -> EntropyResult:
        strength = analyze_password_strength(password)

        # Bar width is score / 10
        self.bar.setValue(int(strength.score * 100 / MAX_SCORE))
        self.bar.setStyleSheet(
            "QProgressBar::chunk { background-color: %s; }"
            % BAR_COLORS.get(strength.color, "#38bdf8")
        )

        if not password:
            self.label.setText("Strength: –")
            self.details.setText("")
            return strength

        self.label.setText(f"Strength: {strength.label} ({strength.score}/{MAX_SCORE})")
        self.details.setText(
            f"Entropy {format_entropy(strength.bits)} · "
            f"Length {len(password)} chars · "
            f"Est. crack time {estimate_cracking_time(strength.bits)}"
        )
        return strength


# ---------- Generator Tab ----------


class GeneratorTab(QWidget):
    """
    Generator tab: controls + password display.
    """

    CLASS_OPTIONS = (
        ("uppercase", "Uppercase Letters (A-Z)"),
        ("lowercase", "Lowercase Letters (a-z)"),
        ("numbers", "Numbers (0-9)"),
        ("symbols", "Symbols (!@#$%^&*)"),
    )
    ADVANCED_OPTIONS = (
        ("avoid_ambiguous", "Avoid ambiguous characters (I, l, 1, O, 0, o)"),
        ("require_all_types", "Require all selected types"),
        ("no_consecutive_repeat", "No consecutive repeats (aa, 00, @@)"),
        ("no_sequential", "No ascending/descending sequences (abc, 321)"),
    )

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.config = DEFAULT_CONFIG
        self.checks: dict[str, QCheckBox] = {}

        # Secure clipboard auto-clear
        self._clipboard_token: str | None = None
        self._clipboard_timer = QTimer(self)
        self._clipboard_timer.setSingleShot(True)
        self._clipboard_timer.timeout.connect(self._on_clipboard_timeout)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(16)

        layout.addWidget(self._build_password_group())
        layout.addWidget(self._build_config_group())
        layout.addWidget(self._build_status_label())

        self._load_config(self.config)
        self.on_generate_clicked()

    # -- groups --

    def _build_config_group(self) -> QGroupBox:
        group = QGroupBox("Configuration")
        layout = QVBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        preset_row = QHBoxLayout()
        preset_row.addWidget(QLabel("Preset"))
        self.preset_combo = QComboBox()
        self.preset_combo.addItem("Custom", None)
        for key, preset in PRESETS.items():
            self.preset_combo.addItem(preset.name, key)
        self.preset_combo.currentIndexChanged.connect(self.on_preset_changed)
        preset_row.addWidget(self.preset_combo, 1)
        layout.addLayout(preset_row)

        length_row = QHBoxLayout()
        length_row.addWidget(QLabel("Password length (characters)"))
        self.length_spin = QSpinBox()
        self.length_spin.setRange(MIN_LENGTH, MAX_LENGTH)
        length_row.addWidget(self.length_spin)
        layout.addLayout(length_row)

        grid = QGridLayout()
        for row, (key, text) in enumerate(self.CLASS_OPTIONS):
            grid.addWidget(self._make_check(key, text), row, 0)
        for row, (key, text) in enumerate(self.ADVANCED_OPTIONS):
            grid.addWidget(self._make_check(key, text), row, 1)
        layout.addLayout(grid)

        self.autocopy_check = QCheckBox("Auto-copy after generation")
        self.autocopy_check.setChecked(False)
        layout.addWidget(self.autocopy_check)

        group.setLayout(layout)
        return group

    def _make_check(self, key: str, text: str) -> QCheckBox:
        check = QCheckBox(text)
        self.checks[key] = check
        return check

    def _build_password_group(self) -> QGroupBox:
        group = QGroupBox("Password")
        layout = QVBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        # QTextEdit so long passwords scroll instead of being cut off
        self.password_field = QTextEdit()
        self.password_field.setReadOnly(True)
        pw_font = QFont("Consolas")
        pw_font.setPointSize(14)
        self.password_field.setFont(pw_font)
        self.password_field.setPlaceholderText("Generating password...")
        self.password_field.setLineWrapMode(QTextEdit.NoWrap)
        self.password_field.setVerticalScrollBarPolicy(Qt.ScrollBarAlwaysOff)
        self.password_field.setFixedHeight(48)

        buttons_row = QHBoxLayout()
        buttons_row.addStretch()
        self.generate_button = QPushButton("Generate")
        gen_font = self.generate_button.font()
        gen_font.setBold(True)
        self.generate_button.setFont(gen_font)
        self.generate_button.setCursor(Qt.PointingHandCursor)
        self.generate_button.clicked.connect(self.on_generate_clicked)
        self.copy_button = QPushButton("Copy to Clipboard")
        self.copy_button.clicked.connect(self.copy_to_clipboard)
        buttons_row.addWidget(self.generate_button)
        buttons_row.addWidget(self.copy_button)
        buttons_row.addStretch()

        self.strength_meter = StrengthMeter()

        layout.addWidget(self.password_field)
        layout.addLayout(buttons_row)
        layout.addWidget(self.strength_meter)

        group.setLayout(layout)
        return group

    def _build_status_label(self) -> QLabel:
        self.status_label = QLabel("")
        self.status_label.setAlignment(Qt.AlignCenter)
        return self.status_label

    # -- config <-> widgets --

    def _load_config(self, config: PasswordConfig) -> None:
        self.length_spin.setValue(config.length)
        for key, check in self.checks.items():
            check.setChecked(getattr(config, key))

    def current_config(self) -> PasswordConfig:
        values = {key: check.isChecked() for key, check in self.checks.items()}
        return self.config.with_overrides(length=self.length_spin.value(), **values)

    # -- actions --

    def on_preset_changed(self, index: int) -> None:
        key = self.preset_combo.itemData(index)
        if key is None:
            return
        preset_config = PRESETS[key].config
        # Presets only set length and classes; keep the advanced options.
        self._load_config(
            self.current_config().with_overrides(
                length=max(MIN_LENGTH, preset_config.length),
                uppercase=preset_config.uppercase,
                lowercase=preset_config.lowercase,
                numbers=preset_config.numbers,
                symbols=preset_config.symbols,
            )
        )
        self.on_generate_clicked()

    def on_generate_clicked(self) -> None:
        config = self.current_config()

        validation = validate_config(config)
        if not validation.valid:
            self._show_error("\n".join(validation.errors))
            return

        self.config = config
        password = generate_password(config)
        self.password_field.setPlainText(password)
        self.strength_meter.show_password(password)
        self.status_label.setText(
            f"Generated {len(password)} characters."
        )

        if self.autocopy_check.isChecked():
            self.copy_to_clipboard(show_message=False)

    def _arm_secure_clipboard(self, copied: str, timeout_ms: int = CLIPBOARD_CLEAR_MS) -> None:
        """
        Start a timer to clear the clipboard after a short interval.

        `copied` is the exact text we placed, so only that is cleared.
        """
        self._clipboard_token = copied
        self._clipboard_timer.start(timeout_ms)

    def _on_clipboard_timeout(self) -> None:
        """
        Clear clipboard if it still holds a value we placed.
        """
        if not self._clipboard_token:
            return

        cb = QGuiApplication.clipboard()
        cleared = cb.text() == self._clipboard_token
        if cleared:
            cb.clear()

        self._clipboard_token = None
        if cleared:
            self.status_label.setText("Clipboard cleared for safety.")

    def copy_to_clipboard(self, show_message: bool = True) -> None:
        password = self.password_field.toPlainText()
        if not password:
            self._show_error("No password to copy. Generate one first.")
            return

        QGuiApplication.clipboard().setText(password)
        self._arm_secure_clipboard(password)

        if show_message:
            self.status_label.setText(
                "Password copied to clipboard (auto-clear in a few seconds)."
            )

    def _show_error(self, message: str) -> None:
        self.status_label.setText(message)
        msg = QMessageBox(self)
        msg.setWindowTitle("Error")
        msg.setIcon(QMessageBox.Critical)
        msg.setText(message)
        msg.exec()


# ---------- Analyzer Tab ----------


class AnalyzerTab(QWidget):
    """
    Type or paste any password to see how it scores.
    """

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(12)

        intro = QLabel(
            "Nothing typed here leaves this window. The score only looks at "
            "the characters of the password itself."
        )
        intro.setWordWrap(True)
        layout.addWidget(intro)

        row = QHBoxLayout()
        row.addWidget(QLabel("Password:"))
        self.password_edit = QLineEdit()
        self.password_edit.setEchoMode(QLineEdit.Password)
        row.addWidget(self.password_edit, 1)
        self.show_check = QCheckBox("Show")
        self.show_check.toggled.connect(self.on_show_toggled)
        row.addWidget(self.show_check)
        layout.addLayout(row)

        self.strength_meter = StrengthMeter()
        layout.addWidget(self.strength_meter)
        layout.addStretch(1)

        self.password_edit.textChanged.connect(self._update_state)

    def on_show_toggled(self, checked: bool) -> None:
        self.password_edit.setEchoMode(
            QLineEdit.Normal if checked else QLineEdit.Password
        )

    def _update_state(self) -> None:
        self.strength_meter.show_password(self.password_edit.text())


# ---------- About Tab ----------


class AboutTab(QWidget):
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(10)

        title = QLabel("Secure Password Generator")
        title_font = title.font()
        title_font.setPointSize(14)
        title_font.setBold(True)
        title.setFont(title_font)
        layout.addWidget(title)

        about = QLabel(
            "Passwords are drawn from the operating system's cryptographically "
            "secure random source. Nothing is stored or sent anywhere."
        )
        about.setWordWrap(True)
        layout.addWidget(about)

        tips = QLabel("\n".join(f"• {tip}" for tip in SECURITY_RECOMMENDATIONS))
        tips.setWordWrap(True)
        layout.addWidget(tips)

        layout.addStretch(1)


class SecurePassWindow(QMainWindow):
    def __init__(self) -> None:
        super().__init__()

        self.setWindowTitle("Secure Password Generator")
        self.setMinimumSize(640, 620)
        self.resize(640, 620)

        self._apply_base_style()

        self.tabs = QTabWidget()
        self.generator_tab = GeneratorTab()
        self.analyzer_tab = AnalyzerTab()
        self.about_tab = AboutTab()

        self.tabs.addTab(self.generator_tab, "Generator")
        self.tabs.addTab(self.analyzer_tab, "Analyzer")
        self.tabs.addTab(self.about_tab, "About")

        self.setCentralWidget(self.tabs)

    def _apply_base_style(self) -> None:
        self.setStyleSheet(
            """
            QMainWindow {
                background-color: #05070c;
            }
            QWidget {
                color: #e5e7eb;
                background-color: #05070c;
                font-family: Segoe UI, Arial, sans-serif;
            }
            QGroupBox {
                border: 1px solid #1f2933;
                border-radius: 10px;
                margin-top: 16px;
                background-color: #080b12;
            }
            QGroupBox::title {
                subcontrol-origin: margin;
                subcontrol-position: top left;
                padding: 2px 8px;
                color: #7dd3fc;
                font-weight: 600;
            }
            QLineEdit, QTextEdit, QSpinBox, QComboBox {
                border: 1px solid #1f2933;
                border-radius: 6px;
                padding: 4px 6px;
                background-color: #050810;
            }
            QPushButton {
                border-radius: 8px;
                padding: 6px 14px;
                background-color: #0b1120;
                border: 1px solid #38bdf8;
            }
            QPushButton:hover {
                background-color: #020617;
            }
            QProgressBar {
                border: 1px solid #1f2933;
                border-radius: 4px;
                height: 8px;
            }
            """
        )


def main() -> None:
    app = QApplication(sys.argv)
    window = SecurePassWindow()
    window.show()
    sys.exit(app.exec())
