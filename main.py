"""
CryptoTool — Main Entry Point & PyQt6 GUI

Tabs
────
1. Algorithms  – registered ciphers and their key requirements
2. Text        – encrypt/decrypt text, AES key size, key generation
3. Files       – encrypt/decrypt files (.enc)
4. Logs        – live scrolling log output

One CipherManager is shared by every tab and is only touched from the
Qt main thread, so the AES key size needs no extra locking.
"""

import sys
import logging

from PyQt6.QtWidgets import (
    QApplication, QMainWindow, QTabWidget, QLabel, QStatusBar,
)

from config.settings import Settings
from core.cipher_engine import CipherManager
from utils.log_setup import setup_logging

from GUI.home            import AlgorithmsOverviewUI
from GUI.text_encryption import TextEncryptionUI
from GUI.file_encryption import FileEncryptionUI
from GUI.logs_monitoring import QtLogHandler, LogsMonitoringUI

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Style Constants
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

STYLE_SHEET = """
QMainWindow, QWidget {
    background-color: #1e1e2e;
    color: #cdd6f4;
}
QTabBar::tab {
    background-color: #313244;
    color: #cdd6f4;
    padding: 8px 20px;
    margin-right: 2px;
    border-top-left-radius: 6px;
    border-top-right-radius: 6px;
}
QTabBar::tab:selected {
    background-color: #45475a;
    color: #89b4fa;
    font-weight: bold;
}
QGroupBox {
    color: #89b4fa;
    border: 1px solid #45475a;
    border-radius: 8px;
    margin-top: 12px;
    padding-top: 16px;
    font-weight: bold;
}
QGroupBox::title {
    subcontrol-origin: margin;
    left: 12px;
    padding: 0 6px;
}
QPushButton {
    background-color: #89b4fa;
    color: #1e1e2e;
    border: none;
    padding: 8px 18px;
    border-radius: 6px;
    font-weight: bold;
}
QPushButton:hover {
    background-color: #74c7ec;
}
QPushButton:disabled {
    background-color: #45475a;
    color: #6c7086;
}
QPushButton[danger="true"] {
    background-color: #f38ba8;
}
QLineEdit, QComboBox {
    background-color: #313244;
    color: #cdd6f4;
    border: 1px solid #45475a;
    border-radius: 5px;
    padding: 6px;
}
QTextEdit, QPlainTextEdit {
    background-color: #11111b;
    color: #a6e3a1;
    border: 1px solid #313244;
    border-radius: 5px;
    font-family: 'Consolas', 'Courier New', monospace;
    font-size: 12px;
}
QHeaderView::section {
    background-color: #313244;
    color: #89b4fa;
    padding: 6px;
    border: 1px solid #45475a;
    font-weight: bold;
}
QStatusBar {
    background-color: #181825;
    color: #a6adc8;
}
"""


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Main Window
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class MainWindow(QMainWindow):
    def __init__(self, manager: CipherManager | None = None):
        super().__init__()
        self.manager = manager or CipherManager()
        self.log_handler = QtLogHandler()
        logging.getLogger().addHandler(self.log_handler)

        self.logger = logging.getLogger("CryptoTool.Main")

        self._init_window()
        self._init_tabs()
        self._init_status_bar()

        self.logger.info(
            "%s v%s started", Settings.APP_NAME, Settings.APP_VERSION
        )

    def _init_window(self):
        self.setWindowTitle(
            f"{Settings.APP_NAME} — Text & File Encryption"
        )
        self.setMinimumSize(900, 650)
        self.resize(1100, 780)

    def _init_tabs(self):
        self.tabs = QTabWidget()
        self.setCentralWidget(self.tabs)

        self.tab_overview = AlgorithmsOverviewUI(self.manager)
        self.tab_text     = TextEncryptionUI(self.manager)
        self.tab_files    = FileEncryptionUI(self.manager)
        self.tab_logs     = LogsMonitoringUI(self.log_handler)

        self.tabs.addTab(self.tab_overview, "📊 Algorithms")
        self.tabs.addTab(self.tab_text,     "🔐 Text")
        self.tabs.addTab(self.tab_files,    "📁 Files")
        self.tabs.addTab(self.tab_logs,     "📝 Logs")

        # AES key size lives on the shared manager
        self.tab_text.key_size_changed.connect(
            lambda _: self.tab_overview.refresh()
        )
        self.tab_text.key_size_changed.connect(
            lambda _: self.tab_files.refresh_key_hint()
        )

    def _init_status_bar(self):
        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)
        self.status_label = QLabel("Ready")
        self.status_bar.addPermanentWidget(self.status_label)

        self.tab_text.status_message.connect(self._update_status)
        self.tab_files.status_message.connect(self._update_status)

    def _update_status(self, msg: str):
        self.status_label.setText(msg)
        self.logger.info("Status: %s", msg)

    # ── clean shutdown ───────────────────────────────────────────
    def closeEvent(self, event):
        self.logger.info("Shutting down…")
        logging.getLogger().removeHandler(self.log_handler)
        event.accept()


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Entry Point
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def main():
    setup_logging()

    app = QApplication(sys.argv)
    app.setApplicationName(Settings.APP_NAME)
    app.setApplicationVersion(Settings.APP_VERSION)
    app.setStyleSheet(STYLE_SHEET)

    window = MainWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
