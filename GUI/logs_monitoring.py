import logging

from PyQt6.QtWidgets import (
    QWidget, QPushButton, QCheckBox, QPlainTextEdit,
    QVBoxLayout, QHBoxLayout, QFileDialog
)
from PyQt6.QtCore import pyqtSignal, QObject
from PyQt6.QtGui import QTextCursor

from config.settings import Settings


class QtLogSignal(QObject):
    """Bridge: Python logging → Qt signal."""
    log_message = pyqtSignal(str)


class QtLogHandler(logging.Handler):
    """Logging handler that emits a Qt signal for each record."""

    def __init__(self):
        super().__init__()
        self.signal_emitter = QtLogSignal()
        self.setFormatter(logging.Formatter(
            Settings.LOG_FORMAT, datefmt=Settings.LOG_DATE_FORMAT,
        ))

    def emit(self, record):
        msg = self.format(record)
        self.signal_emitter.log_message.emit(msg)


class LogsMonitoringUI(QWidget):
    def __init__(self, log_handler: QtLogHandler, parent=None):
        super().__init__(parent)
        self.log_handler = log_handler
        self._build_ui()

    def _build_ui(self):
        layout = QVBoxLayout(self)

        toolbar = QHBoxLayout()
        self.chk_auto = QCheckBox("Auto-scroll")
        self.chk_auto.setChecked(True)
        toolbar.addWidget(self.chk_auto)

        self.btn_clear = QPushButton("🗑️  Clear")
        self.btn_clear.clicked.connect(self.clear)
        toolbar.addWidget(self.btn_clear)

        self.btn_save = QPushButton("💾  Save to File")
        self.btn_save.clicked.connect(self._save)
        toolbar.addWidget(self.btn_save)

        toolbar.addStretch()
        layout.addLayout(toolbar)

        self.txt_log = QPlainTextEdit()
        self.txt_log.setReadOnly(True)
        self.txt_log.setMaximumBlockCount(5000)
        layout.addWidget(self.txt_log)

        self.log_handler.signal_emitter.log_message.connect(
            self.append_log
        )

    def append_log(self, msg: str):
        self.txt_log.appendPlainText(msg)
        if self.chk_auto.isChecked():
            cursor = self.txt_log.textCursor()
            cursor.movePosition(QTextCursor.MoveOperation.End)
            self.txt_log.setTextCursor(cursor)

    def clear(self):
        self.txt_log.clear()

    def _save(self):
        path, _ = QFileDialog.getSaveFileName(
            self, "Save Log", "cryptotool.log", "Log Files (*.log *.txt)"
        )
        if path:
            with open(path, "w", encoding="utf-8") as f:
                f.write(self.txt_log.toPlainText())
