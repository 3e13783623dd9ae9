from PyQt6.QtWidgets import (
    QWidget, QLabel, QVBoxLayout, QGroupBox,
    QTableWidget, QTableWidgetItem, QHeaderView
)

from config.settings import Settings
from core.cipher_engine import CipherManager


class AlgorithmsOverviewUI(QWidget):
    """Landing tab: what each registered algorithm expects."""

    HEADERS = ["ID", "Name", "Key Requirements", "Base64", "Description"]

    def __init__(self, manager: CipherManager, parent=None):
        super().__init__(parent)
        self.manager = manager
        self._build_ui()
        self.refresh()

    def _build_ui(self):
        layout = QVBoxLayout(self)

        header = QLabel(f"{Settings.APP_NAME} – Encryption Dashboard")
        header.setStyleSheet("font-size:20px; font-weight:bold;")
        layout.addWidget(header)

        sub = QLabel("Classical and block ciphers behind one interface")
        sub.setStyleSheet("color:gray;")
        layout.addWidget(sub)

        table_group  = QGroupBox("📊  Supported Algorithms")
        table_layout = QVBoxLayout(table_group)

        self.tbl_algorithms = QTableWidget()
        self.tbl_algorithms.setColumnCount(len(self.HEADERS))
        self.tbl_algorithms.setHorizontalHeaderLabels(self.HEADERS)
        self.tbl_algorithms.horizontalHeader().setSectionResizeMode(
            QHeaderView.ResizeMode.Stretch
        )
        self.tbl_algorithms.setEditTriggers(
            QTableWidget.EditTrigger.NoEditTriggers
        )
        table_layout.addWidget(self.tbl_algorithms)
        layout.addWidget(table_group)
        layout.addStretch()

    def refresh(self):
        """Re-read metadata; AES name and key text follow the key size."""
        all_info = self.manager.get_all_info()
        self.tbl_algorithms.setRowCount(len(all_info))
        for row, info in enumerate(all_info):
            cells = [
                info["id"],
                info["name"],
                info["key_requirements"],
                "✅ Yes" if info["requires_text_safe_encoding"] else "No",
                info["description"],
            ]
            for col, text in enumerate(cells):
                self.tbl_algorithms.setItem(row, col, QTableWidgetItem(text))
