import logging
import os

from PyQt6.QtWidgets import (
    QWidget, QLabel, QPushButton, QLineEdit,
    QVBoxLayout, QHBoxLayout, QFileDialog,
    QComboBox, QTextEdit, QGroupBox, QMessageBox
)
from PyQt6.QtCore import pyqtSignal

from config.settings import Settings
from core.cipher_engine import CipherManager, CryptoError
from utils.file_processor import FileProcessor


class FileEncryptionUI(QWidget):
    """Encrypt / decrypt whole files via FileProcessor."""

    status_message = pyqtSignal(str)

    def __init__(self, manager: CipherManager, parent=None):
        super().__init__(parent)
        self.manager       = manager
        self.processor     = FileProcessor(manager)
        self.selected_file = None
        self.logger        = logging.getLogger("CryptoTool.FileTab")
        self._build_ui()
        self.refresh_key_hint()

    def _build_ui(self):
        main_layout = QVBoxLayout(self)

        # ---------- Header ----------
        title = QLabel("File Encryption / Decryption")
        title.setStyleSheet("font-size: 20px; font-weight: bold;")
        main_layout.addWidget(title)

        limit = FileProcessor.format_file_size(self.processor.max_file_size)
        subtitle = QLabel(f"Files up to {limit}. Encrypted files get "
                          f"the .enc extension.")
        subtitle.setStyleSheet("color: #6c7086;")
        main_layout.addWidget(subtitle)

        # ---------- Controls ----------
        controls = QHBoxLayout()
        controls.addWidget(QLabel("Algorithm:"))
        self.algorithm_box = QComboBox()
        self.algorithm_box.addItems(self.manager.list_algorithms())
        self.algorithm_box.setCurrentText(Settings.DEFAULT_ALGORITHM)
        self.algorithm_box.currentTextChanged.connect(
            lambda _: self.refresh_key_hint()
        )
        controls.addWidget(self.algorithm_box)

        controls.addSpacing(20)
        controls.addWidget(QLabel("Key:"))
        self.key_input = QLineEdit()
        controls.addWidget(self.key_input)
        main_layout.addLayout(controls)

        self.key_hint = QLabel("")
        self.key_hint.setStyleSheet("color: #6c7086;")
        main_layout.addWidget(self.key_hint)

        # ---------- File Picker ----------
        file_group  = QGroupBox("Select File")
        file_layout = QHBoxLayout(file_group)
        self.file_label = QLabel("No file selected")
        browse_btn = QPushButton("Browse")
        browse_btn.clicked.connect(self.browse_file)
        file_layout.addWidget(self.file_label)
        file_layout.addStretch()
        file_layout.addWidget(browse_btn)
        main_layout.addWidget(file_group)

        # ---------- File Info ----------
        info_group  = QGroupBox("File Information")
        info_layout = QHBoxLayout(info_group)
        self.size_before = QLabel("Size before: —")
        self.size_after  = QLabel("Size after: —")
        info_layout.addWidget(self.size_before)
        info_layout.addStretch()
        info_layout.addWidget(self.size_after)
        main_layout.addWidget(info_group)

        # ---------- Action Buttons ----------
        action_layout = QHBoxLayout()
        encrypt_btn = QPushButton("🔒 Encrypt File")
        decrypt_btn = QPushButton("🔓 Decrypt File")
        encrypt_btn.clicked.connect(self.encrypt_file)
        decrypt_btn.clicked.connect(self.decrypt_file)
        action_layout.addStretch()
        action_layout.addWidget(encrypt_btn)
        action_layout.addWidget(decrypt_btn)
        action_layout.addStretch()
        main_layout.addLayout(action_layout)

        # ---------- Status Logs ----------
        log_group  = QGroupBox("Status")
        log_layout = QVBoxLayout(log_group)
        self.log_box = QTextEdit()
        self.log_box.setReadOnly(True)
        log_layout.addWidget(self.log_box)
        main_layout.addWidget(log_group)

    # ---------- File selection ----------
    def browse_file(self):
        file_path, _ = QFileDialog.getOpenFileName(self, "Select File")
        if file_path:
            self.set_file(file_path)

    def set_file(self, file_path: str):
        self.selected_file = file_path
        self.file_label.setText(os.path.basename(file_path))
        size = FileProcessor.format_file_size(os.path.getsize(file_path))
        self.size_before.setText(f"Size before: {size}")
        self.size_after.setText("Size after: —")
        self.log("File selected.")

    def refresh_key_hint(self):
        info = self.manager.describe(self.algorithm_box.currentText())
        if info:
            self.key_hint.setText(f"{info['name']} — {info['key_requirements']}")

    # ---------- Encrypt / Decrypt ----------
    def encrypt_file(self):
        self._run("encrypt")

    def decrypt_file(self):
        self._run("decrypt")

    def _run(self, operation: str):
        if not self.selected_file:
            self.show_error("Action Required", "Please select a file first.")
            return
        key = self.key_input.text().strip()
        if not key:
            self.show_error("Key Required", "Enter a key first.")
            return

        algorithm = self.algorithm_box.currentText()
        action = getattr(self.processor, f"{operation}_file")
        try:
            output = action(self.selected_file, algorithm, key)
        except (CryptoError, OSError) as exc:
            self.logger.warning("File %s failed: %s", operation, exc)
            self.log(f"{operation.capitalize()} failed: {exc}", success=False)
            self.show_error(f"{operation.capitalize()} Error", str(exc))
            return

        size = FileProcessor.format_file_size(output.stat().st_size)
        self.size_after.setText(f"Size after: {size}")
        self.log(f"File {operation}ed with {algorithm} → {output.name}")
        self.status_message.emit(f"Saved {output}")

    # ---------- Utilities ----------
    def log(self, message, success=True):
        color = "#a6e3a1" if success else "#f38ba8"
        self.log_box.append(f"<span style='color:{color};'>• {message}</span>")

    def show_error(self, title: str, msg: str):
        QMessageBox.warning(self, title, msg)
