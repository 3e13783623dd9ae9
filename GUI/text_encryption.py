import logging

from PyQt6.QtWidgets import (
    QApplication, QWidget, QLabel, QTextEdit, QLineEdit,
    QPushButton, QVBoxLayout, QHBoxLayout,
    QComboBox, QGroupBox, QMessageBox, QFileDialog
)
from PyQt6.QtCore import pyqtSignal

from config.settings import Settings
from core.cipher_engine import CipherManager, CryptoError, KeySize


class TextEncryptionUI(QWidget):
    """Encrypt / decrypt text with any registered algorithm."""

    status_message   = pyqtSignal(str)
    key_size_changed = pyqtSignal(int)      # bits

    def __init__(self, manager: CipherManager, parent=None):
        super().__init__(parent)
        self.manager = manager
        self.logger  = logging.getLogger("CryptoTool.TextTab")
        self._build_ui()
        self.on_algorithm_changed(self.algorithm_box.currentText())

    def _build_ui(self):
        main_layout = QVBoxLayout(self)

        # ---------- Header ----------
        title = QLabel("Text Encryption / Decryption")
        title.setStyleSheet("font-size: 20px; font-weight: bold;")
        main_layout.addWidget(title)

        # ---------- Controls ----------
        controls = QHBoxLayout()

        controls.addWidget(QLabel("Algorithm:"))
        self.algorithm_box = QComboBox()
        self.algorithm_box.addItems(self.manager.list_algorithms())
        self.algorithm_box.setCurrentText(Settings.DEFAULT_ALGORITHM)
        self.algorithm_box.currentTextChanged.connect(
            self.on_algorithm_changed
        )
        controls.addWidget(self.algorithm_box)

        self.key_size_label = QLabel("AES key size:")
        controls.addWidget(self.key_size_label)
        self.key_size_box = QComboBox()
        for size in KeySize:
            self.key_size_box.addItem(f"{size.bits} bit", size)
        self.key_size_box.setCurrentIndex(
            list(KeySize).index(self.manager.get_aes_key_size())
        )
        self.key_size_box.currentIndexChanged.connect(
            self.on_key_size_changed
        )
        controls.addWidget(self.key_size_box)

        controls.addSpacing(20)
        controls.addWidget(QLabel("Key:"))
        self.key_input = QLineEdit()
        controls.addWidget(self.key_input)

        self.gen_key_btn = QPushButton("🔑 Generate")
        self.gen_key_btn.clicked.connect(self.generate_key)
        controls.addWidget(self.gen_key_btn)
        main_layout.addLayout(controls)

        self.key_hint = QLabel("")
        self.key_hint.setStyleSheet("color: #6c7086;")
        main_layout.addWidget(self.key_hint)

        # ---------- Input Box ----------
        input_group  = QGroupBox("Input Text")
        input_layout = QVBoxLayout(input_group)
        self.input_text = QTextEdit()
        self.input_text.setPlaceholderText(
            "Enter plain text or cipher text here..."
        )
        input_layout.addWidget(self.input_text)
        main_layout.addWidget(input_group)

        # ---------- Buttons ----------
        btn_layout = QHBoxLayout()
        encrypt_btn = QPushButton("🔒 Encrypt")
        decrypt_btn = QPushButton("🔓 Decrypt")
        swap_btn    = QPushButton("⇅ Swap")
        clear_btn   = QPushButton("🗑️ Clear")
        clear_btn.setProperty("danger", True)

        encrypt_btn.clicked.connect(self.encrypt_text)
        decrypt_btn.clicked.connect(self.decrypt_text)
        swap_btn.clicked.connect(self.swap_text)
        clear_btn.clicked.connect(self.clear)

        btn_layout.addStretch()
        for btn in (encrypt_btn, decrypt_btn, swap_btn, clear_btn):
            btn_layout.addWidget(btn)
        btn_layout.addStretch()
        main_layout.addLayout(btn_layout)

        # ---------- Output Box ----------
        output_group  = QGroupBox("Output")
        output_layout = QVBoxLayout(output_group)
        self.output_text = QTextEdit()
        self.output_text.setReadOnly(True)
        self.output_text.setPlaceholderText(
            "Encrypted or decrypted output will appear here..."
        )
        output_layout.addWidget(self.output_text)

        out_btns = QHBoxLayout()
        copy_btn = QPushButton("📋 Copy")
        save_btn = QPushButton("💾 Save to File")
        copy_btn.clicked.connect(self.copy_output)
        save_btn.clicked.connect(self.save_output)
        out_btns.addStretch()
        out_btns.addWidget(copy_btn)
        out_btns.addWidget(save_btn)
        output_layout.addLayout(out_btns)
        main_layout.addWidget(output_group)

    # ---------- Algorithm / key ----------
    def current_algorithm(self) -> str:
        return self.algorithm_box.currentText()

    def on_algorithm_changed(self, algorithm: str):
        if not algorithm:
            return
        is_aes = algorithm == CipherManager.AES_ID
        self.key_size_label.setVisible(is_aes)
        self.key_size_box.setVisible(is_aes)
        self.gen_key_btn.setEnabled(is_aes)
        self.refresh_key_hint()

    def on_key_size_changed(self, index: int):
        size = self.key_size_box.itemData(index)
        if size is None:
            return
        self.manager.set_aes_key_size(size)
        self.refresh_key_hint()
        self.key_size_changed.emit(size.bits)

    def refresh_key_hint(self):
        info = self.manager.describe(self.current_algorithm())
        if info:
            self.key_hint.setText(f"{info['name']} — {info['key_requirements']}")
            self.key_input.setToolTip(info["key_requirements"])

    def generate_key(self):
        try:
            self.key_input.setText(self.manager.generate_aes_readable_key())
        except CryptoError as exc:
            self.show_error("Key Generation Error", exc.message)

    # ---------- Encrypt / Decrypt ----------
    def encrypt_text(self):
        self._run("encrypt")

    def decrypt_text(self):
        self._run("decrypt")

    def _run(self, operation: str):
        text = self.input_text.toPlainText().strip()
        if not text:
            self.show_error("Input Required", f"Enter text to {operation}.")
            return
        key = self.key_input.text().strip()
        if not key:
            self.show_error("Key Required", "Enter a key first.")
            return

        algorithm = self.current_algorithm()
        action = getattr(self.manager, operation)
        try:
            result = action(algorithm, text, key)
        except CryptoError as exc:
            self.logger.warning("%s with %s failed: %s",
                                operation, algorithm, exc.message)
            self.show_error(f"{operation.capitalize()} Error", exc.message)
            return

        self.output_text.setPlainText(result)
        self.status_message.emit(f"Text {operation}ed with {algorithm}")

    def swap_text(self):
        self.input_text.setPlainText(self.output_text.toPlainText())
        self.output_text.clear()

    def clear(self):
        self.input_text.clear()
        self.output_text.clear()

    # ---------- Output ----------
    def copy_output(self):
        text = self.output_text.toPlainText()
        if not text:
            return
        QApplication.clipboard().setText(text)
        self.status_message.emit("Output copied to clipboard")

    def save_output(self):
        if not self.output_text.toPlainText():
            self.show_error("Nothing to Save", "The output is empty.")
            return
        path, _ = QFileDialog.getSaveFileName(
            self, "Save Output", "output.txt", "Text Files (*.txt)"
        )
        if path:
            self.write_output(path)

    def write_output(self, path: str):
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(self.output_text.toPlainText())
        except OSError as exc:
            self.show_error("Save Error", str(exc))
            return
        self.status_message.emit(f"Output saved to {path}")

    def show_error(self, title: str, msg: str):
        QMessageBox.warning(self, title, msg)
