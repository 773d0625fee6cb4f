from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel
from PySide6.QtCore import Qt
from FrontEnd.styles.design_tokens import COLORS

class StatCard(QWidget):
    def __init__(self, title, value="0"):
        super().__init__()
        layout = QVBoxLayout()
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.value_label = QLabel(value)
        self.value_label.setObjectName("StatValue")
        self.value_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title_label = QLabel(title)
        title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.value_label)
        layout.addWidget(title_label)
        self.setLayout(layout)
        self.setStyleSheet(f"background: {COLORS['surface']}; border-radius: 16px; padding: 8px 24px;")
    def set_value(self, text):
        self.value_label.setText(text)
