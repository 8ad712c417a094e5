from __future__ import annotations

from PyQt6.QtWidgets import QApplication


THEME_QSS = """
QWidget {
    background: #f7f4f7;
    color: #433443;
    font-size: 13px;
}

QMainWindow {
    background: #f7f4f7;
}

QLabel {
    background: transparent;
}

QLabel#Heading {
    font-size: 22px;
    font-weight: 700;
    color: #433443;
}

QLabel#SubtleTitle {
    font-size: 14px;
    font-weight: 600;
    color: #7d6f7d;
}

QPushButton {
    border: none;
    background: #efe8ef;
    border-radius: 16px;
    padding: 8px 14px;
    font-weight: 600;
}

QPushButton:hover {
    background: #e6dce6;
}

QPushButton:pressed {
    background: #d9ccd9;
}

QPushButton:disabled {
    color: #b3a7b3;
    background: #f2eef2;
}

QPushButton#PrimaryButton {
    background: #4eed83;
    color: #1f3a28;
    border-radius: 22px;
    padding: 10px 24px;
    min-height: 24px;
    min-width: 72px;
    font-size: 14px;
}

QPushButton#PrimaryButton:hover {
    background: #43d975;
}

QPushButton#PrimaryButton:pressed {
    background: #38c267;
}

QPushButton#SecondaryButton {
    border-radius: 22px;
    padding: 10px 18px;
    min-height: 24px;
    min-width: 72px;
    font-size: 14px;
}

QSpinBox {
    background: #ffffff;
    border: none;
    border-radius: 12px;
    padding: 6px 10px;
    min-height: 22px;
}

QSpinBox:disabled {
    color: #b3a7b3;
    background: #f2eef2;
}
"""


def apply_theme(app: QApplication) -> None:
    app.setStyleSheet(THEME_QSS)
