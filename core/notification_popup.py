"""
Centered text box that fades out after announcing a timer change.
"""

from __future__ import annotations

from PySide6.QtCore import QEasingCurve, QPoint, QPropertyAnimation, Qt
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QApplication,
    QGraphicsDropShadowEffect,
    QHBoxLayout,
    QLabel,
    QWidget,
)

FADE_DURATION_MS = 4000


class NotificationPopup(QWidget):
    def __init__(self, parent: QWidget | None = None) -> None:
        flags = (
            Qt.WindowType.Tool
            | Qt.WindowType.FramelessWindowHint
            | Qt.WindowType.WindowStaysOnTopHint
            | Qt.WindowType.WindowTransparentForInput
        )
        super().__init__(parent)
        self.setWindowFlags(flags)
        self.setObjectName("NotificationPopup")
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground, True)
        self.setAttribute(Qt.WidgetAttribute.WA_ShowWithoutActivating, True)

        self._container = QWidget(self)
        self._container.setObjectName("PopupCard")
        shadow = QGraphicsDropShadowEffect(self._container)
        shadow.setBlurRadius(24)
        shadow.setColor(QColor(0, 0, 0, 140))
        shadow.setOffset(0, 10)
        self._container.setGraphicsEffect(shadow)

        self._message_label = QLabel()
        self._message_label.setObjectName("NotificationMessage")
        self._message_label.setAlignment(Qt.AlignmentFlag.AlignCenter)

        base_layout = QHBoxLayout(self)
        base_layout.setContentsMargins(0, 0, 0, 0)
        base_layout.addWidget(self._container)

        layout = QHBoxLayout(self._container)
        layout.addWidget(self._message_label)
        layout.setContentsMargins(24, 16, 24, 16)

        self.setStyleSheet(
            """
            QWidget#PopupCard {
                background-color: rgba(24, 24, 28, 0.85);
                border-radius: 12px;
                border: 1px solid rgba(255, 255, 255, 0.10);
            }
            QWidget#PopupCard QLabel#NotificationMessage {
                color: white;
                font-size: 18px;
                font-weight: bold;
            }
            """
        )

        self._fade = QPropertyAnimation(self, b"windowOpacity", self)
        self._fade.setDuration(FADE_DURATION_MS)
        self._fade.setStartValue(1.0)
        self._fade.setEndValue(0.0)
        self._fade.setEasingCurve(QEasingCurve.Type.OutQuad)
        self._fade.finished.connect(self.hide)  # type: ignore[arg-type]

    def show_message(self, text: str) -> None:
        """Display ``text`` centered on the primary screen and fade it out."""
        self._fade.stop()
        self._message_label.setText(text)
        self.adjustSize()
        self._position_center()
        self.setWindowOpacity(1.0)
        self.show()
        self._fade.start()

    def _position_center(self) -> None:
        screen = QApplication.primaryScreen()
        if screen is None:
            return
        geometry = screen.availableGeometry()
        x = geometry.x() + (geometry.width() - self.width()) // 2
        y = geometry.y() + (geometry.height() - self.height()) // 2
        self.move(QPoint(x, y))
