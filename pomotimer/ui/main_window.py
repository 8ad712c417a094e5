from __future__ import annotations

import logging

from PyQt6.QtCore import QRectF, QTimer, Qt
from PyQt6.QtGui import QAction, QColor, QKeySequence, QPainter, QPen
from PyQt6.QtWidgets import (
    QDoubleSpinBox,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from pomotimer.config import FRAME_INTERVAL_MS
from pomotimer.core.app_state import AppState
from pomotimer.core.countdown import Countdown, CountdownSnapshot
from pomotimer.core.timer import Phase, TimerState


logger = logging.getLogger(__name__)

MAX_MINUTES = 9999

PHASE_TITLES = {
    Phase.IDLE: "Ready",
    Phase.WORK: "Work",
    Phase.BREAK: "Break",
}


def format_remaining(seconds: int) -> str:
    return f"{seconds // 60}:{seconds % 60:02d}"


class CountdownWidget(QWidget):
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(260, 260)
        self._progress = 0.0
        self._color = QColor("#4EED83")
        self._remaining_text = "0:00"

    @property
    def remaining_text(self) -> str:
        return self._remaining_text

    def set_state(self, progress: float, color: str, remaining_text: str) -> None:
        self._progress = progress
        self._color = QColor(color)
        self._remaining_text = remaining_text
        self.update()

    def paintEvent(self, event) -> None:  # noqa: N802
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        rect = QRectF(self.rect().adjusted(12, 12, -12, -12))
        diameter = min(rect.width(), rect.height())
        circle = QRectF(
            rect.center().x() - diameter / 2,
            rect.center().y() - diameter / 2,
            diameter,
            diameter,
        )

        painter.setPen(QPen(QColor("#d9d9d9"), 10))
        painter.drawEllipse(circle)
        painter.setPen(QPen(self._color, 10, Qt.PenStyle.SolidLine, Qt.PenCapStyle.RoundCap))
        # The arc shrinks as time runs out.
        span = int(360 * 16 * (1.0 - self._progress))
        painter.drawArc(circle, 90 * 16, span)

        font = painter.font()
        font.setPointSize(max(12, int(diameter / 6)))
        font.setBold(True)
        painter.setFont(font)
        painter.setPen(QColor("#433443"))
        painter.drawText(circle, Qt.AlignmentFlag.AlignCenter, self._remaining_text)


class MainWindow(QMainWindow):
    def __init__(self, app_state: AppState) -> None:
        super().__init__()
        self.setWindowTitle("Pomodoro Timer")
        self.resize(420, 560)

        self.app_state = app_state
        self.countdown = Countdown(on_complete=self.app_state.complete_phase)

        self._build_ui()
        self._connect_signals()
        self._on_durations_changed(self.app_state.work_minutes, self.app_state.break_minutes)
        self._on_state_changed(self.app_state.timer_state)

        self.frame_timer = QTimer(self)
        self.frame_timer.setInterval(FRAME_INTERVAL_MS)
        self.frame_timer.timeout.connect(self._on_frame)
        self.frame_timer.start()

    def _build_ui(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)

        self.title_label = QLabel("Pomodoro Timer")
        self.title_label.setObjectName("Heading")
        self.title_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.title_label)

        self.phase_label = QLabel(PHASE_TITLES[Phase.IDLE])
        self.phase_label.setObjectName("SubtleTitle")
        self.phase_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.phase_label)

        self.countdown_widget = CountdownWidget()
        layout.addWidget(self.countdown_widget, 1)

        controls = QHBoxLayout()
        self.primary_btn = QPushButton("start")
        self.primary_btn.setObjectName("PrimaryButton")
        self.secondary_btn = QPushButton("pause")
        self.secondary_btn.setObjectName("SecondaryButton")
        controls.addStretch()
        controls.addWidget(self.primary_btn)
        controls.addWidget(self.secondary_btn)
        controls.addStretch()
        layout.addLayout(controls)

        form = QFormLayout()
        self.work_spin = self._minutes_input()
        self.break_spin = self._minutes_input()
        form.addRow("Work (min):", self.work_spin)
        form.addRow("Break (min):", self.break_spin)
        layout.addLayout(form)

        space_action = QAction(self)
        space_action.setShortcut(QKeySequence(Qt.Key.Key_Space))
        space_action.triggered.connect(self._space_toggle)
        self.addAction(space_action)

    @staticmethod
    def _minutes_input() -> QDoubleSpinBox:
        spin = QDoubleSpinBox()
        spin.setRange(0, MAX_MINUTES)
        spin.setDecimals(2)
        spin.setSingleStep(1)
        return spin

    def _connect_signals(self) -> None:
        self.primary_btn.clicked.connect(self.app_state.primary_action)
        self.secondary_btn.clicked.connect(self.app_state.secondary_action)
        self.work_spin.valueChanged.connect(self.app_state.set_work_minutes)
        self.break_spin.valueChanged.connect(self.app_state.set_break_minutes)
        self.app_state.state_changed.connect(self._on_state_changed)
        self.app_state.durations_changed.connect(self._on_durations_changed)

    def _space_toggle(self) -> None:
        if self.app_state.timer_state.phase == Phase.IDLE:
            self.app_state.primary_action()
        else:
            self.app_state.secondary_action()

    def _on_durations_changed(self, work_minutes, break_minutes) -> None:
        inputs = (
            (self.work_spin, work_minutes, self.app_state.set_work_minutes),
            (self.break_spin, break_minutes, self.app_state.set_break_minutes),
        )
        for spin, value, setter in inputs:
            if spin.value() != value:
                spin.blockSignals(True)
                spin.setValue(value)
                spin.blockSignals(False)
                if spin.value() != value:
                    # Out of the input's range: keep the model equal to what is shown.
                    logger.warning("minutes %r clamped to %r", value, spin.value())
                    setter(spin.value())

    def _on_state_changed(self, state: TimerState) -> None:
        self.countdown.sync(state.is_playing, state.duration_seconds, state.restart_token)
        self._update_controls(state)
        self._render(self.countdown.snapshot(), state)

    def _on_frame(self) -> None:
        snapshot = self.countdown.tick()
        self._render(snapshot, self.app_state.timer_state)

    def _render(self, snapshot: CountdownSnapshot, state: TimerState) -> None:
        self.countdown_widget.set_state(snapshot.progress, state.color, format_remaining(snapshot.remaining_seconds))

    def _update_controls(self, state: TimerState) -> None:
        idle = state.phase == Phase.IDLE
        self.phase_label.setText(PHASE_TITLES.get(state.phase, state.phase.value))
        self.primary_btn.setText("start" if idle else "reset")
        self.secondary_btn.setText("pause" if state.is_playing else "unpause")
        self.secondary_btn.setEnabled(not idle)
        self.work_spin.setEnabled(not state.is_playing)

    def closeEvent(self, event) -> None:  # noqa: N802
        logger.info("window closed in phase %s", self.app_state.timer_state.phase.value)
        self.frame_timer.stop()
        event.accept()
