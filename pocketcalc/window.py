# window.py
# PyQt5 UI: 시작/기본/공학/정보 화면과 버튼 → Calculator 엔진 연결

import sys
import logging
from enum import Enum

from PyQt5.QtCore import Qt, QTimer
from PyQt5.QtGui import QFont, QFontMetrics
from PyQt5.QtWidgets import (
    QApplication,
    QWidget,
    QGridLayout,
    QVBoxLayout,
    QHBoxLayout,
    QPushButton,
    QLineEdit,
    QLabel,
    QStackedWidget,
)

from pocketcalc import config
from pocketcalc.calculator import BASIC, SCIENTIFIC, Calculator

logger = logging.getLogger(__name__)

BACK = 'Back'

SIMPLE_BUTTONS = [
    ['7', '8', '9', '+'],
    ['4', '5', '6', '-'],
    ['1', '2', '3', '×'],
    ['0', '.', '=', '÷'],
]

ADVANCED_BUTTONS = [
    ['sin', 'cos', 'tan', '√x', 'x²', 'ln', 'log'],
    ['7', '8', '9', '÷', 'C', '±', '.'],
    ['4', '5', '6', '×', '+', '-', '^'],
    ['1', '2', '3', '%', '0', '=', BACK],
]


class Screen(Enum):
    START = 'start'
    SIMPLE = 'simple'
    ADVANCED = 'advanced'
    ABOUT = 'about'


class StartScreen(QWidget):
    """모드 선택 메뉴"""

    def __init__(self, on_select, on_exit) -> None:
        super().__init__()
        root = QVBoxLayout()
        root.setContentsMargins(24, 24, 24, 24)
        root.setSpacing(16)
        root.addStretch(1)
        self.setLayout(root)

        title = QLabel(config.APP_NAME)
        title.setAlignment(Qt.AlignCenter)
        font = QFont(title.font())
        font.setPointSize(config.DISPLAY_MAX_FONT)
        title.setFont(font)
        root.addWidget(title)

        self.buttons = {}
        for label, screen in (('Simple', Screen.SIMPLE),
                              ('Advanced', Screen.ADVANCED),
                              ('About', Screen.ABOUT)):
            btn = QPushButton(label)
            btn.setMinimumHeight(config.BUTTON_HEIGHT)
            btn.clicked.connect(lambda checked=False, s=screen: on_select(s))
            root.addWidget(btn)
            self.buttons[label] = btn

        exit_btn = QPushButton('Exit')
        exit_btn.setMinimumHeight(config.BUTTON_HEIGHT)
        exit_btn.clicked.connect(lambda checked=False: on_exit())
        root.addWidget(exit_btn)
        self.buttons['Exit'] = exit_btn
        root.addStretch(1)


class CalculatorScreen(QWidget):
    """계산기 화면: 표시부 + 버튼 그리드 + 오류 토스트"""

    def __init__(self, variant, on_back, angle_unit=config.DEFAULT_ANGLE_UNIT) -> None:
        super().__init__()
        self.engine = Calculator(variant, angle_unit=angle_unit)
        self._on_back = on_back
        if variant is BASIC:
            self._rows = SIMPLE_BUTTONS + [['C', BACK]]
            self._button_height = config.BUTTON_HEIGHT
        else:
            self._rows = ADVANCED_BUTTONS
            self._button_height = config.ADVANCED_BUTTON_HEIGHT

        self._toast_timer = QTimer(self)
        self._toast_timer.setSingleShot(True)
        self._build_ui()

    def _build_ui(self) -> None:
        root = QVBoxLayout()
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(8)
        self.setLayout(root)

        self.display = QLineEdit()
        self.display.setReadOnly(True)
        self.display.setAlignment(Qt.AlignRight)
        root.addWidget(self.display)

        # 토스트: 오류 메시지를 잠시 보여주고 숨긴다(입력은 계속 가능)
        self.toast = QLabel('')
        self.toast.setAlignment(Qt.AlignCenter)
        self.toast.hide()
        self._toast_timer.timeout.connect(self.toast.hide)
        root.addWidget(self.toast)

        grid = QGridLayout()
        grid.setSpacing(config.GRID_SPACING)
        root.addLayout(grid)

        self.buttons = {}
        for r, row in enumerate(self._rows):
            for c, label in enumerate(row):
                btn = QPushButton(label)
                btn.setMinimumHeight(self._button_height)
                btn.setCursor(Qt.PointingHandCursor)
                font = QFont(btn.font())
                font.setPointSize(config.BUTTON_FONT)
                btn.setFont(font)
                # clicked는 checked(bool) 인자를 내보내므로 첫 인자를 흡수하도록 작성
                btn.clicked.connect(lambda checked=False, ch=label: self.on_button(ch))
                if self.engine.variant is BASIC and r == len(self._rows) - 1:
                    # 기본 모드 마지막 줄(C, Back)은 두 칸씩
                    grid.addWidget(btn, r, c * 2, 1, 2)
                else:
                    grid.addWidget(btn, r, c)
                self.buttons[label] = btn

        self._render()

    def enter(self) -> None:
        """화면에 들어올 때마다 새 계산 상태로 시작한다."""
        self.engine.reset()
        self._toast_timer.stop()
        self.toast.hide()
        self._render()

    def on_button(self, ch: str) -> None:
        if ch == BACK:
            self._on_back()
            return
        outcome = self.engine.press(ch)
        if outcome.error is not None:
            self.show_toast(f'Error: {outcome.error}')
        self._render()

    def show_toast(self, message: str) -> None:
        self.toast.setText(message)
        self.toast.show()
        self._toast_timer.start(config.TOAST_MS)

    def _render(self) -> None:
        text = self.engine.display_text() or '0'
        self.display.setText(text)
        self._fit_font(text)

    def _fit_font(self, text: str) -> None:
        # 글자가 넘치면 10%씩 줄인다(최소 크기까지)
        font = QFont(self.display.font())
        size = config.DISPLAY_MAX_FONT
        available = self.display.contentsRect().width() - 8
        while True:
            font.setPointSize(size)
            fits = QFontMetrics(font).horizontalAdvance(text) <= available
            if fits or size <= config.DISPLAY_MIN_FONT:
                break
            size = max(config.DISPLAY_MIN_FONT, int(size * config.DISPLAY_SHRINK))
        self.display.setFont(font)

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        self._fit_font(self.display.text())


class AboutScreen(QWidget):
    def __init__(self, on_back, angle_unit=config.DEFAULT_ANGLE_UNIT) -> None:
        super().__init__()
        root = QVBoxLayout()
        root.setContentsMargins(24, 24, 24, 24)
        self.setLayout(root)

        unit = 'radians' if angle_unit == 'rad' else 'degrees'
        self.text = QLabel(config.ABOUT_TEXT.format(version=config.VERSION, unit=unit))
        self.text.setAlignment(Qt.AlignCenter)
        self.text.setWordWrap(True)
        root.addWidget(self.text, 1)

        back = QPushButton(BACK)
        back.setMinimumHeight(config.BUTTON_HEIGHT)
        back.clicked.connect(lambda checked=False: on_back())
        root.addWidget(back)


class MainWindow(QWidget):
    """화면 전환: 시작 메뉴에서 기본/공학/정보 화면으로 이동하고 Back으로 돌아온다."""

    def __init__(self, angle_unit=config.DEFAULT_ANGLE_UNIT) -> None:
        super().__init__()
        self.setWindowTitle(config.APP_NAME)

        self.stack = QStackedWidget()
        self.screens = {
            Screen.START: StartScreen(self.show_screen, self.close),
            Screen.SIMPLE: CalculatorScreen(BASIC, self.go_start, angle_unit),
            Screen.ADVANCED: CalculatorScreen(SCIENTIFIC, self.go_start, angle_unit),
            Screen.ABOUT: AboutScreen(self.go_start, angle_unit),
        }
        for widget in self.screens.values():
            self.stack.addWidget(widget)

        root = QHBoxLayout()
        root.setContentsMargins(0, 0, 0, 0)
        root.addWidget(self.stack)
        self.setLayout(root)

        self.current = Screen.START
        self.resize(config.WINDOW_WIDTH, config.WINDOW_HEIGHT)

    def go_start(self) -> None:
        self.show_screen(Screen.START)

    def show_screen(self, screen: Screen) -> None:
        widget = self.screens[screen]
        if isinstance(widget, CalculatorScreen):
            widget.enter()
        self.stack.setCurrentWidget(widget)
        self.current = screen
        logger.debug('[화면] %s', screen.value)


def run_app(mode='start', angle_unit=config.DEFAULT_ANGLE_UNIT) -> int:
    app = QApplication.instance() or QApplication(sys.argv)
    w = MainWindow(angle_unit=angle_unit)
    w.show_screen(Screen(mode))
    w.show()
    return app.exec()
