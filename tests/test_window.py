"""계산 엔진에 연결된 PyQt5 화면 테스트"""

import pytest

pytest.importorskip('PyQt5.QtWidgets')

from PyQt5.QtGui import QFontMetrics  # noqa: E402

from pocketcalc import config  # noqa: E402
from pocketcalc.window import MainWindow, Screen  # noqa: E402


@pytest.fixture
def window(qapp):
    w = MainWindow()
    yield w
    w.close()
    w.deleteLater()


def click(screen, keys: str) -> None:
    for label in keys.split():
        screen.buttons[label].click()


class TestNavigation:
    def test_starts_on_menu(self, window) -> None:
        assert window.current is Screen.START
        assert window.stack.currentWidget() is window.screens[Screen.START]

    def test_menu_buttons_switch_screens(self, window) -> None:
        start = window.screens[Screen.START]
        start.buttons['Advanced'].click()
        assert window.current is Screen.ADVANCED
        window.screens[Screen.ADVANCED].buttons['Back'].click()
        assert window.current is Screen.START
        start.buttons['About'].click()
        assert window.current is Screen.ABOUT
        assert config.VERSION in window.screens[Screen.ABOUT].text.text()

    def test_leaving_a_screen_discards_state(self, window) -> None:
        window.show_screen(Screen.SIMPLE)
        simple = window.screens[Screen.SIMPLE]
        click(simple, '4 2')
        assert simple.display.text() == '42'
        simple.buttons['Back'].click()
        window.show_screen(Screen.SIMPLE)
        assert simple.display.text() == '0'


class TestCalculatorScreen:
    def test_simple_screen_evaluates(self, window) -> None:
        window.show_screen(Screen.SIMPLE)
        simple = window.screens[Screen.SIMPLE]
        click(simple, '3 ÷ 2 =')
        assert simple.display.text() == '1.5'
        assert '±' not in simple.buttons
        click(simple, 'C')
        assert simple.display.text() == '0'

    def test_advanced_screen_chains(self, window) -> None:
        window.show_screen(Screen.ADVANCED)
        advanced = window.screens[Screen.ADVANCED]
        click(advanced, '3 + 4 + 5 =')
        assert advanced.display.text() == '12'

    def test_error_shows_toast_and_keeps_display(self, window) -> None:
        window.show_screen(Screen.ADVANCED)
        advanced = window.screens[Screen.ADVANCED]
        click(advanced, '9 ± √x')
        assert advanced.display.text() == '-9'
        assert not advanced.toast.isHidden()
        assert advanced.toast.text() == 'Error: Invalid input for sqrt'
        click(advanced, 'x²')
        assert advanced.display.text() == '81'

    def test_entering_screen_hides_toast(self, window) -> None:
        window.show_screen(Screen.ADVANCED)
        advanced = window.screens[Screen.ADVANCED]
        click(advanced, '8 ÷ 0 =')
        assert not advanced.toast.isHidden()
        window.show_screen(Screen.ADVANCED)
        assert advanced.toast.isHidden()

    def test_long_numbers_shrink_font(self, window) -> None:
        window.resize(config.WINDOW_WIDTH, config.WINDOW_HEIGHT)
        window.show_screen(Screen.SIMPLE)
        simple = window.screens[Screen.SIMPLE]
        if QFontMetrics(simple.display.font()).horizontalAdvance('0') == 0:
            pytest.skip('no fonts available on this platform')
        simple.display.setFixedWidth(200)
        click(simple, '1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 1 2 3')
        size = simple.display.font().pointSize()
        assert config.DISPLAY_MIN_FONT <= size < config.DISPLAY_MAX_FONT
