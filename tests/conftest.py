"""pocketcalc 테스트 공용 설정과 픽스처"""

import logging
import os

import pytest

from pocketcalc.calculator import BASIC, SCIENTIFIC, Calculator

# Qt 테스트는 화면 없이 실행한다
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')


@pytest.fixture
def basic() -> Calculator:
    return Calculator(BASIC)


@pytest.fixture
def scientific() -> Calculator:
    return Calculator(SCIENTIFIC)


@pytest.fixture
def press():
    """공백으로 구분된 버튼 토큰을 차례로 누르고 마지막 Outcome을 돌려준다."""

    def _press(engine: Calculator, keys: str):
        outcome = None
        for token in keys.split():
            outcome = engine.press(token)
        return outcome

    return _press


@pytest.fixture
def qapp():
    QtWidgets = pytest.importorskip('PyQt5.QtWidgets')
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture(autouse=True)
def reset_pocketcalc_logger():
    """setup_logger()가 남긴 핸들러를 테스트마다 정리한다."""
    yield
    logger = logging.getLogger('pocketcalc')
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
