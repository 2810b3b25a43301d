# config.py
# 앱 전역 설정 상수. 실행 시 일부 값은 명령행 옵션으로 덮어쓴다.

APP_NAME = 'Calculator'
VERSION = '1.0.0'
ABOUT_TEXT = (
    'Calculator {version}\n\n'
    'Simple mode: + - × ÷\n'
    'Advanced mode: % ^ x² √x sin cos tan ln log ±\n'
    'Trigonometric functions use {unit}.'
)

# 창/화면 크기
WINDOW_WIDTH = 420
WINDOW_HEIGHT = 600
BUTTON_HEIGHT = 56
ADVANCED_BUTTON_HEIGHT = 48
GRID_SPACING = 6

# 표시부 글꼴(자동 축소 범위, pt)
DISPLAY_MAX_FONT = 32
DISPLAY_MIN_FONT = 12
DISPLAY_SHRINK = 0.9
BUTTON_FONT = 14

# 오류 토스트 표시 시간(ms)
TOAST_MS = 2000

# 로그
LOG_PATH = 'pocketcalc.log'
LOG_LEVEL = 'INFO'

# 삼각함수 각도 단위: 'deg' 또는 'rad'
ANGLE_UNITS = ('deg', 'rad')
DEFAULT_ANGLE_UNIT = 'deg'
