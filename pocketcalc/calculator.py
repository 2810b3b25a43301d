# calculator.py
# 연산 엔진: 버튼 한 번에 상태 하나를 만드는 전이 함수와 그 상태를 소유하는 Calculator
# PEP 8 준수, 문자열은 기본적으로 ' ' 사용

import logging
import math
import re
from dataclasses import dataclass, replace
from typing import FrozenSet, NamedTuple, Optional

from pocketcalc import config
from pocketcalc.errors import (
    CalculatorError,
    DivisionByZeroError,
    DomainError,
    ParseError,
    UnsupportedButtonError,
)

logger = logging.getLogger(__name__)

DIGITS = frozenset('0123456789')
DOT = '.'
EQUALS = '='
CLEAR = 'C'
SIGN = '±'

ADD = '+'
SUBTRACT = '-'
MULTIPLY = '×'
DIVIDE = '÷'
REMAINDER = '%'
POWER = '^'

SQUARE = 'x²'
SQRT = '√x'
SIN = 'sin'
COS = 'cos'
TAN = 'tan'
LN = 'ln'
LOG = 'log'

# 키보드/이전 UI 라벨을 내부 기호로 변환
_ALIASES = {
    '−': SUBTRACT,
    '*': MULTIPLY,
    '/': DIVIDE,
    '**': POWER,
    '+/-': SIGN,
    'AC': CLEAR,
    'x^2': SQUARE,
    'sqrt': SQRT,
}

# 엔진이 만든 표시 문자열(지수 표기 포함)만 숫자로 인정한다
_NUMBER_RE = re.compile(r'-?(\d+\.?\d*|\.\d+)(e[+-]?\d+)?')


@dataclass(frozen=True)
class CalculatorState:
    display: str = '0'
    stored_value: Optional[float] = None
    operator: Optional[str] = None
    is_new_input: bool = True

    @property
    def pending(self) -> bool:
        """대기 중인 이항 연산(저장값 + 연산자)이 있는지"""
        return self.stored_value is not None and self.operator is not None

    def to_dict(self) -> dict:
        return {
            'display': self.display,
            'stored_value': self.stored_value,
            'operator': self.operator,
            'is_new_input': self.is_new_input,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'CalculatorState':
        stored = data.get('stored_value')
        return cls(
            display=str(data.get('display', '0')),
            stored_value=None if stored is None else float(stored),
            operator=data.get('operator'),
            is_new_input=bool(data.get('is_new_input', True)),
        )


@dataclass(frozen=True)
class Variant:
    """모드별 능력: 연산자 집합, 단항 함수 집합, 부호 전환, 엄격 모드

    strict가 켜지면 0 나누기를 오류로 보고하고, 연속 연산자를 왼쪽부터 접으며,
    대기 연산이 없을 때 '='을 무시한다.
    """

    name: str
    operators: FrozenSet[str]
    unary_functions: FrozenSet[str] = frozenset()
    sign_toggle: bool = False
    strict: bool = False

    @property
    def buttons(self) -> FrozenSet[str]:
        extra = {DOT, EQUALS, CLEAR}
        if self.sign_toggle:
            extra.add(SIGN)
        return DIGITS | self.operators | self.unary_functions | extra


BASIC = Variant(
    name='basic',
    operators=frozenset({ADD, SUBTRACT, MULTIPLY, DIVIDE}),
)

SCIENTIFIC = Variant(
    name='scientific',
    operators=frozenset({ADD, SUBTRACT, MULTIPLY, DIVIDE, REMAINDER, POWER}),
    unary_functions=frozenset({SQUARE, SQRT, SIN, COS, TAN, LN, LOG}),
    sign_toggle=True,
    strict=True,
)


class Outcome(NamedTuple):
    state: CalculatorState
    error: Optional[CalculatorError] = None


# 숫자 변환/포맷

def parse_number(text: str) -> float:
    if not _NUMBER_RE.fullmatch(text):
        raise ParseError('Invalid input')
    value = float(text)
    if not math.isfinite(value):
        raise ParseError('Invalid input')
    return value


def format_number(value: float) -> str:
    """정수 결과는 '.0' 없이, 그 외에는 float의 기본 문자열 그대로"""
    value = float(value)
    if not math.isfinite(value):
        raise DomainError('Result is not a number')
    text = repr(value)
    if text.endswith('.0'):
        text = text[:-2]
    return text


# 연산

def apply_binary(a: float, b: float, op: str, strict: bool) -> float:
    if op == ADD:
        return a + b
    if op == SUBTRACT:
        return a - b
    if op == MULTIPLY:
        return a * b
    if op == DIVIDE:
        if b == 0:
            if strict:
                raise DivisionByZeroError('Division by zero')
            # 기본 모드는 나누는 수(0)를 그대로 돌려준다
            return b
        return a / b
    if op == REMAINDER:
        if b == 0:
            raise DomainError('Remainder by zero')
        return math.fmod(a, b)
    if op == POWER:
        try:
            return math.pow(a, b)
        except OverflowError:
            raise DomainError('Result is too large') from None
        except ValueError:
            raise DomainError('Invalid input for power') from None
    raise ValueError(f'unknown operator: {op!r}')


def apply_unary(fn: str, x: float, angle_unit: str = config.DEFAULT_ANGLE_UNIT) -> float:
    if fn == SQUARE:
        return x * x
    if fn == SQRT:
        if x < 0:
            raise DomainError('Invalid input for sqrt')
        return math.sqrt(x)
    if fn in (SIN, COS, TAN):
        rad = math.radians(x) if angle_unit == 'deg' else x
        return getattr(math, fn)(rad)
    if fn == LN:
        if x <= 0:
            raise DomainError('Invalid input for ln')
        return math.log(x)
    if fn == LOG:
        if x <= 0:
            raise DomainError('Invalid input for log')
        return math.log10(x)
    raise ValueError(f'unknown function: {fn!r}')


# 상태 전이(순수 함수). 실패하면 CalculatorError를 던지고 상태는 그대로 둔다.

def input_digit(state: CalculatorState, digit: str) -> CalculatorState:
    if state.is_new_input or state.display == '0':
        display = digit
    else:
        display = state.display + digit
    return replace(state, display=display, is_new_input=False)


def input_dot(state: CalculatorState) -> CalculatorState:
    if state.is_new_input:
        return replace(state, display='0.', is_new_input=False)
    if DOT in state.display:
        return state
    return replace(state, display=state.display + DOT)


def negative_positive(state: CalculatorState) -> CalculatorState:
    if state.display == '0':
        return state
    if state.display.startswith('-'):
        return replace(state, display=state.display[1:])
    return replace(state, display='-' + state.display)


def set_operator(state: CalculatorState, op: str, variant: Variant) -> CalculatorState:
    value = parse_number(state.display)
    display = state.display
    if variant.strict and state.pending and not state.is_new_input:
        # 3 + 4 + ... : 직전 연산을 먼저 접어 새 저장값으로 쓴다
        value = apply_binary(state.stored_value, value, state.operator, strict=True)
        display = format_number(value)
    return CalculatorState(display=display, stored_value=value, operator=op, is_new_input=True)


def equal(state: CalculatorState, variant: Variant) -> CalculatorState:
    value = parse_number(state.display)
    if state.pending:
        result = apply_binary(state.stored_value, value, state.operator, variant.strict)
    elif variant.strict:
        return state
    else:
        result = value
    return CalculatorState(display=format_number(result), is_new_input=True)


def apply_function(state: CalculatorState, fn: str,
                   angle_unit: str = config.DEFAULT_ANGLE_UNIT) -> CalculatorState:
    value = parse_number(state.display)
    result = apply_unary(fn, value, angle_unit)
    return replace(state, display=format_number(result), is_new_input=True)


class Calculator:
    """연산 엔진: 현재 상태를 소유하고 버튼마다 Outcome(새 상태, 오류)을 돌려준다"""

    def __init__(self, variant: Variant = SCIENTIFIC,
                 angle_unit: str = config.DEFAULT_ANGLE_UNIT) -> None:
        self.variant = variant
        self.set_angle_unit(angle_unit)
        self.reset()

    def set_angle_unit(self, angle_unit: str) -> None:
        if angle_unit not in config.ANGLE_UNITS:
            raise ValueError(f'unknown angle unit: {angle_unit!r}')
        self.angle_unit = angle_unit

    # 버튼 API

    def reset(self) -> Outcome:
        self.state = CalculatorState()
        self.last_error = None
        return Outcome(self.state)

    def input_digit(self, digit: str) -> Outcome:
        if digit not in DIGITS:
            raise UnsupportedButtonError(digit, self.variant.name)
        return self._apply('digit', input_digit, digit)

    def input_dot(self) -> Outcome:
        return self._apply('dot', input_dot)

    def negative_positive(self) -> Outcome:
        self._require(self.variant.sign_toggle, SIGN)
        return self._apply('sign', negative_positive)

    def set_operator(self, op: str) -> Outcome:
        op = _ALIASES.get(op, op)
        self._require(op in self.variant.operators, op)
        return self._apply(op, set_operator, op, self.variant)

    def equal(self) -> Outcome:
        return self._apply(EQUALS, equal, self.variant)

    def apply_function(self, fn: str) -> Outcome:
        fn = _ALIASES.get(fn, fn)
        self._require(fn in self.variant.unary_functions, fn)
        return self._apply(fn, apply_function, fn, self.angle_unit)

    def press(self, token: str) -> Outcome:
        """버튼 토큰 하나를 해당 연산으로 보낸다"""
        token = _ALIASES.get(token, token)
        logger.debug('[입력] %s (%s)', token, self.variant.name)
        if token in DIGITS:
            return self.input_digit(token)
        if token == DOT:
            return self.input_dot()
        if token == EQUALS:
            return self.equal()
        if token == CLEAR:
            return self.reset()
        if token == SIGN:
            return self.negative_positive()
        if token in self.variant.operators:
            return self.set_operator(token)
        if token in self.variant.unary_functions:
            return self.apply_function(token)
        raise UnsupportedButtonError(token, self.variant.name)

    # 상태 스냅샷(일시정지/복귀 시 UI가 그대로 저장·복원)

    def snapshot(self) -> dict:
        return self.state.to_dict()

    def restore(self, data: dict) -> None:
        """저장된 상태를 복원한다. 현재 모드와 맞지 않는 상태는 거부한다."""
        state = CalculatorState.from_dict(data)
        if (state.stored_value is None) != (state.operator is None):
            raise ValueError('stored_value and operator must be restored together')
        if state.operator is not None:
            self._require(state.operator in self.variant.operators, state.operator)
        self.state = state
        self.last_error = None

    # 표시 문자열
    def display_text(self) -> str:
        return self.state.display

    # 내부 유틸
    def _require(self, supported: bool, token: str) -> None:
        if not supported:
            raise UnsupportedButtonError(token, self.variant.name)

    def _apply(self, name: str, transition, *args) -> Outcome:
        try:
            new_state = transition(self.state, *args)
        except CalculatorError as e:
            logger.info('[거부] %s: %s (display=%r)', name, e, self.state.display)
            self.last_error = e
            return Outcome(self.state, e)
        self.state = new_state
        self.last_error = None
        return Outcome(new_state)
