# pocketcalc
# 기본/공학 모드 버튼식 계산기

from pocketcalc.calculator import (
    BASIC,
    SCIENTIFIC,
    Calculator,
    CalculatorState,
    Outcome,
    Variant,
)
from pocketcalc.errors import (
    CalculatorError,
    DivisionByZeroError,
    DomainError,
    ParseError,
    UnsupportedButtonError,
)

from pocketcalc.config import VERSION as __version__
