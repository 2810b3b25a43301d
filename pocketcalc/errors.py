# errors.py
# 계산 엔진 오류 종류: 모두 지역적으로 복구되며 세션을 중단하지 않는다.


class CalculatorError(Exception):
    """사용자에게 토스트로 보여줄 메시지를 가진 계산 오류의 기반 클래스"""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ParseError(CalculatorError):
    """표시 문자열을 숫자로 해석할 수 없음"""


class DomainError(CalculatorError):
    """함수 정의역 밖의 입력(음수의 제곱근, 0 이하의 로그 등) 또는 유한하지 않은 결과"""


class DivisionByZeroError(CalculatorError):
    """0으로 나누기(공학 모드 전용)"""


class UnsupportedButtonError(ValueError):
    """현재 모드가 받지 않는 버튼 토큰. UI 배선 실수이므로 결과로 돌려주지 않고 예외로 던진다."""

    def __init__(self, token: str, variant: str) -> None:
        super().__init__(f'button {token!r} is not supported by the {variant} calculator')
        self.token = token
        self.variant = variant
