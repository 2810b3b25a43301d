#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import sys
import logging
import argparse

from pocketcalc import config
from pocketcalc.calculator import BASIC, SCIENTIFIC, Calculator
from pocketcalc.errors import UnsupportedButtonError

MODES = ('start', 'simple', 'advanced', 'about')


def setup_logger(log_path=config.LOG_PATH, level=config.LOG_LEVEL):
    """콘솔과 파일(UTF-8)로 동시에 로그를 남기는 로거를 설정한다."""
    logger = logging.getLogger('pocketcalc')
    if logger.handlers:
        return logger

    logger.setLevel(level)
    formatter = logging.Formatter(
        fmt='%(asctime)s %(levelname)s %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # 콘솔
    sh = logging.StreamHandler(sys.stdout)
    sh.setLevel(level)
    sh.setFormatter(formatter)
    logger.addHandler(sh)

    # 파일(UTF-8)
    if log_path:
        fh = logging.FileHandler(log_path, mode='a', encoding='utf-8')
        fh.setLevel(level)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger


def run_keys(tokens, engine):
    """UI 없이 버튼 토큰을 차례로 누르고 (최종 표시, 오류 메시지 목록)을 돌려준다."""
    errors = []
    for token in tokens:
        outcome = engine.press(token)
        if outcome.error is not None:
            errors.append(f'{token}: {outcome.error}')
    return engine.display_text(), errors


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='pocketcalc',
        description='기본/공학 모드를 가진 버튼식 계산기'
    )
    parser.add_argument('--mode', choices=MODES, default='start',
                        help='시작 화면(기본값: start). --keys와 함께 쓰면 simple은 기본 모드, 그 외는 공학 모드')
    parser.add_argument('--radians', action='store_true',
                        help='삼각함수 입력을 라디안으로 해석(기본값: 도)')
    parser.add_argument('--keys', default=None,
                        help='UI 없이 실행할 버튼 토큰들(공백 구분, 예: "3 + 4 =")')
    parser.add_argument('--log', default=config.LOG_PATH,
                        help=f'로그 파일 경로(기본값: {config.LOG_PATH}, 빈 문자열이면 파일 로그 없음)')
    parser.add_argument('--log-level', default=config.LOG_LEVEL,
                        choices=('DEBUG', 'INFO', 'WARNING', 'ERROR'),
                        help=f'로그 수준(기본값: {config.LOG_LEVEL})')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    logger = setup_logger(args.log, args.log_level)
    angle_unit = 'rad' if args.radians else config.DEFAULT_ANGLE_UNIT

    if args.keys is not None:
        variant = BASIC if args.mode == 'simple' else SCIENTIFIC
        engine = Calculator(variant, angle_unit=angle_unit)
        try:
            display, errors = run_keys(args.keys.split(), engine)
        except UnsupportedButtonError as e:
            logger.error('[오류] %s', e)
            return 2
        for message in errors:
            print(f'Error: {message}')
        print(display)
        return 1 if engine.last_error is not None else 0

    # Qt는 화면을 띄울 때만 필요하다
    from pocketcalc.window import run_app

    logger.info('[시작] %s %s, 화면=%s, 각도=%s', config.APP_NAME, config.VERSION,
                args.mode, angle_unit)
    return run_app(args.mode, angle_unit)


if __name__ == '__main__':
    sys.exit(main())
