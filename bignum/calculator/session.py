"""
Session — интерактивный цикл калькулятора

Читает операнды и оператор из текстового потока, пишет результат в выходной
поток. Ошибочный запрос сообщается строкой "Error: ..." и не прерывает цикл.
Цикл завершается строкой-сентинелом ('~') вместо первого операнда или
концом входного потока.
"""

import logging
from dataclasses import dataclass
from typing import Final, Optional, TextIO

from bignum.calculator.evaluator import evaluate_request

logger = logging.getLogger(__name__)

# Строка завершения сессии
EXIT_SENTINEL: Final[str] = "~"


@dataclass(frozen=True)
class SessionConfig:
    """Конфигурация интерактивной сессии."""

    exit_sentinel: str = EXIT_SENTINEL
    banner: str = "Enter '{sentinel}' instead of the first number to exit"
    first_prompt: str = "Insert first BigNum: "
    second_prompt: str = "Insert second BigNum: "
    operator_prompt: str = "Choose operation (+ or -): "
    error_prefix: str = "Error: "


def _read_line(stream: TextIO) -> Optional[str]:
    """Строка без перевода строки; None при конце потока."""
    line = stream.readline()
    if line == "":
        return None
    return line.rstrip("\r\n")


def _prompt(output: TextIO, text: str) -> None:
    output.write(text)
    output.flush()


def run_session(
    input_stream: TextIO,
    output_stream: TextIO,
    config: SessionConfig = SessionConfig(),
) -> int:
    """
    Интерактивный цикл: операнд, операнд, оператор → результат.

    Args:
        input_stream: Источник строк (например, sys.stdin)
        output_stream: Приёмник вывода (например, sys.stdout)
        config: Приглашения и сентинел

    Returns:
        Количество обработанных запросов (результаты и ошибки)
    """
    output_stream.write(config.banner.format(sentinel=config.exit_sentinel) + "\n")
    answered = 0

    while True:
        _prompt(output_stream, config.first_prompt)
        left = _read_line(input_stream)
        if left is None or left.strip() == config.exit_sentinel:
            break

        _prompt(output_stream, config.second_prompt)
        right = _read_line(input_stream)
        if right is None:
            break

        _prompt(output_stream, config.operator_prompt)
        operator = _read_line(input_stream)
        if operator is None:
            break

        response = evaluate_request(
            {"left": left.strip(), "right": right.strip(), "operator": operator}
        )
        if response["status"] == "ok":
            output_stream.write(response["value"] + "\n")
        else:
            output_stream.write(config.error_prefix + response["message"] + "\n")
        answered += 1

    logger.info("Session finished after %d request(s)", answered)
    return answered
