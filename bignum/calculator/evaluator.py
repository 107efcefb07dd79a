"""
Evaluator — диспетчеризация операторов для интерактивной оболочки

Оболочка передаёт два операнда в виде десятичных строк и символ оператора
и получает каноническую строку результата или сигнал ошибки.

Два уровня API:
- evaluate(left, right, operator) → BigInteger; ошибки — исключения
- evaluate_request(payload) → dict по контракту calculation_result;
  ParseError и UnsupportedOperator превращаются в результат со status="error"

Порядок проверок: сначала оператор (при неподдерживаемом операторе
арифметика и разбор операндов не выполняются), затем операнды.
"""

import logging
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, model_validator

from bignum.core.contracts import validate_calculation_request, validate_calculation_result
from bignum.core.domain import BigInteger, ParseError, add, parse, subtract, to_string

logger = logging.getLogger(__name__)


# =============================================================================
# ENUMS
# =============================================================================


class Operator(str, Enum):
    """Поддерживаемые операторы"""

    ADD = "+"
    SUBTRACT = "-"


class ResultStatus(str, Enum):
    OK = "ok"
    ERROR = "error"


class ErrorKind(str, Enum):
    """Вид отклонённого запроса"""

    PARSE_ERROR = "parse_error"
    UNSUPPORTED_OPERATOR = "unsupported_operator"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnsupportedOperator(ValueError):
    """Символ оператора вне {+, -}. Арифметика не выполняется."""

    def __init__(self, operator: str):
        self.operator = operator
        supported = ", ".join(op.value for op in Operator)
        super().__init__(f"Unsupported operator {operator!r}, expected one of: {supported}")


# =============================================================================
# RESULT MODEL
# =============================================================================


class CalculationResult(BaseModel):
    """
    Результат обработки запроса.

    Immutable модель: либо value (status=ok), либо error_kind + message
    (status=error).
    """

    status: ResultStatus = Field(..., description="ok / error")
    value: Optional[str] = Field(default=None, description="Каноническая запись результата")
    error_kind: Optional[ErrorKind] = Field(default=None, description="Вид ошибки")
    message: Optional[str] = Field(default=None, min_length=1, description="Описание ошибки")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_status_fields(self) -> "CalculationResult":
        """Набор полей должен соответствовать статусу."""
        if self.status is ResultStatus.OK:
            if self.value is None or self.error_kind is not None or self.message is not None:
                raise ValueError("ok result requires value and no error fields")
        else:
            if self.value is not None or self.error_kind is None or self.message is None:
                raise ValueError("error result requires error_kind and message and no value")
        return self

    @classmethod
    def success(cls, value: BigInteger) -> "CalculationResult":
        return cls(status=ResultStatus.OK, value=to_string(value))

    @classmethod
    def failure(cls, error_kind: ErrorKind, message: str) -> "CalculationResult":
        return cls(status=ResultStatus.ERROR, error_kind=error_kind, message=message)

    @property
    def is_ok(self) -> bool:
        return self.status is ResultStatus.OK

    def to_payload(self) -> Dict[str, Any]:
        """Сериализация в payload calculation_result."""
        return self.model_dump(mode="json", exclude_none=True)


# =============================================================================
# EVALUATION
# =============================================================================


def parse_operator(symbol: str) -> Operator:
    """
    Разбор символа оператора.

    Пробельные символы вокруг игнорируются; допустим ровно один символ.

    Raises:
        UnsupportedOperator: Если символ не '+' и не '-'
    """
    stripped = symbol.strip()
    try:
        return Operator(stripped)
    except ValueError:
        raise UnsupportedOperator(symbol) from None


def evaluate(left: str, right: str, operator: str) -> BigInteger:
    """
    Вычисление left <operator> right.

    Args:
        left: Первый операнд (десятичная строка)
        right: Второй операнд (десятичная строка)
        operator: '+' или '-'

    Returns:
        Результат как BigInteger

    Raises:
        UnsupportedOperator: Неподдерживаемый оператор
        ParseError: Операнд не является десятичным целым
    """
    op = parse_operator(operator)
    a = parse(left)
    b = parse(right)

    if op is Operator.ADD:
        return add(a, b)
    return subtract(a, b)


def evaluate_request(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Обработка запроса по контракту calculation_request.

    Args:
        payload: {"left": str, "right": str, "operator": str}

    Returns:
        Payload по контракту calculation_result

    Raises:
        jsonschema.ValidationError: Если payload нарушает контракт запроса
    """
    validate_calculation_request(payload)

    try:
        value = evaluate(payload["left"], payload["right"], payload["operator"])
    except UnsupportedOperator as e:
        logger.warning("Rejected request: %s", e)
        result = CalculationResult.failure(ErrorKind.UNSUPPORTED_OPERATOR, str(e))
    except ParseError as e:
        logger.warning("Rejected request: %s", e)
        result = CalculationResult.failure(ErrorKind.PARSE_ERROR, str(e))
    else:
        logger.debug(
            "Evaluated %s %s %s = %s",
            payload["left"],
            payload["operator"].strip(),
            payload["right"],
            value,
        )
        result = CalculationResult.success(value)

    response = result.to_payload()
    validate_calculation_result(response)
    return response
