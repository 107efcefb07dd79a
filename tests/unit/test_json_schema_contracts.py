"""
Tests for JSON Schema Contract Validators

Комплексное тестирование JSON Schema валидаторов:
- Валидность самих схем
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений типов
- Детекция нарушений constraints (enum/pattern/if-then)
- Интеграция с Pydantic моделью CalculationResult
"""

from pathlib import Path

import pytest
from jsonschema import Draft202012Validator, ValidationError

from bignum.calculator.evaluator import CalculationResult, ErrorKind
from bignum.core.contracts import (
    CalculationRequestValidator,
    CalculationResultValidator,
    SchemaLoader,
    validate_calculation_request,
    validate_calculation_result,
)
from bignum.core.domain import parse


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_request():
    """Валидный calculation_request для тестирования."""
    return {"left": "-123", "right": "456", "operator": "+"}


@pytest.fixture
def valid_ok_result():
    """Валидный calculation_result со status=ok."""
    return {"status": "ok", "value": "333"}


@pytest.fixture
def valid_error_result():
    """Валидный calculation_result со status=error."""
    return {
        "status": "error",
        "error_kind": "parse_error",
        "message": "Cannot parse '1x' as a decimal integer: unexpected character 'x'",
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузчика схем."""

    def test_schemas_are_valid_draft_2020_12(self):
        loader = SchemaLoader()
        for name in ("calculation_request", "calculation_result"):
            schema = loader.load_schema(name)
            Draft202012Validator.check_schema(schema)

    def test_schema_cached(self):
        loader = SchemaLoader()
        first = loader.load_schema("calculation_request")
        second = loader.load_schema("calculation_request")
        assert first is second

    def test_missing_schema_raises(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_missing_directory_raises(self, tmp_path: Path):
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "missing")

    def test_invalid_schema_raises(self, tmp_path: Path):
        (tmp_path / "broken.json").write_text('{"type": 42}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# CALCULATION REQUEST
# =============================================================================


class TestCalculationRequestContract:
    """Тесты контракта calculation_request."""

    def test_valid(self, valid_request):
        validate_calculation_request(valid_request)
        assert CalculationRequestValidator().is_valid(valid_request)

    def test_operand_text_not_restricted(self, valid_request):
        """Разбор операндов — задача ядра; контракт принимает любые строки"""
        valid_request["left"] = "12abc"
        valid_request["operator"] = "*"
        validate_calculation_request(valid_request)

    def test_missing_required_field(self, valid_request):
        for field in ("left", "right", "operator"):
            data = dict(valid_request)
            del data[field]
            with pytest.raises(ValidationError):
                validate_calculation_request(data)

    def test_wrong_type(self, valid_request):
        valid_request["right"] = 456
        with pytest.raises(ValidationError):
            validate_calculation_request(valid_request)

    def test_additional_property(self, valid_request):
        valid_request["extra"] = "x"
        with pytest.raises(ValidationError):
            validate_calculation_request(valid_request)

    def test_iter_errors_reports_all(self):
        errors = list(CalculationRequestValidator().iter_errors({"left": 1}))
        assert len(errors) >= 2


# =============================================================================
# CALCULATION RESULT
# =============================================================================


class TestCalculationResultContract:
    """Тесты контракта calculation_result."""

    def test_valid_ok(self, valid_ok_result):
        validate_calculation_result(valid_ok_result)

    def test_valid_error(self, valid_error_result):
        validate_calculation_result(valid_error_result)

    def test_value_must_be_canonical(self, valid_ok_result):
        validator = CalculationResultValidator()
        for value in ("0", "-1", "1000", "-98765432109876543210"):
            valid_ok_result["value"] = value
            assert validator.is_valid(valid_ok_result)
        for value in ("007", "-0", "+1", "", "1.0", "-"):
            valid_ok_result["value"] = value
            assert not validator.is_valid(valid_ok_result)

    def test_ok_requires_value(self):
        with pytest.raises(ValidationError):
            validate_calculation_result({"status": "ok"})

    def test_ok_rejects_error_fields(self, valid_ok_result):
        valid_ok_result["message"] = "unexpected"
        with pytest.raises(ValidationError):
            validate_calculation_result(valid_ok_result)

    def test_error_requires_kind_and_message(self):
        with pytest.raises(ValidationError):
            validate_calculation_result({"status": "error", "message": "x"})
        with pytest.raises(ValidationError):
            validate_calculation_result({"status": "error", "error_kind": "parse_error"})

    def test_error_rejects_value(self, valid_error_result):
        valid_error_result["value"] = "1"
        with pytest.raises(ValidationError):
            validate_calculation_result(valid_error_result)

    def test_unknown_error_kind(self, valid_error_result):
        valid_error_result["error_kind"] = "overflow"
        with pytest.raises(ValidationError):
            validate_calculation_result(valid_error_result)

    def test_unknown_status(self):
        with pytest.raises(ValidationError):
            validate_calculation_result({"status": "pending"})


# =============================================================================
# PYDANTIC INTEGRATION
# =============================================================================


class TestPydanticIntegration:
    """Payload из CalculationResult соответствует контракту."""

    def test_success_payload_valid(self):
        for text in ("0", "-0", "007", "-123456789012345678901234567890"):
            payload = CalculationResult.success(parse(text)).to_payload()
            validate_calculation_result(payload)

    def test_failure_payload_valid(self):
        for kind in ErrorKind:
            payload = CalculationResult.failure(kind, "rejected").to_payload()
            validate_calculation_result(payload)
