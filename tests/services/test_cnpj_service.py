"""Tests for CnpjService."""

from __future__ import annotations

from pathlib import Path

import pytest

from cnpjtools.config.settings import CnpjSettings
from cnpjtools.domain.cnpj import is_valid
from cnpjtools.services.base import BaseService
from cnpjtools.services.cnpj import FICTITIOUS_WARNING, STATUS_MESSAGES, CnpjService
from cnpjtools.services.result import ServiceResult
from tests.conftest import OTHER_VALID_CNPJ, VALID_CNPJ, VALID_CNPJ_MASKED


def _service_with_toml(tmp_path: Path, body: str) -> CnpjService:
    (tmp_path / "cnpjtools.toml").write_text(body)
    return CnpjService(CnpjSettings.from_cli(start=tmp_path))


class TestServiceShape:
    def test_inherits_base_service(self) -> None:
        assert issubclass(CnpjService, BaseService)

    def test_settings_stored(self, settings: CnpjSettings) -> None:
        assert CnpjService(settings)._settings is settings

    def test_every_status_has_a_message(self) -> None:
        from cnpjtools.domain.types import CnpjStatus

        assert set(STATUS_MESSAGES) == set(CnpjStatus)


class TestValidate:
    def test_single_valid(self, service: CnpjService) -> None:
        result = service.validate([VALID_CNPJ_MASKED])
        assert isinstance(result, ServiceResult)
        assert result.ok
        assert result.op == "validate"
        item = result.data["items"][0]
        assert item["input"] == VALID_CNPJ_MASKED
        assert item["digits"] == VALID_CNPJ
        assert item["cnpj"] == VALID_CNPJ_MASKED
        assert item["status"] == "valid"
        assert item["valid"] is True
        assert item["message"] == "Valid CNPJ."
        assert result.data["count"] == 1
        assert result.data["valid_count"] == 1

    @pytest.mark.parametrize(
        "value,code",
        [
            ("", "NULL_OR_EMPTY"),
            ("abc", "NULL_OR_EMPTY"),
            ("1234567890123", "INVALID_FORMAT"),
            ("11111111111111", "EQUAL_DIGITS"),
            ("11222333000199", "INVALID"),
        ],
    )
    def test_single_failure_uses_status_code(
        self, service: CnpjService, value: str, code: str
    ) -> None:
        result = service.validate([value])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == code
        assert result.data["items"][0]["valid"] is False

    def test_cnpj_is_none_for_wrong_length(self, service: CnpjService) -> None:
        result = service.validate(["123"])
        assert result.data["items"][0]["cnpj"] is None

    def test_all_valid_batch(self, service: CnpjService) -> None:
        result = service.validate([VALID_CNPJ, OTHER_VALID_CNPJ])
        assert result.ok
        assert result.data["valid_count"] == 2

    def test_mixed_batch_fails(self, service: CnpjService) -> None:
        result = service.validate([VALID_CNPJ, "11222333000199", ""])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_CNPJ"
        assert result.error.message == "2 of 3 values are not valid CNPJs."
        assert result.error.detail["invalid"] == ["11222333000199", ""]
        assert [i["status"] for i in result.data["items"]] == [
            "valid",
            "invalid",
            "null_or_empty",
        ]

    def test_no_input(self, service: CnpjService) -> None:
        result = service.validate([])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NO_INPUT"

    def test_unmasked_display(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CNPJTOOLS_CONFIG", raising=False)
        svc = _service_with_toml(tmp_path, "[output]\nmasked = false\n")
        result = svc.validate([VALID_CNPJ_MASKED])
        assert result.data["items"][0]["cnpj"] == VALID_CNPJ


class TestMask:
    def test_partial(self, service: CnpjService) -> None:
        result = service.mask("1234567")
        assert result.ok
        assert result.data == {"input": "1234567", "masked": "12.345.67", "complete": False}
        assert result.warnings == []

    def test_complete(self, service: CnpjService) -> None:
        result = service.mask(VALID_CNPJ)
        assert result.data["masked"] == VALID_CNPJ_MASKED
        assert result.data["complete"] is True

    def test_truncation_warns(self, service: CnpjService) -> None:
        result = service.mask(VALID_CNPJ + "999")
        assert result.ok
        assert result.data["masked"] == VALID_CNPJ_MASKED
        assert result.warnings == ["Input truncated to 14 digits."]


class TestFormat:
    def test_formats(self, service: CnpjService) -> None:
        result = service.format(VALID_CNPJ)
        assert result.ok
        assert result.data["formatted"] == VALID_CNPJ_MASKED
        assert result.data["changed"] is True

    def test_pass_through(self, service: CnpjService) -> None:
        result = service.format("12345")
        assert result.ok
        assert result.data["formatted"] == "12345"
        assert result.data["changed"] is False


class TestCheckDigits:
    def test_known_base(self, service: CnpjService) -> None:
        result = service.check_digits("11.444.777/0001")
        assert result.ok
        assert result.data == {
            "base": "114447770001",
            "check_digits": "61",
            "cnpj": VALID_CNPJ,
            "formatted": VALID_CNPJ_MASKED,
        }

    def test_wrong_length(self, service: CnpjService) -> None:
        result = service.check_digits("1234")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_BASE"
        assert result.error.detail == {"base": "1234"}


class TestGenerate:
    def test_defaults(self, service: CnpjService) -> None:
        result = service.generate()
        assert result.ok
        assert result.op == "generate"
        assert result.data["count"] == 1
        assert result.data["fictitious"] is True
        assert result.data["masked"] is False
        (value,) = result.data["items"]
        assert len(value) == 14
        assert value[8:12] == "0001"
        assert is_valid(value)
        assert result.warnings == [FICTITIOUS_WARNING]
        assert result.meta is None

    def test_count_and_mask(self, service: CnpjService) -> None:
        result = service.generate(count=5, masked=True)
        assert len(result.data["items"]) == 5
        for value in result.data["items"]:
            assert len(value) == 18
            assert is_valid(value)

    def test_seed_is_reproducible(self, service: CnpjService) -> None:
        first = service.generate(count=3, seed=42)
        second = service.generate(count=3, seed=42)
        assert first.data["items"] == second.data["items"]
        assert first.meta == {"seed": 42}

    def test_branch_override(self, service: CnpjService) -> None:
        result = service.generate(count=3, branch="0002", seed=1)
        assert all(v[8:12] == "0002" for v in result.data["items"])

    def test_random_branch(self, service: CnpjService) -> None:
        result = service.generate(count=50, random_branch=True, seed=3)
        assert all(is_valid(v) for v in result.data["items"])
        assert any(v[8:12] != "0001" for v in result.data["items"])

    def test_invalid_count(self, service: CnpjService) -> None:
        result = service.generate(count=0)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_COUNT"

    def test_invalid_branch(self, service: CnpjService) -> None:
        result = service.generate(branch="12")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_BRANCH"

    def test_defaults_from_config(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CNPJTOOLS_CONFIG", raising=False)
        svc = _service_with_toml(
            tmp_path,
            '[generate]\nbranch = "0009"\ncount = 2\nmasked = true\nseed = 5\n',
        )
        result = svc.generate()
        assert result.data["count"] == 2
        assert all(v[11:15] == "0009" for v in result.data["items"])
        assert result.meta == {"seed": 5}

    def test_explicit_args_beat_config(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("CNPJTOOLS_CONFIG", raising=False)
        svc = _service_with_toml(tmp_path, "[generate]\nrandom_branch = true\n")
        result = svc.generate(count=5, branch="0003", seed=8)
        assert all(v[8:12] == "0003" for v in result.data["items"])
