"""Tests for the command-line interface."""

import json

from click.testing import CliRunner

from main import main


def _run(*args, input=None):
    return CliRunner().invoke(main, list(args), input=input)


class TestListAndDefaults:
    """Test the inspection commands."""

    def test_list(self):
        result = _run("list")
        assert result.exit_code == 0
        assert "ProcessCreateVm" in result.output
        assert "LoginResponse" in result.output

    def test_defaults(self):
        result = _run("defaults", "LoginResponse")
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["tokenType"] == "Bearer"
        assert data["roles"] == []

    def test_unknown_contract(self):
        result = _run("defaults", "NoSuchVm")
        assert result.exit_code != 0
        assert "NoSuchVm" in result.output

    def test_rules(self):
        result = _run("rules", "ProcessCreateVm")
        assert result.exit_code == 0
        assert "Informe o nome" in result.output
        assert "Selecione um departamento" in result.output

    def test_rules_for_record(self):
        result = _run("rules", "UserDto")
        assert result.exit_code == 0
        assert "declares no rules" in result.output


class TestValidateCommand:
    """Test the validate command."""

    def test_valid_payload(self):
        payload = json.dumps({"roleName": "Gestor"})
        result = _run("validate", "RoleCreateVm", "-", input=payload)
        assert result.exit_code == 0
        assert "valid" in result.output

    def test_invalid_payload(self):
        payload = json.dumps({"processName": "", "departmentId": 1, "createdBy": 1})
        result = _run("validate", "ProcessCreateVm", "-", input=payload)
        assert result.exit_code == 1
        assert "process_name" in result.output
        assert "Informe o nome" in result.output

    def test_malformed_payload(self):
        result = _run("validate", "RoleCreateVm", "-", input="{not json")
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_payload_from_file(self, tmp_path):
        path = tmp_path / "user.json"
        path.write_text(json.dumps({"username": "validUser", "passwordHash": None}), encoding="utf-8")
        result = _run("validate", "UserCreateVm", str(path))
        assert result.exit_code == 1
        assert "Senha inicial é obrigatória na criação" in result.output
