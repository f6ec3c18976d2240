"""
CLI integration tests using Click's test runner.

HTTP goes through an ``httpx.MockTransport`` handed to the root command via
``obj``, so no network access is needed.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner, Result

from zcom_registry.cli import cli

from conftest import (
    ADDRESS,
    API_ROOT,
    AUTH_TOKEN,
    FAILED_RESPONSE,
    FIXTURES_ROOT,
    FakeApi,
)

KEY_ONE = "0x" + "0" * 63 + "1"
KEY_ONE_ADDRESS = "0x7e5f4552091a69125d5dfcb7b8c2659029395bdf"


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def abi_file() -> Path:
    return FIXTURES_ROOT / "dummy-abi"


def invoke(runner: CliRunner, fake_api: FakeApi, output_dir: Path, *args: str, env=None) -> Result:
    return runner.invoke(
        cli,
        ["--api-url", API_ROOT, "--output-dir", str(output_dir), *args],
        obj={"transport": fake_api.transport},
        env={"ZCOM_AUTH_TOKEN": AUTH_TOKEN, **(env or {})},
    )


class TestVersionAndHelp:
    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_banner_without_command(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "register-cns" in result.output


class TestConfirmToken:
    def test_accepted(self, runner: CliRunner, fake_api: FakeApi, output_dir: Path) -> None:
        result = invoke(runner, fake_api, output_dir, "confirm-token")
        assert result.exit_code == 0, result.output
        assert "Token confirmed" in result.output
        assert fake_api.last_body() == {"authToken": AUTH_TOKEN}

    def test_rejected(self, runner: CliRunner, fake_api: FakeApi, output_dir: Path) -> None:
        fake_api.payload = dict(FAILED_RESPONSE)
        result = invoke(runner, fake_api, output_dir, "confirm-token")
        assert result.exit_code == 3
        assert "Dummy failed response" in result.output

    def test_secret_file_option(self, runner: CliRunner, fake_api: FakeApi, output_dir: Path, tmp_path: Path) -> None:
        secret = tmp_path / ".test-token"
        secret.write_text("a" * 64, encoding="utf-8")
        result = runner.invoke(
            cli,
            ["--api-url", API_ROOT, "--secret-file", str(secret), "confirm-token"],
            obj={"transport": fake_api.transport},
            env={"ZCOM_AUTH_TOKEN": AUTH_TOKEN},
        )
        assert result.exit_code == 0, result.output
        assert fake_api.last_body() == {"authToken": "a" * 64}

    def test_server_error(self, runner: CliRunner, fake_api: FakeApi, output_dir: Path) -> None:
        fake_api.status_code = 500
        result = invoke(runner, fake_api, output_dir, "confirm-token")
        assert result.exit_code == 4
        assert "Request failed" in result.output


class TestRegisterCns:
    def test_register_and_save(self, runner: CliRunner, fake_api: FakeApi, output_dir: Path) -> None:
        result = invoke(runner, fake_api, output_dir, "register-cns", ADDRESS, "--save")
        assert result.exit_code == 0, result.output
        assert (output_dir / "zcom-cns.js").exists()
        assert fake_api.last_body() == {"address": ADDRESS, "authToken": AUTH_TOKEN}

    def test_invalid_address(self, runner: CliRunner, fake_api: FakeApi, output_dir: Path) -> None:
        result = invoke(runner, fake_api, output_dir, "register-cns", "dummyAdress")
        assert result.exit_code == 2
        assert "Invalid Address" in result.output
        assert fake_api.requests == []


class TestContracts:
    def test_add_contract(self, runner: CliRunner, fake_api: FakeApi, output_dir: Path, abi_file: Path) -> None:
        result = invoke(
            runner, fake_api, output_dir,
            "add-contract", ADDRESS, "--abi-file", str(abi_file),
            "--gas-limit", "9000", "--save", "--name", "History",
        )
        assert result.exit_code == 0, result.output
        body = fake_api.last_body()
        assert body["gasLimit"] == 9000
        assert body["abi"] == abi_file.read_text(encoding="utf-8")
        assert (output_dir / "zcom-history.js").exists()

    def test_add_contract_save_without_name(
        self, runner: CliRunner, fake_api: FakeApi, output_dir: Path, abi_file: Path
    ) -> None:
        result = invoke(runner, fake_api, output_dir, "add-contract", ADDRESS, "--abi-file", str(abi_file), "--save")
        assert result.exit_code == 0, result.output
        assert "no --name given" in result.output
        assert list(output_dir.iterdir()) == []

    def test_bad_name_sends_nothing(self, runner: CliRunner, fake_api: FakeApi, output_dir: Path, abi_file: Path) -> None:
        result = invoke(
            runner, fake_api, output_dir,
            "add-contract", ADDRESS, "--abi-file", str(abi_file), "--save", "--name", "my-token",
        )
        assert result.exit_code == 2
        assert "Invalid contract name" in result.output
        assert fake_api.requests == []

    def test_update_contract(self, runner: CliRunner, fake_api: FakeApi, output_dir: Path, abi_file: Path) -> None:
        result = invoke(runner, fake_api, output_dir, "update-contract", ADDRESS, "--abi-file", str(abi_file))
        assert result.exit_code == 0, result.output
        assert fake_api.last.method == "PUT"
        assert str(fake_api.last.url) == f"{API_ROOT}/contracts/{ADDRESS}"
        assert fake_api.last_body()["gasLimit"] == 100_000

    def test_gas_limit_too_large(self, runner: CliRunner, fake_api: FakeApi, output_dir: Path, abi_file: Path) -> None:
        result = invoke(
            runner, fake_api, output_dir,
            "update-contract", ADDRESS, "--abi-file", str(abi_file), "--gas-limit", "4000001",
        )
        assert result.exit_code == 2
        assert "Invalid gas limit value" in result.output


class TestProvideEther:
    def test_to_address(self, runner: CliRunner, fake_api: FakeApi, output_dir: Path) -> None:
        result = invoke(runner, fake_api, output_dir, "provide-ether", ADDRESS, "--ether", "168")
        assert result.exit_code == 0, result.output
        assert fake_api.last_body() == {"address": ADDRESS, "ether": 168, "authToken": AUTH_TOKEN}

    def test_from_wallet(self, runner: CliRunner, fake_api: FakeApi, output_dir: Path) -> None:
        result = invoke(
            runner, fake_api, output_dir, "provide-ether", "--ether", "1", "--from-wallet",
            env={"PRIVATE_KEY": KEY_ONE},
        )
        assert result.exit_code == 0, result.output
        assert fake_api.last_body()["address"] == KEY_ONE_ADDRESS

    def test_zero_amount(self, runner: CliRunner, fake_api: FakeApi, output_dir: Path) -> None:
        result = invoke(runner, fake_api, output_dir, "provide-ether", ADDRESS, "--ether", "0")
        assert result.exit_code == 2
        assert "Invalid ether amount" in result.output

    def test_address_and_wallet_conflict(self, runner: CliRunner, fake_api: FakeApi, output_dir: Path) -> None:
        result = invoke(runner, fake_api, output_dir, "provide-ether", ADDRESS, "--ether", "1", "--from-wallet")
        assert result.exit_code != 0
        assert fake_api.requests == []

    def test_missing_address(self, runner: CliRunner, fake_api: FakeApi, output_dir: Path) -> None:
        result = invoke(runner, fake_api, output_dir, "provide-ether", "--ether", "1")
        assert result.exit_code != 0
        assert "Missing ADDRESS" in result.output


class TestCompile:
    def test_compile_and_delete(self, runner: CliRunner, fake_api: FakeApi, output_dir: Path) -> None:
        for source in (FIXTURES_ROOT / "dummy-output").iterdir():
            shutil.copy(source, output_dir / source.name)

        result = invoke(runner, fake_api, output_dir, "compile", "--delete-inputs")
        assert result.exit_code == 0, result.output
        assert [p.name for p in output_dir.iterdir()] == ["zcom-vars-compiled.js"]

    def test_unreadable_input_reports_error(self, runner: CliRunner, fake_api: FakeApi, output_dir: Path) -> None:
        (output_dir / "zcom-broken.js").mkdir()

        result = invoke(runner, fake_api, output_dir, "compile")
        assert result.exit_code == 1
        assert "ERROR:" in result.output
        assert not isinstance(result.exception, OSError)


class TestWhoami:
    def test_without_wallet(self, runner: CliRunner, fake_api: FakeApi, output_dir: Path, tmp_path: Path) -> None:
        with patch("zcom_registry.sigil.wallet.ZCOM_ENV", tmp_path / "missing.env"):
            result = invoke(runner, fake_api, output_dir, "whoami", env={"PRIVATE_KEY": None})
        assert result.exit_code == 0, result.output
        assert f"API root:   {API_ROOT}" in result.output
        assert AUTH_TOKEN not in result.output
        assert "(not configured)" in result.output

    def test_with_wallet(self, runner: CliRunner, fake_api: FakeApi, output_dir: Path) -> None:
        result = invoke(runner, fake_api, output_dir, "whoami", env={"PRIVATE_KEY": KEY_ONE})
        assert result.exit_code == 0, result.output
        assert KEY_ONE_ADDRESS in result.output
