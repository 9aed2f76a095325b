# tests/cli/test_cli_app.py
"""
cli/app.py 단위 테스트

CliRunner로 명령어별 종료 코드, 출력 위치, 오류 처리를 검증합니다.
JSON 결과는 --out 파일로 확인합니다 (stdout/stderr 혼합 여부는 Click 버전마다 다름).
"""

import json
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from cli.app import cli
from cli.i18n import set_lang
from collector.exceptions import APICallError


@pytest.fixture
def runner():
    """Click CliRunner"""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_lang():
    yield
    set_lang("ko")


def mock_container(json_text='{"collector_version": "0.6.0"}'):
    container = MagicMock()
    container.regions = ["us-south"]
    container.to_json_string.return_value = json_text
    return container


# =============================================================================
# CLI 그룹
# =============================================================================


class TestCLIGroup:
    """CLI 그룹 옵션 테스트"""

    def test_version_option(self, runner):
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "collector" in result.output
        assert "0.6.0" in result.output

    def test_help_option(self, runner):
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "collect" in result.output
        assert "get-regions" in result.output
        assert "fabricate" in result.output

    def test_provider_required(self, runner):
        result = runner.invoke(cli, ["get-regions"])

        assert result.exit_code == 2

    def test_unknown_provider(self, runner):
        result = runner.invoke(cli, ["-p", "gcp", "get-regions"])

        assert result.exit_code == 2

    def test_provider_case_insensitive(self, runner):
        result = runner.invoke(cli, ["-p", "IBM", "get-regions"])

        assert result.exit_code == 0
        assert "provider ibm" in result.output


# =============================================================================
# get-regions
# =============================================================================


class TestGetRegions:
    """get-regions 명령어 테스트"""

    def test_ibm_regions(self, runner):
        result = runner.invoke(cli, ["-p", "ibm", "get-regions"])

        assert result.exit_code == 0
        assert "Available regions for provider ibm: us-east, us-south, ca-tor" in result.output
        assert "eu-fr2" not in result.output

    def test_aws_regions(self, runner):
        result = runner.invoke(cli, ["-p", "aws", "get-regions"])

        assert result.exit_code == 0
        assert "us-east-1" in result.output


# =============================================================================
# collect
# =============================================================================


class TestCollect:
    """collect 명령어 테스트"""

    def test_resource_group_rejected_for_aws(self, runner):
        with patch("cli.app.get_resource_container") as factory:
            result = runner.invoke(cli, ["--lang", "en", "-p", "aws", "collect", "--resource-group", "rg"])

        assert result.exit_code == 1
        assert "only supported for provider ibm" in result.output
        factory.assert_not_called()

    def test_missing_api_key(self, runner, tmp_path):
        """자격 증명이 없으면 종료 코드 1, 결과 파일 없음"""
        out = tmp_path / "snapshot.json"

        result = runner.invoke(cli, ["--lang", "en", "-p", "ibm", "--out", str(out), "collect", "-r", "us-south"])

        assert result.exit_code == 1
        assert "Collection failed" in result.output
        assert "IBMCLOUD_API_KEY" in result.output
        assert not out.exists()

    def test_api_error_exits_1(self, runner, tmp_path):
        container = mock_container()
        container.collect_resources_from_api.side_effect = APICallError("list_vpcs", error_code="500")
        out = tmp_path / "snapshot.json"

        with patch("cli.app.get_resource_container", return_value=container):
            result = runner.invoke(cli, ["-p", "ibm", "--out", str(out), "collect"])

        assert result.exit_code == 1
        assert "list_vpcs" in result.output
        assert not out.exists()
        container.to_json_string.assert_not_called()

    def test_success_writes_file(self, runner, tmp_path):
        container = mock_container('{"collector_version": "0.6.0", "vpcs": []}')
        out = tmp_path / "snapshot.json"
        args = ["collect", "-r", "us-south", "-r", "eu-de", "--resource-group", "prod", "--max-retries", "2"]

        with patch("cli.app.get_resource_container", return_value=container) as factory:
            result = runner.invoke(cli, ["--lang", "en", "-p", "ibm", "--out", str(out), *args])

        assert result.exit_code == 0
        assert json.loads(out.read_text(encoding="utf-8")) == {"collector_version": "0.6.0", "vpcs": []}
        assert "Collection complete" in result.output
        assert factory.call_args.args[:3] == ("ibm", ["us-south", "eu-de"], "prod")
        assert factory.call_args.kwargs["retry"].max_retries == 2
        container.print_stats.assert_called_once()

    def test_default_retry_from_env(self, runner, tmp_path):
        container = mock_container()

        with patch("cli.app.get_resource_container", return_value=container) as factory:
            result = runner.invoke(cli, ["-p", "aws", "--out", str(tmp_path / "o.json"), "collect"])

        assert result.exit_code == 0
        assert factory.call_args.kwargs["retry"] is None

    def test_stdout_output(self, runner):
        container = mock_container('{"collector_version": "0.6.0"}')

        with patch("cli.app.get_resource_container", return_value=container):
            result = runner.invoke(cli, ["-p", "ibm", "collect"])

        assert result.exit_code == 0
        assert '{"collector_version": "0.6.0"}' in result.output

    def test_output_write_failure(self, runner, tmp_path):
        container = mock_container()
        out = tmp_path / "missing-dir" / "snapshot.json"

        with patch("cli.app.get_resource_container", return_value=container):
            result = runner.invoke(cli, ["--lang", "en", "-p", "ibm", "--out", str(out), "collect"])

        assert result.exit_code == 1
        assert "Failed to write output" in result.output

    def test_negative_max_retries_rejected(self, runner):
        result = runner.invoke(cli, ["-p", "ibm", "collect", "--max-retries", "-1"])

        assert result.exit_code == 2


# =============================================================================
# fabricate
# =============================================================================


class TestFabricate:
    """fabricate 명령어 테스트"""

    def test_ibm_fabricate(self, runner, tmp_path):
        out = tmp_path / "fabricated.json"

        result = runner.invoke(
            cli,
            ["-p", "ibm", "--out", str(out), "fabricate", "--num-vpcs", "3", "--subnets-per-vpc", "2", "--seed", "7"],
        )

        assert result.exit_code == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["provider"] == "ibm"
        assert len(data["vpcs"]) == 3
        assert len(data["subnets"]) == 6

    def test_seed_reproducible(self, runner, tmp_path):
        first, second = tmp_path / "a.json", tmp_path / "b.json"

        runner.invoke(cli, ["-p", "ibm", "--out", str(first), "fabricate", "--seed", "3"])
        runner.invoke(cli, ["-p", "ibm", "--out", str(second), "fabricate", "--seed", "3"])

        assert first.read_text(encoding="utf-8") == second.read_text(encoding="utf-8")

    def test_aws_not_supported(self, runner, tmp_path):
        out = tmp_path / "fabricated.json"

        result = runner.invoke(cli, ["--lang", "en", "-p", "aws", "--out", str(out), "fabricate"])

        assert result.exit_code == 1
        assert "Fabrication failed" in result.output
        assert not out.exists()
