"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.

명령어 구조:
    collector --version
    collector -p ibm collect -r us-south -r eu-de --resource-group my-rg
    collector -p aws --out snapshot.json collect
    collector -p ibm get-regions
    collector -p ibm fabricate --num-vpcs 3 --subnets-per-vpc 2 --seed 7

동작:
    - JSON 결과는 --out 파일 또는 stdout으로 출력
    - 통계 테이블, 상태 메시지, 로그는 stderr로 출력
    - CollectorError 발생 시 메시지를 출력하고 종료 코드 1, 결과는 쓰지 않음

Usage:
    $ collector -p ibm collect
    $ python -m cli.app -p ibm get-regions
"""

from __future__ import annotations

from pathlib import Path

import click
from click import Context

from cli.i18n import set_lang, t
from cli.ui import console, print_error, print_success, setup_logging
from collector import ALL_PROVIDERS, CollectorError, get_resource_container, get_version
from collector.config import ENV_LANG, get_settings
from collector.shared.container import FabricateOptions, ResourcesContainer
from collector.shared.retry import RetryConfig

VERSION = get_version()


def _get_container(
    provider: str,
    regions: list[str] | None = None,
    resource_group: str | None = None,
    retry: RetryConfig | None = None,
) -> ResourcesContainer:
    container = get_resource_container(provider, regions, resource_group, retry=retry)
    if container is None:
        print_error(t("cli.unsupported_provider", provider=provider))
        raise SystemExit(1)
    return container


def _write_output(container: ResourcesContainer, out: str | None) -> None:
    """JSON 결과를 파일 또는 stdout으로 출력"""
    text = container.to_json_string()
    if out is None:
        click.echo(text)
        return
    try:
        Path(out).write_text(text, encoding="utf-8")
    except OSError as e:
        print_error(t("cli.output_failed", error=e))
        raise SystemExit(1) from e
    print_success(t("cli.output_written", path=out))


@click.group(help=t("cli.help_intro"))
@click.version_option(VERSION, prog_name="collector")
@click.option(
    "--lang",
    type=click.Choice(["ko", "en"]),
    default="ko",
    envvar=ENV_LANG,
    help=t("cli.lang_help"),
)
@click.option(
    "-p",
    "--provider",
    type=click.Choice(ALL_PROVIDERS, case_sensitive=False),
    required=True,
    help=t("cli.provider_help"),
)
@click.option("-o", "--out", default=None, type=click.Path(dir_okay=False), help=t("cli.out_help"))
@click.pass_context
def cli(ctx: Context, lang: str, provider: str, out: str | None) -> None:
    """Cloud Resource Collector"""
    set_lang(lang)
    setup_logging(get_settings().log_level)

    ctx.ensure_object(dict)
    ctx.obj["lang"] = lang
    ctx.obj["provider"] = provider.lower()
    ctx.obj["out"] = out


@cli.command("collect", help=t("cli.collect_help"))
@click.option("-r", "--region", "regions", multiple=True, help=t("cli.region_help"))
@click.option("--resource-group", default=None, help=t("cli.resource_group_help"))
@click.option("--max-retries", default=None, type=click.IntRange(min=0), help=t("cli.max_retries_help"))
@click.pass_context
def collect_command(
    ctx: Context,
    regions: tuple[str, ...],
    resource_group: str | None,
    max_retries: int | None,
) -> None:
    """프로바이더 API에서 리소스를 수집하여 출력"""
    provider = ctx.obj["provider"]
    if resource_group and provider != "ibm":
        print_error(t("cli.resource_group_unsupported", provider=provider))
        raise SystemExit(1)

    retry = RetryConfig(max_retries=max_retries) if max_retries is not None else None
    container = _get_container(provider, list(regions), resource_group, retry)

    console.print(t("cli.collecting", provider=provider, regions=", ".join(container.regions)))
    try:
        container.collect_resources_from_api()
    except CollectorError as e:
        print_error(t("cli.collect_failed", error=e))
        raise SystemExit(1) from e

    _write_output(container, ctx.obj["out"])
    container.print_stats(console)
    print_success(t("cli.collect_done"))


@cli.command("get-regions", help=t("cli.get_regions_help"))
@click.pass_context
def get_regions_command(ctx: Context) -> None:
    """프로바이더의 유효한 리전 목록 출력"""
    provider = ctx.obj["provider"]
    container = _get_container(provider)
    click.echo(t("cli.regions_list", provider=provider, regions=", ".join(container.all_regions())))


@cli.command("fabricate", help=t("cli.fabricate_help"))
@click.option("--num-vpcs", default=1, show_default=True, type=click.IntRange(min=0), help=t("cli.num_vpcs_help"))
@click.option(
    "--subnets-per-vpc",
    default=1,
    show_default=True,
    type=click.IntRange(min=0),
    help=t("cli.subnets_per_vpc_help"),
)
@click.option("--seed", default=None, type=int, help=t("cli.seed_help"))
@click.pass_context
def fabricate_command(ctx: Context, num_vpcs: int, subnets_per_vpc: int, seed: int | None) -> None:
    """합성 데이터 생성"""
    container = _get_container(ctx.obj["provider"])
    try:
        container.fabricate(FabricateOptions(num_vpcs=num_vpcs, subnets_per_vpc=subnets_per_vpc, seed=seed))
    except CollectorError as e:
        print_error(t("cli.fabricate_failed", error=e))
        raise SystemExit(1) from e

    _write_output(container, ctx.obj["out"])
    container.print_stats(console)
    print_success(t("cli.fabricate_done"))


if __name__ == "__main__":
    cli()
