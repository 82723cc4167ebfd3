# === FILE: site_crawler/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска краулера SiteCrawler через командную строку.

Команды:
  crawl     Обойти домен стартового URL и вывести/сохранить JSON-отчёт
  config    Показать итоговую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (необязательно)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (только stderr, если не указан)
  --log-format FORMAT Формат логирования

Опции crawl/config:
  SEED                   Стартовый URL (переопределяет seed_url из конфига)
  --fetch-timeout SEC    Таймаут одного запроса
  --politeness-delay SEC Пауза между запросами
  --user-agent UA        Заголовок User-Agent

Только crawl:
  --json PATH         Сохранить JSON-отчёт в файл
  --pretty            Преформатировать JSON-вывод (отступ 2)

Дополнительно:
  --version, -v       Показать версию SiteCrawler

Пример:
  site-crawler crawl https://example.com/ --json report.json --fetch-timeout 10
"""
import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from site_crawler import __version__
from site_crawler.aggregator import aggregate_results
from site_crawler.config import CrawlerConfig, load_config
from site_crawler.engine import start_crawl
from site_crawler.logger import DEFAULT_FORMAT, init_logging
from site_crawler.report.json_report import render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def _crawler_options(func):
    """Опции, общие для команд crawl и config."""
    func = click.option(
        '--user-agent', 'user_agent',
        default=None,
        help='Заголовок User-Agent'
    )(func)
    func = click.option(
        '--politeness-delay', 'politeness_delay',
        type=float,
        default=None,
        help='Пауза между запросами (секунд)'
    )(func)
    func = click.option(
        '--fetch-timeout', 'fetch_timeout',
        type=float,
        default=None,
        help='Таймаут одного запроса (секунд)'
    )(func)
    func = click.argument('seed', required=False)(func)
    return func


def _resolve_config(ctx, seed, fetch_timeout, politeness_delay, user_agent) -> CrawlerConfig:
    try:
        return load_config(
            ctx.obj['config_path'],
            seed_url=seed,
            fetch_timeout=fetch_timeout,
            politeness_delay=politeness_delay,
            user_agent=user_agent,
        )
    except (OSError, ValueError, TypeError, ValidationError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteCrawler, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (только stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд SiteCrawler CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@_crawler_options
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-вывод (отступ 2)'
)
@click.pass_context
def crawl(ctx, seed, fetch_timeout, politeness_delay, user_agent, json_output, pretty):
    """Обойти домен стартового URL и сформировать отчёт."""
    cfg = _resolve_config(ctx, seed, fetch_timeout, politeness_delay, user_agent)
    click.echo(f'Starting crawl: {cfg.seed_url}', err=True)
    try:
        results = asyncio.run(start_crawl(cfg))
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    report = aggregate_results(results)

    if json_output:
        try:
            saved_json = render_json(report, json_output, pretty=pretty)
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')
        click.echo(f'JSON report: {saved_json}', err=True)
        return

    click.echo(report.json(pretty=pretty))


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@_crawler_options
@click.pass_context
def show_config(ctx, seed, fetch_timeout, politeness_delay, user_agent):
    """Показать итоговую конфигурацию в JSON."""
    cfg = _resolve_config(ctx, seed, fetch_timeout, politeness_delay, user_agent)
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
