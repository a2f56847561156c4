#!/usr/bin/env python3
"""
Точка входа HealthProbe для командной строки.

Без аргументов открывает headless-сессию Chrome на локальном Selenium hub,
загружает http://localhost:3000/health и проверяет, что текст страницы
содержит "ok" (в любом регистре).

Опции:
  --config PATH       YAML/JSON-конфиг (по умолчанию health_probe/default.yaml)
  --hub URL           Адрес WebDriver-сервиса (override hub_url)
  --url URL           Проверяемая страница (override target_url)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (только stderr, если не указан)
  --json PATH         Сохранить JSON-отчёт о запуске

Коды выхода:
  0  страница содержит "ok"
  1  страница прочитана, но "ok" не найден
  2  ошибка сессии, навигации, чтения страницы или конфигурации

Пример:
  health-probe --hub http://grid:4444/wd/hub --url http://app:3000/health --json reports/health.json
"""
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from health_probe import __version__
from health_probe.config import load_config, override_config
from health_probe.logger import init_logging
from health_probe.models import ExitCode
from health_probe.probe import HealthProbe
from health_probe.report import render_json
from health_probe.session import default_driver_factory

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(int(ExitCode.ERROR))


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='HealthProbe, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option('--hub', 'hub_url', default=None, help='Адрес WebDriver-сервиса.')
@click.option('--url', 'target_url', default=None, help='Проверяемая страница.')
@click.option(
    '--log-level', 'log_level',
    default='WARNING', show_default=True,
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
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
def cli(config_path, hub_url, target_url, log_level, log_file, json_output):
    """Проверить готовность сервиса через удалённый браузер."""
    try:
        init_logging(level=log_level, log_file=str(log_file) if log_file else None)
    except OSError as e:
        print_error(f'Ошибка настройки логирования: {e}')

    try:
        cfg = override_config(load_config(config_path), hub_url=hub_url, target_url=target_url)
    except (OSError, ValueError, TypeError, ValidationError) as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')

    result = HealthProbe(cfg, driver_factory=default_driver_factory).run()

    if json_output:
        try:
            render_json(result, json_output)
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if result.ok:
        click.echo(result.message)
    else:
        click.secho(result.message, fg='red', err=True)
    sys.exit(int(result.exit_code))


if __name__ == "__main__":
    cli()
