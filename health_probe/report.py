# health_probe/report.py

"""
Генерация JSON-отчёта о запуске HealthProbe.

Сериализация объекта ProbeResult в файл.
"""
import json
from pathlib import Path

from health_probe.models import ProbeResult


def render_json(result: ProbeResult, output_path: Path | str) -> Path:
    """
    Сохраняет результат проверки в формате JSON по указанному пути.

    :param result: объект ProbeResult
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла

    Пример:
    ```python
    from health_probe.report import render_json
    report_path = render_json(result, 'reports/health.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(result.as_dict(), f, ensure_ascii=False, indent=2)

    return output


__all__ = ["render_json"]
