"""CLI para lanzar el registro semanal de glucosa."""

from __future__ import annotations

import argparse

from glucosa_tool.app import run_app
from glucosa_tool.config import ConfigError, load_config
from glucosa_tool.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Registro de glucosa por momento del día con reporte de 7 días."
    )
    parser.add_argument(
        "--export-dir",
        default=None,
        help="Directorio de salida de los PDF (default: ./salidas).",
    )
    parser.add_argument(
        "--days",
        type=int,
        default=None,
        help="Cantidad de días del reporte (default: 7).",
    )
    parser.add_argument(
        "--timezone",
        default=None,
        help="Zona horaria para la fecha de hoy (default: local).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Nivel de logging (default: INFO).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the tracker.

    Returns:
        Exit code (0 on success, 1 if the GUI cannot start).
    """
    parser = build_parser()
    ns = parser.parse_args(argv)
    try:
        config = load_config(
            export_dir=ns.export_dir,
            window_days=ns.days,
            timezone=ns.timezone,
            log_level=ns.log_level,
        )
    except ConfigError as exc:
        parser.error(str(exc))

    configure_logging(config.log_level.upper())
    logger.info("Iniciando; PDF en %s", config.export_dir)
    try:
        return run_app(config)
    except ImportError as exc:
        print(f"No se pudo iniciar Kivy: {exc}")
        print("Instala dependencias de GUI: pip install 'glucosa-tool[gui]'")
        return 1
