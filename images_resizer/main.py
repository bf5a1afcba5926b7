"""Точка входа в приложение: разбор аргументов и настройка логирования."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from images_resizer.app import ImagesResizerApp
from images_resizer.models.config_model import DEFAULT_DIRECTORY, DEFAULT_FACTOR, ResizeConfig
from images_resizer.models.errors import ConfigError

# справка завершает процесс без обработки и без признака ошибки
USAGE_EXIT_CODE = 0
MIN_ARGS = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="images-resizer",
        description="Images resizer tool: downscale every JPEG/PNG/GIF in a directory "
                    "and save it next to the original as <name>_resized.<ext>.",
    )
    parser.add_argument(
        "-d",
        dest="directory",
        type=Path,
        default=Path(DEFAULT_DIRECTORY),
        help="Directory with images to resize (default: %(default)s)",
    )
    parser.add_argument(
        "-f",
        dest="factor",
        type=float,
        default=DEFAULT_FACTOR,
        help="Scaling factor value from (0.0 to 1.0) (default: %(default)s)",
    )
    return parser


def configure_logging(level: int = logging.INFO) -> None:
    """Один обработчик в stdout: строки прогресса и есть интерфейс пользователя."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger()
    # Remove existing handlers to prevent duplicate output
    if root.hasHandlers():
        root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def main(argv: Optional[List[str]] = None) -> int:
    """Разбирает аргументы, проверяет конфигурацию и запускает обработку."""
    argv = sys.argv[1:] if argv is None else argv
    parser = build_parser()
    args = parser.parse_args(argv)

    # меньше одной пары "флаг значение" - только справка, как и при неверном коэффициенте
    if len(argv) < MIN_ARGS:
        parser.print_help()
        return USAGE_EXIT_CODE
    try:
        config = ResizeConfig(directory=args.directory, factor=args.factor)
    except ConfigError as exc:
        parser.print_help()
        print(f"\n{exc}", file=sys.stderr)
        return USAGE_EXIT_CODE

    configure_logging()
    return ImagesResizerApp(config).run()


if __name__ == "__main__":
    sys.exit(main())
