import sys
from pathlib import Path
sys.path.append(str(Path(__file__).resolve().parent.parent))


import logging
from datetime import date
from typing import List, Optional

from underwriting.config import load_config
from underwriting.services.engine import perform_stop_checks
from underwriting.utils.formatting import render_verdict

logger = logging.getLogger(__name__)

EXIT_APPROVED = 0
EXIT_REJECTED = 1
EXIT_FILE_NOT_FOUND = 2
EXIT_UNEXPECTED_ERROR = 3


def main(argv: Optional[List[str]] = None) -> int:
    config = load_config()
    logging.basicConfig(level=config.log_level)

    args = sys.argv[1:] if argv is None else argv
    # путь к файлу с данными клиента
    client_file = Path(args[0]) if args else config.client_file

    try:
        raw_text = client_file.read_text(encoding="utf-8")
        print("Файл успешно прочитан.")

        today = date.today()
        verdict = perform_stop_checks(raw_text, today=today)
        print(render_verdict(verdict, checked_on=today))
    except FileNotFoundError:
        print(f"Файл не найден по пути {client_file}")
        return EXIT_FILE_NOT_FOUND
    except Exception as exc:  # pragma: no cover - unexpected errors
        logger.exception("Unexpected error while checking %s", client_file, exc_info=exc)
        print(f"Произошла непредвиденная ошибка: {exc}")
        return EXIT_UNEXPECTED_ERROR

    return EXIT_APPROVED if verdict.approved else EXIT_REJECTED


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
