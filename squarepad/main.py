"""Точка входа в приложение."""
import argparse
import logging
from typing import List, Optional

from squarepad.app import SquarePadApp


def main(argv: Optional[List[str]] = None) -> None:
    """Создаёт и запускает главное окно приложения."""
    parser = argparse.ArgumentParser(description="Квадрат 1:1 с полями доминирующего цвета.")
    parser.add_argument("image", nargs="?", help="Изображение, которое открыть сразу.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Подробный журнал (DEBUG).")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = SquarePadApp()
    if args.image:
        # after the window is mapped, so preview sizes are known
        app.after(100, app.open_path, args.image)
    app.mainloop()


if __name__ == "__main__":
    main()
