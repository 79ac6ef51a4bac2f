from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(debug: bool = False) -> None:
    level = logging.DEBUG if debug else logging.INFO
    root = logging.getLogger()

    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    else:
        root.setLevel(level)

    # the transaction boundary logs every begin/commit at DEBUG
    logging.getLogger("restcore").setLevel(level)
    if not debug:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
