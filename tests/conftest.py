from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path
from typing import Callable

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from applog.services.app_log import AppLog  # noqa: E402

FROZEN_NOW = datetime(2021, 3, 14, 15, 9, 26)
FROZEN_DATE = "3/14/21, 3:09 PM"


def fixed_date(_: datetime) -> str:
    return FROZEN_DATE


@pytest.fixture()
def log_dir(tmp_path: Path) -> Path:
    target = tmp_path / "Documents"
    target.mkdir()
    return target


@pytest.fixture()
def make_log(log_dir: Path) -> Callable[..., AppLog]:
    def factory(filename: str = "t.txt", *, debug: bool = True) -> AppLog:
        return AppLog(
            filename,
            directory=log_dir,
            debug=debug,
            clock=lambda: FROZEN_NOW,
            date_formatter=fixed_date,
        )

    return factory
