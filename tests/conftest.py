"""共通フィクスチャ。

- 設定の環境変数を毎テスト後に元へ戻す
"""

from __future__ import annotations

from typing import Iterator

import pytest

from common import settings


@pytest.fixture()
def fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """環境変数を変更して再読込し、終了時に既定へ戻す。"""
    for name in (
        "HCT_WSMEANS_MAX_ITERATIONS",
        "HCT_WSMEANS_SEED",
        "HCT_LOG_LEVEL",
        "HCT_DEBUG_SOLVER",
    ):
        monkeypatch.delenv(name, raising=False)
    yield monkeypatch
    monkeypatch.undo()
    settings.reload_from_env()
