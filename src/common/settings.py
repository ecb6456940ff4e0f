"""
どこで: `common.settings`
何を: ライブラリの環境変数を型付きで一元管理し、起動時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_bool, env_int, env_str


@dataclass
class _Settings:
    # 量子化（WSMeans）
    WSMEANS_MAX_ITERATIONS: int = 10
    WSMEANS_SEED: int = 0x42688

    # Logging
    LOG_LEVEL: str = "INFO"

    # Debug
    DEBUG_SOLVER: bool = False


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - bool は `env_bool`、int は `env_int`、str は `env_str` を使用。
    - 反復回数は下限 1 に丸める。
    """
    _settings.WSMEANS_MAX_ITERATIONS = (
        env_int("HCT_WSMEANS_MAX_ITERATIONS", 10, min_value=1) or 10
    )
    seed = env_int("HCT_WSMEANS_SEED", 0x42688)
    _settings.WSMEANS_SEED = 0x42688 if seed is None else seed

    _settings.LOG_LEVEL = env_str("HCT_LOG_LEVEL", "INFO")

    _settings.DEBUG_SOLVER = env_bool("HCT_DEBUG_SOLVER", False)


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
