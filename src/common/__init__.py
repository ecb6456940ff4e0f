"""
どこで: `common` パッケージ。
何を: ロギング設定・環境変数パース・型付き設定といった横断的な基盤。
なぜ: 色計算コア（`hctcolor`）から周辺の関心事を分離し、依存の向きを単純化するため。
"""

from .logging import setup_default_logging

__all__ = [
    "setup_default_logging",
]
