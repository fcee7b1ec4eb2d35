"""API ハンドラーモジュール."""
