"""API レイヤー（Lambda ハンドラー）."""
