"""アプリケーション層."""
