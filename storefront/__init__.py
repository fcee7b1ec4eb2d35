"""Afterpay / Cash App Pay ストアフロントのバックエンド."""
