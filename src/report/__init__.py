# src/report/__init__.py — v1
