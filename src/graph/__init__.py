# src/graph/__init__.py — v1
