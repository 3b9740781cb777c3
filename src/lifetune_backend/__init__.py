"""LIFEtune backend package wiring and entrypoints."""

from lifetune_backend.main import run_dev, run_prod
from lifetune_backend.settings import BackendSettings, get_settings

main = run_dev

__all__ = [
    "BackendSettings",
    "get_settings",
    "main",
    "run_dev",
    "run_prod",
]
