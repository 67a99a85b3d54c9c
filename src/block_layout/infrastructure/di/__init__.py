"""Dependency injection."""
from __future__ import annotations

from block_layout.infrastructure.di.container import Container

__all__ = ["Container"]
