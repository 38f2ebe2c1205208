"""Accounts presentation layer.

Each aggregate package contains its own routes and models. The aggregate
routers are collected here; the application mounts the result under the
configured API prefix.
"""

from __future__ import annotations

from fastapi import APIRouter

from accounts.presentation import users

router = APIRouter()

router.include_router(users.router)

__all__ = ["router"]
