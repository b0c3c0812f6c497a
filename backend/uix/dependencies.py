"""FastAPI dependencies exposing the configuration stored on app.state."""

from fastapi import Request

from uix.config import AppConfig
from uix.static import BundleStaticFiles


def get_app_config(request: Request) -> AppConfig:
    return request.app.state.config


def get_bundle(request: Request) -> BundleStaticFiles:
    return request.app.state.bundle
