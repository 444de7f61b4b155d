"""API route registrations."""

from interfaces.api.routes.want_routes import router as want_router

__all__ = ["want_router"]
