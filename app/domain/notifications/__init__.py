"""Operator notification rendering."""

from app.domain.notifications.renderer import render_body, render_stars, render_subject

__all__ = ["render_body", "render_stars", "render_subject"]
