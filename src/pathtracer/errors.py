# errors.py
"""Exceptions raised by the path tracer."""


class PathTracerError(Exception):
    """Base class for all path tracer errors."""


class MissingMaterialError(PathTracerError):
    """
    A scene intersection carried no material. This is a scene construction
    bug and aborts the render.
    """


class RenderConfigError(PathTracerError, ValueError):
    """Invalid render settings (image size, sample count, depth)."""
