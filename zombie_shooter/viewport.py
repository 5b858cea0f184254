"""Mapping between window pixels and canvas pixels."""

from __future__ import annotations


def fit_rect(window_size: tuple[int, int], canvas_size: tuple[int, int]) -> tuple[int, int, int, int]:
    """
    Largest canvas-shaped rectangle centered in the window.

    Returns
    -------
    tuple[int, int, int, int]
        (left, top, width, height) in window pixels.
    """
    win_w, win_h = window_size
    canvas_w, canvas_h = canvas_size
    scale = min(win_w / canvas_w, win_h / canvas_h)
    view_w = max(1, int(canvas_w * scale))
    view_h = max(1, int(canvas_h * scale))
    return ((win_w - view_w) // 2, (win_h - view_h) // 2, view_w, view_h)


def to_canvas_coords(pos: tuple[float, float], view_rect: tuple[int, int, int, int],
                     canvas_size: tuple[int, int]) -> tuple[float, float]:
    """Convert a window-space point to canvas space."""
    left, top, view_w, view_h = view_rect
    canvas_w, canvas_h = canvas_size
    x = (pos[0] - left) / view_w * canvas_w
    y = (pos[1] - top) / view_h * canvas_h
    return x, y
