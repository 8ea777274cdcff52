"""pygame backend for frame draw commands."""
from __future__ import annotations

import pygame

from spirograph.frame import Circle, DrawCommand, Frame, Line, Polyline


def draw_command(surface: pygame.Surface, command: DrawCommand) -> None:
    """Issue the pygame draw call for a single command."""
    if isinstance(command, Circle):
        pygame.draw.circle(surface, command.color, command.center, command.radius)
    elif isinstance(command, Line):
        pygame.draw.aaline(surface, command.color, command.start, command.end)
    elif isinstance(command, Polyline):
        points = command.points()
        # aalines needs at least two points
        if len(points) >= 2:
            pygame.draw.aalines(surface, command.color, False, points)
    else:
        raise TypeError(f"unsupported draw command: {command!r}")


def draw_frame(surface: pygame.Surface, frame: Frame) -> None:
    """Draw every command in order onto ``surface``."""
    for command in frame:
        draw_command(surface, command)
