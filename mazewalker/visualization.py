#!/usr/bin/env python3
#
#   visualization.py
#
#   Top-down matplotlib view of a maze and the agent walking through it.
#
import matplotlib.pyplot as plt
import numpy as np

from .generators.maze import CellType


class Visualization:
    def __init__(self, maze):
        self.maze = maze

        # Clear the current, or create a new figure.
        plt.clf()

        # Create a new axes, enable the grid, and set axis limits.
        plt.axes()
        plt.grid(True)
        plt.gca().axis('on')
        plt.gca().set_xlim(-0.5, maze.size - 0.5)
        plt.gca().set_ylim(-0.5, maze.size - 0.5)
        plt.gca().set_aspect('equal')

        # Fill the wall cells.  Cell (i, j) is centered on (x, y) = (i, j),
        # while pcolormesh wants rows along y, hence the transpose.
        edges = np.arange(maze.size + 1) - 0.5
        walls = (maze.grid == CellType.WALL).T.astype(float)
        plt.pcolormesh(edges, edges, walls, cmap='binary', vmin=0, vmax=1)

        # Outline the wall faces the agent collides with.
        boundary = maze.wall_polys.boundary
        for line in getattr(boundary, 'geoms', [boundary]):
            plt.plot(*line.xy, 'k-', linewidth=1)

        # Show the start and the exit.
        self.drawCell(maze.start, color='orange', marker='o')
        self.drawCell(maze.end, color='purple', marker='D')

    def show(self):
        # Blocks until the window is closed.
        plt.show()

    def drawCell(self, cell, *args, **kwargs):
        plt.plot(cell[0], cell[1], *args, **kwargs)

    def drawPose(self, pose, length=0.4, **kwargs):
        theta = np.radians(pose.yaw)
        plt.arrow(pose.x, pose.y, length * np.cos(theta), length * np.sin(theta),
                  head_width=0.15, **kwargs)

    def drawTrail(self, poses, *args, **kwargs):
        if len(poses) < 2:
            return
        xs = [pose.x for pose in poses]
        ys = [pose.y for pose in poses]
        plt.plot(xs, ys, *args, **kwargs)
