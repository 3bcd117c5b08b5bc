#!/usr/bin/env python3
"""
Generate a maze and optionally walk it with a scripted key sequence.

Usage:
    python -m mazewalker.simulate                      # 25x25 maze, print the map
    python -m mazewalker.simulate --size 11 --seed 3   # reproducible 11x11 maze
    python -m mazewalker.simulate --keys "w:60 e:45 w:50" --plot
"""

import argparse
import logging
import sys

from .config import DEFAULT_MAZE_SIZE, START_X, START_Y, NavigatorConfig, clamp_maze_size
from .controls import KeyMap, MazeController
from .generators.maze_generator import EXIT_POLICIES, generate_maze
from .navigator import Navigator, initial_pose
from .types import KeyDown, KeyUp, Tick

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='[%(asctime)s] %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )


def parse_keys(script):
    """Parse "key:ticks key:ticks ..." into a list of (key, ticks)."""
    steps = []
    for token in script.split():
        key, sep, count = token.partition(':')
        if not sep or len(key) != 1 or not count.isdigit() or int(count) == 0:
            raise argparse.ArgumentTypeError(
                f"bad key step {token!r}, expected <key>:<ticks> like w:40")
        steps.append((key, int(count)))
    return steps


# Hold each key for its number of ticks, then release it.  The key-down is
# repeated every tick the way keyboard autorepeat delivers it, which is
# what makes held rotate keys keep turning.
def script_events(steps):
    for key, ticks in steps:
        for _ in range(ticks):
            yield KeyDown(key)
            yield Tick()
        yield KeyUp(key)


def run_script(controller, steps, stop_at_exit=True):
    trail = [controller.pose]
    for event in script_events(steps):
        pose = controller.handle(event)
        if isinstance(event, Tick):
            trail.append(pose)
            if stop_at_exit and controller.exit_found:
                break
    return trail


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate a perfect maze and walk it in first person",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Keys: w/s forward/back, a/d strafe left/right, q/e rotate left/right.
Examples:
  mazewalker --size 11 --seed 7
  mazewalker --size 5 --seed 1 --keys "w:100 e:45" --plot
        """
    )
    parser.add_argument('--size', type=int, default=DEFAULT_MAZE_SIZE,
                        help="maze side length, clamped to an odd value in [5, 51]")
    parser.add_argument('--start', type=int, nargs=2, default=(START_X, START_Y),
                        metavar=('X', 'Y'), help="seed cell and spawn point")
    parser.add_argument('--seed', type=int, default=None, help="random seed")
    parser.add_argument('--exit', choices=sorted(EXIT_POLICIES), default='corner',
                        help="exit placement policy")
    parser.add_argument('--keys', type=parse_keys, default=None,
                        help='scripted input, e.g. "w:40 e:45 w:10"')
    parser.add_argument('--plot', action='store_true', help="show the maze and trail")
    parser.add_argument('-v', '--verbose', action='store_true', help="debug logging")
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    size = clamp_maze_size(args.size)
    if size != args.size:
        logger.info("Maze size %d clamped to %d", args.size, size)
    try:
        maze = generate_maze(size, args.start[0], args.start[1], rng=args.seed,
                             exit_policy=args.exit)
    except ValueError as e:
        parser.error(str(e))

    print("--+> YOU NEED TO FIND THE DIAMONDS <+--\n")
    print("MAP OF THE MAZE:")
    print(maze.to_text())

    config = NavigatorConfig()
    navigator = Navigator(maze, initial_pose(maze, config=config), config)
    controller = MazeController(navigator, KeyMap())
    trail = [controller.pose]

    if args.keys:
        trail = run_script(controller, args.keys)
        pose = controller.pose
        print(f"\nFinal pose: x={pose.x:.3f} y={pose.y:.3f} yaw={pose.yaw:.1f} "
              f"after {len(trail) - 1} ticks, "
              f"{maze.clearance(pose.x, pose.y):.3f} from the nearest wall")
        if controller.exit_found:
            print("--+> YOU FOUND THE DIAMONDS! <+--")
        else:
            print("Exit not reached.")

    if args.plot:
        from .visualization import Visualization

        visual = Visualization(maze)
        visual.drawTrail(trail, color='r', linewidth=2)
        visual.drawPose(controller.pose, color='b')
        visual.show()

    return 0


if __name__ == "__main__":
    sys.exit(main())
