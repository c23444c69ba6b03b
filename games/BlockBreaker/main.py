#!/usr/bin/env python3
"""BlockBreaker - Standalone Entry Point.

Usage:
    python main.py
    python main.py --lives 5
    python main.py --seed 42 --no-save
"""

import argparse
import os
import sys

# Add project root to path for imports
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import pygame

from blockbreaker.logging import get_logger
from blockbreaker.score_store import FileScoreStore, MemoryScoreStore, ScoreStore
from games.BlockBreaker.config import FIELD_WIDTH, FPS, HIGH_SCORE_FILE, SCREEN_HEIGHT, SCREEN_WIDTH
from games.BlockBreaker.game_mode import BlockBreakerMode
from games.BlockBreaker.input import InputManager
from games.BlockBreaker.input.sources import KeyboardMouseInputSource

log = get_logger('main')


def build_score_store(args: argparse.Namespace) -> ScoreStore:
    """Pick the high-score store from the command line."""
    if args.no_save:
        return MemoryScoreStore()
    if args.score_file:
        return FileScoreStore(args.score_file)
    return FileScoreStore(HIGH_SCORE_FILE or None)


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="BlockBreaker - Standalone")

    # Display options
    parser.add_argument('--width', type=int, default=SCREEN_WIDTH, help='Window width')
    parser.add_argument('--height', type=int, default=SCREEN_HEIGHT, help='Window height')
    parser.add_argument('--fullscreen', action='store_true', help='Run fullscreen')

    # Game options
    parser.add_argument('--lives', type=positive_int, default=None, help='Starting lives')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for launch angles')
    parser.add_argument('--skin', type=str, default='geometric',
                        choices=sorted(BlockBreakerMode.SKINS),
                        help='Visual skin')

    # High score
    parser.add_argument('--score-file', type=str, default=None, help='High score file path')
    parser.add_argument('--no-save', action='store_true', help='Keep the high score in memory only')

    return parser.parse_args(argv)


def main(argv=None):
    """Run BlockBreaker standalone."""
    args = parse_args(argv)

    # Initialize pygame
    pygame.init()
    pygame.font.init()

    # Create display
    if args.fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        width, height = screen.get_size()
    else:
        width, height = args.width, args.height
        screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)

    pygame.display.set_caption("BlockBreaker")

    # Create game
    game = BlockBreakerMode(
        skin=args.skin,
        lives=args.lives,
        width=width,
        height=height,
        score_store=build_score_store(args),
        seed=args.seed,
    )

    input_source = KeyboardMouseInputSource(FIELD_WIDTH, game.viewport, (width, height))
    input_manager = InputManager(input_source)

    # Game loop
    clock = pygame.time.Clock()
    running = True

    print("\n" + "=" * 50)
    print("BLOCKBREAKER")
    print("=" * 50)
    print("Controls:")
    print("  - Mouse, touch or LEFT/RIGHT (A/D) to move the paddle")
    print("  - SPACE to start, launch, pause and resume")
    print("  - ENTER or click to press popup buttons")
    print("  - H for how to play")
    print("  - ESC to quit")
    print("=" * 50 + "\n")

    while running:
        dt = clock.tick(FPS) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                width, height = event.w, event.h
                game.set_window_size(width, height)
                input_source.set_viewport(game.viewport, (width, height))
            else:
                input_source.handle_event(event)

        input_manager.update(dt)
        game.handle_input(input_manager.get_events())

        game.update(dt)

        game.render(screen)
        pygame.display.flip()

    log.info("Exiting with score %d", game.get_score())
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
