from __future__ import annotations

import argparse

import pygame

from checkers.config import DisplaySettings, LoggingSettings, configure_logging, load_settings
from checkers.game import Game
from ui.pygame_gui import CheckersGUI


def parse_args() -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Play checkers in a desktop window.")
	parser.add_argument("--config", default=None, help="JSON settings file.")
	parser.add_argument("--cell-size", type=int, default=None, help="Edge of one board cell in pixels.")
	parser.add_argument("--theme", type=int, choices=(0, 1, 2), default=None, help="Highlight colour theme.")
	parser.add_argument("--friendly-hop", action="store_true", help="Allow men to hop over their own pieces.")
	parser.add_argument("--log-level", default=None, help="Logging level.")
	return parser.parse_args()


def main() -> None:
	args = parse_args()
	settings = load_settings(args.config)
	overrides = {}
	if args.cell_size is not None:
		overrides["cell_size"] = args.cell_size
	if args.theme is not None:
		overrides["theme"] = args.theme
	display = DisplaySettings.model_validate({**settings.display.model_dump(), **overrides})
	rules = settings.rules.model_copy(update={"allow_friendly_hop": True}) if args.friendly_hop else settings.rules
	logging_settings = settings.logging
	if args.log_level:
		logging_settings = LoggingSettings(level=args.log_level)
	configure_logging(logging_settings)

	pygame.init()
	try:
		game = Game(rules)
		gui = CheckersGUI(game, display)
		gui.run()
	finally:
		pygame.quit()


if __name__ == "__main__":
	main()
