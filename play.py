from __future__ import annotations

import argparse
from config import PlaySettings, get_config, load_config_from_file, setup_logging
from draughts.console import ConsoleGame


def parse_args() -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Play draughts against a random computer opponent")
    ap.add_argument("--side", choices=["light", "dark", "none"], default=None,
                    help="Side you play ('none' lets the computer play both)")
    ap.add_argument("--seed", type=int, default=None, help="Seed for the computer's choices")
    ap.add_argument("--max-turns", type=int, default=None, help="Stop after N turns (0 = unlimited)")
    ap.add_argument("--no-rules", action="store_true", help="Do not print the rules text")
    ap.add_argument("--config", default=None, help="JSON configuration file")
    return ap.parse_args()


def main() -> None:
    args = parse_args()
    cfg = load_config_from_file(args.config) if args.config else get_config()
    setup_logging(cfg.logging)

    updates = {}
    if args.side is not None:
        updates["human_side"] = args.side
    if args.seed is not None:
        updates["seed"] = args.seed
    if args.max_turns is not None:
        updates["max_turns"] = args.max_turns
    if args.no_rules:
        updates["show_rules"] = False
    play = PlaySettings(**{**cfg.play.model_dump(), **updates})

    ConsoleGame(play=play, ui=cfg.ui, engine=cfg.engine).run()


if __name__ == "__main__":
    main()
