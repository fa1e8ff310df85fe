"""CLI options for selecting variant, difficulty, side, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Caro / Tic-Tac-Toe against a heuristic AI")
    parser.add_argument("--variant", help="Game variant (caro5, caro4, tictactoe, or one from settings)")
    parser.add_argument(
        "--difficulty",
        choices=["easy", "medium", "hard"],
        default=None,
        help="AI difficulty (default from settings)",
    )
    parser.add_argument(
        "--mode",
        choices=["human-vs-ai", "ai-vs-human"],
        default=None,
        help="Who plays X (moves first) and who plays O",
    )
    parser.add_argument("--ai-delay", type=float, default=None, help="Pause before the AI move, in seconds")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for easy-tier move randomization")
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--scoring", default="config/scoring.yaml", help="Path to score tier YAML")
    parser.add_argument("--log-level", default="WARNING", help="Logging level for engine diagnostics")
    return parser.parse_args(argv)
