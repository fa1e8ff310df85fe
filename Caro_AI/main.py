"""Entry point for Caro matches. Load config, wire the session, run the text game loop."""

import random
import time
from pathlib import Path

import yaml

from Caro_AI.Board import O, X
from Caro_AI.Carogame import AWAITING_AI, GameSession, get_variant, variants_from_settings
from Caro_AI.Player import QUIT, HumanPlayer
from Caro_AI.ai import heuristic
from Caro_AI.ai.move_engine import MoveEngine
from Caro_AI.utils import timer
from Caro_AI.utils.cli import parse_args
from Caro_AI.utils.logger import configure_logging, log_event


PROJECT_DIR = Path(__file__).resolve().parent


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a repo-relative path when invoked from outside `Caro_AI/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    path = resolve_project_path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        log_event(f"Warning: settings file not found at {path}; using defaults.")
        return {}


def build_session(args, settings):
    variants = variants_from_settings(settings)
    variant = get_variant(args.variant or settings.get("variant", "caro5"), variants)
    difficulty = args.difficulty or settings.get("difficulty", "medium")
    mode = args.mode or settings.get("mode", "human-vs-ai")
    rng = random.Random(args.seed) if args.seed is not None else None

    engine = MoveEngine(
        difficulty=difficulty,
        rng=rng,
        tiers=heuristic.load_tiers(resolve_project_path(args.scoring)),
        radius=settings.get("candidate_radius", 2),
        defense_weight=settings.get("defense_weight", heuristic.DEFENSE_WEIGHT),
        center_weight=settings.get("center_weight", heuristic.CENTER_WEIGHT),
    )
    human_mark = X if mode == "human-vs-ai" else O
    return GameSession(variant, human_mark=human_mark, engine=engine, logger=log_event)


def run(session, human, ai_delay, output_fn=print):
    """Drive the session until it ends or the human quits. Returns the winning mark, 0 (draw) or None (quit)."""
    output_fn(session.board.render())
    while not session.is_over:
        if session.state == AWAITING_AI:
            deadline = timer.deadline_after(ai_delay)
            turn = session.begin_ai_turn()
            timer.wait_until(deadline)
            session.finish_ai_turn(turn)
        else:
            started = time.time()
            move = human.next_move(session)
            if move == QUIT:
                return None
            session.tick(time.time() - started)
            try:
                session.play_human(*move)
            except ValueError as exc:
                output_fn(f"Rejected: {exc}")
                continue
        output_fn(session.board.render())

    if session.winner is None:
        return 0
    return session.winner


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.log_level)
    settings = load_settings(args.settings)
    session = build_session(args, settings)
    ai_delay = args.ai_delay if args.ai_delay is not None else settings.get("ai_delay_seconds", 0.3)

    v = session.variant
    log_event(f"{v.name}: {v.rows}x{v.cols}, {v.win_length} in a row, difficulty={session.difficulty}")
    human = HumanPlayer(session.human_mark)
    result = run(session, human, ai_delay)

    outcome = {X: "X wins", O: "O wins", 0: "Draw", None: "Game abandoned"}
    print(outcome[result])
    if result == session.human_mark:
        print(f"Score: {session.score}")


if __name__ == "__main__":
    main()
