"""Difficulty tiers: post-evaluation selection policy (randomized picks at the easiest tier)."""

from dataclasses import dataclass
import random


@dataclass(frozen=True)
class DifficultyConfig:
    depth: int          # kept for callers that pass a depth; evaluation stays single-ply
    random_rate: float  # chance of ignoring the top move
    top_k: int          # pool size for the random pick


DIFFICULTY_LEVELS = {
    "easy": DifficultyConfig(depth=1, random_rate=0.3, top_k=5),
    "medium": DifficultyConfig(depth=2, random_rate=0.0, top_k=5),
    "hard": DifficultyConfig(depth=3, random_rate=0.0, top_k=5),
}

DEFAULT_DIFFICULTY = "medium"


def get_difficulty_config(difficulty):
    if not difficulty:
        return DIFFICULTY_LEVELS[DEFAULT_DIFFICULTY]
    try:
        return DIFFICULTY_LEVELS[difficulty.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown difficulty '{difficulty}'. Expected {'|'.join(DIFFICULTY_LEVELS)}"
        ) from None


class DifficultyPolicy:
    """Pick a move from candidates already ranked best-first."""

    def __init__(self, difficulty=DEFAULT_DIFFICULTY, rng=None):
        self.difficulty = (difficulty or DEFAULT_DIFFICULTY).lower()
        self.config = get_difficulty_config(self.difficulty)
        self.rng = rng if rng is not None else random.Random()

    def select(self, ranked):
        if not ranked:
            raise ValueError("no ranked candidates to select from")
        cfg = self.config
        if cfg.random_rate > 0 and self.rng.random() < cfg.random_rate:
            pool = ranked[: min(cfg.top_k, len(ranked))]
            return self.rng.choice(pool)
        return ranked[0]
