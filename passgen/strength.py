"""Strength scoring and the debounced evaluator that publishes scores.

A scorer is any coroutine function ``str -> dict`` whose result carries an
integer ``"score"`` between 0 (very weak) and 4 (very strong).
"""

import asyncio
import math
import re
from typing import Awaitable, Callable

from loguru import logger
from zxcvbn import zxcvbn

from passgen.config import config
from passgen.debounce import Debouncer


Scorer = Callable[[str], Awaitable[dict]]

LABELS = ["Very Weak", "Weak", "Fair", "Strong", "Very Strong"]


def label_for(score: int | None) -> str:
    if score is None:
        return "No score"
    return LABELS[max(0, min(score, len(LABELS) - 1))]


# ── zxcvbn ─────────────────────────────────────────────────────────────────


async def score_zxcvbn(password: str) -> dict:
    """Score *password* with zxcvbn in a worker thread.

    zxcvbn feedback is flattened into the same ``warnings`` list the
    entropy scorer reports.
    """
    if not password:
        return {"score": 0, "warnings": []}
    result = await asyncio.to_thread(zxcvbn, password)
    feedback = result.get("feedback") or {}
    warnings = [feedback["warning"]] if feedback.get("warning") else []
    warnings.extend(feedback.get("suggestions", []))
    return {"score": int(result["score"]), "warnings": warnings}


# ── Entropy heuristic ──────────────────────────────────────────────────────

_SEQUENCES = [
    "abcdefghijklmnopqrstuvwxyz",
    "0123456789",
    "qwertyuiop",
    "asdfghjkl",
    "zxcvbnm",
]


def estimate_strength(password: str) -> dict:
    """Estimate strength from the character pool and obvious patterns.

    Returns a dict with keys:
        score    -- int 0-4
        label    -- str
        entropy  -- float (bits)
        warnings -- list[str]
    """
    classes = [
        bool(re.search(r"[a-z]", password)),
        bool(re.search(r"[A-Z]", password)),
        bool(re.search(r"\d", password)),
        bool(re.search(r"[^a-zA-Z\d]", password)),
    ]
    pool = sum(size for size, on in zip((26, 26, 10, 32), classes) if on) or 1
    entropy = len(password) * math.log2(pool) if password else 0.0

    warnings: list[str] = []
    lower = password.lower()
    # short runs are expected by chance in long random strings
    if entropy < 90:
        for seq in _SEQUENCES:
            if any(
                seq[i : i + 3] in lower or seq[i : i + 3][::-1] in lower
                for i in range(len(seq) - 2)
            ):
                warnings.append("Sequential pattern detected")
                break
    if re.search(r"(.)\1{2,}", password):
        warnings.append("Repeated characters detected")
    if len(password) < 8:
        warnings.append("Too short -- use at least 8 characters")

    class_count = sum(classes)
    high_entropy = entropy >= 90
    if entropy < 28 or len(password) < 8:
        score = 0
    elif entropy < 36 or (not high_entropy and class_count < 2):
        score = 1
    elif entropy < 50 or (not high_entropy and class_count < 3):
        score = 2
    elif entropy < 65 and not high_entropy:
        score = 3
    else:
        score = 4

    return {
        "score": score,
        "label": LABELS[score],
        "entropy": round(entropy, 1),
        "warnings": warnings,
    }


async def score_entropy(password: str) -> dict:
    return estimate_strength(password)


SCORERS: dict[str, Scorer] = {
    "zxcvbn": score_zxcvbn,
    "entropy": score_entropy,
}


def get_scorer(name: str) -> Scorer:
    try:
        return SCORERS[name]
    except KeyError:
        raise ValueError(f"Unknown scorer: {name!r}") from None


# ── Evaluator ──────────────────────────────────────────────────────────────


class StrengthEvaluator:
    """Keep :attr:`score` in step with the most recently reported password.

    Changes are scored after a quiet period of *delay* seconds.  A result is
    only published if its password is still current when the scorer returns,
    so a slow evaluation of an old password can never overwrite a newer one.
    """

    def __init__(
        self,
        scorer: Scorer = score_zxcvbn,
        *,
        delay: float | None = None,
        on_score: Callable[[int | None], None] | None = None,
    ):
        self.scorer = scorer
        self.on_score = on_score
        self.current_password = ""
        self.score: int | None = 0
        self._debouncer = Debouncer(
            config.debounce_seconds if delay is None else delay, name="strength"
        )
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def start(self, password: str) -> int | None:
        """Score the initial password immediately, without debouncing."""
        self.current_password = password
        return await self.evaluate_now(password)

    def on_password_changed(self, password: str) -> None:
        self._debouncer.schedule(self.evaluate_now, password)
        self.current_password = password

    async def evaluate_now(self, password: str) -> int | None:
        """Score *password* and publish the result if it is still current.

        A failed evaluation of the current password publishes ``None`` (no
        score available).  Returns the computed score, published or not.
        """
        score: int | None
        try:
            result = await self.scorer(password)
            score = int(result["score"])
        except Exception:
            logger.exception("Strength scorer failed")
            score = None

        if self._closed:
            logger.debug("Evaluator closed, dropping score")
        elif password != self.current_password:
            logger.debug("Dropping stale score for a superseded password")
        else:
            self.score = score
            if self.on_score is not None:
                self.on_score(score)
        return score

    async def join(self) -> None:
        await self._debouncer.join()

    def close(self) -> None:
        self._closed = True
        self._debouncer.dispose()
