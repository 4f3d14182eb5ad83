"""Tests for scorers and the strength evaluator."""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from passgen import StrengthEvaluator, estimate_strength, get_scorer, score_zxcvbn
from passgen.config import config
from passgen.strength import label_for, score_entropy


# ── estimate_strength ──────────────────────────────────────────────────────


class TestEstimateStrength:
    def test_empty_password(self):
        r = estimate_strength("")
        assert r["score"] == 0
        assert r["entropy"] == 0.0

    def test_short_password(self):
        r = estimate_strength("abc")
        assert r["score"] == 0
        assert r["label"] == "Very Weak"
        assert any("short" in w.lower() for w in r["warnings"])

    def test_strong_password(self):
        assert estimate_strength("Tr0ub4dor&3!xyzQ")["score"] >= 3

    def test_long_random_is_very_strong(self):
        assert estimate_strength("aZ3$kP9!mW2#qL7@xN5%")["score"] == 4

    def test_sequential_warning(self):
        r = estimate_strength("abcdefgh12")
        assert any("Sequential" in w for w in r["warnings"])

    def test_repeated_chars_warning(self):
        r = estimate_strength("aaabbbccc1")
        assert any("Repeated" in w for w in r["warnings"])

    def test_entropy_increases_with_length(self):
        assert estimate_strength("aB1!aB1!aB1!")["entropy"] > estimate_strength("aB1!")["entropy"]


# ── Scorer registry ────────────────────────────────────────────────────────


class TestScorers:
    def test_get_known(self):
        assert get_scorer("zxcvbn") is score_zxcvbn
        assert get_scorer("entropy") is score_entropy

    def test_get_unknown(self):
        with pytest.raises(ValueError, match="Unknown scorer"):
            get_scorer("magic")

    def test_labels(self):
        assert label_for(0) == "Very Weak"
        assert label_for(4) == "Very Strong"
        assert label_for(9) == "Very Strong"
        assert label_for(None) == "No score"

    @pytest.mark.asyncio
    @patch("passgen.strength.zxcvbn")
    async def test_zxcvbn_feedback_becomes_warnings(self, mock_zxcvbn):
        mock_zxcvbn.return_value = {
            "score": 1,
            "feedback": {"warning": "Common name", "suggestions": ["Add a word"]},
        }
        result = await score_zxcvbn("correct horse")
        assert result == {"score": 1, "warnings": ["Common name", "Add a word"]}
        mock_zxcvbn.assert_called_once_with("correct horse")

    @pytest.mark.asyncio
    @patch("passgen.strength.zxcvbn")
    async def test_zxcvbn_skips_empty(self, mock_zxcvbn):
        assert await score_zxcvbn("") == {"score": 0, "warnings": []}
        mock_zxcvbn.assert_not_called()

    @pytest.mark.asyncio
    async def test_zxcvbn_common_password(self):
        result = await score_zxcvbn("password")
        assert result["score"] == 0
        assert result["warnings"]

    @pytest.mark.asyncio
    async def test_zxcvbn_random_password(self):
        result = await score_zxcvbn("aZ3$kP9!mW2#qL7@xN5%")
        assert result["score"] == 4


# ── StrengthEvaluator ──────────────────────────────────────────────────────


async def _length_scorer(password):
    return {"score": min(len(password) // 4, 4)}


@pytest.mark.asyncio
class TestStrengthEvaluator:
    async def test_start_scores_immediately(self):
        ev = StrengthEvaluator(_length_scorer, delay=10)
        assert ev.score == 0
        assert await ev.start("sixteen-chars-xx") == 4
        assert ev.score == 4

    async def test_changes_are_debounced(self):
        scorer = AsyncMock(return_value={"score": 2})
        ev = StrengthEvaluator(scorer, delay=0.2)
        for pwd in ("a", "ab", "abc", "abcd"):
            ev.on_password_changed(pwd)
            await asyncio.sleep(0.01)
        scorer.assert_not_awaited()
        await ev.join()
        scorer.assert_awaited_once_with("abcd")
        assert ev.score == 2

    async def test_on_score_callback(self):
        published = []
        ev = StrengthEvaluator(_length_scorer, delay=0, on_score=published.append)
        ev.on_password_changed("12345678")
        await ev.join()
        assert published == [2]

    async def test_stale_result_discarded_when_it_finishes_last(self):
        gates = {"p1": asyncio.Event(), "p2": asyncio.Event()}
        scores = {"p1": 1, "p2": 4}

        async def scorer(pwd):
            await gates[pwd].wait()
            return {"score": scores[pwd]}

        ev = StrengthEvaluator(scorer, delay=0)
        first = asyncio.create_task(ev.start("p1"))
        await asyncio.sleep(0)
        ev.on_password_changed("p2")
        await asyncio.sleep(0.01)

        gates["p2"].set()
        await ev.join()
        assert ev.score == 4

        gates["p1"].set()
        assert await first == 1
        assert ev.score == 4

    async def test_stale_result_discarded_when_it_finishes_first(self):
        gates = {"p1": asyncio.Event(), "p2": asyncio.Event()}
        scores = {"p1": 1, "p2": 4}

        async def scorer(pwd):
            await gates[pwd].wait()
            return {"score": scores[pwd]}

        ev = StrengthEvaluator(scorer, delay=0)
        first = asyncio.create_task(ev.start("p1"))
        await asyncio.sleep(0)
        ev.on_password_changed("p2")
        await asyncio.sleep(0.01)

        gates["p1"].set()
        await first
        assert ev.score == 0

        gates["p2"].set()
        await ev.join()
        assert ev.score == 4

    async def test_scorer_failure_clears_score(self):
        scorer = AsyncMock(side_effect=[{"score": 3}, RuntimeError("engine down")])
        ev = StrengthEvaluator(scorer, delay=0)
        await ev.start("first")
        assert ev.score == 3
        assert await ev.evaluate_now("first") is None
        assert ev.score is None

    async def test_failure_for_new_password_replaces_old_score(self):
        published = []

        async def scorer(pwd):
            if pwd == "p2":
                raise RuntimeError("engine down")
            return {"score": 4}

        ev = StrengthEvaluator(scorer, delay=0, on_score=published.append)
        await ev.start("p1")
        ev.on_password_changed("p2")
        await ev.join()
        assert ev.current_password == "p2"
        assert ev.score is None
        assert published == [4, None]

    async def test_stale_failure_is_not_published(self):
        gate = asyncio.Event()

        async def scorer(pwd):
            if pwd == "p1":
                await gate.wait()
                raise RuntimeError("engine down")
            return {"score": 2}

        ev = StrengthEvaluator(scorer, delay=0)
        first = asyncio.create_task(ev.start("p1"))
        await asyncio.sleep(0)
        ev.on_password_changed("p2")
        await ev.join()
        assert ev.score == 2

        gate.set()
        assert await first is None
        assert ev.score == 2

    async def test_malformed_result_is_a_failure(self):
        ev = StrengthEvaluator(AsyncMock(return_value={}), delay=0)
        assert await ev.start("pwd") is None
        assert ev.score is None

    async def test_default_delay_comes_from_config(self, monkeypatch):
        monkeypatch.setattr(config, "debounce_seconds", 0.75)
        ev = StrengthEvaluator(_length_scorer)
        assert ev._debouncer.delay == 0.75

    async def test_close_drops_pending_and_in_flight(self):
        gate = asyncio.Event()

        async def scorer(pwd):
            await gate.wait()
            return {"score": 4}

        ev = StrengthEvaluator(scorer, delay=0.01)
        in_flight = asyncio.create_task(ev.start("p1"))
        await asyncio.sleep(0)
        ev.on_password_changed("p1")
        ev.close()
        assert ev.closed

        gate.set()
        assert await in_flight == 4
        await ev.join()
        assert ev.score == 0
