"""Unit tests for PhysicsEngine."""

import math
import random

import pytest

from wordswarm.models.collapse import Collapse
from wordswarm.models.connections import ConnectionGraph
from wordswarm.models.region import Region
from wordswarm.models.token import TokenStatus
from wordswarm.services.physics import PhysicsEngine

BOUNDS = (800.0, 600.0)


@pytest.fixture
def engine():
    return PhysicsEngine(ConnectionGraph())


class TestUpdate:
    """Test cases for PhysicsEngine.update."""

    def test_no_tokens(self, engine):
        engine.update([], BOUNDS, Region(0, 0, 10, 10), dt=0.016)

    def test_integrates_and_damps(self, engine, token_factory):
        token = token_factory(x=100, y=100, vx=2.0, vy=-1.0)
        engine.update([token], BOUNDS)
        assert token.x == pytest.approx(102.0)
        assert token.y == pytest.approx(99.0)
        assert token.vx == pytest.approx(1.9)
        assert token.vy == pytest.approx(-0.95)

    def test_ages_tokens(self, engine, token_factory):
        token = token_factory()
        engine.update([token], BOUNDS, dt=0.5)
        assert token.lifespan == pytest.approx(0.5)
        assert token.pulse_phase == pytest.approx(1.0)


class TestTargetSeeking:
    """Test cases for tokens moving to their slot in a word."""

    def test_far_target_caps_speed(self, engine, token_factory):
        token = token_factory(x=100, y=100)
        token.join_word(200, 100)
        engine.update([token], BOUNDS)
        assert token.x == pytest.approx(103.0)
        assert token.vx == pytest.approx(3.0 * 0.95)
        assert token.status is TokenStatus.CONVERGING

    def test_near_target_speed_scales_with_distance(self, engine, token_factory):
        token = token_factory(x=100, y=100)
        token.join_word(100, 110)
        engine.update([token], BOUNDS)
        assert token.y == pytest.approx(101.0)

    def test_settles_at_target(self, engine, token_factory):
        token = token_factory(x=100, y=100, vx=1.0)
        token.join_word(100.5, 100)
        engine.update([token], BOUNDS)
        assert token.status is TokenStatus.WORD
        assert token.x == pytest.approx(100.8)
        assert token.vx == pytest.approx(0.8 * 0.95)

    def test_converging_tokens_ignore_neighbours(self, engine, token_factory):
        token = token_factory(x=100, y=100)
        token.join_word(200, 100)
        crowd = token_factory(x=101, y=100, sequence_id=2)
        engine.update([token, crowd], BOUNDS)
        assert token.vx == pytest.approx(3.0 * 0.95)
        assert token.vy == pytest.approx(0.0)


class TestPairForces:
    """Test cases for attraction and repulsion between tokens."""

    def test_crowded_tokens_repel(self, engine, token_factory):
        a = token_factory(x=100, y=100, sequence_id=1)
        b = token_factory(x=110, y=100, sequence_id=2)
        engine.update([a, b], BOUNDS)
        assert a.vx < 0
        assert b.vx > 0
        assert a.x == pytest.approx(100 - 0.3)

    def test_neighbouring_letters_attract_and_connect(self, engine, token_factory):
        a = token_factory(x=100, y=100, letter_index=0)
        b = token_factory(x=180, y=100, letter_index=1)
        engine.update([a, b], BOUNDS)
        assert a.vx > 0
        assert b.vx < 0
        assert a.x == pytest.approx(100.05)
        assert engine.connections.are_connected(a, b)

    def test_neighbouring_letters_out_of_link_range(self, engine, token_factory):
        a = token_factory(x=100, y=100, letter_index=0)
        b = token_factory(x=220, y=100, letter_index=1)
        engine.update([a, b], BOUNDS)
        assert a.vx > 0
        assert not engine.connections.are_connected(a, b)

    def test_non_neighbouring_letters_do_not_attract(self, engine, token_factory):
        a = token_factory(x=100, y=100, letter_index=0)
        b = token_factory(x=180, y=100, letter_index=2)
        engine.update([a, b], BOUNDS)
        assert a.vx == 0
        assert len(engine.connections) == 0

    def test_other_sequences_do_not_attract(self, engine, token_factory):
        a = token_factory(x=100, y=100, sequence_id=1, letter_index=0)
        b = token_factory(x=180, y=100, sequence_id=2, letter_index=1)
        engine.update([a, b], BOUNDS)
        assert a.vx == 0

    def test_out_of_range(self, engine, token_factory):
        a = token_factory(x=100, y=100, letter_index=0)
        b = token_factory(x=300, y=100, letter_index=1)
        engine.update([a, b], BOUNDS)
        assert a.vx == 0
        assert b.vx == 0

    def test_coincident_tokens_skipped(self, engine, token_factory):
        a = token_factory(x=100, y=100, letter_index=0)
        b = token_factory(x=100, y=100, letter_index=1)
        engine.update([a, b], BOUNDS)
        assert (a.vx, a.vy, b.vx, b.vy) == (0, 0, 0, 0)
        assert all(math.isfinite(v) for v in (a.x, a.y, b.x, b.y))


class TestBoundaries:
    """Test cases for canvas edge collisions."""

    def test_left_edge(self, engine, token_factory):
        token = token_factory(x=-10, y=300, vx=-5.0)
        engine.update([token], BOUNDS)
        assert token.x == pytest.approx(10.0)
        assert token.vx == pytest.approx(2.375)

    def test_right_edge(self, engine, token_factory):
        token = token_factory(x=795, y=300, vx=10.0)
        engine.update([token], BOUNDS)
        assert token.x == pytest.approx(790.0)
        assert token.vx == pytest.approx(-4.75)

    def test_top_and_bottom_edges(self, engine, token_factory):
        top = token_factory(x=400, y=5, vy=-1.0)
        bottom = token_factory(x=100, y=599, vy=3.0)
        engine.update([top, bottom], BOUNDS)
        assert top.y == pytest.approx(10.0)
        assert top.vy > 0
        assert bottom.y == pytest.approx(590.0)
        assert bottom.vy < 0

    def test_tokens_stay_on_canvas(self, engine, token_factory):
        rng = random.Random(42)
        tokens = [
            token_factory(
                letter=chr(ord("a") + i % 26),
                x=rng.uniform(0, 800),
                y=rng.uniform(0, 600),
                sequence_id=i // 5,
                letter_index=i % 5,
                vx=rng.uniform(-50, 50),
                vy=rng.uniform(-50, 50),
                base_size=rng.uniform(24, 32),
            )
            for i in range(30)
        ]
        region = Region(300, 200, 500, 400)
        for _ in range(200):
            engine.update(tokens, BOUNDS, region, dt=0.016)
            for token in tokens:
                half = token.size / 2
                assert half <= token.x <= BOUNDS[0] - half
                assert half <= token.y <= BOUNDS[1] - half


class TestExclusion:
    """Test cases for bouncing off the exclusion region."""

    @pytest.fixture
    def region(self):
        return Region(100, 100, 200, 200)

    def test_pushed_out_sideways(self, engine, region, token_factory):
        token = token_factory(x=105, y=150, vx=1.0)
        engine.resolve_exclusion(token, region)
        assert token.x == pytest.approx(90.0)
        assert token.vx == pytest.approx(-0.7 - 0.5)
        assert token.vy == pytest.approx(0.0)

    def test_pushed_out_downwards(self, engine, region, token_factory):
        token = token_factory(x=150, y=195, vy=-1.0)
        engine.resolve_exclusion(token, region)
        assert token.y == pytest.approx(210.0)
        assert token.vy == pytest.approx(0.7 + 0.5)

    def test_no_overlap(self, engine, region, token_factory):
        token = token_factory(x=50, y=50, vx=1.0)
        engine.resolve_exclusion(token, region)
        assert (token.x, token.y, token.vx) == (50, 50, 1.0)

    def test_empty_region_ignored(self, engine, token_factory):
        token = token_factory(x=100, y=100)
        engine.resolve_exclusion(token, Region(100, 100, 100, 100))
        assert (token.x, token.y) == (100, 100)

    def test_update_keeps_tokens_out(self, engine, region, token_factory):
        token = token_factory(x=150, y=110)
        engine.update([token], BOUNDS, region)
        assert not region.overlaps_circle(token.x, token.y, token.size / 2 - 1e-9)


class TestPulse:
    """Test cases for the size pulse of word tokens."""

    def test_word_tokens_pulse(self, engine, token_factory):
        token = token_factory(x=100, y=100)
        token.join_word(100, 100)
        engine.update([token], BOUNDS, dt=0.25)
        assert token.size == pytest.approx(20.0 * (1 + math.sin(0.5) * 0.1))

    def test_free_tokens_do_not_pulse(self, engine, token_factory):
        token = token_factory()
        engine.update([token], BOUNDS, dt=1.0)
        assert token.size == 20.0


class TestCollapse:
    """Test cases for PhysicsEngine.advance_collapse."""

    def test_gentle_pull_while_growing(self, engine, token_factory):
        token = token_factory(x=150, y=100)
        collapse = Collapse(x=100, y=100, token_uids=frozenset({token.uid}), max_radius=40)
        engine.advance_collapse(collapse, [token])
        assert collapse.frame == 1
        assert token.vx == pytest.approx(-0.05 / 30)
        assert not token.to_be_removed

    def test_strong_pull_and_shrink_while_collapsing(self, engine, token_factory):
        token = token_factory(x=150, y=100)
        collapse = Collapse(
            x=100, y=100, token_uids=frozenset({token.uid}), max_radius=40, frame=30
        )
        engine.advance_collapse(collapse, [token])
        assert token.vx == pytest.approx(-(0.5 + 2.0 / 50))
        assert token.size == pytest.approx(10.0)

    def test_tokens_at_the_centre_are_consumed(self, engine, token_factory):
        near = token_factory(x=103, y=100)
        centre = token_factory(x=100, y=100)
        collapse = Collapse(
            x=100,
            y=100,
            token_uids=frozenset({near.uid, centre.uid}),
            max_radius=40,
            frame=40,
        )
        engine.advance_collapse(collapse, [near, centre])
        assert near.to_be_removed
        assert centre.to_be_removed


class TestPushAway:
    """Test cases for PhysicsEngine.push_away."""

    def test_push(self, engine, token_factory):
        near = token_factory(x=150, y=100)
        far = token_factory(x=300, y=100)
        same = token_factory(x=100, y=100)
        engine.push_away([near, far, same], 100, 100)
        assert near.vx == pytest.approx(0.25)
        assert far.vx == 0
        assert (same.vx, same.vy) == (0, 0)
