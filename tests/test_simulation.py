import copy
import dataclasses
import random

import pytest

from dino_run.data_models import Obstacle, Phase
from dino_run.simulation import Simulation


def park_player_above_field(sim):
    """Keeps the player out of reach of every obstacle without jumping."""
    sim.state.player.y = 0


def test_tick_is_a_no_op_outside_running(make_simulation):
    sim = make_simulation(0.0, running=False)
    sim.state.obstacles.append(Obstacle(x=300))
    before = copy.deepcopy(sim.state)
    for _ in range(100):
        assert sim.tick() is False
    assert sim.state == before

    sim.start_run()
    sim.end_run()
    before = copy.deepcopy(sim.state)
    for _ in range(100):
        sim.tick()
    assert sim.state == before


def test_jump_lands_on_the_39th_tick(sim):
    baseline = sim.state.baseline
    assert sim.jump()
    assert sim.state.player.velocity == -15

    landed_at = None
    for n in range(1, 41):
        sim.tick()
        player = sim.state.player
        assert 0 <= player.y <= baseline
        if n < 39:
            assert player.jumping
            assert player.y < baseline
        if landed_at is None and not player.jumping:
            landed_at = n

    assert landed_at == 39
    assert sim.state.player.y == baseline
    assert sim.state.player.velocity == 0.0


def test_jump_is_refused_outside_running(make_simulation):
    sim = make_simulation(running=False)
    assert not sim.jump()
    assert not sim.state.player.jumping


@pytest.mark.parametrize("field_width, ticks", [(802, 166), (803, 166), (800, 166), (805, 167)])
def test_obstacle_is_removed_once_fully_off_field(make_simulation, field_width, ticks):
    sim = make_simulation(running=False)
    sim.resize(field_width, sim.state.field_height)
    sim.start_run()
    park_player_above_field(sim)
    sim.state.obstacles.append(Obstacle(x=float(field_width)))

    for _ in range(ticks - 1):
        assert sim.tick() is False
    assert len(sim.state.obstacles) == 1
    assert sim.state.score == 0

    sim.tick()
    assert sim.state.obstacles == []
    assert sim.state.score == 1


def test_each_obstacle_scores_exactly_once(sim):
    park_player_above_field(sim)
    sim.state.obstacles.extend([Obstacle(x=0.0), Obstacle(x=40.0)])

    scores = []
    for _ in range(30):
        sim.tick()
        scores.append(sim.state.score)

    assert scores == sorted(scores)
    assert scores[-1] == 2
    assert all(b - a <= 1 for a, b in zip(scores, scores[1:]))


def test_collision_reported_once_obstacle_reaches_player(sim):
    sim.state.obstacles.append(Obstacle(x=100.0))
    for _ in range(5):
        assert sim.tick() is False
    assert sim.tick() is True
    assert sim.state.obstacles[0].x == 70
    # The simulation only reports; the controller changes the phase.
    assert sim.phase is Phase.RUNNING


def test_collision_stops_the_rest_of_the_tick(sim):
    older, newer = Obstacle(x=-24.0), Obstacle(x=75.0)
    sim.state.obstacles.extend([older, newer])

    assert sim.tick() is True
    assert sim.state.obstacles == [older, newer]
    assert older.x == -24.0
    assert sim.state.score == 0


def test_spawn_roll_happens_after_the_threshold(make_simulation):
    sim = make_simulation(0.0)
    park_player_above_field(sim)
    for _ in range(60):
        sim.tick()
    assert sim.state.obstacles == []
    assert sim.state.spawn_counter == 60

    sim.tick()
    assert len(sim.state.obstacles) == 1
    assert sim.state.obstacles[0].x == sim.state.field_width - 5
    assert sim.state.spawn_counter == 0


def test_failed_roll_still_resets_the_window(make_simulation):
    sim = make_simulation(0.5, 0.01)
    park_player_above_field(sim)
    for _ in range(61):
        sim.tick()
    assert sim.state.obstacles == []
    assert sim.state.spawn_counter == 0

    # The next roll is only taken after another full window.
    for _ in range(60):
        sim.tick()
    assert sim.state.obstacles == []
    sim.tick()
    assert len(sim.state.obstacles) == 1


def test_start_run_resets_the_state(sim):
    sim.state.score = 5
    sim.state.obstacles.append(Obstacle(x=10.0))
    sim.state.spawn_counter = 42
    sim.jump()
    sim.tick()
    sim.end_run()

    sim.start_run()
    state = sim.state
    assert state.phase is Phase.RUNNING
    assert state.score == 0
    assert state.obstacles == []
    assert state.spawn_counter == 0
    assert state.player.y == state.baseline
    assert not state.player.jumping
    assert state.player.velocity == 0.0


def test_height_change_regrounds_player_only(sim):
    sim.state.score = 3
    sim.jump()
    for _ in range(5):
        sim.tick()

    sim.resize(sim.state.field_width, 400)
    player = sim.state.player
    assert player.y == 340
    assert not player.jumping
    assert player.velocity == 0.0
    assert sim.state.score == 3
    assert sim.phase is Phase.RUNNING


def test_width_change_keeps_the_jump(sim):
    sim.jump()
    sim.tick()
    y = sim.state.player.y

    sim.resize(1024, sim.state.field_height)
    assert sim.state.field_width == 1024
    assert sim.state.player.y == y
    assert sim.state.player.jumping


def test_snapshot_is_a_read_only_copy(sim):
    sim.state.obstacles.append(Obstacle(x=400.0))
    snap = sim.snapshot()

    assert snap.player == (50, 240, 44, 47)
    assert snap.obstacles == ((400.0, 230, 25, 50),)
    assert snap.phase is Phase.RUNNING
    assert snap.score == 0
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.score = 10

    sim.state.obstacles[0].x = 1.0
    assert snap.obstacles[0][0] == 400.0


def test_random_play_keeps_invariants():
    sim = Simulation(rng=random.Random(1234))
    sim.start_run()
    jumper = random.Random(99)
    baseline = sim.state.baseline
    last_score = 0

    for _ in range(5000):
        if not sim.state.player.jumping and jumper.random() < 0.1:
            sim.jump()
        collided = sim.tick()
        player = sim.state.player
        assert 0 <= player.y <= baseline
        if player.y == baseline:
            assert player.velocity == 0.0 or player.jumping
        assert sim.state.score >= last_score
        assert sim.state.score - last_score <= 1
        last_score = sim.state.score
        if collided:
            break
