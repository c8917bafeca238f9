import pytest
from test_utils import MockWorld

from gridwalker.layouts import LAYOUTS
from gridwalker.render import NullSink
from gridwalker.simulation import run_layout, run_simulation
from gridwalker.utils import AGENT
from gridwalker.world import World


def test_default_layout_regression_baseline(sink):
    """
    Reference run of the default layout: three moves down the left corridor,
    then the column move at (4,1) hits a wall with no applicable fallback and
    the agent stalls until the step limit.
    """
    world, result = run_layout("default", tick_delay=0, sink=sink)

    assert not result.reached
    assert result.steps == 100
    assert result.trajectory[:5] == [(1, 1), (2, 1), (3, 1), (4, 1), (4, 1)]
    assert set(result.trajectory[3:]) == {(4, 1)}
    assert len(result.trajectory) == 101
    assert world.agent_position == (4, 1)
    assert sink.lines[-1] == "Agent could not reach the goal."


@pytest.mark.parametrize(
    "name, steps, path",
    [
        ("open", 4, [(1, 1), (2, 1), (2, 2), (2, 3), (2, 3)]),
        ("detour_right", 5, [(1, 1), (1, 2), (2, 2), (3, 2), (3, 3), (3, 3)]),
        ("detour_left", 5, [(1, 3), (1, 2), (2, 2), (3, 2), (3, 1), (3, 1)]),
    ],
)
def test_reaching_layouts(sink, name, steps, path):
    """The reported step count includes the tick that confirms the goal."""
    world, result = run_layout(name, tick_delay=0, sink=sink)

    assert result.reached
    assert result.steps == steps
    assert result.trajectory == path
    assert world.agent_position == world.goal_position
    assert sink.lines[-1] == f"Goal reached in {steps} steps!"


def test_column_wall_layout_stalls_after_one_move(sink):
    _, result = run_layout("column_wall", tick_delay=0, sink=sink)

    assert not result.reached
    assert result.steps == 100
    assert result.trajectory[1] == (1, 2)
    assert set(result.trajectory[1:]) == {(1, 2)}


def test_enclosed_agent_runs_to_step_limit(enclosed_world, controller, sink):
    result = run_simulation(
        enclosed_world, controller, max_steps=25, tick_delay=0, sink=sink
    )

    assert not result.reached
    assert result.steps == 25
    assert set(result.trajectory) == {(2, 3)}
    assert sink.lines.count("Agent could not reach the goal.") == 1
    assert not any(line.startswith("Goal reached") for line in sink.lines)


def test_per_tick_output(open_world, controller, sink):
    run_simulation(open_world, controller, tick_delay=0, sink=sink)

    assert sink.lines[:3] == ["Step: 0", "Agent at (1, 1)", "Goal at (2, 3)"]
    assert sink.lines[3:6] == ["Step: 1", "Agent at (2, 1)", "Goal at (2, 3)"]
    # One frame per tick plus the final frame.
    assert len(sink.frames) == 5


def test_exactly_one_agent_marker_every_tick(controller):
    world = World.from_layout(LAYOUTS["detour_left"])
    for _ in range(6):
        controller.tick(world)
        assert world.count(AGENT) == 1


def test_zero_max_steps_renders_once_and_fails(open_world, controller, sink):
    result = run_simulation(
        open_world, controller, max_steps=0, tick_delay=0, sink=sink
    )

    assert result.steps == 0
    assert not result.reached
    assert result.trajectory == [(1, 1)]
    assert len(sink.frames) == 1
    assert sink.lines == ["Agent could not reach the goal."]


@pytest.mark.parametrize("kwargs", [{"max_steps": -1}, {"tick_delay": -0.5}])
def test_negative_limits_raise(open_world, controller, kwargs):
    with pytest.raises(ValueError):
        run_simulation(open_world, controller, sink=NullSink(), **kwargs)


def test_tick_delay_sleeps_between_ticks(open_world, controller, monkeypatch):
    sleeps = []
    monkeypatch.setattr("gridwalker.simulation.time.sleep", sleeps.append)

    result = run_simulation(open_world, controller, tick_delay=0.2, sink=NullSink())

    assert sleeps == [0.2] * result.steps


def test_runs_against_a_headless_world_double(controller):
    world = MockWorld(agent=(0, 0), goal=(0, 2), open_cells=[(0, 1), (0, 2)])
    result = run_simulation(world, controller, tick_delay=0, sink=NullSink())

    assert result.reached
    assert result.trajectory == [(0, 0), (0, 1), (0, 2), (0, 2)]
