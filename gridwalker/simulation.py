import time
from collections import namedtuple

from gridwalker.controllers.greedy import GreedyController
from gridwalker.layouts import DEFAULT_LAYOUT, get_layout
from gridwalker.render import ConsoleSink
from gridwalker.world import World

DEFAULT_MAX_STEPS = 100
DEFAULT_TICK_DELAY = 0.2

SimulationResult = namedtuple("SimulationResult", ["reached", "steps", "trajectory"])


def run_simulation(
    world,
    controller,
    max_steps=DEFAULT_MAX_STEPS,
    tick_delay=DEFAULT_TICK_DELAY,
    sink=None,
):
    """Runs the perceive/decide/act loop until the goal is reached or steps run out.

    Each tick first shows the world, the step count and both positions, then
    lets the controller act. Reaching the goal is only noticed on the next
    perceive, so a successful run counts one extra confirming tick.

    Args:
        world (World): The world to run in. Mutated in place.
        controller (GreedyController): The controller driving the agent.
        max_steps (int): Tick limit.
        tick_delay (float): Seconds to sleep after each tick. 0 disables it.
        sink: Render sink; defaults to a ConsoleSink.

    Returns:
        SimulationResult: (reached, steps, trajectory), where trajectory holds
            the agent position before the first tick and after every tick.

    Raises:
        ValueError: If max_steps or tick_delay is negative.
    """
    if max_steps < 0:
        raise ValueError(f"max_steps must be >= 0, got {max_steps}")
    if tick_delay < 0:
        raise ValueError(f"tick_delay must be >= 0, got {tick_delay}")
    if sink is None:
        sink = ConsoleSink()

    steps = 0
    trajectory = [world.agent_position]

    while not controller.has_reached_goal() and steps < max_steps:
        world.render(sink)
        agent_r, agent_c = world.agent_position
        goal_r, goal_c = world.goal_position
        sink.write(f"Step: {steps}")
        sink.write(f"Agent at ({agent_r}, {agent_c})")
        sink.write(f"Goal at ({goal_r}, {goal_c})")

        controller.tick(world)
        steps += 1
        trajectory.append(world.agent_position)

        if tick_delay:
            time.sleep(tick_delay)

    world.render(sink)
    reached = controller.has_reached_goal()
    if reached:
        sink.write(f"Goal reached in {steps} steps!")
    else:
        sink.write("Agent could not reach the goal.")

    return SimulationResult(reached, steps, trajectory)


def run_layout(
    layout_name=DEFAULT_LAYOUT,
    max_steps=DEFAULT_MAX_STEPS,
    tick_delay=DEFAULT_TICK_DELAY,
    sink=None,
):
    """Builds a fresh world and controller for a named layout and runs them.

    Returns:
        tuple: (world, result) so callers can inspect the final grid.
    """
    world = World.from_layout(get_layout(layout_name))
    controller = GreedyController()
    result = run_simulation(
        world, controller, max_steps=max_steps, tick_delay=tick_delay, sink=sink
    )
    return world, result
