from collections import namedtuple

from gridwalker.utils import get_col, get_row

# A movement rule: applies(current, goal) -> bool, and the (d_row, d_col) step
# taken when it does.
Rule = namedtuple("Rule", ["name", "applies", "delta"])

DOWN = Rule("down", lambda cur, goal: get_row(goal) > get_row(cur), (1, 0))
UP = Rule("up", lambda cur, goal: get_row(goal) < get_row(cur), (-1, 0))
RIGHT = Rule("right", lambda cur, goal: get_col(goal) > get_col(cur), (0, 1))
LEFT = Rule("left", lambda cur, goal: get_col(goal) < get_col(cur), (0, -1))

# Primary move: rows first, then columns.
DECIDE_RULES = (DOWN, UP, RIGHT, LEFT)

# Blocked-move fallback: columns first, then rows, unlike DECIDE_RULES.
FALLBACK_RULES = (RIGHT, LEFT, DOWN, UP)


def apply_delta(pos, delta):
    """Returns pos shifted by a (d_row, d_col) delta."""
    return (get_row(pos) + delta[0], get_col(pos) + delta[1])


def first_applicable(rules, current, goal):
    """
    Returns the first rule that applies, or None.

    Args:
        rules (Sequence[Rule]): Rules in priority order.
        current (tuple): (row, col) of the agent.
        goal (tuple): (row, col) of the goal.
    """
    for rule in rules:
        if rule.applies(current, goal):
            return rule
    return None


def propose_move(current, goal, rules=DECIDE_RULES):
    """
    Returns (rule, candidate) for the greedy step toward goal.

    Only one axis changes. When no rule applies (current == goal) the rule
    is None and the candidate is current.
    """
    rule = first_applicable(rules, current, goal)
    if rule is None:
        return None, current
    return rule, apply_delta(current, rule.delta)


def fallback_candidates(current, goal, rules=FALLBACK_RULES):
    """
    Returns the fallback options as (rule, candidate) pairs in priority order.

    Only rules that apply to (current, goal) are listed; validity is not
    checked here.
    """
    return [
        (rule, apply_delta(current, rule.delta))
        for rule in rules
        if rule.applies(current, goal)
    ]


class GreedyController:
    """
    Greedy single-step controller with one level of obstacle fallback.

    Each tick is perceive, decide, act. Perceive copies the agent and goal
    positions out of the world; decide picks one candidate cell with
    DECIDE_RULES; act commits it, or the first valid FALLBACK_RULES option
    when it is blocked. A tick with no valid option changes nothing.
    """

    def __init__(self, decide_rules=DECIDE_RULES, fallback_rules=FALLBACK_RULES):
        self.decide_rules = decide_rules
        self.fallback_rules = fallback_rules
        self.current = None
        self.goal = None
        self.next_pos = None
        self.planned_rule = None
        self.last_move = None

    def perceive(self, world):
        """Copies the agent and goal positions from the world."""
        self.current = world.agent_position
        self.goal = world.goal_position

    def decide(self):
        """Plans the next cell from the last perceived state."""
        self.planned_rule, self.next_pos = propose_move(
            self.current, self.goal, self.decide_rules
        )
        return self.next_pos

    def act(self, world):
        """
        Commits the planned move, falling back when it is blocked.

        Returns:
            tuple or None: The committed cell, or None on a stall.
        """
        if world.is_valid(*self.next_pos):
            world.update_agent_position(self.current, self.next_pos)
            self.last_move = self.planned_rule.name if self.planned_rule else None
            return self.next_pos

        for rule, candidate in fallback_candidates(
            self.current, self.goal, self.fallback_rules
        ):
            if world.is_valid(*candidate):
                world.update_agent_position(self.current, candidate)
                self.last_move = rule.name
                return candidate

        self.last_move = None
        return None

    def tick(self, world):
        """Runs one perceive, decide, act cycle."""
        self.perceive(world)
        self.decide()
        return self.act(world)

    def has_reached_goal(self):
        """True if the last perceived agent position is the perceived goal."""
        return self.current is not None and self.current == self.goal
