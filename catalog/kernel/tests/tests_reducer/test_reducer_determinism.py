"""
Catalog Reducer -- Determinism and Replay Tests

The reducer is a pure, deterministic function: same transitions in, same
state out, every time. There is no history; replay is just a fold.

Covers:
  - N-times replay identity
  - Incremental vs. full replay equivalence
  - Replay skips unapplied transitions
  - Replay from a given starting state
  - Transitions read back from JSON with from_dict replay the same
  - validate_transition
"""

import json

from catalog.kernel.reducer import empty_state, reduce, replay
from catalog.kernel.transitions import (
    clear_categories,
    cycle_sort,
    reset_all,
    select_owner,
    set_search,
    toggle_category,
    validate_transition,
)
from catalog.kernel.types import FilterState, SortSpec, Transition


def session():
    """A browsing session touching every interaction."""
    return [
        set_search("a"),
        select_owner(2),
        toggle_category(1),
        toggle_category(3),
        cycle_sort("name"),
        cycle_sort("name"),
        toggle_category(1),
        set_search("ap"),
        cycle_sort("user"),
        select_owner(None),
        clear_categories(),
        toggle_category(5),
        Transition(type="bogus"),
        cycle_sort("user"),
        cycle_sort("user"),
    ]


def state_json(state):
    return json.dumps(state.to_dict(), sort_keys=True)


class TestReplay:
    def test_final_state(self):
        assert replay(session()) == FilterState(
            search="ap",
            selected_user_id=None,
            selected_category_ids=(5,),
            sort=SortSpec(None, None),
        )

    def test_replay_100_times(self):
        expected = state_json(replay(session()))
        for _ in range(100):
            assert state_json(replay(session())) == expected

    def test_incremental_equals_replay(self):
        state = empty_state()
        for transition in session():
            state = reduce(state, transition).state
        assert state == replay(session())

    def test_prefix_replay(self):
        events = session()
        assert replay(events[:5]) == FilterState(
            search="a",
            selected_user_id=2,
            selected_category_ids=(1, 3),
            sort=SortSpec("name", "asc"),
        )

    def test_reset_in_the_middle(self):
        events = session()[:6] + [reset_all()]
        assert replay(events) == empty_state()

    def test_replay_from_state(self):
        start = FilterState(search="milk")
        assert replay([select_owner(1)], start) == FilterState(search="milk", selected_user_id=1)

    def test_empty_replay(self):
        assert replay([]) == empty_state()

    def test_serialized_session_replays_the_same(self):
        wire = json.dumps([{"type": t.type, "payload": t.payload} for t in session()])
        restored = [Transition.from_dict(d) for d in json.loads(wire)]
        assert replay(restored) == replay(session())


class TestValidateTransition:
    def test_factories_are_valid(self):
        for transition in session()[:12]:
            assert validate_transition(transition) == []

    def test_unknown_type(self):
        assert validate_transition(Transition(type="bogus")) == ["Unknown transition type: bogus"]

    def test_payload_must_be_dict(self):
        assert validate_transition(Transition(type="search.set", payload=None)) == [
            "Payload must be a non-null object"
        ]

    def test_no_payload_needed(self):
        assert validate_transition(Transition(type="filters.reset")) == []
        assert validate_transition(Transition(type="category.clear")) == []
