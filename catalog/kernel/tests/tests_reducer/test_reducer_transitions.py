"""
Catalog Reducer -- Transition Tests

Each transition replaces only the field its interaction owns.

Covers:
  - search.set       verbatim replacement
  - owner.select     set / clear
  - category.toggle  add, remove, insertion order, self-inverse
  - category.clear
  - filters.reset
  - Purity: the input state is never modified
  - Unknown and malformed transitions are reported, not raised
"""

import pytest

from catalog.kernel.reducer import empty_state, reduce
from catalog.kernel.transitions import (
    clear_categories,
    cycle_sort,
    reset_all,
    select_owner,
    set_search,
    toggle_category,
)
from catalog.kernel.types import FilterState, SortSpec, Transition


def busy_state():
    return FilterState(
        search="milk",
        selected_user_id=2,
        selected_category_ids=(3, 1),
        sort=SortSpec("name", "desc"),
    )


def apply(state, transition):
    result = reduce(state, transition)
    assert result.applied, result.error
    assert result.error is None
    return result.state


# ============================================================================
# Initial state
# ============================================================================


class TestEmptyState:
    def test_defaults(self):
        state = empty_state()
        assert state.search == ""
        assert state.selected_user_id is None
        assert state.selected_category_ids == ()
        assert state.sort == SortSpec(None, None)

    def test_to_dict(self):
        assert empty_state().to_dict() == {
            "search": "",
            "selected_user_id": None,
            "selected_category_ids": [],
            "sort": {"column": None, "order": None},
        }


# ============================================================================
# search.set
# ============================================================================


class TestSetSearch:
    def test_replaces_search_only(self):
        state = apply(busy_state(), set_search("bread"))
        assert state == FilterState(
            search="bread",
            selected_user_id=2,
            selected_category_ids=(3, 1),
            sort=SortSpec("name", "desc"),
        )

    @pytest.mark.parametrize("text", ["  padded  ", "MiXeD", "", "\t"])
    def test_verbatim(self, text):
        assert apply(empty_state(), set_search(text)).search == text


# ============================================================================
# owner.select
# ============================================================================


class TestSelectOwner:
    def test_select(self):
        state = apply(empty_state(), select_owner(3))
        assert state.selected_user_id == 3
        assert state.search == ""

    def test_replace(self):
        assert apply(busy_state(), select_owner(1)).selected_user_id == 1

    def test_none_clears(self):
        state = apply(busy_state(), select_owner(None))
        assert state.selected_user_id is None
        assert state.selected_category_ids == (3, 1)

    def test_unknown_owner_is_legal(self):
        assert apply(empty_state(), select_owner(999)).selected_user_id == 999


# ============================================================================
# category.toggle / category.clear
# ============================================================================


class TestToggleCategory:
    def test_add(self):
        assert apply(empty_state(), toggle_category(4)).selected_category_ids == (4,)

    def test_insertion_order(self):
        state = empty_state()
        for cid in (5, 1, 3):
            state = apply(state, toggle_category(cid))
        assert state.selected_category_ids == (5, 1, 3)

    def test_remove_keeps_order_of_rest(self):
        state = FilterState(selected_category_ids=(5, 1, 3))
        assert apply(state, toggle_category(1)).selected_category_ids == (5, 3)

    def test_remove_last(self):
        state = FilterState(selected_category_ids=(2,))
        assert apply(state, toggle_category(2)).selected_category_ids == ()

    @pytest.mark.parametrize("cid", [1, 3, 7])
    def test_twice_is_identity(self, cid):
        start = busy_state()
        state = apply(apply(start, toggle_category(cid)), toggle_category(cid))
        assert set(state.selected_category_ids) == set(start.selected_category_ids)
        assert state.search == start.search
        assert state.sort == start.sort

    def test_twice_on_new_id_restores_exact_tuple(self):
        start = busy_state()
        state = apply(apply(start, toggle_category(7)), toggle_category(7))
        assert state == start

    def test_leaves_other_fields(self):
        state = apply(busy_state(), toggle_category(9))
        assert state.search == "milk"
        assert state.selected_user_id == 2
        assert state.sort == SortSpec("name", "desc")


class TestClearCategories:
    def test_clears(self):
        state = apply(busy_state(), clear_categories())
        assert state.selected_category_ids == ()
        assert state.search == "milk"
        assert state.selected_user_id == 2

    def test_clear_when_empty(self):
        assert apply(empty_state(), clear_categories()) == empty_state()


# ============================================================================
# filters.reset
# ============================================================================


class TestResetAll:
    def test_resets_everything(self):
        assert apply(busy_state(), reset_all()) == empty_state()

    def test_reset_on_empty(self):
        assert apply(empty_state(), reset_all()) == empty_state()


# ============================================================================
# Purity
# ============================================================================


class TestPurity:
    @pytest.mark.parametrize(
        "transition",
        [
            set_search("x"),
            select_owner(1),
            toggle_category(3),
            clear_categories(),
            cycle_sort("id"),
            reset_all(),
        ],
    )
    def test_input_state_unchanged(self, transition):
        state = busy_state()
        reduce(state, transition)
        assert state == busy_state()

    def test_state_is_frozen(self):
        state = empty_state()
        with pytest.raises(AttributeError):
            state.search = "x"


# ============================================================================
# Unknown / malformed transitions
# ============================================================================


class TestRejections:
    def test_unknown_type(self):
        state = busy_state()
        result = reduce(state, Transition(type="page.next"))
        assert not result.applied
        assert result.state is state
        assert result.error == "UNKNOWN_TRANSITION: page.next"

    def test_missing_payload_key(self):
        result = reduce(empty_state(), Transition(type="search.set"))
        assert not result.applied
        assert result.error.startswith("INVALID_PAYLOAD")
        assert "text" in result.error

    def test_unknown_sort_column(self):
        result = reduce(empty_state(), cycle_sort("price"))
        assert not result.applied
        assert "price" in result.error

    def test_non_int_category(self):
        result = reduce(empty_state(), Transition(type="category.toggle", payload={"category_id": "2"}))
        assert not result.applied

    def test_bool_is_not_an_id(self):
        result = reduce(empty_state(), Transition(type="owner.select", payload={"user_id": True}))
        assert not result.applied

    def test_search_must_be_string(self):
        result = reduce(empty_state(), Transition(type="search.set", payload={"text": None}))
        assert not result.applied
