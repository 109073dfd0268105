"""Tests for navigation transitions."""

from backend import navigation
from field_codex.models import AppState, Browsing, Entry, Idle, Searching, ToolOpen

HOTH = Entry(id="hoth", name="Hoth", category="planets")


def test_select_category_keeps_search_text():
    state = AppState(query="ice")
    new = navigation.select_category(state, "planets")
    assert new.nav == Browsing(category="planets")
    assert new.query == "ice"
    assert state.nav == Idle()


def test_select_category_from_tool():
    state = navigation.open_tool(AppState())
    assert navigation.select_category(state, "items").nav == Browsing(category="items")


def test_select_entry_uses_entry_category():
    state = AppState(nav=Searching(query="hoth"), query="hoth")
    new = navigation.select_entry(state, HOTH)
    assert new.nav == Browsing(category="planets", entry_id="hoth")


def test_back_to_list():
    state = AppState(nav=Browsing(category="planets", entry_id="hoth"))
    assert navigation.back_to_list(state).nav == Browsing(category="planets")
    idle = AppState()
    assert navigation.back_to_list(idle) is idle


def test_open_tool_clears_browsing():
    state = AppState(nav=Browsing(category="planets", entry_id="hoth"))
    assert navigation.open_tool(state).nav == ToolOpen(tool="destiny")


def test_search_ignored_while_tool_open():
    state = navigation.open_tool(AppState())
    assert navigation.type_search(state, "hoth") is state


def test_search_in_category_refilters_list():
    state = AppState(nav=Browsing(category="planets", entry_id="hoth"))
    new = navigation.type_search(state, "ice")
    assert new.nav == Browsing(category="planets")
    assert new.query == "ice"


def test_search_without_category_goes_global():
    new = navigation.type_search(AppState(), "alak")
    assert new.nav == Searching(query="alak")
    assert new.query == "alak"
    again = navigation.type_search(new, "ala")
    assert again.nav == Searching(query="ala")


def test_toggle_gm_keeps_navigation():
    state = AppState(nav=Browsing(category="planets"))
    new = navigation.toggle_gm(state)
    assert new.is_gm is True
    assert new.nav == state.nav
    assert navigation.toggle_gm(new).is_gm is False


def test_toggle_gm_from_cleared_search_goes_home():
    state = AppState(nav=Searching(query="  "), query="  ")
    new = navigation.toggle_gm(state)
    assert new.is_gm is True
    assert new.nav == Idle()

    searching = AppState(nav=Searching(query="hoth"), query="hoth")
    assert navigation.toggle_gm(searching).nav == Searching(query="hoth")


def test_press_key_shortcut_case_insensitive():
    assert navigation.press_key(AppState(), "G").is_gm is True
    assert navigation.press_key(AppState(), "g").is_gm is True
    assert navigation.press_key(AppState(), "x").is_gm is False
    assert navigation.press_key(AppState(), "M", shortcut="m").is_gm is True


def test_go_home_clears_everything_but_gm():
    state = AppState(nav=Browsing(category="planets", entry_id="hoth"), is_gm=True, query="ice")
    new = navigation.go_home(state)
    assert new.nav == Idle()
    assert new.query == ""
    assert new.is_gm is True
