import pytest

from hyperblow.state import Mouse, MouseState, Tab, TUIState

LAST_TAB = len(Tab) - 1


def test_new_state_starts_on_details_outside_command_mode():
    state = TUIState()
    assert state.tab is Tab.DETAILS
    assert state.is_command_mode is False
    assert state.command_feedback is None
    assert state.has_pending_commands() is False


def test_engine_is_kept():
    engine = object()
    assert TUIState(engine=engine).engine is engine


@pytest.mark.parametrize("tab", list(Tab))
def test_set_tab_index_loads_matching_tab(tab):
    state = TUIState()
    index = list(Tab).index(tab)
    state.set_tab_index(index)
    assert state.tab_index == index
    assert state.tab is tab


def test_out_of_range_tab_index_loads_details():
    state = TUIState()
    state.set_tab_index(len(Tab) + 3)
    assert state.tab is Tab.DETAILS


def test_set_tab_index_resets_content_rows():
    state = TUIState()
    state.set_max_content_row_index(5)
    state.set_content_row_index(3)
    assert state.content_row_index == 3
    state.set_tab_index(1)
    assert state.content_row_index == 0
    state.set_content_row_index(3)
    assert state.content_row_index == 0


def test_tab_index_wraps_both_ways():
    state = TUIState()
    state.set_max_tab_index(LAST_TAB)
    state.set_tab_index(LAST_TAB)
    state.increment_tab_index()
    assert state.tab_index == 0
    assert state.tab is Tab.DETAILS
    state.decrement_tab_index()
    assert state.tab_index == LAST_TAB
    assert state.tab is Tab.PIECES


def test_lower_max_tab_index_moves_selection():
    state = TUIState()
    state.set_max_tab_index(LAST_TAB)
    state.set_tab_index(4)
    state.set_max_tab_index(2)
    assert state.tab_index == 2
    assert state.tab is Tab.FILES


def test_torrent_index_is_clamped_and_bounded():
    state = TUIState()
    state.set_max_torrent_index(2)
    state.set_torrent_index(9)
    assert state.torrent_index == 2
    state.increment_torrent_index()
    assert state.torrent_index == 2
    state.set_torrent_index(0)
    state.decrement_torrent_index()
    assert state.torrent_index == 0
    state.increment_torrent_index()
    assert state.torrent_index == 1


def test_lower_max_torrent_index_clamps_selection():
    state = TUIState()
    state.set_max_torrent_index(4)
    state.set_torrent_index(4)
    state.set_max_torrent_index(1)
    assert state.torrent_index == 1


def test_content_row_index_moves_within_max():
    state = TUIState()
    state.set_max_content_row_index(3)
    state.set_content_row_index(1)
    state.increment_content_row_index()
    assert state.content_row_index == 2
    for _ in range(5):
        state.increment_content_row_index()
    assert state.content_row_index == 3
    state.set_max_content_row_index(1)
    assert state.content_row_index == 1
    state.decrement_content_row_index()
    state.decrement_content_row_index()
    assert state.content_row_index == 0


def test_push_and_pop_command_chars():
    state = TUIState()
    for char in "fi":
        state.push_command_char(char)
    assert state.command_input == "fi"
    state.pop_command_char()
    assert state.command_input == "f"
    state.pop_command_char()
    state.pop_command_char()
    assert state.command_input == ""


def test_typing_clears_feedback():
    state = TUIState()
    state.set_command_feedback("invalid magnet URI", True)
    assert state.command_feedback_is_error is True
    state.push_command_char("q")
    assert state.command_feedback is None
    assert state.command_feedback_is_error is False


def test_enter_command_mode_clears_feedback():
    state = TUIState()
    state.set_command_feedback("Loaded Sintel", False)
    assert state.command_feedback == "Loaded Sintel"
    state.enter_command_mode()
    assert state.is_command_mode is True
    assert state.command_feedback is None


def test_exit_command_mode_resets_suggestion_index():
    state = TUIState()
    state.enter_command_mode()
    state.set_command_suggestions(["file ", "magnet ", "q", "quit"])
    state.increment_command_suggestion_index()
    state.exit_command_mode()
    assert state.is_command_mode is False
    assert state.command_suggestion_index == 0


def test_set_command_input_resets_suggestion_index():
    state = TUIState()
    state.set_command_suggestions(["q", "quit"])
    state.increment_command_suggestion_index()
    state.set_command_input("file ")
    assert state.command_input == "file "
    assert state.selected_command_suggestion() == "q"


def test_clear_command_input():
    state = TUIState()
    state.set_command_input("magnet magnet:?xt=urn:btih:")
    state.clear_command_input()
    assert state.command_input == ""


def test_suggestion_index_cycles_both_ways():
    suggestions = ["file ", "magnet ", "q", "quit"]
    state = TUIState()
    state.set_command_suggestions(suggestions)
    state.decrement_command_suggestion_index()
    assert state.selected_command_suggestion() == suggestions[-1]
    state.increment_command_suggestion_index()
    assert state.selected_command_suggestion() == suggestions[0]
    for _ in suggestions:
        state.increment_command_suggestion_index()
    assert state.selected_command_suggestion() == suggestions[0]


def test_empty_suggestions_select_nothing():
    state = TUIState()
    state.set_command_suggestions([])
    state.increment_command_suggestion_index()
    state.decrement_command_suggestion_index()
    assert state.command_suggestion_index == 0
    assert state.selected_command_suggestion() is None


def test_shorter_suggestions_clamp_selection():
    state = TUIState()
    state.set_command_suggestions(["file ", "magnet ", "q", "quit"])
    state.decrement_command_suggestion_index()
    state.set_command_suggestions(["q", "quit"])
    assert state.selected_command_suggestion() == "quit"


def test_suggestions_are_copied():
    suggestions = ["q", "quit"]
    state = TUIState()
    state.set_command_suggestions(suggestions)
    suggestions.append("file ")
    assert state.command_suggestions == ["q", "quit"]


def test_pending_commands_count_saturates():
    state = TUIState()
    state.decrement_pending_commands()
    assert state.has_pending_commands() is False
    state.increment_pending_commands()
    state.increment_pending_commands()
    state.decrement_pending_commands()
    assert state.has_pending_commands() is True
    state.decrement_pending_commands()
    assert state.has_pending_commands() is False


def test_mouse_defaults_and_updates():
    state = TUIState()
    assert state.mouse == Mouse(0, 0, MouseState.NOT_CLICKED)
    state.mouse.x = 12
    state.mouse.y = 7
    state.mouse.event = MouseState.CLICKED
    assert state.mouse == Mouse(12, 7, MouseState.CLICKED)


def test_tab_from_index_matches_order():
    assert [Tab.from_index(index) for index in range(len(Tab))] == list(Tab)
    assert Tab.from_index(-1) is Tab.DETAILS