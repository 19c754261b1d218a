import pytest

from wcetbench.statemate_model import BITLIST_SIZE, Flag, WindowLiftState

STATE_NAMES = (
    "nicht_initialisiert_state",
    "zentral_state",
    "mec_state",
    "kindersicherung_state",
    "b_state",
    "a_state",
    "wiederholsperre_state",
    "initialisiert_state",
    "tipp_schliessen_state",
    "manuell_schliessen_state",
    "oeffnen_state",
    "schliessen_state",
    "steuerung_dummy_state",
    "einklemmschutz_state",
    "bewegung_state",
    "block_erkennung_state",
)


def test_fresh_state_has_cleared_flag_list():
    state = WindowLiftState()
    assert len(state.bits) == BITLIST_SIZE
    assert not any(state.bits)


def test_reset_clears_flags_timers_and_chart_states():
    state = WindowLiftState()
    for flag in Flag:
        state.bits[flag] = 1
    state.tm_einschaltstrom_or_n = 7
    state.tm_wiederholsperre_or_bereit = 8
    state.tm_wiederholsperre = 9
    for name in STATE_NAMES:
        setattr(state, name, 2)
    state.reset()
    assert not any(state.bits)
    assert state.tm_einschaltstrom_or_n == 0
    assert state.tm_wiederholsperre_or_bereit == 0
    assert state.tm_wiederholsperre == 0
    assert all(getattr(state, name) == 0 for name in STATE_NAMES)


def test_reset_keeps_signals_and_scheduled_timers():
    state = WindowLiftState()
    state.tuermodul_mfhz = 1
    state.du_mfh = -100
    state.sc_2375_2 = 4
    state.block_ctrl_n = 11
    state.reset()
    assert state.tuermodul_mfhz == 1
    assert state.du_mfh == -100
    assert state.sc_2375_2 == 4
    assert state.block_ctrl_n == 11


def test_interface_after_reset_records_no_timestamps():
    state = WindowLiftState()
    state.reset()
    state.interface()
    assert state.tm_wiederholsperre == 0
    assert state.tm_wiederholsperre_or_bereit == 0
    assert state.tm_einschaltstrom_or_n == 0


def test_entering_wiederholsperre_stamps_both_timers():
    state = WindowLiftState(time=5)
    state.bits[Flag.ENTERED_WIEDERHOLSPERRE] = 1
    state.interface()
    assert state.tm_wiederholsperre == 5
    assert state.tm_wiederholsperre_or_bereit == 5


def test_exiting_bereit_stamps_only_combined_timer():
    state = WindowLiftState(time=6)
    state.bits[Flag.EXITED_BEREIT] = 1
    state.interface()
    assert state.tm_wiederholsperre == 0
    assert state.tm_wiederholsperre_or_bereit == 6


@pytest.mark.parametrize(
    ("timer", "signal"),
    [
        ("sc_2375_2", "tuermodul_mfha_copy"),
        ("sc_2352_1", "tuermodul_mfhz_copy"),
        ("sc_2329_1", "tuermodul_mfhz_copy"),
    ],
)
def test_due_scheduled_action_clears_motor_signal(timer, signal):
    state = WindowLiftState(time=10)
    setattr(state, timer, 3)
    setattr(state, signal, 1)
    state.interface()
    assert getattr(state, timer) == 0
    assert getattr(state, signal) == 0


@pytest.mark.parametrize("timer", ["sc_1781_10", "sc_1739_10"])
def test_due_timer_without_action_is_cleared(timer):
    state = WindowLiftState(time=10)
    setattr(state, timer, 2)
    state.interface()
    assert getattr(state, timer) == 0


def test_scheduled_action_waits_while_no_time_has_passed():
    state = WindowLiftState(time=4)
    state.sc_2375_2 = 4
    state.tuermodul_mfha_copy = 1
    state.interface()
    assert state.sc_2375_2 == 4
    assert state.tuermodul_mfha_copy == 1


def test_clock_difference_wraps_like_an_unsigned_value():
    state = WindowLiftState(time=1)
    state.sc_2352_1 = 5
    state.tuermodul_mfhz_copy = 1
    state.interface()
    assert state.sc_2352_1 == 0
    assert state.tuermodul_mfhz_copy == 0


def test_block_counter_change_stamps_measurement_timer():
    state = WindowLiftState(time=3, block_ctrl_n=2, block_ctrl_n_old=1)
    state.interface()
    assert state.tm_einschaltstrom_or_n == 3


def test_entering_measurement_stamps_measurement_timer():
    state = WindowLiftState(time=8)
    state.bits[Flag.ENTERED_EINSCHALTSTROM_MESSEN] = 1
    state.interface()
    assert state.tm_einschaltstrom_or_n == 8


def test_unchanged_block_counter_leaves_measurement_timer():
    state = WindowLiftState(time=3, block_ctrl_n=2, block_ctrl_n_old=2)
    state.tm_einschaltstrom_or_n = 1
    state.interface()
    assert state.tm_einschaltstrom_or_n == 1