"""The child-lock and door-module charts of the window lift controller.

Each function runs one step of its chart against a
:class:`~wcetbench.statemate_model.WindowLiftState`. Where the chart takes a
transition it clears ``state.stable`` so that the driver loop runs another
step.
"""

from __future__ import annotations

from .statemate_model import Flag, WindowLiftState, _elapsed

# Window travel limit of the door module, in position units.
_POSITION_TOP = 405


def _rising(now: int, old: int) -> bool:
    return bool(now) and not old


def _falling(now: int, old: int) -> bool:
    return not now and bool(old)


def _follow_switches(
    state: WindowLiftState, sfha: int, sfha_old: int, sfhz: int, sfhz_old: int
) -> bool:
    """Pass the first switch edge on to the door module; True if one fired."""
    if _rising(sfha, sfha_old):
        state.tuermodul_sfha_copy = 1
    elif _rising(sfhz, sfhz_old):
        state.tuermodul_sfhz_copy = 1
    elif _falling(sfha, sfha_old):
        state.tuermodul_sfha_copy = 0
    elif _falling(sfhz, sfhz_old):
        state.tuermodul_sfhz_copy = 0
    else:
        return False
    state.stable = 0
    return True


def _release_switches(state: WindowLiftState) -> None:
    state.stable = 0
    state.tuermodul_sfhz_copy = 0
    state.tuermodul_sfha_copy = 0
    state.kindersicherung_state = 3


def _child_lock_waiting(state: WindowLiftState) -> None:
    s = state
    locked = bool(s.tuermodul_kl_50)
    mec_z, mec_a = bool(s.tuermodul_sfhz_mec), bool(s.tuermodul_sfha_mec)
    zen_z, zen_a = bool(s.tuermodul_sfhz_zentral), bool(s.tuermodul_sfha_zentral)

    if not locked and mec_z and mec_a:
        s.tuermodul_sfhz_copy = 1
        s.tuermodul_sfha_copy = 1
        target = 2
    elif not locked and mec_z and not mec_a:
        s.tuermodul_sfhz_copy = 1
        target = 2
    elif not locked and not mec_z and mec_a:
        s.tuermodul_sfha_copy = 1
        target = 2
    elif not zen_z and zen_a and not locked:
        s.tuermodul_sfha_copy = 1
        target = 1
    elif zen_z and zen_a:
        s.tuermodul_sfha_copy = 1
        s.tuermodul_sfhz_copy = 1
        target = 1
    elif zen_z and not zen_a and not locked:
        s.tuermodul_sfhz_copy = 1
        target = 1
    else:
        return
    s.stable = 0
    s.kindersicherung_state = target


def child_lock_chart(state: WindowLiftState) -> None:
    """One step of the child-lock chart (central and mechanical switches)."""
    s = state
    if not s.bits[Flag.ACTIVE_KINDERSICHERUNG]:
        return

    current = s.kindersicherung_state
    if current == 1:  # ZENTRAL
        if not (s.tuermodul_sfha_zentral or s.tuermodul_sfhz_zentral):
            _release_switches(s)
            s.zentral_state = 0
            return
        if s.zentral_state == 1:  # IN_ZENTRAL
            if _follow_switches(
                s,
                s.tuermodul_sfha_zentral,
                s.tuermodul_sfha_zentral_old,
                s.tuermodul_sfhz_zentral,
                s.tuermodul_sfhz_zentral_old,
            ):
                s.zentral_state = 1
        else:
            s.stable = 0
    elif current == 2:  # MEC
        if not (s.tuermodul_sfha_mec or s.tuermodul_sfhz_mec):
            _release_switches(s)
            s.mec_state = 0
            return
        if s.mec_state == 1:  # INMEC
            if _follow_switches(
                s,
                s.tuermodul_sfha_mec,
                s.tuermodul_sfha_mec_old,
                s.tuermodul_sfhz_mec,
                s.tuermodul_sfhz_mec_old,
            ):
                s.mec_state = 1
        else:
            s.stable = 0
    elif current == 3:  # WAITING
        _child_lock_waiting(s)
    else:
        s.stable = 0
        s.kindersicherung_state = 3


def _not_initialised(state: WindowLiftState) -> None:
    s = state
    if _rising(s.tuermodul_block, s.tuermodul_block_old) and s.tuermodul_mfhz:
        s.stable = 0
        s.tuermodul_mfhz_copy = 0
        s.sc_2329_1 = s.time
        s.b_state = 3
        s.initialisiert_state = 3
        return

    sub = s.nicht_initialisiert_state
    if sub == 1:  # SCHLIESSEN
        if not s.tuermodul_sfhz:
            s.stable = 0
            s.tuermodul_mfhz_copy = 0
            s.nicht_initialisiert_state = 3
    elif sub == 2:  # OEFFNEN
        if not s.tuermodul_sfha:
            s.stable = 0
            s.tuermodul_mfha_copy = 0
            s.nicht_initialisiert_state = 3
    elif sub == 3:  # BEREIT
        if s.tuermodul_sfha:
            s.stable = 0
            s.tuermodul_mfha_copy = 1
            s.nicht_initialisiert_state = 2
        elif s.tuermodul_sfhz:
            s.stable = 0
            s.tuermodul_mfhz_copy = 1
            s.nicht_initialisiert_state = 1
    else:
        s.stable = 0
        s.nicht_initialisiert_state = 3


def _opening(state: WindowLiftState) -> None:
    s = state
    if s.tuermodul_position >= _POSITION_TOP:
        s.stable = 0
        s.tuermodul_mfha_copy = 0
        s.initialisiert_state = 3
        return

    sub = s.oeffnen_state
    if sub == 1:  # TIPP_OEFFNEN
        if _rising(s.tuermodul_sfhz, s.tuermodul_sfhz_old) or _rising(
            s.tuermodul_sfha, s.tuermodul_sfha_old
        ):
            s.stable = 0
            s.tuermodul_mfha_copy = 0
            s.initialisiert_state = 3
            s.oeffnen_state = 0
    elif sub == 2:  # MAN_OEFFNEN
        if _rising(s.tuermodul_sfhz, s.tuermodul_sfhz_old):
            s.stable = 0
            s.oeffnen_state = 1
        elif _falling(s.tuermodul_sfha, s.tuermodul_sfha_old):
            s.stable = 0
            s.tuermodul_mfha_copy = 0
            s.initialisiert_state = 3
            s.oeffnen_state = 0
    else:
        s.stable = 0
        s.oeffnen_state = 2


def _tip_closing(state: WindowLiftState) -> None:
    s = state
    bits = s.bits
    if _rising(s.tuermodul_sfha, s.tuermodul_sfha_old) or _rising(
        s.tuermodul_sfhz, s.tuermodul_sfhz_old
    ):
        s.stable = 0
        s.tuermodul_mfhz_copy = 0
        s.initialisiert_state = 3
        return

    sub = s.tipp_schliessen_state
    if sub == 1:  # REVERSIEREN2
        bits[Flag.END_REVERS_COPY] = 0
        if bits[Flag.END_REVERS]:
            s.stable = 0
            s.tuermodul_mfhz_copy = 1
            s.tuermodul_ctrl_inrevers2_copy = 0
            s.tipp_schliessen_state = 2
            s.tuermodul_mfha_copy = 0
            bits[Flag.ACTIVE_EINKLEMMSCHUTZ_COPY] = 1
    elif sub == 2:  # TIPP_SCHLIESSEN1
        if bits[Flag.EINKLEMMUNG]:
            s.stable = 0
            s.tuermodul_ctrl_inrevers2_copy = 1
            bits[Flag.END_REVERS_COPY] = 1
            s.tipp_schliessen_state = 1
            bits[Flag.ACTIVE_EINKLEMMSCHUTZ_COPY] = 0
            s.tuermodul_mfhz_copy = 0
            s.sc_1781_10 = s.time
            s.tuermodul_mfha_copy = 1
    else:
        s.stable = 0
        s.tipp_schliessen_state = 2
        bits[Flag.ACTIVE_EINKLEMMSCHUTZ_COPY] = 1


def _manual_closing(state: WindowLiftState) -> None:
    s = state
    bits = s.bits
    if _falling(s.tuermodul_sfhz, s.tuermodul_sfhz_old):
        s.stable = 0
        s.tuermodul_mfhz_copy = 0
        s.initialisiert_state = 3
        return

    sub = s.manuell_schliessen_state
    if sub == 1:  # REVERSIEREN1
        bits[Flag.END_REVERS_COPY] = 0
        if bits[Flag.END_REVERS]:
            s.stable = 0
            s.tuermodul_ctrl_inrevers1_copy = 0
            s.manuell_schliessen_state = 2
            s.tuermodul_mfha_copy = 0
            bits[Flag.ACTIVE_EINKLEMMSCHUTZ_COPY] = 1
            s.tuermodul_mfhz_copy = 1
    elif sub == 2:  # MAN_SCHLIESSEN
        if bits[Flag.EINKLEMMUNG]:
            s.stable = 0
            s.tuermodul_mfhz_copy = 0
            s.tuermodul_ctrl_inrevers1_copy = 1
            bits[Flag.END_REVERS_COPY] = 1
            s.manuell_schliessen_state = 1
            bits[Flag.ACTIVE_EINKLEMMSCHUTZ_COPY] = 0
            s.sc_1739_10 = s.time
            s.tuermodul_mfha_copy = 1
        elif _rising(s.tuermodul_sfha, s.tuermodul_sfha_old):
            s.stable = 0
            s.schliessen_state = 1
            s.manuell_schliessen_state = 0
    else:
        s.stable = 0
        s.manuell_schliessen_state = 2
        bits[Flag.ACTIVE_EINKLEMMSCHUTZ_COPY] = 1
        s.tuermodul_mfhz_copy = 1


def _closing(state: WindowLiftState) -> None:
    s = state
    if s.tuermodul_position <= 0:
        s.stable = 0
        s.tuermodul_mfhz_copy = 0
        s.initialisiert_state = 3
        return

    sub = s.schliessen_state
    if sub == 1:
        _tip_closing(s)
    elif sub == 2:
        _manual_closing(s)
    else:
        s.stable = 0
        s.schliessen_state = 2
        s.manuell_schliessen_state = 2
        s.bits[Flag.ACTIVE_EINKLEMMSCHUTZ_COPY] = 1
        s.tuermodul_mfhz_copy = 1


def _ready(state: WindowLiftState) -> None:
    s = state
    if _rising(s.tuermodul_sfhz, s.tuermodul_sfhz_old) and s.tuermodul_position > 0:
        s.stable = 0
        s.initialisiert_state = 2
        s.schliessen_state = 2
        s.manuell_schliessen_state = 2
        s.bits[Flag.ACTIVE_EINKLEMMSCHUTZ_COPY] = 1
        s.tuermodul_mfhz_copy = 1
    elif (
        _rising(s.tuermodul_sfha, s.tuermodul_sfha_old)
        and s.tuermodul_position < _POSITION_TOP
    ):
        s.stable = 0
        s.tuermodul_mfha_copy = 1
        s.initialisiert_state = 1
        s.oeffnen_state = 2


def _initialised(state: WindowLiftState) -> None:
    s = state
    block_rising = _rising(s.tuermodul_block, s.tuermodul_block_old)
    if (s.tuermodul_ctrl_n > 60 and not s.tuermodul_ctrl_n_old > 60) and not (
        s.tuermodul_ctrl_inrevers1 or s.tuermodul_ctrl_inrevers2
    ):
        s.stable = 0
        s.tuermodul_mfhz_copy = 0
        s.tuermodul_mfha_copy = 0
        s.b_state = 1
        return
    if block_rising and s.tuermodul_mfha:
        s.stable = 0
        s.tuermodul_mfha_copy = 0
        s.sc_2375_2 = s.time
        s.b_state = 2
        s.nicht_initialisiert_state = 3
        return
    if block_rising and s.tuermodul_mfhz:
        s.stable = 0
        s.tuermodul_mfhz_copy = 0
        s.sc_2352_1 = s.time
        s.b_state = 2
        s.nicht_initialisiert_state = 3
        return

    sub = s.initialisiert_state
    if sub == 1:
        _opening(s)
    elif sub == 2:
        _closing(s)
    elif sub == 3:
        _ready(s)
    else:
        s.stable = 0
        s.initialisiert_state = 3


def _movement_region(state: WindowLiftState) -> None:
    s = state
    current = s.b_state
    if current == 1:  # ZAEHLER_WHSP_ZU_HOCH
        if s.tuermodul_ctrl_n == 59 and not s.tuermodul_ctrl_n_old == 59:
            s.stable = 0
            s.b_state = 3
            s.initialisiert_state = 3
    elif current == 2:
        _not_initialised(s)
    elif current == 3:
        _initialised(s)
    else:
        s.stable = 0
        s.b_state = 2


def _repeat_lock_region(state: WindowLiftState) -> None:
    s = state
    bits = s.bits
    moving = bool(s.tuermodul_mfhz or s.tuermodul_mfha)

    if s.a_state != 1:
        s.stable = 0
        s.tuermodul_ctrl_n = 0
        s.a_state = 1
        bits[Flag.ENTERED_WIEDERHOLSPERRE_COPY] = 1
        s.wiederholsperre_state = 1
        return

    bits[Flag.ENTERED_WIEDERHOLSPERRE_COPY] = 0
    if (
        s.step == 1
        and s.tm_wiederholsperre_or_bereit != 0
        and _elapsed(s.time, s.tm_wiederholsperre_or_bereit) == 1
        and moving
    ):
        s.stable = 0
        s.tuermodul_ctrl_n += 1
        s.a_state = 1
        bits[Flag.ENTERED_WIEDERHOLSPERRE_COPY] = 1
        s.wiederholsperre_state = 1
        return

    if s.wiederholsperre_state == 1:  # WDHSP
        if (
            s.step == 1
            and s.tm_wiederholsperre != 0
            and _elapsed(s.time, s.tm_wiederholsperre) == 3
            and not moving
            and s.tuermodul_ctrl_n > 0
        ):
            s.stable = 0
            s.tuermodul_ctrl_n -= 1
            s.wiederholsperre_state = 1
    else:
        s.stable = 0
        bits[Flag.ENTERED_WIEDERHOLSPERRE_COPY] = 1
        s.wiederholsperre_state = 1


def door_module_chart(state: WindowLiftState) -> None:
    """One step of the door-module chart: movement control and repeat lock."""
    s = state
    bits = s.bits
    if (
        not bits[Flag.ACTIVE_TUERMODUL]
        and bits[Flag.ACTIVE_TUERMODUL_OLD]
        and not bits[Flag.ACTIVE_TUERMODUL_COPY]
    ):
        bits[Flag.ENTERED_WIEDERHOLSPERRE] = 0
        bits[Flag.EXITED_BEREIT] = 0
    if not bits[Flag.ACTIVE_TUERMODUL]:
        return

    if not bits[Flag.ACTIVE_KINDERSICHERUNG]:
        s.kindersicherung_state = 3
    bits[Flag.ACTIVE_KINDERSICHERUNG_COPY] = 0
    if not bits[Flag.ACTIVE_BLOCK_ERKENNUNG]:
        bits[Flag.ENTERED_EINSCHALTSTROM_MESSEN] = 0
        s.block_erkennung_state = 1
    bits[Flag.ACTIVE_BLOCK_ERKENNUNG_COPY] = 0
    bits[Flag.ACTIVE_KINDERSICHERUNG_COPY] = 1
    bits[Flag.ACTIVE_BLOCK_ERKENNUNG_COPY] = 1

    _movement_region(s)
    _repeat_lock_region(s)

    bits[Flag.ENTERED_WIEDERHOLSPERRE_COPY] = bits[Flag.ENTERED_WIEDERHOLSPERRE]
    bits[Flag.EXITED_BEREIT_COPY] = bits[Flag.EXITED_BEREIT]