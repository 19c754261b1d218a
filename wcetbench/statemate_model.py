"""State of the car window lift statechart and its timer interface.

The chart was produced by a statechart code generator. All of its
variables live in :class:`WindowLiftState`. Boolean events and activity
markers are kept in a 64-entry flag list indexed by :class:`Flag`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

BITLIST_SIZE = 64

# The clock and timer registers are unsigned longs, so their differences
# wrap around instead of going negative.
_CLOCK_MODULUS = 1 << 64


def _elapsed(now: int, since: int) -> int:
    """Unsigned difference ``now - since`` of two clock readings."""
    return (now - since) % _CLOCK_MODULUS


class Flag(IntEnum):
    """Positions of the chart's events and activity markers in the flag list."""

    ENTERED_EINSCHALTSTROM_MESSEN = 0
    ENTERED_EINSCHALTSTROM_MESSEN_COPY = 1
    ENTERED_WIEDERHOLSPERRE = 4
    ENTERED_WIEDERHOLSPERRE_COPY = 5
    EXITED_BEREIT = 6
    EXITED_BEREIT_COPY = 7
    ACTIVE_KINDERSICHERUNG = 10
    ACTIVE_KINDERSICHERUNG_COPY = 11
    ACTIVE_KINDERSICHERUNG_OLD = 12
    ACTIVE_TUERMODUL = 13
    ACTIVE_TUERMODUL_COPY = 14
    ACTIVE_TUERMODUL_OLD = 15
    ACTIVE_EINKLEMMSCHUTZ = 16
    ACTIVE_EINKLEMMSCHUTZ_COPY = 17
    ACTIVE_EINKLEMMSCHUTZ_OLD = 18
    ACTIVE_BLOCK_ERKENNUNG = 19
    ACTIVE_BLOCK_ERKENNUNG_COPY = 20
    ACTIVE_BLOCK_ERKENNUNG_OLD = 21
    END_REVERS = 22
    END_REVERS_COPY = 23
    EINKLEMMUNG = 24


@dataclass
class WindowLiftState:
    """Every variable of the window lift chart.

    Attribute groups:

    * ``tuermodul_*``: signals of the door module,
    * ``tuermodul_ctrl_*``: local variables of the door module controller,
    * ``du_*``: signals of the driver unit,
    * ``block_ctrl_*``: local variables of the block detection chart,
    * ``*_state``: the next state of each (sub)chart, 0 meaning "not entered",
    * ``tm_*`` and ``sc_*``: timestamps used by timeouts and scheduled actions.

    Values suffixed ``_copy`` are written during a step and published at its
    end; values suffixed ``_old`` hold the previous step's value.
    """

    bits: bytearray = field(default_factory=lambda: bytearray(BITLIST_SIZE))

    time: int = 0
    stable: int = 0
    step: int = 0

    tm_einschaltstrom_or_n: int = 0
    tm_wiederholsperre_or_bereit: int = 0
    tm_wiederholsperre: int = 0

    sc_2375_2: int = 0
    sc_2352_1: int = 0
    sc_2329_1: int = 0
    sc_1781_10: int = 0
    sc_1739_10: int = 0

    tuermodul_ctrl_n: int = 0
    tuermodul_ctrl_n_copy: int = 0
    tuermodul_ctrl_n_old: int = 0
    tuermodul_ctrl_inrevers2: int = 0
    tuermodul_ctrl_inrevers2_copy: int = 0
    tuermodul_ctrl_inrevers1: int = 0
    tuermodul_ctrl_inrevers1_copy: int = 0
    tuermodul_ctrl_ft: int = 0

    tuermodul_position: int = 0
    tuermodul_i_ein: int = 0
    tuermodul_i_ein_old: int = 0
    tuermodul_sfhz_zentral: int = 0
    tuermodul_sfhz_zentral_old: int = 0
    tuermodul_sfhz_mec: int = 0
    tuermodul_sfhz_mec_old: int = 0
    tuermodul_sfha_zentral: int = 0
    tuermodul_sfha_zentral_old: int = 0
    tuermodul_sfha_mec: int = 0
    tuermodul_sfha_mec_old: int = 0
    tuermodul_kl_50: int = 0
    tuermodul_block: int = 0
    tuermodul_block_copy: int = 0
    tuermodul_block_old: int = 0
    tuermodul_ft: int = 0
    tuermodul_sfhz: int = 0
    tuermodul_sfhz_copy: int = 0
    tuermodul_sfhz_old: int = 0
    tuermodul_sfha: int = 0
    tuermodul_sfha_copy: int = 0
    tuermodul_sfha_old: int = 0
    tuermodul_mfhz: int = 0
    tuermodul_mfhz_copy: int = 0
    tuermodul_mfhz_old: int = 0
    tuermodul_mfha: int = 0
    tuermodul_mfha_copy: int = 0
    tuermodul_mfha_old: int = 0
    tuermodul_eks_leiste_aktiv: int = 0
    tuermodul_eks_leiste_aktiv_old: int = 0
    tuermodul_com_open: int = 0
    tuermodul_com_close: int = 0

    du_mfh: int = 0
    du_mfh_copy: int = 0
    du_position: int = 0
    du_i_ein: int = 0
    du_i_ein_old: int = 0
    du_kl_50: int = 0
    du_s_fh_ftzu: int = 0
    du_s_fh_ftauf: int = 0
    du_ft: int = 0
    du_eks_leiste_aktiv: int = 0
    du_eks_leiste_aktiv_old: int = 0
    du_s_fh_tmbfaufcan: int = 0
    du_s_fh_tmbfaufcan_copy: int = 0
    du_s_fh_tmbfaufcan_old: int = 0
    du_s_fh_tmbfzucan: int = 0
    du_s_fh_tmbfzucan_copy: int = 0
    du_s_fh_tmbfzucan_old: int = 0
    du_s_fh_tmbfzudisc: int = 0
    du_s_fh_tmbfzudisc_old: int = 0
    du_s_fh_tmbfaufdisc: int = 0
    du_s_fh_tmbfaufdisc_old: int = 0
    du_s_fh_zudisc: int = 0
    du_s_fh_aufdisc: int = 0
    du_door_id: int = 0
    du_block: int = 0
    du_block_copy: int = 0
    du_block_old: int = 0
    du_mfhz: int = 0
    du_mfhz_copy: int = 0
    du_mfhz_old: int = 0
    du_mfha: int = 0
    du_mfha_copy: int = 0
    du_mfha_old: int = 0

    block_ctrl_i_ein_max: int = 0
    block_ctrl_i_ein_max_copy: int = 0
    block_ctrl_n: int = 0
    block_ctrl_n_copy: int = 0
    block_ctrl_n_old: int = 0

    nicht_initialisiert_state: int = 0
    zentral_state: int = 0
    mec_state: int = 0
    kindersicherung_state: int = 0
    b_state: int = 0
    a_state: int = 0
    wiederholsperre_state: int = 0
    initialisiert_state: int = 0
    tipp_schliessen_state: int = 0
    manuell_schliessen_state: int = 0
    oeffnen_state: int = 0
    schliessen_state: int = 0
    steuerung_dummy_state: int = 0
    einklemmschutz_state: int = 0
    bewegung_state: int = 0
    block_erkennung_state: int = 0

    def reset(self) -> None:
        """Clear every flag, the timeout timestamps and all chart states.

        Signals and local variables keep their values.
        """
        self.bits[:] = bytes(BITLIST_SIZE)
        self.tm_einschaltstrom_or_n = 0
        self.tm_wiederholsperre_or_bereit = 0
        self.tm_wiederholsperre = 0
        self.nicht_initialisiert_state = 0
        self.zentral_state = 0
        self.mec_state = 0
        self.kindersicherung_state = 0
        self.b_state = 0
        self.a_state = 0
        self.wiederholsperre_state = 0
        self.initialisiert_state = 0
        self.tipp_schliessen_state = 0
        self.manuell_schliessen_state = 0
        self.oeffnen_state = 0
        self.schliessen_state = 0
        self.steuerung_dummy_state = 0
        self.einklemmschutz_state = 0
        self.bewegung_state = 0
        self.block_erkennung_state = 0

    def interface(self) -> None:
        """Record entry timestamps and fire scheduled actions that are due."""
        bits = self.bits
        now = self.time

        if bits[Flag.ENTERED_WIEDERHOLSPERRE]:
            self.tm_wiederholsperre = now
        if bits[Flag.ENTERED_WIEDERHOLSPERRE] or bits[Flag.EXITED_BEREIT]:
            self.tm_wiederholsperre_or_bereit = now

        if self.sc_2375_2 != 0 and _elapsed(now, self.sc_2375_2) >= 0.5:
            self.tuermodul_mfha_copy = 0
            self.sc_2375_2 = 0
        if self.sc_2352_1 != 0 and _elapsed(now, self.sc_2352_1) >= 0.5:
            self.tuermodul_mfhz_copy = 0
            self.sc_2352_1 = 0
        if self.sc_2329_1 != 0 and _elapsed(now, self.sc_2329_1) >= 0.5:
            self.tuermodul_mfhz_copy = 0
            self.sc_2329_1 = 0
        if self.sc_1781_10 != 0 and _elapsed(now, self.sc_1781_10) >= 0.5:
            self.sc_1781_10 = 0
        if self.sc_1739_10 != 0 and _elapsed(now, self.sc_1739_10) >= 0.5:
            self.sc_1739_10 = 0

        if (
            bits[Flag.ENTERED_EINSCHALTSTROM_MESSEN]
            or self.block_ctrl_n != self.block_ctrl_n_old
        ):
            self.tm_einschaltstrom_or_n = now