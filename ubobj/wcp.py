"""Neutrino selection records: charge, containment, kinematics, matching and truth."""

from __future__ import annotations

from dataclasses import dataclass, field

_UINT32_LIMIT = 1 << 32


@dataclass
class NuSelectionCharge:
    """Measured charge on the U, V and Y wire planes."""

    charge_u: float = -1.0
    charge_v: float = -1.0
    charge_y: float = -1.0


@dataclass
class NuSelectionContainment:
    """Flash matching and containment results for a neutrino candidate."""

    flash_found: bool = False
    flash_time: float = -1.0
    flash_meas_pe: float = -1.0
    flash_pred_pe: float = -1.0
    found: bool = False
    match_type: int = 0
    is_fc: bool = False
    is_tgm: bool = False
    not_fc_fv: bool = False
    not_fc_sp: bool = False
    not_fc_dc: bool = False
    charge: float = -1.0
    energy: float = -1.0
    lm_cluster_length: float = -1.0
    image_fail: bool = False

    def __post_init__(self) -> None:
        self._check_match_type(self.match_type)

    @staticmethod
    def _check_match_type(value: int) -> None:
        if not 0 <= value < _UINT32_LIMIT:
            raise ValueError(f"match_type must fit in 32 unsigned bits, got {value}")

    def __setattr__(self, name: str, value: object) -> None:
        if name == "match_type":
            self._check_match_type(value)  # type: ignore[arg-type]
        super().__setattr__(name, value)


@dataclass
class KineInfo:
    """Reconstructed neutrino energy and pi0 kinematics.

    kine_reco_enu is the kinetic energy plus kine_reco_add_energy (masses,
    binding energy). kine_pio_flag is 0 when not filled, 1 for a pi0 attached
    to the vertex (CC pi0) and 2 for one without a vertex (NC pi0).
    """

    kine_reco_enu: float = 0.0
    kine_reco_add_energy: float = 0.0
    kine_energy_particle: list[float] = field(default_factory=list)
    kine_energy_info: list[int] = field(default_factory=list)
    kine_particle_type: list[int] = field(default_factory=list)
    kine_energy_included: list[int] = field(default_factory=list)
    kine_pio_mass: float = 0.0
    kine_pio_flag: int = 0
    kine_pio_vtx_dis: float = 0.0
    kine_pio_energy_1: float = 0.0
    kine_pio_theta_1: float = 0.0
    kine_pio_phi_1: float = 0.0
    kine_pio_dis_1: float = 0.0
    kine_pio_energy_2: float = 0.0
    kine_pio_theta_2: float = 0.0
    kine_pio_phi_2: float = 0.0
    kine_pio_dis_2: float = 0.0
    kine_pio_angle: float = 0.0

    def __post_init__(self) -> None:
        for name in (
            "kine_energy_particle",
            "kine_energy_info",
            "kine_particle_type",
            "kine_energy_included",
        ):
            setattr(self, name, list(getattr(self, name)))


@dataclass
class NuSelectionKINE:
    """Holder of the kinematic variables of a selected neutrino candidate."""

    kine_info: KineInfo = field(default_factory=KineInfo)

    def reset(self) -> None:
        """Return the kinematic variables to their zero state."""
        self.kine_info = KineInfo()


@dataclass
class NuSelectionMatch:
    """Completeness and purity of the reconstructed neutrino cluster."""

    completeness: float = -1.0
    completeness_energy: float = -1.0
    purity: float = -1.0
    purity_xy: float = -1.0
    purity_xz: float = -1.0


@dataclass
class NuSelectionSTM:
    """Stopping-muon, through-going-muon and related tagger flags."""

    event_type: int = -1
    flag_low_energy: int = -1
    flag_lm: int = -1
    flag_tgm: int = -1
    flag_stm: int = -1
    flag_full_detector_dead: int = -1
    cluster_length: float = -1.0


@dataclass
class NuSelectionTruth:
    """True neutrino interaction information from simulation."""

    is_cc: bool = False
    is_eligible: bool = False
    is_fc: bool = False
    vtx_inside: bool = False
    nu_pdg: int = -1
    vtx_x: float = -1.0
    vtx_y: float = -1.0
    vtx_z: float = -1.0
    time: float = -1.0
    nu_energy: float = -1.0
    energy_inside: float = -1.0
    electron_inside: float = -1.0