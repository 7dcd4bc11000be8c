"""Flat per-event summary of the cross-section analysis, one entry per slice."""

from __future__ import annotations

from typing import Any

DEFAULT_VALUE = -9999
"""Value given to every quantity that has not been filled."""

_INT_FIELDS = (
    "run",
    "subrun",
    "event",
    "n_pfp",
    "n_pfp_primary",
    "n_primary_cosmic_pfp",
    "n_pfp_tagged",
    "muon_is_flash_tagged",
    "fv",
    "fv_sce",
    "ccnc",
    "mode",
    "nupdg",
    "genie_mult",
    "genie_mult_ch",
    "selected_slice",
    "mc_muon_contained",
    "is_swtriggered",
    "nslices",
    "n_tpcobj_nu_origin",
    "n_tpcobj_cosmic_origin",
    "nsignal",
)

_FLOAT_FIELDS = (
    "muon_reco_pur",
    "muon_reco_eff",
    "true_muon_mom",
    "true_muon_mom_matched",
    "muon_tag_score",
    "fm_score",
    "nu_e",
    "lep_costheta",
    "lep_phi",
    "bnb_weight",
    "sce_corr_x",
    "sce_corr_y",
    "sce_corr_z",
    "vtx_resolution",
    "pot",
)

_BOOL_FIELDS = (
    "muon_is_reco",
    "is_signal",
    "is_selected",
    "no_mcflash_but_op_activity",
)

_UNSET_FLOAT = float(DEFAULT_VALUE)
_NESTED = object()

# Per-slice vectors and the value each new entry is filled with on growth.
# Boolean vectors padded with the default value become true, as a non-zero
# integer does when stored as a flag.
_SLICE_VECTORS: tuple[tuple[str, Any], ...] = (
    ("slc_flsmatch_score", _UNSET_FLOAT),
    ("slc_flsmatch_qllx", _UNSET_FLOAT),
    ("slc_flsmatch_tpcx", _UNSET_FLOAT),
    ("slc_flsmatch_t0", _UNSET_FLOAT),
    ("slc_flsmatch_hypoz", _UNSET_FLOAT),
    ("slc_flsmatch_xfixed_chi2", _UNSET_FLOAT),
    ("slc_flsmatch_xfixed_ll", _UNSET_FLOAT),
    ("slc_nuvtx_x", 0.0),
    ("slc_nuvtx_y", 0.0),
    ("slc_nuvtx_z", 0.0),
    ("slc_nuvtx_fv", 0),
    ("slc_vtxcheck_angle", 0.0),
    ("slc_origin", 0),
    ("slc_origin_extra", 0),
    ("slc_flshypo_xfixed_spec", _NESTED),
    ("slc_flshypo_spec", _NESTED),
    ("slc_nhits_u", DEFAULT_VALUE),
    ("slc_nhits_v", DEFAULT_VALUE),
    ("slc_nhits_w", DEFAULT_VALUE),
    ("slc_flsmatch_cosmic_score", _UNSET_FLOAT),
    ("slc_flsmatch_cosmic_t0", _UNSET_FLOAT),
    ("slc_longesttrack_length", _UNSET_FLOAT),
    ("slc_longesttrack_phi", _UNSET_FLOAT),
    ("slc_longesttrack_theta", _UNSET_FLOAT),
    ("slc_longesttrack_iscontained", bool(DEFAULT_VALUE)),
    ("slc_longestshower_length", _UNSET_FLOAT),
    ("slc_longestshower_phi", _UNSET_FLOAT),
    ("slc_longestshower_theta", _UNSET_FLOAT),
    ("slc_longestshower_openangle", _UNSET_FLOAT),
    ("slc_longestshower_startx", _UNSET_FLOAT),
    ("slc_longestshower_starty", _UNSET_FLOAT),
    ("slc_longestshower_startz", _UNSET_FLOAT),
    ("slc_muoncandidate_exists", bool(DEFAULT_VALUE)),
    ("slc_muoncandidate_length", _UNSET_FLOAT),
    ("slc_muoncandidate_phi", _UNSET_FLOAT),
    ("slc_muoncandidate_theta", _UNSET_FLOAT),
    ("slc_muoncandidate_mom_range", _UNSET_FLOAT),
    ("slc_muoncandidate_mom_mcs", _UNSET_FLOAT),
    ("slc_muoncandidate_mom_mcs_pi", _UNSET_FLOAT),
    ("slc_muoncandidate_mcs_ll", _UNSET_FLOAT),
    ("slc_muoncandidate_contained", bool(DEFAULT_VALUE)),
    ("slc_muoncandidate_dqdx_trunc", _UNSET_FLOAT),
    ("slc_muoncandidate_dqdx_u_trunc", 0.0),
    ("slc_muoncandidate_dqdx_v_trunc", 0.0),
    ("slc_muoncandidate_dqdx_v", _NESTED),
    ("slc_muoncandidate_mip_consistency", True),
    ("slc_muoncandidate_mip_consistency2", True),
    ("slc_muoncandidate_truepdg", DEFAULT_VALUE),
    ("slc_muoncandidate_trueorigin", DEFAULT_VALUE),
    ("slc_muoncandidate_mcs_delta_ll", _UNSET_FLOAT),
    ("slc_muoncandidate_residuals_mean", _UNSET_FLOAT),
    ("slc_muoncandidate_residuals_std", _UNSET_FLOAT),
    ("slc_muoncandidate_wiregap", DEFAULT_VALUE),
    ("slc_muoncandidate_wiregap_dead", DEFAULT_VALUE),
    ("slc_muoncandidate_linearity", _UNSET_FLOAT),
    ("slc_muoncandidate_perc_used_hits_in_cluster", _UNSET_FLOAT),
    ("slc_muoncandidate_maxscatteringangle", _UNSET_FLOAT),
    ("slc_acpt_outoftime", DEFAULT_VALUE),
    ("slc_crosses_top_boundary", DEFAULT_VALUE),
    ("slc_nuvtx_closetodeadregion_u", DEFAULT_VALUE),
    ("slc_nuvtx_closetodeadregion_v", DEFAULT_VALUE),
    ("slc_nuvtx_closetodeadregion_w", DEFAULT_VALUE),
    ("slc_kalman_chi2", _UNSET_FLOAT),
    ("slc_kalman_ndof", DEFAULT_VALUE),
    ("slc_passed_min_track_quality", bool(DEFAULT_VALUE)),
    ("slc_passed_min_vertex_quality", bool(DEFAULT_VALUE)),
    ("slc_n_intime_pe_closestpmt", _UNSET_FLOAT),
    ("slc_maxdistance_vtxtrack", _UNSET_FLOAT),
    ("slc_npfp", DEFAULT_VALUE),
    ("slc_ntrack", DEFAULT_VALUE),
    ("slc_nshower", DEFAULT_VALUE),
    ("slc_iscontained", bool(DEFAULT_VALUE)),
    ("slc_mult_pfp", DEFAULT_VALUE),
    ("slc_mult_track", DEFAULT_VALUE),
    ("slc_mult_shower", DEFAULT_VALUE),
    ("slc_mult_track_tolerance", DEFAULT_VALUE),
    ("slc_geocosmictag", False),
    ("slc_consistency", True),
    ("slc_consistency_score", 0.0),
)

_TRUTH_VECTORS = ("tvtx_x", "tvtx_y", "tvtx_z")

_WEIGHT_GROUPS = ("genie_pm1", "genie_multisim", "genie_models_multisim", "flux_multisim")


def _resize(values: list, size: int, fill: Any) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    del values[size:]
    missing = size - len(values)
    if fill is _NESTED:
        values.extend([] for _ in range(missing))
    else:
        values.extend([fill] * missing)


class UBXSecEvent:
    """Event-level and per-slice results of the charged-current selection.

    Per-slice quantities are lists named slc_*, one entry per TPC object.
    Weight groups evtwgt_<group>_funcname/_weight/_nweight hold event
    reweighting results for the genie_pm1, genie_multisim,
    genie_models_multisim and flux_multisim variations.
    """

    def __init__(self) -> None:
        self.default_value = DEFAULT_VALUE

        # Beam flash information, left alone by reset().
        self.nbeamfls = 0
        self.beamfls_time: list[float] = []
        self.beamfls_pe: list[float] = []
        self.beamfls_z: list[float] = []
        self.beamfls_spec: list[list[float]] = []
        self.numc_flash_spec: list[float] = []
        self.candidate_flash_time = 0
        self.candidate_flash_z = 0.0

        for group in _WEIGHT_GROUPS:
            setattr(self, f"evtwgt_{group}_nfunc", 0)
            setattr(self, f"evtwgt_{group}_funcname", [])
            setattr(self, f"evtwgt_{group}_nweight", [])
            setattr(self, f"evtwgt_{group}_weight", [])

        for name in _TRUTH_VECTORS:
            setattr(self, name, [])
        for name, _ in _SLICE_VECTORS:
            setattr(self, name, [])

        self.reset()

    def reset(self) -> None:
        """Return the event-level quantities to their defaults and empty the slices."""
        for name in _INT_FIELDS:
            setattr(self, name, self.default_value)
        for name in _FLOAT_FIELDS:
            setattr(self, name, float(self.default_value))
        for name in _BOOL_FIELDS:
            setattr(self, name, False)
        self.file_type = "not_set"
        for name in _TRUTH_VECTORS:
            getattr(self, name).clear()
        self.resize_vectors(0)

    def resize_vectors(self, size: int) -> None:
        """Give every per-slice list the given length, keeping existing entries."""
        for name, fill in _SLICE_VECTORS:
            _resize(getattr(self, name), size, fill)

    def resize_genie_truth_vectors(self, size: int) -> None:
        """Give the true-vertex lists the given length, padding with zeros."""
        for name in _TRUTH_VECTORS:
            _resize(getattr(self, name), size, 0.0)

    def _reset_weights(self, group: str) -> None:
        for suffix in ("funcname", "weight", "nweight"):
            getattr(self, f"evtwgt_{group}_{suffix}").clear()

    def reset_genie_pm1_weights(self) -> None:
        """Empty the GENIE plus/minus one sigma reweighting results."""
        self._reset_weights("genie_pm1")

    def reset_genie_multisim_weights(self) -> None:
        """Empty the GENIE multisim reweighting results."""
        self._reset_weights("genie_multisim")

    def reset_genie_models_multisim_weights(self) -> None:
        """Empty the GENIE models multisim reweighting results."""
        self._reset_weights("genie_models_multisim")

    def reset_flux_multisim_weights(self) -> None:
        """Empty the flux multisim reweighting results."""
        self._reset_weights("flux_multisim")