import pytest

from ubobj.ubxsec import (
    UNSET,
    FlashMatch,
    MCGhost,
    SelectionResult,
    TPCObjectOrigin,
    TPCObjectOriginExtra,
)


def test_origin_values_from_source():
    assert TPCObjectOrigin(-1) is TPCObjectOrigin.UNKNOWN
    assert TPCObjectOrigin(2) is TPCObjectOrigin.MIXED
    assert TPCObjectOriginExtra(-1) is TPCObjectOriginExtra.NOT_SET
    assert TPCObjectOriginExtra(3) is TPCObjectOriginExtra.NC_PROTON
    with pytest.raises(ValueError):
        TPCObjectOrigin(7)


def test_flash_match_defaults():
    match = FlashMatch()
    assert match.score == -8888
    assert match.tpc_x == UNSET
    assert match.xfixed_ll == UNSET
    assert match.hypo_flash_spec == []


def test_flash_match_score_only():
    match = FlashMatch(score=0.75)
    assert match.score == 0.75
    assert match.t0 == UNSET
    assert match.estimated_x == UNSET


def test_flash_match_spectra_are_copied():
    spec = [1.0, 2.0, 3.0]
    match = FlashMatch(hypo_flash_spec=spec)
    spec.append(4.0)
    assert match.hypo_flash_spec == [1.0, 2.0, 3.0]


def test_flash_match_update():
    match = FlashMatch()
    match.reco_flash_spec = [5.0, 6.0]
    match.xfixed_chi2 = 12.5
    assert match.reco_flash_spec == [5.0, 6.0]
    assert match.xfixed_chi2 == 12.5


def test_mc_ghost():
    assert MCGhost().mode == "unknown"
    ghost = MCGhost()
    ghost.mode = "muon"
    assert ghost.mode == "muon"


def test_selection_result_round_trip():
    cuts = {"fv": True, "flash": False}
    result = SelectionResult(
        selection_type="numu_cc_inclusive",
        selection_status=False,
        failure_reason="flash",
        cut_flow_status=cuts,
    )
    cuts["extra"] = True
    assert result.cut_flow_status == {"fv": True, "flash": False}
    assert result.failure_reason == "flash"
    assert result.selection_type == "numu_cc_inclusive"
    assert result.selection_status is False


def test_selection_result_defaults_independent():
    first = SelectionResult()
    second = SelectionResult()
    first.cut_flow_status["fv"] = True
    assert second.cut_flow_status == {}