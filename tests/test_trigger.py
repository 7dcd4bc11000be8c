import warnings

import pytest

from ubobj.trigger import (
    NOT_FOUND,
    MissingAlgorithmWarning,
    SoftwareTriggerData,
    UBTrigger,
)


@pytest.fixture
def data():
    trig = SoftwareTriggerData()
    trig.add_algorithm("BNB_unbiased", True, False, 120, 3, 40, 1.5, 60.0)
    trig.add_algorithm("BNB_FEMBeamTriggerAlgo", False, True, 7, 1, 12, 2.25, 4.0)
    return trig


def test_trigger_bits_from_source():
    assert UBTrigger(0) is UBTrigger.PMT_TRIGGER_BEAM
    assert UBTrigger(11) is UBTrigger.TRIGGER_BNB
    assert UBTrigger(19) is UBTrigger.SPARE
    with pytest.raises(ValueError):
        UBTrigger(2)


def test_names_and_length(data):
    assert data.algorithm_names() == ["BNB_unbiased", "BNB_FEMBeamTriggerAlgo"]
    assert len(data) == 2
    assert len(SoftwareTriggerData()) == 0


def test_lookup_by_name_and_index_agree(data):
    for name in data.algorithm_names():
        index = data.index_of(name)
        assert data.algorithm_name(index) == name
        assert data.passed(name) == data.passed(index)
        assert data.phmax(name) == data.phmax(index)
        assert data.prescale(name) == data.prescale(index)


def test_values_round_trip(data):
    assert data.passed("BNB_unbiased") is True
    assert data.passed_prescale("BNB_unbiased") is False
    assert data.phmax("BNB_unbiased") == 120
    assert data.multiplicity("BNB_unbiased") == 3
    assert data.trigger_tick("BNB_unbiased") == 40
    assert data.time_since_trigger("BNB_unbiased") == 1.5
    assert data.prescale("BNB_FEMBeamTriggerAlgo") == 4.0
    assert data.passed_prescale("BNB_FEMBeamTriggerAlgo") is True


def test_veto_is_negation(data):
    for name in data.algorithm_names():
        assert data.vetoed(name) is (not data.passed(name))


def test_passed_any(data):
    assert data.passed_any(["BNB_FEMBeamTriggerAlgo", "BNB_unbiased"]) is True
    assert data.passed_any(["BNB_FEMBeamTriggerAlgo"]) is False
    assert data.vetoed_all(["BNB_FEMBeamTriggerAlgo"]) is True
    assert data.passed_prescale_any(["BNB_unbiased"]) is False
    assert data.passed_prescale_any(["BNB_unbiased", "BNB_FEMBeamTriggerAlgo"]) is True


def test_empty_lists_pass(data):
    assert data.passed_any([]) is True
    assert data.passed_prescale_any([]) is True
    assert data.vetoed_all([]) is False


def test_missing_name_warns_and_gives_defaults(data):
    with pytest.warns(MissingAlgorithmWarning):
        assert data.index_of("absent") == NOT_FOUND
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", MissingAlgorithmWarning)
        assert data.passed("absent") is False
        assert data.passed_prescale("absent") is False
        assert data.phmax("absent") == 0
        assert data.multiplicity("absent") == 0
        assert data.trigger_tick("absent") == 0
        assert data.time_since_trigger("absent") == -999.0
        assert data.prescale("absent") == 1.0
        assert data.vetoed("absent") is True


@pytest.mark.parametrize("index", [-1, 2, 50])
def test_bad_index_warns(data, index):
    with pytest.warns(MissingAlgorithmWarning):
        assert data.algorithm_name(index) == ""
    with pytest.warns(MissingAlgorithmWarning):
        assert data.time_since_trigger(index) == -999.0


def test_missing_in_list_does_not_pass(data):
    with pytest.warns(MissingAlgorithmWarning):
        assert data.passed_any(["absent"]) is False