# ubobj

Plain Python data objects for the event records of a liquid-argon
time-projection-chamber neutrino experiment. Each object holds the values that
a reconstruction or selection step produced. A few of them also compute or
look up results from those values. The package has no dependencies beyond the
standard library.

## Modules

- `ubobj.crt`: cosmic-ray tagger records `CRTHit`, `CRTTrack`, `CRTTzero` and
  `CRTSimData`. `CRTTzero` requires exactly four values each in `nhits` and
  `pes`, one per plane, and raises `ValueError` otherwise.
- `ubobj.mucs`: muon counter system records. `MuCSData` holds the event time,
  four ADC lists of 24 channels each (checked on construction) and four hit
  lists. `MuCSRecoData` computes the polar and azimuthal angles from its two
  projected angles with `theta()` and `phi()`. `MuCSDTOffset` holds a single
  `offset`.
- `ubobj.mixing`: `EventMixingSummary` is a frozen record of the run, subrun,
  event and time stamp of an overlaid event. Each value is range-checked:
  32 unsigned bits for the identifiers and 64 for the time stamp.
- `ubobj.optical`: `Flash`, `FlashList`, `SubEvent` and `SubEventList`.
  - Both lists can be sorted by time, charge or amplitude with
    `sort_by_time()`, `sort_by_charge()` and `sort_by_amp()`. They remember the
    last sort (`SortMethod`), which `sorted_by_time()` and the related methods
    report.
  - Indexing with `[]` accepts only a non-negative integer in range. Anything
    else raises `IndexError` or `TypeError`.
  - `SubEvent.transfer_flashes()` moves the flashes of another list into the
    sub-event and leaves that list empty.
  - The module also holds the frozen `UbooneOpticalFilter` summary, whose
    fields default to -999.
- `ubobj.daqheader`: `DAQHeaderTime` holds the GPS and NTP event times, the PPS
  time and the trigger times. `set_pps_time()`, `set_trig_time()` and
  `set_trig_pps_time()` check each value against its field's 16- or 32-bit
  width.
- `ubobj.trigger`: the `UBTrigger` trigger-word bits and `SoftwareTriggerData`.
  - `SoftwareTriggerData` stores per-algorithm software trigger results that you
    look up by name or by position.
  - Asking for an algorithm that is not present issues a
    `MissingAlgorithmWarning` and returns a default value. Those defaults are
    `False`, `0`, `-999.0` for the time, `1.0` for the prescale and `""` for a
    name. `index_of()` returns `NOT_FOUND` (-999).
- `ubobj.ubxsec`: `FlashMatch`, `MCGhost`, `SelectionResult` and the enums
  `TPCObjectOrigin` and `TPCObjectOriginExtra`. `FlashMatch` fields that were
  never filled hold `UNSET` (-8888).
- `ubobj.ubxsec_event`: `UBXSecEvent` is a flat per-event analysis record.
  - Event-level quantities default to `DEFAULT_VALUE` (-9999).
  - Per-slice lists are named `slc_*`. `resize_vectors()` resizes all of them
    together and keeps the existing entries. `reset()` restores the defaults.
  - `resize_genie_truth_vectors()` resizes the true-vertex lists.
  - `reset_genie_pm1_weights()` and its siblings empty the reweighting results.
- `ubobj.wcp`: neutrino selection summaries `NuSelectionCharge`,
  `NuSelectionContainment`, `NuSelectionKINE` with its `KineInfo`,
  `NuSelectionMatch`, `NuSelectionSTM` and `NuSelectionTruth`.

## Example

```python
from ubobj.trigger import SoftwareTriggerData

swt = SoftwareTriggerData()
swt.add_algorithm("BNB_FEMBeamTriggerAlgo", True, True, 120, 3, 250, 1.5, 1.0)
swt.add_algorithm("EXT_BNBwin_FEMBeamTriggerAlgo", False, False, 10, 0, 0, 0.0, 1.0)

swt.passed("BNB_FEMBeamTriggerAlgo")               # True
swt.passed_any(["EXT_BNBwin_FEMBeamTriggerAlgo"])  # False
swt.algorithm_names()                              # both names, in insertion order
swt.phmax(0)                                       # 120
```

```python
from ubobj.optical import Flash, FlashList

flashes = FlashList()
flashes.add(Flash(ch=3, tstart=40, tend=60, tmax=45, maxamp=12.0))
flashes.add(Flash(ch=5, tstart=10, tend=30, tmax=15, maxamp=30.0))
flashes.sort_by_time()
[f.tstart for f in flashes]   # [10, 40]
flashes.sorted_by_time()      # True
```

## What it does not do

These objects live in memory only. The package does not read or write event
files and provides no command-line tool. There is no TPC-object record carrying
tracks or vertices. Only its origin enums are provided.

## Testing

Install the package with its `test` extra, then run `pytest` from the project
root.