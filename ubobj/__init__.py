"""Data objects for neutrino detector event records: CRT, MuCS, optical, DAQ, trigger and selection."""

__version__ = "0.1.0"

__all__ = [
    "crt",
    "daqheader",
    "mixing",
    "mucs",
    "optical",
    "trigger",
    "ubxsec",
    "ubxsec_event",
    "wcp",
]