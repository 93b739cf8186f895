"""Format engines: match play, net stroke play, skins and Nassau."""

from .match_play import compute_match_play
from .nassau import compute_nassau
from .net_stroke import compute_net_stroke
from .skins import compute_skins

__all__ = [
    "compute_match_play",
    "compute_nassau",
    "compute_net_stroke",
    "compute_skins",
]
