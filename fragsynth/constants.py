"""Tunable limits and defaults shared across the synthesis code."""

from __future__ import annotations

from dataclasses import dataclass

NOT_FOUND = -1

COMPLIANT_EXE = "compliantwriter"

THREAD_POOL_SIZE = 10

# Upper bound for level-based threaded synthesis.
HIERARCHICAL_LEVEL_BOUND = 20

DEFAULT_OUTPUT_DIR = "synth_output_dir"

VALIDATE = False

DEBUG_OUTPUT = False

# Skip synthesis and only report descriptors for the input fragments.
LIPINSKI_DESCRIPTORS_ONLY = False


@dataclass(frozen=True)
class LipinskiBounds:
    """Upper bounds on the descriptors a generated molecule may reach."""

    molwt: float = 570.0
    hbd: float = 5.0
    hba1: float = 10.0
    logp: float = 7.2


DEFAULT_BOUNDS = LipinskiBounds()