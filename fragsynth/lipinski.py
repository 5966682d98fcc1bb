"""Lipinski descriptors and the rules that decide which molecules are kept."""

from __future__ import annotations

from dataclasses import dataclass

from fragsynth.constants import DEFAULT_BOUNDS, LipinskiBounds

# Linear fits from the summed descriptors of two parts to those of their union.
_MOLWT_FIT = (6.6746, 0.95965)
_HBD_FIT = (0.41189, 0.4898)
_HBA1_FIT = (0.278, 0.93778)
_LOGP_FIT = (0.84121, 0.59105)


def _fit(coefficients: tuple[float, float], total: float) -> float:
    intercept, slope = coefficients
    return intercept + slope * total


@dataclass(frozen=True)
class Descriptors:
    """Molecular weight, H-bond donors, H-bond acceptors and logP."""

    molwt: float = 0.0
    hbd: float = 0.0
    hba1: float = 0.0
    logp: float = 0.0


def estimate_combined(first: Descriptors, second: Descriptors) -> Descriptors:
    """Estimate the descriptors of the molecule made by joining two molecules."""
    return Descriptors(
        molwt=_fit(_MOLWT_FIT, first.molwt + second.molwt),
        hbd=_fit(_HBD_FIT, first.hbd + second.hbd),
        hba1=_fit(_HBA1_FIT, first.hba1 + second.hba1),
        logp=_fit(_LOGP_FIT, first.logp + second.logp),
    )


def will_exceed_additive_thresholds(
    first: Descriptors,
    second: Descriptors,
    bounds: LipinskiBounds = DEFAULT_BOUNDS,
) -> bool:
    """Return whether joining the two molecules would break a bound.

    Donors, acceptors and molecular weight are checked; logP is not.
    """
    if _fit(_HBD_FIT, first.hbd + second.hbd) > bounds.hbd:
        return True
    if _fit(_HBA1_FIT, first.hba1 + second.hba1) > bounds.hba1:
        return True
    return _fit(_MOLWT_FIT, first.molwt + second.molwt) > bounds.molwt


def is_compliant(
    descriptors: Descriptors, bounds: LipinskiBounds = DEFAULT_BOUNDS
) -> bool:
    """Return whether donors, acceptors and logP are all within their bounds."""
    return (
        descriptors.hbd <= bounds.hbd
        and descriptors.hba1 <= bounds.hba1
        and descriptors.logp <= bounds.logp
    )


def exceeds_max_estimated_thresholds(
    descriptors: Descriptors, bounds: LipinskiBounds = DEFAULT_BOUNDS
) -> bool:
    """Return whether the molecular weight is over its bound.

    A molecule whose donors or acceptors are already over their bounds
    is reported as not exceeding.
    """
    if descriptors.hbd > bounds.hbd:
        return False
    if descriptors.hba1 > bounds.hba1:
        return False
    return descriptors.molwt > bounds.molwt