"""Series generator — samples the formula engine into chart series.

Pure functions of an immutable configuration. Every call recomputes the
whole series; points carry no identity between calls.

Sample positions are computed as x_min + i·(x_max - x_min)/N rather than
by accumulating a step, so the last point lands exactly on x_max.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

import numpy as np
from numpy.typing import NDArray

from he3calc.constants import (
    BUILDUP_INTERVALS,
    HE3_TIME_INTERVALS,
    LOG_SCALE_FLOOR,
    NEUTRON_INTERVALS,
)
from he3calc.core.formula_engine import (
    buildup_polarization,
    figure_of_merit,
    he3_decay,
    neutron_polarization,
    neutron_transmission,
)
from he3calc.core.parsing import resolve_range
from he3calc.core.physical_constants import DEFAULT_CONSTANTS, PhysicalConstants
from he3calc.core.units import (
    energy_from_wavelength,
    hours_to_minutes,
    percent_to_fraction,
    wavelength_from_energy,
)
from he3calc.models.parameters import (
    DEFAULT_AXIS_RANGES,
    AxisRange,
    AxisScale,
    BuildUpParams,
    CalculationParams,
    SweepConfig,
    XAxisUnit,
)
from he3calc.models.results import DataPoint, MeasuredPoint, SeriesSet

logger = logging.getLogger(__name__)


def linear_samples(x_min: float, x_max: float, intervals: int) -> NDArray[np.float64]:
    """intervals + 1 evenly spaced samples, both ends included."""
    i = np.arange(intervals + 1, dtype=np.float64)
    with np.errstate(all="ignore"):
        return x_min + i * (x_max - x_min) / intervals


def log_samples(x_min: float, x_max: float, intervals: int) -> NDArray[np.float64]:
    """intervals + 1 log10-spaced samples; x_min is floored to LOG_SCALE_FLOOR.

    A non-positive x_max gives NaN samples instead of an error.
    """
    lower = max(LOG_SCALE_FLOOR, x_min)
    with np.errstate(all="ignore"):
        log_min = np.log10(lower)
        log_max = np.log10(x_max)
        exponents = linear_samples(float(log_min), float(log_max), intervals)
        return np.power(10.0, exponents)


def he3_time_series(
    params: CalculationParams | None = None,
    axis_range: AxisRange | None = None,
    constants: PhysicalConstants = DEFAULT_CONSTANTS,
) -> tuple[DataPoint, ...]:
    """He-3 polarization decay over the chart's time window.

    Neutron figures are evaluated at the fixed representative wavelength,
    tracking the decaying He-3 polarization.

    Args:
        params: Committed parameters (None → defaults).
        axis_range: He-3 chart limits [hour] (None → defaults).
        constants: Physical constant set.

    Returns:
        101 points, ordered as the time window is given.
    """
    params = params or CalculationParams()
    fallback = DEFAULT_AXIS_RANGES.he3
    x_min, x_max, _, _ = resolve_range(axis_range or fallback, fallback)

    times = linear_samples(x_min, x_max, HE3_TIME_INTERVALS)
    he3 = he3_decay(times, params.initial_polarization, params.relaxation_time)

    wavelength = params.neutron.wavelength
    energy = energy_from_wavelength(wavelength, constants.energy_wavelength_constant)
    thickness = params.neutron.gas_thickness
    p_he = percent_to_fraction(he3)
    pn = neutron_polarization(wavelength, p_he, thickness, constants)
    tn = neutron_transmission(wavelength, p_he, thickness, constants)
    fom = figure_of_merit(wavelength, p_he, thickness, constants)

    return tuple(
        DataPoint(
            time=float(times[i]),
            wavelength=float(wavelength),
            energy=float(energy),
            he3_polarization=float(he3[i]),
            neutron_polarization=float(pn[i]),
            neutron_transmission=float(tn[i]),
            figure_of_merit=float(fom[i]),
        )
        for i in range(len(times))
    )


def neutron_series(
    params: CalculationParams | None = None,
    axis_range: AxisRange | None = None,
    scale: AxisScale = AxisScale.LINEAR,
    constants: PhysicalConstants = DEFAULT_CONSTANTS,
) -> tuple[DataPoint, ...]:
    """Neutron polarization, transmission and FOM vs wavelength or energy.

    He-3 polarization and gas thickness are held at their committed values;
    only the incident neutron wavelength/energy varies.

    Args:
        params: Committed parameters (None → defaults).
        axis_range: Neutron chart limits in the unit of params.x_axis_unit.
        scale: Linear or log10 sample spacing.
        constants: Physical constant set.

    Returns:
        201 points, ordered as the x window is given.
    """
    params = params or CalculationParams()
    fallback = DEFAULT_AXIS_RANGES.neutron
    x_min, x_max, _, _ = resolve_range(axis_range or fallback, fallback)

    if scale is AxisScale.LOG:
        xs = log_samples(x_min, x_max, NEUTRON_INTERVALS)
    else:
        xs = linear_samples(x_min, x_max, NEUTRON_INTERVALS)

    k = constants.energy_wavelength_constant
    if params.x_axis_unit is XAxisUnit.WAVELENGTH:
        wavelengths = xs
        energies = energy_from_wavelength(xs, k)
    else:
        energies = xs
        wavelengths = wavelength_from_energy(xs, k)

    p_he = percent_to_fraction(params.neutron.he3_polarization)
    thickness = params.neutron.gas_thickness
    pn = neutron_polarization(wavelengths, p_he, thickness, constants)
    tn = neutron_transmission(wavelengths, p_he, thickness, constants)
    fom = figure_of_merit(wavelengths, p_he, thickness, constants)

    return tuple(
        DataPoint(
            time=0.0,
            wavelength=float(wavelengths[i]),
            energy=float(energies[i]),
            he3_polarization=float(params.neutron.he3_polarization),
            neutron_polarization=float(pn[i]),
            neutron_transmission=float(tn[i]),
            figure_of_merit=float(fom[i]),
        )
        for i in range(len(xs))
    )


def buildup_series(
    buildup: BuildUpParams | None = None,
    axis_range: AxisRange | None = None,
) -> tuple[MeasuredPoint, ...]:
    """Theoretical pumping build-up curve.

    Args:
        buildup: Committed build-up parameters (None → defaults).
        axis_range: Build-up chart limits [min].

    Returns:
        241 (time, polarization) points.
    """
    buildup = buildup or BuildUpParams()
    fallback = DEFAULT_AXIS_RANGES.buildup
    x_min, x_max, _, _ = resolve_range(axis_range or fallback, fallback)

    times = linear_samples(x_min, x_max, BUILDUP_INTERVALS)
    pol = buildup_polarization(
        times, buildup.max_polarization, buildup.pumping_time, buildup.relaxation_time,
    )
    return tuple(
        MeasuredPoint(time=float(t), polarization=float(p))
        for t, p in zip(times, pol)
    )


def compute_series(
    config: SweepConfig | None = None,
    constants: PhysicalConstants = DEFAULT_CONSTANTS,
) -> SeriesSet:
    """Evaluate every chart from one configuration snapshot."""
    config = config or SweepConfig()
    result = SeriesSet(
        he3=he3_time_series(config.params, config.ranges.he3, constants),
        neutron=neutron_series(
            config.params, config.ranges.neutron, config.scale, constants,
        ),
        buildup=buildup_series(config.buildup, config.ranges.buildup),
    )
    logger.debug(
        "Series computed: he3=%d neutron=%d buildup=%d (unit=%s, scale=%s)",
        len(result.he3), len(result.neutron), len(result.buildup),
        config.params.x_axis_unit.value, config.scale.value,
    )
    return result


def decay_as_measured(points: Iterable[DataPoint]) -> tuple[MeasuredPoint, ...]:
    """He-3 decay series → (time [min], polarization [%]) rows for CSV."""
    return tuple(
        MeasuredPoint(
            time=float(hours_to_minutes(p.time)),
            polarization=p.he3_polarization,
        )
        for p in points
    )


def series_columns(
    points: Sequence[DataPoint] | Sequence[MeasuredPoint],
    *names: str,
) -> tuple[NDArray[np.float64], ...]:
    """Extract named attributes of a series as float arrays.

    Example::

        x, y = series_columns(series, "wavelength", "figure_of_merit")
    """
    return tuple(
        np.array([getattr(p, name) for p in points], dtype=np.float64)
        for name in names
    )
