"""Calculation result data models.

Dataclasses returned by the formula engine, the series generator and
the CSV importer.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class DataPoint:
    """One sample of a chart series.

    Attributes:
        time: Elapsed time [hour] (0 for the neutron sweep).
        wavelength: Neutron wavelength [Å].
        energy: Neutron energy [meV].
        he3_polarization: He-3 polarization [%].
        neutron_polarization: Neutron polarization [%].
        neutron_transmission: Neutron transmission [%].
        figure_of_merit: P_n² · T_n [%].
    """
    time: float = 0.0
    wavelength: float = 0.0
    energy: float = 0.0
    he3_polarization: float = 0.0
    neutron_polarization: float = 0.0
    neutron_transmission: float = 0.0
    figure_of_merit: float = 0.0


@dataclass(frozen=True)
class MeasuredPoint:
    """Polarization sample on the build-up time axis (CSV row).

    Attributes:
        time: Pumping time [min].
        polarization: He-3 polarization [%].
    """
    time: float = 0.0
    polarization: float = 0.0


@dataclass(frozen=True)
class FilterPerformance:
    """Spin-filter figures at a single wavelength.

    Attributes:
        wavelength: Neutron wavelength [Å].
        energy: Neutron energy [meV].
        absorption_factor: n·σ(λ) [per amagat·cm].
        neutron_polarization: P_n [%].
        neutron_transmission: T_n [%].
        figure_of_merit: FOM [%].
    """
    wavelength: float = 0.0
    energy: float = 0.0
    absorption_factor: float = 0.0
    neutron_polarization: float = 0.0
    neutron_transmission: float = 0.0
    figure_of_merit: float = 0.0


@dataclass(frozen=True)
class SeriesSet:
    """All chart series computed from one SweepConfig."""
    he3: tuple[DataPoint, ...] = field(default_factory=tuple)
    neutron: tuple[DataPoint, ...] = field(default_factory=tuple)
    buildup: tuple[MeasuredPoint, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ImportResult:
    """Outcome of a measured-data CSV import.

    Attributes:
        points: Merged points sorted by time.
        imported: Rows accepted from the file.
        skipped: Rows discarded (non-numeric or wrong column count).
    """
    points: tuple[MeasuredPoint, ...] = field(default_factory=tuple)
    imported: int = 0
    skipped: int = 0
