"""Charts — pyqtgraph visualization widgets."""

from he3calc.ui.charts.base_chart import BaseChart
from he3calc.ui.charts.buildup_chart import BuildUpChart
from he3calc.ui.charts.he3_chart import He3Chart
from he3calc.ui.charts.neutron_chart import NeutronChart

__all__ = [
    "BaseChart",
    "BuildUpChart",
    "He3Chart",
    "NeutronChart",
]
