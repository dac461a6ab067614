"""Parameter panels — draft editors for each chart."""

from he3calc.ui.panels.buildup_panel import BuildUpPanel
from he3calc.ui.panels.he3_panel import He3Panel
from he3calc.ui.panels.neutron_panel import NeutronPanel
from he3calc.ui.panels.reference_panel import ReferencePanel

__all__ = [
    "BuildUpPanel",
    "He3Panel",
    "NeutronPanel",
    "ReferencePanel",
]
