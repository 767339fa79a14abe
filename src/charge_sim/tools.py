# MIT License (see LICENSE)
"""
Input layer: tool selection and pointer gestures.

A ToolController turns press/drag/release events on the canvas into
Simulation calls according to the active Tool. It holds no physics state;
it only tracks which particle is being dragged.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from .simulation import Simulation
from .types import Particle


class Tool(Enum):
    """Closed set of canvas tools. Values match the control-panel ids."""
    ADD_PLUS = "addPlus"
    ADD_MINUS = "addMinus"
    ADD_RANDOM = "addRandom"
    SELECT = "select"
    ERASE = "erase"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Tool.ADD_PLUS: "Add + Charge",
    Tool.ADD_MINUS: "Add – Charge",
    Tool.ADD_RANDOM: "Add Random Charge",
    Tool.SELECT: "Select / Move",
    Tool.ERASE: "Erase",
}


def tool_label(tool: Tool | None) -> str:
    """Display name of a tool, "None" when no tool is active."""
    return tool.label if tool is not None else "None"


@dataclass
class ToolController:
    """
    Dispatches pointer gestures to the simulation.

    Attributes:
        sim: Target simulation.
        active_tool: Currently selected tool, or None.
        selected: Particle grabbed by the select tool.
        dragging: True between a successful pick and the release.
        has_placed_particle: Becomes True after the first placement; the
                             renderer hides its hint overlay afterwards.
    """
    sim: Simulation
    active_tool: Tool | None = None
    selected: Particle | None = None
    dragging: bool = False
    has_placed_particle: bool = False

    def select_tool(self, tool: Tool | str | None) -> None:
        """Activate a tool by member or by control-panel id."""
        if isinstance(tool, str):
            tool = Tool(tool)
        self.active_tool = tool

    def in_canvas(self, x: float, y: float) -> bool:
        cfg = self.sim.config
        return 0 <= x <= cfg.width and 0 <= y <= cfg.height

    def mouse_pressed(self, x: float, y: float) -> None:
        """Apply the active tool at (x, y). Presses off the canvas are ignored."""
        if not self.in_canvas(x, y):
            return

        tool = self.active_tool
        if tool is Tool.ADD_PLUS:
            self._place(x, y, 1.0)
        elif tool is Tool.ADD_MINUS:
            self._place(x, y, -1.0)
        elif tool is Tool.ADD_RANDOM:
            self._place(x, y, self.sim.random_charge())
        elif tool is Tool.ERASE:
            self.sim.delete_particle_near(x, y)
        elif tool is Tool.SELECT:
            self.selected = self.sim.find_particle_near(x, y)
            self.dragging = self.selected is not None

    def mouse_dragged(self, x: float, y: float) -> None:
        """Move the grabbed particle to (x, y) while dragging."""
        if self.active_tool is Tool.SELECT and self.dragging and self.selected is not None:
            self.sim.set_position(self.selected, x, y)

    def mouse_released(self) -> None:
        self.dragging = False
        self.selected = None

    def _place(self, x: float, y: float, charge: float) -> None:
        self.sim.create_particle(x, y, charge)
        self.has_placed_particle = True
