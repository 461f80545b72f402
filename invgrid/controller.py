"""The inventory player controller and the highlight interface for items in the world."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Tuple

from .component import InventoryComponent, NetMode, get_inventory_component
from .items import Actor, ItemComponent
from .widgets import HUDWidget

Vector3 = Tuple[float, float, float]

DEFAULT_TRACE_LENGTH = 500.0
ITEM_TRACE_CHANNEL = "GameTraceChannel1"
PRIMARY_INTERACT_ACTION = "PrimaryInteract"
TOGGLE_INVENTORY_ACTION = "ToggleInventory"


class Highlightable(abc.ABC):
    """A component that can be highlighted while the player looks at its actor."""

    @abc.abstractmethod
    def highlight(self) -> None:
        """Start drawing the highlight."""

    @abc.abstractmethod
    def unhighlight(self) -> None:
        """Stop drawing the highlight."""


@dataclass(eq=False)
class HighlightableStaticMesh(Highlightable):
    """A mesh that highlights by laying ``highlight_material`` over itself."""

    highlight_material: Any = None
    overlay_material: Any = None
    owner: Optional[Actor] = None

    def highlight(self) -> None:
        """Overlay the highlight material."""
        self.overlay_material = self.highlight_material

    def unhighlight(self) -> None:
        """Remove the overlay material."""
        self.overlay_material = None


def _alive(actor: Optional[Actor]) -> bool:
    return actor is not None and not actor.destroyed


@dataclass(eq=False)
class PlayerController(Actor):
    """Traces for items under the crosshair, picks them up and opens the inventory.

    The world is reached through ``viewport_size``, ``deproject`` (screen point
    to a world start point and direction) and ``line_trace`` (start, end and
    channel to the actor hit, or None).
    """

    name: str = "PlayerController"
    is_local_controller: bool = True
    net_mode: NetMode = NetMode.STANDALONE
    input_mode: Optional[str] = None
    show_mouse_cursor: bool = False
    trace_length: float = DEFAULT_TRACE_LENGTH
    item_trace_channel: str = ITEM_TRACE_CHANNEL
    default_imcs: list[Any] = field(default_factory=list)
    input_subsystem: Optional[list[tuple[Any, int]]] = field(default_factory=list)
    hud_widget_factory: Optional[Callable[[], HUDWidget]] = HUDWidget
    hud_widget: Optional[HUDWidget] = None
    viewport_size: Optional[tuple[float, float]] = None
    deproject: Optional[Callable[[tuple[float, float]], Optional[tuple[Vector3, Vector3]]]] = None
    line_trace: Optional[Callable[[Vector3, Vector3, str], Optional[Actor]]] = None
    inventory_component: Optional[InventoryComponent] = None
    this_actor: Optional[Actor] = None
    last_actor: Optional[Actor] = None
    input_bindings: dict[str, Callable[[], None]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.input_bindings[PRIMARY_INTERACT_ACTION] = self.primary_interact
        self.input_bindings[TOGGLE_INVENTORY_ACTION] = self.toggle_inventory

    def begin_play(self) -> None:
        """Start the components, add the input mappings and create the HUD."""
        for component in list(self.components):
            start = getattr(component, "begin_play", None)
            if start is not None:
                start()

        if self.input_subsystem is not None:
            self.input_subsystem.extend((context, 0) for context in self.default_imcs)

        self.inventory_component = self.find_component(InventoryComponent)
        self._create_hud_widget()

    def _create_hud_widget(self) -> None:
        if not self.is_local_controller or self.hud_widget_factory is None:
            return
        hud = self.hud_widget_factory()
        hud.bind(get_inventory_component(self))
        self.hud_widget = hud

    def tick(self, delta_time: float) -> None:
        """Advance HUD timers and trace for an item under the crosshair."""
        if self.hud_widget is not None and self.hud_widget.info_message is not None:
            self.hud_widget.info_message.tick(delta_time)
        self.trace_for_item()

    def primary_interact(self) -> None:
        """Try to add the item being looked at to the inventory."""
        if not _alive(self.this_actor):
            return
        item_component = self.this_actor.find_component(ItemComponent)
        if item_component is None or self.inventory_component is None:
            return
        self.inventory_component.try_add_item(item_component)

    def toggle_inventory(self) -> None:
        """Open or close the inventory menu."""
        if self.inventory_component is None:
            return
        self.inventory_component.toggle_inventory_menu()

    def trace_for_item(self) -> None:
        """Find the actor at the centre of the screen and update highlights and prompts."""
        if self.viewport_size is None or self.deproject is None or self.line_trace is None:
            return

        width, height = self.viewport_size
        projected = self.deproject((width / 2.0, height / 2.0))
        if projected is None:
            return
        start, forward = projected
        end = tuple(s + f * self.trace_length for s, f in zip(start, forward))
        hit = self.line_trace(start, end, self.item_trace_channel)

        self.last_actor = self.this_actor
        self.this_actor = hit

        hud = self.hud_widget
        if not _alive(self.this_actor) and hud is not None:
            hud.hide_pickup_message()

        if self.this_actor is self.last_actor:
            return

        if _alive(self.this_actor):
            highlightable = self.this_actor.find_component(Highlightable)
            if highlightable is not None:
                highlightable.highlight()

            item_component = self.this_actor.find_component(ItemComponent)
            if item_component is None:
                return
            if hud is not None:
                hud.show_pickup_message(item_component.pickup_message)

        if _alive(self.last_actor):
            highlightable = self.last_actor.find_component(Highlightable)
            if highlightable is not None:
                highlightable.unhighlight()