"""A third person character, its game mode and its player controller."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Tuple

Vector3 = Tuple[float, float, float]

TRIGGER_STARTED = "started"
TRIGGER_COMPLETED = "completed"
TRIGGER_TRIGGERED = "triggered"

SPRING_ARM_SOCKET = "SpringEndpoint"


@dataclass
class MovementSettings:
    """How the character moves, turns, jumps and brakes."""

    orient_rotation_to_movement: bool = True
    rotation_rate: Vector3 = (0.0, 500.0, 0.0)
    jump_z_velocity: float = 500.0
    air_control: float = 0.35
    max_walk_speed: float = 500.0
    min_analog_walk_speed: float = 20.0
    braking_deceleration_walking: float = 2000.0
    braking_deceleration_falling: float = 1500.0


@dataclass(eq=False)
class InputController:
    """The controller possessing a character.

    ``control_rotation`` is (pitch, yaw, roll) in degrees; look input is
    accumulated in ``yaw_input`` and ``pitch_input``.
    """

    control_rotation: Vector3 = (0.0, 0.0, 0.0)
    yaw_input: float = 0.0
    pitch_input: float = 0.0


@dataclass(eq=False)
class _SpringArm:
    target_arm_length: float = 400.0
    use_pawn_control_rotation: bool = True


@dataclass(eq=False)
class _FollowCamera:
    attached_to: Any = None
    socket: str = SPRING_ARM_SOCKET
    use_pawn_control_rotation: bool = False


@dataclass(eq=False)
class ThirdPersonCharacter:
    """A player-controllable character with an orbiting camera."""

    capsule_radius: float = 42.0
    capsule_half_height: float = 96.0
    use_controller_rotation_pitch: bool = False
    use_controller_rotation_yaw: bool = False
    use_controller_rotation_roll: bool = False
    movement: MovementSettings = field(default_factory=MovementSettings)
    controller: Optional[InputController] = None
    jump_action: str = "Jump"
    move_action: str = "Move"
    look_action: str = "Look"
    mouse_look_action: str = "MouseLook"
    pending_movement_input: Vector3 = (0.0, 0.0, 0.0)
    jumping: bool = False
    camera_boom: _SpringArm = field(init=False)
    follow_camera: _FollowCamera = field(init=False)
    input_bindings: dict[tuple[str, str], Callable[..., None]] = field(init=False)

    def __post_init__(self) -> None:
        self.camera_boom = _SpringArm()
        self.follow_camera = _FollowCamera(attached_to=self.camera_boom)
        self.input_bindings = {
            (self.jump_action, TRIGGER_STARTED): self.do_jump_start,
            (self.jump_action, TRIGGER_COMPLETED): self.do_jump_end,
            (self.move_action, TRIGGER_TRIGGERED): self.move,
            (self.mouse_look_action, TRIGGER_TRIGGERED): self.look,
            (self.look_action, TRIGGER_TRIGGERED): self.look,
        }

    def move(self, value: tuple[float, float]) -> None:
        """Route a 2D movement input (right, forward)."""
        x, y = value
        self.do_move(x, y)

    def look(self, value: tuple[float, float]) -> None:
        """Route a 2D look input (yaw, pitch)."""
        x, y = value
        self.do_look(x, y)

    def _add_movement_input(self, direction: Vector3, scale: float) -> None:
        self.pending_movement_input = tuple(
            p + d * scale for p, d in zip(self.pending_movement_input, direction)
        )

    def do_move(self, right: float, forward: float) -> None:
        """Add movement relative to the controller's yaw."""
        if self.controller is None:
            return
        yaw = math.radians(self.controller.control_rotation[1])
        forward_direction = (math.cos(yaw), math.sin(yaw), 0.0)
        right_direction = (-math.sin(yaw), math.cos(yaw), 0.0)
        self._add_movement_input(forward_direction, forward)
        self._add_movement_input(right_direction, right)

    def do_look(self, yaw: float, pitch: float) -> None:
        """Add yaw and pitch input to the controller."""
        if self.controller is None:
            return
        self.controller.yaw_input += yaw
        self.controller.pitch_input += pitch

    def do_jump_start(self) -> None:
        """Start jumping."""
        self.jumping = True

    def do_jump_end(self) -> None:
        """Stop jumping."""
        self.jumping = False


@dataclass(eq=False)
class ThirdPersonPlayerController:
    """Adds its mapping contexts to the local player's input subsystem."""

    default_mapping_contexts: list[Any] = field(default_factory=list)
    input_subsystem: Optional[list[tuple[Any, int]]] = field(default_factory=list)

    def setup_input_component(self) -> None:
        """Add every default mapping context at priority 0."""
        if self.input_subsystem is None:
            return
        self.input_subsystem.extend((context, 0) for context in self.default_mapping_contexts)


@dataclass
class ThirdPersonGameMode:
    """The game mode for a third person game."""

    default_pawn_class: type = ThirdPersonCharacter
    player_controller_class: type = ThirdPersonPlayerController