import math

import pytest

from invgrid.character import (
    TRIGGER_COMPLETED,
    TRIGGER_STARTED,
    TRIGGER_TRIGGERED,
    InputController,
    ThirdPersonCharacter,
    ThirdPersonPlayerController,
)


def test_defaults_from_constructor():
    character = ThirdPersonCharacter()
    assert (character.capsule_radius, character.capsule_half_height) == (42.0, 96.0)
    assert character.movement.max_walk_speed == 500.0
    assert character.movement.air_control == 0.35
    assert character.movement.braking_deceleration_walking == 2000.0
    assert character.camera_boom.target_arm_length == 400.0
    assert character.camera_boom.use_pawn_control_rotation is True
    assert character.follow_camera.use_pawn_control_rotation is False
    assert character.follow_camera.attached_to is character.camera_boom
    assert character.use_controller_rotation_yaw is False


def test_forward_move_at_zero_yaw():
    character = ThirdPersonCharacter(controller=InputController())
    character.do_move(0.0, 1.0)
    assert character.pending_movement_input == pytest.approx((1.0, 0.0, 0.0))


def test_right_move_at_zero_yaw():
    character = ThirdPersonCharacter(controller=InputController())
    character.do_move(1.0, 0.0)
    assert character.pending_movement_input == pytest.approx((0.0, 1.0, 0.0))


def test_forward_follows_yaw_and_ignores_pitch():
    character = ThirdPersonCharacter(controller=InputController(control_rotation=(45.0, 90.0, 0.0)))
    character.do_move(0.0, 1.0)
    assert character.pending_movement_input == pytest.approx((0.0, 1.0, 0.0), abs=1e-9)


@pytest.mark.parametrize("yaw", [0.0, 30.0, 137.0, -75.0])
def test_forward_and_right_are_orthogonal_units(yaw):
    forward_char = ThirdPersonCharacter(controller=InputController(control_rotation=(0.0, yaw, 0.0)))
    right_char = ThirdPersonCharacter(controller=InputController(control_rotation=(0.0, yaw, 0.0)))
    forward_char.do_move(0.0, 1.0)
    right_char.do_move(1.0, 0.0)
    f = forward_char.pending_movement_input
    r = right_char.pending_movement_input
    assert math.hypot(*f) == pytest.approx(1.0)
    assert math.hypot(*r) == pytest.approx(1.0)
    assert sum(a * b for a, b in zip(f, r)) == pytest.approx(0.0, abs=1e-9)


def test_move_routes_to_do_move():
    routed = ThirdPersonCharacter(controller=InputController(control_rotation=(0.0, 20.0, 0.0)))
    direct = ThirdPersonCharacter(controller=InputController(control_rotation=(0.0, 20.0, 0.0)))
    routed.move((0.5, -0.25))
    direct.do_move(0.5, -0.25)
    assert routed.pending_movement_input == pytest.approx(direct.pending_movement_input)


def test_no_controller_ignores_input():
    character = ThirdPersonCharacter()
    character.do_move(1.0, 1.0)
    character.do_look(1.0, 1.0)
    assert character.pending_movement_input == (0.0, 0.0, 0.0)


def test_look_adds_controller_input():
    controller = InputController()
    character = ThirdPersonCharacter(controller=controller)
    character.look((2.0, -1.0))
    character.do_look(0.5, 0.5)
    assert controller.yaw_input == pytest.approx(2.5)
    assert controller.pitch_input == pytest.approx(-0.5)


def test_jump_bindings_start_and_stop():
    character = ThirdPersonCharacter()
    character.input_bindings[("Jump", TRIGGER_STARTED)]()
    assert character.jumping is True
    character.input_bindings[("Jump", TRIGGER_COMPLETED)]()
    assert character.jumping is False


def test_mouse_look_binding_routes_to_look():
    controller = InputController()
    character = ThirdPersonCharacter(controller=controller)
    character.input_bindings[("MouseLook", TRIGGER_TRIGGERED)]((1.0, 2.0))
    assert (controller.yaw_input, controller.pitch_input) == (1.0, 2.0)


def test_player_controller_adds_mapping_contexts():
    controller = ThirdPersonPlayerController(default_mapping_contexts=["default", "mouse"])
    controller.setup_input_component()
    assert controller.input_subsystem == [("default", 0), ("mouse", 0)]


def test_player_controller_without_subsystem():
    controller = ThirdPersonPlayerController(default_mapping_contexts=["default"], input_subsystem=None)
    controller.setup_input_component()
    assert controller.input_subsystem is None