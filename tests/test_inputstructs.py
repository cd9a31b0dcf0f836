from mgengine.inputstructs import CursorModes, InputDevices, KeyboardKeys, MouseAxis


def test_key_last_is_alias_of_world_2():
    assert KeyboardKeys(106) is KeyboardKeys.KEY_LAST
    assert KeyboardKeys(106) is KeyboardKeys.KEY_WORLD_2


def test_unknown_key_is_negative_one():
    assert KeyboardKeys(-1) is KeyboardKeys.UNKNOWN


def test_key_values_are_contiguous_up_to_last():
    keys = [KeyboardKeys(i) for i in range(0, 107)]
    assert [k.value for k in keys] == list(range(0, 107))
    assert KeyboardKeys.UNKNOWN not in keys
    assert keys[-1] is KeyboardKeys.KEY_LAST


def test_keys_can_be_looked_up_by_value():
    assert KeyboardKeys(7) is KeyboardKeys.KEY_A
    assert KeyboardKeys(0) is KeyboardKeys.KEY_ARROW_LEFT


def test_cursor_mode_values():
    assert [int(m) for m in CursorModes] == [0, 1, 2]
    assert CursorModes(2) is CursorModes.DISABLED


def test_mouse_axes_and_devices_are_distinct():
    assert [MouseAxis(a.value) for a in MouseAxis] == list(MouseAxis)
    assert [InputDevices(d.value) for d in InputDevices] == list(InputDevices)
    assert len({a.value for a in MouseAxis}) == len(list(MouseAxis))
    assert len({d.value for d in InputDevices}) == len(list(InputDevices))