from mgengine.event import Event


def test_callbacks_receive_sender_and_args_in_order():
    calls = []
    event = Event()
    event += lambda sender, value: calls.append(("first", sender, value))
    event += lambda sender, value: calls.append(("second", sender, value))
    event("src", 42)
    assert len(event) == 2
    assert calls == [("first", "src", 42), ("second", "src", 42)]


def test_remove_callback():
    calls = []

    def handler(sender):
        calls.append(sender)

    event = Event()
    event += handler
    event -= handler
    event("x")
    assert calls == []
    assert len(event) == 0


def test_remove_only_first_occurrence():
    calls = []

    def handler(sender):
        calls.append(sender)

    event = Event()
    event += handler
    event += handler
    event -= handler
    event("y")
    assert calls == ["y"]
    assert len(event) == 1


def test_removing_unknown_callback_keeps_others():
    event = Event()
    event += print
    event -= len
    assert len(event) == 1