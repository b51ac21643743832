from app.core.messages import build_messages, partition_messages

DEFAULT = "default instructions"


def test_single_message_prepends_default():
    system, user = partition_messages([{"role": "user", "content": "hi"}], DEFAULT)
    assert system == [
        {"role": "system", "content": DEFAULT},
        {"role": "system", "content": "hi"},
    ]
    assert user == []


def test_all_messages_land_in_system_bucket():
    messages = [
        {"role": "user", "content": "a"},
        {"role": "assistant", "content": "b"},
        {"role": "user", "content": "c"},
    ]
    system, user = partition_messages(messages, DEFAULT)
    assert [m["content"] for m in system] == ["a", "b", "c"]
    assert {m["role"] for m in system} == {"system"}
    assert user == []


def test_input_is_not_mutated():
    original = {"role": "user", "content": "hi"}
    build_messages([original], DEFAULT)
    assert original == {"role": "user", "content": "hi"}


def test_build_messages_keeps_order():
    messages = [{"role": "user", "content": str(i)} for i in range(5)]
    assert [m["content"] for m in build_messages(messages, DEFAULT)] == ["0", "1", "2", "3", "4"]
