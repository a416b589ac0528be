from unittest import mock

from node_bootstrap.common import node_name
from node_bootstrap.common.constants import NODE_NAME_MAX_LENGTH
from node_bootstrap.common.node_name import generate_node_name


def test_generate_node_name_is_always_shorter_than_max_length():
    for _ in range(10_000):
        assert len(generate_node_name()) < NODE_NAME_MAX_LENGTH


def test_generate_node_name_is_word_plus_number():
    name = generate_node_name()
    *words, number = name.split("-")
    assert len(words) == 2
    assert all(word.isalpha() for word in words)
    assert number.isdigit()


def test_generate_node_name_resamples_until_short_enough():
    too_long = "x" * NODE_NAME_MAX_LENGTH
    with mock.patch.object(node_name, "Haikunator") as haikunator_cls:
        haikunator_cls.return_value.haikunate.side_effect = [too_long, too_long, "quiet-river-1234"]
        assert generate_node_name() == "quiet-river-1234"
        assert haikunator_cls.return_value.haikunate.call_count == 3


def test_generate_node_name_uses_fresh_generator_per_call():
    with mock.patch.object(node_name, "Haikunator") as haikunator_cls:
        haikunator_cls.return_value.haikunate.return_value = "quiet-river-1234"
        generate_node_name()
        generate_node_name()
        assert haikunator_cls.call_count == 2
