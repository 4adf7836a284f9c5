from __future__ import annotations

import dataclasses
import datetime

import pytest

from lzd import COLOR_TABLE, Channel, Debug, InvalidColorSpec, UNKNOWN_PREFIX


def test_simple_logging(make_debugger, sink) -> None:
    log = make_debugger('test')
    result = log('Hello')
    assert result is log
    assert len(sink) == 1
    record = sink.records[0]
    assert record.channel == Channel.NORMAL
    assert record.prefix == 'test'
    assert record.args == ('Hello',)
    assert sink.texts == ['[test] Hello']


def test_handles_types(make_debugger, sink) -> None:
    log = make_debugger('types')
    log('string', 123, {'foo': 456}, False)
    assert sink.records[0].args == ('string', 123, {'foo': 456}, False)
    assert sink.texts == ["[types] string 123 {'foo': 456} False"]


def test_unknown_prefix_by_default(make_debugger, sink) -> None:
    log = make_debugger()
    assert log.name == UNKNOWN_PREFIX
    log('hi')
    assert sink.texts == ['[UNKNOWN] hi']


def test_arguments_are_snapshotted(make_debugger, sink) -> None:
    log = make_debugger('snap')
    payload = {'items': [1, 2]}
    log(payload)
    payload['items'].append(3)
    assert sink.records[0].args == ({'items': [1, 2]},)


def test_unflattenable_arguments_pass_through(make_debugger, sink) -> None:
    log = make_debugger('cycle')
    cyclic: dict = {}
    cyclic['self'] = cyclic
    marker = object()
    log(cyclic, marker)
    assert sink.records[0].args[0] is cyclic
    assert sink.records[0].args[1] is marker


def test_as_inline(make_debugger, sink) -> None:
    log = make_debugger('Foo')
    log.as_('Bar', 'Test')
    log('After')
    assert sink.texts == ['[Bar] Test', '[Foo] After']


def test_as_with_warn_chaining(make_debugger, sink) -> None:
    log = make_debugger('Foo')
    log.as_('Baz').warn('Test')
    assert sink.records[0].channel == Channel.WARNING
    assert sink.texts == ['[Baz] Test']
    log('Normal')
    assert sink.records[1].channel == Channel.NORMAL
    assert sink.records[1].prefix == 'Foo'


def test_multiple_as_restores_original(make_debugger, sink) -> None:
    log = make_debugger('Foo')
    log.as_('Quz').as_('Quuuz').as_('Quuuuz').log('Hello')
    assert sink.texts == ['[Quuuuz] Hello']
    assert log.name == 'Foo'
    assert log.pending == 0


def test_chaining_without_emission_keeps_queue(make_debugger, sink) -> None:
    log = make_debugger('Foo')
    log.as_('Bar')
    assert log.name == 'Bar'
    assert log.pending == 1
    log('now')
    assert log.name == 'Foo'
    assert log.pending == 0


def test_only_outputs_once(make_debugger, sink) -> None:
    log = make_debugger('Foo')
    log.only('one')
    log('two')
    log.log('three')
    assert sink.texts == ['[Foo] one']
    assert log.enabled is False


def test_only_reenables(make_debugger, sink) -> None:
    log = make_debugger('Foo')
    log.only('one')
    log('skipped')
    log.only('two')
    assert sink.texts == ['[Foo] one', '[Foo] two']


def test_disable_suppresses_and_keeps_queue(make_debugger, sink) -> None:
    log = make_debugger('Foo').disable()
    log('nothing')
    log.as_('Bar', 'still nothing')
    assert len(sink) == 0
    assert log.pending == 1
    assert log.name == 'Bar'
    log.enable()
    log('finally')
    assert sink.texts == ['[Bar] finally']
    assert log.name == 'Foo'


def test_enable_disable_flags(make_debugger) -> None:
    log = make_debugger('Foo')
    assert log.disable().enabled is False
    assert log.disable(False).enabled is True
    assert log.enable(False).enabled is False
    assert log.enable().enabled is True


def test_force_outputs_while_disabled(make_debugger, sink) -> None:
    log = make_debugger('Foo').disable()
    log.force('forced')
    log('hidden')
    assert sink.texts == ['[Foo] forced']
    assert log.enabled is False


def test_verbosity_gating(make_debugger, sink) -> None:
    log = make_debugger('Verbose').set_verbosity(0)
    log(0, 'Base')
    log(1, 'One')
    assert sink.texts == ['[Verbose] Base']

    log.set_verbosity(1)
    log(1, 'One')
    log(2, 'Two')
    assert sink.texts == ['[Verbose] Base', '[Verbose] One']


def test_verbosity_filtered_call_does_not_drain(make_debugger, sink) -> None:
    log = make_debugger('Foo').set_verbosity(0)
    log.as_('Bar')(5, 'too chatty')
    assert log.name == 'Bar'
    assert log.pending == 1


def test_lone_number_is_a_verbosity_tag(make_debugger, sink) -> None:
    log = make_debugger('Num').set_verbosity(0)
    log(5)
    assert len(sink) == 0
    log(0)
    assert sink.records[0].args == ()
    assert sink.texts == ['[Num]']


def test_bool_is_not_a_verbosity_tag(make_debugger, sink) -> None:
    log = make_debugger('Bool').set_verbosity(0)
    log(True, 'flag')
    assert sink.records[0].args == (True, 'flag')


def test_color_allocated_on_first_emission(make_debugger, registry, sink) -> None:
    first = make_debugger('first')
    second = make_debugger('second')
    assert first.color is None
    second('hi')
    first('hi')
    assert second.color == COLOR_TABLE[0]
    assert first.color == COLOR_TABLE[1]
    assert sink.records[0].color == COLOR_TABLE[0]


def test_set_color(make_debugger) -> None:
    log = make_debugger('Foo')
    assert log.set_color(3).color == COLOR_TABLE[3]
    assert log.set_color('#abcdef').color == '#abcdef'
    with pytest.raises(InvalidColorSpec):
        log.set_color('blue')


def test_set_prefix_is_permanent(make_debugger, sink) -> None:
    log = make_debugger('Foo').set_prefix('Bar')
    log('one')
    log('two')
    assert sink.texts == ['[Bar] one', '[Bar] two']
    assert log.prefix == 'Bar'


def test_new_is_independent(make_debugger, sink) -> None:
    parent = make_debugger('Parent')
    parent.as_('Temp')
    child = parent.new('Child')
    assert isinstance(child, Debug)
    assert child.pending == 0
    assert child.sink is parent.sink
    child('hello')
    assert sink.texts == ['[Child] hello']
    assert parent.name == 'Temp'
    assert parent.clone().name == 'Temp'


def test_str_is_short(make_debugger) -> None:
    log = make_debugger('Foo')
    assert str(log) == '[debug]'
    assert 'Foo' in repr(log)


def test_deconstruct_can_be_overridden(sink, registry) -> None:
    class UpperDebug(Debug):
        def deconstruct(self, value):
            return str(value).upper()

    log = UpperDebug('Up', sink=sink, registry=registry)
    log('quiet')
    assert sink.texts == ['[Up] QUIET']


def test_invalid_hex_color_rejected_before_emission(make_debugger, sink) -> None:
    log = make_debugger('Foo')
    with pytest.raises(InvalidColorSpec):
        log.set_color('#zzzzzz')
    assert log.color is None
    log('still works')
    assert sink.texts == ['[Foo] still works']
    assert log.set_color('#abc').color == '#abc'


def test_unflattenable_dataclass_passes_through(make_debugger, sink) -> None:
    @dataclasses.dataclass
    class Item:
        when: datetime.datetime
        tags: set

    item = Item(when=datetime.datetime(2020, 1, 1), tags={'a'})
    make_debugger('Items')(item)
    assert sink.records[0].args[0] is item


def test_flattenable_dataclass_is_dumped(make_debugger, sink) -> None:
    @dataclasses.dataclass
    class Point:
        x: int
        y: int

    make_debugger('Points')(Point(1, 2))
    assert sink.records[0].args == ({'x': 1, 'y': 2},)
