import asyncio
import logging

from Udon import EventEmitter, Events


def test_listeners_run_in_order():
    emitter = EventEmitter()
    seen = []
    emitter.on('x', lambda v: seen.append(('first', v)))
    emitter.on('x', lambda v: seen.append(('second', v)))

    emitter.emit('x', 1)

    assert seen == [('first', 1), ('second', 1)]


def test_once_listener_fires_once():
    emitter = EventEmitter()
    seen = []
    emitter.once('x', seen.append)

    emitter.emit('x', 1)
    emitter.emit('x', 2)

    assert seen == [1]
    assert emitter.listener_count('x') == 0


def test_off_removes_listeners():
    emitter = EventEmitter()
    seen = []
    emitter.on('x', seen.append)
    emitter.once('y', seen.append)

    emitter.off('x', seen.append)
    emitter.off('y')
    emitter.off('missing', seen.append)
    emitter.emit('x', 1)
    emitter.emit('y', 2)

    assert seen == []
    assert emitter.event_names() == []


def test_failing_listener_is_logged_and_isolated(queue, emitter, tracks, caplog):
    seen = []

    def broken(player, q):
        raise RuntimeError('boom')

    emitter.on(Events.QueueUpdate, broken)
    emitter.on(Events.QueueUpdate, lambda player, q: seen.append(q.size))

    with caplog.at_level(logging.ERROR, logger='Udon.EventEmitter'):
        queue.add([tracks['A'], tracks['B']])

    assert queue.tracks == [tracks['B']]
    assert seen == [1]
    assert "Error in event listener for 'queueUpdate'" in caplog.text


def test_max_listeners():
    emitter = EventEmitter(max_listeners=1)
    assert emitter.on('x', print) is True
    assert emitter.once('x', print) is False
    assert emitter.listener_count('x') == 1


def test_async_listener_is_scheduled():
    emitter = EventEmitter()
    seen = []

    async def listener(value):
        seen.append(value)

    emitter.on('x', listener)

    async def main():
        emitter.emit('x', 1)
        assert seen == []
        await asyncio.sleep(0)

    asyncio.run(main())
    assert seen == [1]


def test_async_listener_without_loop_is_dropped(caplog):
    emitter = EventEmitter()
    seen = []

    async def listener(value):
        seen.append(value)

    emitter.on('x', listener)
    with caplog.at_level(logging.ERROR, logger='Udon.EventEmitter'):
        emitter.emit('x', 1)

    assert seen == []
    assert 'No running event loop' in caplog.text


def test_event_names():
    emitter = EventEmitter()
    emitter.on('b', print)
    emitter.once('a', print)
    assert emitter.event_names() == ['a', 'b']
    emitter.remove_all_listeners()
    assert emitter.event_names() == []
