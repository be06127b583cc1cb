"""Shared fixtures for Udon tests."""

import pytest

from Udon import EventEmitter, Events, Player, Track


class Recorder:
    """Collects QueueUpdate payloads emitted by a queue."""

    def __init__(self, emitter):
        self.calls = []
        emitter.on(Events.QueueUpdate, self)

    def __call__(self, player, queue):
        self.calls.append((player, queue))

    @property
    def count(self):
        return len(self.calls)


def make_track(title, length=0):
    return Track(title=title, author='tester', length=length, encoded=f'enc-{title}')


@pytest.fixture
def emitter():
    return EventEmitter()


@pytest.fixture
def player(emitter):
    return Player(emitter)


@pytest.fixture
def queue(player):
    return player.queue


@pytest.fixture
def updates(emitter):
    return Recorder(emitter)


@pytest.fixture
def tracks():
    return {name: make_track(name, length) for name, length in
            (('A', 1000), ('B', 1000), ('C', 2000), ('X', 500))}
