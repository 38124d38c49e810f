import pytest

from senseshift.component import Initializable, Output, init_not_null, tick_not_null


class Recorder(Initializable):
    def __init__(self):
        self.inits = 0
        self.ticks = 0

    def init(self):
        self.inits += 1

    def tick(self):
        self.ticks += 1


class FailingOutput(Output):
    def init(self):
        raise RuntimeError("init failed")

    def write_state(self, value):
        pass

    def tick(self):
        raise LookupError("tick failed")


def test_initializable_is_abstract():
    with pytest.raises(TypeError):
        Initializable()


def test_output_is_abstract():
    with pytest.raises(TypeError):
        Output()


def test_init_not_null_calls_init_of_output():
    with pytest.raises(RuntimeError, match="init failed"):
        init_not_null(FailingOutput())


def test_tick_not_null_calls_tick():
    with pytest.raises(LookupError, match="tick failed"):
        tick_not_null(FailingOutput())


def test_init_not_null_skips_none():
    first, second = Recorder(), Recorder()
    for component in (first, None, second):
        init_not_null(component)
    assert (first.inits, second.inits) == (1, 1)
    assert (first.ticks, second.ticks) == (0, 0)
    with pytest.raises(RuntimeError):
        init_not_null(FailingOutput())


def test_tick_not_null_skips_none():
    first, second = Recorder(), Recorder()
    for component in (first, None, second, first):
        tick_not_null(component)
    assert (first.ticks, second.ticks) == (2, 1)
    assert (first.inits, second.inits) == (0, 0)
    with pytest.raises(LookupError):
        tick_not_null(FailingOutput())