"""FakeSpinner: records spinner lifecycle events instead of drawing them."""


class FakeSpinnerHandle:

    def __init__(self, events):
        self._events = events

    def succeed(self, label):
        self._events.append(("succeed", label))

    def fail(self, label):
        self._events.append(("fail", label))


class FakeSpinner:

    def __init__(self):
        self.events = []

    def start(self, label):
        self.events.append(("start", label))
        return FakeSpinnerHandle(self.events)
