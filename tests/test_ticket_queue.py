import pytest

from helpdesk.ticket import TicketStatus
from helpdesk.ticket_queue import TicketQueue


class FakePayload:
    def __init__(self, hours, label):
        self.hours = hours
        self.label = label

    def estimated_time(self):
        return self.hours

    def kind(self):
        return "X"

    def describe(self):
        return f"- Fake: {self.label}\n"


def _queue_of(*labels):
    queue = TicketQueue()
    for number, label in enumerate(labels, start=1):
        queue.push(f"cpf-{label}", FakePayload(number, label))
    return queue


def test_new_queue_is_empty():
    queue = TicketQueue()
    assert len(queue) == 0
    assert list(queue) == []


def test_push_keeps_order():
    queue = _queue_of("a", "b", "c")
    assert len(queue) == 3
    assert [t.requester_cpf for t in queue] == ["cpf-a", "cpf-b", "cpf-c"]
    assert queue[0].payload.label == "a"
    assert queue[2].payload.label == "c"


def test_push_returns_open_ticket():
    queue = TicketQueue()
    ticket = queue.push("cpf-x", FakePayload(4, "x"))
    assert ticket is queue[0]
    assert ticket.status is TicketStatus.OPEN
    assert ticket.estimated_time() == 4


def test_index_out_of_range_raises():
    queue = _queue_of("a")
    with pytest.raises(IndexError):
        _ = queue[1]
    assert len(queue) == 1
    assert queue[0].payload.label == "a"


def test_count_by_status():
    queue = _queue_of("a", "b", "c")
    queue[1].finish()
    assert queue.count_by_status("A") == 2
    assert queue.count_by_status("F") == 1
    assert queue.count_by_status(TicketStatus.FINISHED) == 1
    assert queue.count_by_status("A") + queue.count_by_status("F") == len(queue)


def test_render_assigns_ids_in_order():
    queue = _queue_of("a", "b")
    text = queue.render()
    assert queue[0].id == "Tick-1"
    assert queue[1].id == "Tick-2"
    assert text.index("- ID: Tick-1") < text.index("- ID: Tick-2")
    assert text.count("---------TICKET-----------") == 2
    assert "- Fake: a\n" in text


def test_render_is_concatenation_of_ticket_blocks():
    queue = _queue_of("a", "b")
    text = queue.render()
    assert text == queue[0].render() + queue[1].render()


def test_render_shows_status():
    queue = _queue_of("a", "b")
    queue[0].finish()
    text = queue.render()
    assert "- Status: Finalizado\n" in text
    assert "- Status: Aberto\n" in text


def test_render_empty_queue():
    assert TicketQueue().render() == ""