import io

from report import format_forwarding_tables, format_trace, write_report
from routing import MessageQuery, TraceResult, TraceStatus
from simulation import run_simulation
from topology_changes import TopologyChange


def test_forwarding_tables_list_reachable_destinations_per_node():
    result = run_simulation([(1, 2, 1), (2, 3, 1)], [], [])

    assert format_forwarding_tables(result.epochs[0].tables) == [
        "1 1 0", "2 2 1", "3 2 2",
        "1 1 1", "2 2 0", "3 3 1",
        "1 2 2", "2 2 1", "3 3 0",
    ]


def test_trace_lines():
    msg = MessageQuery(1, 3, "here is a message")

    delivered = TraceResult(1, 3, TraceStatus.DELIVERED, 2, (1, 2))
    unreachable = TraceResult(1, 3, TraceStatus.UNREACHABLE)
    broken = TraceResult(1, 3, TraceStatus.BROKEN, 2, (1,))

    assert format_trace(msg, delivered) == "from 1 to 3 cost 2 hops 1 2 message here is a message"
    assert format_trace(msg, unreachable) == "from 1 to 3 cost infinite hops unreachable message here is a message"
    assert format_trace(msg, broken) == "from 1 to 3 cost 2 hops broken message here is a message"


def test_message_to_self_has_single_spaced_empty_hop_list():
    result = run_simulation([(1, 2, 1)], [MessageQuery(2, 2, "loopback")], [])

    msg, trace_result = result.epochs[0].traces[0]

    assert format_trace(msg, trace_result) == "from 2 to 2 cost 0 hops message loopback"


def test_write_report_separates_epochs():
    result = run_simulation(
        [(1, 2, 1)],
        [MessageQuery(1, 2, "hi")],
        [TopologyChange(1, 2, -999)],
    )
    out = io.StringIO()

    write_report(result.epochs, out)

    assert out.getvalue() == (
        "1 1 0\n2 2 1\n1 1 1\n2 2 0\n"
        "from 1 to 2 cost 1 hops 1 message hi\n"
        "\n"
        "1 1 0\n2 2 0\n"
        "from 1 to 2 cost infinite hops unreachable message hi\n"
    )
