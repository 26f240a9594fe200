import os
import sys

import pytest
from sample_consoles import build_context

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from commands.arithmetic import create_add, create_median, median
from commands.base import READ, WRITE, Step
from commands.executor import run_command
from commands.meta import create_help, create_not_found
from commands.rand import MODULUS, create_rand, next_value
from commands.registry import COMMAND_REGISTRY, get_command
from core.exceptions import MalformedNumberError
from parameters.session_parameters import DEFAULT_MESSAGES


def run(state, lines):
    ctx = build_context(lines)
    run_command(state, ctx)
    return ctx


def test_add_sums_two_inputs():
    ctx = run(create_add(420), ["2", "3"])
    assert ctx.console.output == ["5"]


def test_add_handles_negative_and_padded_numbers():
    ctx = run(create_add(0), [" -7 ", "+2"])
    assert ctx.console.output == ["-5"]


@pytest.mark.parametrize(
    "lines, expected",
    [
        (["3", "1", "3", "2"], "2"),
        (["4", "1", "2", "3", "4"], "2.5"),
        (["0"], "0"),
        (["2", "5", "5"], "5"),
        (["-1"], "0"),
    ],
)
def test_median_outputs(lines, expected):
    ctx = run(create_median(420), lines)
    assert ctx.console.output == [expected]


def test_median_schedule_grows_after_count():
    state = create_median(0)
    ctx = build_context(["2", "10", "20"])
    run_command(state, ctx)
    assert [s.action for s in state.schedule] == [READ, READ, READ, WRITE]
    assert state.count == 2
    assert state.inputs == [10, 20]
    assert state.done


def test_median_helper_keeps_odd_result_integral():
    assert median([9, 1, 5]) == 5
    assert isinstance(median([9, 1, 5]), int)
    assert median([1, 2]) == 1.5
    assert median([]) == 0


def test_rand_emits_accumulator_then_advances():
    state = create_rand(420)
    ctx = run(state, ["1"])
    assert ctx.console.output == ["420"]
    assert state.accumulator == (16807 * 420) % (2**31 - 1)


def test_rand_appends_exactly_requested_writes():
    state = create_rand(420)
    ctx = run(state, ["4"])
    assert len(state.schedule) == 5
    assert state.requested == 4
    expected = [420]
    for _ in range(3):
        expected.append(next_value(expected[-1]))
    assert ctx.console.output == [str(v) for v in expected]


def test_rand_zero_and_negative_counts_emit_nothing():
    for count in ("0", "-3"):
        state = create_rand(420)
        ctx = run(state, [count])
        assert ctx.console.output == []
        assert state.accumulator == 420


def test_next_value_stays_below_modulus():
    x = 420
    for _ in range(100):
        x = next_value(x)
        assert 0 < x < MODULUS


def test_help_topic_then_end():
    ctx = run(create_help(0), ["add", "end"])
    m = DEFAULT_MESSAGES
    assert ctx.console.output == [
        m["help_prompt"],
        m["help_commands"],
        m["help_exit_hint"],
        m["help_topic_add"],
        m["help_exit_hint"],
    ]


def test_help_unknown_topic_lists_commands_again():
    state = create_help(0)
    ctx = run(state, ["divide", "  median  ", "end"])
    m = DEFAULT_MESSAGES
    assert ctx.console.output == [
        m["help_prompt"],
        m["help_commands"],
        m["help_exit_hint"],
        m["help_unknown"],
        m["help_commands"],
        m["help_exit_hint"],
        m["help_topic_median"],
        m["help_exit_hint"],
    ]
    assert state.topic == "end"
    assert state.done


def test_help_keeps_asking_until_end():
    ctx = build_context(["rand", "rand"])
    with pytest.raises(EOFError):
        run_command(create_help(0), ctx)
    assert ctx.console.output.count(DEFAULT_MESSAGES["help_exit_hint"]) == 3


def test_not_found_prints_fixed_message():
    ctx = run(create_not_found(0), [])
    assert ctx.console.output == [DEFAULT_MESSAGES["not_found"]]


def test_malformed_number_is_fatal_and_keeps_last_checkpoint():
    ctx = build_context(["2", "two"])
    state = create_add(0)
    with pytest.raises(MalformedNumberError) as excinfo:
        run_command(state, ctx)
    assert excinfo.value.text == "two"
    assert state.cursor == 1
    assert b'"cursor":1' in ctx.slot.read()


def test_every_step_is_checkpointed():
    ctx = build_context(["3", "1", "2", "3"])
    state = create_median(0)
    run_command(state, ctx)
    assert ctx.slot.write_count == len(state.schedule)


def test_get_command_vocabulary_is_exact():
    assert get_command("add") is COMMAND_REGISTRY["add"]
    assert get_command("median") is COMMAND_REGISTRY["median"]
    assert get_command("Add") is COMMAND_REGISTRY["not_found"]
    assert get_command("") is COMMAND_REGISTRY["not_found"]
    assert get_command("exit") is COMMAND_REGISTRY["not_found"]


def test_only_rand_updates_session_accumulator():
    flagged = {k for k, spec in COMMAND_REGISTRY.items() if spec.updates_accumulator}
    assert flagged == {"rand"}


def test_write_only_kind_rejects_read_steps():
    spec = COMMAND_REGISTRY["not_found"]
    with pytest.raises(ValueError, match="no read steps"):
        spec.handler_for(Step(READ))


def test_out_of_range_operand_is_rejected_before_checkpoint():
    ctx = build_context(["1", "99999999999999999999"])
    state = create_median(0)
    with pytest.raises(MalformedNumberError, match="32-bit range"):
        run_command(state, ctx)
    assert state.inputs == []
    assert b"99999999999999999999" not in ctx.slot.read()


def test_out_of_range_count_does_not_grow_schedule():
    state = create_rand(420)
    ctx = build_context(["4294967296"])
    with pytest.raises(MalformedNumberError):
        run_command(state, ctx)
    assert len(state.schedule) == 1
    assert state.requested is None
