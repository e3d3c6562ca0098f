import io
from enum import Enum

import pytest

from threadkit.logger import ConsoleLogger, CoutLogger, LogVerbosity
from threadkit.logger_wrapper import LoggerWrapper


class Color(Enum):
    RED = 7


class Named:
    def to_string(self):
        return "named"


def make(level=LogVerbosity.TRACE):
    out, err = io.StringIO(), io.StringIO()
    return LoggerWrapper(CoutLogger, "app", level, out, err), out, err


def test_plain_message_carries_tag():
    wrapper, out, _ = make()
    wrapper.log_info("hello")
    assert out.getvalue() == "<app>: hello\n"


def test_with_func_prefix():
    wrapper, out, _ = make()
    wrapper.log_debug_with_func("run", "started")
    assert out.getvalue() == "<app>: [run] started\n"


def test_args_with_func_converts_arguments():
    wrapper, out, _ = make()
    wrapper.log_warning_args_with_func("f", "x=", 3, " ", Color.RED, " ", Named(), " ", object())
    assert out.getvalue() == "<app>: [f] x=3 7 named <n/a>\n"


def test_args_with_func_without_arguments():
    wrapper, out, _ = make()
    wrapper.log_trace_args_with_func("f")
    assert out.getvalue() == "<app>: [f] \n"


def test_formatted():
    wrapper, out, _ = make()
    wrapper.log_info_formatted("%d-%s", 3, "a")
    assert out.getvalue() == "<app>: 3-a\n"


def test_formatted_with_func():
    wrapper, out, _ = make()
    wrapper.log_trace_formatted_with_func("g", "v=%d", 5)
    assert out.getvalue() == "<app>: [g] v=5\n"


def test_errors_go_to_error_stream():
    wrapper, out, err = make()
    wrapper.log_error("boom")
    wrapper.log_error_with_func("h", "bad")
    assert out.getvalue() == ""
    assert err.getvalue() == "<app>: boom\n<app>: [h] bad\n"


def test_level_filter_drops_lower_levels():
    wrapper, out, err = make(LogVerbosity.INFO)
    wrapper.log_trace("t")
    wrapper.log_debug_formatted("%s", "d")
    wrapper.log_info("i")
    wrapper.log_warning_formatted_with_func("w", "%s", "x")
    assert out.getvalue() == "<app>: i\n<app>: [w] x\n"
    assert err.getvalue() == ""


def test_error_passes_even_above_filter():
    wrapper, out, err = make(LogVerbosity.ERROR)
    wrapper.log_error_formatted("%s", "e")
    wrapper.log_error_args_with_func("f", 1)
    wrapper.log_error_formatted_with_func("f", "%d", 2)
    assert err.getvalue() == "<app>: e\n<app>: [f] 1\n<app>: [f] 2\n"


@pytest.mark.parametrize(
    "method",
    ["log_trace", "log_debug", "log_info", "log_warning", "log_error"],
)
def test_each_level_method_writes(method):
    wrapper, out, err = make()
    getattr(wrapper, method)("m")
    assert (out.getvalue() + err.getvalue()) == "<app>: m\n"


def test_bad_format_reported_on_stderr(capsys):
    wrapper, out, _ = make()
    wrapper.log_info_formatted("%d", "not a number")
    assert out.getvalue() == ""
    assert capsys.readouterr().err.startswith("<Error> ")


def test_non_string_message_rejected():
    wrapper, _, _ = make()
    with pytest.raises(TypeError):
        wrapper.log_info(42)
    with pytest.raises(TypeError):
        wrapper.log_info_with_func("f", 42)


def test_invalid_logger_type_rejected():
    with pytest.raises(TypeError):
        LoggerWrapper(ConsoleLogger, "app")


def test_wrapper_exposes_tag():
    wrapper, _, _ = make()
    assert wrapper.logger.tag() == "app"