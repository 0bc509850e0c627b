import pytest

from xvsix.params import OpenFlag
from xvsix.shell import (
    BackCmd,
    ExecCmd,
    ListCmd,
    PipeCmd,
    RedirCmd,
    ShellSyntaxError,
    Tokenizer,
    parse_command,
)

TRUNC_MODE = OpenFlag.WRONLY | OpenFlag.CREATE | OpenFlag.TRUNC
APPEND_MODE = OpenFlag.WRONLY | OpenFlag.CREATE


def test_simple_exec():
    assert parse_command("echo hi\n") == ExecCmd(["echo", "hi"])


def test_empty_line():
    assert parse_command("\n") == ExecCmd([])


def test_output_redirection():
    assert parse_command("ls > out") == RedirCmd(ExecCmd(["ls"]), "out", TRUNC_MODE, 1)


def test_append_redirection():
    assert parse_command("ls >> out") == RedirCmd(ExecCmd(["ls"]), "out", APPEND_MODE, 1)


def test_input_redirection_before_command():
    assert parse_command("< in cat") == RedirCmd(ExecCmd(["cat"]), "in", OpenFlag.RDONLY, 0)


def test_redirections_nest_last_outermost():
    cmd = parse_command("cat < a > b")
    assert cmd == RedirCmd(
        RedirCmd(ExecCmd(["cat"]), "a", OpenFlag.RDONLY, 0), "b", TRUNC_MODE, 1
    )


def test_pipe_is_right_associative():
    cmd = parse_command("a | b | c")
    assert cmd == PipeCmd(ExecCmd(["a"]), PipeCmd(ExecCmd(["b"]), ExecCmd(["c"])))


def test_list():
    assert parse_command("a ; b") == ListCmd(ExecCmd(["a"]), ExecCmd(["b"]))


def test_background():
    assert parse_command("a &") == BackCmd(ExecCmd(["a"]))


def test_background_then_list():
    cmd = parse_command("a & ; b")
    assert cmd == ListCmd(BackCmd(ExecCmd(["a"])), ExecCmd(["b"]))


def test_block_with_redirection():
    cmd = parse_command("(a; b) > f")
    assert cmd == RedirCmd(ListCmd(ExecCmd(["a"]), ExecCmd(["b"])), "f", TRUNC_MODE, 1)


def test_words_split_at_symbols():
    assert parse_command("echo hi|wc") == PipeCmd(ExecCmd(["echo", "hi"]), ExecCmd(["wc"]))


def test_leftovers_are_syntax_error():
    with pytest.raises(ShellSyntaxError) as info:
        parse_command("echo )")
    assert info.value.leftover == ")"


def test_word_after_background_is_leftover():
    with pytest.raises(ShellSyntaxError) as info:
        parse_command("a & b")
    assert info.value.leftover == "b"


def test_missing_redirection_file():
    with pytest.raises(ShellSyntaxError, match="missing file for redirection"):
        parse_command("cat <")


def test_missing_close_paren():
    with pytest.raises(ShellSyntaxError, match="missing"):
        parse_command("(a")


def test_too_many_args():
    with pytest.raises(ShellSyntaxError, match="too many args"):
        parse_command(" ".join(["x"] * 10))


def test_nine_args_allowed():
    words = [f"w{i}" for i in range(9)]
    assert parse_command(" ".join(words)) == ExecCmd(words)


def test_tokenizer_sequence():
    tk = Tokenizer("a>>b")
    assert tk.gettoken() == ("a", "a")
    assert tk.gettoken() == ("+", ">>")
    assert tk.gettoken() == ("a", "b")
    assert tk.gettoken() == ("", "")


def test_tokenizer_peek_skips_whitespace():
    tk = Tokenizer("   | x")
    assert tk.peek("|")
    assert not tk.peek("&")
    assert tk.gettoken() == ("|", "|")