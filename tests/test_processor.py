import io
from unittest.mock import call, patch

import pytest
from PIL import Image

from gifter.animation import Animation
from gifter.ascii import GRAD_ASCII2, GRAD_BLOCKY, GRAD_BORDERED, GRAD_NORMAL, GRAD_SHADED
from gifter.processor import (
    Context,
    Options,
    clear_terminal,
    context_from_options,
    display_gif,
    execute,
)


def _animation(loop_count, delays=(20, 100)):
    frames = [Image.new("RGBA", (4, 4), c) for c in [(255, 255, 255, 255), (0, 0, 0, 255)]]
    return Animation(frames=frames, delays=list(delays), loop_count=loop_count)


def _gif_file(tmp_path, loop):
    frames = [Image.new("RGB", (4, 4), c) for c in [(255, 0, 0), (0, 0, 255)]]
    path = tmp_path / "anim.gif"
    kwargs = {"save_all": True, "append_images": frames[1:], "duration": [100, 100]}
    if loop is not None:
        kwargs["loop"] = loop
    frames[0].save(path, "GIF", **kwargs)
    return path


@pytest.mark.parametrize(
    "style, grad, gamma",
    [
        ("shaded", GRAD_SHADED, 1.0),
        ("bordered", GRAD_BORDERED, 1.0),
        ("blocky", GRAD_BLOCKY, 1.0),
        ("ascii2", GRAD_ASCII2, 2.2),
        ("normal", GRAD_NORMAL, 1.0),
    ],
)
def test_context_styles(style, grad, gamma):
    ctx = context_from_options(Options(styles=style, width=10, height=12, color=True))
    assert (ctx.grad, ctx.gamma) == (grad, gamma)
    assert (ctx.width, ctx.height, ctx.color, ctx.styles) == (10, 12, True, style)


def test_unknown_style_falls_back(capsys):
    ctx = context_from_options(Options(styles="wavy"))
    assert ctx.grad == GRAD_ASCII2
    assert ctx.gamma == 2.2
    assert 'unknown style "wavy"' in capsys.readouterr().out


def test_graphic_mode_has_no_gradient():
    ctx = context_from_options(Options(mode="graphic", styles="shaded"))
    assert ctx.grad == ""
    assert ctx.gamma == 1.0


def test_options_defaults():
    opts = Options()
    assert (opts.width, opts.height, opts.styles, opts.mode, opts.color) == (
        90, 90, "ascii2", "ascii", False,
    )


def test_clear_terminal_sequence(capsys):
    clear_terminal()
    assert capsys.readouterr().out == "\033[H\033[2J\033[3J\033c"


def test_no_loop_extension_plays_nothing(capsys):
    ctx = Context(width=4, height=4, grad=GRAD_NORMAL)
    with patch("gifter.processor.time.sleep") as sleep:
        display_gif(_animation(-1), ctx)
    assert sleep.call_count == 0
    assert GRAD_NORMAL[-1] not in capsys.readouterr().out


def test_counted_loops_and_delays(capsys):
    ctx = Context(width=4, height=4, grad=GRAD_NORMAL)
    with patch("gifter.processor.time.sleep") as sleep:
        display_gif(_animation(2), ctx)
    assert sleep.call_args_list == [call(0.05), call(0.1)] * 2
    out = capsys.readouterr().out
    assert "Displaying GIF in ASCII mode." in out
    assert GRAD_NORMAL[-1] * 2 + "\n" in out
    assert GRAD_NORMAL[0] * 2 + "\n" in out


def test_zero_loop_count_repeats_forever():
    class Stop(Exception):
        pass

    calls = []

    def fake_sleep(seconds):
        calls.append(seconds)
        if len(calls) == 6:
            raise Stop

    ctx = Context(width=4, height=4, grad=GRAD_NORMAL)
    with patch("gifter.processor.time.sleep", side_effect=fake_sleep):
        with pytest.raises(Stop):
            display_gif(_animation(0), ctx)
    assert len(calls) == 6


def test_graphic_mode_emits_kitty_sequences(capsys):
    ctx = Context(width=4, height=4, mode="graphic")
    with patch("gifter.processor.time.sleep"):
        display_gif(_animation(1), ctx)
    out = capsys.readouterr().out
    assert out.count("\033_Ga=T,f=100,s=4,v=4,i=1") == 2


def test_execute_missing_file(tmp_path):
    with pytest.raises(OSError, match="error opening file"):
        execute(Options(file_path=str(tmp_path / "absent.gif")))


def test_execute_invalid_gif(tmp_path):
    path = tmp_path / "bad.gif"
    path.write_bytes(b"not a gif")
    with pytest.raises(ValueError, match="error decoding GIF"):
        execute(Options(file_path=str(path)))


def test_execute_plays_local_file(tmp_path, capsys):
    path = _gif_file(tmp_path, loop=1)
    with patch("gifter.processor.time.sleep") as sleep:
        execute(Options(file_path=str(path), width=8, height=8, styles="normal"))
    out = capsys.readouterr().out
    assert f"File size of {path}: {path.stat().st_size} bytes" in out
    assert "Using style: normal" in out
    assert sleep.call_count == 2


def test_execute_graphic_probe_failure(tmp_path, monkeypatch):
    class Broken(io.StringIO):
        def write(self, text):
            raise OSError("no terminal")

    monkeypatch.setattr("sys.stdout", Broken())
    with pytest.raises(SystemExit) as info:
        execute(Options(file_path=str(tmp_path / "x.gif"), mode="graphic"))
    assert info.value.code == 1